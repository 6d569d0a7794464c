from __future__ import annotations

from catalog_dedup.ui.cli import run

run()
