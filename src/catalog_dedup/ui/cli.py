# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from catalog_dedup.app import (
    add_products,
    delete_product,
    native_parity,
    review_duplicates,
    verify_product,
)
from catalog_dedup.config import ConfigurationError, configure_logging
from catalog_dedup.domain.ports import CatalogStoreError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from catalog_dedup.domain.model import DuplicateReport, ReviewResult

log = logging.getLogger(__name__)

BLANK_CODE_LABEL = "(blank)"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find and resolve sound-alike catalog products")
    subparsers = parser.add_subparsers(dest="command", required=True)

    duplicates = subparsers.add_parser("duplicates", help="List unverified sound-alike products")
    duplicates.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: %(default)s)",
    )

    verify = subparsers.add_parser("verify", help="Mark a product as reviewed")
    verify.add_argument("record_id", type=_parse_record_id, help="Product id")

    delete = subparsers.add_parser("delete", help="Delete a product permanently")
    delete.add_argument("record_id", type=_parse_record_id, help="Product id")

    add = subparsers.add_parser("add", help="Add unverified products")
    add.add_argument("names", nargs="+", help="Product names")

    subparsers.add_parser("parity", help="Check the database phonetic function for parity")

    return parser.parse_args(list(argv))


def _parse_record_id(value: str) -> int:
    try:
        record_id = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid product id: {value}") from exc
    if record_id < 1:
        raise argparse.ArgumentTypeError(f"Invalid product id: {value}")
    return record_id


def _render_text(report: DuplicateReport) -> str:
    if report.degraded:
        return "Catalog unavailable; no duplicates could be checked."
    if not report.groups:
        return f"No duplicates among {report.scanned} unverified products."
    lines = [f"{len(report.groups)} duplicate groups among {report.scanned} unverified products"]
    for group in report.groups:
        lines.append(f"[{group.code or BLANK_CODE_LABEL}]")
        lines.extend(f"  {member.id!s:>6}  {member.name or ''}" for member in group.members)
    return "\n".join(lines)


def _render_review(result: ReviewResult) -> str:
    state = "done" if result.changed else "nothing to do"
    return f"{result.action} {result.record_id}: {state}"


def _run(args: argparse.Namespace) -> int:
    if args.command == "duplicates":
        report = review_duplicates()
        if args.format == "json":
            print(json.dumps(report.to_presentation(), indent=2, ensure_ascii=False))
        else:
            print(_render_text(report))
        return 0
    if args.command == "verify":
        print(_render_review(verify_product(args.record_id)))
        return 0
    if args.command == "delete":
        print(_render_review(delete_product(args.record_id)))
        return 0
    if args.command == "add":
        for record in add_products(args.names):
            print(f"{record.id}  {record.name}")
        return 0
    if args.command == "parity":
        report = native_parity()
        for mismatch in report.mismatches:
            print(f"{mismatch.name}: expected {mismatch.expected}, got {mismatch.actual}")
        print(f"{report.checked - len(report.mismatches)}/{report.checked} names agree")
        return 0 if report.passed else 1
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_logging()
        status = _run(parsed_args)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except CatalogStoreError:
        log.exception("Catalog store error")
        sys.exit(1)

    if status:
        sys.exit(status)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
