"""CLI entry point for account-book.

Commands:
    account-book today                         Print today's date
    account-book categories                    List configured categories
    account-book classify NOTE [--date DATE]   Categorize a note
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import unicodedata
from pathlib import Path

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    """Configure logging based on ACCOUNT_BOOK_LOG_LEVEL env var."""
    level = os.environ.get("ACCOUNT_BOOK_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _display_width(text: str) -> int:
    """Terminal column width: wide and fullwidth characters take two columns."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def _ljust(text: str, width: int) -> str:
    """Left-justify text to a display width."""
    return text + " " * max(width - _display_width(text), 0)


def _get_config():
    """Load application config, or None if the config directory is absent."""
    from src.config import Config

    config_dir = Path(os.environ.get("ACCOUNT_BOOK_CONFIG_DIR", "config"))
    if not config_dir.is_dir():
        logger.info("No config directory at %s, using default categories", config_dir)
        return None
    return Config(config_dir=config_dir)


def _load_settings():
    """Return (categories, match_order, fallback_name) from config or defaults."""
    from src.models import DEFAULT_CATEGORIES, OTHER_CATEGORY_NAME

    config = _get_config()
    if config is None:
        return list(DEFAULT_CATEGORIES), "sorted", OTHER_CATEGORY_NAME
    return config.category_list(), config.match_order, config.fallback_name


def cmd_today(args: argparse.Namespace) -> int:
    """Print today's date."""
    from src.clock import current_date

    print(current_date())
    return 0


def cmd_categories(args: argparse.Namespace) -> int:
    """List configured categories."""
    try:
        categories, _, fallback_name = _load_settings()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if not categories:
        print("No categories configured.")
        return 0

    print(f"Categories ({len(categories)}):")
    print("-" * 40)
    for cat in categories:
        marker = "  (fallback)" if cat.name == fallback_name else ""
        print(f"  {cat.id:>4}  {_ljust(cat.name, 10)}  {cat.description}{marker}")
    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    """Categorize a note and print the assembled transaction."""
    from src.transaction import process_transaction

    try:
        categories, match_order, fallback_name = _load_settings()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    txn = process_transaction(
        args.note,
        args.date or "",
        categories,
        match_order=args.order or match_order,
        fallback_name=fallback_name,
    )

    if args.json:
        print(json.dumps(txn.to_dict(), ensure_ascii=False))
    else:
        print(f"  Date:      {txn.date}")
        print(f"  Category:  {txn.category_id}")
        print(f"  Note:      {txn.note}")
    return 0


_COMMANDS = {
    "today": cmd_today,
    "categories": cmd_categories,
    "classify": cmd_classify,
}


def main(argv: list[str] | None = None):
    _setup_logging()

    parser = argparse.ArgumentParser(
        prog="account-book",
        description="account-book transaction categorizer",
    )
    subparsers = parser.add_subparsers(dest="command")

    # today
    subparsers.add_parser("today", help="Print today's date (YYYY-MM-DD)")

    # categories
    subparsers.add_parser("categories", help="List configured categories")

    # classify
    classify_p = subparsers.add_parser("classify", help="Categorize a note")
    classify_p.add_argument("note", help="Free-text transaction note")
    classify_p.add_argument("--date", help="Date to record (default: today)")
    classify_p.add_argument(
        "--order", choices=("sorted", "input"),
        help="Keyword scan order (default: from rules.yaml)",
    )
    classify_p.add_argument("--json", action="store_true", help="Print JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    handler = _COMMANDS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}")
        sys.exit(1)

    sys.exit(handler(args))


if __name__ == "__main__":
    main()
