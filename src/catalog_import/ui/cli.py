from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from catalog_import.adapters.jsonschema import load_performer_record
from catalog_import.adapters.sqlalchemy.unit_of_work import startup
from catalog_import.app import import_performer
from catalog_import.config import ConfigurationError, configure_logging, parse_missing_refs

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from catalog_import.domain.model import MissingRefPolicy

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import catalog data from interchange files")
    subparsers = parser.add_subparsers(dest="command", required=True)

    performer = subparsers.add_parser("performer", help="Import one performer JSON document")
    performer.add_argument("path", type=Path, help="Path to the performer JSON file")
    performer.add_argument(
        "--missing-refs",
        type=str,
        metavar="{fail,create,ignore}",
        default=None,
        help="What to do with tags that do not exist yet (defaults to config)",
    )
    performer.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _missing_refs(args: argparse.Namespace) -> MissingRefPolicy | None:
    if args.missing_refs is None:
        return None
    return parse_missing_refs(args.missing_refs)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging()
        parsed_args = _parse_args(args_list)
        missing_refs = _missing_refs(parsed_args)
        # InterchangeError is a ValueError
        record = load_performer_record(parsed_args.path)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.database_uri:
            startup(database_uri=parsed_args.database_uri, force=True)
        result = import_performer(record, missing_refs=missing_refs)
        log.info("Performer %s: %s", result.id, result.action)
    except Exception:
        log.exception("Fatal error during import")
        sys.exit(1)


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
