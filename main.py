# main.py

"""Entry point for the inventory tracker (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging

logger = logging.getLogger("inventory_tracker.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="inventory_tracker",
        description="Track products, quantities and stock value.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_items",
        help="Print the saved inventory and exit.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format for --list (default: table).",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        default=False,
        help="Export the saved inventory to CSV and exit.",
    )
    parser.add_argument(
        "--storage",
        default=None,
        dest="storage_path",
        help="SQLite storage file (default: data/inventory.db).",
    )
    return parser


def _run_tui(storage_path: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from src.cli.runner import open_storage
    from src.ui.app import InventoryApp

    storage = open_storage(storage_path)
    if storage is None:
        sys.exit(1)

    try:
        app = InventoryApp(storage)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("inventory_tracker TUI shutting down")


def main() -> None:
    """Route to the TUI (no flags) or a headless command."""
    log_file = setup_logging()
    logger.info("inventory_tracker starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.list_items:
        from src.cli.runner import run_list

        sys.exit(run_list(args.storage_path, args.output_format))
    elif args.export:
        from src.cli.runner import run_export

        sys.exit(run_export(args.storage_path))
    else:
        _run_tui(args.storage_path)


if __name__ == "__main__":
    main()
