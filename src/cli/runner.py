# src/cli/runner.py

"""Headless inventory commands that share the TUI's storage."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from src.models.product import Product
from src.storage.file_manager import FileManager
from src.storage.inventory_storage import InventoryStorage
from src.storage.key_value_store import (
    SqliteKeyValueStore,
    StorageUnavailableError,
)
from src.ui.presentation import (
    EmptyRow,
    ProductRow,
    build_rows,
    format_last_saved,
)

logger = logging.getLogger("inventory_tracker.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def open_storage(storage_path: str | None) -> InventoryStorage | None:
    """Open the SQLite-backed inventory storage, or ``None`` on failure."""
    db_path = Path(storage_path) if storage_path else None
    try:
        return InventoryStorage(SqliteKeyValueStore(db_path))
    except StorageUnavailableError as exc:
        logger.error("Cannot open storage: %s", exc, exc_info=True)
        _err.print(f"[red]Cannot open storage: {exc}[/red]")
        return None


def _print_table(products: list[Product], last_saved: str) -> None:
    """Render a Rich table of the inventory to stdout."""
    table = Table(
        title="Inventory",
        caption=last_saved or None,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Name", max_width=50)
    table.add_column("Category", style="magenta")
    table.add_column("Quantity", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Total Value", justify="right", style="green")

    for row in build_rows(products):
        if isinstance(row, EmptyRow):
            table.add_row(f"[dim]{row.message}[/dim]", "", "", "", "")
        elif isinstance(row, ProductRow):
            table.add_row(
                Text(row.name),
                Text(row.category_label),
                row.quantity,
                row.price,
                row.total_value,
            )

    Console().print(table)


def run_list(storage_path: str | None, output_format: str) -> int:
    """Print the stored inventory and return an exit code."""
    storage = open_storage(storage_path)
    if storage is None:
        return 1

    products = storage.load()
    if output_format == "table":
        _print_table(
            products, format_last_saved(storage.last_saved_at())
        )
    else:
        json.dump(
            [p.to_dict() for p in products],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    logger.info("Listed %d products (%s)", len(products), output_format)
    return 0


def run_export(storage_path: str | None) -> int:
    """Export the stored inventory to CSV and return an exit code."""
    storage = open_storage(storage_path)
    if storage is None:
        return 1

    products = storage.load()
    if not products:
        _err.print("[yellow]No products to export.[/yellow]")
        return 1

    try:
        path = FileManager().export_csv(products)
    except OSError as exc:
        logger.error("Export failed: %s", exc, exc_info=True)
        _err.print(f"[red]Export failed: {exc}[/red]")
        return 1

    _err.print(f"[green]✓ Exported {len(products)} products → {path}[/green]")
    return 0
