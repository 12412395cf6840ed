# src/storage/file_manager.py

"""Handles exporting the inventory to disk."""

import csv
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings
from src.models.product import Product
from src.ui.presentation import category_label

logger = logging.getLogger("inventory_tracker.storage")


class FileManager:
    """Handles exporting the inventory to disk."""

    def __init__(self, exports_dir: Path | None = None) -> None:
        self.exports_dir: Path = exports_dir or Settings.EXPORTS_DIR
        self.exports_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(
            "FileManager initialised, exports_dir=%s", self.exports_dir
        )

    def export_csv(self, products: Iterable[Product]) -> Path:
        """Export products in store order to a timestamped CSV file."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.exports_dir / f"inventory_{timestamp}.csv"

        count = 0
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(
                [
                    "ID",
                    "Name",
                    "Category",
                    "Quantity",
                    "Price",
                    "Total Value",
                    "Currency",
                ]
            )
            for p in products:
                writer.writerow(
                    [
                        p.id,
                        p.name,
                        category_label(p.category),
                        p.quantity,
                        f"{p.price:.2f}",
                        f"{p.total_value:.2f}",
                        Settings.CURRENCY,
                    ]
                )
                count += 1

        logger.info("Exported %d products to %s", count, filepath)
        return filepath
