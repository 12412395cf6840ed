# src/config/settings.py

"""Central configuration for the inventory tracker."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the inventory tracker."""

    # --- Validation limits ---
    NAME_MIN_LENGTH: int = 2            # Trimmed characters, inclusive
    NAME_MAX_LENGTH: int = 50           # Trimmed characters, inclusive
    QUANTITY_LIMIT: int = 1000          # Quantity must stay below this

    # --- Categories ---
    CATEGORY_PLACEHOLDER: str = "Select Category"
    CATEGORIES: list[dict[str, str]] = [
        {"value": "Perfume", "label": "Khumra"},
        {"value": "Turaren Wuta", "label": "Turaren Wuta"},
        {"value": "Accessories", "label": "Khamshi Accessories"},
    ]

    # --- Display ---
    CURRENCY: str = os.getenv("INVENTORY_CURRENCY", "NGN")
    EMPTY_INVENTORY_MESSAGE: str = "No products in inventory"

    # --- Storage keys ---
    ITEMS_KEY: str = "inventoryItems"
    LAST_UPDATED_KEY: str = "lastUpdated"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    STORAGE_PATH: Path = Path(
        os.getenv("INVENTORY_STORAGE_PATH", str(DATA_DIR / "inventory.db"))
    )
    EXPORTS_DIR: Path = BASE_DIR / "exports"
    LOGS_DIR: Path = BASE_DIR / "logs"
