# src/storage/inventory_storage.py

"""Maps the inventory to and from a key-value store."""

import json
import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from src.config.settings import Settings
from src.models.product import Product
from src.storage.key_value_store import KeyValueStore, StorageUnavailableError

logger = logging.getLogger("inventory_tracker.storage")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(when: datetime) -> str:
    """Render *when* as ISO-8601 UTC with millisecond precision and ``Z``."""
    utc = when.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime | None:
    """Parse an ISO-8601 timestamp; ``None`` when unparsable."""
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class InventoryStorage:
    """Persists the product list and a last-saved timestamp.

    Writes are single attempts.  Failures are logged and reported as a
    ``False`` result; reads that fail degrade to an empty inventory.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.store = store
        self._clock = clock
        self.items_key = Settings.ITEMS_KEY
        self.last_updated_key = Settings.LAST_UPDATED_KEY

    def save(self, products: Iterable[Product]) -> bool:
        """Write the product list and timestamp. Returns success."""
        items = [p.to_dict() for p in products]
        try:
            payload = json.dumps(
                items, ensure_ascii=False, allow_nan=False
            )
            self.store.set(self.items_key, payload)
            self.store.set(
                self.last_updated_key, format_timestamp(self._clock())
            )
        except (StorageUnavailableError, TypeError, ValueError) as exc:
            logger.error("Failed to save inventory: %s", exc, exc_info=True)
            return False

        logger.info("Saved %d products to storage", len(items))
        return True

    def load(self) -> list[Product]:
        """Read the product list; empty when absent or corrupt."""
        try:
            raw = self.store.get(self.items_key)
        except StorageUnavailableError as exc:
            logger.warning("Failed to load inventory: %s", exc)
            return []

        if not raw:
            logger.debug("No saved inventory under '%s'", self.items_key)
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(
                    f"Expected a JSON array, got {type(data).__name__}"
                )
            products = [Product.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            logger.warning(
                "Discarding corrupt inventory data: %s", exc, exc_info=True
            )
            return []

        logger.info("Loaded %d products from storage", len(products))
        return products

    def last_saved_at(self) -> datetime | None:
        """Return the time of the last successful save, if any."""
        try:
            raw = self.store.get(self.last_updated_key)
        except StorageUnavailableError as exc:
            logger.warning("Failed to read last-saved time: %s", exc)
            return None
        if raw is None:
            return None
        parsed = parse_timestamp(raw)
        if parsed is None:
            logger.warning("Ignoring unparsable timestamp %r", raw)
        return parsed
