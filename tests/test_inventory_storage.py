# tests/test_inventory_storage.py

"""Tests for the InventoryStorage persistence adapter."""

import json
import unittest
from datetime import datetime, timezone

from src.models.product import Product
from src.storage.inventory_storage import (
    InventoryStorage,
    format_timestamp,
    parse_timestamp,
)
from src.storage.key_value_store import MemoryKeyValueStore

_FIXED_NOW = datetime(2026, 3, 1, 9, 30, 15, 250000, tzinfo=timezone.utc)


def _sample_products() -> list[Product]:
    """Return a small list of test products."""
    return [
        Product.create(1700000000001, "Rose Oil", "Perfume", 5, 12.5),
        Product.create(1700000000002, "Oud Chips", "Turaren Wuta", 3, 7.3),
        Product.create(1700000000003, "Burner", "Accessories", 1, 0.1),
    ]


class TestInventoryStorage(unittest.TestCase):
    """Save/load behaviour against an in-memory store."""

    def setUp(self) -> None:
        self.kv = MemoryKeyValueStore()
        self.storage = InventoryStorage(self.kv, clock=lambda: _FIXED_NOW)

    def test_round_trip_preserves_records(self) -> None:
        """load() after save() reproduces every field."""
        products = _sample_products()
        self.assertTrue(self.storage.save(products))
        self.assertEqual(self.storage.load(), products)

    def test_save_writes_camel_case_json(self) -> None:
        self.storage.save(_sample_products()[:1])
        raw = self.kv.get("inventoryItems")
        assert raw is not None
        data = json.loads(raw)
        self.assertEqual(data[0]["totalValue"], 62.5)
        self.assertEqual(data[0]["id"], 1700000000001)

    def test_save_writes_timestamp(self) -> None:
        self.storage.save([])
        self.assertEqual(self.kv.get("lastUpdated"), "2026-03-01T09:30:15.250Z")
        self.assertEqual(self.storage.last_saved_at(), _FIXED_NOW)

    def test_never_saved_has_no_timestamp(self) -> None:
        self.assertIsNone(self.storage.last_saved_at())

    def test_absent_key_loads_empty(self) -> None:
        self.assertEqual(self.storage.load(), [])

    def test_corrupt_json_loads_empty(self) -> None:
        self.kv.set("inventoryItems", "{not json")
        with self.assertLogs("inventory_tracker.storage", level="WARNING"):
            self.assertEqual(self.storage.load(), [])

    def test_non_list_payload_loads_empty(self) -> None:
        self.kv.set("inventoryItems", '{"id": 1}')
        self.assertEqual(self.storage.load(), [])

    def test_malformed_record_loads_empty(self) -> None:
        self.kv.set("inventoryItems", '[{"id": 1, "name": "x"}, 5]')
        self.assertEqual(self.storage.load(), [])

    def test_save_failure_returns_false(self) -> None:
        """A rejected write is reported, not raised."""
        kv = MemoryKeyValueStore(quota_bytes=16)
        storage = InventoryStorage(kv, clock=lambda: _FIXED_NOW)
        with self.assertLogs("inventory_tracker.storage", level="ERROR"):
            self.assertFalse(storage.save(_sample_products()))
        self.assertIsNone(storage.last_saved_at())

    def test_non_finite_total_fails_save(self) -> None:
        """An infinite total is rejected instead of written as Infinity."""
        huge = Product.create(1, "Oud", "Perfume", 999, 1e306)
        self.assertEqual(huge.total_value, float("inf"))
        with self.assertLogs("inventory_tracker.storage", level="ERROR"):
            self.assertFalse(self.storage.save([huge]))
        self.assertIsNone(self.kv.get("inventoryItems"))
        self.assertIsNone(self.storage.last_saved_at())

    def test_nan_price_fails_save(self) -> None:
        product = Product.create(1, "Oud", "Perfume", 1, float("nan"))
        with self.assertLogs("inventory_tracker.storage", level="ERROR"):
            self.assertFalse(self.storage.save([product]))
        self.assertIsNone(self.kv.get("inventoryItems"))

    def test_disabled_storage_degrades(self) -> None:
        kv = MemoryKeyValueStore(available=False)
        storage = InventoryStorage(kv)
        self.assertFalse(storage.save(_sample_products()))
        self.assertEqual(storage.load(), [])
        self.assertIsNone(storage.last_saved_at())

    def test_unparsable_timestamp_is_none(self) -> None:
        self.kv.set("lastUpdated", "yesterday")
        self.assertIsNone(self.storage.last_saved_at())


class TestTimestampHelpers(unittest.TestCase):
    """format_timestamp / parse_timestamp."""

    def test_format_uses_z_suffix(self) -> None:
        self.assertEqual(
            format_timestamp(_FIXED_NOW), "2026-03-01T09:30:15.250Z"
        )

    def test_parse_accepts_z_suffix(self) -> None:
        self.assertEqual(
            parse_timestamp("2026-03-01T09:30:15.250Z"), _FIXED_NOW
        )

    def test_parse_naive_assumes_utc(self) -> None:
        parsed = parse_timestamp("2026-03-01T09:30:15")
        assert parsed is not None
        self.assertEqual(parsed.tzinfo, timezone.utc)


if __name__ == "__main__":
    unittest.main()
