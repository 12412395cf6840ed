# tests/test_product_model.py

"""Tests for the Product dataclass."""

import unittest

from src.models.product import Product


class TestProductModel(unittest.TestCase):
    """Product construction and persisted layout."""

    def test_create_computes_total_value(self) -> None:
        """create() derives total_value from quantity and price."""
        p = Product.create(1, "Rose Oil", "Perfume", 5, 12.5)
        self.assertEqual(p.total_value, 62.5)

    def test_to_dict_uses_camel_case(self) -> None:
        """The persisted layout uses totalValue."""
        p = Product.create(7, "Oud", "Turaren Wuta", 2, 3.25)
        self.assertEqual(
            p.to_dict(),
            {
                "id": 7,
                "name": "Oud",
                "category": "Turaren Wuta",
                "quantity": 2,
                "price": 3.25,
                "totalValue": 6.5,
            },
        )

    def test_from_dict_keeps_stored_total(self) -> None:
        """A stored totalValue is kept verbatim."""
        p = Product.from_dict(
            {
                "id": 1,
                "name": "Rose Oil",
                "category": "Perfume",
                "quantity": 5,
                "price": 12.5,
                "totalValue": 62.5,
            }
        )
        self.assertEqual(p, Product(1, "Rose Oil", "Perfume", 5, 12.5, 62.5))

    def test_from_dict_recomputes_missing_total(self) -> None:
        p = Product.from_dict(
            {
                "id": 1,
                "name": "Rose Oil",
                "category": "Perfume",
                "quantity": 4,
                "price": 2.5,
            }
        )
        self.assertEqual(p.total_value, 10.0)

    def test_from_dict_missing_field_raises(self) -> None:
        with self.assertRaises(KeyError):
            Product.from_dict({"id": 1, "name": "x"})

    def test_from_dict_rejects_non_integer_id(self) -> None:
        with self.assertRaises(TypeError):
            Product.from_dict(
                {
                    "id": "1",
                    "name": "Rose Oil",
                    "category": "Perfume",
                    "quantity": 1,
                    "price": 1.0,
                }
            )


if __name__ == "__main__":
    unittest.main()
