# src/models/product.py

"""Product record model for the inventory."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Product:
    """A single inventory item with its derived total value."""

    id: int
    name: str
    category: str
    quantity: int
    price: float
    total_value: float = 0.0

    @classmethod
    def create(
        cls,
        product_id: int,
        name: str,
        category: str,
        quantity: int,
        price: float,
    ) -> "Product":
        """Build a record and compute its total from quantity and price."""
        return cls(
            id=product_id,
            name=name,
            category=category,
            quantity=quantity,
            price=price,
            total_value=quantity * price,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the persisted camelCase layout."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "price": self.price,
            "totalValue": self.total_value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Rebuild a record from its persisted layout.

        The stored ``totalValue`` is kept verbatim; a payload without one
        gets it recomputed. Raises ``KeyError``, ``TypeError`` or
        ``ValueError`` on malformed input.
        """
        quantity = data["quantity"]
        price = data["price"]
        if not isinstance(data["id"], int) or isinstance(data["id"], bool):
            raise TypeError(f"Product id must be an integer: {data['id']!r}")
        if not isinstance(data["name"], str):
            raise TypeError(f"Product name must be text: {data['name']!r}")
        if not isinstance(data["category"], str):
            raise TypeError(
                f"Product category must be text: {data['category']!r}"
            )
        if not isinstance(quantity, (int, float)) or not isinstance(
            price, (int, float)
        ):
            raise TypeError("Product quantity and price must be numbers")
        return cls(
            id=data["id"],
            name=data["name"],
            category=data["category"],
            quantity=quantity,
            price=price,
            total_value=data.get("totalValue", quantity * price),
        )
