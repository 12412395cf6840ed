# src/services/inventory_store.py

"""In-memory ordered inventory, the source of truth during a session."""

import logging
import time
from collections.abc import Callable, Iterable

from src.models.product import Product

logger = logging.getLogger("inventory_tracker.store")


class InventoryError(Exception):
    """Base class for inventory store errors."""


class ProductNotFoundError(InventoryError):
    """No product with the requested id exists."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class DuplicateProductError(InventoryError):
    """A product with the same id is already stored."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} already exists")
        self.product_id = product_id


class TimestampIdGenerator:
    """Issue strictly increasing ids derived from wall-clock milliseconds."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def seed(self, existing_ids: Iterable[int]) -> None:
        """Make sure future ids sort after every id already in use."""
        self._last = max([self._last, *existing_ids])

    def next_id(self) -> int:
        """Return a fresh id, bumping past the last one on collisions."""
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate


class InventoryStore:
    """Ordered product list mutated only through its methods."""

    def __init__(self) -> None:
        self._products: list[Product] = []

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return any(p.id == product_id for p in self._products)

    def all(self) -> tuple[Product, ...]:
        """Return the products in store order."""
        return tuple(self._products)

    def get(self, product_id: int) -> Product | None:
        """Return the product with *product_id*, or ``None``."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def add(self, product: Product) -> None:
        """Append a new product at the end of the store."""
        if product.id in self:
            raise DuplicateProductError(product.id)
        self._products.append(product)
        logger.debug("Added product %d (%s)", product.id, product.name)

    def update(
        self,
        product_id: int,
        name: str,
        category: str,
        quantity: int,
        price: float,
    ) -> Product:
        """Replace a product in place and recompute its total.

        Raises:
            ProductNotFoundError: if no product has *product_id*.
        """
        for index, product in enumerate(self._products):
            if product.id == product_id:
                updated = Product.create(
                    product_id, name, category, quantity, price
                )
                self._products[index] = updated
                logger.debug("Updated product %d", product_id)
                return updated
        raise ProductNotFoundError(product_id)

    def remove(self, product_id: int) -> bool:
        """Drop the product with *product_id*; missing ids are ignored.

        Returns whether a product was removed.
        """
        before = len(self._products)
        self._products = [p for p in self._products if p.id != product_id]
        removed = len(self._products) < before
        if removed:
            logger.debug("Removed product %d", product_id)
        return removed

    def replace_all(self, products: Iterable[Product]) -> None:
        """Discard the current contents and install *products* verbatim."""
        self._products = list(products)
        logger.debug("Store replaced with %d products", len(self._products))
