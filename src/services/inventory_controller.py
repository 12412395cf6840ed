# src/services/inventory_controller.py

"""Routes user actions through validation, the store and persistence."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from src.filters.product_validator import parse_number, validate_form
from src.models.product import Product
from src.services.inventory_store import (
    InventoryStore,
    ProductNotFoundError,
    TimestampIdGenerator,
)
from src.storage.inventory_storage import InventoryStorage
from src.ui.presentation import (
    EditableRow,
    Row,
    RowAction,
    RowCommand,
    build_edit_row,
    build_rows,
)

logger = logging.getLogger("inventory_tracker.controller")

DELETE_CONFIRMATION = "Are you sure you want to delete this item?"


class UserPrompt(Protocol):
    """Blocking user-interaction capability injected into the controller."""

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question and return the answer."""
        ...

    def notify(self, messages: list[str]) -> None:
        """Interrupt the user with one or more messages."""
        ...


class InventoryController:
    """Owns the per-row edit state and applies user actions in order.

    Each action validates first, then mutates the store, then persists,
    then calls ``on_refresh`` so the view can redraw from :meth:`rows`.
    A failed save never rolls the in-memory change back.
    """

    def __init__(
        self,
        store: InventoryStore,
        storage: InventoryStorage,
        prompt: UserPrompt,
        id_generator: TimestampIdGenerator | None = None,
        on_refresh: Callable[[], None] | None = None,
    ) -> None:
        self.store = store
        self.storage = storage
        self.prompt = prompt
        self.id_generator = id_generator or TimestampIdGenerator()
        self.on_refresh = on_refresh
        self.editing_id: int | None = None
        self.form_errors: list[str] = []
        self.last_saved_at: datetime | None = None
        self.save_failed = False

    # ── Lifecycle ────────────────────────────────────────

    def start(self) -> None:
        """Load the persisted inventory, replacing whatever is in memory."""
        products = self.storage.load()
        self.store.replace_all(products)
        self.id_generator.seed(p.id for p in products)
        self.last_saved_at = self.storage.last_saved_at()
        self.editing_id = None
        logger.info("Inventory started with %d products", len(products))
        self._refresh()

    def rows(self) -> list[Row]:
        """Current render-ready rows."""
        return build_rows(self.store.all(), self.editing_id)

    # ── Create ───────────────────────────────────────────

    def submit(
        self,
        name: str,
        category: str,
        quantity: str | float,
        price: str | float,
    ) -> bool:
        """Validate raw form input and add a new product.

        Returns ``True`` when the product was added and the caller should
        clear its inputs; on failure ``form_errors`` holds the messages.
        """
        self.form_errors = []
        name = name.strip()
        qty = parse_number(quantity)
        unit_price = parse_number(price)

        errors = validate_form(name, qty, unit_price, category)
        if errors:
            self.form_errors = errors
            logger.info("Rejected new product: %d error(s)", len(errors))
            return False

        product = Product.create(
            self.id_generator.next_id(),
            name,
            category,
            int(qty),
            unit_price,
        )
        self.store.add(product)
        logger.info("Added product %d '%s'", product.id, product.name)
        self._persist()
        self.editing_id = None
        self._refresh()
        return True

    # ── Edit ─────────────────────────────────────────────

    def begin_edit(self, product_id: int) -> EditableRow:
        """Switch a row to editing and return its editable form."""
        product = self.store.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        self.editing_id = product_id
        self._refresh()
        return build_edit_row(product)

    def save_edit(
        self,
        product_id: int,
        name: str,
        category: str,
        quantity: str | float,
        price: str | float,
    ) -> bool:
        """Validate edited values and commit them to the store."""
        name = name.strip()
        qty = parse_number(quantity)
        unit_price = parse_number(price)

        errors = validate_form(name, qty, unit_price, category)
        if errors:
            logger.info(
                "Rejected edit of product %d: %d error(s)",
                product_id,
                len(errors),
            )
            self.prompt.notify(errors)
            return False

        self.store.update(product_id, name, category, int(qty), unit_price)
        logger.info("Updated product %d", product_id)
        self._persist()
        self.editing_id = None
        self._refresh()
        return True

    def cancel_edit(self, product_id: int) -> None:
        """Discard edits and show the unchanged row again."""
        logger.debug("Cancelled edit of product %d", product_id)
        self.editing_id = None
        self._refresh()

    # ── Delete ───────────────────────────────────────────

    def delete(self, product_id: int, confirmed: bool | None = None) -> bool:
        """Remove a product after a yes/no confirmation.

        Front ends that collect the answer themselves pass it as
        *confirmed*; otherwise the injected prompt is asked.
        """
        if confirmed is None:
            confirmed = self.prompt.confirm(DELETE_CONFIRMATION)
        if not confirmed:
            logger.debug("Delete of product %d declined", product_id)
            return False

        self.store.remove(product_id)
        logger.info("Deleted product %d", product_id)
        self._persist()
        if self.editing_id == product_id:
            self.editing_id = None
        self._refresh()
        return True

    # ── Dispatch ─────────────────────────────────────────

    def dispatch(
        self,
        command: RowCommand,
        values: dict[str, str] | None = None,
        confirmed: bool | None = None,
    ) -> bool:
        """Route a row command.

        *values* carries the edited fields for SAVE; *confirmed* is an
        already-collected answer for DELETE.
        """
        if command.action is RowAction.EDIT:
            self.begin_edit(command.product_id)
            return True
        if command.action is RowAction.DELETE:
            return self.delete(command.product_id, confirmed=confirmed)
        if command.action is RowAction.CANCEL:
            self.cancel_edit(command.product_id)
            return True
        fields = values or {}
        return self.save_edit(
            command.product_id,
            fields.get("name", ""),
            fields.get("category", ""),
            fields.get("quantity", ""),
            fields.get("price", ""),
        )

    # ── Internals ────────────────────────────────────────

    def _persist(self) -> bool:
        if self.storage.save(self.store.all()):
            self.last_saved_at = self.storage.last_saved_at()
            self.save_failed = False
            return True
        logger.error(
            "Inventory change kept in memory but not persisted "
            "(%d products)",
            len(self.store),
        )
        self.save_failed = True
        return False

    def _refresh(self) -> None:
        if self.on_refresh is not None:
            self.on_refresh()
