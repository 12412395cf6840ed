# src/ui/screens.py

"""Modal dialogs for editing and deleting inventory rows."""

import logging
from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from src.config.settings import Settings
from src.services.inventory_controller import InventoryController
from src.services.inventory_store import InventoryError
from src.ui.presentation import EditableRow, RowAction, RowCommand

logger = logging.getLogger("inventory_tracker.ui")


class ConfirmDeleteScreen(ModalScreen[bool]):
    """Yes/no prompt shown before a product is deleted."""

    BINDINGS = [Binding("escape", "decline", "No")]

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        yield Vertical(
            Label(self.message, id="confirm_message"),
            Horizontal(
                Button("Yes", variant="error", id="confirm_yes"),
                Button("No", variant="primary", id="confirm_no"),
                id="dialog_buttons",
            ),
            id="dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm_yes")

    def action_decline(self) -> None:
        self.dismiss(False)


class EditProductScreen(ModalScreen[bool]):
    """Editable form for one product row.

    Save runs the controller's validation; when it fails the controller
    notifies the user and the dialog stays open with the edits intact.
    """

    BINDINGS = [Binding("escape", "cancel_edit", "Cancel")]

    def __init__(
        self, row: EditableRow, controller: InventoryController
    ) -> None:
        super().__init__()
        self.row = row
        self.controller = controller

    def compose(self) -> ComposeResult:
        select_kwargs: dict[str, Any] = {}
        if self.row.selected_category is not None:
            select_kwargs["value"] = self.row.selected_category

        yield Vertical(
            Static(f"Editing product #{self.row.product_id}", id="edit_title"),
            Input(value=self.row.name, placeholder="Product name", id="edit_name"),
            Select(
                [
                    (option.label, option.value)
                    for option in self.row.category_options
                ],
                prompt=Settings.CATEGORY_PLACEHOLDER,
                id="edit_category",
                **select_kwargs,
            ),
            Input(
                value=self.row.quantity,
                placeholder="Quantity",
                type="number",
                id="edit_quantity",
            ),
            Input(
                value=self.row.price,
                placeholder="Price",
                type="number",
                id="edit_price",
            ),
            Static(f"Total: {self.row.total_value}", id="edit_total"),
            Horizontal(
                Button("Save", variant="success", id="save_btn"),
                Button("Cancel", variant="default", id="cancel_btn"),
                id="dialog_buttons",
            ),
            id="dialog",
        )

    def edited_values(self) -> dict[str, str]:
        """Collect the current field values as raw text."""
        category = self.query_one("#edit_category", Select).value
        return {
            "name": self.query_one("#edit_name", Input).value,
            "category": category if isinstance(category, str) else "",
            "quantity": self.query_one("#edit_quantity", Input).value,
            "price": self.query_one("#edit_price", Input).value,
        }

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save_btn":
            self.action_save_edit()
        elif event.button.id == "cancel_btn":
            self.action_cancel_edit()

    def action_save_edit(self) -> None:
        command = RowCommand(RowAction.SAVE, self.row.product_id)
        try:
            saved = self.controller.dispatch(command, self.edited_values())
        except InventoryError as exc:
            logger.error(
                "Cannot save product %d", self.row.product_id, exc_info=True
            )
            self.app.notify(str(exc), severity="error")
            self.action_cancel_edit()
            return
        if saved:
            self.dismiss(True)
            return
        logger.debug(
            "Edit dialog kept open for product %d", self.row.product_id
        )

    def action_cancel_edit(self) -> None:
        self.controller.dispatch(
            RowCommand(RowAction.CANCEL, self.row.product_id)
        )
        self.dismiss(False)
