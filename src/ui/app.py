# src/ui/app.py

"""Terminal UI for the inventory tracker."""

import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
)

from src.config.settings import Settings
from src.services.inventory_controller import (
    DELETE_CONFIRMATION,
    InventoryController,
)
from src.services.inventory_store import InventoryError, InventoryStore
from src.storage.file_manager import FileManager
from src.storage.inventory_storage import InventoryStorage
from src.storage.key_value_store import SqliteKeyValueStore
from src.ui.presentation import (
    EditableRow,
    EmptyRow,
    RowAction,
    RowCommand,
    category_label,
    format_last_saved,
)
from src.ui.screens import ConfirmDeleteScreen, EditProductScreen

logger = logging.getLogger("inventory_tracker.ui")

_EMPTY_ROW_KEY = "empty"

_FORM_INPUT_IDS = ("product_name", "product_quantity", "product_price")


class TextualPrompt:
    """User prompt backed by Textual notifications.

    Textual cannot block its own event loop for an answer, so the app
    collects delete confirmations through :class:`ConfirmDeleteScreen`
    and hands the result to the controller; ``confirm`` only answers
    for callers that skipped that step, and declines.
    """

    def __init__(self, app: App[object]) -> None:
        self.app = app

    def confirm(self, message: str) -> bool:
        logger.warning("Unconfirmed prompt declined: %s", message)
        return False

    def notify(self, messages: list[str]) -> None:
        self.app.notify(
            "\n".join(messages), title="Invalid product", severity="error"
        )


class InventoryApp(App[object]):
    """Terminal UI for the inventory tracker."""

    CSS_PATH = "styles.css"
    TITLE = "Inventory Tracker"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("e", "edit_selected", "Edit"),
        Binding("d", "delete_selected", "Delete"),
        Binding("x", "export", "Export CSV"),
    ]

    def __init__(self, storage: InventoryStorage | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.storage = storage or InventoryStorage(SqliteKeyValueStore())
        self.controller = InventoryController(
            store=InventoryStore(),
            storage=self.storage,
            prompt=TextualPrompt(self),
            on_refresh=self.refresh_view,
        )

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        categories = [
            (category["label"], category["value"])
            for category in self.settings.CATEGORIES
        ]

        yield Header()
        yield Container(
            Static("📦 Inventory Tracker", id="title"),
            Static("", id="form_errors"),

            # Product form
            Horizontal(
                Input(placeholder="Product name", id="product_name"),
                Select(
                    categories,
                    prompt=self.settings.CATEGORY_PLACEHOLDER,
                    id="product_category",
                ),
                Input(
                    placeholder="Quantity",
                    type="number",
                    id="product_quantity",
                ),
                Input(
                    placeholder="Price", type="number", id="product_price"
                ),
                Button("Add Product", variant="primary", id="add_btn"),
                id="product_form",
            ),

            Static("", id="last_saved_status"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="inventory_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the table and load the saved inventory."""
        self._table = cast(
            DataTable[str | Text],
            self.query_one("#inventory_table", DataTable),
        )
        self._form_errors = self.query_one("#form_errors", Static)
        self._status = self.query_one("#last_saved_status", Static)
        self._table.add_columns(
            "Name", "Category", "Quantity", "Price", "Total Value", "Actions"
        )
        self.controller.start()

    # ── Rendering ────────────────────────────────────────

    def refresh_view(self) -> None:
        """Redraw the table, errors and save status from the controller."""
        self._table.clear()
        for row in self.controller.rows():
            if isinstance(row, EmptyRow):
                self._table.add_row(
                    Text(row.message, style="dim italic"),
                    *([""] * (row.colspan - 1)),
                    key=_EMPTY_ROW_KEY,
                )
            elif isinstance(row, EditableRow):
                self._table.add_row(
                    Text(row.name, style="reverse"),
                    Text(category_label(row.selected_category or "")),
                    row.quantity,
                    row.price,
                    row.total_value,
                    "Save | Cancel",
                    key=str(row.product_id),
                )
            else:
                self._table.add_row(
                    Text(row.name),
                    Text(row.category_label),
                    row.quantity,
                    row.price,
                    row.total_value,
                    "Edit | Delete",
                    key=str(row.product_id),
                )

        self._show_form_errors()
        status = format_last_saved(self.controller.last_saved_at)
        if self.controller.save_failed:
            status = f"{status}  ⚠ Latest changes not saved".strip()
        self._status.update(status)

    def _show_form_errors(self) -> None:
        self._form_errors.update("\n".join(self.controller.form_errors))

    # ── Form ─────────────────────────────────────────────

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "add_btn":
            self.submit_product()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in any form input."""
        if event.input.id in _FORM_INPUT_IDS:
            self.submit_product()

    def submit_product(self) -> None:
        """Send the form to the controller and reset it on success."""
        select = self.query_one("#product_category", Select)
        category = select.value if isinstance(select.value, str) else ""
        inputs = {
            input_id: self.query_one(f"#{input_id}", Input)
            for input_id in _FORM_INPUT_IDS
        }

        added = self.controller.submit(
            inputs["product_name"].value,
            category,
            inputs["product_quantity"].value,
            inputs["product_price"].value,
        )
        if not added:
            self._show_form_errors()
            return

        for widget in inputs.values():
            widget.value = ""
        select.clear()

    # ── Row actions ──────────────────────────────────────

    def _selected_product_id(self) -> int | None:
        """Return the product id under the table cursor, if any."""
        if self._table.row_count == 0:
            return None
        row_key, _ = self._table.coordinate_to_cell_key(
            self._table.cursor_coordinate
        )
        if row_key.value is None or row_key.value == _EMPTY_ROW_KEY:
            return None
        return int(row_key.value)

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the editor for the row chosen with Enter."""
        key = event.row_key.value
        if key is not None and key != _EMPTY_ROW_KEY:
            self.open_editor(int(key))

    def open_editor(self, product_id: int) -> None:
        """Switch a row to editing and show its edit dialog."""
        try:
            row = self.controller.begin_edit(product_id)
        except InventoryError as exc:
            logger.error("Cannot edit product %d", product_id, exc_info=True)
            self.notify(str(exc), severity="error")
            return
        self.push_screen(EditProductScreen(row, self.controller))

    def action_edit_selected(self) -> None:
        """Edit the product under the cursor."""
        product_id = self._selected_product_id()
        if product_id is None:
            self.notify("No product selected", severity="warning")
            return
        self.open_editor(product_id)

    def action_delete_selected(self) -> None:
        """Ask for confirmation, then delete the product under the cursor."""
        product_id = self._selected_product_id()
        if product_id is None:
            self.notify("No product selected", severity="warning")
            return

        def on_answer(confirmed: bool | None) -> None:
            try:
                self.controller.dispatch(
                    RowCommand(RowAction.DELETE, product_id),
                    confirmed=bool(confirmed),
                )
            except InventoryError as exc:
                logger.error(
                    "Cannot delete product %d", product_id, exc_info=True
                )
                self.notify(str(exc), severity="error")

        self.push_screen(ConfirmDeleteScreen(DELETE_CONFIRMATION), on_answer)

    def action_export(self) -> None:
        """Export the inventory to a CSV file."""
        products = self.controller.store.all()
        if not products:
            self.notify("No products to export", severity="warning")
            return
        try:
            path = FileManager().export_csv(products)
            logger.info("Exported inventory to %s", path)
            self.notify(f"Exported to {path}")
        except OSError as e:
            logger.error("Failed to export inventory", exc_info=True)
            self.notify(f"Export failed: {e}", severity="error")
