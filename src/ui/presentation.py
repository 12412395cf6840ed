# src/ui/presentation.py

"""Render-ready row descriptions derived from the inventory state.

Nothing here touches widgets; the Textual app and the CLI both draw
from these rows.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

from src.config.settings import Settings
from src.models.product import Product


class RowAction(Enum):
    """Affordances a table row can offer."""

    EDIT = "edit"
    DELETE = "delete"
    SAVE = "save"
    CANCEL = "cancel"


@dataclass(frozen=True)
class RowCommand:
    """A user action aimed at one product row."""

    action: RowAction
    product_id: int


@dataclass(frozen=True)
class CategoryOption:
    """One entry of the category chooser in an editable row."""

    value: str
    label: str
    selected: bool = False


@dataclass(frozen=True)
class ProductRow:
    """A product shown in viewing mode."""

    product_id: int
    name: str
    category_label: str
    quantity: str
    price: str
    total_value: str
    actions: tuple[RowAction, ...] = (RowAction.EDIT, RowAction.DELETE)


@dataclass(frozen=True)
class EditableRow:
    """A product shown with editable fields."""

    product_id: int
    name: str
    category_options: tuple[CategoryOption, ...]
    quantity: str
    price: str
    total_value: str
    actions: tuple[RowAction, ...] = (RowAction.SAVE, RowAction.CANCEL)

    @property
    def selected_category(self) -> str | None:
        """The pre-selected category value, if it is a known one."""
        for option in self.category_options:
            if option.selected:
                return option.value
        return None


@dataclass(frozen=True)
class EmptyRow:
    """Placeholder shown when the inventory has no products."""

    message: str
    colspan: int = 6


Row = Union[ProductRow, EditableRow, EmptyRow]


def format_money(value: float) -> str:
    """Format an amount with two decimals and the currency suffix."""
    return f"{value:.2f} {Settings.CURRENCY}"


def _format_number(value: float) -> str:
    """Show whole floats without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def category_label(value: str) -> str:
    """Map an internal category value to its display label."""
    for category in Settings.CATEGORIES:
        if category["value"] == value:
            return category["label"]
    return value


def build_view_row(product: Product) -> ProductRow:
    return ProductRow(
        product_id=product.id,
        name=product.name,
        category_label=category_label(product.category),
        quantity=_format_number(product.quantity),
        price=format_money(product.price),
        total_value=format_money(product.total_value),
    )


def build_edit_row(product: Product) -> EditableRow:
    options = tuple(
        CategoryOption(
            value=category["value"],
            label=category["label"],
            selected=category["value"] == product.category,
        )
        for category in Settings.CATEGORIES
    )
    return EditableRow(
        product_id=product.id,
        name=product.name,
        category_options=options,
        quantity=_format_number(product.quantity),
        price=_format_number(product.price),
        total_value=format_money(product.quantity * product.price),
    )


def build_rows(
    products: tuple[Product, ...] | list[Product],
    editing_id: int | None = None,
) -> list[Row]:
    """Build one row per product, or a single placeholder when empty."""
    if not products:
        return [EmptyRow(Settings.EMPTY_INVENTORY_MESSAGE)]

    rows: list[Row] = []
    for product in products:
        if product.id == editing_id:
            rows.append(build_edit_row(product))
        else:
            rows.append(build_view_row(product))
    return rows


def format_last_saved(when: datetime | None) -> str:
    """Describe the last save in local time, or nothing if never saved."""
    if when is None:
        return ""
    local = when.astimezone()
    return f"Last saved: {local.strftime('%Y-%m-%d %H:%M:%S')}"
