# src/filters/product_validator.py

"""Form validation rules for inventory products.

Every rule returns ``None`` when the value is acceptable or a
human-readable message when it is not.  Rules never raise, so a failing
field never stops the remaining fields from being checked.
"""

import logging
import math
import re

from src.config.settings import Settings

logger = logging.getLogger("inventory_tracker.filters")

NAME_TOO_SHORT = (
    f"Product name must be at least {Settings.NAME_MIN_LENGTH} characters long."
)
NAME_TOO_LONG = (
    f"Product name cannot exceed {Settings.NAME_MAX_LENGTH} characters."
)
QUANTITY_NOT_POSITIVE = "Quantity must be greater than zero."
QUANTITY_NOT_INTEGER = "Quantity must be a whole number."
QUANTITY_TOO_LARGE = "You have reached maximum item quantity"
PRICE_NOT_POSITIVE = "Price must be greater than zero."
CATEGORY_UNSELECTED = "Please select a valid category."

# Plain decimal notation with an optional exponent, as a number input sends
_DECIMAL_RE = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII
)


def parse_number(raw: str | float | int | None) -> float:
    """Convert raw form text to a number.

    Only plain decimal text such as ``12``, ``-3.5``, ``.5`` or ``1e3``
    is accepted. Blank input reads as ``0.0``; anything else, including
    ``inf``, ``nan`` and digit separators like ``1_000``, reads as
    ``nan`` so the validators report it instead of the caller raising.
    """
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        return float(raw)
    text = (raw or "").strip()
    if not text:
        return 0.0
    if not _DECIMAL_RE.match(text):
        return math.nan
    return float(text)


def validate_name(name: str) -> str | None:
    """Check the trimmed product name length."""
    length = len(name.strip())
    if length < Settings.NAME_MIN_LENGTH:
        return NAME_TOO_SHORT
    if length > Settings.NAME_MAX_LENGTH:
        return NAME_TOO_LONG
    return None


def validate_quantity(quantity: float) -> str | None:
    """Check that quantity is a whole number in ``1..QUANTITY_LIMIT-1``."""
    if quantity <= 0:
        return QUANTITY_NOT_POSITIVE
    if not float(quantity).is_integer():
        return QUANTITY_NOT_INTEGER
    if quantity >= Settings.QUANTITY_LIMIT:
        return QUANTITY_TOO_LARGE
    return None


def validate_price(price: float) -> str | None:
    """Check that price is strictly positive."""
    # NaN compares false both ways, so test the passing condition
    if not price > 0:
        return PRICE_NOT_POSITIVE
    return None


def validate_category(category: str) -> str | None:
    """Reject an empty selection or the placeholder entry."""
    if category == "" or category == Settings.CATEGORY_PLACEHOLDER:
        return CATEGORY_UNSELECTED
    return None


def validate_form(
    name: str, quantity: float, price: float, category: str
) -> list[str]:
    """Run every field rule and collect messages.

    Messages are ordered name, quantity, price, category.  An empty list
    means the form is valid.
    """
    results = [
        validate_name(name),
        validate_quantity(quantity),
        validate_price(price),
        validate_category(category),
    ]
    errors = [message for message in results if message is not None]

    if errors:
        logger.debug(
            "Form rejected with %d error(s): %s",
            len(errors),
            "; ".join(errors),
        )

    return errors
