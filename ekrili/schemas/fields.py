"""
Shared field coercions for decimal amounts stored as strings
"""
from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal_string(value: Any, places: int = 2) -> str:
    """Normalise a price-like value (str, int, float, Decimal) to a fixed-point string, e.g. 150 -> "150.00"."""
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValueError(f"'{value}' is not a valid decimal amount")
    if not amount.is_finite():
        raise ValueError(f"'{value}' is not a valid decimal amount")
    if amount < 0:
        raise ValueError("amount must not be negative")
    return f"{amount:.{places}f}"
