"""Percentage strings, truncated toward zero ("45.6%", "25.0%")."""

from __future__ import annotations

from decimal import Decimal
from typing import Final

from humanfmt.core.errors import InvalidArgumentError
from humanfmt.core.numeric import NumberLike, exact_context, render_fixed, to_decimal, truncate

DEFAULT_PERCENT_UNIT: Final[str] = "%"

_HUNDRED: Final[Decimal] = Decimal(100)


def format_percent(value: NumberLike, decimal_places: int = 1, unit: str = DEFAULT_PERCENT_UNIT) -> str:
    """Format an already scaled percentage: pass 45.67, not 0.4567."""
    return f"{render_fixed(truncate(value, decimal_places), decimal_places)}{unit}"


def format_percent_of_total(
    current: NumberLike,
    total: NumberLike,
    decimal_places: int = 1,
    unit: str = DEFAULT_PERCENT_UNIT,
) -> str:
    denominator = to_decimal(total)
    if denominator.is_zero():
        raise InvalidArgumentError(
            "Division by zero total in percentage",
            user_message="Total must not be zero.",
        )
    numerator = to_decimal(current)
    context = exact_context(numerator, denominator, _HUNDRED)
    ratio = context.divide(numerator, denominator)
    return format_percent(context.multiply(ratio, _HUNDRED), decimal_places, unit)
