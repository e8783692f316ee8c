"""Human-friendly byte sizes ("1.5MB", "512.0KB").

Unlike the compact number formatter, byte sizes are rounded half away from
zero at display time rather than truncated: 2047 bytes reads "2.0KB" where
truncation would give "1.9KB". The two policies are kept apart on purpose;
don't unify them.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Final, Literal, Sequence

from humanfmt.core.errors import InvalidArgumentError
from humanfmt.core.grouping import INVARIANT, GroupingStyle, format_grouped
from humanfmt.core.numeric import (
    NumberLike,
    check_decimal_places,
    exact_context,
    render_fixed,
    round_to,
    to_decimal,
)
from humanfmt.core.units import DEFAULT_BYTE_UNITS, ByteSizeUnitTable

BYTES_PER_UNIT: Final[Decimal] = Decimal(1024)

FixedUnit = Literal["B", "KB", "MB", "GB", "TB"]

FIXED_UNIT_POWERS: Final[dict[str, int]] = {"B": 0, "KB": 1, "MB": 2, "GB": 3, "TB": 4}


def _zero(upper_case: bool) -> str:
    return "0B" if upper_case else "0b"


def _case(label: str, upper_case: bool) -> str:
    return label.upper() if upper_case else label.lower()


def format_byte_size(
    num_bytes: NumberLike,
    decimal_places: int = 1,
    upper_case: bool = True,
    *,
    labels: ByteSizeUnitTable | Sequence[str] = DEFAULT_BYTE_UNITS,
) -> str:
    """Scale by 1024 until the value drops below 1024 or the labels run out.

    Zero and negative sizes short-circuit to the literal "0B" ("0b" when
    lower-cased), whatever the label table says.
    """
    check_decimal_places(decimal_places)
    table = ByteSizeUnitTable.coerce(labels)
    size = to_decimal(num_bytes)
    if size <= 0:
        return _zero(upper_case)

    context = exact_context(size, BYTES_PER_UNIT)
    index = 0
    while size >= BYTES_PER_UNIT and index < len(table) - 1:
        size = context.divide(size, BYTES_PER_UNIT)
        index += 1

    rounded = round_to(size, decimal_places, ROUND_HALF_UP)
    return f"{render_fixed(rounded, decimal_places)}{_case(table[index], upper_case)}"


def format_fixed_size(
    num_bytes: NumberLike,
    unit: FixedUnit,
    decimal_places: int = 1,
    upper_case: bool = True,
) -> str:
    power = FIXED_UNIT_POWERS.get(unit.upper())
    if power is None:
        raise InvalidArgumentError(
            f"Unknown byte unit: {unit!r}",
            user_message=f"Unknown byte unit: {unit} (choose from {', '.join(FIXED_UNIT_POWERS)})",
        )
    check_decimal_places(decimal_places)
    number = to_decimal(num_bytes)
    divisor = BYTES_PER_UNIT**power
    size = exact_context(number, divisor).divide(number, divisor)
    rounded = round_to(size, decimal_places, ROUND_HALF_UP)
    return f"{render_fixed(rounded, decimal_places)}{_case(unit, upper_case)}"


def format_size_b(num_bytes: NumberLike, decimal_places: int = 1, upper_case: bool = True) -> str:
    return format_fixed_size(num_bytes, "B", decimal_places, upper_case)


def format_size_kb(num_bytes: NumberLike, decimal_places: int = 1, upper_case: bool = True) -> str:
    return format_fixed_size(num_bytes, "KB", decimal_places, upper_case)


def format_size_mb(num_bytes: NumberLike, decimal_places: int = 1, upper_case: bool = True) -> str:
    return format_fixed_size(num_bytes, "MB", decimal_places, upper_case)


def format_size_gb(num_bytes: NumberLike, decimal_places: int = 1, upper_case: bool = True) -> str:
    return format_fixed_size(num_bytes, "GB", decimal_places, upper_case)


def format_size_tb(num_bytes: NumberLike, decimal_places: int = 1, upper_case: bool = True) -> str:
    return format_fixed_size(num_bytes, "TB", decimal_places, upper_case)


def format_detailed_byte_size(
    num_bytes: NumberLike,
    decimal_places: int = 1,
    upper_case: bool = True,
    *,
    labels: ByteSizeUnitTable | Sequence[str] = DEFAULT_BYTE_UNITS,
    grouping: GroupingStyle | str = INVARIANT,
) -> str:
    """Scaled size followed by the exact count, e.g. "1.5MB (1,572,864 bytes)"."""
    if to_decimal(num_bytes) <= 0:
        check_decimal_places(decimal_places)
        return "0B (0 bytes)"
    scaled = format_byte_size(num_bytes, decimal_places, upper_case, labels=labels)
    return f"{scaled} ({format_grouped(num_bytes, grouping=grouping)} bytes)"
