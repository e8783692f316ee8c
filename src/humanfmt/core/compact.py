"""Magnitude-abbreviated numbers ("1.5K", "2.3M", "-4.0B").

Values that reach a unit are truncated toward zero, never rounded, so
999,999 reads "999.9K" and not "1000.0K" or "1.0M". Values below the
smallest unit are rounded with the caller's rounding mode instead.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP
import logging

from humanfmt.core.numeric import (
    NumberLike,
    check_decimal_places,
    exact_context,
    render_fixed,
    round_to,
    to_decimal,
    truncate,
)
from humanfmt.core.units import DEFAULT_UNIT_TABLE, UnitTable

logger = logging.getLogger(__name__)


def format_compact(
    value: NumberLike,
    decimal_places: int = 1,
    upper_case: bool = True,
    *,
    rounding: str = ROUND_HALF_UP,
    table: UnitTable = DEFAULT_UNIT_TABLE,
) -> str:
    """Express `value` as a multiple of the largest unit it reaches.

    `table` must be strictly descending (enforced by `UnitTable`); the first
    threshold not exceeding `abs(value)` wins.

    >>> format_compact(1_500)
    '1.5K'
    >>> format_compact(-2_345_678, 2)
    '-2.34M'
    >>> format_compact(999)
    '999.0'
    """
    check_decimal_places(decimal_places)
    number = to_decimal(value)

    matched = table.match(abs(number))
    if matched is None:
        logger.debug("No unit reached by %s; rounding with %s", number, rounding)
        return render_fixed(round_to(number, decimal_places, rounding), decimal_places)

    threshold, label = matched
    # Signed division: the sign comes out of the quotient, never prepended.
    scaled = truncate(exact_context(number, threshold).divide(number, threshold), decimal_places)
    unit = label.upper() if upper_case else label.lower()
    return f"{render_fixed(scaled, decimal_places)}{unit}"
