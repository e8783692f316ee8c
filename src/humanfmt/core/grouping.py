"""Thousands-grouped integers ("1,234,567").

Grouping styles are plain values instead of process-wide locale state, so two
threads can format for different regions at the same time.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP
from typing import Final

from humanfmt.core.errors import InvalidArgumentError
from humanfmt.core.numeric import NumberLike, round_to


@dataclass(frozen=True, slots=True)
class GroupingStyle:
    name: str
    thousands_separator: str


INVARIANT: Final[GroupingStyle] = GroupingStyle("invariant", ",")

GROUPING_STYLES: Final[dict[str, GroupingStyle]] = {
    style.name: style
    for style in (
        INVARIANT,
        GroupingStyle("de", "."),
        GroupingStyle("fr", "\u202f"),
        GroupingStyle("ch", "'"),
        GroupingStyle("none", ""),
    )
}


def resolve_grouping(grouping: GroupingStyle | str) -> GroupingStyle:
    if isinstance(grouping, GroupingStyle):
        return grouping
    style = GROUPING_STYLES.get(grouping.strip().lower())
    if style is None:
        raise InvalidArgumentError(
            f"Unknown grouping style: {grouping!r}",
            user_message=f"Unknown grouping style: {grouping} (choose from {', '.join(GROUPING_STYLES)})",
        )
    return style


def format_grouped(value: NumberLike, *, grouping: GroupingStyle | str = INVARIANT) -> str:
    """Round to a whole number (half away from zero) and group by thousands."""
    style = resolve_grouping(grouping)
    whole = int(round_to(value, 0, ROUND_HALF_UP))
    text = f"{whole:,}"
    if style.thousands_separator != ",":
        text = text.replace(",", style.thousands_separator)
    return text
