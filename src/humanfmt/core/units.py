"""Unit tables and label presets.

Tables are immutable values. A caller-supplied table replaces the matching
preset entirely; entries are never merged with the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Final, Iterable, Literal, Sequence

from humanfmt.core.errors import InvalidArgumentError, PreconditionViolationError
from humanfmt.core.numeric import NumberLike, to_decimal

TimeUnitKey = Literal["day", "hour", "minute", "second"]

TIME_UNIT_KEYS: Final[tuple[TimeUnitKey, ...]] = ("day", "hour", "minute", "second")


@dataclass(frozen=True, slots=True)
class UnitTable:
    """Thresholds paired with labels, strictly descending by threshold.

    The order is validated, never repaired: lookups take the first threshold
    that fits, so a table given in ascending order is rejected instead of
    silently re-sorted.
    """

    entries: tuple[tuple[Decimal, str], ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise PreconditionViolationError(
                "Unit table is empty",
                user_message="A unit table needs at least one entry.",
            )
        previous: Decimal | None = None
        for threshold, label in self.entries:
            if threshold <= 0:
                raise PreconditionViolationError(
                    f"Non-positive threshold {threshold} for {label!r}",
                    user_message="Unit thresholds must be positive.",
                )
            if previous is not None and threshold >= previous:
                raise PreconditionViolationError(
                    f"Unit table not strictly descending at {threshold} ({label!r})",
                    user_message="Unit thresholds must be listed largest first, without repeats.",
                )
            previous = threshold

    @classmethod
    def of(cls, entries: Iterable[tuple[NumberLike, str]]) -> UnitTable:
        return cls(tuple((to_decimal(threshold), str(label)) for threshold, label in entries))

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def match(self, magnitude: Decimal) -> tuple[Decimal, str] | None:
        for threshold, label in self.entries:
            if magnitude >= threshold:
                return threshold, label
        return None


@dataclass(frozen=True, slots=True)
class ByteSizeUnitTable:
    """Labels for successive powers of 1024, index 0 being plain bytes."""

    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.labels:
            raise PreconditionViolationError(
                "Byte unit table is empty",
                user_message="A byte unit table needs at least one label.",
            )

    @classmethod
    def coerce(cls, labels: ByteSizeUnitTable | Sequence[str]) -> ByteSizeUnitTable:
        if isinstance(labels, ByteSizeUnitTable):
            return labels
        if isinstance(labels, str):
            raise InvalidArgumentError(
                "Byte unit labels must be a sequence of strings, got a single string",
                user_message="Byte unit labels must be a list.",
            )
        return cls(tuple(str(label) for label in labels))

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]


@dataclass(frozen=True, slots=True)
class TimeUnitLabel:
    short: str
    full: str


@dataclass(frozen=True, slots=True)
class TimeUnitLabels:
    day: TimeUnitLabel = field(default_factory=lambda: TimeUnitLabel("d", "Day"))
    hour: TimeUnitLabel = field(default_factory=lambda: TimeUnitLabel("h", "Hour"))
    minute: TimeUnitLabel = field(default_factory=lambda: TimeUnitLabel("m", "Minute"))
    second: TimeUnitLabel = field(default_factory=lambda: TimeUnitLabel("s", "Second"))

    def label(self, key: TimeUnitKey, *, short: bool = True) -> str:
        entry: TimeUnitLabel = getattr(self, key)
        return entry.short if short else entry.full


DEFAULT_UNIT_TABLE: Final[UnitTable] = UnitTable.of(
    [
        (1_000_000_000_000_000, "Q"),
        (1_000_000_000_000, "T"),
        (1_000_000_000, "B"),
        (1_000_000, "M"),
        (1_000, "K"),
    ]
)

DEFAULT_BYTE_UNITS: Final[ByteSizeUnitTable] = ByteSizeUnitTable(("B", "KB", "MB", "GB"))

DEFAULT_TIME_LABELS: Final[TimeUnitLabels] = TimeUnitLabels()
