"""Elapsed-time strings.

Two renderings share one decomposition:

- separator mode: "1:02:03:04", "00:01:01", "5"
- labeled mode: "1d02h03m04s", "05m09s", "00s"

Leading zero units can be suppressed, but only while every more significant
unit is zero too; once a unit is shown, all smaller units follow.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from humanfmt.core.errors import InvalidArgumentError
from humanfmt.core.numeric import NumberLike, to_decimal
from humanfmt.core.units import DEFAULT_TIME_LABELS, TimeUnitKey, TimeUnitLabels

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

DEFAULT_SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class Duration:
    days: int
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_seconds(cls, total_seconds: NumberLike) -> Duration:
        """Split whole seconds into days/hours/minutes/seconds.

        Fractions of a second are dropped. Negative input is rejected.
        """
        value = to_decimal(total_seconds)
        if value < 0:
            raise InvalidArgumentError(
                f"Negative duration: {total_seconds!r}",
                user_message="Duration can't be negative.",
            )
        whole = math.floor(value)
        return cls(
            days=whole // SECONDS_PER_DAY,
            hours=(whole // SECONDS_PER_HOUR) % 24,
            minutes=(whole // SECONDS_PER_MINUTE) % 60,
            seconds=whole % 60,
        )

    @property
    def total_hours(self) -> int:
        return self.days * 24 + self.hours

    @property
    def total_seconds(self) -> int:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def fields(self, *, separate_days: bool = True) -> list[tuple[TimeUnitKey, int]]:
        if separate_days:
            return [
                ("day", self.days),
                ("hour", self.hours),
                ("minute", self.minutes),
                ("second", self.seconds),
            ]
        return [("hour", self.total_hours), ("minute", self.minutes), ("second", self.seconds)]


def format_duration(
    seconds: NumberLike,
    show_zero_units: bool = True,
    separator: str = DEFAULT_SEPARATOR,
    separate_days: bool = True,
) -> str:
    """Render a duration as separator-joined fields.

    With `show_zero_units` the hours, minutes and seconds are always present
    and 2-digit padded ("00:01:01"); days are only added once non-zero.
    Without it, leading zero fields are dropped and the first remaining field
    is left unpadded ("1:05", "5").
    """
    duration = Duration.from_seconds(seconds)
    fields = duration.fields(separate_days=separate_days)

    if show_zero_units:
        if fields[0][0] == "day" and duration.days == 0:
            fields = fields[1:]
        parts = [str(value) if key == "day" else f"{value:02d}" for key, value in fields]
        return separator.join(parts)

    start = 0
    while start < len(fields) - 1 and fields[start][1] == 0:
        start += 1
    kept = fields[start:]
    parts = [str(kept[0][1])] + [f"{value:02d}" for _, value in kept[1:]]
    return separator.join(parts)


def format_duration_labeled(
    seconds: NumberLike,
    show_zero_units: bool = False,
    separate_days: bool = True,
    use_short_labels: bool = True,
    *,
    labels: TimeUnitLabels = DEFAULT_TIME_LABELS,
) -> str:
    """Render a duration as label-suffixed segments, e.g. "1d01h01m01s".

    Seconds are always emitted. Days are unpadded, every other unit is 2-digit
    padded. A non-zero day forces the hour segment even when hours are zero.
    """
    duration = Duration.from_seconds(seconds)
    fields = duration.fields(separate_days=separate_days)

    segments: list[str] = []
    seen_nonzero = False
    for index, (key, value) in enumerate(fields):
        seen_nonzero = seen_nonzero or value > 0
        is_last = index == len(fields) - 1
        if not (show_zero_units or seen_nonzero or is_last):
            continue
        number = str(value) if key == "day" else f"{value:02d}"
        segments.append(f"{number}{labels.label(key, short=use_short_labels)}")
    return "".join(segments)
