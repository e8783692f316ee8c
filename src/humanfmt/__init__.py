"""Compact, human-readable numbers, byte sizes, durations and percentages."""

from __future__ import annotations

from humanfmt.core.byte_size import (
    format_byte_size,
    format_detailed_byte_size,
    format_fixed_size,
    format_size_b,
    format_size_gb,
    format_size_kb,
    format_size_mb,
    format_size_tb,
)
from humanfmt.core.compact import format_compact
from humanfmt.core.duration import Duration, format_duration, format_duration_labeled
from humanfmt.core.errors import AppError, ConfigError, InvalidArgumentError, PreconditionViolationError
from humanfmt.core.grouping import GROUPING_STYLES, INVARIANT, GroupingStyle, format_grouped
from humanfmt.core.numeric import to_decimal, truncate
from humanfmt.core.percent import format_percent, format_percent_of_total
from humanfmt.core.settings import FormatOptions, Settings, TimeFormatOptions, load_settings
from humanfmt.core.units import (
    DEFAULT_BYTE_UNITS,
    DEFAULT_TIME_LABELS,
    DEFAULT_UNIT_TABLE,
    ByteSizeUnitTable,
    TimeUnitLabel,
    TimeUnitLabels,
    UnitTable,
)

__version__ = "0.1.0"

__all__ = [
    "AppError",
    "ByteSizeUnitTable",
    "ConfigError",
    "DEFAULT_BYTE_UNITS",
    "DEFAULT_TIME_LABELS",
    "DEFAULT_UNIT_TABLE",
    "Duration",
    "FormatOptions",
    "GROUPING_STYLES",
    "GroupingStyle",
    "INVARIANT",
    "InvalidArgumentError",
    "PreconditionViolationError",
    "Settings",
    "TimeFormatOptions",
    "TimeUnitLabel",
    "TimeUnitLabels",
    "UnitTable",
    "format_byte_size",
    "format_compact",
    "format_detailed_byte_size",
    "format_duration",
    "format_duration_labeled",
    "format_fixed_size",
    "format_grouped",
    "format_percent",
    "format_percent_of_total",
    "format_size_b",
    "format_size_gb",
    "format_size_kb",
    "format_size_mb",
    "format_size_tb",
    "load_settings",
    "to_decimal",
    "truncate",
]
