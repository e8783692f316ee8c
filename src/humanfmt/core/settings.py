"""User-level formatting defaults, loaded from `settings.json`.

Example file:

    {
      "decimal_places": 2,
      "label_case": "lower",
      "units": [[1000000, "M"], [1000, "K"]],
      "byte_units": ["B", "KiB", "MiB", "GiB", "TiB"],
      "grouping": "de",
      "time": {"separator": ".", "labels": {"day": ["T", "Tag"]}}
    }

Every key is optional. Custom tables replace the presets, they are not merged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
import json
import logging
from pathlib import Path
from typing import Any, Final, Literal

from humanfmt.core.errors import AppError, ConfigError
from humanfmt.core.grouping import INVARIANT, GroupingStyle, resolve_grouping
from humanfmt.core.numeric import check_decimal_places
from humanfmt.core.storage import get_config_dir, load_json
from humanfmt.core.units import (
    DEFAULT_BYTE_UNITS,
    DEFAULT_TIME_LABELS,
    DEFAULT_UNIT_TABLE,
    TIME_UNIT_KEYS,
    ByteSizeUnitTable,
    TimeUnitLabel,
    TimeUnitLabels,
    UnitTable,
)

logger = logging.getLogger(__name__)

SETTINGS_FILE: Final[str] = "settings.json"

LabelCase = Literal["upper", "lower"]

ROUNDING_MODES: Final[dict[str, str]] = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
    "half_down": ROUND_HALF_DOWN,
    "down": ROUND_DOWN,
    "up": ROUND_UP,
    "ceiling": ROUND_CEILING,
    "floor": ROUND_FLOOR,
}


@dataclass(frozen=True, slots=True)
class FormatOptions:
    decimal_places: int = 1
    label_case: LabelCase = "upper"
    # Only used by the compact formatter when no unit is reached.
    rounding: str = ROUND_HALF_UP

    def __post_init__(self) -> None:
        check_decimal_places(self.decimal_places)

    @property
    def upper_case(self) -> bool:
        return self.label_case == "upper"


@dataclass(frozen=True, slots=True)
class TimeFormatOptions:
    # None keeps each mode's own default: shown in separator mode, hidden in labeled mode.
    show_zero_units: bool | None = None
    separator: str = ":"
    separate_days: bool = True
    use_short_labels: bool = True
    unit_labels: TimeUnitLabels = DEFAULT_TIME_LABELS

    def resolve_show_zero_units(self, *, labeled: bool) -> bool:
        if self.show_zero_units is None:
            return not labeled
        return self.show_zero_units


@dataclass(frozen=True, slots=True)
class Settings:
    format: FormatOptions = field(default_factory=FormatOptions)
    time: TimeFormatOptions = field(default_factory=TimeFormatOptions)
    units: UnitTable = DEFAULT_UNIT_TABLE
    byte_units: ByteSizeUnitTable = DEFAULT_BYTE_UNITS
    grouping: GroupingStyle = INVARIANT


def default_settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILE


def _expect(raw: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    value = raw[key]
    if isinstance(value, bool) and kind is int:
        raise ConfigError(f"Setting {key!r} must be an integer", user_message=f"Invalid setting: {key}")
    if not isinstance(value, kind):
        raise ConfigError(
            f"Setting {key!r} has type {type(value).__name__}",
            user_message=f"Invalid setting: {key}",
        )
    return value


def _parse_time(raw: dict[str, Any]) -> TimeFormatOptions:
    kwargs: dict[str, Any] = {}
    for key in ("show_zero_units", "separate_days", "use_short_labels"):
        if key in raw:
            kwargs[key] = _expect(raw, key, bool)
    if "separator" in raw:
        kwargs["separator"] = _expect(raw, "separator", str)
    if "labels" in raw:
        labels = _expect(raw, "labels", dict)
        unknown = set(labels) - set(TIME_UNIT_KEYS)
        if unknown:
            raise ConfigError(
                f"Unknown time unit keys: {sorted(unknown)}",
                user_message=f"Unknown time units in settings: {', '.join(sorted(unknown))}",
            )
        overrides: dict[str, TimeUnitLabel] = {}
        for key, pair in labels.items():
            if not isinstance(pair, list) or len(pair) != 2:
                raise ConfigError(
                    f"Time label for {key!r} must be [short, full]",
                    user_message=f"Invalid time label for {key}",
                )
            overrides[key] = TimeUnitLabel(str(pair[0]), str(pair[1]))
        kwargs["unit_labels"] = TimeUnitLabels(**overrides)
    return TimeFormatOptions(**kwargs)


def settings_from_dict(raw: dict[str, Any]) -> Settings:
    if not isinstance(raw, dict):
        raise ConfigError("Settings root must be an object", user_message="Settings file must hold a JSON object.")

    try:
        format_kwargs: dict[str, Any] = {}
        if "decimal_places" in raw:
            format_kwargs["decimal_places"] = _expect(raw, "decimal_places", int)
        if "label_case" in raw:
            label_case = _expect(raw, "label_case", str).lower()
            if label_case not in ("upper", "lower"):
                raise ConfigError(f"Bad label_case {label_case!r}", user_message="label_case must be upper or lower.")
            format_kwargs["label_case"] = label_case
        if "rounding" in raw:
            name = _expect(raw, "rounding", str).lower()
            if name not in ROUNDING_MODES:
                raise ConfigError(
                    f"Unknown rounding mode {name!r}",
                    user_message=f"Unknown rounding mode: {name} (choose from {', '.join(ROUNDING_MODES)})",
                )
            format_kwargs["rounding"] = ROUNDING_MODES[name]

        settings_kwargs: dict[str, Any] = {"format": FormatOptions(**format_kwargs)}
        if "time" in raw:
            settings_kwargs["time"] = _parse_time(_expect(raw, "time", dict))
        if "units" in raw:
            settings_kwargs["units"] = UnitTable.of(tuple(pair) for pair in _expect(raw, "units", list))
        if "byte_units" in raw:
            settings_kwargs["byte_units"] = ByteSizeUnitTable.coerce(_expect(raw, "byte_units", list))
        if "grouping" in raw:
            settings_kwargs["grouping"] = resolve_grouping(_expect(raw, "grouping", str))
    except ConfigError:
        raise
    except (AppError, TypeError, ValueError) as exc:
        user_message = getattr(exc, "user_message", str(exc))
        raise ConfigError(f"Invalid settings: {exc}", user_message=f"Invalid settings: {user_message}") from exc

    return Settings(**settings_kwargs)


def load_settings(path: Path | None = None) -> Settings:
    path = path or default_settings_path()
    try:
        raw = load_json(path)
    except UnicodeDecodeError as exc:
        raise ConfigError(
            f"Settings file {path} is not UTF-8: {exc}",
            user_message=f"Settings file is not valid UTF-8 text: {path}",
        ) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Malformed settings file {path}: {exc}",
            user_message=f"Settings file is not valid JSON: {path}",
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Unable to read settings file {path}: {exc}",
            user_message=f"Unable to read settings file: {path}",
        ) from exc

    if raw is None:
        logger.debug("No settings file at %s; using defaults", path)
        return Settings()

    logger.debug("Loaded settings from %s", path)
    return settings_from_dict(raw)
