"""Command line entry point.

    humanfmt compact 1500000          -> 1.5M
    humanfmt bytes 1572864 --detailed -> 1.5MB (1,572,864 bytes)
    humanfmt duration 90061 --labeled -> 1d01h01m01s
    humanfmt percent 1 --total 4      -> 25.0%
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence

from humanfmt.core.byte_size import FIXED_UNIT_POWERS, format_byte_size, format_detailed_byte_size, format_fixed_size
from humanfmt.core.compact import format_compact
from humanfmt.core.duration import format_duration, format_duration_labeled
from humanfmt.core.errors import AppError
from humanfmt.core.grouping import GROUPING_STYLES, format_grouped
from humanfmt.core.logging_setup import setup_logging
from humanfmt.core.percent import format_percent, format_percent_of_total
from humanfmt.core.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=Path, default=None, help="settings.json to load")
    common.add_argument("--decimals", type=int, default=None, help="fractional digits to keep")
    common.add_argument("--lower", action="store_true", help="lower-case unit labels")
    common.add_argument("-v", "--verbose", action="store_true")

    parser = argparse.ArgumentParser(prog="humanfmt", description="Format numbers for humans.")
    sub = parser.add_subparsers(dest="command", required=True)

    compact = sub.add_parser("compact", parents=[common], help="1500000 -> 1.5M")
    compact.add_argument("value")

    size = sub.add_parser("bytes", parents=[common], help="1572864 -> 1.5MB")
    size.add_argument("value")
    size.add_argument("--unit", choices=sorted(FIXED_UNIT_POWERS), default=None, help="fixed unit instead of auto-scaling")
    size.add_argument("--detailed", action="store_true", help="append the exact byte count")

    duration = sub.add_parser("duration", parents=[common], help="3661 -> 01:01:01")
    duration.add_argument("value")
    duration.add_argument("--labeled", action="store_true", help="1d01h01m01s style")
    zero_units = duration.add_mutually_exclusive_group()
    zero_units.add_argument("--hide-zero", action="store_true", help="drop leading zero units")
    zero_units.add_argument("--show-zero", action="store_true", help="keep leading zero units")
    duration.add_argument("--fold-days", action="store_true", help="count days as hours")
    duration.add_argument("--separator", default=None)
    duration.add_argument("--long-labels", action="store_true", help="Day/Hour/... instead of d/h/...")

    percent = sub.add_parser("percent", parents=[common], help="45.67 -> 45.6%%")
    percent.add_argument("value")
    percent.add_argument("--total", default=None, help="treat value as a share of this total")
    percent.add_argument("--unit", default="%")

    grouped = sub.add_parser("grouped", parents=[common], help="1234567 -> 1,234,567")
    grouped.add_argument("value")
    grouped.add_argument("--grouping", choices=sorted(GROUPING_STYLES), default=None)

    return parser


def render(args: argparse.Namespace, settings: Settings) -> str:
    decimals = args.decimals if args.decimals is not None else settings.format.decimal_places
    upper_case = settings.format.upper_case and not args.lower

    if args.command == "compact":
        return format_compact(
            args.value,
            decimals,
            upper_case,
            rounding=settings.format.rounding,
            table=settings.units,
        )

    if args.command == "bytes":
        if args.unit:
            return format_fixed_size(args.value, args.unit, decimals, upper_case)
        if args.detailed:
            return format_detailed_byte_size(
                args.value,
                decimals,
                upper_case,
                labels=settings.byte_units,
                grouping=settings.grouping,
            )
        return format_byte_size(args.value, decimals, upper_case, labels=settings.byte_units)

    if args.command == "duration":
        time = settings.time
        separate_days = time.separate_days and not args.fold_days
        show_zero_units = time.resolve_show_zero_units(labeled=args.labeled)
        if args.show_zero or args.hide_zero:
            show_zero_units = args.show_zero
        if args.labeled:
            return format_duration_labeled(
                args.value,
                show_zero_units=show_zero_units,
                separate_days=separate_days,
                use_short_labels=time.use_short_labels and not args.long_labels,
                labels=time.unit_labels,
            )
        return format_duration(
            args.value,
            show_zero_units=show_zero_units,
            separator=args.separator if args.separator is not None else time.separator,
            separate_days=separate_days,
        )

    if args.command == "percent":
        if args.total is not None:
            return format_percent_of_total(args.value, args.total, decimals, args.unit)
        return format_percent(args.value, decimals, args.unit)

    if args.command == "grouped":
        return format_grouped(args.value, grouping=args.grouping or settings.grouping)

    raise AssertionError(f"Unhandled command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        settings = load_settings(args.config)
        output = render(args, settings)
    except AppError as exc:
        logger.debug("Formatting failed", exc_info=True)
        print(f"error: {exc.user_message}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
