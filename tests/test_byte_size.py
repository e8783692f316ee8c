from __future__ import annotations

from decimal import Decimal

import pytest

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
from humanfmt.core.errors import InvalidArgumentError, PreconditionViolationError


def test_byte_size_zero_and_negative_are_literal() -> None:
    assert format_byte_size(0) == "0B"
    assert format_byte_size(0, upper_case=False) == "0b"
    assert format_byte_size(-5, 3) == "0B"


def test_byte_size_scales_by_1024() -> None:
    assert format_byte_size(1023) == "1023.0B"
    assert format_byte_size(1024) == "1.0KB"
    assert format_byte_size(1536) == "1.5KB"
    assert format_byte_size(1_572_864) == "1.5MB"
    assert format_byte_size(1536, upper_case=False) == "1.5kb"


def test_byte_size_rounds_where_compact_truncates() -> None:
    assert format_byte_size(2047) == "2.0KB"
    assert format_byte_size(1536, 0) == "2KB"
    assert format_compact(1_500, 0) == "1K"


def test_byte_size_stops_at_last_label() -> None:
    assert format_byte_size(1024**4) == "1024.0GB"
    assert format_byte_size(3 * 1024**2, labels=["B", "K"]) == "3072.0K"


def test_byte_size_scaled_value_stays_below_1024() -> None:
    for num_bytes in (1, 999, 1024, 50_000, 7 * 1024**2 + 3, 1024**3 - 1):
        text = format_byte_size(num_bytes, 3)
        number = Decimal(text.rstrip("BKMG"))
        assert Decimal(1) <= number <= Decimal(1024)


def test_fixed_unit_wrappers() -> None:
    assert format_size_b(512) == "512.0B"
    assert format_size_kb(1536) == "1.5KB"
    assert format_size_mb(1_572_864, 2) == "1.50MB"
    assert format_size_gb(3 * 1024**3) == "3.0GB"
    assert format_size_tb(1024**4, upper_case=False) == "1.0tb"
    assert format_fixed_size(2048, "kb") == "2.0KB"


def test_fixed_unit_rejects_unknown_unit() -> None:
    with pytest.raises(InvalidArgumentError):
        format_fixed_size(1, "PB")  # type: ignore[arg-type]


def test_detailed_byte_size() -> None:
    assert format_detailed_byte_size(1_572_864) == "1.5MB (1,572,864 bytes)"
    assert format_detailed_byte_size(1_572_864, grouping="de") == "1.5MB (1.572.864 bytes)"
    assert format_detailed_byte_size(0) == "0B (0 bytes)"


def test_byte_size_handles_very_large_values() -> None:
    assert format_byte_size(1024**3 * 10**70) == "1" + "0" * 70 + ".0GB"
    assert format_byte_size(10**80).endswith("GB")
    assert format_fixed_size(1024**2 * 10**80, "MB") == "1" + "0" * 80 + ".0MB"
    assert format_detailed_byte_size(1e300).endswith("0 bytes)")


@pytest.mark.parametrize(
    "call",
    [
        lambda: format_byte_size(1024, -1),
        lambda: format_byte_size(0, -1),
        lambda: format_fixed_size(1024, "KB", -1),
        lambda: format_size_mb(1024, -2),
        lambda: format_detailed_byte_size(0, -1),
        lambda: format_detailed_byte_size(1024, -1),
    ],
)
def test_byte_size_rejects_negative_decimal_places(call) -> None:  # noqa: ANN001
    with pytest.raises(PreconditionViolationError):
        call()
