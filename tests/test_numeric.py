from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from humanfmt.core.errors import InvalidArgumentError, PreconditionViolationError
from humanfmt.core.numeric import render_fixed, to_decimal, truncate


def test_truncate_moves_toward_zero() -> None:
    assert truncate(-1.9, 0) == Decimal("-1")
    assert truncate(1.9, 0) == Decimal("1")
    assert truncate(1.99, 1) == Decimal("1.9")
    assert truncate(-12.345, 2) == Decimal("-12.34")
    assert truncate("12.345", 2) == Decimal("12.34")


def test_truncate_has_no_binary_float_drift() -> None:
    # 0.1 + 0.2 is 0.30000000000000004 as a float.
    assert truncate(0.1 + 0.2, 2) == Decimal("0.30")
    assert truncate(0.29, 2) == Decimal("0.29")


def test_truncate_rejects_negative_decimal_places() -> None:
    with pytest.raises(PreconditionViolationError):
        truncate(1.5, -1)


def test_to_decimal_accepts_supported_types() -> None:
    assert to_decimal(42) == Decimal(42)
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(Decimal("3.14")) == Decimal("3.14")
    assert to_decimal(Fraction(1, 4)) == Decimal("0.25")
    assert to_decimal("  1500 ") == Decimal(1500)


@pytest.mark.parametrize("value", ["", "   ", "abc", "1,000", None, True, [1], float("nan"), float("inf")])
def test_to_decimal_rejects_bad_input(value) -> None:  # noqa: ANN001
    with pytest.raises(InvalidArgumentError):
        to_decimal(value)


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        to_decimal("not a number")


def test_render_fixed_drops_negative_zero() -> None:
    assert render_fixed(Decimal("-0.0"), 1) == "0.0"
    assert render_fixed(Decimal("-1.50"), 2) == "-1.50"


def test_truncate_handles_very_large_values() -> None:
    assert truncate(1e80, 1) == Decimal("1E+80")
    assert truncate(1e300, 2) == Decimal("1E+300")
    assert truncate("1" + "0" * 80 + ".59", 1) == Decimal("1" + "0" * 80 + ".5")
    assert render_fixed(truncate(1e80, 1), 1) == "1" + "0" * 80 + ".0"


def test_to_decimal_rejects_out_of_range_exponents() -> None:
    with pytest.raises(InvalidArgumentError):
        to_decimal("1e5000")
    with pytest.raises(InvalidArgumentError):
        to_decimal(Decimal("-1e-5000"))
    assert to_decimal(Decimal("0E-5000")).is_zero()
