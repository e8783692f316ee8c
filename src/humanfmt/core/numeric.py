"""Exact decimal arithmetic used by every formatter.

All display math runs on `decimal.Decimal`. Binary floats are accepted as
input only and converted through their shortest repr, so `0.1` becomes
`Decimal("0.1")` rather than `0.1000000000000000055511151231257827...`.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, ROUND_DOWN, ROUND_HALF_UP, Context, Decimal, InvalidOperation
from fractions import Fraction
from functools import singledispatch
from typing import Final, Union

from humanfmt.core.errors import InvalidArgumentError, PreconditionViolationError

NumberLike = Union[int, float, Decimal, Fraction, str]

MIN_PRECISION: Final[int] = 60

# Largest accepted decimal exponent; keeps working precision bounded.
MAX_EXPONENT: Final[int] = 1000


def exact_context(*operands: Decimal, decimal_places: int = 0) -> Context:
    """Context with enough digits that no operation on `operands` rounds."""
    digits = sum(abs(operand.adjusted()) for operand in operands)
    return Context(prec=MIN_PRECISION + digits + decimal_places, Emax=MAX_EMAX, Emin=MIN_EMIN)


@singledispatch
def to_decimal(value: object) -> Decimal:
    raise InvalidArgumentError(
        f"Unsupported numeric type: {type(value).__name__}",
        user_message="Value must be a number.",
    )


@to_decimal.register
def _(value: bool) -> Decimal:
    raise InvalidArgumentError(
        "Unsupported numeric type: bool",
        user_message="Value must be a number, not a boolean.",
    )


@to_decimal.register
def _(value: int) -> Decimal:
    return _finite(Decimal(value), value)


@to_decimal.register
def _(value: float) -> Decimal:
    return _finite(Decimal(repr(value)), value)


@to_decimal.register
def _(value: Decimal) -> Decimal:
    return _finite(value, value)


@to_decimal.register
def _(value: Fraction) -> Decimal:
    numerator = _finite(Decimal(value.numerator), value)
    denominator = _finite(Decimal(value.denominator), value)
    return exact_context(numerator, denominator).divide(numerator, denominator)


@to_decimal.register
def _(value: str) -> Decimal:
    text = value.strip()
    if not text:
        raise InvalidArgumentError("Empty numeric string", user_message="Enter a number first.")
    try:
        parsed = Decimal(text)
    except InvalidOperation as exc:
        raise InvalidArgumentError(
            f"Unable to parse numeric string: {value!r}",
            user_message=f"Not a number: {value}",
        ) from exc
    return _finite(parsed, value)


def _finite(value: Decimal, original: object) -> Decimal:
    if not value.is_finite():
        raise InvalidArgumentError(
            f"Non-finite value: {original!r}",
            user_message="Value must be a finite number.",
        )
    if not value.is_zero() and abs(value.adjusted()) > MAX_EXPONENT:
        raise InvalidArgumentError(
            f"Value out of range: {original!r}",
            user_message=f"Value is too large or too small to format (limit 1e{MAX_EXPONENT}).",
        )
    return value


def check_decimal_places(decimal_places: int) -> int:
    if decimal_places < 0:
        raise PreconditionViolationError(
            f"decimal_places must be >= 0, got {decimal_places}",
            user_message="Number of decimals can't be negative.",
        )
    return decimal_places


def _quantum(decimal_places: int) -> Decimal:
    return Decimal(1).scaleb(-check_decimal_places(decimal_places))


def truncate(value: NumberLike, decimal_places: int) -> Decimal:
    """Drop digits past `decimal_places`, moving toward zero.

    `truncate(1.99, 1) == Decimal("1.9")` and `truncate(-1.9, 0) == Decimal("-1")`.
    """
    quantum = _quantum(decimal_places)
    number = to_decimal(value)
    context = exact_context(number, decimal_places=decimal_places)
    return number.quantize(quantum, rounding=ROUND_DOWN, context=context)


def round_to(value: NumberLike, decimal_places: int, rounding: str = ROUND_HALF_UP) -> Decimal:
    quantum = _quantum(decimal_places)
    number = to_decimal(value)
    context = exact_context(number, decimal_places=decimal_places)
    return number.quantize(quantum, rounding=rounding, context=context)


def render_fixed(value: Decimal, decimal_places: int) -> str:
    """Render an already quantized value with exactly `decimal_places` digits."""
    if value.is_zero():
        value = abs(value)
    return f"{value:.{decimal_places}f}"
