"""Decimal helpers for monetary amounts"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENTS = Decimal("0.01")
HUNDRED = Decimal(100)
ZERO = Decimal(0)


def round_money(value: Decimal) -> Decimal:
    """Round half-up to 2 fractional digits"""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def percent_of(amount: Decimal, percent: Decimal) -> Decimal:
    """amount × percent / 100, unrounded"""
    return amount * percent / HUNDRED


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """
    Convert a numeric input to Decimal.

    Floats go through str() so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Raises:
        ValueError: If the value is not numeric
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not a monetary amount")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {value!r}") from e
    raise ValueError(f"Not a number: {value!r}")
