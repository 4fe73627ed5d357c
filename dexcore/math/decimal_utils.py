"""High-precision Decimal utilities for token amount and price arithmetic.

Decimals are treated as an (unscaled integer, scale) pair, value =
unscaled * 10^-scale. Multiplication is carried out with enough precision to
be exact for uint256-sized operands; division is rounded to 100 significant
digits.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_HALF_UP, Decimal

from dexcore.models.types import UINT256_MAX

# Enough digits for the exact product of two uint256-sized decimals (78 digits each)
DECIMAL_EXACT_CONTEXT = decimal.Context(prec=160)

# Significant digits kept by division
DIVISION_PRECISION = 100
DECIMAL_DIVISION_CONTEXT = decimal.Context(prec=DIVISION_PRECISION)

# Native currency and reference prices carry 18 decimals
ETHER_DECIMALS = 18


def decimal_mul(a: Decimal, b: Decimal) -> Decimal:
    """Multiply two decimals exactly."""
    return DECIMAL_EXACT_CONTEXT.multiply(a, b)


def decimal_div(a: Decimal, b: Decimal) -> Decimal:
    """Divide a by b, rounded to DIVISION_PRECISION significant digits.

    Raises:
        decimal.DivisionByZero: If b is zero
    """
    return DECIMAL_DIVISION_CONTEXT.divide(a, b)


def as_bigint_and_exponent(value: Decimal) -> tuple[int, int]:
    """Split a finite decimal into (unscaled, scale) with value = unscaled * 10^-scale.

    The scale is negative for values with trailing zeros stored in the
    exponent (e.g. Decimal("1E+2") -> (1, -2)).

    Raises:
        ValueError: If value is NaN or infinite
    """
    if not value.is_finite():
        raise ValueError(f"Decimal must be finite: {value}")
    sign, digits, exponent = value.as_tuple()
    unscaled = int("".join(str(d) for d in digits)) if digits else 0
    if sign:
        unscaled = -unscaled
    return unscaled, -int(exponent)


def wei_to_decimal(wei: int) -> Decimal:
    """Convert a wei (or reference price) integer into ether units."""
    return DECIMAL_EXACT_CONTEXT.scaleb(Decimal(wei), -ETHER_DECIMALS)


def decimal_to_wei(value: Decimal) -> int | None:
    """Convert an ether amount into wei.

    Returns None if the result is not a whole, non-negative uint256 amount
    of wei.
    """
    if not value.is_finite():
        return None
    wei = DECIMAL_EXACT_CONTEXT.scaleb(value, ETHER_DECIMALS)
    if wei != wei.to_integral_value():
        return None
    wei_int = int(wei)
    if not 0 <= wei_int <= UINT256_MAX:
        return None
    return wei_int


def round_half_away_from_zero(value: Decimal, digits: int) -> Decimal:
    """Round to a number of fractional digits, ties away from zero."""
    return value.quantize(
        Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=DECIMAL_EXACT_CONTEXT
    )


__all__ = [
    "DECIMAL_DIVISION_CONTEXT",
    "DECIMAL_EXACT_CONTEXT",
    "DIVISION_PRECISION",
    "ETHER_DECIMALS",
    "as_bigint_and_exponent",
    "decimal_div",
    "decimal_mul",
    "decimal_to_wei",
    "round_half_away_from_zero",
    "wei_to_decimal",
]
