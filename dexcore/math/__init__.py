"""Arbitrary-precision numeric helpers."""

from dexcore.math.decimal_utils import (
    as_bigint_and_exponent,
    decimal_div,
    decimal_mul,
    decimal_to_wei,
    wei_to_decimal,
)

__all__ = [
    "as_bigint_and_exponent",
    "decimal_div",
    "decimal_mul",
    "decimal_to_wei",
    "wei_to_decimal",
]
