"""Safe integer wrapper for arithmetic on token amounts.

This module provides SafeInt, a lightweight wrapper for the integer
arithmetic behind trade bounds:

- Division by zero raises DivisionByZero instead of ZeroDivisionError.
- Saturating operations clamp to the uint256 range [0, 2^256-1] instead of
  overflowing. A bound that does not fit in a uint256 is no tighter than
  the type maximum.

Usage pattern:
    from dexcore.safe_int import S

    def bound(amount: int, slippage: int) -> int:
        return S(amount).saturating_add(slippage).value
"""

from __future__ import annotations

from dexcore.models.types import UINT256_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class SafeInt:
    """Integer with safe arithmetic operations.

    Python integers are arbitrary precision, so intermediate products never
    overflow. Range checks only happen where a value leaves the wrapper.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __pow__(self, exponent: int) -> SafeInt:
        if exponent < 0:
            raise ValueError(f"Negative exponent: {exponent}")
        return SafeInt(self._value**exponent)

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Ceiling division (rounds up).

        Equivalent to (self + other - 1) // other for a non-negative self.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        return SafeInt(-(-self._value // other_val))

    def saturating_add(self, other: SafeInt | int) -> SafeInt:
        """Add, clamping the result to UINT256_MAX instead of overflowing."""
        return SafeInt(min(self._value + _extract_value(other), UINT256_MAX))

    def saturating_sub(self, other: SafeInt | int) -> SafeInt:
        """Subtract, clamping the result to zero instead of going negative."""
        return SafeInt(max(0, self._value - _extract_value(other)))

    def to_uint256_saturating(self) -> int:
        """Convert to int, clamping to the uint256 range [0, 2^256-1]."""
        return max(0, min(self._value, UINT256_MAX))


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
