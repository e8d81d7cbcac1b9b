"""Decimal significand and exponent with the exact fast conversion path."""

from __future__ import annotations

from dataclasses import dataclass

from .limits import (
    MAX_EXPONENT_DISGUISED_FAST_PATH,
    MAX_EXPONENT_FAST_PATH,
    MAX_MANTISSA_FAST_PATH,
    MIN_EXPONENT_FAST_PATH,
    pow10_fast_path,
)

MIN_19DIGIT_INT = 10**18
INT_POW10 = tuple(10**i for i in range(16))


@dataclass(frozen=True)
class Number:
    """A parsed number: mantissa times ten to the power of exponent."""

    exponent: int
    mantissa: int
    negative: bool = False
    many_digits: bool = False

    def is_fast_path(self) -> bool:
        """Whether the value can be converted with plain float arithmetic."""
        return (
            MIN_EXPONENT_FAST_PATH <= self.exponent <= MAX_EXPONENT_DISGUISED_FAST_PATH
            and self.mantissa <= MAX_MANTISSA_FAST_PATH
            and not self.many_digits
        )

    def try_fast_path(self) -> float | None:
        """The exactly rounded float, or None when the fast path does not apply."""
        if not self.is_fast_path():
            return None
        if self.exponent <= MAX_EXPONENT_FAST_PATH:
            value = float(self.mantissa)
            if self.exponent < 0:
                value /= pow10_fast_path(-self.exponent)
            else:
                value *= pow10_fast_path(self.exponent)
        else:
            shift = self.exponent - MAX_EXPONENT_FAST_PATH
            mantissa = self.mantissa * INT_POW10[shift]
            if mantissa > MAX_MANTISSA_FAST_PATH:
                return None
            value = float(mantissa) * pow10_fast_path(MAX_EXPONENT_FAST_PATH)
        return -value if self.negative else value