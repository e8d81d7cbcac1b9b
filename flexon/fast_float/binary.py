"""Eisel-Lemire conversion of a decimal significand and exponent to binary."""

from __future__ import annotations

from .common import AdjustedMantissa
from .limits import (
    INFINITE_POWER,
    LARGEST_POWER_OF_TEN,
    MANTISSA_EXPLICIT_BITS,
    MAX_EXPONENT_ROUND_TO_EVEN,
    MIN_EXPONENT_ROUND_TO_EVEN,
    MINIMUM_EXPONENT,
    SMALLEST_POWER_OF_TEN,
)
from .table import power_of_five_128

_MASK64 = (1 << 64) - 1


def _check_u64(value: int, name: str) -> int:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{name} must fit in 64 unsigned bits: {value}")
    return value


def compute_float(q: int, w: int) -> AdjustedMantissa:
    """Convert ``w * 10**q`` to a biased binary mantissa and exponent.

    A result with ``power2 == -1`` means the fast algorithm could not decide
    the rounding and a slower exact method must be used.
    """
    _check_u64(w, "w")
    am_zero = AdjustedMantissa.zero_pow2(0)
    am_inf = AdjustedMantissa.zero_pow2(INFINITE_POWER)
    am_error = AdjustedMantissa.zero_pow2(-1)

    if w == 0 or q < SMALLEST_POWER_OF_TEN:
        return am_zero
    if q > LARGEST_POWER_OF_TEN:
        return am_inf

    lz = 64 - w.bit_length()
    w = (w << lz) & _MASK64
    lo, hi = compute_product_approx(q, w, MANTISSA_EXPLICIT_BITS + 3)

    if lo == _MASK64 and not -27 <= q <= 55:
        return am_error

    upperbit = hi >> 63
    shift = upperbit + 64 - MANTISSA_EXPLICIT_BITS - 3
    mantissa = hi >> shift
    power2 = power(q) + upperbit - lz - MINIMUM_EXPONENT

    if power2 <= 0:
        if -power2 + 1 >= 64:
            return am_zero
        mantissa >>= -power2 + 1
        mantissa += mantissa & 1
        mantissa >>= 1
        power2 = 1 if mantissa >= (1 << MANTISSA_EXPLICIT_BITS) else 0
        return AdjustedMantissa(mantissa=mantissa, power2=power2)

    if (
        lo <= 1
        and MIN_EXPONENT_ROUND_TO_EVEN <= q <= MAX_EXPONENT_ROUND_TO_EVEN
        and mantissa & 3 == 1
        and ((mantissa << shift) & _MASK64) == hi
    ):
        mantissa &= ~1

    mantissa += mantissa & 1
    mantissa >>= 1

    if mantissa >= (2 << MANTISSA_EXPLICIT_BITS):
        mantissa = 1 << MANTISSA_EXPLICIT_BITS
        power2 += 1

    mantissa &= ~(1 << MANTISSA_EXPLICIT_BITS)

    if power2 >= INFINITE_POWER:
        return am_inf

    return AdjustedMantissa(mantissa=mantissa, power2=power2)


def power(q: int) -> int:
    """An approximation of ``floor(q * log2(10)) + 63``."""
    return ((q * (152_170 + 65536)) >> 16) + 63


def full_multiplication(a: int, b: int) -> tuple[int, int]:
    """The 128-bit product of two 64-bit words as (low, high) words."""
    product = _check_u64(a, "a") * _check_u64(b, "b")
    return product & _MASK64, product >> 64


def compute_product_approx(q: int, w: int, precision: int) -> tuple[int, int]:
    """Approximate ``w * 5**q`` as (low, high) 64-bit words.

    Only the top ``precision`` bits of the high word are guaranteed exact.
    Raises ValueError for a power of five outside the table or a precision
    above 64.
    """
    if not 0 <= precision <= 64:
        raise ValueError(f"precision must be between 0 and 64: {precision}")
    mask = _MASK64 >> precision if precision < 64 else _MASK64
    high5, low5 = power_of_five_128(q)
    first_lo, first_hi = full_multiplication(w, high5)

    if first_hi & mask == mask:
        _, second_hi = full_multiplication(w, low5)
        first_lo = (first_lo + second_hi) & _MASK64
        if second_hi > first_lo:
            first_hi += 1

    return first_lo, first_hi