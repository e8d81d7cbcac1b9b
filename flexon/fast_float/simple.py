"""Exact but slow decimal-to-binary conversion for hard cases."""

from __future__ import annotations

from .bigdecimal import ByteSource, Decimal, parse_decimal
from .common import AdjustedMantissa
from .limits import INFINITE_POWER, MANTISSA_EXPLICIT_BITS, MINIMUM_EXPONENT

_MAX_SHIFT = 60
_POWERS = (0, 3, 6, 9, 13, 16, 19, 23, 26, 29, 33, 36, 39, 43, 46, 49, 53, 56, 59)


def _get_shift(n: int) -> int:
    return _POWERS[n] if n < len(_POWERS) else _MAX_SHIFT


def parse_long_mantissa(data: ByteSource, start: int) -> AdjustedMantissa:
    """Convert the JSON number at ``start`` to a correctly rounded binary value.

    The sign is not part of the result; ``power2`` is the biased exponent.
    """
    am_zero = AdjustedMantissa.zero_pow2(0)
    am_inf = AdjustedMantissa.zero_pow2(INFINITE_POWER)
    d = parse_decimal(data, start)

    if d.num_digits == 0 or d.decimal_point < -324:
        return am_zero
    if d.decimal_point >= 310:
        return am_inf

    exp2 = 0

    while d.decimal_point > 0:
        shift = _get_shift(d.decimal_point)
        d.right_shift(shift)
        if d.decimal_point < -Decimal.DECIMAL_POINT_RANGE:
            return am_zero
        exp2 += shift

    while d.decimal_point <= 0:
        if d.decimal_point == 0:
            first = d.digits[0]
            if first >= 5:
                break
            shift = 2 if first in (0, 1) else 1
        else:
            shift = _get_shift(-d.decimal_point)

        d.left_shift(shift)
        if d.decimal_point > Decimal.DECIMAL_POINT_RANGE:
            return am_inf
        exp2 -= shift

    exp2 -= 1

    while MINIMUM_EXPONENT + 1 > exp2:
        n = min((MINIMUM_EXPONENT + 1) - exp2, _MAX_SHIFT)
        d.right_shift(n)
        exp2 += n

    if exp2 - MINIMUM_EXPONENT >= INFINITE_POWER:
        return am_inf

    d.left_shift(MANTISSA_EXPLICIT_BITS + 1)
    mantissa = d.round()

    if mantissa >= 1 << (MANTISSA_EXPLICIT_BITS + 1):
        d.right_shift(1)
        exp2 += 1
        mantissa = d.round()
        if exp2 - MINIMUM_EXPONENT >= INFINITE_POWER:
            return am_inf

    power2 = exp2 - MINIMUM_EXPONENT
    if mantissa < 1 << MANTISSA_EXPLICIT_BITS:
        power2 -= 1
    mantissa &= (1 << MANTISSA_EXPLICIT_BITS) - 1

    return AdjustedMantissa(mantissa=mantissa, power2=power2)