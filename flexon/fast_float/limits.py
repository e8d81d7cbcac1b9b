"""Limits of IEEE-754 double precision used by float conversion."""

MANTISSA_EXPLICIT_BITS = 52
MIN_EXPONENT_ROUND_TO_EVEN = -4
MAX_EXPONENT_ROUND_TO_EVEN = 23
MIN_EXPONENT_FAST_PATH = -22
MAX_EXPONENT_FAST_PATH = 22
MAX_EXPONENT_DISGUISED_FAST_PATH = 37
MINIMUM_EXPONENT = -1023
INFINITE_POWER = 0x7FF
SIGN_INDEX = 63
SMALLEST_POWER_OF_TEN = -342
LARGEST_POWER_OF_TEN = 308

MAX_MANTISSA_FAST_PATH = 2 << MANTISSA_EXPLICIT_BITS

_POW10 = tuple(float(10**i) for i in range(23)) + (0.0,) * 9


def pow10_fast_path(exponent: int) -> float:
    """An exactly representable power of ten; exponents above 22 give 0.0.

    Only the low five bits of the exponent are used.
    """
    return _POW10[exponent & 31]