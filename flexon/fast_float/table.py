"""128-bit approximations of powers of five used by the float converter."""

from __future__ import annotations

SMALLEST_POWER_OF_FIVE = -342
LARGEST_POWER_OF_FIVE = 308
N_POWERS_OF_FIVE = LARGEST_POWER_OF_FIVE - SMALLEST_POWER_OF_FIVE + 1

_MASK64 = (1 << 64) - 1


def _approximation(q: int) -> int:
    """The 128-bit normalised approximation of five to the power q."""
    if q >= 0:
        power5 = 5**q
        shift = 128 - power5.bit_length()
        return power5 << shift if shift >= 0 else power5 >> -shift

    power5 = 5**-q
    z = power5.bit_length()
    if q >= -27:
        return (1 << (z + 127)) // power5 + 1

    c = (1 << (2 * z + 128)) // power5 + 1
    excess = c.bit_length() - 128
    return c >> excess if excess > 0 else c


def _build() -> tuple[tuple[int, int], ...]:
    entries = []
    for q in range(SMALLEST_POWER_OF_FIVE, LARGEST_POWER_OF_FIVE + 1):
        value = _approximation(q)
        entries.append((value >> 64, value & _MASK64))
    return tuple(entries)


POWER_OF_FIVE_128: tuple[tuple[int, int], ...] = _build()


def power_of_five_128(q: int) -> tuple[int, int]:
    """The (high, low) 64-bit words approximating five to the power q.

    Raises ValueError when q lies outside the supported range.
    """
    if not SMALLEST_POWER_OF_FIVE <= q <= LARGEST_POWER_OF_FIVE:
        raise ValueError(
            f"power of five {q} outside "
            f"{SMALLEST_POWER_OF_FIVE}..={LARGEST_POWER_OF_FIVE}"
        )
    return POWER_OF_FIVE_128[q - SMALLEST_POWER_OF_FIVE]