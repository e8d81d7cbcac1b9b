"""Shared types for float conversion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AdjustedMantissa:
    """A binary significand and biased exponent; power2 of -1 marks failure."""

    mantissa: int
    power2: int

    @classmethod
    def zero_pow2(cls, power2: int) -> AdjustedMantissa:
        """A zero mantissa with the given exponent."""
        return cls(mantissa=0, power2=power2)