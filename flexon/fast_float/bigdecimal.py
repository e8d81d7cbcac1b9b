"""Arbitrary-precision decimal used when the fast float conversion cannot decide."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

ByteSource = Union[bytes, bytearray, memoryview, str]

_MAX_LEFT_SHIFT = 60


def _build_shift_tables() -> tuple[tuple[int, ...], bytes]:
    """Tables describing how many digits a left shift by 2**shift adds.

    Entry ``shift`` of the first table holds, in its top five bits, the
    number of new digits a shift may add and, in its low eleven bits, the
    offset into the second table where the digits of ``5**shift`` start.
    """
    pow5_digits = bytearray()
    entries = [0]
    for shift in range(1, _MAX_LEFT_SHIFT + 1):
        entries.append((len(str(1 << shift)) << 11) | len(pow5_digits))
        pow5_digits.extend(int(c) for c in str(5**shift))
    entries.extend([len(pow5_digits)] * (65 - len(entries)))
    return tuple(entries), bytes(pow5_digits)


_SHIFT_TABLE, _SHIFT_POW5 = _build_shift_tables()


@dataclass
class Decimal:
    """A decimal number ``0.d1d2d3... * 10**decimal_point``.

    Digits are stored one per byte; at most ``MAX_DIGITS`` are kept and
    ``truncated`` records that nonzero digits were dropped.
    """

    MAX_DIGITS: ClassVar[int] = 768
    MAX_DIGITS_WITHOUT_OVERFLOW: ClassVar[int] = 19
    DECIMAL_POINT_RANGE: ClassVar[int] = 2047

    num_digits: int = 0
    decimal_point: int = 0
    negative: bool = False
    truncated: bool = False
    digits: bytearray = field(default_factory=lambda: bytearray(Decimal.MAX_DIGITS))

    def try_add_digit(self, digit: int) -> None:
        """Append a digit; digits beyond the capacity are counted but not kept."""
        if self.num_digits < self.MAX_DIGITS:
            self.digits[self.num_digits] = digit
        self.num_digits += 1

    def trim(self) -> None:
        """Drop trailing zero digits."""
        while self.num_digits and self.digits[self.num_digits - 1] == 0:
            self.num_digits -= 1

    def round(self) -> int:
        """The integer part, rounded half to even; saturates at 2**64 - 1."""
        if self.num_digits == 0 or self.decimal_point < 0:
            return 0
        if self.decimal_point > 18:
            return 0xFFFF_FFFF_FFFF_FFFF

        dp = self.decimal_point
        n = 0
        for i in range(dp):
            n *= 10
            if i < self.num_digits:
                n += self.digits[i]

        round_up = False
        if dp < self.num_digits:
            round_up = self.digits[dp] >= 5
            if self.digits[dp] == 5 and dp + 1 == self.num_digits:
                round_up = self.truncated or (dp != 0 and self.digits[dp - 1] & 1 != 0)

        return n + 1 if round_up else n

    def _store(self, index: int, digit: int) -> None:
        if index < self.MAX_DIGITS:
            self.digits[index] = digit
        elif digit > 0:
            self.truncated = True

    def left_shift(self, shift: int) -> None:
        """Multiply by ``2**shift``; shift must be between 0 and 60."""
        if not 0 <= shift <= _MAX_LEFT_SHIFT:
            raise ValueError(f"left shift must be between 0 and {_MAX_LEFT_SHIFT}: {shift}")
        if self.num_digits == 0:
            return

        new_digits = number_of_digits_decimal_left_shift(self, shift)
        read_index = self.num_digits
        write_index = self.num_digits + new_digits
        n = 0

        while read_index:
            read_index -= 1
            write_index -= 1
            n += self.digits[read_index] << shift
            n, remainder = divmod(n, 10)
            self._store(write_index, remainder)

        while n > 0:
            write_index -= 1
            n, remainder = divmod(n, 10)
            self._store(write_index, remainder)

        self.num_digits = min(self.num_digits + new_digits, self.MAX_DIGITS)
        self.decimal_point += new_digits
        self.trim()

    def right_shift(self, shift: int) -> None:
        """Divide by ``2**shift``, keeping at most ``MAX_DIGITS`` digits."""
        if shift < 0:
            raise ValueError(f"right shift must not be negative: {shift}")

        read_index = 0
        write_index = 0
        n = 0

        while (n >> shift) == 0:
            if read_index < self.num_digits:
                n = 10 * n + self.digits[read_index]
                read_index += 1
            elif n == 0:
                return
            else:
                while (n >> shift) == 0:
                    n *= 10
                    read_index += 1
                break

        self.decimal_point -= read_index - 1
        if self.decimal_point < -self.DECIMAL_POINT_RANGE:
            self.num_digits = 0
            self.decimal_point = 0
            self.negative = False
            self.truncated = False
            return

        mask = (1 << shift) - 1

        while read_index < self.num_digits:
            new_digit = n >> shift
            n = 10 * (n & mask) + self.digits[read_index]
            read_index += 1
            self.digits[write_index] = new_digit
            write_index += 1

        while n > 0:
            new_digit = n >> shift
            n = 10 * (n & mask)
            if write_index < self.MAX_DIGITS:
                self.digits[write_index] = new_digit
                write_index += 1
            elif new_digit > 0:
                self.truncated = True

        self.num_digits = write_index
        self.trim()


def _as_bytes(data: ByteSource) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _digits_end(data: bytes, idx: int) -> int:
    """Index of the first byte at or after ``idx`` that is not an ASCII digit."""
    while idx < len(data) and 0x30 <= data[idx] <= 0x39:
        idx += 1
    return idx


def parse_decimal(data: ByteSource, start: int) -> Decimal:
    """Read the JSON number beginning at ``start`` into a :class:`Decimal`.

    The byte at ``start`` must be ``-`` or an ASCII digit.
    """
    src = _as_bytes(data)
    if not 0 <= start < len(src):
        raise ValueError(f"start offset {start} outside the source of length {len(src)}")

    d = Decimal()
    idx = start

    if src[idx] == ord("-"):
        d.negative = True
        idx += 1
    if src[start] == ord("0"):
        idx += 1

    end = _digits_end(src, idx)
    for byte in src[idx:end]:
        d.try_add_digit(byte - 0x30)
    idx = end

    if idx < len(src) and src[idx] == ord("."):
        idx += 1
        first = idx
        end = _digits_end(src, idx)
        for byte in src[idx:end]:
            d.try_add_digit(byte - 0x30)
        idx = end
        d.decimal_point = -(idx - first)

    if d.num_digits:
        trailing_zeros = 0
        for byte in reversed(src[start:idx]):
            if byte == ord("0"):
                trailing_zeros += 1
            elif byte != ord("."):
                break

        d.decimal_point += trailing_zeros
        d.num_digits = max(d.num_digits - trailing_zeros, 0)
        d.decimal_point += d.num_digits

        if d.num_digits > Decimal.MAX_DIGITS:
            d.truncated = True
            d.num_digits = Decimal.MAX_DIGITS

    if idx < len(src) and src[idx] in b"eE":
        idx += 1
        negative_exponent = False
        if idx < len(src) and src[idx] == ord("-"):
            negative_exponent = True
            idx += 1
        elif idx < len(src) and src[idx] == ord("+"):
            idx += 1

        exponent = 0
        end = _digits_end(src, idx)
        for byte in src[idx:end]:
            if exponent < 0x10000:
                exponent = 10 * exponent + (byte - 0x30)

        d.decimal_point += -exponent if negative_exponent else exponent

    for i in range(d.num_digits, Decimal.MAX_DIGITS_WITHOUT_OVERFLOW):
        d.digits[i] = 0

    return d


def number_of_digits_decimal_left_shift(d: Decimal, shift: int) -> int:
    """How many digits ``d.left_shift(shift)`` adds in front of the decimal point."""
    shift &= 63
    entry_a = _SHIFT_TABLE[shift]
    entry_b = _SHIFT_TABLE[shift + 1]
    new_digits = entry_a >> 11
    pow5 = _SHIFT_POW5[entry_a & 0x7FF : entry_b & 0x7FF]

    for i, p5 in enumerate(pow5):
        if i >= d.num_digits:
            return new_digits - 1
        if d.digits[i] == p5:
            continue
        return new_digits - 1 if d.digits[i] < p5 else new_digits

    return new_digits