"""Byte classification used by the tokenizer."""

from __future__ import annotations

_NUMBER_CHARS = frozenset(b"0123456789-.eE")

_ESCAPES = {
    ord('"'): ord('"'),
    ord("/"): ord("/"),
    ord("n"): ord("\n"),
    ord("t"): ord("\t"),
    ord("r"): ord("\r"),
    ord("\\"): ord("\\"),
    ord("b"): 0x08,
    ord("f"): 0x0C,
}

_LITERAL_ENDS = frozenset(b'":,{}[] \t\n\r')


def _check(byte: int) -> int:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    return byte


def is_number_char(byte: int) -> bool:
    """Whether the byte may appear in a JSON number."""
    return _check(byte) in _NUMBER_CHARS


def digit_value(byte: int) -> int | None:
    """The value of an ASCII decimal digit, or None for any other byte."""
    _check(byte)
    if 0x30 <= byte <= 0x39:
        return byte - 0x30
    return None


def unescape(byte: int) -> int | None:
    """The byte a single-character escape stands for, or None if invalid."""
    return _ESCAPES.get(_check(byte))


def is_literal_end(byte: int) -> bool:
    """Whether the byte ends a bare literal such as true, false or null."""
    return _check(byte) in _LITERAL_ENDS