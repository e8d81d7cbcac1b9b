import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from flexon.fast_float.limits import INFINITE_POWER
from flexon.fast_float.simple import parse_long_mantissa


def _to_float(am) -> float:
    bits = am.mantissa | (am.power2 << 52)
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


@pytest.mark.parametrize(
    "text",
    [
        "1.5",
        "0.1",
        "123456.789e3",
        "2.2250738585072014e-308",
        "1.7976931348623157e308",
        "5e-324",
        "9007199254740993",
        "0.1000000000000000055511151231257827021181583404541015625",
        "123456789012345678901234567890",
    ],
)
def test_matches_correctly_rounded_float(text):
    am = parse_long_mantissa(text.encode(), 0)
    assert _to_float(am) == float(text)


@given(st.floats(min_value=0.0, allow_nan=False, allow_infinity=False))
def test_round_trips_repr(value):
    am = parse_long_mantissa(repr(value), 0)
    assert _to_float(am) == value


@given(st.text("0123456789", min_size=1, max_size=40), st.integers(-350, 320))
def test_long_digit_strings(digits, exponent):
    text = f"1.{digits}e{exponent}"
    assert _to_float(parse_long_mantissa(text, 0)) == float(text)


def test_negative_number_gives_magnitude():
    assert _to_float(parse_long_mantissa(b"-2.5", 0)) == 2.5


def test_offset_into_document():
    assert _to_float(parse_long_mantissa(b'{"a": 0.25}', 6)) == 0.25


def test_overflow_gives_infinity():
    am = parse_long_mantissa(b"1e400", 0)
    assert am.power2 == INFINITE_POWER
    assert am.mantissa == 0


def test_underflow_gives_zero():
    am = parse_long_mantissa(b"1e-400", 0)
    assert (am.mantissa, am.power2) == (0, 0)


def test_zero():
    am = parse_long_mantissa(b"0", 0)
    assert (am.mantissa, am.power2) == (0, 0)


def test_empty_source_rejected():
    with pytest.raises(ValueError):
        parse_long_mantissa(b"", 0)