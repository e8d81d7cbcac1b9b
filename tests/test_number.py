import math

from hypothesis import given, strategies as st

from flexon.fast_float.limits import MAX_MANTISSA_FAST_PATH
from flexon.fast_float.number import Number

mantissas = st.integers(min_value=0, max_value=MAX_MANTISSA_FAST_PATH)


@given(mantissas, st.integers(min_value=-22, max_value=22))
def test_normal_fast_path_is_correctly_rounded(mantissa, exponent):
    result = Number(exponent, mantissa).try_fast_path()
    assert result == float(f"{mantissa}e{exponent}")


@given(mantissas, st.integers(min_value=-22, max_value=22))
def test_negative_flips_sign(mantissa, exponent):
    result = Number(exponent, mantissa, negative=True).try_fast_path()
    assert result == -float(f"{mantissa}e{exponent}")
    assert math.copysign(1.0, result) == -1.0


@given(st.data())
def test_disguised_fast_path_is_correctly_rounded(data):
    exponent = data.draw(st.integers(min_value=23, max_value=37))
    limit = MAX_MANTISSA_FAST_PATH // 10 ** (exponent - 22)
    mantissa = data.draw(st.integers(min_value=0, max_value=limit))
    result = Number(exponent, mantissa).try_fast_path()
    assert result == float(f"{mantissa}e{exponent}")


def test_disguised_fast_path_overflow_gives_none():
    assert Number(37, MAX_MANTISSA_FAST_PATH).try_fast_path() is None


def test_disguised_fast_path_u64_overflow_gives_none():
    number = Number(37, MAX_MANTISSA_FAST_PATH)
    assert number.is_fast_path() is True
    assert number.try_fast_path() is None


def test_many_digits_disables_fast_path():
    number = Number(0, 1, many_digits=True)
    assert number.is_fast_path() is False
    assert number.try_fast_path() is None


def test_exponent_bounds():
    assert Number(-22, 1).is_fast_path() is True
    assert Number(-23, 1).try_fast_path() is None
    assert Number(37, 1).is_fast_path() is True
    assert Number(38, 1).try_fast_path() is None


def test_mantissa_bound():
    assert Number(0, MAX_MANTISSA_FAST_PATH).try_fast_path() == float(MAX_MANTISSA_FAST_PATH)
    assert Number(0, MAX_MANTISSA_FAST_PATH + 1).try_fast_path() is None


def test_negative_zero():
    result = Number(0, 0, negative=True).try_fast_path()
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0