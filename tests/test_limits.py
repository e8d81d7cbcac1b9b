from hypothesis import given, strategies as st

from flexon.fast_float.limits import pow10_fast_path


def test_exact_powers_of_ten():
    for exponent in range(23):
        assert pow10_fast_path(exponent) == float(f"1e{exponent}")


def test_largest_exact_power():
    assert pow10_fast_path(22) == 1e22


def test_entries_past_22_are_zero():
    for exponent in range(23, 32):
        assert pow10_fast_path(exponent) == 0.0


@given(st.integers(min_value=0, max_value=10_000))
def test_exponent_is_masked_to_five_bits(exponent):
    assert pow10_fast_path(exponent) == pow10_fast_path(exponent % 32)