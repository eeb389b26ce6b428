from fractions import Fraction

import pytest

from qedcrypt.baseconv import bit_length, convert_base, int_to_base, int_to_base_fractional


def _digits_value(digits, base):
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def test_zero_gives_single_zero_digit():
    assert int_to_base(0, 10) == [0]


def test_negative_gives_single_zero_digit():
    assert int_to_base(-5, 7) == [0]


def test_hex_digits():
    assert int_to_base(255, 16) == [15, 15]


@pytest.mark.parametrize("number", [1, 9, 10, 12345, 2**200 + 17])
@pytest.mark.parametrize("base", [2, 3, 10, 42, 343])
def test_int_to_base_round_trip(number, base):
    digits = int_to_base(number, base)
    assert all(0 <= d < base for d in digits)
    assert digits[0] != 0
    assert _digits_value(digits, base) == number


def test_decimal_digits_concatenate_to_number():
    assert int("".join(map(str, int_to_base(987654321, 10)))) == 987654321


@pytest.mark.parametrize("base", [0, 1, -3])
def test_int_to_base_rejects_small_base(base):
    with pytest.raises(ValueError):
        int_to_base(10, base)


def test_fractional_zero():
    assert int_to_base_fractional(0, 1.7) == [0.0]


def test_fractional_negative_is_empty():
    assert int_to_base_fractional(-4, 1.7) == []


@pytest.mark.parametrize("number", [1, 2, 17, 1000, 31415926535])
def test_fractional_reconstructs_number(number):
    digits = int_to_base_fractional(number, 1.7)
    total = Fraction(0)
    for power, digit in enumerate(reversed(digits)):
        tenths = round(digit * 10)
        assert 0 <= tenths < 17
        total += Fraction(tenths, 10) * Fraction(17, 10) ** power
    assert total == number


def test_fractional_rejects_tiny_base():
    with pytest.raises(ValueError):
        int_to_base_fractional(5, 0.05)


@pytest.mark.parametrize("number", [0, 1, 77, 10**30])
def test_convert_base_matches_direct_conversion(number):
    assert convert_base(int_to_base(number, 7), 7, 3) == int_to_base(number, 3)


def test_convert_base_empty_is_zero():
    assert convert_base([], 9, 10) == [0]


def test_convert_base_identity():
    digits = [4, 0, 2, 8]
    assert convert_base(digits, 9, 9) == digits


def test_bit_length_small_values():
    assert bit_length(0) == 1
    assert bit_length(1) == 1


def test_bit_length_of_cube_key_width():
    assert bit_length(2 ** (216 * 8) - 2) // 8 == 216


@pytest.mark.parametrize("exponent", [1, 5, 64, 127, 128, 129, 300])
def test_bit_length_powers_of_two(exponent):
    assert bit_length(2**exponent) == exponent + 1
    assert bit_length(2**exponent - 1) == max(1, exponent)