import pytest

from algobox import numeral

NUMBERS = [0, 1, 2, 7, 8, 15, 16, 255, 256, 1000, 4095, 65535, 123456]

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _roman_value(text):
    total = 0
    values = [_ROMAN[char] for char in text]
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


@pytest.mark.parametrize("n", NUMBERS)
def test_binary_matches_builtin(n):
    assert numeral.decimal_to_binary(n) == int(format(n, "b"))
    assert numeral.binary_to_decimal(int(format(n, "b"))) == n


@pytest.mark.parametrize("n", NUMBERS)
def test_octal_matches_builtin(n):
    assert numeral.decimal_to_octal(n) == int(format(n, "o"))
    assert numeral.octal_to_decimal(int(format(n, "o"))) == n


@pytest.mark.parametrize("n", NUMBERS)
def test_hexadecimal_matches_builtin(n):
    assert numeral.decimal_to_hexadecimal(n) == format(n, "X")
    assert numeral.hexadecimal_to_decimal(format(n, "X")) == n


@pytest.mark.parametrize("n", NUMBERS)
def test_round_trips(n):
    assert numeral.binary_to_decimal(numeral.decimal_to_binary(n)) == n
    assert numeral.octal_to_decimal(numeral.decimal_to_octal(n)) == n
    assert numeral.hexadecimal_to_decimal(numeral.decimal_to_hexadecimal(n)) == n


def test_hexadecimal_accepts_lower_case():
    assert numeral.hexadecimal_to_decimal("beef") == numeral.hexadecimal_to_decimal("BEEF")


def test_hexadecimal_empty_is_zero():
    assert numeral.hexadecimal_to_decimal("") == 0


def test_hexadecimal_rejects_invalid_digit():
    with pytest.raises(ValueError):
        numeral.hexadecimal_to_decimal("1G")


@pytest.mark.parametrize("n", [12, 102, 2])
def test_binary_rejects_invalid_digit(n):
    with pytest.raises(ValueError):
        numeral.binary_to_decimal(n)


def test_octal_rejects_invalid_digit():
    with pytest.raises(ValueError):
        numeral.octal_to_decimal(18)


@pytest.mark.parametrize(
    "func",
    [
        numeral.binary_to_decimal,
        numeral.octal_to_decimal,
        numeral.decimal_to_binary,
        numeral.decimal_to_octal,
        numeral.decimal_to_hexadecimal,
    ],
)
def test_negative_rejected(func):
    with pytest.raises(ValueError):
        func(-5)


def test_roman_round_trip_full_range():
    for n in range(1, 4000):
        text = numeral.int_to_roman(n)
        assert set(text) <= set(_ROMAN)
        assert _roman_value(text) == n


def test_roman_known_values():
    assert numeral.int_to_roman(1994) == "MCMXCIV"
    assert numeral.int_to_roman(3999) == "MMMCMXCIX"
    assert numeral.int_to_roman(4) == "IV"


def test_roman_thousands_are_repeated_m():
    for k in range(1, 4):
        assert numeral.int_to_roman(1000 * k) == "M" * k


def test_roman_zero_is_empty():
    assert numeral.int_to_roman(0) == ""


@pytest.mark.parametrize("n", [-1, 4000])
def test_roman_out_of_range(n):
    with pytest.raises(ValueError):
        numeral.int_to_roman(n)