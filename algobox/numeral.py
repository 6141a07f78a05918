"""Conversions between number bases and to Roman numerals.

Binary and octal values are represented, as in everyday notation, by integers
whose decimal digits are the digits in that base (binary 101 is the int 101).
"""

from __future__ import annotations

_HEX_DIGITS = "0123456789ABCDEF"


def _from_digits(n: int, base: int) -> int:
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    result = 0
    weight = 1
    while n > 0:
        n, digit = divmod(n, 10)
        if digit >= base:
            raise ValueError(f"digit {digit} is not valid in base {base}")
        result += digit * weight
        weight *= base
    return result


def _to_digits(n: int, base: int) -> list[int]:
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    digits: list[int] = []
    while True:
        n, digit = divmod(n, base)
        digits.append(digit)
        if n == 0:
            return digits[::-1]


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary number."""
    return _from_digits(n, 2)


def octal_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as an octal number."""
    return _from_digits(n, 8)


def decimal_to_binary(n: int) -> int:
    """Write ``n`` in binary, returned as an int of 0 and 1 digits."""
    return int("".join(map(str, _to_digits(n, 2))))


def decimal_to_octal(n: int) -> int:
    """Write ``n`` in octal, returned as an int of octal digits."""
    return int("".join(map(str, _to_digits(n, 8))))


def decimal_to_hexadecimal(n: int) -> str:
    """Write ``n`` in upper-case hexadecimal."""
    return "".join(_HEX_DIGITS[digit] for digit in _to_digits(n, 16))


def hexadecimal_to_decimal(text: str) -> int:
    """Parse a hexadecimal string; letters may be in either case."""
    result = 0
    for char in text.upper():
        digit = _HEX_DIGITS.find(char)
        if digit < 0:
            raise ValueError(f"invalid hexadecimal digit {char!r}")
        result = result * 16 + digit
    return result


_ROMAN_PLACES = (("I", "V", "X"), ("X", "L", "C"), ("C", "D", "M"), ("M", "", ""))
_ROMAN_PATTERNS = ("", "1", "11", "111", "15", "5", "51", "511", "5111", "1X")


def int_to_roman(num: int) -> str:
    """Write ``num`` (0 to 3999) in Roman numerals; zero gives an empty string."""
    if not 0 <= num <= 3999:
        raise ValueError(f"Roman numerals cover 0 to 3999, got {num}")
    parts: list[str] = []
    for one, five, ten in _ROMAN_PLACES:
        num, digit = divmod(num, 10)
        symbols = {"1": one, "5": five, "X": ten}
        parts.append("".join(symbols[mark] for mark in _ROMAN_PATTERNS[digit]))
        if num == 0:
            break
    return "".join(reversed(parts))