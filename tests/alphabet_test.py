import string

import pytest

from ff3_fpe.alphabet import Alphabet, alphabet_for_radix, reverse_string
from ff3_fpe.errors import InvalidAlphabetError, InvalidSymbolError, RoundOverflowError


@pytest.mark.parametrize(
    "radix, expected",
    [
        (10, string.digits),
        (26, string.ascii_uppercase),
        (36, string.digits + string.ascii_uppercase),
        (16, "0123456789ABCDEF"),
        (2, "01"),
    ],
)
def test_alphabet_for_radix(radix, expected):
    assert alphabet_for_radix(radix) == expected


def test_digit_and_symbol():
    a = Alphabet(string.ascii_uppercase)

    assert a.radix == 26
    assert a.digit_of("A") == 0
    assert a.digit_of("Z") == 25
    assert a.symbol_of(7) == "H"
    assert "Q" in a
    assert "q" not in a

    with pytest.raises(InvalidSymbolError) as e:
        a.digit_of("a")
    assert "char a not found" in str(e.value)

    with pytest.raises(InvalidSymbolError):
        a.symbol_of(26)


def test_repeated_symbols_rejected():
    with pytest.raises(InvalidAlphabetError):
        Alphabet("ABCA")


def test_parse_as_integer():
    assert Alphabet(string.digits).parse_as_integer("00123") == 123
    assert Alphabet("01").parse_as_integer("1010") == 10
    assert Alphabet("0123456789abcdef").parse_as_integer("ff") == 255
    assert Alphabet(string.ascii_uppercase).parse_as_integer("BA") == 26

    big = "9" * 40
    assert Alphabet(string.digits).parse_as_integer(big) == 10**40 - 1

    with pytest.raises(InvalidSymbolError):
        Alphabet(string.digits).parse_as_integer("12a4")


def test_format_as_string():
    digits = Alphabet(string.digits)

    assert digits.format_as_string(123, 5) == "00123"
    assert digits.format_as_string(0, 3) == "000"
    assert digits.format_as_string(999, 3) == "999"
    assert Alphabet(string.ascii_uppercase).format_as_string(26, 4) == "AABA"
    assert Alphabet("0123456789abcdef").format_as_string(255, 2) == "ff"


def test_format_overflow():
    with pytest.raises(RoundOverflowError):
        Alphabet(string.digits).format_as_string(1000, 3)


def test_validate():
    a = Alphabet(string.digits)
    a.validate("0123456789")

    with pytest.raises(InvalidSymbolError) as e:
        a.validate("0123x56789")
    assert "char x at position 4" in str(e.value)


def test_reverse_string():
    assert reverse_string("12345") == "54321"
    assert reverse_string("") == ""
