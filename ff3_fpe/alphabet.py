import string

from ff3_fpe.errors import InvalidAlphabetError, InvalidSymbolError, RoundOverflowError

RADIX_MIN = 2
RADIX_MAX = 36

DIGITS = string.digits
UPPERCASE = string.ascii_uppercase
ALPHANUMERIC = string.digits + string.ascii_uppercase

CANONICAL_ALPHABETS = {
    10: DIGITS,
    26: UPPERCASE,
    36: ALPHANUMERIC,
}


def alphabet_for_radix(radix):
    """Return the built-in alphabet for an integer radix.

    10, 26 and 36 map to digits, upper-case letters and digits + upper-case
    letters. Any other radix uses that many leading symbols of the base 36
    alphabet. Range checks are left to the caller.
    """
    if radix in CANONICAL_ALPHABETS:
        return CANONICAL_ALPHABETS[radix]
    return ALPHANUMERIC[:radix]


def reverse_string(s):
    """Reverse the order of the symbols in s."""
    return s[::-1]


class Alphabet:
    """Maps the symbols of a radix-R alphabet to the digits 0..R-1 and back.

    The position of a symbol in the alphabet string is its digit value, so the
    first symbol plays the role of zero when padding.
    """

    def __init__(self, symbols: str):
        if len(set(symbols)) != len(symbols):
            raise InvalidAlphabetError(
                f"alphabet {symbols!r} contains repeated symbols"
            )
        self.symbols = symbols
        self.radix = len(symbols)
        self._digits = {symbol: digit for digit, symbol in enumerate(symbols)}

    def __repr__(self):
        return f"Alphabet({self.symbols!r})"

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.symbols == other.symbols

    def __hash__(self):
        return hash(self.symbols)

    def __contains__(self, symbol):
        return symbol in self._digits

    def digit_of(self, symbol: str) -> int:
        try:
            return self._digits[symbol]
        except KeyError:
            raise InvalidSymbolError(
                f"char {symbol} not found in alphabet {self.symbols}"
            ) from None

    def symbol_of(self, digit: int) -> str:
        if not 0 <= digit < self.radix:
            raise InvalidSymbolError(
                f"digit {digit} is outside radix {self.radix}"
            )
        return self.symbols[digit]

    def validate(self, text: str):
        """Raise InvalidSymbolError if text holds a symbol outside the alphabet."""
        for pos, char in enumerate(text):
            if char not in self._digits:
                raise InvalidSymbolError(
                    f"char {char} at position {pos} is not supported in the "
                    f"current radix {self.radix}"
                )

    def parse_as_integer(self, text: str) -> int:
        """Read text, most significant symbol first, as a base-radix integer."""
        num = 0
        for char in text:
            num = num * self.radix + self.digit_of(char)
        return num

    def format_as_string(self, value: int, width: int) -> str:
        """Render value in base radix, most significant symbol first.

        The digits are produced least significant first, then reversed and
        left-padded with the zero symbol to exactly width symbols.
        """
        if value < 0:
            raise ValueError(f"cannot format negative value {value}")

        x = []
        while value >= self.radix:
            value, b = divmod(value, self.radix)
            x.append(self.symbols[b])
        x.append(self.symbols[value])

        if len(x) > width:
            raise RoundOverflowError(
                f"value needs {len(x)} digits but width is {width}"
            )

        return "".join(reversed(x)).rjust(width, self.symbols[0])
