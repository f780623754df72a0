from ff3_fpe.algo import FF3Cipher
from ff3_fpe.alphabet import Alphabet, alphabet_for_radix
from ff3_fpe.config import CipherConfig
from ff3_fpe.errors import (
    CipherInitError,
    FF3Error,
    InvalidAlphabetError,
    InvalidHexError,
    InvalidKeyLengthError,
    InvalidLengthError,
    InvalidRadixDomainError,
    InvalidRadixError,
    InvalidSymbolError,
    InvalidTweakLengthError,
    NonNumericInputError,
    RoundOverflowError,
)

__all__ = [
    "Alphabet",
    "CipherConfig",
    "CipherInitError",
    "FF3Cipher",
    "FF3Error",
    "InvalidAlphabetError",
    "InvalidHexError",
    "InvalidKeyLengthError",
    "InvalidLengthError",
    "InvalidRadixDomainError",
    "InvalidRadixError",
    "InvalidSymbolError",
    "InvalidTweakLengthError",
    "NonNumericInputError",
    "RoundOverflowError",
    "alphabet_for_radix",
]
