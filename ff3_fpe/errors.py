"""Exceptions raised by the FF3 cipher.

Every error is a ``ValueError`` so callers that guard on input problems with
``except ValueError`` keep working.
"""


class FF3Error(ValueError):
    """Base class for all FF3 errors."""


class InvalidHexError(FF3Error):
    """A key or tweak is not a valid hex string."""


class InvalidKeyLengthError(FF3Error):
    pass


class InvalidRadixError(FF3Error):
    pass


class InvalidAlphabetError(InvalidRadixError):
    """The alphabet repeats a symbol."""


class InvalidRadixDomainError(FF3Error):
    pass


class CipherInitError(FF3Error):
    """The AES primitive could not be set up for the given key."""


class InvalidTweakLengthError(FF3Error):
    pass


class InvalidLengthError(FF3Error):
    pass


class InvalidSymbolError(FF3Error):
    pass


class NonNumericInputError(InvalidSymbolError):
    """A Feistel half holds a symbol that is not a digit in the radix."""


class RoundOverflowError(FF3Error):
    """A value needs more digits (or bytes) than its fixed width allows."""
