import logging
from dataclasses import dataclass, field

from ff3_fpe.alphabet import RADIX_MAX, RADIX_MIN, Alphabet, alphabet_for_radix
from ff3_fpe.errors import (
    InvalidHexError,
    InvalidKeyLengthError,
    InvalidRadixDomainError,
    InvalidRadixError,
)

# The recommendation in Draft SP 800-38G was strengthened to a requirement in Draft
# SP 800-38G Revision 1: the minimum domain size for FF1 and FF3-1 is one million.
DOMAIN_MIN = 1_000_000
MAX_DOMAIN_BITS = 96
KEY_LENGTHS = (16, 24, 32)

logger = logging.getLogger(__name__)


def min_length_for_radix(radix):
    """Smallest n with radix^n >= DOMAIN_MIN, i.e. ceil(log[radix](DOMAIN_MIN))."""
    n = 0
    while radix**n < DOMAIN_MIN:
        n += 1
    return n


def max_length_for_radix(radix):
    """2 * floor(log[radix](2^96)), computed without floating point."""
    m = 0
    while radix ** (m + 1) <= 2**MAX_DOMAIN_BITS:
        m += 1
    return 2 * m


def check_domain(min_len, max_len):
    # Make sure 2 <= minLength <= maxLength
    if (min_len < 2) or (max_len < min_len):
        raise InvalidRadixDomainError(
            f"minLen {min_len} or maxLen {max_len} invalid, adjust your radix"
        )


def decode_key(key: str) -> bytes:
    try:
        return bytes.fromhex(key)
    except (TypeError, ValueError) as e:
        raise InvalidHexError("key is not a valid hex string") from e


@dataclass(frozen=True)
class CipherConfig:
    """Validated, immutable parameters of an FF3 cipher instance."""

    radix: int
    alphabet: str
    key: bytes = field(repr=False)
    min_len: int
    max_len: int

    @classmethod
    def from_hex(cls, key: str, radix=10):
        return cls.create(decode_key(key), radix)

    @classmethod
    def create(cls, key: bytes, radix=10):
        """Build a config from raw key bytes and a radix or alphabet string.

        If radix is an int, the matching built-in alphabet is used. If it is a
        string, it is taken as the alphabet and its length becomes the radix.
        """
        klen = len(key)

        # Check if the key is 128, 192, or 256 bits = 16, 24, or 32 bytes
        if klen not in KEY_LENGTHS:
            raise InvalidKeyLengthError(
                f"key length is {klen} bytes but must be 128, 192, or 256 bits"
            )

        if isinstance(radix, str):
            alphabet = radix
        elif isinstance(radix, int) and not isinstance(radix, bool):
            alphabet = None
        else:
            raise InvalidRadixError(
                f"radix must be an int or an alphabet string, not {type(radix).__name__}"
            )

        r = len(alphabet) if alphabet is not None else radix

        # While FF3 allows radices in [2, 2^16], the supported range is 2..36
        if (r < RADIX_MIN) or (r > RADIX_MAX):
            raise InvalidRadixError(
                f"radix must be between {RADIX_MIN} and {RADIX_MAX}, inclusive"
            )

        if alphabet is None:
            alphabet = alphabet_for_radix(r)
        # Rejects repeated symbols
        Alphabet(alphabet)

        # Calculate range of supported message lengths [minLen..maxLen]
        # per SP 800-38G Rev 1, radix^minLength >= 1,000,000.
        min_len = min_length_for_radix(r)
        max_len = max_length_for_radix(r)
        check_domain(min_len, max_len)

        logger.debug(f"radix: {r} minLen: {min_len} maxLen: {max_len}")
        return cls(
            radix=r, alphabet=alphabet, key=bytes(key), min_len=min_len, max_len=max_len
        )
