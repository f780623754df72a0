import logging

from ff3_fpe.errors import InvalidHexError, InvalidTweakLengthError

TWEAK_LEN = 8  # Original FF3 tweak length
TWEAK_LEN_NEW = 7  # FF3-1 tweak length
HALF_TWEAK_LEN = TWEAK_LEN // 2

logger = logging.getLogger(__name__)


def parse_tweak(tweak: str) -> bytes:
    """Decode a hex tweak. The length is checked per call by split_tweak."""
    try:
        return bytes.fromhex(tweak)
    except (TypeError, ValueError) as e:
        raise InvalidHexError(f"tweak {tweak!r} is not a valid hex string") from e


def calculate_tweak64_ff3_1(tweak56):
    """Expand a 56-bit FF3-1 tweak into the 64-bit layout FF3 splits in two.

    Tl is T[0..27] + 0000 and Tr is T[32..55] + T[28..31] + 0000.
    """
    tweak64 = bytearray(TWEAK_LEN)
    tweak64[0] = tweak56[0]
    tweak64[1] = tweak56[1]
    tweak64[2] = tweak56[2]
    tweak64[3] = tweak56[3] & 0xF0
    tweak64[4] = tweak56[4]
    tweak64[5] = tweak56[5]
    tweak64[6] = tweak56[6]
    tweak64[7] = (tweak56[3] & 0x0F) << 4
    return bytes(tweak64)


def split_tweak(tweak_bytes: bytes):
    """Return the (Tl, Tr) round tweaks, 4 bytes each."""
    # Make sure the length of tweak in bytes is 7 or 8 (56 or 64 bits)
    if len(tweak_bytes) not in (TWEAK_LEN_NEW, TWEAK_LEN):
        raise InvalidTweakLengthError(
            f"tweak length {len(tweak_bytes)} invalid: tweak must be "
            f"{TWEAK_LEN_NEW * 8} or {TWEAK_LEN * 8} bits"
        )

    if len(tweak_bytes) == TWEAK_LEN_NEW:
        # FF3-1
        tweak64 = calculate_tweak64_ff3_1(tweak_bytes)
    else:
        tweak64 = bytes(tweak_bytes)

    logger.debug(f"tweak: {tweak_bytes.hex()}, tweak64: {tweak64.hex()}")
    return tweak64[:HALF_TWEAK_LEN], tweak64[HALF_TWEAK_LEN:]
