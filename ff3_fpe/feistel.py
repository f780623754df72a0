import logging

from ff3_fpe.alphabet import reverse_string
from ff3_fpe.block import BLOCK_SIZE, reverse_bytes
from ff3_fpe.errors import InvalidSymbolError, NonNumericInputError, RoundOverflowError
from ff3_fpe.tweak import HALF_TWEAK_LEN

NUM_ROUNDS = 8
PAYLOAD_SIZE = BLOCK_SIZE - HALF_TWEAK_LEN  # bytes of P that carry NUM(REV(B))

logger = logging.getLogger(__name__)

"""
Feistel structure

        u length |  v length
        A block  |  B block

            C <- modulo function

        B' <- C  |  A' <- B


Steps:

Let u = [n/2]
Let v = n - u
Let A = X[1..u]
Let B = X[u+1,n]
Let T(L) = T[0..31] and T(R) = T[32..63]
for i <- 0..7 do
    If is even, let m = u and W = T(R) Else let m = v and W = T(L)
    Let P = REV([NUM<radix>(Rev(B))]^12 || W xor REV(i^4)
    Let Y = CIPH(P)
    Let y = NUM<2>(REV(Y))
    Let c = (NUM<radix>(REV(A)) + y) mod radix^m
    Let C = REV(STR<radix>^m(c))
    Let A = B
    Let B = C
end for
Return A || B

* Where REV(X) reverses the order of characters in the character string X

See NIST SP 800-38G Rev 1 and the sample vectors:

https://nvlpubs.nist.gov/nistpubs/SpecialPublications/NIST.SP.800-38Gr1-draft.pdf
https://csrc.nist.gov/CSRC/media/Projects/Cryptographic-Standards-and-Guidelines/documents/examples/FF3samples.pdf
"""


class FeistelEngine:
    """Runs the eight FF3 rounds over a pair of halves.

    The engine holds only read-only collaborators: the alphabet codec and the
    block cipher. All round state lives in local variables of a single call,
    so one engine can serve concurrent callers.
    """

    def __init__(self, alphabet, block_cipher):
        self.alphabet = alphabet
        self.block_cipher = block_cipher

    def encrypt(self, A, B, Tl, Tr):
        u, v = len(A), len(B)

        # Pre-calculate the modulus since it's only one of 2 values,
        # depending on whether i is even or odd
        modU = self.alphabet.radix**u
        modV = self.alphabet.radix**v
        logger.debug(f"u: {u} v: {v} modU: {modU} modV: {modV}")

        for i in range(NUM_ROUNDS):
            # Determine alternating Feistel round side
            if i % 2 == 0:
                m, W, mod = u, Tr, modU
            else:
                m, W, mod = v, Tl, modV

            y = self.round_value(i, W, B)
            c = (self.half_to_int(A) + y) % mod
            C = self.int_to_half(c, m)

            A = B
            B = C

        return A + B

    def decrypt(self, A, B, Tl, Tr):
        """
        The process of decryption is essentially the same as the encryption process.
        The  differences are  (1)  the  addition  function  is  replaced  by  a
        subtraction function that is its inverse, and (2) the order of the round
        indices (i) is reversed.
        """
        u, v = len(A), len(B)

        modU = self.alphabet.radix**u
        modV = self.alphabet.radix**v
        logger.debug(f"u: {u} v: {v} modU: {modU} modV: {modV}")

        for i in reversed(range(NUM_ROUNDS)):
            if i % 2 == 0:
                m, W, mod = u, Tr, modU
            else:
                m, W, mod = v, Tl, modV

            y = self.round_value(i, W, A)
            c = (self.half_to_int(B) - y) % mod
            C = self.int_to_half(c, m)

            B = A
            A = C

        return A + B

    def round_value(self, i, W, half):
        """Return y, the round function output for round i as an integer."""
        # P is fixed-length 16 bytes
        P = self.calculate_p(i, W, half)
        revP = reverse_bytes(P)

        S = self.block_cipher.encrypt_block(revP)
        S = reverse_bytes(S)

        return int.from_bytes(S, byteorder="big")

    def calculate_p(self, i, W, B):
        # P is always 16 bytes
        P = bytearray(BLOCK_SIZE)

        # Calculate P by XORing W, i into the first 4 bytes of P
        # i only requires 1 byte, rest are 0 padding bytes
        # Anything XOR 0 is itself, so only need to XOR the last byte
        P[0] = W[0]
        P[1] = W[1]
        P[2] = W[2]
        P[3] = W[3] ^ i

        # The remaining 12 bytes of P are for rev(B) with padding
        try:
            BBytes = self.half_to_int(B).to_bytes(PAYLOAD_SIZE, "big")
        except OverflowError as e:
            raise RoundOverflowError(
                f"half of length {len(B)} does not fit in {PAYLOAD_SIZE} bytes"
            ) from e

        P[BLOCK_SIZE - len(BBytes) :] = BBytes
        return bytes(P)

    def half_to_int(self, half):
        """NUM<radix>(REV(half))"""
        try:
            return self.alphabet.parse_as_integer(reverse_string(half))
        except InvalidSymbolError as e:
            raise NonNumericInputError(
                f"string {half} is not within radix {self.alphabet.radix}"
            ) from e

    def int_to_half(self, c, m):
        """REV(STR<radix>^m(c))"""
        return reverse_string(self.alphabet.format_as_string(c, m))
