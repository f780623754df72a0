# Package ff3_fpe implements the FF3 and FF3-1 format-preserving encryption
# algorithms on top of the cryptography package

import logging
import math

from ff3_fpe.alphabet import Alphabet
from ff3_fpe.block import AESBlockCipher
from ff3_fpe.config import CipherConfig
from ff3_fpe.errors import InvalidLengthError
from ff3_fpe.feistel import FeistelEngine
from ff3_fpe.tweak import parse_tweak, split_tweak

logger = logging.getLogger(__name__)

"""
FF3 encodes a string within a range of minLen..maxLen. SP 800-38G uses an alternating
Feistel with the following parameters:
    A fixed 128 bit block size
    128, 192 or 256 bit key length
    Cipher Block Chain (CBC-MAC) round function
    64-bit (FF3) or 56-bit (FF3-1)tweak
    eight (8) rounds
    Modulo addition

Instead of specifying the radix, an alphabet may be specified as a string of unique
characters. Radix 10, 26 and 36 select the digits, the upper-case letters and the
digits followed by the upper-case letters.

AES ECB is used as the cipher round value for XORing. ECB has a block size of 128 bits
(i.e 16 bytes) and is padded with zeros for blocks smaller than this size. ECB is used
only in encrypt mode to generate this XOR value. A Feistel decryption uses the same ECB
encrypt value to decrypt the text.
"""


class FF3Cipher:
    """Class FF3Cipher implements the FF3 format-preserving encryption algorithm.

    The instance is not modified after construction. A tweak passed to
    encrypt or decrypt applies to that call only, so one cipher can be shared
    between threads.
    """

    def __init__(self, key, tweak, radix=10):
        self.config = CipherConfig.from_hex(key, radix)
        self._tweak = parse_tweak(tweak)
        self._alphabet = Alphabet(self.config.alphabet)
        self._engine = FeistelEngine(self._alphabet, AESBlockCipher(self.config.key))

    # factory method to create a FF3Cipher object with a custom alphabet
    @staticmethod
    def withCustomAlphabet(key, tweak, alphabet):
        return FF3Cipher(key, tweak, alphabet)

    @property
    def radix(self):
        return self.config.radix

    @property
    def alphabet(self):
        return self.config.alphabet

    @property
    def min_len(self):
        return self.config.min_len

    @property
    def max_len(self):
        return self.config.max_len

    @property
    def tweak(self):
        return self._tweak.hex()

    def encrypt(self, plaintext, tweak=None):
        """Encrypts the plaintext string and returns a ciphertext of the same length
        and format"""
        tweakBytes = self._tweak if tweak is None else parse_tweak(tweak)
        A, B, Tl, Tr = self._prepare(plaintext, tweakBytes)
        return self._engine.encrypt(A, B, Tl, Tr)

    def decrypt(self, ciphertext, tweak=None):
        """Decrypts the ciphertext string and returns a plaintext of the same length
        and format"""
        tweakBytes = self._tweak if tweak is None else parse_tweak(tweak)
        A, B, Tl, Tr = self._prepare(ciphertext, tweakBytes)
        return self._engine.decrypt(A, B, Tl, Tr)

    # EncryptWithTweak allows a parameter tweak instead of the current Cipher's tweak

    def encrypt_with_tweak(self, plaintext, tweak):
        return self.encrypt(plaintext, tweak)

    def decrypt_with_tweak(self, ciphertext, tweak):
        return self.decrypt(ciphertext, tweak)

    def _prepare(self, text, tweakBytes):
        n = len(text)

        # Check if message length is within minLength and maxLength bounds
        if (n < self.min_len) or (n > self.max_len):
            raise InvalidLengthError(
                f"message length {n} is not within min {self.min_len} and "
                f"max {self.max_len} bounds"
            )

        # Check message is in current radix
        self._alphabet.validate(text)

        Tl, Tr = split_tweak(tweakBytes)

        # Calculate split point
        u = math.ceil(n / 2)

        # Split the message
        return text[:u], text[u:], Tl, Tr
