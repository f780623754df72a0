from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ff3_fpe.errors import CipherInitError

BLOCK_SIZE = 16  # AES block size in bytes


def reverse_bytes(data):
    """Reverse the bytes in the input data."""
    return bytes(data[::-1])


class AESBlockCipher:
    """Forward-only AES-ECB over single 16 byte blocks.

    FF3 keys AES with the byte-reversed key. The reversal happens once here;
    the per-block reversals are done by the caller around encrypt_block.
    Feistel decryption uses the same forward direction, so no decryptor is
    ever built.
    """

    def __init__(self, key: bytes):
        self._key = reverse_bytes(key)
        try:
            self._cipher = Cipher(
                algorithms.AES(self._key), modes.ECB(), backend=default_backend()
            )
        except (ValueError, UnsupportedAlgorithm) as e:
            raise CipherInitError(f"unable to initialize AES: {e}") from e

    def encrypt_block(self, data: bytes) -> bytes:
        """
        Encrypts one block with AES ECB under the reversed key.

        :param data: The plaintext block as bytes. Must be exactly 16 bytes.
        :return: The ciphertext block as bytes.
        """
        if len(data) != BLOCK_SIZE:
            raise ValueError(
                f"Data must be exactly {BLOCK_SIZE} bytes for AES ECB encryption"
            )
        # Encryptor contexts are stateful, so each block gets its own.
        encryptor = self._cipher.encryptor()
        return encryptor.update(bytes(data)) + encryptor.finalize()
