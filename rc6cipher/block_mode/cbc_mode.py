"""
Cipher Block Chaining (CBC) Mode

Each plaintext block is XORed with the previous ciphertext block (the IV
for the first) before encryption. The chaining value lives only for the
duration of one call.
"""

import logging

from Cryptodome.Util.strxor import strxor

from ..cipher_core.block_cipher import RC6BlockCipher, BLOCK_SIZE
from ..errors import InvalidIVLength
from .ecb_mode import check_ciphertext_length
from .padding import pad, unpad

logger = logging.getLogger(__name__)


def check_iv(iv: bytes) -> None:
    """Raise InvalidIVLength unless iv is exactly one block."""
    if len(iv) != BLOCK_SIZE:
        raise InvalidIVLength(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")


class RC6CBC:
    """CBC mode driver with PKCS#7 padding."""

    def __init__(self, block_cipher: RC6BlockCipher):
        """
        Args:
            block_cipher: The keyed block transform
        """
        self.cipher = block_cipher

    def encrypt(self, plaintext: bytes, iv: bytes) -> bytes:
        """
        Pad and encrypt plaintext.

        Args:
            plaintext: Data of any length
            iv: 16-byte initialization vector

        Returns:
            The ciphertext (the IV is not prepended)

        Raises:
            InvalidIVLength: If the IV is not 16 bytes
        """
        iv = bytes(iv)
        check_iv(iv)

        padded = pad(plaintext)
        logger.debug("CBC encrypting %d blocks", len(padded) // BLOCK_SIZE)

        result = bytearray()
        previous = iv
        for i in range(0, len(padded), BLOCK_SIZE):
            block = strxor(padded[i:i+BLOCK_SIZE], previous)
            previous = self.cipher.encrypt_block(block)
            result.extend(previous)

        return bytes(result)

    def decrypt(self, ciphertext: bytes, iv: bytes, strict_padding: bool = False) -> bytes:
        """
        Decrypt ciphertext and remove its padding.

        Args:
            ciphertext: A non-zero number of whole blocks
            iv: The 16-byte IV used for encryption
            strict_padding: Validate the padding fully

        Returns:
            The plaintext

        Raises:
            InvalidIVLength: If the IV is not 16 bytes
            InvalidInputLength: If ciphertext is empty or not block-aligned
        """
        iv = bytes(iv)
        ciphertext = bytes(ciphertext)
        check_iv(iv)
        check_ciphertext_length(ciphertext)
        logger.debug("CBC decrypting %d blocks", len(ciphertext) // BLOCK_SIZE)

        result = bytearray()
        previous = iv
        for i in range(0, len(ciphertext), BLOCK_SIZE):
            block = ciphertext[i:i+BLOCK_SIZE]
            result.extend(strxor(self.cipher.decrypt_block(block), previous))
            previous = block

        return unpad(result, strict=strict_padding)
