"""
Electronic Codebook (ECB) Mode

Each block is encrypted independently, so whole buffers are handed to the
vectorised block transform in one call.
"""

import logging

from ..cipher_core.block_cipher import RC6BlockCipher, BLOCK_SIZE
from ..errors import InvalidInputLength
from .padding import pad, unpad

logger = logging.getLogger(__name__)


def check_ciphertext_length(ciphertext: bytes) -> None:
    """
    Raise InvalidInputLength unless ciphertext is a positive number of
    whole blocks.
    """
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise InvalidInputLength(
            f"Ciphertext length must be a non-zero multiple of {BLOCK_SIZE}, got {len(ciphertext)}"
        )


class RC6ECB:
    """ECB mode driver with PKCS#7 padding."""

    def __init__(self, block_cipher: RC6BlockCipher):
        """
        Args:
            block_cipher: The keyed block transform
        """
        self.cipher = block_cipher

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Pad and encrypt plaintext.

        Args:
            plaintext: Data of any length

        Returns:
            The ciphertext, always at least one block
        """
        padded = pad(plaintext)
        logger.debug("ECB encrypting %d blocks", len(padded) // BLOCK_SIZE)
        return self.cipher.encrypt_blocks(padded)

    def decrypt(self, ciphertext: bytes, strict_padding: bool = False) -> bytes:
        """
        Decrypt ciphertext and remove its padding.

        Args:
            ciphertext: A non-zero number of whole blocks
            strict_padding: Validate the padding fully

        Returns:
            The plaintext

        Raises:
            InvalidInputLength: If ciphertext is empty or not block-aligned
        """
        ciphertext = bytes(ciphertext)
        check_ciphertext_length(ciphertext)
        logger.debug("ECB decrypting %d blocks", len(ciphertext) // BLOCK_SIZE)
        return unpad(self.cipher.decrypt_blocks(ciphertext), strict=strict_padding)
