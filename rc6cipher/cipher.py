"""
RC6 Cipher

This module provides the public RC6 interface: one key schedule per key,
and encryption/decryption in ECB and CBC modes with PKCS#7 padding.
"""

import os
from typing import Tuple

from .config import RC6_DEFAULT_PARAMS
from .errors import EmptyKey, InvalidRoundCount
from .cipher_core.block_cipher import RC6BlockCipher
from .key_schedule.rc6_key_schedule import expand_key
from .block_mode.ecb_mode import RC6ECB
from .block_mode.cbc_mode import RC6CBC


class RC6:
    """
    RC6-32/r block cipher with a 128-bit block and a variable-length key.

    The key schedule is derived once at construction and never modified, so
    an instance may be shared between threads.
    """

    def __init__(self, key: bytes, rounds: int = RC6_DEFAULT_PARAMS['rounds']):
        """
        Initialize the cipher.

        Args:
            key: The user key (16, 24 or 32 bytes recommended)
            rounds: Number of rounds (default: 20)

        Raises:
            EmptyKey: If the key is empty
            InvalidRoundCount: If rounds is not a positive integer
        """
        if len(key) == 0:
            raise EmptyKey("Key cannot be empty")
        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
            raise InvalidRoundCount(f"Rounds must be a positive integer, got {rounds!r}")

        self._rounds = rounds
        self._block_cipher = RC6BlockCipher(expand_key(bytes(key), rounds), rounds)
        self._ecb = RC6ECB(self._block_cipher)
        self._cbc = RC6CBC(self._block_cipher)

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def key_schedule(self) -> Tuple[int, ...]:
        return self._block_cipher.key_schedule

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt a single 16-byte block."""
        return self._block_cipher.encrypt_block(bytes(block))

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt a single 16-byte block."""
        return self._block_cipher.decrypt_block(bytes(block))

    def encrypt_ecb(self, plaintext: bytes) -> bytes:
        """
        Encrypt plaintext in ECB mode.

        Args:
            plaintext: Data of any length

        Returns:
            The padded ciphertext
        """
        return self._ecb.encrypt(plaintext)

    def decrypt_ecb(self, ciphertext: bytes, strict_padding: bool = False) -> bytes:
        """
        Decrypt ECB ciphertext.

        Args:
            ciphertext: A non-zero multiple of 16 bytes
            strict_padding: Reject malformed padding instead of trimming by
                the last byte

        Returns:
            The plaintext

        Raises:
            InvalidInputLength: If the ciphertext length is invalid
        """
        return self._ecb.decrypt(ciphertext, strict_padding=strict_padding)

    def encrypt_cbc(self, plaintext: bytes, iv: bytes) -> bytes:
        """
        Encrypt plaintext in CBC mode.

        Args:
            plaintext: Data of any length
            iv: 16-byte initialization vector

        Returns:
            The padded ciphertext

        Raises:
            InvalidIVLength: If the IV is not 16 bytes
        """
        return self._cbc.encrypt(plaintext, iv)

    def decrypt_cbc(self, ciphertext: bytes, iv: bytes, strict_padding: bool = False) -> bytes:
        """
        Decrypt CBC ciphertext.

        Args:
            ciphertext: A non-zero multiple of 16 bytes
            iv: The 16-byte IV used for encryption
            strict_padding: Reject malformed padding instead of trimming by
                the last byte

        Returns:
            The plaintext

        Raises:
            InvalidIVLength: If the IV is not 16 bytes
            InvalidInputLength: If the ciphertext length is invalid
        """
        return self._cbc.decrypt(ciphertext, iv, strict_padding=strict_padding)

    def __repr__(self) -> str:
        return f"RC6(rounds={self._rounds})"


def generate_iv() -> bytes:
    """Generate a random 16-byte CBC initialization vector."""
    return os.urandom(RC6_DEFAULT_PARAMS['iv_size'])


if __name__ == "__main__":
    from .config import configure_logging
    from .key_schedule.rc6_key_schedule import generate_key

    configure_logging()

    key = generate_key(16)
    iv = generate_iv()
    plaintext = b"This is a test message for RC6 in CBC and ECB mode."
    cipher = RC6(key)

    ecb_ciphertext = cipher.encrypt_ecb(plaintext)
    cbc_ciphertext = cipher.encrypt_cbc(plaintext, iv)

    print(f"Key: {key.hex()}")
    print(f"IV: {iv.hex()}")
    print(f"Plaintext: {plaintext}")
    print(f"ECB ciphertext: {ecb_ciphertext.hex()}")
    print(f"CBC ciphertext: {cbc_ciphertext.hex()}")

    assert cipher.decrypt_ecb(ecb_ciphertext) == plaintext
    assert cipher.decrypt_cbc(cbc_ciphertext, iv) == plaintext

    print("RC6 mode tests completed successfully!")
