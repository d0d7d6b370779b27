"""
Block Cipher Implementation

This module provides the core RC6 block transform: four 32-bit registers,
pre- and post-whitening, and rounds built from the quadratic function
B * (2B + 1), fixed and data-dependent rotations, and modular addition of
round keys.

Single blocks are processed with Python integers masked to 32 bits. Runs of
independent blocks (as in ECB) are processed column-wise with numpy uint32
arrays, whose arithmetic wraps modulo 2^32 natively.
"""

from typing import Sequence, Tuple

import numpy as np

from ..config import RC6_DEFAULT_PARAMS
from ..errors import InvalidBlockSize
from ..key_schedule.rc6_key_schedule import expand_key, schedule_length
from ..key_schedule.words import WORD_MASK, bytes_to_words, words_to_bytes, rotate_left, rotate_right

BLOCK_SIZE = RC6_DEFAULT_PARAMS['block_size']
LG_W = 5  # log2 of the word size

_LG_W = np.uint32(LG_W)
_ROT_MASK = np.uint32(31)
_WORD_BITS = np.uint32(32)


def _rotl(x: np.ndarray, n) -> np.ndarray:
    """Rotate each uint32 in x left by n (array or scalar) modulo 32."""
    n = n & _ROT_MASK
    return (x << n) | (x >> ((_WORD_BITS - n) & _ROT_MASK))


def _rotr(x: np.ndarray, n) -> np.ndarray:
    """Rotate each uint32 in x right by n (array or scalar) modulo 32."""
    n = n & _ROT_MASK
    return (x >> n) | (x << ((_WORD_BITS - n) & _ROT_MASK))


def _split_columns(data: bytes) -> Tuple[np.ndarray, ...]:
    words = np.frombuffer(data, dtype='<u4').reshape(-1, 4)
    return tuple(words[:, k].astype(np.uint32) for k in range(4))


def _join_columns(A, B, C, D) -> bytes:
    return np.stack([A, B, C, D], axis=1).astype('<u4').tobytes()


class RC6BlockCipher:
    """
    RC6-32/r block transform over 128-bit blocks using an expanded
    key schedule.
    """

    def __init__(self, key_schedule: Sequence[int], num_rounds: int = RC6_DEFAULT_PARAMS['rounds']):
        """
        Initialize the block transform.

        Args:
            key_schedule: The 2 * (num_rounds + 2) round-key words
            num_rounds: Number of rounds (default: 20)
        """
        if len(key_schedule) != schedule_length(num_rounds):
            raise ValueError(
                f"Key schedule must hold {schedule_length(num_rounds)} words "
                f"for {num_rounds} rounds, got {len(key_schedule)}"
            )
        self.num_rounds = num_rounds
        self.key_schedule = tuple(key_schedule)
        self._schedule_array = np.array(self.key_schedule, dtype=np.uint32)

    @classmethod
    def from_key(cls, key: bytes, num_rounds: int = RC6_DEFAULT_PARAMS['rounds']) -> 'RC6BlockCipher':
        """Expand key and build a block transform from it."""
        return cls(expand_key(key, num_rounds), num_rounds)

    @staticmethod
    def _check_block(block: bytes) -> None:
        if len(block) != BLOCK_SIZE:
            raise InvalidBlockSize(f"Block size must be {BLOCK_SIZE} bytes, got {len(block)}")

    def encrypt_block(self, plaintext: bytes) -> bytes:
        """
        Encrypt a single 16-byte block.

        Args:
            plaintext: The plaintext block

        Returns:
            The ciphertext block

        Raises:
            InvalidBlockSize: If the block is not 16 bytes
        """
        self._check_block(plaintext)
        S = self.key_schedule
        r = self.num_rounds

        A, B, C, D = bytes_to_words(plaintext)

        B = (B + S[0]) & WORD_MASK
        D = (D + S[1]) & WORD_MASK

        for i in range(1, r + 1):
            t = rotate_left((B * (2 * B + 1)) & WORD_MASK, LG_W)
            u = rotate_left((D * (2 * D + 1)) & WORD_MASK, LG_W)
            A = (rotate_left(A ^ t, u) + S[2 * i]) & WORD_MASK
            C = (rotate_left(C ^ u, t) + S[2 * i + 1]) & WORD_MASK
            A, B, C, D = B, C, D, A

        A = (A + S[2 * r + 2]) & WORD_MASK
        C = (C + S[2 * r + 3]) & WORD_MASK

        return words_to_bytes((A, B, C, D))

    def decrypt_block(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a single 16-byte block.

        Args:
            ciphertext: The ciphertext block

        Returns:
            The plaintext block

        Raises:
            InvalidBlockSize: If the block is not 16 bytes
        """
        self._check_block(ciphertext)
        S = self.key_schedule
        r = self.num_rounds

        A, B, C, D = bytes_to_words(ciphertext)

        C = (C - S[2 * r + 3]) & WORD_MASK
        A = (A - S[2 * r + 2]) & WORD_MASK

        for i in range(r, 0, -1):
            A, B, C, D = D, A, B, C
            u = rotate_left((D * (2 * D + 1)) & WORD_MASK, LG_W)
            t = rotate_left((B * (2 * B + 1)) & WORD_MASK, LG_W)
            C = rotate_right((C - S[2 * i + 1]) & WORD_MASK, t) ^ u
            A = rotate_right((A - S[2 * i]) & WORD_MASK, u) ^ t

        D = (D - S[1]) & WORD_MASK
        B = (B - S[0]) & WORD_MASK

        return words_to_bytes((A, B, C, D))

    def encrypt_blocks(self, data: bytes) -> bytes:
        """
        Encrypt every 16-byte block of data independently.

        Args:
            data: Whole blocks of plaintext

        Returns:
            The ciphertext, block for block identical to encrypt_block

        Raises:
            InvalidBlockSize: If len(data) is not a multiple of 16
        """
        data = bytes(data)
        if len(data) % BLOCK_SIZE:
            raise InvalidBlockSize(f"Data length must be a multiple of {BLOCK_SIZE} bytes, got {len(data)}")
        if not data:
            return b''

        S = self._schedule_array
        r = self.num_rounds
        A, B, C, D = _split_columns(data)

        B = B + S[0]
        D = D + S[1]

        for i in range(1, r + 1):
            t = _rotl(B * (B + B + np.uint32(1)), _LG_W)
            u = _rotl(D * (D + D + np.uint32(1)), _LG_W)
            A = _rotl(A ^ t, u) + S[2 * i]
            C = _rotl(C ^ u, t) + S[2 * i + 1]
            A, B, C, D = B, C, D, A

        A = A + S[2 * r + 2]
        C = C + S[2 * r + 3]

        return _join_columns(A, B, C, D)

    def decrypt_blocks(self, data: bytes) -> bytes:
        """
        Decrypt every 16-byte block of data independently.

        Args:
            data: Whole blocks of ciphertext

        Returns:
            The plaintext, block for block identical to decrypt_block

        Raises:
            InvalidBlockSize: If len(data) is not a multiple of 16
        """
        data = bytes(data)
        if len(data) % BLOCK_SIZE:
            raise InvalidBlockSize(f"Data length must be a multiple of {BLOCK_SIZE} bytes, got {len(data)}")
        if not data:
            return b''

        S = self._schedule_array
        r = self.num_rounds
        A, B, C, D = _split_columns(data)

        C = C - S[2 * r + 3]
        A = A - S[2 * r + 2]

        for i in range(r, 0, -1):
            A, B, C, D = D, A, B, C
            u = _rotl(D * (D + D + np.uint32(1)), _LG_W)
            t = _rotl(B * (B + B + np.uint32(1)), _LG_W)
            C = _rotr(C - S[2 * i + 1], t) ^ u
            A = _rotr(A - S[2 * i], u) ^ t

        D = D - S[1]
        B = B - S[0]

        return _join_columns(A, B, C, D)


def encrypt_block(plaintext: bytes, key: bytes,
                  num_rounds: int = RC6_DEFAULT_PARAMS['rounds']) -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The 16-byte plaintext block
        key: The user key
        num_rounds: Number of rounds (default: 20)

    Returns:
        The ciphertext block
    """
    return RC6BlockCipher.from_key(key, num_rounds).encrypt_block(plaintext)


def decrypt_block(ciphertext: bytes, key: bytes,
                  num_rounds: int = RC6_DEFAULT_PARAMS['rounds']) -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The 16-byte ciphertext block
        key: The user key
        num_rounds: Number of rounds (default: 20)

    Returns:
        The plaintext block
    """
    return RC6BlockCipher.from_key(key, num_rounds).decrypt_block(ciphertext)
