"""
32-bit Word Helpers

This module converts between byte strings and little-endian 32-bit words
and provides the word rotations used by the key schedule and the rounds.
"""

from typing import List, Sequence

WORD_SIZE = 32
WORD_MASK = 0xFFFFFFFF


def rotate_left(value: int, shift: int) -> int:
    """
    Rotate a 32-bit word left.

    Args:
        value: The word to rotate
        shift: The number of bits to rotate by (taken modulo 32)

    Returns:
        The rotated word
    """
    shift &= WORD_SIZE - 1
    value &= WORD_MASK
    return ((value << shift) | (value >> (WORD_SIZE - shift))) & WORD_MASK


def rotate_right(value: int, shift: int) -> int:
    """
    Rotate a 32-bit word right.

    Args:
        value: The word to rotate
        shift: The number of bits to rotate by (taken modulo 32)

    Returns:
        The rotated word
    """
    shift &= WORD_SIZE - 1
    value &= WORD_MASK
    return ((value >> shift) | (value << (WORD_SIZE - shift))) & WORD_MASK


def bytes_to_words(data: bytes) -> List[int]:
    """
    Pack bytes into little-endian 32-bit words.

    A trailing group shorter than 4 bytes only uses the bytes present,
    so the missing high bytes are zero.

    Args:
        data: The bytes to pack

    Returns:
        ceil(len(data) / 4) words
    """
    data = bytes(data)
    return [int.from_bytes(data[i:i+4], byteorder='little')
            for i in range(0, len(data), 4)]


def words_to_bytes(words: Sequence[int]) -> bytes:
    """
    Unpack 32-bit words into little-endian bytes.

    Args:
        words: The words to unpack

    Returns:
        Exactly 4 * len(words) bytes
    """
    return b''.join((word & WORD_MASK).to_bytes(4, byteorder='little') for word in words)
