"""
RC6 Key Schedule Implementation

This module expands a variable-length user key into the 2 * (rounds + 2)
round-key words consumed by the RC6 block transform.
"""

import logging
import secrets
from typing import Tuple

from .words import WORD_MASK, bytes_to_words, rotate_left
from ..config import RC6_DEFAULT_PARAMS

logger = logging.getLogger(__name__)

# Odd((e - 2) * 2^32) and Odd((phi - 1) * 2^32)
P32 = 0xB7E15163
Q32 = 0x9E3779B9


def generate_key(key_size: int = RC6_DEFAULT_PARAMS['key_size']) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 16)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)


def schedule_length(num_rounds: int) -> int:
    """Number of round-key words needed for num_rounds rounds."""
    return 2 * (num_rounds + 2)


def expand_key(master_key: bytes, num_rounds: int = RC6_DEFAULT_PARAMS['rounds']) -> Tuple[int, ...]:
    """
    Expand a user key into the RC6 key schedule.

    An empty key is treated as a single zero word; rejecting it is left to
    the caller.

    Args:
        master_key: The user key, any length
        num_rounds: Number of rounds

    Returns:
        A tuple of 2 * (num_rounds + 2) 32-bit round-key words
    """
    key_words = bytes_to_words(master_key) or [0]
    c = len(key_words)
    t = schedule_length(num_rounds)

    # Initialise S from the magic constants
    S = [P32] * t
    for i in range(1, t):
        S[i] = (S[i - 1] + Q32) & WORD_MASK

    # Mix the user key into S
    A = B = 0
    i = j = 0
    for _ in range(3 * max(t, c)):
        A = S[i] = rotate_left((S[i] + A + B) & WORD_MASK, 3)
        B = key_words[j] = rotate_left((key_words[j] + A + B) & WORD_MASK, (A + B) & 0x1F)
        i = (i + 1) % t
        j = (j + 1) % c

    logger.debug("Expanded %d key words into %d round keys for %d rounds", c, t, num_rounds)
    return tuple(S)
