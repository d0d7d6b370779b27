"""
Key Schedule Package

This package implements the RC6 key expansion, which turns a user key of
any length into the round-key words used by the block transform, along with
the little-endian word helpers it is built on.
"""

from .rc6_key_schedule import expand_key, generate_key, schedule_length, P32, Q32
from .words import bytes_to_words, words_to_bytes, rotate_left, rotate_right

__all__ = [
    'expand_key', 'generate_key', 'schedule_length', 'P32', 'Q32',
    'bytes_to_words', 'words_to_bytes', 'rotate_left', 'rotate_right',
]
