"""
Cipher Core Package

This package implements the RC6 block transform: encryption and decryption
of 128-bit blocks under an expanded key schedule, one block at a time or
many independent blocks at once.
"""

from .block_cipher import RC6BlockCipher, encrypt_block, decrypt_block, BLOCK_SIZE

__all__ = ['RC6BlockCipher', 'encrypt_block', 'decrypt_block', 'BLOCK_SIZE']
