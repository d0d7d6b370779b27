"""
RC6 Operations

Text-in, text-out wrappers around the RC6 cipher. They convert the key, IV
and input from their textual encodings, select the chaining mode, and format
the result.
"""

import logging
from typing import Optional, Union

from ..cipher import RC6
from ..config import RC6_DEFAULT_PARAMS, get_default_rounds
from ..errors import RC6Error, OperationError
from .encodings import to_bytes, from_bytes

logger = logging.getLogger(__name__)

MODES = ('CBC', 'ECB')


def _prepare(key: str, key_format: str, iv: str, iv_format: str,
             mode: str, rounds: Optional[int]):
    mode = mode.upper()
    if mode not in MODES:
        raise OperationError(f"Unsupported mode: {mode}")

    key_bytes = to_bytes(key, key_format)
    if len(key_bytes) == 0:
        raise OperationError("Key cannot be empty")

    iv_bytes = None
    if mode == 'CBC':
        iv_bytes = to_bytes(iv, iv_format)
        if len(iv_bytes) == 0:
            logger.warning("No IV given for CBC mode, using %d null bytes", RC6_DEFAULT_PARAMS['iv_size'])
            iv_bytes = bytes(RC6_DEFAULT_PARAMS['iv_size'])
        elif len(iv_bytes) != RC6_DEFAULT_PARAMS['iv_size']:
            raise OperationError("IV must be 16 bytes for CBC mode")

    if rounds is None:
        rounds = get_default_rounds()

    try:
        cipher = RC6(key_bytes, rounds)
    except RC6Error as e:
        raise OperationError(str(e)) from e

    return cipher, mode, iv_bytes


def rc6_encrypt(data: Union[str, bytes],
                key: str,
                key_format: str = 'Hex',
                iv: str = '',
                iv_format: str = 'Hex',
                mode: str = 'CBC',
                input_format: str = 'Raw',
                output_format: str = 'Hex',
                rounds: Optional[int] = None) -> Union[str, bytes]:
    """
    RC6 Encrypt operation.

    Args:
        data: The plaintext
        key: The key text
        key_format: Encoding of the key (Hex, UTF8, Latin1, Base64)
        iv: The IV text; empty means 16 null bytes in CBC mode
        iv_format: Encoding of the IV
        mode: CBC or ECB
        input_format: Encoding of data
        output_format: Encoding of the result
        rounds: Round count, or None for the configured default

    Returns:
        The ciphertext in output_format

    Raises:
        OperationError: If any argument is invalid
    """
    cipher, mode, iv_bytes = _prepare(key, key_format, iv, iv_format, mode, rounds)
    plaintext = to_bytes(data, input_format)

    try:
        if mode == 'CBC':
            ciphertext = cipher.encrypt_cbc(plaintext, iv_bytes)
        else:
            ciphertext = cipher.encrypt_ecb(plaintext)
    except RC6Error as e:
        raise OperationError(str(e)) from e

    return from_bytes(ciphertext, output_format)


def rc6_decrypt(data: Union[str, bytes],
                key: str,
                key_format: str = 'Hex',
                iv: str = '',
                iv_format: str = 'Hex',
                mode: str = 'CBC',
                input_format: str = 'Hex',
                output_format: str = 'Raw',
                rounds: Optional[int] = None) -> Union[str, bytes]:
    """
    RC6 Decrypt operation.

    Args:
        data: The ciphertext
        key: The key text
        key_format: Encoding of the key (Hex, UTF8, Latin1, Base64)
        iv: The IV text; empty means 16 null bytes in CBC mode
        iv_format: Encoding of the IV
        mode: CBC or ECB
        input_format: Encoding of data
        output_format: Encoding of the result
        rounds: Round count, or None for the configured default

    Returns:
        The plaintext in output_format

    Raises:
        OperationError: If any argument is invalid or the ciphertext has
            the wrong length
    """
    cipher, mode, iv_bytes = _prepare(key, key_format, iv, iv_format, mode, rounds)
    ciphertext = to_bytes(data, input_format)

    try:
        if mode == 'CBC':
            plaintext = cipher.decrypt_cbc(ciphertext, iv_bytes)
        else:
            plaintext = cipher.decrypt_ecb(ciphertext)
    except RC6Error as e:
        raise OperationError(str(e)) from e

    return from_bytes(plaintext, output_format)
