"""
Text Encodings

Conversions between user-facing text (hex, Base64, UTF-8, Latin-1) and
the raw bytes the cipher works on.
"""

import base64
import binascii
import re
from typing import Union

from ..errors import OperationError

HEX = 'Hex'
BASE64 = 'Base64'
UTF8 = 'UTF8'
LATIN1 = 'Latin1'
RAW = 'Raw'

INPUT_FORMATS = (HEX, BASE64, UTF8, LATIN1, RAW)
OUTPUT_FORMATS = (HEX, BASE64, UTF8, LATIN1, RAW)

_HEX_DELIMITERS = re.compile(r'0x|\\x|[\s:,;-]', re.IGNORECASE)


def _normalise_format(fmt: str, allowed) -> str:
    for name in allowed:
        if fmt.lower() == name.lower():
            return name
    raise OperationError(f"Unsupported format: {fmt}")


def to_bytes(value: Union[str, bytes], fmt: str) -> bytes:
    """
    Convert user input to raw bytes.

    Args:
        value: Text, or bytes for the Raw format
        fmt: One of Hex, Base64, UTF8, Latin1 or Raw

    Returns:
        The decoded bytes

    Raises:
        OperationError: If the format is unknown or the text is malformed
    """
    fmt = _normalise_format(fmt, INPUT_FORMATS)

    if isinstance(value, (bytes, bytearray, memoryview)):
        if fmt == RAW:
            return bytes(value)
        value = bytes(value).decode('latin-1')

    try:
        if fmt == HEX:
            return bytes.fromhex(_HEX_DELIMITERS.sub('', value))
        if fmt == BASE64:
            return base64.b64decode(''.join(value.split()), validate=True)
        if fmt == LATIN1:
            return value.encode('latin-1')
        return value.encode('utf-8')
    except (ValueError, binascii.Error) as e:
        raise OperationError(f"Invalid {fmt} input: {e}") from e


def from_bytes(data: bytes, fmt: str) -> Union[str, bytes]:
    """
    Format raw bytes for output.

    Args:
        data: The bytes to format
        fmt: One of Hex, Base64, UTF8, Latin1 or Raw

    Returns:
        A string, or the bytes themselves for Raw

    Raises:
        OperationError: If the format is unknown or the bytes are not valid UTF-8
    """
    fmt = _normalise_format(fmt, OUTPUT_FORMATS)

    if fmt == HEX:
        return data.hex()
    if fmt == BASE64:
        return base64.b64encode(data).decode('ascii')
    if fmt == LATIN1:
        return data.decode('latin-1')
    if fmt == UTF8:
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise OperationError(f"Output is not valid UTF-8: {e}") from e
    return bytes(data)
