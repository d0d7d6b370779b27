"""
PKCS#7 Padding

Padding always adds between 1 and 16 bytes, so block-aligned input gains a
full block. Removal is permissive by default: only the final byte is
inspected, matching other RC6 implementations this library must
interoperate with. Pass strict=True to validate every padding byte.
"""

from Cryptodome.Util import Padding

from ..cipher_core.block_cipher import BLOCK_SIZE
from ..errors import InvalidPadding


def pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Append PKCS#7 padding.

    Args:
        data: The data to pad
        block_size: Block size in bytes

    Returns:
        The padded data, len(data) + (block_size - len(data) % block_size) bytes
    """
    return Padding.pad(bytes(data), block_size, style='pkcs7')


def unpad(data: bytes, block_size: int = BLOCK_SIZE, strict: bool = False) -> bytes:
    """
    Remove PKCS#7 padding.

    In permissive mode the last byte v is read and, if 1 <= v <= block_size,
    the last v bytes are dropped without checking them; any other value
    leaves the data unchanged.

    Args:
        data: The padded data
        block_size: Block size in bytes
        strict: Validate the padding fully instead

    Returns:
        The unpadded data

    Raises:
        InvalidPadding: In strict mode, if the padding is malformed
    """
    data = bytes(data)
    if strict:
        try:
            return Padding.unpad(data, block_size, style='pkcs7')
        except ValueError as e:
            raise InvalidPadding(f"Invalid PKCS#7 padding: {e}") from e

    if not data:
        return data
    padding_length = data[-1]
    if 1 <= padding_length <= block_size:
        return data[:-padding_length]
    return data
