"""
RC6Cipher - RC6 Symmetric Block Cipher Library

This library implements the RC6 block cipher (RC6-32/r/b) from scratch,
with a 128-bit block, a variable-length key and a configurable number of
rounds, exposed through ECB and CBC chaining modes with PKCS#7 padding.

Key Features:
- Bit-exact with the published RC6 test vectors
- Key schedule derived once per key and shared read-only
- Vectorised ECB processing with numpy
- Typed errors for block, IV, input length and key problems
- Text-facing encrypt/decrypt operations (Hex, Base64, UTF-8, Latin-1)
- Avalanche analysis of the block transform and key schedule
"""

from .cipher import RC6, generate_iv
from .errors import (
    RC6Error, InvalidBlockSize, InvalidIVLength, InvalidInputLength,
    EmptyKey, InvalidRoundCount, InvalidPadding, OperationError,
)
from .key_schedule import generate_key

__version__ = '0.1.0'
__author__ = 'RC6Cipher Team'

__all__ = [
    'RC6', 'generate_iv', 'generate_key',
    'RC6Error', 'InvalidBlockSize', 'InvalidIVLength', 'InvalidInputLength',
    'EmptyKey', 'InvalidRoundCount', 'InvalidPadding', 'OperationError',
]
