"""
Operations Package

Text-facing RC6 Encrypt and RC6 Decrypt operations, plus the encoding
conversions they rely on.
"""

from .rc6_operations import rc6_encrypt, rc6_decrypt, MODES
from .encodings import to_bytes, from_bytes, INPUT_FORMATS, OUTPUT_FORMATS

__all__ = ['rc6_encrypt', 'rc6_decrypt', 'MODES', 'to_bytes', 'from_bytes',
           'INPUT_FORMATS', 'OUTPUT_FORMATS']
