"""
Block Chaining Modes Package

This package implements the ECB and CBC chaining modes and the PKCS#7
padding they apply at buffer boundaries.
"""

from .ecb_mode import RC6ECB
from .cbc_mode import RC6CBC
from .padding import pad, unpad

__all__ = ['RC6ECB', 'RC6CBC', 'pad', 'unpad']
