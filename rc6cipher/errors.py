"""
Error Taxonomy

This module defines the exceptions raised by the RC6 primitive, its
chaining modes and the operation layer built on top of them.
"""


class RC6Error(ValueError):
    """Base class for all errors raised by the RC6 core."""


class InvalidBlockSize(RC6Error):
    """A block transform was given a buffer that is not 16 bytes."""


class InvalidIVLength(RC6Error):
    """CBC mode was called with an IV that is not 16 bytes."""


class InvalidInputLength(RC6Error):
    """Ciphertext length is not a positive multiple of the block size."""


class EmptyKey(RC6Error):
    """The cipher was constructed with a zero-length key."""


class InvalidRoundCount(RC6Error):
    """The round count is not a positive integer."""


class InvalidPadding(RC6Error):
    """Strict unpadding found malformed PKCS#7 padding."""


class OperationError(Exception):
    """
    Raised by the operation layer when user-supplied arguments cannot be
    turned into a valid cipher call.
    """
