"""
Cipher errors
=============
Both kinds subclass ValueError: a bad key or bad text is bad input.
The message alone is enough to show a user what went wrong.
"""


class CipherError(ValueError):
    """Base class for every error raised by lab_ciphers."""


class InvalidKeyError(CipherError):
    """Key descriptor is empty or holds characters outside the key domain."""


class InvalidTextError(CipherError):
    """Text holds characters outside the cipher's alphabet (or is empty where that is forbidden)."""
