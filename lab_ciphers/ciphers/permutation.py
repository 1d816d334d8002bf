"""
Route-Permutation Cipher — digit-keyed shifts over two scripts
===============================================================
The key is a positive decimal integer. Each of its digits is taken
directly as a shift (0-9); the key is never looked up in the alphabet.
Shifts are applied cyclically by text position over the combined
alphabet:

    Russian uppercase (33, with Ё) + ASCII lowercase (26)  ->  M = 59

Text is validated in full before any transform, so no partial result is
ever produced and the index lookup inside the loop cannot miss.
Uppercase ASCII is not a member.
"""

import logging
import string
from typing import Tuple

from lab_ciphers.alphabet import COMBINED
from lab_ciphers.errors import InvalidKeyError, InvalidTextError

logger = logging.getLogger(__name__)


class PermutationCipher:
    """Digit-keyed additive cipher over Russian + Latin lowercase."""

    ALPHABET = COMBINED

    def __init__(self, key: str):
        self.validate_key(key)
        self._key = tuple(ord(ch) - ord("0") for ch in key)
        logger.debug(f"PermutationCipher ready: key length={len(self._key)}")

    @property
    def key(self) -> Tuple[int, ...]:
        """Digit shifts, in key order."""
        return self._key

    @staticmethod
    def validate_key(key: str) -> None:
        """
        Raise InvalidKeyError unless `key` is a positive decimal integer.
        Leading zeros are allowed ("010"), an all-zero key is not ("00").
        """
        if not key:
            raise InvalidKeyError("Key must not be empty. Enter a positive integer.")
        if any(ch not in string.digits for ch in key):
            raise InvalidKeyError("Key must consist of digits only. Enter a positive integer.")
        if not key.strip("0"):
            raise InvalidKeyError("Key must be a positive integer.")

    def validate_text(self, text: str) -> None:
        """Raise InvalidTextError if `text` is empty or has a non-alphabet character."""
        if not text:
            raise InvalidTextError("Text must not be empty.")
        for ch in text:
            if ch not in self.ALPHABET:
                raise InvalidTextError(
                    "Text must contain only Russian uppercase or Latin lowercase letters."
                )

    def encrypt(self, plaintext: str) -> str:
        self.validate_text(plaintext)
        return "".join(
            self.ALPHABET.shift(ch, self._key[i % len(self._key)])
            for i, ch in enumerate(plaintext)
        )

    def decrypt(self, ciphertext: str) -> str:
        self.validate_text(ciphertext)
        return "".join(
            self.ALPHABET.shift(ch, -self._key[i % len(self._key)])
            for i, ch in enumerate(ciphertext)
        )

    def __repr__(self):
        return f"PermutationCipher(key_length={len(self._key)})"
