"""
Gronsfeld Cipher — additive polyalphabetic substitution
========================================================
Key letters and text letters come from the same alphabet. Each key
letter contributes its alphabet index as a shift; the shifts are applied
cyclically by text position:

    c[i] = (p[i] + k[i mod len(k)]) mod N
    p[i] = (c[i] - k[i mod len(k)] + N) mod N

Alphabet: Russian uppercase, Ё included (N = 33).

Historical note: Count Gronsfeld's variant of Vigenère, 17th century.
Originally keyed by digits; here any alphabet letter is a valid key symbol.

Role: educational baseline. No resistance to frequency analysis.
"""

import logging
from typing import Tuple

from lab_ciphers.alphabet import RUSSIAN
from lab_ciphers.errors import InvalidKeyError, InvalidTextError

logger = logging.getLogger(__name__)


class GronsfeldCipher:
    """Gronsfeld cipher over the Russian alphabet."""

    ALPHABET = RUSSIAN

    def __init__(self, key: str):
        if not key:
            raise InvalidKeyError("Key must not be empty.")
        self._key = tuple(self._to_indices(key, InvalidKeyError, "Invalid character in key."))
        logger.debug(f"GronsfeldCipher ready: key length={len(self._key)}")

    @property
    def key(self) -> Tuple[int, ...]:
        """Shift sequence derived from the key letters."""
        return self._key

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext. Every character must be an alphabet letter."""
        try:
            return self._transform(plaintext, +1)
        except InvalidTextError as e:
            logger.error(f"Encryption error: {e}")
            raise

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext."""
        try:
            return self._transform(ciphertext, -1)
        except InvalidTextError as e:
            logger.error(f"Decryption error: {e}")
            raise

    # ── helpers ──────────────────────────────────────────────────────────────

    def _transform(self, text: str, direction: int) -> str:
        work = self._to_indices(text, InvalidTextError, "Invalid character in text.")
        n = len(self.ALPHABET)
        for i, p in enumerate(work):
            work[i] = (p + direction * self._key[i % len(self._key)] + n) % n
        return "".join(self.ALPHABET.symbol(v) for v in work)

    @classmethod
    def _to_indices(cls, s: str, error, message: str) -> list:
        result = []
        for ch in s:
            idx = cls.ALPHABET.find(ch)
            if idx is None:
                raise error(message)
            result.append(idx)
        return result

    def __repr__(self):
        return f"GronsfeldCipher(key_length={len(self._key)})"
