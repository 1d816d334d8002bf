"""
lab_ciphers — classical polyalphabetic ciphers
==============================================
Two additive substitution ciphers over fixed alphabets.
Educational demonstrations, not secure encryption.

Ciphers:
    GronsfeldCipher    — letter key, Russian alphabet (33 symbols)
    PermutationCipher  — digit key, Russian + Latin lowercase (59 symbols)
"""

__version__ = "1.0.0"

from .alphabet                import Alphabet, RUSSIAN, LATIN_LOWER, COMBINED
from .errors                  import CipherError, InvalidKeyError, InvalidTextError
from .ciphers.gronsfeld       import GronsfeldCipher
from .ciphers.permutation     import PermutationCipher

__all__ = [
    "Alphabet",
    "RUSSIAN",
    "LATIN_LOWER",
    "COMBINED",
    "CipherError",
    "InvalidKeyError",
    "InvalidTextError",
    "GronsfeldCipher",
    "PermutationCipher",
]
