"""
Alphabets — ordered symbol sets with stable indices
====================================================
An alphabet is an ordered run of unique symbols. A symbol's position is
its index, and every index maps back to exactly one symbol, so
conversion in both directions is exact.

The lookup table is built once from the ordered symbols and never
mutated afterwards; every cipher instance shares it read-only.

    RUSSIAN      АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ   (uppercase, with Ё)
    LATIN_LOWER  abcdefghijklmnopqrstuvwxyz
    COMBINED     RUSSIAN + LATIN_LOWER
"""

from types import MappingProxyType
from typing import Optional


class Alphabet:
    """Immutable symbol <-> index table."""

    def __init__(self, symbols: str):
        if not symbols:
            raise ValueError("Alphabet must contain at least one symbol.")
        if len(set(symbols)) != len(symbols):
            dupes = sorted({c for c in symbols if symbols.count(c) > 1})
            raise ValueError(f"Alphabet has duplicate symbols: {''.join(dupes)}")
        self._symbols = symbols
        self._index = MappingProxyType({ch: i for i, ch in enumerate(symbols)})

    @property
    def symbols(self) -> str:
        return self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._index

    def __add__(self, other: "Alphabet") -> "Alphabet":
        return Alphabet(self._symbols + other.symbols)

    def __repr__(self):
        return f"Alphabet({self._symbols!r})"

    def find(self, symbol: str) -> Optional[int]:
        """Index of `symbol`, or None if it is not a member."""
        return self._index.get(symbol)

    def index(self, symbol: str) -> int:
        """Index of `symbol`. Raises ValueError for non-members."""
        idx = self._index.get(symbol)
        if idx is None:
            raise ValueError(f"{symbol!r} is not in the alphabet.")
        return idx

    def symbol(self, index: int) -> str:
        if not 0 <= index < len(self._symbols):
            raise IndexError(f"Index {index} out of bounds for alphabet of {len(self)}.")
        return self._symbols[index]

    def shift(self, symbol: str, offset: int) -> str:
        """Symbol `offset` places after `symbol`, wrapping around (offset may be negative)."""
        return self._symbols[(self.index(symbol) + offset) % len(self._symbols)]


RUSSIAN     = Alphabet("АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ")
LATIN_LOWER = Alphabet("abcdefghijklmnopqrstuvwxyz")
COMBINED    = RUSSIAN + LATIN_LOWER
