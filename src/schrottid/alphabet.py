# SPDX-License-Identifier: MIT
"""Symbol alphabets and their index tables.

An alphabet is an ordered string of unique symbols whose length is the
numeric base used for digit conversion. :class:`AlphabetTable` validates a
symbol set once and provides the lookups in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import (
    CharacterNotInAlphabetError,
    DuplicateSymbolError,
    InvalidAlphabetSizeError,
)

MIN_ALPHABET_SIZE = 2
MAX_ALPHABET_SIZE = 256

BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE32 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

NAMED_ALPHABETS: Mapping[str, str] = MappingProxyType(
    {
        "base64": BASE64,
        "base58": BASE58,
        "base36": BASE36,
        "base32": BASE32,
    }
)


def resolve_alphabet(name_or_symbols: str) -> str:
    """Return the symbols for a named alphabet, or ``name_or_symbols`` itself.

    Names match exactly, so symbol strings such as ``"Base32"`` pass through.
    """
    return NAMED_ALPHABETS.get(name_or_symbols, name_or_symbols)


def validate_alphabet(symbols: str) -> None:
    """Raise if ``symbols`` cannot be used as an alphabet.

    This is the single validator shared by encoder construction and
    permutation generation.

    Raises:
        InvalidAlphabetSizeError: Fewer than 2 or more than 256 symbols.
        DuplicateSymbolError: A symbol occurs more than once.
    """
    if not MIN_ALPHABET_SIZE <= len(symbols) <= MAX_ALPHABET_SIZE:
        raise InvalidAlphabetSizeError(len(symbols))
    seen: set[str] = set()
    for symbol in symbols:
        if symbol in seen:
            raise DuplicateSymbolError(symbol)
        seen.add(symbol)


@dataclass(frozen=True)
class AlphabetTable:
    """Validated alphabet with symbol and index lookups."""

    symbols: str
    indices: Mapping[str, int] = field(repr=False)

    @classmethod
    def build(cls, symbols: str) -> "AlphabetTable":
        """Validate ``symbols`` and return the indexed table."""
        validate_alphabet(symbols)
        indices = MappingProxyType({s: i for i, s in enumerate(symbols)})
        return cls(symbols=symbols, indices=indices)

    @property
    def size(self) -> int:
        return len(self.symbols)

    def symbol_at(self, index: int) -> str:
        return self.symbols[index]

    def index_of(self, symbol: str) -> int:
        """Return the index of ``symbol``.

        Raises:
            CharacterNotInAlphabetError: ``symbol`` is not part of the alphabet.
        """
        try:
            return self.indices[symbol]
        except KeyError:
            raise CharacterNotInAlphabetError(symbol) from None

    def digits_to_string(self, digits: Iterable[int]) -> str:
        return "".join(self.symbols[d] for d in digits)

    def string_to_digits(self, text: str) -> list[int]:
        """Map ``text`` to digit indices, failing on the first unknown symbol."""
        digits = []
        for position, symbol in enumerate(text):
            index = self.indices.get(symbol)
            if index is None:
                raise CharacterNotInAlphabetError(symbol, position)
            digits.append(index)
        return digits


__all__ = [
    "AlphabetTable",
    "BASE32",
    "BASE36",
    "BASE58",
    "BASE64",
    "MAX_ALPHABET_SIZE",
    "MIN_ALPHABET_SIZE",
    "NAMED_ALPHABETS",
    "resolve_alphabet",
    "validate_alphabet",
]
