# SPDX-License-Identifier: MIT
"""Exception hierarchy for encoder construction and decoding.

Every failure is a caller-input problem detected synchronously, either while
building an encoder or while decoding a string. None of them are retryable.
"""

from __future__ import annotations


class SchrottIdError(ValueError):
    """Base class for all errors raised by :mod:`schrottid`."""


class AlphabetError(SchrottIdError):
    """The supplied alphabet cannot be used."""


class InvalidAlphabetSizeError(AlphabetError):
    """Alphabet length is outside the supported ``[2, 256]`` range."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Alphabet must have 2 to 256 characters, got {size}")
        self.size = size


class DuplicateSymbolError(AlphabetError):
    """Alphabet contains the same symbol more than once."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Alphabet must have unique characters, {symbol!r} repeats")
        self.symbol = symbol


class InvalidMinLengthError(SchrottIdError):
    """Minimum output length is not a positive integer."""

    def __init__(self, min_length: int) -> None:
        super().__init__(f"min_length must be greater than 0, got {min_length}")
        self.min_length = min_length


class PermutationError(SchrottIdError):
    """The permutation key cannot be used with the alphabet."""


class InvalidKeyEncodingError(PermutationError):
    """Permutation key is not valid base64."""


class PermutationLengthMismatchError(PermutationError):
    """Decoded key length differs from the alphabet size."""

    def __init__(self, length: int, alphabet_size: int) -> None:
        super().__init__(
            f"Permutation length must be equal to alphabet length ({length} != "
            f"{alphabet_size}). Please make sure to use a valid permutation for "
            "this alphabet"
        )
        self.length = length
        self.alphabet_size = alphabet_size


class PermutationNotUniqueError(PermutationError):
    """Decoded key values are not pairwise distinct."""

    def __init__(self) -> None:
        super().__init__("Invalid permutation. All positions must be unique.")


class PermutationIndicesOutOfRangeError(PermutationError):
    """Decoded key values do not cover ``[0, alphabet_size)`` exactly."""

    def __init__(self, alphabet_size: int) -> None:
        super().__init__(
            "Invalid permutation. Invalid indices for used alphabet "
            f"(expected 0..{alphabet_size - 1})"
        )
        self.alphabet_size = alphabet_size


class CharacterNotInAlphabetError(SchrottIdError):
    """Decode input contains a symbol absent from the alphabet."""

    def __init__(self, symbol: str, position: int | None = None) -> None:
        where = "" if position is None else f" at position {position}"
        super().__init__(f"Character not in alphabet: {symbol!r}{where}")
        self.symbol = symbol
        self.position = position


class EmptyInputError(SchrottIdError):
    """Decode input is an empty string."""

    def __init__(self) -> None:
        super().__init__("Cannot decode an empty string")


class IntegerDomainOverflowError(SchrottIdError, OverflowError):
    """Value lies outside the unsigned 64-bit domain."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Value {value} is outside the unsigned 64-bit range")
        self.value = value


__all__ = [
    "SchrottIdError",
    "AlphabetError",
    "InvalidAlphabetSizeError",
    "DuplicateSymbolError",
    "InvalidMinLengthError",
    "PermutationError",
    "InvalidKeyEncodingError",
    "PermutationLengthMismatchError",
    "PermutationNotUniqueError",
    "PermutationIndicesOutOfRangeError",
    "CharacterNotInAlphabetError",
    "EmptyInputError",
    "IntegerDomainOverflowError",
]
