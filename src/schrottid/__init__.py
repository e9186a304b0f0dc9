"""Short, scrambled identifiers for unsigned 64-bit integers."""

from .alphabet import BASE32, BASE36, BASE58, BASE64, NAMED_ALPHABETS
from .encoder import SchrottId, generate_permutation
from .errors import (
    AlphabetError,
    CharacterNotInAlphabetError,
    DuplicateSymbolError,
    EmptyInputError,
    IntegerDomainOverflowError,
    InvalidAlphabetSizeError,
    InvalidKeyEncodingError,
    InvalidMinLengthError,
    PermutationError,
    PermutationIndicesOutOfRangeError,
    PermutationLengthMismatchError,
    PermutationNotUniqueError,
    SchrottIdError,
)

__all__ = [
    "SchrottId",
    "generate_permutation",
    "BASE32",
    "BASE36",
    "BASE58",
    "BASE64",
    "NAMED_ALPHABETS",
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
