# SPDX-License-Identifier: MIT
"""Secret permutation keys over an alphabet's index space.

A key is a bijection on ``[0, N)`` where ``N`` is the alphabet size. Keys are
stored and exchanged as base64 strings; :class:`PermutationKey` validates the
decoded bytes and caches the inverse mapping alongside the forward one.
"""

from __future__ import annotations

import base64
import binascii
import secrets
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .errors import (
    InvalidKeyEncodingError,
    PermutationIndicesOutOfRangeError,
    PermutationLengthMismatchError,
    PermutationNotUniqueError,
)


def decode_key(text: str) -> bytes:
    """Return the raw key bytes encoded in ``text``.

    Raises:
        InvalidKeyEncodingError: ``text`` is not strict, padded base64.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidKeyEncodingError(
            f"The permutation is not a valid base64 string: {exc}"
        ) from exc


def encode_key(raw: Sequence[int]) -> str:
    return base64.b64encode(bytes(raw)).decode("ascii")


@dataclass(frozen=True)
class PermutationKey:
    """Validated permutation with its derived inverse.

    ``forward`` maps an alphabet index to its substitute and ``inverse``
    undoes it. Both tuples are built once and never replaced.
    """

    forward_table: tuple[int, ...]
    inverse_table: tuple[int, ...] = field(repr=False)

    @classmethod
    def build(cls, raw: Sequence[int], alphabet_size: int) -> "PermutationKey":
        """Validate ``raw`` against ``alphabet_size`` and derive the inverse.

        Args:
            raw: Key values, typically the decoded key bytes.
            alphabet_size: Size of the alphabet the key belongs to.

        Raises:
            PermutationLengthMismatchError: ``len(raw) != alphabet_size``.
            PermutationNotUniqueError: A value occurs more than once.
            PermutationIndicesOutOfRangeError: Values do not span
                ``[0, alphabet_size)``.
        """
        values = tuple(raw)
        if len(values) != alphabet_size:
            raise PermutationLengthMismatchError(len(values), alphabet_size)
        if len(set(values)) != len(values):
            raise PermutationNotUniqueError()
        # Distinct values with these bounds cover the whole range.
        if min(values) != 0 or max(values) != alphabet_size - 1:
            raise PermutationIndicesOutOfRangeError(alphabet_size)

        inverse = [0] * alphabet_size
        for index, value in enumerate(values):
            inverse[value] = index
        return cls(forward_table=values, inverse_table=tuple(inverse))

    @classmethod
    def from_base64(cls, text: str, alphabet_size: int) -> "PermutationKey":
        """Decode ``text`` and validate the resulting key."""
        return cls.build(decode_key(text), alphabet_size)

    @staticmethod
    def generate(
        alphabet_size: int,
        randbelow: Callable[[int], int] = secrets.randbelow,
    ) -> bytes:
        """Return a uniformly random permutation of ``range(alphabet_size)``.

        Uses a Fisher-Yates shuffle so every ordering is equally likely.
        ``randbelow(n)`` must return a uniform integer in ``[0, n)``; the
        default draws from the operating system's secure source.
        """
        values = list(range(alphabet_size))
        for i in range(alphabet_size - 1, 0, -1):
            j = randbelow(i + 1)
            values[i], values[j] = values[j], values[i]
        return bytes(values)

    @property
    def size(self) -> int:
        return len(self.forward_table)

    def forward(self, index: int) -> int:
        return self.forward_table[index]

    def backward(self, index: int) -> int:
        return self.inverse_table[index]

    def to_base64(self) -> str:
        return encode_key(self.forward_table)


__all__ = ["PermutationKey", "decode_key", "encode_key"]
