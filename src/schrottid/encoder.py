# SPDX-License-Identifier: MIT
"""Encoder facade turning integers into opaque identifiers and back.

:class:`SchrottId` validates its alphabet, permutation key and minimum length
once and is immutable afterwards, so one instance can be shared freely
between threads. Every call works on its own private digit buffer.
"""

from __future__ import annotations

from typing import Iterable

import logfire

from . import diffusion
from .alphabet import AlphabetTable, validate_alphabet
from .base_convert import UINT64_MAX, digit_count, to_digits, to_value
from .diffusion import DEFAULT_ROUND_FORMULA, RoundFormula
from .errors import EmptyInputError, IntegerDomainOverflowError, InvalidMinLengthError
from .permutation import PermutationKey, encode_key


def generate_permutation(alphabet: str) -> str:
    """Return a new random base64 permutation key for ``alphabet``.

    Args:
        alphabet: Symbols the key will be used with.

    Returns:
        Base64 key to pass to :class:`SchrottId`.

    Raises:
        InvalidAlphabetSizeError: Alphabet has fewer than 2 or more than 256
            symbols.
        DuplicateSymbolError: Alphabet contains a repeated symbol.
    """
    validate_alphabet(alphabet)
    with logfire.span(
        "schrottid.generate_permutation", attributes={"alphabet_size": len(alphabet)}
    ):
        key = encode_key(PermutationKey.generate(len(alphabet)))
        logfire.debug("Generated permutation key", alphabet_size=len(alphabet))
        return key


class SchrottId:
    """Encode and decode unsigned 64-bit integers as scrambled strings.

    Identifiers can only be decoded with the same ``alphabet``,
    ``permutation`` and ``min_length`` that produced them. A mismatched
    configuration decodes to an unrelated integer rather than failing.
    """

    def __init__(
        self,
        alphabet: str,
        permutation: str,
        min_length: int,
        round_formula: RoundFormula = DEFAULT_ROUND_FORMULA,
    ) -> None:
        """Validate the configuration and build the lookup tables.

        Args:
            alphabet: Output symbols; its length is the numeric base.
            permutation: Base64 key from :func:`generate_permutation`.
            min_length: Minimum length of encoded identifiers.
            round_formula: Round-count formula; change only to read
                identifiers issued by the legacy encoder.

        Raises:
            AlphabetError: The alphabet is too short, too long or repeats a
                symbol.
            InvalidMinLengthError: ``min_length`` is not positive.
            PermutationError: The key is not valid base64 or is not a
                permutation of the alphabet's indices.
        """
        with logfire.span(
            "schrottid.init", attributes={"alphabet_size": len(alphabet)}
        ):
            table = AlphabetTable.build(alphabet)
            if min_length <= 0:
                raise InvalidMinLengthError(min_length)
            key = PermutationKey.from_base64(permutation, table.size)
            # Validates the formula name before any instance state exists.
            diffusion.round_count(min_length, table.size, round_formula)

            self._alphabet = table
            self._key = key
            self._min_length = min_length
            self._round_formula: RoundFormula = round_formula
            logfire.debug(
                "Encoder created",
                alphabet_size=table.size,
                min_length=min_length,
                round_formula=round_formula,
            )

    generate_permutation = staticmethod(generate_permutation)

    @property
    def alphabet(self) -> str:
        return self._alphabet.symbols

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def round_formula(self) -> RoundFormula:
        return self._round_formula

    def encode(self, value: int) -> str:
        """Return the identifier for ``value``.

        Raises:
            TypeError: ``value`` is not an integer.
            IntegerDomainOverflowError: ``value`` is negative or does not fit
                in 64 bits.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected an integer, got {type(value).__name__}")
        if not 0 <= value <= UINT64_MAX:
            raise IntegerDomainOverflowError(value)
        base = self._alphabet.size
        buf = to_digits(value, digit_count(value, self._min_length, base), base)
        buf = diffusion.forward(buf, self._key, base, self._round_formula)
        return self._alphabet.digits_to_string(buf)

    def decode(self, text: str) -> int:
        """Return the integer encoded in ``text``.

        There is no checksum, so any string over the alphabet decodes to
        some integer.

        Raises:
            EmptyInputError: ``text`` is empty.
            CharacterNotInAlphabetError: ``text`` contains an unknown symbol.
        """
        if not text:
            raise EmptyInputError()
        base = self._alphabet.size
        buf = self._alphabet.string_to_digits(text)
        buf = diffusion.backward(buf, self._key, base, self._round_formula)
        return to_value(buf, base)

    def encode_many(self, values: Iterable[int]) -> list[str]:
        """Encode ``values`` in order."""
        return [self.encode(value) for value in values]

    def decode_many(self, texts: Iterable[str]) -> list[int]:
        """Decode ``texts`` in order, stopping at the first invalid one."""
        return [self.decode(text) for text in texts]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(alphabet_size={self._alphabet.size}, "
            f"min_length={self._min_length}, round_formula={self._round_formula!r})"
        )


__all__ = ["SchrottId", "generate_permutation"]
