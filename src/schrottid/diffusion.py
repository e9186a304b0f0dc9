# SPDX-License-Identifier: MIT
"""Invertible multi-round scrambling of digit buffers.

Each forward round rotates the buffer left, substitutes every digit through
the permutation key, rotates again, applies a running modular sum (the
cascade) and rotates once more. The cascade makes every digit depend on all
digits before it; the rotations keep moving which digit comes first, so
after enough rounds a change anywhere reaches every position.

:func:`backward` undoes :func:`forward` step by step in reverse order, so
``backward(forward(buf)) == buf`` for any buffer and any valid key.
"""

from __future__ import annotations

from typing import Literal, Sequence

from .permutation import PermutationKey

RoundFormula = Literal["length_plus_alphabet", "length_times_three"]

DEFAULT_ROUND_FORMULA: RoundFormula = "length_plus_alphabet"


def round_count(
    length: int, base: int, formula: RoundFormula = DEFAULT_ROUND_FORMULA
) -> int:
    """Return the number of rounds for a buffer of ``length`` digits.

    ``length_plus_alphabet`` is the canonical formula. ``length_times_three``
    reproduces identifiers issued by the legacy encoder; the two produce
    different output and cannot be mixed.
    """
    if formula == "length_plus_alphabet":
        return length + base
    if formula == "length_times_three":
        return length * 3
    raise ValueError(f"Unknown round formula: {formula!r}")


def _rotate_left(buf: list[int]) -> None:
    buf.append(buf.pop(0))


def _rotate_right(buf: list[int]) -> None:
    buf.insert(0, buf.pop())


def _substitute(buf: list[int], table: Sequence[int]) -> None:
    for i, digit in enumerate(buf):
        buf[i] = table[digit]


def _cascade_forward(buf: list[int], base: int) -> None:
    carry = 0
    for i, digit in enumerate(buf):
        carry = (digit + carry) % base
        buf[i] = carry


def _cascade_backward(buf: list[int], base: int) -> None:
    carry = 0
    for i, digit in enumerate(buf):
        buf[i] = (digit + base - carry) % base
        carry = digit


def forward(
    digits: Sequence[int],
    key: PermutationKey,
    base: int,
    formula: RoundFormula = DEFAULT_ROUND_FORMULA,
) -> list[int]:
    """Return the scrambled copy of ``digits``."""
    buf = list(digits)
    if not buf:
        return buf
    table = key.forward_table
    for _ in range(round_count(len(buf), base, formula)):
        _rotate_left(buf)
        _substitute(buf, table)
        _rotate_left(buf)
        _cascade_forward(buf, base)
        _rotate_left(buf)
    return buf


def backward(
    digits: Sequence[int],
    key: PermutationKey,
    base: int,
    formula: RoundFormula = DEFAULT_ROUND_FORMULA,
) -> list[int]:
    """Return ``digits`` with :func:`forward` undone."""
    buf = list(digits)
    if not buf:
        return buf
    table = key.inverse_table
    for _ in range(round_count(len(buf), base, formula)):
        _rotate_right(buf)
        _cascade_backward(buf, base)
        _rotate_right(buf)
        _substitute(buf, table)
        _rotate_right(buf)
    return buf


__all__ = [
    "DEFAULT_ROUND_FORMULA",
    "RoundFormula",
    "backward",
    "forward",
    "round_count",
]
