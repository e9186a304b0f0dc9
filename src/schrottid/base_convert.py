# SPDX-License-Identifier: MIT
"""Positional base conversion between integers and digit buffers.

Digit buffers are most-significant-digit first. Lengths are computed with
integer arithmetic, so values either side of a power of the base always get
the exact number of digits.
"""

from __future__ import annotations

from typing import Sequence

UINT64_MAX = 2**64 - 1


def digit_count(value: int, min_length: int, base: int) -> int:
    """Return ``max(min_length, ceil(log_base(value + 1)))``.

    Equivalent to the number of base ``base`` digits needed to write
    ``value`` (zero needs none), padded up to ``min_length``.
    """
    digits = 0
    power = 1
    while power <= value:
        power *= base
        digits += 1
    return max(min_length, digits)


def to_digits(value: int, length: int, base: int) -> list[int]:
    """Return ``value`` as ``length`` base ``base`` digits.

    Positions not reached by the division stay zero. ``length`` must be at
    least :func:`digit_count` for ``value``.
    """
    digits = [0] * length
    for position in range(length - 1, -1, -1):
        if not value:
            break
        value, digits[position] = divmod(value, base)
    return digits


def to_value(digits: Sequence[int], base: int) -> int:
    """Evaluate ``digits`` in base ``base``.

    The result wraps modulo ``2**64`` like an unsigned 64-bit accumulator;
    buffers produced by a matching encoder never wrap.
    """
    value = 0
    for digit in digits:
        value = (value * base + digit) & UINT64_MAX
    return value


__all__ = ["UINT64_MAX", "digit_count", "to_digits", "to_value"]
