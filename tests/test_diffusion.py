# SPDX-License-Identifier: MIT
"""Tests for :mod:`schrottid.diffusion`."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from schrottid import diffusion
from schrottid.permutation import PermutationKey

KEY = PermutationKey.build([1, 3, 0, 2], 4)


def test_round_count_formulas() -> None:
    assert diffusion.round_count(3, 64) == 67
    assert diffusion.round_count(3, 64, "length_times_three") == 9
    with pytest.raises(ValueError):
        diffusion.round_count(3, 64, "double")  # type: ignore[arg-type]


def test_forward_matches_hand_worked_rounds() -> None:
    assert diffusion.forward([0, 0], KEY, 4) == [2, 1]
    assert diffusion.backward([2, 1], KEY, 4) == [0, 0]


def test_forward_returns_new_buffer() -> None:
    digits = [0, 1, 2]
    result = diffusion.forward(digits, KEY, 4)
    assert digits == [0, 1, 2]
    assert result is not digits


def test_empty_buffer_is_unchanged() -> None:
    assert diffusion.forward([], KEY, 4) == []
    assert diffusion.backward([], KEY, 4) == []


def test_single_digit_change_spreads() -> None:
    """Neighbouring inputs differ in more than the digit that changed."""
    key = PermutationKey.build(list(reversed(range(10))), 10)
    base = diffusion.forward([0] * 8, key, 10)
    changed = diffusion.forward([0] * 7 + [1], key, 10)
    assert base == [8, 0, 9, 1, 7, 8, 9, 2]
    assert changed == [9, 6, 4, 2, 5, 8, 3, 9]
    assert sum(a != b for a, b in zip(base, changed)) > 1


@st.composite
def _buffers(draw):
    size = draw(st.integers(min_value=2, max_value=256))
    forward = draw(st.permutations(range(size)))
    digits = draw(
        st.lists(st.integers(min_value=0, max_value=size - 1), min_size=1, max_size=16)
    )
    formula = draw(st.sampled_from(["length_plus_alphabet", "length_times_three"]))
    return PermutationKey.build(forward, size), size, digits, formula


@settings(deadline=None, max_examples=200)
@given(_buffers())
def test_backward_inverts_forward(case) -> None:
    key, size, digits, formula = case
    scrambled = diffusion.forward(digits, key, size, formula)
    assert len(scrambled) == len(digits)
    assert all(0 <= d < size for d in scrambled)
    assert diffusion.backward(scrambled, key, size, formula) == digits
