# SPDX-License-Identifier: MIT
"""Tests for :mod:`schrottid.alphabet`."""

import pytest

from schrottid.alphabet import (
    BASE32,
    BASE36,
    BASE58,
    BASE64,
    AlphabetTable,
    resolve_alphabet,
    validate_alphabet,
)
from schrottid.errors import (
    AlphabetError,
    CharacterNotInAlphabetError,
    DuplicateSymbolError,
    InvalidAlphabetSizeError,
)


WIDE_257 = "".join(chr(0x100 + i) for i in range(257))


@pytest.mark.parametrize("symbols", ["", "A", WIDE_257])
def test_rejects_size_out_of_range(symbols: str) -> None:
    with pytest.raises(InvalidAlphabetSizeError) as info:
        AlphabetTable.build(symbols)
    assert "2 to 256" in str(info.value)
    assert info.value.size == len(symbols)


def test_size_is_checked_before_uniqueness() -> None:
    with pytest.raises(InvalidAlphabetSizeError):
        validate_alphabet("A" * 257)
    with pytest.raises(DuplicateSymbolError):
        validate_alphabet("A" * 256)


def test_rejects_duplicate_symbol() -> None:
    with pytest.raises(DuplicateSymbolError) as info:
        AlphabetTable.build("ABCA")
    assert info.value.symbol == "A"
    assert isinstance(info.value, AlphabetError)


def test_accepts_boundary_sizes() -> None:
    assert AlphabetTable.build("01").size == 2
    wide = "".join(chr(0x100 + i) for i in range(256))
    assert AlphabetTable.build(wide).size == 256


@pytest.mark.parametrize(
    ("symbols", "size"), [(BASE64, 64), (BASE58, 58), (BASE36, 36), (BASE32, 32)]
)
def test_named_alphabets_are_valid(symbols: str, size: int) -> None:
    table = AlphabetTable.build(symbols)
    assert table.size == size


def test_lookups_are_inverse() -> None:
    table = AlphabetTable.build(BASE58)
    for index in range(table.size):
        assert table.index_of(table.symbol_at(index)) == index


def test_index_of_unknown_symbol() -> None:
    table = AlphabetTable.build("ABCD")
    with pytest.raises(CharacterNotInAlphabetError):
        table.index_of("E")


def test_string_to_digits_reports_first_unknown_position() -> None:
    table = AlphabetTable.build("ABCD")
    assert table.string_to_digits("DCBA") == [3, 2, 1, 0]
    with pytest.raises(CharacterNotInAlphabetError) as info:
        table.string_to_digits("AB$C%")
    assert info.value.symbol == "$"
    assert info.value.position == 2


def test_digits_to_string() -> None:
    table = AlphabetTable.build("ABCD")
    assert table.digits_to_string([2, 1]) == "CB"


def test_resolve_alphabet() -> None:
    assert resolve_alphabet("base58") == BASE58
    assert resolve_alphabet("base32") == BASE32
    assert resolve_alphabet("xyz") == "xyz"


def test_resolve_alphabet_matches_names_exactly() -> None:
    assert resolve_alphabet("Base32") == "Base32"
    assert resolve_alphabet("BASE64") == "BASE64"
