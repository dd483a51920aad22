"""Unit tests for the fixed symbol table and its lookups."""

import pytest

from clipstring import alphabet
from clipstring.alphabet import ALPHABET, index_of, is_clip_string, symbol_at
from clipstring.errors import AlphabetError, InvalidCharacterError


# Table integrity
# ---------------------------------------------------------------------------


def test_alphabet_literal_order():
    """Table order is fixed, with 'w' after 'z' and '_' before '-'."""
    assert ALPHABET == (
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvxyzw0123456789_-"
    )


def test_alphabet_size_and_uniqueness():
    """Table holds 64 distinct symbols."""
    assert len(ALPHABET) == alphabet.ALPHABET_SIZE == 64
    assert len(set(ALPHABET)) == 64


def test_build_index_rejects_short_table():
    """A table of the wrong size fails the integrity check."""
    with pytest.raises(AlphabetError) as exc_info:
        alphabet._build_index(ALPHABET[:-1])
    assert exc_info.value.size == 63


def test_build_index_rejects_duplicates():
    """A table with repeated symbols fails the integrity check."""
    table = "A" + ALPHABET[1:-1] + "A"
    with pytest.raises(AlphabetError) as exc_info:
        alphabet._build_index(table)
    assert exc_info.value.duplicates == {"A"}


# Lookups
# ---------------------------------------------------------------------------


def test_index_of_known_positions():
    """Lookups return table positions."""
    assert index_of("A") == 0
    assert index_of("B") == 1
    assert index_of("a") == 26
    assert index_of("x") == 48
    assert index_of("w") == 51
    assert index_of("0") == 52
    assert index_of("_") == 62
    assert index_of("-") == 63


def test_index_of_and_symbol_at_are_inverse():
    """Every value maps to a symbol and back."""
    for value in range(64):
        assert index_of(symbol_at(value)) == value


@pytest.mark.parametrize(
    "symbol", ["!", " ", "", "AB", "=", "+", "  ", "\t\n", " A"]
)
def test_index_of_unknown_symbol(symbol):
    """Anything that is not exactly one table symbol is rejected."""
    with pytest.raises(InvalidCharacterError) as exc_info:
        index_of(symbol)
    assert exc_info.value.char == symbol


@pytest.mark.parametrize("value", [-1, 64, 1000])
def test_symbol_at_out_of_range(value):
    """Out-of-range values are a programming error."""
    with pytest.raises(ValueError):
        symbol_at(value)


@pytest.mark.parametrize("value", [1.0, "1", True])
def test_symbol_at_non_int(value):
    """Only plain ints are accepted as symbol values."""
    with pytest.raises(ValueError):
        symbol_at(value)


def test_is_clip_string():
    """Predicate accepts alphabet-only strings, including the empty string."""
    assert is_clip_string("")
    assert is_clip_string(ALPHABET)
    assert not is_clip_string("AB=")
    assert not is_clip_string("a b")


def test_index_of_whitespace_run_message():
    """Multi-character whitespace is escaped one character at a time."""
    with pytest.raises(InvalidCharacterError, match=r"\\u0009\\u000a"):
        index_of("\t\n")
