"""
Fixed 64-symbol table mapping clip string characters to 6-bit values.

The table looks like base64url but is not: ``w`` sits after ``z`` and ``_``
precedes ``-``. It must be reproduced literally, never derived.
"""

import logging
from collections import Counter
from typing import Final

from .errors import AlphabetError, InvalidCharacterError
from .types import ClipString, Symbol

log = logging.getLogger(__name__)

ALPHABET: Final[str] = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvxyzw"
    "0123456789"
    "_-"
)
ALPHABET_SIZE: Final[int] = 64


def _build_index(table: str) -> dict[Symbol, int]:
    """Build the symbol -> value lookup, rejecting malformed tables."""
    if len(table) != ALPHABET_SIZE:
        raise AlphabetError(
            f"alphabet must contain exactly {ALPHABET_SIZE} symbols", size=len(table)
        )

    dupes = {sym for sym, n in Counter(table).items() if n > 1}
    if dupes:
        raise AlphabetError("alphabet symbols must be unique", duplicates=dupes)

    index = {sym: value for value, sym in enumerate(table)}
    log.debug(f"built alphabet index with {len(index)} symbols")
    return index


# symbol -> 6-bit value
_INDEX: Final[dict[Symbol, int]] = _build_index(ALPHABET)


def index_of(symbol: Symbol) -> int:
    """
    Return the 6-bit value of ``symbol``.

    Matching is exact: no case folding and no whitespace stripping.

    :param symbol: A single alphabet character.
    :returns: The symbol's position in the table, in [0, 63].
    :raises InvalidCharacterError: If ``symbol`` is not in the table.
    """
    try:
        return _INDEX[symbol]
    except KeyError:
        raise InvalidCharacterError(char=symbol) from None


def symbol_at(value: int) -> Symbol:
    """
    Return the symbol for a 6-bit ``value``.

    Callers only pass values parsed from 6-bit groups, so an out-of-range
    value is a bug in the caller and raises ``ValueError`` rather than a
    :class:`~clipstring.errors.ClipStringError`.
    """
    # bool is an int subclass but never a valid symbol value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"symbol value must be an int, got {type(value).__name__}")
    if not 0 <= value < ALPHABET_SIZE:
        raise ValueError(f"symbol value out of range [0, {ALPHABET_SIZE - 1}]: {value}")
    return ALPHABET[value]


def is_clip_string(text: ClipString) -> bool:
    """Return ``True`` if every character of ``text`` is an alphabet symbol."""
    return all(c in _INDEX for c in text)


__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "index_of",
    "symbol_at",
    "is_clip_string",
]
