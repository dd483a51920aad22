"""Compiled patterns that locate invalid characters in codec input."""

from typing import Final

import regex as re

from .alphabet import ALPHABET

# anything that is not a literal ASCII bit
_NON_BIT: Final = re.compile(r"[^01]")

# the decoder walks symbols right-to-left, so the first symbol it would reject
# is the rightmost invalid one
_NON_SYMBOL_REV: Final = re.compile(
    "[^" + ALPHABET.replace("-", r"\-") + "]", flags=re.REVERSE
)


def find_invalid_bit(bit_string: str) -> tuple[int, str] | None:
    """Return ``(position, char)`` of the leftmost non-bit character, if any."""
    m = _NON_BIT.search(bit_string)
    if m is None:
        return None
    return m.start(), m.group()


def find_invalid_symbol(clip_string: str) -> tuple[int, str] | None:
    """Return ``(position, char)`` of the rightmost non-alphabet character, if any."""
    m = _NON_SYMBOL_REV.search(clip_string)
    if m is None:
        return None
    return m.start(), m.group()
