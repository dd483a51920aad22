"""
Conversion between clip strings and bit strings.

Clip strings are read right-to-left: the last symbol holds the first six bits.
Within each symbol the bits are written MSB first. Both reversals are part of
the format; dropping either one breaks round-tripping.
"""

import logging
from typing import Final

from typing_extensions import deprecated

from ._sanitise import render_char
from ._scan import find_invalid_bit, find_invalid_symbol
from .alphabet import index_of, symbol_at
from .errors import InvalidBitError, InvalidCharacterError, InvalidLengthError
from .types import BitString, ClipString

BITS_PER_CHAR: Final[int] = 6

_GROUP_FORMAT: Final[str] = f"0{BITS_PER_CHAR}b"

log = logging.getLogger(__name__)


def decode(clip_string: ClipString) -> BitString:
    """
    Decode a clip string into its bit string.

    Symbols are taken in reverse order and each is rendered as a zero-padded
    6-bit group, MSB first.

    :param clip_string: Clip string to decode; may be empty.
    :returns: Bit string of length ``6 * len(clip_string)``.
    :raises TypeError: If ``clip_string`` is not a ``str``.
    :raises InvalidCharacterError: If any character is not an alphabet symbol.
        The reported character is the first one met in decoding order, i.e.
        the rightmost invalid character of the input.
    """
    if not isinstance(clip_string, str):
        raise TypeError("clip string must be a str")

    # validate up front so failure never leaves partial output behind
    invalid = find_invalid_symbol(clip_string)
    if invalid is not None:
        pos, char = invalid
        log.debug(f"rejected clip string: '{render_char(char)}' at position {pos}")
        raise InvalidCharacterError(char=char, position=pos)

    return "".join(format(index_of(sym), _GROUP_FORMAT) for sym in reversed(clip_string))


def encode(bit_string: BitString) -> ClipString:
    """
    Encode a bit string into a clip string.

    Bit characters are checked before the length so that a string that is both
    malformed and misaligned reports the bad bit.

    :param bit_string: String of ``'0'``/``'1'``; may be empty.
    :returns: Clip string of length ``len(bit_string) // 6``.
    :raises TypeError: If ``bit_string`` is not a ``str``.
    :raises InvalidBitError: On the first character that is not ``'0'`` or ``'1'``.
    :raises InvalidLengthError: If the length is not a multiple of 6.
    """
    if not isinstance(bit_string, str):
        raise TypeError("bit string must be a str")

    invalid = find_invalid_bit(bit_string)
    if invalid is not None:
        pos, bit = invalid
        log.debug(f"rejected bit string: '{render_char(bit)}' at position {pos}")
        raise InvalidBitError(bit=bit, position=pos)

    n_bits = len(bit_string)
    if n_bits % BITS_PER_CHAR != 0:
        log.debug(f"rejected bit string: length {n_bits} is not aligned")
        raise InvalidLengthError(length=n_bits, multiple=BITS_PER_CHAR)

    symbols = [
        symbol_at(int(bit_string[i : i + BITS_PER_CHAR], 2))
        for i in range(0, n_bits, BITS_PER_CHAR)
    ]
    return "".join(reversed(symbols))


@deprecated("Use `clipstring.decode()` instead.")
def clip_string_to_bit_string(clip_string: ClipString) -> BitString:
    """Alias of :func:`decode` kept for callers of the older name."""
    return decode(clip_string)


@deprecated("Use `clipstring.encode()` instead.")
def bit_string_to_clip_string(bit_string: BitString) -> ClipString:
    """Alias of :func:`encode` kept for callers of the older name."""
    return encode(bit_string)


__all__ = [
    "BITS_PER_CHAR",
    "decode",
    "encode",
    "clip_string_to_bit_string",
    "bit_string_to_clip_string",
]
