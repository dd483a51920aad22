"""clipstring: codec between clip strings and their bit strings."""

from .alphabet import ALPHABET, ALPHABET_SIZE, index_of, is_clip_string, symbol_at
from .codec import (
    BITS_PER_CHAR,
    bit_string_to_clip_string,
    clip_string_to_bit_string,
    decode,
    encode,
)
from .errors import (
    AlphabetError,
    ClipStringError,
    InvalidBitError,
    InvalidCharacterError,
    InvalidLengthError,
)

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("clipstring")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "BITS_PER_CHAR",
    "decode",
    "encode",
    "index_of",
    "symbol_at",
    "is_clip_string",
    "clip_string_to_bit_string",
    "bit_string_to_clip_string",
    "ClipStringError",
    "InvalidCharacterError",
    "InvalidBitError",
    "InvalidLengthError",
    "AlphabetError",
]
