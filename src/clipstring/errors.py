"""Custom exception hierarchy for clip string conversion errors."""

from ._sanitise import render_char


class ClipStringError(Exception):
    """Base exception for all clipstring errors."""


class InvalidCharacterError(ClipStringError):
    """Raised when a clip string contains a character outside the alphabet."""

    def __init__(
        self,
        message: str = "invalid clip string character",
        *,
        char: str,
        position: int | None = None,
    ) -> None:
        """Initialize with the offending character and its optional position."""
        extra = f" (char: '{render_char(char)}') "
        if position is not None:
            extra += f"(position: {position}) "
        super().__init__(message + extra)
        self.char = char
        self.position = position


class InvalidBitError(ClipStringError):
    """Raised when a bit string contains a character other than '0' or '1'."""

    def __init__(
        self,
        message: str = "invalid bit value",
        *,
        bit: str,
        position: int | None = None,
    ) -> None:
        extra = f" (bit: '{render_char(bit)}') "
        if position is not None:
            extra += f"(position: {position}) "
        super().__init__(message + extra)
        self.bit = bit
        self.position = position


class InvalidLengthError(ClipStringError):
    """Raised when a bit string length is not a multiple of the symbol width."""

    def __init__(
        self,
        message: str = "bit string length must be a multiple of the symbol width",
        *,
        length: int,
        multiple: int,
    ) -> None:
        super().__init__(message + f" (length: {length}) (multiple: {multiple}) ")
        self.length = length
        self.multiple = multiple


class AlphabetError(ClipStringError):
    """Raised when the symbol table fails its integrity check."""

    def __init__(
        self,
        message: str,
        *,
        size: int | None = None,
        duplicates: set[str] | None = None,
    ) -> None:
        extra = " "
        if size is not None:
            extra += f"(size: {size}) "
        if duplicates:
            extra += f"(duplicates: {''.join(sorted(duplicates))}) "
        super().__init__(message + extra)
        self.size = size
        self.duplicates = duplicates
