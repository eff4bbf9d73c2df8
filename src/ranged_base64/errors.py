"""Error types raised by the codec.

Two disjoint families: ``ConfigError`` for alphabet definitions rejected at
construction time, and ``DecodeError`` for encoded input rejected per call.
Encoding never raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .alphabet import ByteRange


def display_byte(value: int) -> str:
    """Render a byte as its printable ASCII character, or hex otherwise."""
    if 0x20 <= value < 0x7F:
        return chr(value)
    return f"0x{value:02x}"


class Base64Error(Exception):
    """Base class for every codec error."""


class ConfigError(Base64Error):
    """Raised when an alphabet definition violates a construction invariant."""


class OverlappingRangesError(ConfigError):
    def __init__(self, first: "ByteRange", second: "ByteRange") -> None:
        self.first = first
        self.second = second
        super().__init__(f"Overlapping ranges {first} and {second}")


class PaddingCharInRangeError(ConfigError):
    def __init__(self, char: int, byte_range: "ByteRange") -> None:
        self.char = char
        self.range = byte_range
        super().__init__(
            f"Padding character '{display_byte(char)}' found in range {byte_range}"
        )


class RangeLengthsDoNotSumTo64Error(ConfigError):
    def __init__(self, total: int) -> None:
        self.total = total
        super().__init__(f"Range lengths sum to {total}, not 64")


class DecodeError(Base64Error, ValueError):
    """Raised when encoded input cannot be decoded under a config."""


class InvalidCharacterError(DecodeError):
    def __init__(self, char: int) -> None:
        self.char = char
        super().__init__(f"Invalid character '{display_byte(char)}'")


class InvalidLengthError(DecodeError):
    """Length is not a multiple of 4 under a required-padding policy."""

    def __init__(self, length: int, padding_char: int) -> None:
        self.length = length
        self.padding_char = padding_char
        super().__init__(
            f"Length {length} not a multiple of 4. "
            f"Padding with character '{display_byte(padding_char)}' required"
        )


class PaddingWithInvalidLengthError(DecodeError):
    """Padding is present but the total length is not a multiple of 4."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Padding characters detected and length {length} not a multiple of 4"
        )


class TooManyPaddingCharactersError(DecodeError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Too many padding characters: {count}")


__all__ = [
    "Base64Error",
    "ConfigError",
    "DecodeError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "OverlappingRangesError",
    "PaddingCharInRangeError",
    "PaddingWithInvalidLengthError",
    "RangeLengthsDoNotSumTo64Error",
    "TooManyPaddingCharactersError",
    "display_byte",
]
