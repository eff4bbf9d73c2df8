"""Base64 codec with configurable alphabets and padding policies."""

from importlib.metadata import PackageNotFoundError, version

from .alphabet import PRESETS, AlphabetConfig, ByteRange, Padding, PaddingMode
from .errors import (
    Base64Error,
    ConfigError,
    DecodeError,
    InvalidCharacterError,
    InvalidLengthError,
    OverlappingRangesError,
    PaddingCharInRangeError,
    PaddingWithInvalidLengthError,
    RangeLengthsDoNotSumTo64Error,
    TooManyPaddingCharactersError,
)
from .transcoder import decode, decode_to_bytes, encode, encode_to_bytes

try:
    __version__ = version("ranged-base64")
except PackageNotFoundError:  # pragma: no cover - fallback during local execution
    __version__ = "0.0.0"

__all__ = [
    "AlphabetConfig",
    "Base64Error",
    "ByteRange",
    "ConfigError",
    "DecodeError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "OverlappingRangesError",
    "PRESETS",
    "Padding",
    "PaddingCharInRangeError",
    "PaddingMode",
    "PaddingWithInvalidLengthError",
    "RangeLengthsDoNotSumTo64Error",
    "TooManyPaddingCharactersError",
    "__version__",
    "decode",
    "decode_to_bytes",
    "encode",
    "encode_to_bytes",
]
