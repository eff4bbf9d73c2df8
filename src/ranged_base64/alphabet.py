"""Alphabet and padding configuration for the codec."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .errors import display_byte
from .validation import validate_config

logger = logging.getLogger(__name__)

ByteLike = Union[int, str]

PRESETS = ("standard", "url", "mime")


def _as_byte(value: ByteLike) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        value = ord(value)
    elif not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Expected an int or a single character, got {value!r}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Byte value out of range: {value}")
    return value


@dataclass(frozen=True)
class ByteRange:
    """Inclusive range of byte values forming one slice of the alphabet."""

    low: int
    high: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "low", _as_byte(self.low))
        object.__setattr__(self, "high", _as_byte(self.high))
        if self.low > self.high:
            raise ValueError(f"Range start {self.low} is greater than end {self.high}")

    @classmethod
    def of(cls, low: ByteLike, high: Optional[ByteLike] = None) -> "ByteRange":
        """Build a range from characters or ints; a single bound gives a one-byte range."""
        return cls(low, low if high is None else high)

    def __len__(self) -> int:
        return self.high - self.low + 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high

    def overlaps(self, other: "ByteRange") -> bool:
        return not (self.high < other.low or self.low > other.high)

    def __str__(self) -> str:
        return f"{display_byte(self.low)}..={display_byte(self.high)}"


class PaddingMode(str, Enum):
    """How the padding character is treated."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    NONE = "none"


@dataclass(frozen=True)
class Padding:
    """Padding policy: required or optional padding byte, or no padding at all."""

    mode: PaddingMode
    char: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", PaddingMode(self.mode))
        if self.mode is PaddingMode.NONE:
            if self.char is not None:
                raise ValueError("Padding mode 'none' does not take a padding character")
            return
        if self.char is None:
            raise ValueError(f"Padding mode '{self.mode.value}' requires a padding character")
        object.__setattr__(self, "char", _as_byte(self.char))

    @classmethod
    def required(cls, char: ByteLike = "=") -> "Padding":
        return cls(PaddingMode.REQUIRED, _as_byte(char))

    @classmethod
    def optional(cls, char: ByteLike = "=") -> "Padding":
        return cls(PaddingMode.OPTIONAL, _as_byte(char))

    @classmethod
    def none(cls) -> "Padding":
        return cls(PaddingMode.NONE)

    def __str__(self) -> str:
        if self.char is None:
            return self.mode.value
        return f"{self.mode.value} '{chr(self.char)}'"


RangeLike = Union[ByteRange, Tuple[ByteLike, ByteLike]]


def _coerce_range(item: RangeLike) -> ByteRange:
    if isinstance(item, ByteRange):
        return item
    low, high = item
    return ByteRange.of(low, high)


@dataclass(frozen=True)
class AlphabetConfig:
    """Ordered byte ranges mapped onto the 64 six-bit values, plus a padding policy.

    Range order defines the value assignment: the first range covers values
    ``0..len(first) - 1``, the next one continues from there, and so on.

    The invariants (disjoint ranges, padding byte outside every range, 64
    symbols in total) are checked once here. A failing check raises a
    ``ConfigError`` and no instance is produced. Instances are frozen and can
    be shared freely between threads.
    """

    ranges: Tuple[ByteRange, ...]
    padding: Padding = field(default_factory=Padding.none)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ranges", tuple(_coerce_range(r) for r in self.ranges))
        validate_config(self)
        logger.debug(
            "Alphabet config accepted: ranges=%s padding=%s",
            ", ".join(str(r) for r in self.ranges),
            self.padding,
        )

    @classmethod
    def standard(cls) -> "AlphabetConfig":
        """A-Z, a-z, 0-9, '+', '/' with optional '=' padding."""
        return cls(_alphanumeric_ranges("+", "/"), Padding.optional("="))

    @classmethod
    def url(cls) -> "AlphabetConfig":
        """URL-safe alphabet: '-' and '_' replace '+' and '/'; optional '=' padding."""
        return cls(_alphanumeric_ranges("-", "_"), Padding.optional("="))

    @classmethod
    def mime(cls) -> "AlphabetConfig":
        """Standard alphabet with required '=' padding."""
        return cls(_alphanumeric_ranges("+", "/"), Padding.required("="))

    @classmethod
    def preset(cls, name: str) -> "AlphabetConfig":
        """Look up a preset config by name."""
        key = name.strip().lower()
        if key not in PRESETS:
            raise KeyError(f"Unknown preset '{name}'. Choose one of: {', '.join(PRESETS)}.")
        return getattr(cls, key)()

    def with_padding(self, padding: Padding) -> "AlphabetConfig":
        """Return a new, revalidated config with the same ranges and another padding policy."""
        return dataclasses.replace(self, padding=padding)

    @property
    def padding_char(self) -> Optional[int]:
        return self.padding.char

    @property
    def alphabet(self) -> bytes:
        """The 64 symbols in value order."""
        return bytes(b for r in self.ranges for b in range(r.low, r.high + 1))

    def contains(self, value: int) -> bool:
        return any(value in r for r in self.ranges)


def _alphanumeric_ranges(sym62: str, sym63: str) -> Iterable[ByteRange]:
    return (
        ByteRange.of("A", "Z"),
        ByteRange.of("a", "z"),
        ByteRange.of("0", "9"),
        ByteRange.of(sym62),
        ByteRange.of(sym63),
    )


__all__ = [
    "AlphabetConfig",
    "ByteRange",
    "PRESETS",
    "Padding",
    "PaddingMode",
]
