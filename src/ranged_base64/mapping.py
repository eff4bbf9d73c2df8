"""Symbol mapping between six-bit values and alphabet bytes.

Both functions assume the caller has already established membership: the
byte passed to ``decode_byte`` belongs to the alphabet, and the value passed
to ``encode_byte`` is in ``0..63``. When that precondition does not hold they
return 0 instead of raising, which silently corrupts output. ``decode`` and
``encode`` in ``transcoder`` always satisfy it; direct callers must too.
"""

from __future__ import annotations

from .alphabet import AlphabetConfig


def decode_byte(config: AlphabetConfig, symbol: int) -> int:
    """Map an alphabet byte to its six-bit value.

    Returns 0 when ``symbol`` is not in the alphabet.
    """
    offset = 0
    for byte_range in config.ranges:
        if symbol in byte_range:
            return offset + (symbol - byte_range.low)
        offset += len(byte_range)
    return 0


def encode_byte(config: AlphabetConfig, value: int) -> int:
    """Map a six-bit value to its alphabet byte.

    Returns 0 when ``value`` is outside ``0..63``.
    """
    offset = 0
    for byte_range in config.ranges:
        candidate = value + byte_range.low - offset
        if candidate in byte_range:
            return candidate
        offset += len(byte_range)
    return 0


__all__ = ["decode_byte", "encode_byte"]
