"""Encode and decode engine.

Raw bytes are processed in windows of 3 that repack into 4 six-bit symbols,
and encoded symbols in windows of 4 that repack into 3 bytes. Input is
zero-padded up to a whole window first, and the output is truncated back to
the length the real data accounts for.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Tuple, TypeVar, Union

from .alphabet import AlphabetConfig
from .mapping import decode_byte, encode_byte
from .padding import validate_encoded

logger = logging.getLogger(__name__)

BITS_PER_SYMBOL = 6
BITS_PER_BYTE = 8
RAW_WINDOW = 3
ENCODED_WINDOW = 4

SYMBOL_MASK = (1 << BITS_PER_SYMBOL) - 1
BYTE_MASK = (1 << BITS_PER_BYTE) - 1

BytesInput = Union[bytes, bytearray, memoryview]
EncodedInput = Union[bytes, bytearray, memoryview, str]

T = TypeVar("T")


def chunked(items: Iterable[T], size: int) -> Iterator[Tuple[T, ...]]:
    """Yield consecutive fixed-size windows; an incomplete final window is dropped."""
    iterator = iter(items)
    while True:
        window = tuple(next(iterator, None) for _ in range(size))
        if window[-1] is None:
            return
        yield window


def unpack_window(window: Tuple[int, int, int]) -> Tuple[int, int, int, int]:
    """Split three bytes into four six-bit values."""
    b0, b1, b2 = window
    packed = b0 << 16 | b1 << 8 | b2
    return (
        (packed >> 18) & SYMBOL_MASK,
        (packed >> 12) & SYMBOL_MASK,
        (packed >> 6) & SYMBOL_MASK,
        packed & SYMBOL_MASK,
    )


def pack_window(window: Tuple[int, int, int, int]) -> Tuple[int, int, int]:
    """Join four six-bit values into three bytes."""
    v0, v1, v2, v3 = window
    packed = v0 << 18 | v1 << 12 | v2 << 6 | v3
    return (
        (packed >> 16) & BYTE_MASK,
        (packed >> 8) & BYTE_MASK,
        packed & BYTE_MASK,
    )


def _as_bytes(data: EncodedInput) -> bytes:
    if isinstance(data, str):
        return data.encode("ascii")
    return bytes(data)


def encode(config: AlphabetConfig, raw: BytesInput) -> Iterator[int]:
    """Encode ``raw`` and return an iterator over the encoded bytes.

    Never fails: any byte sequence is accepted.
    """
    raw = bytes(raw)
    pad_length = (RAW_WINDOW - len(raw) % RAW_WINDOW) % RAW_WINDOW
    # ceil(len * 8 / 6)
    symbol_count = (len(raw) * BITS_PER_BYTE + BITS_PER_SYMBOL - 1) // BITS_PER_SYMBOL
    pad_symbols = pad_length * BITS_PER_BYTE // BITS_PER_SYMBOL
    return _encode_symbols(config, raw + bytes(pad_length), symbol_count, pad_symbols)


def _encode_symbols(
    config: AlphabetConfig, padded: bytes, symbol_count: int, pad_symbols: int
) -> Iterator[int]:
    emitted = 0
    for window in chunked(padded, RAW_WINDOW):
        for value in unpack_window(window):
            if emitted == symbol_count:
                break
            yield encode_byte(config, value)
            emitted += 1
    pad = config.padding_char
    if pad is not None:
        for _ in range(pad_symbols):
            yield pad


def encode_to_bytes(config: AlphabetConfig, raw: BytesInput) -> bytes:
    """Encode ``raw`` into a new ``bytes`` object."""
    return bytes(encode(config, raw))


def decode(config: AlphabetConfig, encoded: EncodedInput) -> Iterator[int]:
    """Validate ``encoded`` and return an iterator over the decoded bytes.

    Validation happens before this function returns, so errors surface at the
    call site rather than on first iteration.

    Raises:
        DecodeError: The input violates the config's alphabet or padding rules.
    """
    data = _as_bytes(encoded)
    unpadded_length = validate_encoded(config, data)
    pad_length = (ENCODED_WINDOW - unpadded_length % ENCODED_WINDOW) % ENCODED_WINDOW
    byte_count = unpadded_length * BITS_PER_SYMBOL // BITS_PER_BYTE
    return _decode_bytes(config, data[:unpadded_length], pad_length, byte_count)


def _decode_bytes(
    config: AlphabetConfig, symbols: bytes, pad_length: int, byte_count: int
) -> Iterator[int]:
    values = [decode_byte(config, symbol) for symbol in symbols]
    values.extend([0] * pad_length)
    emitted = 0
    for window in chunked(values, ENCODED_WINDOW):
        for value in pack_window(window):
            if emitted == byte_count:
                return
            yield value
            emitted += 1


def decode_to_bytes(config: AlphabetConfig, encoded: EncodedInput) -> bytes:
    """Decode ``encoded`` into a new ``bytes`` object.

    Raises:
        DecodeError: The input violates the config's alphabet or padding rules.
    """
    decoded = bytes(decode(config, encoded))
    logger.debug("Decoded %d symbols into %d bytes", len(encoded), len(decoded))
    return decoded


__all__ = [
    "BITS_PER_BYTE",
    "BITS_PER_SYMBOL",
    "chunked",
    "decode",
    "decode_to_bytes",
    "encode",
    "encode_to_bytes",
    "pack_window",
    "unpack_window",
]
