"""Tests for the encode/decode engine."""

from __future__ import annotations

import base64
import random

import pytest

from ranged_base64 import (
    AlphabetConfig,
    ByteRange,
    InvalidCharacterError,
    InvalidLengthError,
    Padding,
    PaddingWithInvalidLengthError,
    TooManyPaddingCharactersError,
    decode,
    decode_to_bytes,
    encode,
    encode_to_bytes,
)
from ranged_base64.transcoder import chunked, pack_window, unpack_window

HELLO = b"Hello, World!"


def _custom_config():
    return AlphabetConfig(
        [
            ByteRange.of("0", "9"),
            ByteRange.of("a", "z"),
            ByteRange.of("A", "Z"),
            ByteRange.of("!"),
            ByteRange.of("~"),
        ],
        Padding.required("."),
    )


CONFIGS = {
    "standard": AlphabetConfig.standard(),
    "url": AlphabetConfig.url(),
    "mime": AlphabetConfig.mime(),
    "unpadded": AlphabetConfig.standard().with_padding(Padding.none()),
    "custom": _custom_config(),
}


def _payloads():
    rng = random.Random(1234)
    payloads = [b"", b"\x00", b"\xff", b"\x00\x00", b"\xff\xff\xff", bytes(range(256)), HELLO]
    payloads.extend(bytes(rng.randrange(256) for _ in range(size)) for size in range(1, 40))
    return payloads


@pytest.mark.parametrize("name", sorted(CONFIGS))
def test_round_trip(name):
    """Decoding an encoding gives back the original bytes."""
    config = CONFIGS[name]
    for payload in _payloads():
        assert decode_to_bytes(config, encode_to_bytes(config, payload)) == payload


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"", b""),
        (b"f", b"Zg=="),
        (b"fo", b"Zm8="),
        (b"foo", b"Zm9v"),
        (b"foob", b"Zm9vYg=="),
        (b"foobar", b"Zm9vYmFy"),
        (HELLO, b"SGVsbG8sIFdvcmxkIQ=="),
    ],
)
def test_standard_known_vectors(raw, expected):
    """Standard preset matches the RFC 4648 test vectors."""
    assert encode_to_bytes(AlphabetConfig.standard(), raw) == expected


def test_standard_matches_stdlib():
    """Standard preset agrees with the stdlib base64 module."""
    config = AlphabetConfig.standard()
    for payload in _payloads():
        assert encode_to_bytes(config, payload) == base64.b64encode(payload)


def test_url_alphabet():
    """The URL preset uses '-' and '_' for values 62 and 63."""
    assert encode_to_bytes(AlphabetConfig.url(), b"\xfb\xff") == b"-_8="
    assert decode_to_bytes(AlphabetConfig.url(), b"-_8") == b"\xfb\xff"


def test_encode_without_padding():
    """No padding policy means no trailing '='."""
    assert encode_to_bytes(CONFIGS["unpadded"], HELLO) == b"SGVsbG8sIFdvcmxkIQ"
    assert encode_to_bytes(CONFIGS["unpadded"], b"f") == b"Zg"


def test_encode_returns_an_iterator():
    """encode yields symbols lazily."""
    encoded = encode(AlphabetConfig.standard(), b"Ma")

    assert next(encoded) == ord("T")
    assert bytes(encoded) == b"WE="


def test_encode_accepts_bytes_like():
    """bytearray and memoryview inputs encode like bytes."""
    config = AlphabetConfig.standard()

    assert encode_to_bytes(config, bytearray(b"Ma")) == b"TWE="
    assert encode_to_bytes(config, memoryview(b"Ma")) == b"TWE="


def test_decode_optional_padding_omitted():
    """Optional padding may be left out."""
    assert decode_to_bytes(AlphabetConfig.standard(), b"SGVsbG8sIFdvcmxkIQ") == HELLO


def test_decode_optional_padding_present():
    """Optional padding may be included."""
    assert decode_to_bytes(AlphabetConfig.standard(), b"SGVsbG8sIFdvcmxkIQ==") == HELLO


def test_decode_required_padding():
    """Required padding decodes a properly padded group."""
    assert decode_to_bytes(AlphabetConfig.mime(), b"TWE=") == b"Ma"


def test_decode_required_padding_missing():
    """Required padding rejects an unpadded group."""
    with pytest.raises(InvalidLengthError) as exc_info:
        decode_to_bytes(AlphabetConfig.mime(), b"AA")

    assert exc_info.value.length == 2
    assert exc_info.value.padding_char == ord("=")


def test_decode_invalid_character():
    """Decoding rejects bytes outside the alphabet."""
    with pytest.raises(InvalidCharacterError) as exc_info:
        decode_to_bytes(AlphabetConfig.standard(), b"SGVsbG8sIS!")

    assert exc_info.value.char == ord("!")


def test_decode_excess_padding():
    """Decoding rejects three padding characters."""
    with pytest.raises(TooManyPaddingCharactersError) as exc_info:
        decode_to_bytes(AlphabetConfig.standard(), b"AAAA===")

    assert exc_info.value.count == 3


def test_decode_inconsistent_optional_padding():
    """Decoding rejects padding with a length not divisible by 4."""
    with pytest.raises(PaddingWithInvalidLengthError) as exc_info:
        decode_to_bytes(AlphabetConfig.standard(), b"AA=")

    assert exc_info.value.length == 3


def test_decode_validates_before_iteration():
    """Errors surface when decode() is called, not when the result is consumed."""
    with pytest.raises(PaddingWithInvalidLengthError):
        decode(AlphabetConfig.standard(), b"AA=")


def test_decode_returns_an_iterator():
    """decode yields bytes once, as a single-pass iterator."""
    decoded = decode(AlphabetConfig.standard(), b"TWFu")

    assert list(decoded) == [ord("M"), ord("a"), ord("n")]
    assert list(decoded) == []


def test_decode_accepts_str_and_bytes_like():
    """ASCII str, bytearray and memoryview inputs decode like bytes."""
    config = AlphabetConfig.standard()

    assert decode_to_bytes(config, "TWE=") == b"Ma"
    assert decode_to_bytes(config, bytearray(b"TWE=")) == b"Ma"
    assert decode_to_bytes(config, memoryview(b"TWE=")) == b"Ma"


def test_decode_custom_alphabet():
    """A custom alphabet with '.' padding decodes its own output."""
    config = _custom_config()
    encoded = encode_to_bytes(config, HELLO)

    assert len(encoded) == 20
    assert encoded.endswith(b"..")
    assert decode_to_bytes(config, encoded) == HELLO


def test_decode_single_dangling_symbol_yields_nothing():
    """One symbol carries 6 bits, not enough for a byte."""
    assert decode_to_bytes(AlphabetConfig.standard(), b"A") == b""
    assert decode_to_bytes(AlphabetConfig.standard(), b"TWFuA") == b"Man"


def test_decode_empty():
    """Empty input decodes to empty output."""
    assert decode_to_bytes(AlphabetConfig.mime(), b"") == b""


def test_chunked_drops_incomplete_window():
    """Only complete windows are yielded."""
    assert list(chunked([1, 2, 3, 4, 5, 6, 7], 3)) == [(1, 2, 3), (4, 5, 6)]
    assert list(chunked([], 4)) == []


def test_window_packing():
    """Three bytes split into four six-bit values and back."""
    assert unpack_window((0x4D, 0x61, 0x6E)) == (19, 22, 5, 46)
    assert pack_window((19, 22, 5, 46)) == (0x4D, 0x61, 0x6E)
    assert unpack_window((0xFF, 0xFF, 0xFF)) == (63, 63, 63, 63)
