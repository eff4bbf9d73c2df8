"""Padding and length checks applied to encoded input before decoding."""

from __future__ import annotations

import logging

from .alphabet import AlphabetConfig, PaddingMode
from .errors import (
    InvalidCharacterError,
    InvalidLengthError,
    PaddingWithInvalidLengthError,
    TooManyPaddingCharactersError,
)

logger = logging.getLogger(__name__)

# A valid group carries at most two padding characters; a third is examined
# so it can be reported, anything beyond is not counted.
MAX_PADDING_SCAN = 3


def count_trailing_padding(config: AlphabetConfig, encoded: bytes) -> int:
    """Count padding characters at the end of ``encoded``.

    Only the last three positions are examined, so the result is between 0
    and 3. Always 0 when the config has no padding character.
    """
    pad = config.padding_char
    if pad is None:
        return 0
    count = 0
    for symbol in reversed(encoded[-MAX_PADDING_SCAN:]):
        if symbol != pad:
            break
        count += 1
    return count


def validate_encoded(config: AlphabetConfig, encoded: bytes) -> int:
    """Validate encoded input and return the number of non-padding symbols.

    The checks run in this order so the reported error is deterministic:

    1. At most two trailing padding characters.
    2. Every other byte belongs to the alphabet (scanned from the end).
    3. Required padding: total length is a multiple of 4.
    4. Optional padding: if padding is present, total length is a multiple of 4.

    Args:
        config: Alphabet and padding policy to validate against.
        encoded: Encoded bytes, possibly with trailing padding.

    Returns:
        Length of ``encoded`` minus its trailing padding.

    Raises:
        TooManyPaddingCharactersError: Three or more trailing padding characters.
        InvalidCharacterError: A byte outside the alphabet.
        InvalidLengthError: Required padding and a length not divisible by 4.
        PaddingWithInvalidLengthError: Optional padding present and a length not divisible by 4.
    """
    trailing = count_trailing_padding(config, encoded)
    if trailing >= MAX_PADDING_SCAN:
        logger.debug("Rejecting input: %d trailing padding characters", trailing)
        raise TooManyPaddingCharactersError(trailing)

    length = len(encoded)
    for symbol in reversed(encoded[: length - trailing]):
        if not config.contains(symbol):
            logger.debug("Rejecting input: byte %d outside the alphabet", symbol)
            raise InvalidCharacterError(symbol)

    mode = config.padding.mode
    if mode is PaddingMode.REQUIRED and length % 4 != 0:
        logger.debug("Rejecting input: length %d with required padding", length)
        raise InvalidLengthError(length, config.padding_char)
    if mode is PaddingMode.OPTIONAL and trailing and length % 4 != 0:
        logger.debug("Rejecting input: padded length %d", length)
        raise PaddingWithInvalidLengthError(length)

    return length - trailing


__all__ = ["MAX_PADDING_SCAN", "count_trailing_padding", "validate_encoded"]
