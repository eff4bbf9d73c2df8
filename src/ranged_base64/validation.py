"""Construction-time checks for alphabet configs."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import TYPE_CHECKING

from .errors import (
    OverlappingRangesError,
    PaddingCharInRangeError,
    RangeLengthsDoNotSumTo64Error,
)

if TYPE_CHECKING:  # pragma: no cover
    from .alphabet import AlphabetConfig

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 64


def validate_config(config: "AlphabetConfig") -> None:
    """Check the alphabet invariants, raising on the first violation.

    Checks run in a fixed order:

    1. No two ranges overlap. Pairs are visited as ``(0, 1), (0, 2), ...,
       (1, 2), ...`` and the first overlapping pair is reported.
    2. The padding character, if the policy has one, is outside every range.
    3. The range lengths add up to exactly 64.

    Raises:
        OverlappingRangesError: Two ranges share at least one byte.
        PaddingCharInRangeError: The padding character is also an alphabet symbol.
        RangeLengthsDoNotSumTo64Error: The ranges do not cover exactly 64 symbols.
    """
    for first, second in combinations(config.ranges, 2):
        if first.overlaps(second):
            logger.debug("Rejecting config: %s overlaps %s", first, second)
            raise OverlappingRangesError(first, second)

    pad = config.padding.char
    if pad is not None:
        for byte_range in config.ranges:
            if pad in byte_range:
                logger.debug("Rejecting config: padding %d inside %s", pad, byte_range)
                raise PaddingCharInRangeError(pad, byte_range)

    total = sum(len(r) for r in config.ranges)
    if total != ALPHABET_SIZE:
        logger.debug("Rejecting config: ranges cover %d symbols", total)
        raise RangeLengthsDoNotSumTo64Error(total)


__all__ = ["ALPHABET_SIZE", "validate_config"]
