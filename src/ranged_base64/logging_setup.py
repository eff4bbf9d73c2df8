"""Logging helpers for the command-line tool."""
from __future__ import annotations

import logging
import sys


def configure_logging(level: str = "WARNING") -> None:
    """Send log records at ``level`` and above to stderr.

    Stdout is reserved for encoded and decoded output.
    """
    logging_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logging.basicConfig(level=logging_level, handlers=[handler], force=True)


__all__ = ["configure_logging"]
