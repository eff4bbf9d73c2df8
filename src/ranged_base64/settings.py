"""Configuration helpers for the command-line tool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .alphabet import PRESETS, AlphabetConfig, Padding, PaddingMode

PRESET_ENV = "RANGED_B64_PRESET"
PADDING_ENV = "RANGED_B64_PADDING"
LOG_LEVEL_ENV = "RANGED_B64_LOG_LEVEL"

DEFAULT_PRESET = "standard"
DEFAULT_LOG_LEVEL = "WARNING"


def parse_padding_mode(raw: str) -> PaddingMode:
    """Parse a padding mode name, raising ``RuntimeError`` for unknown values."""
    try:
        return PaddingMode(raw.strip().lower())
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in PaddingMode)
        raise RuntimeError(f"Unsupported padding mode '{raw}'. Choose one of: {valid}.") from exc


def parse_preset(raw: str) -> str:
    """Normalize a preset name, raising ``RuntimeError`` for unknown values."""
    name = raw.strip().lower()
    if name not in PRESETS:
        raise RuntimeError(f"Unsupported preset '{raw}'. Choose one of: {', '.join(PRESETS)}.")
    return name


@dataclass(frozen=True)
class CodecSettings:
    """Which alphabet the CLI uses and how chatty it is."""

    preset: str = DEFAULT_PRESET
    padding_mode: Optional[PaddingMode] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, *, dotenv_path: Optional[str] = None) -> "CodecSettings":
        """Load settings from environment variables, optionally loading a .env file first."""
        load_dotenv(dotenv_path)

        preset = parse_preset(os.getenv(PRESET_ENV, DEFAULT_PRESET))

        padding_raw = os.getenv(PADDING_ENV)
        padding_mode = parse_padding_mode(padding_raw) if padding_raw else None

        log_level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()

        return cls(preset=preset, padding_mode=padding_mode, log_level=log_level)

    def build_config(self) -> AlphabetConfig:
        """Build the alphabet config for the preset, applying any padding override.

        The override keeps the preset's padding character.
        """
        config = AlphabetConfig.preset(self.preset)
        if self.padding_mode is None or self.padding_mode is config.padding.mode:
            return config
        if self.padding_mode is PaddingMode.NONE:
            return config.with_padding(Padding.none())
        return config.with_padding(Padding(self.padding_mode, config.padding_char))


__all__ = [
    "CodecSettings",
    "LOG_LEVEL_ENV",
    "PADDING_ENV",
    "PRESET_ENV",
    "parse_padding_mode",
    "parse_preset",
]
