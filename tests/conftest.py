from __future__ import annotations

import pytest

from ranged_base64.settings import LOG_LEVEL_ENV, PADDING_ENV, PRESET_ENV


@pytest.fixture
def clean_env(monkeypatch):
    """Remove RANGED_B64_* variables and restore them, even if a .env file sets them."""
    for name in (PRESET_ENV, PADDING_ENV, LOG_LEVEL_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
