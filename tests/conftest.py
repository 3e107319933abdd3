"""Shared fixtures."""

import pytest

from .samples import NESTED


@pytest.fixture
def nested_layout():
    """Full tmux layout string with checksum prefix."""
    return f"ce5b,{NESTED}"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user config and PANEQUAL_* variables out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for var in (
        "PANEQUAL_TMUX_SOCKET",
        "PANEQUAL_TARGET",
        "PANEQUAL_TIMEOUT",
        "PANEQUAL_JSON",
        "PANEQUAL_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
