"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, str]:
    """Pin TEMPCONV_* settings and run from a directory without a .env file."""
    monkeypatch.chdir(tmp_path)
    env = {
        "TEMPCONV_HISTORY_CAPACITY": "50",
        "TEMPCONV_DEFAULT_DIRECTION": "f_to_c",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("TEMPCONV_OUTPUT_FORMAT", raising=False)
    return env
