"""Shared fixtures for the devcmd test suite.

Every test runs with an isolated settings file location and home
directory, so the developer's real ``~/.config/devcmd/config.yaml`` and
``~/Desktop`` are never read or written.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[Path]:
    """Point HOME and DEVCMD_CONFIG into ``tmp_path``.

    Yields:
        The fake home directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("DEVCMD_CONFIG", str(home / "devcmd-config.yaml"))
    monkeypatch.delenv("DEVCMD_PLAYGROUND_LOCATION", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    yield home


@pytest.fixture()
def write_config(isolated_env: Path):
    """Return a helper that writes the isolated settings file."""

    def _write(content: str) -> Path:
        config_path = isolated_env / "devcmd-config.yaml"
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write
