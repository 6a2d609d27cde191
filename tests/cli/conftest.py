"""Shared fixtures for end-to-end CLI tests.

Every CLI e2e test gets an isolated temporary HOME, so tests never touch
the real ``~/Desktop`` or settings file.

Tests invoke the real entry point (``python -m devcmd``) in a subprocess,
exactly as the installed ``devcmd`` script would run. This validates the
full chain: entry point -> click group -> subcommand module -> core.
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Type alias for the callable fixture.
RunDevcmd = Callable[..., subprocess.CompletedProcess[str]]

_REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture()
def run_devcmd(isolated_env: Path, tmp_path: Path) -> RunDevcmd:
    """Return a helper that invokes ``devcmd <args>`` in a subprocess.

    PATH only contains the interpreter's directory.

    Usage in tests::

        def test_help(run_devcmd: RunDevcmd) -> None:
            result = run_devcmd("help")
            assert result.returncode == 0

    Returns:
        A callable ``(*args) -> CompletedProcess[str]``.
    """
    env = {
        "HOME": str(isolated_env),
        "USERPROFILE": str(isolated_env),
        "DEVCMD_CONFIG": str(isolated_env / "devcmd-config.yaml"),
        "PATH": str(Path(sys.executable).parent),
        "PYTHONPATH": str(_REPO_ROOT),
        "NO_COLOR": "1",
        "PYTHONIOENCODING": "utf-8",
    }
    if "SYSTEMROOT" in os.environ:
        env["SYSTEMROOT"] = os.environ["SYSTEMROOT"]

    def _run(*args: str) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [sys.executable, "-m", "devcmd", *args],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )

    return _run
