"""Open files and directories in the platform's default application."""

import subprocess
import sys
from pathlib import Path

from devcmd.helpers.helpers_logging import print_warning


def default_open_command(platform: str | None = None) -> list[str]:
    """Return the command that opens a path with its default application."""
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open"]
    if platform.startswith("win"):
        return ["explorer"]
    return ["xdg-open"]


def open_path(path: Path, command: list[str] | None = None) -> bool:
    """Open ``path`` without waiting for the viewer to exit.

    Failures are reported as warnings, never raised.

    Returns:
        True if the open command was started
    """
    cmd = [*(command or default_open_command()), str(path)]
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        print_warning(f"Could not open {path}: {e}")
        return False
    return True
