"""System clipboard access through platform clipboard commands."""

import shutil
import subprocess
import sys

from devcmd.core.errors import ClipboardError

# Tried in order on platforms other than macOS and Windows
_LINUX_CLIPBOARD_COMMANDS: list[list[str]] = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def find_clipboard_command(platform: str | None = None) -> list[str] | None:
    """Return the first clipboard command available on PATH, or None."""
    platform = platform or sys.platform
    if platform == "darwin":
        candidates = [["pbcopy"]]
    elif platform.startswith("win"):
        candidates = [["clip"]]
    else:
        candidates = _LINUX_CLIPBOARD_COMMANDS

    for candidate in candidates:
        if shutil.which(candidate[0]) is not None:
            return candidate
    return None


def copy_to_clipboard(text: str, command: list[str] | None = None) -> None:
    """Make ``text`` the system clipboard contents.

    Args:
        text: Text to copy
        command: Clipboard command reading from stdin (auto-detected if None)

    Raises:
        ClipboardError: If no clipboard command is available or it fails
    """
    cmd = command or find_clipboard_command()
    if cmd is None:
        raise ClipboardError(
            "No clipboard command found (install wl-copy, xclip or xsel)"
        )

    try:
        result = subprocess.run(
            cmd,
            input=text,
            text=True,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise ClipboardError(f"Failed to run {cmd[0]}: {e}") from e

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit code {result.returncode}"
        raise ClipboardError(f"{cmd[0]} failed: {detail}")
