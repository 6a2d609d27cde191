"""Colored terminal output helpers for devcmd commands.

Info and success messages go to stdout, warnings and errors to stderr.
Colors are dropped when ``NO_COLOR`` is set or the stream is not a TTY.
"""

import os
import sys
from typing import TextIO


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def use_color(stream: TextIO) -> bool:
    """Return True when ANSI colors should be written to ``stream``."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _emit(msg: str, color: str, stream: TextIO) -> None:
    if use_color(stream):
        print(f"{color}{msg}{Colors.RESET}", file=stream)
    else:
        print(msg, file=stream)


def print_header(msg: str) -> None:
    """Print a header message."""
    _emit(msg, Colors.HEADER + Colors.BOLD, sys.stdout)


def print_info(msg: str) -> None:
    """Print an info message."""
    _emit(msg, Colors.CYAN, sys.stdout)


def print_success(msg: str) -> None:
    """Print a success message."""
    _emit(f"✓ {msg}", Colors.GREEN, sys.stdout)


def print_warning(msg: str) -> None:
    """Print a warning message."""
    _emit(f"⚠️  {msg}", Colors.YELLOW, sys.stderr)


def print_error(msg: str) -> None:
    """Print an error message."""
    _emit(f"❌ {msg}", Colors.RED, sys.stderr)
