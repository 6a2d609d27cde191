"""Exception types raised by devcmd command cores."""

from pathlib import Path


class DevcmdError(Exception):
    """Base class for devcmd errors."""


class ValidationError(DevcmdError, ValueError):
    """User input was rejected before any work was done."""


class PasswordLengthError(ValidationError):
    """Password length is not a number or outside the accepted range."""


class InvalidPlaygroundNameError(ValidationError):
    """Playground name cannot be used as a directory name."""


class CleanupError(DevcmdError):
    """Removing a partially created playground failed.

    Only ever reported as a warning; the error that triggered the
    rollback is the one propagated to the caller.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to remove {path}: {cause}")
        self.path = path
        self.cause = cause


class ClipboardError(DevcmdError):
    """The system clipboard could not be written."""
