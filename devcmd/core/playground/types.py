"""Data types for playground scaffolding."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from devcmd.core.errors import ValidationError


class PlaygroundTemplate(Enum):
    """Source template written to Contents.swift."""

    EMPTY = "empty"
    SWIFT_UI = "swiftUI"

    @classmethod
    def parse(cls, value: str) -> PlaygroundTemplate:
        """Look up a template by value, case-insensitively."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValidationError(f"Unknown playground template '{value}' (choose from: {choices})")


class PlaygroundPlatform(Enum):
    """Target platform written to contents.xcplayground."""

    IOS = "iOS"
    MACOS = "macOS"
    TVOS = "tvOS"

    @classmethod
    def parse(cls, value: str) -> PlaygroundPlatform:
        """Look up a platform by value, case-insensitively."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValidationError(f"Unknown playground platform '{value}' (choose from: {choices})")


@dataclass
class CreationParameters:
    """Input for a single playground creation.

    Attributes:
        name: Playground name, without the .playground extension
        location: Parent directory; a leading ``~`` is expanded
        template: Contents.swift template
        platform: Target platform
    """
    name: str
    location: str
    template: PlaygroundTemplate = PlaygroundTemplate.EMPTY
    platform: PlaygroundPlatform = PlaygroundPlatform.IOS


@dataclass(frozen=True)
class TemplateFile:
    """One file to write inside the playground directory."""
    name: str
    extension: str
    contents: str
    path: str | None = None

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.extension}"


@dataclass
class ScaffoldResult:
    """Outcome of a playground creation.

    Attributes:
        name: Playground name
        path: Absolute path of the .playground directory
        already_exists: True if the directory was already there and left untouched
        open: Opens ``path`` in the default viewer; returns False if it could not start
    """
    name: str
    path: Path
    already_exists: bool
    open: Callable[[], bool]
