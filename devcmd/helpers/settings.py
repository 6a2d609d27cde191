"""User settings for devcmd commands.

Settings come from an optional YAML file. Lookup order for the file:
the explicit ``path`` argument, ``$DEVCMD_CONFIG``, then
``~/.config/devcmd/config.yaml``. A missing file means defaults.

Example config.yaml::

    password:
      default_length: 24
      use_special_chars: false
    playground:
      location: ~/Developer/Playgrounds
      platform: macOS
    open_command: [code]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, cast

import yaml

from devcmd.helpers.helpers_logging import print_warning

CONFIG_ENV_VAR = "DEVCMD_CONFIG"
LOCATION_ENV_VAR = "DEVCMD_PLAYGROUND_LOCATION"
DEFAULT_CONFIG_PATH = Path("~/.config/devcmd/config.yaml")


@dataclass
class PasswordSettings:
    """Defaults for ``devcmd generate-password``."""

    default_length: int = 16
    use_numbers: bool = True
    use_special_chars: bool = True
    copy_to_clipboard: bool = True


@dataclass
class PlaygroundSettings:
    """Defaults for ``devcmd create-playground``."""

    location: str = "~/Desktop"
    template: str = "empty"
    platform: str = "iOS"
    open_after_create: bool = True


@dataclass
class Settings:
    """All devcmd settings.

    Attributes:
        password: Password generator defaults
        playground: Playground scaffolder defaults
        clipboard_command: Command that reads clipboard text from stdin
        open_command: Command used to open a created playground
    """

    password: PasswordSettings = field(default_factory=PasswordSettings)
    playground: PlaygroundSettings = field(default_factory=PlaygroundSettings)
    clipboard_command: list[str] | None = None
    open_command: list[str] | None = None


def get_config_path(path: Path | None = None) -> Path:
    """Return the settings file location (not required to exist)."""
    if path is not None:
        return path.expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def _apply_section(target: Any, section: object, section_name: str) -> None:
    """Copy keys from a YAML mapping onto a settings dataclass, type-checked."""
    if section is None:
        return
    if not isinstance(section, dict):
        print_warning(f"Ignoring '{section_name}' in settings: expected a mapping")
        return

    known = {f.name for f in fields(target)}
    for key, value in cast(dict[str, object], section).items():
        if key not in known:
            print_warning(f"Ignoring unknown setting '{section_name}.{key}'")
            continue
        default = getattr(target, key)
        # bool is a subclass of int, so check it first
        if isinstance(default, bool):
            valid = isinstance(value, bool)
        elif isinstance(default, int):
            valid = isinstance(value, int) and not isinstance(value, bool)
        else:
            valid = isinstance(value, type(default))
        if not valid:
            print_warning(
                f"Ignoring '{section_name}.{key}': expected "
                + f"{type(default).__name__}, got {type(value).__name__}"
            )
            continue
        setattr(target, key, value)


def _parse_command(value: object, key: str) -> list[str] | None:
    """Accept a command as a list of strings or a single string."""
    if value is None:
        return None
    if isinstance(value, str) and value.strip():
        return value.split()
    if (
        isinstance(value, list)
        and value
        and all(isinstance(part, str) for part in cast(list[object], value))
    ):
        return cast(list[str], value)
    print_warning(f"Ignoring '{key}' in settings: expected a command list")
    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults for anything unusable.

    Args:
        path: Explicit settings file (overrides $DEVCMD_CONFIG)

    Returns:
        Settings with file values and environment overrides applied
    """
    settings = Settings()
    config_path = get_config_path(path)

    if config_path.is_file():
        try:
            raw_data: object = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            print_warning(f"Could not read settings from {config_path}: {e}")
            raw_data = None

        if raw_data is not None and not isinstance(raw_data, dict):
            print_warning(f"Ignoring {config_path}: expected a mapping at top level")
        elif isinstance(raw_data, dict):
            data = cast(dict[str, object], raw_data)
            _apply_section(settings.password, data.get("password"), "password")
            _apply_section(settings.playground, data.get("playground"), "playground")
            settings.clipboard_command = _parse_command(
                data.get("clipboard_command"), "clipboard_command",
            )
            settings.open_command = _parse_command(
                data.get("open_command"), "open_command",
            )

    env_location = os.environ.get(LOCATION_ENV_VAR)
    if env_location:
        settings.playground.location = env_location

    return settings
