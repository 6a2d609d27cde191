"""Helper utilities shared by devcmd commands."""

from devcmd.helpers.settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
]
