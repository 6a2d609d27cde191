"""
CLI module for devcmd.

Provides the ``devcmd`` console entry point and its subcommands.
"""

from .commands import main

__all__ = ["main"]
