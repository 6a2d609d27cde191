#!/usr/bin/env python3
"""devcmd - Main Entry Point.

Usage:
    devcmd <command> [options]

Commands:
    generate-password    Generate a random password and copy it to the clipboard
    create-playground    Create a new Xcode Swift playground
    help                 Show this help message
"""

from __future__ import annotations

import contextlib
import importlib
import sys

import click

from devcmd import __version__
from devcmd.helpers.settings import get_config_path

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

# Commands backed by an argparse ``main()`` in their own module
COMMANDS: dict[str, dict[str, str]] = {
    "generate-password": {
        "module": "devcmd.cli.password_command",
        "description": "Generate a random password and copy it to the clipboard",
        "usage": "devcmd generate-password [length] [--no-numbers] [--no-special-chars] [--no-copy]",
    },
    "create-playground": {
        "module": "devcmd.cli.playground_command",
        "description": "Create a new Xcode Swift playground",
        "usage": (
            "devcmd create-playground <name> [--location PATH] "
            + "[--template empty|swiftui] [--platform ios|macos|tvos] [--no-open]"
        ),
    },
}

COMMAND_ALIASES: dict[str, str] = {
    "pw": "generate-password",
    "pg": "create-playground",
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print(f"📦 devcmd {__version__}")
    print(f"⚙️  Settings: {get_config_path()}")

    print("\n🧰 Commands:")
    for cmd, info in COMMANDS.items():
        desc = info["description"]
        desc += f"\n  {' ' * 20}   Usage: {info['usage']}"
        print(f"  {cmd:20} - {desc}")

    print("\n⚡ Aliases:")
    for alias, canonical in COMMAND_ALIASES.items():
        print(f"  {alias:20} - alias for {canonical}")


def execute_command(command: str, extra_args: list[str]) -> int:
    """Run a command module's ``main()`` with ``extra_args`` as its argv."""
    cmd_info = COMMANDS.get(COMMAND_ALIASES.get(command, command))
    if cmd_info is None:
        print(f"❌ Unknown command: {command}")
        print("\nRun 'devcmd help' to see available commands.")
        return 1

    module = importlib.import_module(cmd_info["module"])
    sys.argv = [sys.argv[0], *extra_args]
    try:
        return int(module.main())
    except SystemExit as exc:
        # argparse exits on --help and usage errors
        code = exc.code
        if code is None:
            return 0
        return code if isinstance(code, int) else 1


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level devcmd command group."""
    if ctx.invoked_subcommand is not None:
        return 0

    print_help()
    return 0


def _register_commands() -> None:
    """Register all top-level commands and aliases in the click app."""
    from devcmd.cli.click_commands import CLICK_COMMANDS

    for _name, cmd_obj in CLICK_COMMANDS.items():
        _click_cli.add_command(cmd_obj)

    # Aliases defer to the canonical command objects
    for alias, canonical in COMMAND_ALIASES.items():
        cmd_obj = CLICK_COMMANDS.get(canonical)
        if cmd_obj is not None:
            _click_cli.add_command(cmd_obj, name=alias)

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def main() -> int:
    """Main CLI entry point."""
    import os

    # Let Click handle shell completion protocol before anything else.
    if os.environ.get("_DEVCMD_COMPLETE"):
        with contextlib.suppress(SystemExit):
            _click_cli.main(
                args=sys.argv[1:],
                prog_name="devcmd",
                standalone_mode=True,
            )
        return 0

    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="devcmd",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
