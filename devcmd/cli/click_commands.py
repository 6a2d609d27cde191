"""Click command definitions with option declarations for shell completion.

Each command is declared with its full set of Click options/arguments so
``--help`` listings and shell completion know about them. The actual
argument parsing is still done by the argparse ``main()`` of each command
module.

The commands use ``allow_extra_args=True`` and ``ignore_unknown_options=True``
so Click doesn't reject args it doesn't know about (argparse handles that).
"""

from __future__ import annotations

import sys

import click

from devcmd.core.playground import PlaygroundPlatform, PlaygroundTemplate

# Shared context settings for all passthrough commands
_PASSTHROUGH_CTX: dict[str, object] = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
}


# ============================================================================
# generate-password
# ============================================================================

@click.command(
    name="generate-password",
    help="Generate a random password and copy it to the clipboard",
    context_settings=_PASSTHROUGH_CTX,
    add_help_option=False,
)
@click.argument("length", required=False, default=None)
@click.option("--numbers/--no-numbers", default=None,
              help="Include digits")
@click.option("--special-chars/--no-special-chars", default=None,
              help="Include special characters")
@click.option("--copy/--no-copy", default=None,
              help="Copy the password to the clipboard")
@click.pass_context
def generate_password_cmd(_ctx: click.Context, **_kwargs: object) -> int:
    """generate-password passthrough."""
    from devcmd.cli.commands import execute_command

    return execute_command("generate-password", sys.argv[2:])


# ============================================================================
# create-playground
# ============================================================================

@click.command(
    name="create-playground",
    help="Create a new Xcode Swift playground",
    context_settings=_PASSTHROUGH_CTX,
    add_help_option=False,
)
@click.argument("name", required=False, default=None)
@click.option("--location", type=click.Path(file_okay=False),
              help="Parent directory")
@click.option("--template",
              type=click.Choice([t.value.lower() for t in PlaygroundTemplate],
                                case_sensitive=False),
              help="Source template")
@click.option("--platform",
              type=click.Choice([p.value.lower() for p in PlaygroundPlatform],
                                case_sensitive=False),
              help="Target platform")
@click.option("--open/--no-open", "open_after_create", default=None,
              help="Open the playground afterwards")
@click.pass_context
def create_playground_cmd(_ctx: click.Context, **_kwargs: object) -> int:
    """create-playground passthrough."""
    from devcmd.cli.commands import execute_command

    return execute_command("create-playground", sys.argv[2:])


# ============================================================================
# Registry of all typed commands
# ============================================================================

CLICK_COMMANDS: dict[str, click.Command] = {
    "generate-password": generate_password_cmd,
    "create-playground": create_playground_cmd,
}
