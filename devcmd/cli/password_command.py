#!/usr/bin/env python3
"""
Generate a random password and copy it to the clipboard.

Usage:
    # 16 characters (configured default) with digits and special characters
    devcmd generate-password

    # 32 letters and digits only
    devcmd generate-password 32 --no-special-chars

    # Print only, leave the clipboard alone
    devcmd generate-password 12 --no-copy
"""

import argparse
import sys

from devcmd.core.errors import ClipboardError, ValidationError
from devcmd.core.password_generator import (
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    generate_password,
    validate_password_length,
)
from devcmd.helpers.clipboard import copy_to_clipboard
from devcmd.helpers.helpers_logging import (
    print_error,
    print_info,
    print_success,
    print_warning,
)
from devcmd.helpers.settings import load_settings


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for generate-password."""
    parser = argparse.ArgumentParser(
        prog="devcmd generate-password",
        description="Generate a random password and copy it to the clipboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  devcmd generate-password
  devcmd generate-password 32 --no-special-chars
  devcmd generate-password 12 --no-copy

Length must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}.
Letters are always used; digits and special characters can be turned off.
        """,
    )

    parser.add_argument(
        "length",
        nargs="?",
        help=f"Number of characters ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}). "
             + "Default comes from settings (password.default_length)",
    )
    parser.add_argument(
        "--numbers",
        dest="use_numbers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include digits (default: on)",
    )
    parser.add_argument(
        "--special-chars",
        dest="use_special_chars",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include special characters (default: on)",
    )
    parser.add_argument(
        "--copy",
        dest="copy",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Copy the password to the clipboard (default: on)",
    )
    return parser


def main() -> int:
    """Main entry point for generate-password command."""
    args = build_parser().parse_args()
    all_settings = load_settings()
    settings = all_settings.password

    raw_length = args.length if args.length is not None else settings.default_length
    try:
        length = validate_password_length(raw_length)
    except ValidationError as e:
        print_error(str(e))
        return 1

    use_numbers = settings.use_numbers if args.use_numbers is None else args.use_numbers
    use_special_chars = (
        settings.use_special_chars
        if args.use_special_chars is None
        else args.use_special_chars
    )
    copy = settings.copy_to_clipboard if args.copy is None else args.copy

    password = generate_password(length, use_numbers, use_special_chars)

    if not copy:
        print(password)
        return 0

    try:
        copy_to_clipboard(password, all_settings.clipboard_command)
    except ClipboardError as e:
        print_warning(f"Could not copy password: {e}")
        print(password)
        return 0

    print_success("Copied Password")
    print_info(password)
    return 0


if __name__ == "__main__":
    sys.exit(main())
