#!/usr/bin/env python3
"""
Create a new Xcode Swift playground.

The playground is written to ``<location>/<name>.playground``. If it
already exists it is left untouched (and opened, unless --no-open).

Usage:
    # Empty iOS playground in the configured location (default ~/Desktop)
    devcmd create-playground Demo

    # SwiftUI playground for macOS in a custom directory
    devcmd create-playground Demo \\
        --location ~/Playgrounds \\
        --template swiftui \\
        --platform macos
"""

import argparse
import sys

from devcmd.core.errors import ValidationError
from devcmd.core.playground import (
    CreationParameters,
    PlaygroundPlatform,
    PlaygroundTemplate,
    create_playground,
)
from devcmd.helpers.helpers_logging import (
    print_error,
    print_info,
    print_success,
    print_warning,
)
from devcmd.helpers.settings import load_settings

_TEMPLATE_CHOICES = [t.value.lower() for t in PlaygroundTemplate]
_PLATFORM_CHOICES = [p.value.lower() for p in PlaygroundPlatform]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for create-playground."""
    parser = argparse.ArgumentParser(
        prog="devcmd create-playground",
        description="Create a new Xcode Swift playground",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  devcmd create-playground Demo
  devcmd create-playground Demo --location ~/Playgrounds --template swiftui --platform macos

Templates:
  empty:    Contents.swift only imports Foundation
  swiftui:  Contents.swift shows a SwiftUI ContentView as the live view

Created files:
  <name>.playground/contents.xcplayground
  <name>.playground/Contents.swift
  <name>.playground/timeline.xctimeline
  <name>.playground/playground.xcworkspace/contents.xcworkspacedata
        """,
    )

    parser.add_argument("name", help="Playground name (without .playground)")
    parser.add_argument(
        "--location",
        help="Parent directory (default: playground.location setting, ~/Desktop)",
    )
    parser.add_argument(
        "--template",
        type=str.lower,
        choices=_TEMPLATE_CHOICES,
        help="Source template (default: playground.template setting, empty)",
    )
    parser.add_argument(
        "--platform",
        type=str.lower,
        choices=_PLATFORM_CHOICES,
        help="Target platform (default: playground.platform setting, ios)",
    )
    parser.add_argument(
        "--open",
        dest="open_after_create",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Open the playground afterwards (default: on)",
    )
    return parser


def main() -> int:
    """Main entry point for create-playground command."""
    args = build_parser().parse_args()
    settings = load_settings()
    defaults = settings.playground

    try:
        parameters = CreationParameters(
            name=args.name,
            location=args.location or defaults.location,
            template=PlaygroundTemplate.parse(args.template or defaults.template),
            platform=PlaygroundPlatform.parse(args.platform or defaults.platform),
        )
        result = create_playground(parameters, settings.open_command)
    except ValidationError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Failed to create playground '{args.name}': {e}")
        return 1

    if result.already_exists:
        print_warning(f"Swift Playground already exists: {result.path}")
    else:
        print_success(f"Created Swift Playground: {result.path}")

    should_open = (
        defaults.open_after_create
        if args.open_after_create is None
        else args.open_after_create
    )
    if should_open:
        print_info(f"Opening {result.path}")
        result.open()
    return 0


if __name__ == "__main__":
    sys.exit(main())
