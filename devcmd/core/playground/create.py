"""Create new Swift playgrounds.

All template files are written concurrently. If any write fails, the
playground directory is removed again before the original error is
re-raised, so a failed creation never leaves a half-written playground
behind. A failure during that removal is only reported as a warning.
"""

from __future__ import annotations

import asyncio
import shutil
import textwrap
from collections.abc import Callable
from pathlib import Path

from devcmd.core.errors import CleanupError, InvalidPlaygroundNameError
from devcmd.helpers.helpers_logging import print_warning
from devcmd.helpers.opener import open_path

from .templates import PLAYGROUND_EXTENSION, get_template_files
from .types import CreationParameters, ScaffoldResult, TemplateFile


def validate_playground_name(name: str) -> None:
    """Reject names that cannot be used as a single directory name.

    Raises:
        InvalidPlaygroundNameError: If the name is empty, '.', '..', or
            contains a path separator or NUL byte
    """
    if not name or not name.strip():
        raise InvalidPlaygroundNameError("Playground name must not be empty")
    if name in (".", ".."):
        raise InvalidPlaygroundNameError(f"Invalid playground name: '{name}'")
    for forbidden in ("/", "\\", "\0"):
        if forbidden in name:
            raise InvalidPlaygroundNameError(
                f"Playground name must not contain {forbidden!r}: '{name}'"
            )


def get_playground_path(parameters: CreationParameters) -> Path:
    """Return the absolute .playground directory path for ``parameters``."""
    location = Path(parameters.location).expanduser()
    return location.resolve() / f"{parameters.name}.{PLAYGROUND_EXTENSION}"


def render_template(template_file: TemplateFile) -> str:
    """Return the dedented file body, ending in a single newline."""
    return textwrap.dedent(template_file.contents).strip() + "\n"


def _write_template_file(playground_path: Path, template_file: TemplateFile) -> Path:
    """Write one template file, creating its subdirectory if needed."""
    directory = playground_path
    if template_file.path:
        directory = playground_path / template_file.path
        # Several files may share a subdirectory
        directory.mkdir(parents=True, exist_ok=True)

    file_path = directory / template_file.filename
    file_path.write_text(render_template(template_file), encoding="utf-8")
    return file_path


def _remove_playground(playground_path: Path) -> None:
    """Best-effort removal of a partially created playground."""
    try:
        shutil.rmtree(playground_path)
    except OSError as e:
        print_warning(str(CleanupError(playground_path, e)))


def _make_open_action(
    playground_path: Path,
    open_command: list[str] | None,
) -> Callable[[], bool]:
    def _open() -> bool:
        return open_path(playground_path, open_command)

    return _open


async def create_playground_async(
    parameters: CreationParameters,
    open_command: list[str] | None = None,
) -> ScaffoldResult:
    """Create a Swift playground directory from templates.

    Args:
        parameters: Name, location, template and platform
        open_command: Command used by the result's ``open`` action

    Returns:
        ScaffoldResult; ``already_exists`` is True if the target was
        already present, in which case nothing was written

    Raises:
        InvalidPlaygroundNameError: If the name is unusable
        OSError: If the directory or any file could not be written
    """
    validate_playground_name(parameters.name)
    playground_path = get_playground_path(parameters)
    open_action = _make_open_action(playground_path, open_command)

    if playground_path.exists():
        return ScaffoldResult(
            name=parameters.name,
            path=playground_path,
            already_exists=True,
            open=open_action,
        )

    # Nothing to roll back if this fails
    playground_path.mkdir(parents=True, exist_ok=False)

    template_files = get_template_files(parameters.template, parameters.platform)
    results = await asyncio.gather(
        *(
            asyncio.to_thread(_write_template_file, playground_path, template_file)
            for template_file in template_files
        ),
        return_exceptions=True,
    )

    errors = [result for result in results if isinstance(result, BaseException)]
    if errors:
        await asyncio.to_thread(_remove_playground, playground_path)
        raise errors[0]

    return ScaffoldResult(
        name=parameters.name,
        path=playground_path,
        already_exists=False,
        open=open_action,
    )


def create_playground(
    parameters: CreationParameters,
    open_command: list[str] | None = None,
) -> ScaffoldResult:
    """Synchronous wrapper around :func:`create_playground_async`."""
    return asyncio.run(create_playground_async(parameters, open_command))
