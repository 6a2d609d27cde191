"""Swift playground scaffolding package.

Public API:
    create_playground: Create a playground directory (blocking)
    create_playground_async: Same, as a coroutine

Example:
    from devcmd.core.playground import (
        CreationParameters,
        PlaygroundPlatform,
        create_playground,
    )

    result = create_playground(
        CreationParameters("Demo", "~/Playgrounds", platform=PlaygroundPlatform.MACOS)
    )
    if not result.already_exists:
        result.open()
"""

from .create import (
    create_playground,
    create_playground_async,
    get_playground_path,
    validate_playground_name,
)
from .templates import (
    PLAYGROUND_EXTENSION,
    get_playground_settings_template,
    get_swift_source_template,
    get_template_files,
    get_timeline_template,
    get_workspace_template,
)
from .types import (
    CreationParameters,
    PlaygroundPlatform,
    PlaygroundTemplate,
    ScaffoldResult,
    TemplateFile,
)

__all__ = [
    # Main public API
    "create_playground",
    "create_playground_async",
    "get_playground_path",
    "validate_playground_name",
    # Templates
    "PLAYGROUND_EXTENSION",
    "get_playground_settings_template",
    "get_swift_source_template",
    "get_template_files",
    "get_timeline_template",
    "get_workspace_template",
    # Types
    "CreationParameters",
    "PlaygroundPlatform",
    "PlaygroundTemplate",
    "ScaffoldResult",
    "TemplateFile",
]
