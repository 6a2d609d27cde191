"""Template files for Swift playground scaffolding."""

from .types import PlaygroundPlatform, PlaygroundTemplate, TemplateFile

PLAYGROUND_EXTENSION = "playground"


def get_timeline_template() -> TemplateFile:
    """Return the empty timeline.xctimeline file."""
    return TemplateFile(
        name="timeline",
        extension="xctimeline",
        contents="""
            <?xml version="1.0" encoding="UTF-8"?>
            <Timeline version="3.0">
               <TimelineItems>
               </TimelineItems>
            </Timeline>
            """,
    )


def get_workspace_template() -> TemplateFile:
    """Return playground.xcworkspace/contents.xcworkspacedata."""
    return TemplateFile(
        path="playground.xcworkspace",
        name="contents",
        extension="xcworkspacedata",
        contents="""
            <?xml version="1.0" encoding="UTF-8"?>
            <Workspace version="1.0">
              <FileRef location="group:self:">
              </FileRef>
            </Workspace>
            """,
    )


def get_playground_settings_template(platform: PlaygroundPlatform) -> TemplateFile:
    """Return contents.xcplayground targeting ``platform``.

    Args:
        platform: Target platform; its value is lower-cased into target-platform
    """
    return TemplateFile(
        name="contents",
        extension="xcplayground",
        contents=f"""
            <?xml version="1.0" encoding="UTF-8" standalone="yes"?>
            <playground version='5.0'
                        target-platform='{platform.value.lower()}'
                        buildActiveScheme='true'
                        executeOnSourceChanges='false'
                        importAppTypes='true'>
                <timeline fileName='timeline.xctimeline'/>
            </playground>
            """,
    )


def get_swift_source_template(template: PlaygroundTemplate) -> TemplateFile:
    """Return Contents.swift for the selected source template."""
    if template is PlaygroundTemplate.SWIFT_UI:
        contents = """
            import PlaygroundSupport
            import SwiftUI

            struct ContentView: View {

                var body: some View {
                    Text("Hello World")
                }

            }

            PlaygroundPage.current.liveView = UIHostingController(rootView: ContentView())
            """
    else:
        contents = "import Foundation\n\n"

    return TemplateFile(
        name="Contents",
        extension="swift",
        contents=contents,
    )


def get_template_files(
    template: PlaygroundTemplate,
    platform: PlaygroundPlatform,
) -> list[TemplateFile]:
    """Return every file a new playground consists of."""
    return [
        get_timeline_template(),
        get_workspace_template(),
        get_swift_source_template(template),
        get_playground_settings_template(platform),
    ]
