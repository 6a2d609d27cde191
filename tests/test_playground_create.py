"""Tests for playground creation, existing targets and rollback."""

from __future__ import annotations

import asyncio
from pathlib import Path
from unittest.mock import patch

import pytest

from devcmd.core.errors import InvalidPlaygroundNameError
from devcmd.core.playground import (
    CreationParameters,
    PlaygroundPlatform,
    PlaygroundTemplate,
    TemplateFile,
    create_playground,
    create_playground_async,
    get_playground_path,
)
from devcmd.core.playground import create as create_module

_real_write = create_module._write_template_file


def _failing_writer(failing_filename: str):
    """Return a writer that fails for one file and writes the others."""

    def _write(playground_path: Path, template_file: TemplateFile) -> Path:
        if template_file.filename == failing_filename:
            raise OSError(28, "No space left on device")
        return _real_write(playground_path, template_file)

    return _write


class TestCreatePlayground:
    """Successful creation on a clean filesystem."""

    def test_demo_playground_in_home_location(self, isolated_env: Path) -> None:
        result = create_playground(
            CreationParameters(
                name="Demo",
                location="~/Playgrounds",
                template=PlaygroundTemplate.EMPTY,
                platform=PlaygroundPlatform.IOS,
            )
        )

        expected = (isolated_env / "Playgrounds").resolve() / "Demo.playground"
        assert result.already_exists is False
        assert result.name == "Demo"
        assert result.path == expected
        assert result.path.is_absolute()

        assert (expected / "timeline.xctimeline").is_file()
        assert (expected / "playground.xcworkspace" / "contents.xcworkspacedata").is_file()
        settings = (expected / "contents.xcplayground").read_text(encoding="utf-8")
        assert "target-platform='ios'" in settings
        source = (expected / "Contents.swift").read_text(encoding="utf-8")
        assert source == "import Foundation\n"

    def test_creates_exactly_the_template_files(self, tmp_path: Path) -> None:
        result = create_playground(
            CreationParameters("Layout", str(tmp_path), PlaygroundTemplate.SWIFT_UI)
        )

        created = sorted(
            str(p.relative_to(result.path)) for p in result.path.rglob("*") if p.is_file()
        )
        assert created == sorted([
            "Contents.swift",
            "contents.xcplayground",
            "timeline.xctimeline",
            str(Path("playground.xcworkspace") / "contents.xcworkspacedata"),
        ])

    def test_swiftui_macos_contents(self, tmp_path: Path) -> None:
        result = create_playground(
            CreationParameters(
                "UI", str(tmp_path), PlaygroundTemplate.SWIFT_UI, PlaygroundPlatform.MACOS,
            )
        )

        assert "target-platform='macos'" in (result.path / "contents.xcplayground").read_text()
        assert "import SwiftUI" in (result.path / "Contents.swift").read_text()

    def test_async_variant(self, tmp_path: Path) -> None:
        result = asyncio.run(
            create_playground_async(CreationParameters("Async", str(tmp_path)))
        )
        assert (result.path / "Contents.swift").is_file()

    def test_open_action_uses_open_path(self, tmp_path: Path) -> None:
        result = create_playground(
            CreationParameters("Open", str(tmp_path)), open_command=["code"],
        )

        with patch.object(create_module, "open_path", return_value=True) as mock_open:
            assert result.open() is True

        mock_open.assert_called_once_with(result.path, ["code"])


class TestExistingPlayground:
    """An existing target is reported and never modified."""

    def test_second_call_reports_already_exists_without_writing(
        self,
        tmp_path: Path,
    ) -> None:
        parameters = CreationParameters("Twice", str(tmp_path))
        first = create_playground(parameters)
        marker = first.path / "Contents.swift"
        marker.write_text("// edited by hand\n")

        with patch.object(create_module, "_write_template_file") as mock_write:
            second = create_playground(parameters)

        assert first.already_exists is False
        assert second.already_exists is True
        assert second.path == first.path
        mock_write.assert_not_called()
        assert marker.read_text() == "// edited by hand\n"

    def test_existing_directory_is_opened_by_action(self, tmp_path: Path) -> None:
        existing = tmp_path / "Old.playground"
        existing.mkdir()

        result = create_playground(CreationParameters("Old", str(tmp_path)))

        with patch.object(create_module, "open_path", return_value=True) as mock_open:
            result.open()

        assert result.already_exists is True
        assert list(existing.iterdir()) == []
        mock_open.assert_called_once_with(existing.resolve(), None)


class TestRollback:
    """A failed write removes the whole playground directory."""

    @pytest.mark.parametrize(
        "failing_filename",
        [
            "timeline.xctimeline",
            "contents.xcworkspacedata",
            "Contents.swift",
            "contents.xcplayground",
        ],
    )
    def test_write_failure_removes_directory(
        self,
        tmp_path: Path,
        failing_filename: str,
    ) -> None:
        parameters = CreationParameters("Broken", str(tmp_path))

        with patch.object(
            create_module,
            "_write_template_file",
            side_effect=_failing_writer(failing_filename),
        ):
            with pytest.raises(OSError, match="No space left on device"):
                create_playground(parameters)

        assert not get_playground_path(parameters).exists()

    def test_cleanup_failure_is_swallowed_and_original_error_raised(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        parameters = CreationParameters("Stuck", str(tmp_path))

        with patch.object(
            create_module,
            "_write_template_file",
            side_effect=_failing_writer("Contents.swift"),
        ), patch.object(
            create_module.shutil,
            "rmtree",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(OSError, match="No space left on device"):
                create_playground(parameters)

        err = capsys.readouterr().err
        assert "Failed to remove" in err
        assert "Permission denied" in err

    def test_directory_creation_failure_propagates(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")

        with patch.object(create_module.shutil, "rmtree") as mock_rmtree:
            with pytest.raises(OSError):
                create_playground(CreationParameters("Demo", str(blocker)))

        mock_rmtree.assert_not_called()

    def test_all_writes_settle_before_cleanup(self, tmp_path: Path) -> None:
        calls: list[str] = []

        def _write(playground_path: Path, template_file: TemplateFile) -> Path:
            calls.append(template_file.filename)
            if template_file.filename == "timeline.xctimeline":
                raise OSError("boom")
            return _real_write(playground_path, template_file)

        parameters = CreationParameters("Settle", str(tmp_path))
        with patch.object(create_module, "_write_template_file", side_effect=_write):
            with pytest.raises(OSError, match="boom"):
                create_playground(parameters)

        assert len(calls) == 4
        assert not get_playground_path(parameters).exists()


class TestNameValidation:
    """Names must be usable as a single directory name."""

    @pytest.mark.parametrize("name", ["", "   ", ".", "..", "a/b", "a\\b", "a\0b"])
    def test_invalid_names_rejected_before_touching_disk(
        self,
        tmp_path: Path,
        name: str,
    ) -> None:
        with pytest.raises(InvalidPlaygroundNameError):
            create_playground(CreationParameters(name, str(tmp_path)))

        assert list(tmp_path.iterdir()) == [tmp_path / "home"]

    def test_shared_subdirectory_created_idempotently(self, tmp_path: Path) -> None:
        target = tmp_path / "Shared.playground"
        target.mkdir()
        shared = TemplateFile(name="a", extension="txt", contents="a", path="sub")
        other = TemplateFile(name="b", extension="txt", contents="b", path="sub")

        create_module._write_template_file(target, shared)
        create_module._write_template_file(target, other)

        assert (target / "sub" / "a.txt").read_text() == "a\n"
        assert (target / "sub" / "b.txt").read_text() == "b\n"


def test_open_action_failure_does_not_raise(tmp_path: Path) -> None:
    result = create_playground(CreationParameters("NoViewer", str(tmp_path)))

    with patch(
        "devcmd.helpers.opener.subprocess.Popen",
        side_effect=FileNotFoundError(2, "No such file", "xdg-open"),
    ) as mock_popen:
        assert result.open() is False

    mock_popen.assert_called_once()
