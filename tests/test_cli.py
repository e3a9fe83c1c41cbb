"""Tests for CLI commands using context injection.

Commands accept a _context parameter so tests can pass doubles without
patching module-level imports.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from fs_utils import __version__, cli
from fs_utils.errors import ErrorKind
from fs_utils.types import OperationResult

runner = CliRunner()


class TestEmptyCommand:
    """Tests for the empty command."""

    def test_empty(self, mock_app_context: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        """Reports an empty directory."""
        mock_app_context.filesystem.is_folder_empty.return_value = OperationResult.ok(True)

        cli.empty(path=Path("dir"), _context=mock_app_context)

        mock_app_context.filesystem.is_folder_empty.assert_called_once_with(Path("dir"))
        assert "is empty" in capsys.readouterr().out

    def test_not_empty(
        self, mock_app_context: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Reports a non-empty directory."""
        mock_app_context.filesystem.is_folder_empty.return_value = OperationResult.ok(False)

        cli.empty(path=Path("dir"), _context=mock_app_context)

        assert "not empty" in capsys.readouterr().out

    def test_error_exits(
        self, mock_app_context: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Failures print the message and exit with code 1."""
        mock_app_context.filesystem.is_folder_empty.return_value = OperationResult.fail(
            "Failed to read directory 'dir': No such file or directory", ErrorKind.IO
        )

        with pytest.raises(typer.Exit) as exc_info:
            cli.empty(path=Path("dir"), _context=mock_app_context)

        assert exc_info.value.exit_code == 1
        assert "No such file or directory" in capsys.readouterr().out


class TestCopyCommands:
    """Tests for dest and copy commands."""

    def test_dest(self, mock_app_context: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the computed destination."""
        mock_app_context.filesystem.destination_directory.return_value = OperationResult.ok(
            Path("backup/src")
        )

        cli.dest(source=Path("src"), parent=Path("backup"), _context=mock_app_context)

        assert str(Path("backup/src")) in capsys.readouterr().out

    def test_copy_success(
        self, mock_app_context: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Reports the destination of a successful copy."""
        mock_app_context.filesystem.copy_directory.return_value = OperationResult.ok(
            Path("backup/src")
        )

        cli.copy(
            source=Path("src"), parent=Path("backup"), max_depth=None, _context=mock_app_context
        )

        mock_app_context.filesystem.copy_directory.assert_called_once_with(
            Path("src"), Path("backup"), max_depth=mock_app_context.settings.max_depth
        )
        assert "Copied" in capsys.readouterr().out

    def test_copy_max_depth_option(self, mock_app_context: MagicMock) -> None:
        """An explicit --max-depth overrides the configured limit."""
        mock_app_context.filesystem.copy_directory.return_value = OperationResult.ok(
            Path("backup/src")
        )

        cli.copy(
            source=Path("src"), parent=Path("backup"), max_depth=3, _context=mock_app_context
        )

        mock_app_context.filesystem.copy_directory.assert_called_once_with(
            Path("src"), Path("backup"), max_depth=3
        )

    def test_copy_error_with_markup_in_path(
        self, mock_app_context: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Brackets in paths are printed literally, not parsed as styles."""
        mock_app_context.filesystem.copy_directory.return_value = OperationResult.fail(
            "Destination already exists: 'backup/[bold]x[/]'", ErrorKind.DESTINATION_EXISTS
        )

        with pytest.raises(typer.Exit):
            cli.copy(
                source=Path("[bold]x[/]"),
                parent=Path("backup"),
                max_depth=None,
                _context=mock_app_context,
            )

        assert "[bold]x[/]" in capsys.readouterr().out

    def test_copy_collision(self, mock_app_context: MagicMock) -> None:
        """A destination collision exits with code 1."""
        mock_app_context.filesystem.copy_directory.return_value = OperationResult.fail(
            "Destination already exists: 'backup/src'", ErrorKind.DESTINATION_EXISTS
        )

        with pytest.raises(typer.Exit) as exc_info:
            cli.copy(
                source=Path("src"), parent=Path("backup"), max_depth=None, _context=mock_app_context
            )

        assert exc_info.value.exit_code == 1


class TestCleanupCommand:
    """Tests for the cleanup command."""

    def test_cleanup_with_yes(self, mock_app_context: MagicMock) -> None:
        """--yes skips the prompt."""
        mock_app_context.filesystem.cleanup_folder.return_value = OperationResult.ok()

        cli.cleanup(path=Path("dir"), yes=True, _context=mock_app_context)

        mock_app_context.filesystem.cleanup_folder.assert_called_once_with(Path("dir"))

    def test_cleanup_confirmed(self, mock_app_context: MagicMock) -> None:
        """Clears the folder when the user confirms."""
        mock_app_context.filesystem.cleanup_folder.return_value = OperationResult.ok()

        with patch.object(cli.output, "confirm", return_value=True):
            cli.cleanup(path=Path("dir"), yes=False, _context=mock_app_context)

        mock_app_context.filesystem.cleanup_folder.assert_called_once()

    def test_cleanup_declined(self, mock_app_context: MagicMock) -> None:
        """Nothing is deleted when the user declines."""
        with patch.object(cli.output, "confirm", return_value=False):
            with pytest.raises(typer.Exit) as exc_info:
                cli.cleanup(path=Path("dir"), yes=False, _context=mock_app_context)

        assert exc_info.value.exit_code == 0
        mock_app_context.filesystem.cleanup_folder.assert_not_called()


class TestHeadCommand:
    """Tests for the head command."""

    def test_raw_bytes_default_limit(self, mock_app_context: MagicMock) -> None:
        """Without --bytes the configured limit is used."""
        mock_app_context.settings.head_bytes = 16
        mock_app_context.filesystem.head.return_value = OperationResult.ok(b"abc")

        cli.head(path=Path("f"), limit=None, text=False, message=None, _context=mock_app_context)

        mock_app_context.filesystem.head.assert_called_once_with(Path("f"), 16)

    def test_text_uses_configured_message(self, mock_app_context: MagicMock) -> None:
        """--text appends the configured truncation message."""
        mock_app_context.filesystem.head_to_string_with_message.return_value = (
            OperationResult.ok("hello")
        )

        cli.head(path=Path("f"), limit=5, text=True, message=None, _context=mock_app_context)

        mock_app_context.filesystem.head_to_string_with_message.assert_called_once_with(
            Path("f"), 5, mock_app_context.settings.truncation_message
        )

    def test_message_implies_text(self, mock_app_context: MagicMock) -> None:
        """An explicit message switches to text mode."""
        mock_app_context.filesystem.head_to_string_with_message.return_value = (
            OperationResult.ok("hello [cut]")
        )

        cli.head(path=Path("f"), limit=5, text=False, message=" [cut]", _context=mock_app_context)

        mock_app_context.filesystem.head_to_string_with_message.assert_called_once_with(
            Path("f"), 5, " [cut]"
        )
        mock_app_context.filesystem.head.assert_not_called()


class TestConfigCommands:
    """Tests for config commands."""

    def test_config_set(self, mock_app_context: MagicMock) -> None:
        """Valid keys are saved."""
        cli.config_set(key="head-bytes", value="64", _context=mock_app_context)

        assert mock_app_context.config.load().head_bytes == 64

    def test_config_set_unknown_key(self, mock_app_context: MagicMock) -> None:
        """Unknown keys exit with code 1."""
        with pytest.raises(typer.Exit) as exc_info:
            cli.config_set(key="colour", value="blue", _context=mock_app_context)

        assert exc_info.value.exit_code == 1

    def test_config_show(
        self, mock_app_context: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Shows every key."""
        cli.config_show(_context=mock_app_context)

        out = capsys.readouterr().out
        assert "head-bytes" in out
        assert "max-depth" in out


class TestCliRunner:
    """End-to-end invocations through Typer."""

    @pytest.fixture(autouse=True)
    def _isolated_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("fs_utils.config.CONFIG_DIR", tmp_path / ".fs-utils")

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(cli.app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_head_text_with_message(self, tmp_path: Path) -> None:
        """head --message decodes and marks truncation."""
        path = tmp_path / "hello.txt"
        path.write_bytes(b"hello world")

        result = runner.invoke(cli.app, ["head", str(path), "-c", "5", "-m", " [cut]"])

        assert result.exit_code == 0
        assert result.output == "hello [cut]"

    def test_head_raw(self, tmp_path: Path) -> None:
        """head without --text writes bytes verbatim."""
        path = tmp_path / "hello.txt"
        path.write_bytes(b"hello world")

        result = runner.invoke(cli.app, ["head", str(path), "--bytes", "4"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"hell"

    def test_copy_then_collision(self, source_tree: Path, destination_parent: Path) -> None:
        """A second copy into the same parent fails."""
        first = runner.invoke(cli.app, ["copy", str(source_tree), str(destination_parent)])
        second = runner.invoke(cli.app, ["copy", str(source_tree), str(destination_parent)])

        assert first.exit_code == 0
        assert (destination_parent / "project" / "README.md").exists()
        assert second.exit_code == 1
        assert "already exists" in second.output

    def test_cleanup_yes(self, source_tree: Path) -> None:
        """cleanup --yes clears without prompting."""
        result = runner.invoke(cli.app, ["cleanup", str(source_tree), "--yes"])

        assert result.exit_code == 0
        assert list(source_tree.iterdir()) == []

    def test_copy_max_depth_limits_nesting(self, tmp_path: Path, destination_parent: Path) -> None:
        """copy --max-depth rejects trees nested deeper than the limit."""
        source = tmp_path / "deep"
        (source / "a" / "b").mkdir(parents=True)

        result = runner.invoke(
            cli.app, ["copy", str(source), str(destination_parent), "--max-depth", "1"]
        )

        assert result.exit_code == 1
        assert "Maximum directory depth 1" in result.output.replace("\n", " ")

    def test_copy_max_depth_must_be_positive(
        self, source_tree: Path, destination_parent: Path
    ) -> None:
        """copy --max-depth 0 is a usage error."""
        result = runner.invoke(
            cli.app, ["copy", str(source_tree), str(destination_parent), "--max-depth", "0"]
        )

        assert result.exit_code == 2
        assert not (destination_parent / "project").exists()

    def test_cleanup_markup_in_path(self, tmp_path: Path) -> None:
        """A directory name containing markup closers does not break output."""
        folder = tmp_path / "odd[/]name"
        folder.mkdir()
        (folder / "a.txt").touch()

        result = runner.invoke(cli.app, ["cleanup", str(folder), "--yes"])

        assert result.exit_code == 0
        assert "odd[/]name" in result.output.replace("\n", "")
        assert list(folder.iterdir()) == []
