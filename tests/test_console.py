"""Tests for terminal reporting."""

from __future__ import annotations

from pathlib import Path

import pytest

from kervis_workflow.console import USAGE, Reporter
from kervis_workflow.types import CopyKind, CopyOutcome, CopyResult, CopyTarget

TARGET = CopyTarget(
    source_path=Path("/install/skills"),
    destination_path=Path("/project/skills"),
    kind=CopyKind.DIRECTORY,
)


class TestReporter:
    """Tests for Reporter stream routing."""

    @pytest.mark.parametrize("result", [CopyResult.CREATED, CopyResult.OVERWRITTEN])
    def test_success_to_stdout(
        self, reporter: Reporter, result: CopyResult, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test successful outcomes print on stdout."""
        reporter.show_outcome(CopyOutcome(TARGET, result, "Created skills/"))

        captured = capsys.readouterr()
        assert "Created skills/" in captured.out
        assert captured.err == ""

    def test_message_is_bare_text(
        self, reporter: Reporter, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the printed line is exactly the message, with no prefix."""
        reporter.show_success("Created AGENTS.md")
        reporter.show_error("AGENTS.md already exists. Use --force to overwrite.")

        captured = capsys.readouterr()
        assert captured.out == "Created AGENTS.md\n"
        assert captured.err == "AGENTS.md already exists. Use --force to overwrite.\n"

    def test_skip_to_stdout(self, reporter: Reporter, capsys: pytest.CaptureFixture[str]) -> None:
        """Test skips print on stdout, not stderr."""
        reporter.show_outcome(CopyOutcome(TARGET, CopyResult.SKIPPED, "Skipped skills/"))

        captured = capsys.readouterr()
        assert "Skipped skills/" in captured.out
        assert captured.err == ""

    def test_failed_to_stderr(self, reporter: Reporter, capsys: pytest.CaptureFixture[str]) -> None:
        """Test failed outcomes print on stderr."""
        reporter.show_outcome(CopyOutcome(TARGET, CopyResult.FAILED, "Disk full"))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Disk full" in captured.err

    def test_usage_to_stderr(self, reporter: Reporter, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the usage line prints on stderr."""
        reporter.show_usage()

        assert USAGE in capsys.readouterr().err

    def test_markup_in_paths_is_literal(
        self, reporter: Reporter, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test bracketed path segments are not parsed as markup."""
        reporter.show_error("Template not found: /tmp/[red]x[/red]/AGENTS.md")

        assert "/tmp/[red]x[/red]/AGENTS.md" in capsys.readouterr().err

    def test_long_message_single_line(
        self, reporter: Reporter, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test long messages are not wrapped across lines."""
        message = "Failed to copy " + "/very/long" * 30 + ": Permission denied"
        reporter.show_error(message)

        assert capsys.readouterr().err.strip().count("\n") == 0
