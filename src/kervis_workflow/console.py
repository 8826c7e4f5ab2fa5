"""Terminal output for scaffolding outcomes."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from kervis_workflow.types import CopyOutcome, CopyResult

USAGE = "Usage: kervis-workflow init [--force] [--with-skills]"


class Reporter:
    """Single-line status messages.

    Successes and skips go to standard output; errors and usage go to
    standard error.
    """

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        """Initialize reporter."""
        self.console = console or Console(soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, soft_wrap=True)

    def show_success(self, message: str) -> None:
        """Display success message."""
        self.console.print(escape(message), style="green")

    def show_skip(self, message: str) -> None:
        """Display a skip notice. Skips are not failures."""
        self.console.print(escape(message), style="yellow")

    def show_error(self, message: str) -> None:
        """Display error message."""
        self.err_console.print(escape(message), style="red")

    def show_usage(self) -> None:
        """Display the usage line."""
        self.err_console.print(escape(USAGE))

    def show_outcome(self, outcome: CopyOutcome) -> None:
        """Display a copy outcome on the stream matching its result."""
        if outcome.result is CopyResult.SKIPPED:
            self.show_skip(outcome.detail)
        elif outcome.result is CopyResult.FAILED:
            self.show_error(outcome.detail)
        else:
            self.show_success(outcome.detail)
