"""CLI commands using Typer."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from kervis_workflow.context import AppContext

import typer
from rich.console import Console

from kervis_workflow import __version__
from kervis_workflow.console import Reporter
from kervis_workflow.context import create_context
from kervis_workflow.errors import ScaffoldError
from kervis_workflow.types import InstallRequest

PROG_NAME = "kervis-workflow"

# typer.BadParameter derives from the usage-error class of whichever click
# typer runs on: the external package or the copy newer typer bundles.
UsageError = next(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError"
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=PROG_NAME,
    help="Scaffold AGENTS.md and optional skills into the current project",
    no_args_is_help=False,
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"{PROG_NAME} v{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log each copy decision")
    ] = False,
) -> None:
    """Scaffold AGENTS.md and optional skills into the current project."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if ctx.obj is None:
        ctx.obj = create_context()

    # The command token defaults to init.
    if ctx.invoked_subcommand is None:
        _scaffold(ctx.obj, InstallRequest())


def _scaffold(app_ctx: AppContext, request: InstallRequest) -> None:
    """Run the scaffolder and report each outcome.

    Raises:
        typer.Exit: With code 1 on any fatal scaffolding error.
    """
    targets = app_ctx.targets()
    logger.debug("Scaffolding into %s (force=%s, with_skills=%s)",
                 app_ctx.cwd, request.force, request.with_skills)
    try:
        app_ctx.scaffolder.run(request, targets, on_outcome=app_ctx.reporter.show_outcome)
    except ScaffoldError as e:
        app_ctx.reporter.show_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing AGENTS.md and skills/")
    ] = False,
    with_skills: Annotated[
        bool, typer.Option("--with-skills", "-s", help="Also copy the bundled skills/ tree")
    ] = False,
) -> None:
    """Copy AGENTS.md (and optionally skills/) into the current directory."""
    app_ctx = ctx.obj or create_context()
    _scaffold(app_ctx, InstallRequest(command="init", force=force, with_skills=with_skills))


def run(argv: list[str] | None = None, context: AppContext | None = None) -> int:
    """Invoke the CLI and return its exit code.

    Usage errors exit with 1 rather than click's default of 2.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].
        context: Pre-built application context (for testing).

    Returns:
        Process exit code.
    """
    try:
        result = app(args=argv, prog_name=PROG_NAME, obj=context, standalone_mode=False)
    except UsageError as e:
        reporter = context.reporter if context is not None else Reporter()
        reporter.show_error(e.format_message())
        reporter.show_usage()
        return 1
    return result if isinstance(result, int) else 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
