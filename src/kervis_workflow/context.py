"""Application context for dependency injection.

Separates object creation from object use: CLI commands receive an
AppContext, production code builds one with `create_context()`, tests
construct AppContext directly with explicit paths and doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from kervis_workflow.console import Reporter
from kervis_workflow.paths import default_install_root, resolve_targets
from kervis_workflow.protocols import ScaffoldEngine
from kervis_workflow.types import CopyTarget


@dataclass
class AppContext:
    """Container for the dependencies of a scaffolding run.

    Attributes:
        scaffolder: Engine performing the copies.
        install_root: Directory holding the bundled templates and skills.
        cwd: Project directory files are materialized into.
        reporter: Terminal output.
    """

    scaffolder: ScaffoldEngine
    install_root: Path
    cwd: Path
    reporter: Reporter = field(default_factory=Reporter)

    def targets(self) -> tuple[CopyTarget, CopyTarget]:
        """Resolve the (config, skills) copy targets for this context."""
        return resolve_targets(self.install_root, self.cwd)


def create_context(
    install_root: Path | None = None,
    cwd: Path | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Args:
        install_root: Override the bundled payload location (for testing).
        cwd: Override the project directory. Defaults to the process cwd.

    Returns:
        Configured AppContext.
    """
    from kervis_workflow.scaffold import Scaffolder

    return AppContext(
        scaffolder=Scaffolder.create(),
        install_root=install_root or default_install_root(),
        cwd=cwd or Path.cwd(),
    )
