"""Resolution of source and destination paths for a scaffolding run."""

from __future__ import annotations

import os
from pathlib import Path

from kervis_workflow.types import CopyKind, CopyTarget

CONFIG_FILENAME = "AGENTS.md"
TEMPLATES_DIRNAME = "templates"
SKILLS_DIRNAME = "skills"


def default_install_root() -> Path:
    """Return the directory holding the bundled template payload."""
    return Path(__file__).resolve().parent


def _absolute(path: Path | str, base: Path | str) -> Path:
    # Pure string composition; never consults the filesystem or process cwd.
    return Path(os.path.normpath(os.path.join(base, path)))


def resolve_targets(
    install_root: Path | str, cwd: Path | str
) -> tuple[CopyTarget, CopyTarget]:
    """Compute the config-file and skills-tree targets.

    Args:
        install_root: Directory containing ``templates/`` and ``skills/``.
        cwd: Project directory the files are materialized into. A relative
            install root is taken relative to it.

    Returns:
        Tuple of (config_target, skills_target).
    """
    project_dir = Path(os.path.normpath(cwd))
    root = _absolute(install_root, project_dir)

    config_target = CopyTarget(
        source_path=root / TEMPLATES_DIRNAME / CONFIG_FILENAME,
        destination_path=project_dir / CONFIG_FILENAME,
        kind=CopyKind.FILE,
    )
    skills_target = CopyTarget(
        source_path=root / SKILLS_DIRNAME,
        destination_path=project_dir / SKILLS_DIRNAME,
        kind=CopyKind.DIRECTORY,
    )
    return config_target, skills_target
