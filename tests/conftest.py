"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from helpers import TEMPLATE_CONTENT, write_tree
from kervis_workflow.console import Reporter
from kervis_workflow.context import AppContext
from kervis_workflow.scaffold import Scaffolder



@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Create an installation root with a template and two skills."""
    root = tmp_path / "install"
    write_tree(
        root,
        {
            "templates/AGENTS.md": TEMPLATE_CONTENT,
            "skills/a/one.md": "# One\n",
            "skills/b/two.md": "# Two\n",
        },
    )
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


# ============================================================================
# Context Fixtures
# ============================================================================


@pytest.fixture
def reporter() -> Reporter:
    """Reporter whose consoles write to the (captured) standard streams."""
    return Reporter(
        console=Console(soft_wrap=True, color_system=None),
        err_console=Console(stderr=True, soft_wrap=True, color_system=None),
    )


@pytest.fixture
def app_context(install_root: Path, project_dir: Path, reporter: Reporter) -> AppContext:
    """Context wired to real files under tmp_path."""
    return AppContext(
        scaffolder=Scaffolder.create(),
        install_root=install_root,
        cwd=project_dir,
        reporter=reporter,
    )


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.lexists.return_value = False
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.is_symlink.return_value = False
    fs.iterdir.return_value = []
    fs.resolve.side_effect = lambda path: path
    return fs
