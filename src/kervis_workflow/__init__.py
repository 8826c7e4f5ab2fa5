"""Scaffold AGENTS.md and optional skill definitions into a project."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from kervis_workflow.protocols import FileSystem, ScaffoldEngine

__all__ = [
    "__version__",
    "FileSystem",
    "ScaffoldEngine",
]
