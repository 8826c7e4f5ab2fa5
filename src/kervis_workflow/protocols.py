"""Protocol definitions for core abstractions.

The scaffolding engine talks to the filesystem and is driven by the CLI
only through these interfaces, so tests can substitute doubles (including
ones that fail part-way through a copy) without touching real files.

All concrete implementations satisfy these protocols structurally.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kervis_workflow.types import CopyOutcome, CopyTarget, InstallRequest


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations used while scaffolding."""

    def lexists(self, path: Path) -> bool:
        """Check if a path exists without following a final symlink.

        Args:
            path: Path to check.

        Returns:
            True for existing entries, including broken symlinks.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory (following symlinks)."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file (following symlinks)."""
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        ...

    def resolve(self, path: Path) -> Path:
        """Return the absolute path with all symlinks resolved.

        Raises:
            OSError: If resolution fails, e.g. on a symlink loop.
        """
        ...

    def iterdir(self, path: Path) -> list[Path]:
        """List the entries of a directory.

        Args:
            path: Directory to list.

        Returns:
            Child paths, in no particular order.

        Raises:
            OSError: If the directory cannot be read.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content byte-for-byte, replacing ``dst`` if present.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file or symlink."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...


@runtime_checkable
class ScaffoldEngine(Protocol):
    """Protocol for the component that materializes copy targets."""

    def run(
        self,
        request: InstallRequest,
        targets: tuple[CopyTarget, CopyTarget],
        on_outcome: Callable[[CopyOutcome], None] | None = None,
    ) -> list[CopyOutcome]:
        """Copy the config file and, if requested, the skills tree.

        Args:
            request: Flags for this run.
            targets: (config_target, skills_target) from the path resolver.
            on_outcome: Optional callback receiving each outcome in order.

        Returns:
            Outcomes in the order the copies were attempted.

        Raises:
            ScaffoldError: On any fatal condition.
        """
        ...
