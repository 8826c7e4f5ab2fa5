"""Filesystem abstraction for testability.

The RealFileSystem implementation wraps pathlib and shutil; tests can
inject a double satisfying the FileSystem protocol instead.
"""

from __future__ import annotations

import errno
import os
import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    def lexists(self, path: Path) -> bool:
        """Check if a path exists, counting broken symlinks."""
        return os.path.lexists(path)

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        return path.is_symlink()

    def resolve(self, path: Path) -> Path:
        """Resolve symlinks, raising OSError on loops or missing targets."""
        try:
            return path.resolve(strict=True)
        except RuntimeError as e:
            # Python < 3.13 reports symlink loops as RuntimeError.
            raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), str(path)) from e

    def iterdir(self, path: Path) -> list[Path]:
        """List directory entries."""
        return list(path.iterdir())

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file bytes without any transformation."""
        shutil.copyfile(src, dst)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)
