"""Directory tree mirroring with an explicit worklist.

Symlink policy: a link to a regular file inside the source root is copied
as a regular file holding the target's bytes. Links that escape the source
root, links to directories and unresolvable links are copy failures.
Entries that are neither directories nor regular files are skipped.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from kervis_workflow.errors import CopyFailedError
from kervis_workflow.protocols import FileSystem

logger = logging.getLogger(__name__)


class _EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


def _io_failure(path: Path, exc: OSError) -> CopyFailedError:
    offending = Path(exc.filename) if exc.filename else path
    return CopyFailedError(offending, exc.strerror or str(exc))


def _list_dir(fs: FileSystem, path: Path) -> list[Path]:
    try:
        return sorted(fs.iterdir(path))
    except OSError as e:
        raise _io_failure(path, e) from e


def _classify(fs: FileSystem, entry: Path, source_root: Path) -> _EntryKind:
    """Decide how an entry of the source tree is copied.

    Raises:
        CopyFailedError: For symlinks the policy rejects.
    """
    if fs.is_symlink(entry):
        try:
            target = fs.resolve(entry)
        except OSError as e:
            raise CopyFailedError(entry, f"cannot resolve symlink ({e})") from e
        if not target.is_relative_to(source_root):
            raise CopyFailedError(entry, f"symlink points outside the source tree: {target}")
        if fs.is_dir(target):
            raise CopyFailedError(entry, "symlinked directories are not copied")
        return _EntryKind.FILE if fs.is_file(target) else _EntryKind.OTHER

    if fs.is_dir(entry):
        return _EntryKind.DIRECTORY
    if fs.is_file(entry):
        return _EntryKind.FILE
    return _EntryKind.OTHER


def _resolve_root(fs: FileSystem, source_root: Path) -> Path:
    try:
        return fs.resolve(source_root)
    except OSError as e:
        raise _io_failure(source_root, e) from e


def list_files(fs: FileSystem, source_root: Path) -> list[Path]:
    """List the files a mirror of ``source_root`` must contain.

    Args:
        fs: Filesystem to read from.
        source_root: Root of the tree.

    Returns:
        Paths relative to ``source_root``.
    """
    resolved_root = _resolve_root(fs, source_root)
    files: list[Path] = []
    pending = [source_root]
    while pending:
        directory = pending.pop()
        for entry in _list_dir(fs, directory):
            kind = _classify(fs, entry, resolved_root)
            if kind is _EntryKind.DIRECTORY:
                pending.append(entry)
            elif kind is _EntryKind.FILE:
                files.append(entry.relative_to(source_root))
    return files


def mirror_tree(fs: FileSystem, source_root: Path, destination_root: Path) -> list[Path]:
    """Copy every file under ``source_root`` to the same relative path under
    ``destination_root``.

    The destination is expected to be absent. A destination entry that
    already exists while copying means two source names map to the same
    destination name (case-insensitive filesystem) and fails the copy.
    Nothing is rolled back on failure.

    Args:
        fs: Filesystem to operate on.
        source_root: Directory to copy.
        destination_root: Directory to create.

    Returns:
        Relative paths of the copied files.

    Raises:
        CopyFailedError: On any I/O error, rejected symlink or collision.
    """
    resolved_root = _resolve_root(fs, source_root)
    try:
        fs.mkdir(destination_root, parents=True, exist_ok=True)
    except OSError as e:
        raise _io_failure(destination_root, e) from e

    copied: list[Path] = []
    pending = [(source_root, destination_root)]
    while pending:
        src_dir, dst_dir = pending.pop()
        for entry in _list_dir(fs, src_dir):
            dst = dst_dir / entry.name
            kind = _classify(fs, entry, resolved_root)
            if kind is _EntryKind.OTHER:
                logger.warning("Skipping %s: not a regular file or directory", entry)
                continue
            if fs.lexists(dst):
                raise CopyFailedError(dst, "destination entry already exists (name collision)")
            try:
                if kind is _EntryKind.DIRECTORY:
                    fs.mkdir(dst)
                else:
                    fs.copy_file(entry, dst)
            except OSError as e:
                raise _io_failure(entry, e) from e

            if kind is _EntryKind.DIRECTORY:
                pending.append((entry, dst))
            else:
                logger.debug("Copied %s -> %s", entry, dst)
                copied.append(dst.relative_to(destination_root))
    return copied
