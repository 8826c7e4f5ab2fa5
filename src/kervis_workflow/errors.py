"""Exceptions raised by the scaffolding engine."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Fatal error during scaffolding.

    Attributes:
        path: The path the error is about.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class MissingSourceError(ScaffoldError):
    """A bundled template or skills tree is absent from the installation."""


class DestinationExistsError(ScaffoldError):
    """The destination already exists and overwriting was not requested."""


class CopyFailedError(ScaffoldError):
    """An I/O operation failed while reading, writing or deleting."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to copy {path}: {reason}", path)
        self.reason = reason
