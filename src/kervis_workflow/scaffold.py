"""Scaffolding engine: guarded copies of the config file and skills tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from kervis_workflow.errors import (
    CopyFailedError,
    DestinationExistsError,
    MissingSourceError,
)
from kervis_workflow.filesystem import RealFileSystem
from kervis_workflow.protocols import FileSystem
from kervis_workflow.tree import list_files, mirror_tree
from kervis_workflow.types import CopyOutcome, CopyResult, CopyTarget, InstallRequest

logger = logging.getLogger(__name__)


class Scaffolder:
    """Materializes copy targets into a project directory.

    The config file is a hard gate: an existing destination without
    ``force`` stops the run. The skills tree is soft: an existing
    destination without ``force`` is reported as skipped.

    Use factory method `create()` for production instantiation.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize scaffolder.

        Args:
            filesystem: Filesystem abstraction (required).
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> Scaffolder:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured Scaffolder instance.
        """
        return cls(filesystem=filesystem or RealFileSystem())

    def run(
        self,
        request: InstallRequest,
        targets: tuple[CopyTarget, CopyTarget],
        on_outcome: Callable[[CopyOutcome], None] | None = None,
    ) -> list[CopyOutcome]:
        """Copy the config file, then the skills tree if requested.

        Args:
            request: Flags for this run.
            targets: (config_target, skills_target).
            on_outcome: Called with each outcome as soon as it is known, so
                earlier successes can be reported before a later failure.

        Returns:
            Outcomes in the order the copies were attempted.

        Raises:
            ScaffoldError: On any fatal condition. The skills tree is never
                touched if the config copy raised.
        """
        config_target, skills_target = targets
        outcomes: list[CopyOutcome] = []

        def record(outcome: CopyOutcome) -> None:
            outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)

        record(self.copy_config(config_target, force=request.force))
        if request.with_skills:
            record(self.copy_skills(skills_target, force=request.force))
        return outcomes

    def copy_config(self, target: CopyTarget, force: bool = False) -> CopyOutcome:
        """Copy the single configuration file.

        Args:
            target: File target to copy.
            force: Replace an existing destination.

        Returns:
            CopyOutcome with result created or overwritten.

        Raises:
            MissingSourceError: If the template is not installed.
            DestinationExistsError: If the destination exists and not force.
            CopyFailedError: If the copy itself fails.
        """
        if not self.fs.is_file(target.source_path):
            raise MissingSourceError(
                f"Template not found: {target.source_path}", target.source_path
            )

        existed = self.fs.lexists(target.destination_path)
        if existed and not force:
            raise DestinationExistsError(
                f"{target.display_name} already exists. Use --force to overwrite.",
                target.destination_path,
            )

        logger.debug("Copying %s -> %s", target.source_path, target.destination_path)
        try:
            self.fs.copy_file(target.source_path, target.destination_path)
        except OSError as e:
            raise CopyFailedError(target.destination_path, e.strerror or str(e)) from e

        if existed:
            return CopyOutcome(target, CopyResult.OVERWRITTEN, f"Overwrote {target.display_name}")
        return CopyOutcome(target, CopyResult.CREATED, f"Created {target.display_name}")

    def copy_skills(self, target: CopyTarget, force: bool = False) -> CopyOutcome:
        """Mirror the skills directory tree.

        Args:
            target: Directory target to copy.
            force: Delete and replace an existing destination.

        Returns:
            CopyOutcome with result created, or skipped when the destination
            exists and not force.

        Raises:
            MissingSourceError: If the skills tree is not installed.
            CopyFailedError: On any I/O failure, or if the finished
                destination does not contain every source file.
        """
        if not self.fs.is_dir(target.source_path):
            raise MissingSourceError(
                f"Skills dir not found: {target.source_path}", target.source_path
            )

        if self.fs.lexists(target.destination_path):
            if not force:
                logger.debug("Leaving existing %s in place", target.destination_path)
                return CopyOutcome(
                    target,
                    CopyResult.SKIPPED,
                    f"Skipped {target.display_name} (already exists). Use --force to overwrite.",
                )
            self._remove(target)

        copied = mirror_tree(self.fs, target.source_path, target.destination_path)
        self._verify(target, copied)
        return CopyOutcome(target, CopyResult.CREATED, f"Created {target.display_name}")

    def _remove(self, target: CopyTarget) -> None:
        """Delete an existing destination before replacing it."""
        path = target.destination_path
        logger.debug("Removing existing %s", path)
        try:
            if self.fs.is_dir(path) and not self.fs.is_symlink(path):
                self.fs.rmtree(path)
            else:
                self.fs.unlink(path)
        except OSError as e:
            offending = Path(e.filename) if e.filename else path
            raise CopyFailedError(offending, e.strerror or str(e)) from e

    def _verify(self, target: CopyTarget, copied: list[Path]) -> None:
        """Check that every source file landed in the destination."""
        expected = set(list_files(self.fs, target.source_path))
        missing = sorted(expected - set(copied))
        for relative in sorted(expected & set(copied)):
            if not self.fs.is_file(target.destination_path / relative):
                missing.append(relative)
        if missing:
            raise CopyFailedError(
                target.destination_path / missing[0],
                f"{len(missing)} file(s) missing from destination after copy",
            )
