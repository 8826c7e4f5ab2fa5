"""Shared data types for the scaffolding engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

__all__ = ["CopyKind", "CopyOutcome", "CopyResult", "CopyTarget", "InstallRequest"]


class InstallRequest(BaseModel):
    """Flags for a single scaffolding run, built once from the command line."""

    model_config = ConfigDict(frozen=True)

    command: Literal["init"] = "init"
    force: bool = False
    with_skills: bool = False


class CopyKind(str, Enum):
    """Kind of filesystem entry a target copies."""

    FILE = "file"
    DIRECTORY = "directory"


class CopyTarget(BaseModel):
    """A source/destination pair to materialize."""

    model_config = ConfigDict(frozen=True)

    source_path: Path
    destination_path: Path
    kind: CopyKind

    @property
    def display_name(self) -> str:
        """Name used in status messages, e.g. ``AGENTS.md`` or ``skills/``."""
        name = self.destination_path.name
        return f"{name}/" if self.kind is CopyKind.DIRECTORY else name


class CopyResult(str, Enum):
    """Terminal result of one copy operation."""

    CREATED = "created"
    SKIPPED = "skipped"
    OVERWRITTEN = "overwritten"
    FAILED = "failed"


@dataclass
class CopyOutcome:
    """Result of a copy operation.

    Attributes:
        target: The target that was processed.
        result: What happened to the destination.
        detail: Human-readable description (required when failed).
    """

    target: CopyTarget
    result: CopyResult
    detail: str = ""

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.result is CopyResult.FAILED and not self.detail:
            raise ValueError("result=failed requires detail")
