"""Schema compilation entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CompilationState(str, Enum):
    """Lifecycle of one compiler driver run."""

    PENDING = "pending"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class CompilationRequest:
    """Input contract for one schema compilation pass."""

    project_root: Path
    output_dir: Path


@dataclass(frozen=True)
class CompilationOutcome:
    """Output contract for one completed compilation pass."""

    output_dir: Path
    artifacts: tuple[Path, ...]


@dataclass(frozen=True)
class CommandResult:
    """Exit status and diagnostics of one external compiler process."""

    returncode: int
    stderr: str = ""
