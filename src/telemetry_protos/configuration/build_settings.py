"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BuildSettings:
    """Resolved inputs for one code generation build."""

    project_root: Path
    output_dir: Path
