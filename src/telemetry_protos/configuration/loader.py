"""Build-environment configuration loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from .build_settings import BuildSettings

OUTPUT_DIR_ENV_VAR = "OUT_DIR"


class ConfigurationError(Exception):
    """Raised when the build environment does not provide usable settings."""


def resolve_output_location(environ: Mapping[str, str]) -> Path:
    """Read the generated-code output directory from the build environment."""
    value = environ.get(OUTPUT_DIR_ENV_VAR)
    if value is None:
        raise ConfigurationError(
            f"{OUTPUT_DIR_ENV_VAR} environment variable is not set; "
            "it must point at the directory for generated schema bindings."
        )
    return _require_path(value, OUTPUT_DIR_ENV_VAR)


def load_build_settings(
    *,
    environ: Mapping[str, str],
    project_root: Path | str,
    output_dir: Path | str | None = None,
) -> BuildSettings:
    """Resolve build settings; an explicit output directory overrides the environment."""
    root = Path(project_root)
    if not root.is_dir():
        raise ConfigurationError(f"Project root is not a directory: {root}")

    if output_dir is None:
        resolved_output = resolve_output_location(environ)
    else:
        resolved_output = _require_path(str(output_dir), "output directory")

    return BuildSettings(project_root=root.resolve(), output_dir=resolved_output)


def _require_path(value: str, field_name: str) -> Path:
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return Path(stripped)
