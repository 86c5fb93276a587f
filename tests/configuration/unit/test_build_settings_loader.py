"""Build settings loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from telemetry_protos.configuration import (
    OUTPUT_DIR_ENV_VAR,
    ConfigurationError,
    load_build_settings,
    resolve_output_location,
)


def test_resolve_output_location_reads_out_dir(tmp_path: Path) -> None:
    location = resolve_output_location({OUTPUT_DIR_ENV_VAR: str(tmp_path)})

    assert location == tmp_path


def test_resolve_output_location_rejects_missing_variable() -> None:
    with pytest.raises(ConfigurationError, match="OUT_DIR environment variable is not set"):
        resolve_output_location({"PATH": "/usr/bin"})


def test_resolve_output_location_rejects_blank_value() -> None:
    with pytest.raises(ConfigurationError, match="OUT_DIR must not be empty"):
        resolve_output_location({OUTPUT_DIR_ENV_VAR: "   "})


def test_load_build_settings_uses_environment_when_no_override(tmp_path: Path) -> None:
    out_dir = tmp_path / "generated"

    settings = load_build_settings(
        environ={OUTPUT_DIR_ENV_VAR: str(out_dir)}, project_root=tmp_path
    )

    assert settings.output_dir == out_dir
    assert settings.project_root == tmp_path.resolve()


def test_load_build_settings_prefers_explicit_output_dir(tmp_path: Path) -> None:
    settings = load_build_settings(
        environ={OUTPUT_DIR_ENV_VAR: str(tmp_path / "from-env")},
        project_root=tmp_path,
        output_dir=tmp_path / "explicit",
    )

    assert settings.output_dir == tmp_path / "explicit"


def test_load_build_settings_with_explicit_output_dir_ignores_missing_variable(
    tmp_path: Path,
) -> None:
    settings = load_build_settings(environ={}, project_root=tmp_path, output_dir="out")

    assert settings.output_dir == Path("out")


def test_load_build_settings_rejects_missing_project_root(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Project root is not a directory"):
        load_build_settings(
            environ={OUTPUT_DIR_ENV_VAR: str(tmp_path)},
            project_root=tmp_path / "nope",
        )


def test_load_build_settings_checks_project_root_before_environment(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Project root"):
        load_build_settings(environ={}, project_root=tmp_path / "nope")
