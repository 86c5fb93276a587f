"""Build-time driver around the protobuf schema compiler.

The driver runs `grpc_tools.protoc` exactly once over the fixed telemetry schema
catalog. Generated modules are written to a staging directory next to the output
directory and only moved into place after the compiler reports success, so a
failed build leaves no new artifacts behind.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
import tempfile
from collections.abc import Callable
from pathlib import Path

from telemetry_protos.schema_catalog import (
    SCHEMA_INCLUDE_DIR,
    TELEMETRY_SCHEMA_SOURCES,
    resolve_schema_paths,
)

from .compilation_contracts import (
    CommandResult,
    CompilationOutcome,
    CompilationRequest,
    CompilationState,
)

CommandRunner = Callable[[tuple[str, ...]], CommandResult]

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

_STAGING_PREFIX = ".protoc-staging-"


class SchemaCompilationError(Exception):
    """Raised when the schema compiler or artifact publishing fails."""


def build_protoc_command(
    *,
    project_root: Path,
    output_dir: Path,
    python_executable: str | None = None,
) -> tuple[str, ...]:
    """Return the protoc invocation for the telemetry schemas, inputs in declared order."""
    root = Path(project_root).resolve()
    return (
        python_executable or sys.executable,
        "-m",
        "grpc_tools.protoc",
        f"-I{root / SCHEMA_INCLUDE_DIR}",
        f"--python_out={output_dir}",
        *(str(path) for path in resolve_schema_paths(root)),
    )


class SchemaCompilerDriver:
    """Run one schema compilation pass and track whether it finished or aborted."""

    def __init__(
        self, request: CompilationRequest, *, run_command: CommandRunner | None = None
    ) -> None:
        self._request = request
        self._run_command = run_command or _run_protoc
        self.state = CompilationState.PENDING

    def run(self) -> CompilationOutcome:
        """Compile all schemas into the requested output directory."""
        if self.state is not CompilationState.PENDING:
            raise SchemaCompilationError(
                f"Schema compilation already ran and is {self.state.value}."
            )
        try:
            outcome = self._compile()
        except Exception as exc:
            self.state = CompilationState.ABORTED
            _LOGGER.error("Schema compilation aborted: %s", exc)
            raise
        self.state = CompilationState.DONE
        return outcome

    def _compile(self) -> CompilationOutcome:
        output_dir = Path(self._request.output_dir).resolve()
        staging_dir = _create_staging_dir(output_dir)
        try:
            command = build_protoc_command(
                project_root=self._request.project_root, output_dir=staging_dir
            )
            _LOGGER.info(
                "Compiling %d telemetry schemas: %s",
                len(TELEMETRY_SCHEMA_SOURCES),
                shlex.join(command),
            )
            result = self._run_command(command)
            if result.returncode != 0:
                raise SchemaCompilationError(_describe_failure(command, result))
            _require_module_per_schema(staging_dir)
            artifacts = _publish_artifacts(staging_dir, output_dir)
        finally:
            shutil.rmtree(staging_dir, ignore_errors=True)

        _LOGGER.info("Published %d generated modules to %s", len(artifacts), output_dir)
        return CompilationOutcome(output_dir=output_dir, artifacts=artifacts)


def compile_telemetry_schemas(
    request: CompilationRequest, *, run_command: CommandRunner | None = None
) -> CompilationOutcome:
    """Run a single compilation pass for the telemetry schema catalog."""
    return SchemaCompilerDriver(request, run_command=run_command).run()


def _run_protoc(command: tuple[str, ...]) -> CommandResult:
    """Run the compiler process and capture its diagnostics."""
    try:
        completed = subprocess.run(
            list(command), capture_output=True, text=True, check=False
        )
    except FileNotFoundError as exc:
        raise SchemaCompilationError(
            f"Schema compiler not found: {shlex.join(command)}"
        ) from exc
    return CommandResult(returncode=completed.returncode, stderr=completed.stderr)


def _describe_failure(command: tuple[str, ...], result: CommandResult) -> str:
    message = (
        f"Schema compiler failed with exit code {result.returncode}: {shlex.join(command)}"
    )
    diagnostics = result.stderr.rstrip()
    if diagnostics:
        message = f"{message}\n{diagnostics}"
    return message


def _create_staging_dir(output_dir: Path) -> Path:
    # Sibling of the output directory so publishing is a same-filesystem rename.
    try:
        output_dir.parent.mkdir(parents=True, exist_ok=True)
        return Path(tempfile.mkdtemp(prefix=_STAGING_PREFIX, dir=output_dir.parent))
    except OSError as exc:
        raise SchemaCompilationError(
            f"Cannot prepare staging directory for {output_dir}: {exc}"
        ) from exc


def _require_module_per_schema(staging_dir: Path) -> None:
    missing = [
        source.relative_path.as_posix()
        for source in TELEMETRY_SCHEMA_SOURCES
        if not (staging_dir / f"{source.module_name}.py").is_file()
    ]
    if missing:
        raise SchemaCompilationError(
            "Schema compiler produced no module for: " + ", ".join(missing)
        )


def _publish_artifacts(staging_dir: Path, output_dir: Path) -> tuple[Path, ...]:
    generated = sorted(path for path in staging_dir.rglob("*") if path.is_file())
    relative_paths = [path.relative_to(staging_dir) for path in generated]
    blocked = [
        output_dir / relative
        for relative in relative_paths
        if (output_dir / relative).exists() and not (output_dir / relative).is_file()
    ]
    if blocked:
        raise SchemaCompilationError(
            "Cannot replace non-file paths with generated modules: "
            + ", ".join(str(path) for path in blocked)
        )

    # Replaced modules are kept here until every rename succeeded.
    backup_root = staging_dir / ".previous"
    published: list[tuple[Path, Path | None]] = []
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for path, relative in zip(generated, relative_paths, strict=True):
            destination = output_dir / relative
            destination.parent.mkdir(parents=True, exist_ok=True)
            backup = None
            if destination.exists():
                backup = backup_root / relative
                backup.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(destination, backup)
            os.replace(path, destination)
            published.append((destination, backup))
    except OSError as exc:
        _roll_back(published)
        raise SchemaCompilationError(
            f"Failed to write generated modules to {output_dir}: {exc}"
        ) from exc
    return tuple(destination for destination, _ in published)


def _roll_back(published: list[tuple[Path, Path | None]]) -> None:
    for destination, backup in reversed(published):
        try:
            if backup is None:
                destination.unlink(missing_ok=True)
            else:
                os.replace(backup, destination)
        except OSError as exc:
            _LOGGER.error("Could not roll back %s: %s", destination, exc)
