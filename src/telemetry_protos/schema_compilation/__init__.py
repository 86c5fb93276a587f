"""Schema compilation domain exports."""

from .compilation_contracts import (
    CommandResult,
    CompilationOutcome,
    CompilationRequest,
    CompilationState,
)
from .compiler_driver import (
    CommandRunner,
    SchemaCompilationError,
    SchemaCompilerDriver,
    build_protoc_command,
    compile_telemetry_schemas,
)

__all__ = [
    "CommandResult",
    "CommandRunner",
    "CompilationOutcome",
    "CompilationRequest",
    "CompilationState",
    "SchemaCompilationError",
    "SchemaCompilerDriver",
    "build_protoc_command",
    "compile_telemetry_schemas",
]
