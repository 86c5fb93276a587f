"""Schema catalog exports."""

from .schema_sources import (
    SCHEMA_INCLUDE_DIR,
    TELEMETRY_SCHEMA_SOURCES,
    PacketKind,
    SchemaSource,
    resolve_schema_paths,
)

__all__ = [
    "PacketKind",
    "SchemaSource",
    "SCHEMA_INCLUDE_DIR",
    "TELEMETRY_SCHEMA_SOURCES",
    "resolve_schema_paths",
]
