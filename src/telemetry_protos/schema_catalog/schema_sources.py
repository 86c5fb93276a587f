"""Fixed catalog of telemetry packet schema sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PacketKind(str, Enum):
    """Telemetry packet categories with one schema file each."""

    MOTION = "motion"
    EVENT = "event"
    FINAL_CLASSIFICATION = "final_classification"
    PARTICIPANTS = "participants"
    PACKET_HEADER = "packet_header"
    SESSION_DATA = "session_data"
    SESSION_HISTORY = "session_history"


@dataclass(frozen=True)
class SchemaSource:
    """One schema file, addressed relative to the project root."""

    packet_kind: PacketKind
    relative_path: Path

    @property
    def module_name(self) -> str:
        """Name of the Python module protoc generates for this schema."""
        return f"{self.relative_path.stem}_pb2"


SCHEMA_INCLUDE_DIR = Path("protos")

# Compiler input order. Kept as declared; do not sort.
TELEMETRY_SCHEMA_SOURCES: tuple[SchemaSource, ...] = (
    SchemaSource(PacketKind.MOTION, SCHEMA_INCLUDE_DIR / "car_motion.proto"),
    SchemaSource(PacketKind.EVENT, SCHEMA_INCLUDE_DIR / "event_data.proto"),
    SchemaSource(
        PacketKind.FINAL_CLASSIFICATION, SCHEMA_INCLUDE_DIR / "final_classification.proto"
    ),
    SchemaSource(PacketKind.PARTICIPANTS, SCHEMA_INCLUDE_DIR / "participants.proto"),
    SchemaSource(PacketKind.SESSION_DATA, SCHEMA_INCLUDE_DIR / "session_data.proto"),
    SchemaSource(PacketKind.SESSION_HISTORY, SCHEMA_INCLUDE_DIR / "session_history.proto"),
    SchemaSource(PacketKind.PACKET_HEADER, SCHEMA_INCLUDE_DIR / "packet_header.proto"),
)


def resolve_schema_paths(project_root: Path | str) -> tuple[Path, ...]:
    """Return absolute schema paths under `project_root`, in compiler input order."""
    root = Path(project_root).resolve()
    return tuple(root / source.relative_path for source in TELEMETRY_SCHEMA_SOURCES)
