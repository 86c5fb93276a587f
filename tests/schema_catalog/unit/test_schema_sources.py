"""Schema catalog tests."""

from __future__ import annotations

from pathlib import Path

from telemetry_protos.schema_catalog import (
    TELEMETRY_SCHEMA_SOURCES,
    PacketKind,
    resolve_schema_paths,
)

EXPECTED_ORDER = (
    "protos/car_motion.proto",
    "protos/event_data.proto",
    "protos/final_classification.proto",
    "protos/participants.proto",
    "protos/session_data.proto",
    "protos/session_history.proto",
    "protos/packet_header.proto",
)


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_catalog_lists_seven_schemas_in_declared_order() -> None:
    paths = tuple(source.relative_path.as_posix() for source in TELEMETRY_SCHEMA_SOURCES)

    assert paths == EXPECTED_ORDER


def test_catalog_covers_every_packet_kind_once() -> None:
    kinds = [source.packet_kind for source in TELEMETRY_SCHEMA_SOURCES]

    assert sorted(kinds) == sorted(PacketKind)
    assert len(set(kinds)) == len(kinds)


def test_resolve_schema_paths_keeps_order_and_anchors_to_project_root(tmp_path: Path) -> None:
    resolved = resolve_schema_paths(tmp_path)

    assert resolved == tuple(tmp_path.resolve() / relative for relative in EXPECTED_ORDER)


def test_resolve_schema_paths_does_not_check_file_existence(tmp_path: Path) -> None:
    resolved = resolve_schema_paths(tmp_path / "missing-project")

    assert len(resolved) == 7
    assert not any(path.exists() for path in resolved)


def test_module_names_follow_protoc_python_naming() -> None:
    module_names = [source.module_name for source in TELEMETRY_SCHEMA_SOURCES]

    assert module_names[0] == "car_motion_pb2"
    assert module_names[-1] == "packet_header_pb2"


def test_shipped_schema_files_exist_for_every_catalog_entry() -> None:
    for path in resolve_schema_paths(_project_root()):
        assert path.is_file(), f"Expected schema file: {path}"
