from __future__ import annotations

import json
from pathlib import Path

import pytest

from cratemap.adapters.cargo import CargoMetadata, parse_build_events, translate_metadata
from cratemap.domain.ports import BuildEvent, WorkspaceMetadata

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def metadata_payload() -> dict[str, object]:
    with (DATA_DIR / "cargo_metadata.json").open() as handle:
        return json.load(handle)

@pytest.fixture(scope="session")
def metadata_json() -> str:
    return (DATA_DIR / "cargo_metadata.json").read_text()

@pytest.fixture(scope="session")
def check_output() -> str:
    return (DATA_DIR / "cargo_check.jsonl").read_text()

@pytest.fixture
def cargo_metadata(metadata_payload: dict[str, object]) -> CargoMetadata:
    return CargoMetadata.model_validate(metadata_payload)

@pytest.fixture
def workspace_metadata(cargo_metadata: CargoMetadata) -> WorkspaceMetadata:
    return translate_metadata(cargo_metadata)

@pytest.fixture
def build_events(check_output: str) -> list[BuildEvent]:
    return list(parse_build_events(check_output.splitlines()))
