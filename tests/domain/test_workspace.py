from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from cratemap.config import CargoConfig
from cratemap.domain import build_workspace
from cratemap.domain.arena import PackageIdx, TargetIdx
from cratemap.domain.ports import TargetRecord, WorkspaceMetadata
from cratemap.domain.workspace import CargoWorkspace
from tests.support.cargo import FakeMetadataSource, make_metadata, make_node, make_package


def _workspace(metadata: WorkspaceMetadata) -> CargoWorkspace:
    return build_workspace(
        Path("/work/ws/Cargo.toml"),
        CargoConfig(),
        metadata_source=FakeMetadataSource(metadata),
    )


@pytest.fixture
def fixture_workspace(workspace_metadata: WorkspaceMetadata) -> CargoWorkspace:
    return _workspace(workspace_metadata)


def test_package_flag_disambiguates_shared_names() -> None:
    old = make_package("rand", "0.7.3")
    new = make_package("rand", "0.8.5")
    unique = make_package("serde", "1.0.0")
    workspace = _workspace(make_metadata([old, new, unique], [make_node(old.id)]))

    flags = [workspace.package_flag(workspace[idx]) for idx in workspace.packages()]

    assert flags == ["rand:0.7.3", "rand:0.8.5", "serde"]
    assert not workspace.is_unique("rand")
    assert workspace.is_unique("serde")
    assert not workspace.is_unique("absent")


def test_package_flag_accepts_index(fixture_workspace: CargoWorkspace) -> None:
    util = fixture_workspace.find_package("util")
    rand = fixture_workspace.find_package("rand", "0.8.5")
    assert util is not None
    assert rand is not None

    assert fixture_workspace.package_flag(util) == "util"
    assert fixture_workspace.package_flag(rand) == "rand:0.8.5"


def test_target_by_root(fixture_workspace: CargoWorkspace) -> None:
    target = fixture_workspace.target_by_root(Path("/work/ws/app/tests/integration.rs"))

    assert target is not None
    data = fixture_workspace.target(target)
    assert data.name == "integration"
    assert fixture_workspace[data.package].name == "app"
    assert fixture_workspace.target_by_root(Path("/nowhere/lib.rs")) is None


def test_target_by_root_prefers_first_package() -> None:
    first = make_package("first")
    second = make_package("second")
    shared = first.targets[0].src_path
    clone = replace(second, targets=(TargetRecord(name="dup", kind=("lib",), src_path=shared),))
    workspace = _workspace(make_metadata([first, clone]))

    target = workspace.target_by_root(shared)

    assert target == TargetIdx(0)
    assert workspace[workspace[target].package].name == "first"


def test_every_target_points_at_a_live_package(fixture_workspace: CargoWorkspace) -> None:
    for idx in fixture_workspace.packages():
        for target in fixture_workspace[idx].targets:
            assert fixture_workspace[target].package == idx
    assert {fixture_workspace[t].package for t in fixture_workspace.targets()} <= set(
        fixture_workspace.packages()
    )


def test_dependency_edges_reference_workspace_packages(fixture_workspace: CargoWorkspace) -> None:
    known = set(fixture_workspace.packages())
    for idx in fixture_workspace.packages():
        for dep in fixture_workspace.dependencies(idx):
            assert dep.pkg in known


def test_getitem_rejects_foreign_indices(fixture_workspace: CargoWorkspace) -> None:
    with pytest.raises(IndexError):
        fixture_workspace[PackageIdx(99)]
    with pytest.raises(TypeError):
        fixture_workspace[3]  # type: ignore[call-overload]


def test_repr_summarises_contents(fixture_workspace: CargoWorkspace) -> None:
    text = repr(fixture_workspace)

    assert "packages=6" in text
    assert "targets=9" in text
    assert "/work/ws" in text


def test_members_and_root(fixture_workspace: CargoWorkspace) -> None:
    members = [fixture_workspace[idx].name for idx in fixture_workspace.members()]

    assert members == ["app", "util"]
    assert fixture_workspace.workspace_root == Path("/work/ws")
    app = fixture_workspace.find_package("app")
    assert app is not None
    assert fixture_workspace[app].root == Path("/work/ws/app")
