"""Assemble a :class:`CargoWorkspace` from metadata and build telemetry."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from cratemap.domain.arena import Arena, PackageIdx, TargetIdx
from cratemap.domain.classification import classify_target_kind, is_proc_macro_target
from cratemap.domain.features import FeatureSelection
from cratemap.domain.model import (
    Edition,
    PackageData,
    PackageDependency,
    TargetData,
    WarningKind,
    WorkspaceWarning,
)
from cratemap.domain.resources import ExternResources, load_extern_resources
from cratemap.domain.workspace import CargoWorkspace

if TYPE_CHECKING:
    from pathlib import Path

    from cratemap.config import CargoConfig
    from cratemap.domain.ports import (
        BuildEventSource,
        MetadataSource,
        PackageRecord,
        ResolveNodeRecord,
    )

log = getLogger(__name__)


def build_workspace(
    manifest_path: Path,
    config: CargoConfig,
    *,
    metadata_source: MetadataSource,
    event_source: BuildEventSource | None = None,
) -> CargoWorkspace:
    """Query cargo through the given sources and build the workspace graph.

    Fatal errors from either source propagate unchanged. Resolve nodes and edges
    that reference packages missing from the package listing are skipped and
    reported on :attr:`CargoWorkspace.warnings`.
    """

    selection = FeatureSelection.from_config(config)
    log.info(
        "Loading cargo metadata for %s (features=%s, target=%s)",
        manifest_path,
        selection.mode,
        config.target,
    )
    metadata = metadata_source(manifest_path, selection=selection, target=config.target)

    resources = ExternResources()
    if config.load_out_dirs_from_check:
        if event_source is None:
            raise ValueError("load_out_dirs_from_check requires a build event source")
        resources = load_extern_resources(manifest_path, config, event_source=event_source)

    assembler = _WorkspaceAssembler(resources=resources, members=metadata.workspace_members)
    for record in metadata.packages:
        assembler.add_package(record)
    for node in metadata.resolve:
        assembler.add_resolve_node(node)

    workspace = assembler.finish(metadata.workspace_root)
    log.info(
        "Loaded workspace %s: packages=%s, warnings=%s",
        workspace.workspace_root,
        len(workspace),
        len(workspace.warnings),
    )
    return workspace


@dataclass(slots=True)
class _PackageDraft:
    name: str
    version: str
    manifest: Path
    edition: Edition
    is_member: bool
    cfgs: tuple[str, ...]
    out_dir: Path | None
    proc_macro_dylib_path: Path | None
    targets: list[TargetIdx] = field(default_factory=list["TargetIdx"])
    dependencies: list[PackageDependency] = field(default_factory=list["PackageDependency"])
    features: list[str] = field(default_factory=list[str])

    def freeze(self) -> PackageData:
        return PackageData(
            name=self.name,
            version=self.version,
            manifest=self.manifest,
            edition=self.edition,
            is_member=self.is_member,
            targets=tuple(self.targets),
            dependencies=tuple(self.dependencies),
            features=tuple(self.features),
            cfgs=self.cfgs,
            out_dir=self.out_dir,
            proc_macro_dylib_path=self.proc_macro_dylib_path,
        )


class _WorkspaceAssembler:
    """Owns the arenas while a workspace is under construction."""

    def __init__(self, *, resources: ExternResources, members: frozenset[str]) -> None:
        self._resources = resources
        self._members = members
        self._packages: Arena[PackageIdx, _PackageDraft] = Arena(PackageIdx)
        self._targets: Arena[TargetIdx, TargetData] = Arena(TargetIdx)
        self._pkg_by_id: dict[str, PackageIdx] = {}
        self._warnings: list[WorkspaceWarning] = []

    def add_package(self, record: PackageRecord) -> PackageIdx:
        edition = Edition.parse(record.edition)
        draft = _PackageDraft(
            name=record.name,
            version=record.version,
            manifest=record.manifest_path,
            edition=edition,
            is_member=record.id in self._members,
            cfgs=self._resources.cfgs.get(record.id, ()),
            out_dir=self._resources.out_dirs.get(record.id),
            proc_macro_dylib_path=self._resources.proc_macro_dylib_paths.get(record.id),
        )
        pkg = self._packages.alloc(draft)
        if record.id in self._pkg_by_id:
            log.warning("Duplicate package id in cargo metadata: %s", record.id)
        self._pkg_by_id[record.id] = pkg

        for target in record.targets:
            tgt = self._targets.alloc(
                TargetData(
                    package=pkg,
                    name=target.name,
                    root=target.src_path,
                    kind=classify_target_kind(target.kind),
                    is_proc_macro=is_proc_macro_target(target.kind),
                )
            )
            draft.targets.append(tgt)
        return pkg

    def add_resolve_node(self, node: ResolveNodeRecord) -> None:
        source = self._pkg_by_id.get(node.id)
        if source is None:
            self._warn(
                WarningKind.UNKNOWN_NODE,
                node.id,
                f"Node id does not match any package in cargo metadata, ignoring {node.id}",
            )
            return

        draft = self._packages[source]
        for dep in node.deps:
            pkg = self._pkg_by_id.get(dep.pkg)
            if pkg is None:
                self._warn(
                    WarningKind.UNKNOWN_DEPENDENCY,
                    dep.pkg,
                    f"Dependency id does not match any package in cargo metadata, "
                    f"ignoring {dep.pkg} (required by {node.id})",
                )
                continue
            draft.dependencies.append(PackageDependency(pkg=pkg, name=dep.name))
        draft.features.extend(node.features)

    def finish(self, workspace_root: Path) -> CargoWorkspace:
        return CargoWorkspace(
            packages=self._packages.map(_PackageDraft.freeze),
            targets=self._targets,
            workspace_root=workspace_root,
            warnings=self._warnings,
        )

    def _warn(self, kind: WarningKind, package_id: str, message: str) -> None:
        log.warning(message)
        self._warnings.append(WorkspaceWarning(kind=kind, package_id=package_id, message=message))
