"""Port for querying package, target and dependency-resolution metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from cratemap.domain.features import FeatureSelection


@dataclass(frozen=True, slots=True)
class TargetRecord:
    name: str
    kind: tuple[str, ...]
    src_path: Path


@dataclass(frozen=True, slots=True)
class PackageRecord:
    id: str
    name: str
    version: str
    edition: str
    manifest_path: Path
    targets: tuple[TargetRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class DependencyEdgeRecord:
    """Edge of the resolve graph; ``name`` is the local alias of ``pkg``."""

    pkg: str
    name: str


@dataclass(frozen=True, slots=True)
class ResolveNodeRecord:
    id: str
    deps: tuple[DependencyEdgeRecord, ...] = ()
    features: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class WorkspaceMetadata:
    """Everything the builder needs from one metadata query."""

    workspace_root: Path
    workspace_members: frozenset[str] = field(default_factory=frozenset[str])
    packages: tuple[PackageRecord, ...] = ()
    resolve: tuple[ResolveNodeRecord, ...] = ()


@runtime_checkable
class MetadataSource(Protocol):
    """Callable port returning the metadata of the workspace rooted at a manifest."""

    def __call__(
        self,
        manifest_path: Path,
        *,
        selection: FeatureSelection,
        target: str | None = None,
    ) -> WorkspaceMetadata:
        ...


__all__ = [
    "DependencyEdgeRecord",
    "MetadataSource",
    "PackageRecord",
    "ResolveNodeRecord",
    "TargetRecord",
    "WorkspaceMetadata",
]
