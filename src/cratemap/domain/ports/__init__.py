"""Domain port definitions for adapters."""

from __future__ import annotations

from .build_events import BuildEvent, BuildEventSource, BuildScriptExecuted, CompilerArtifact
from .metadata import (
    DependencyEdgeRecord,
    MetadataSource,
    PackageRecord,
    ResolveNodeRecord,
    TargetRecord,
    WorkspaceMetadata,
)

__all__ = [
    "BuildEvent",
    "BuildEventSource",
    "BuildScriptExecuted",
    "CompilerArtifact",
    "DependencyEdgeRecord",
    "MetadataSource",
    "PackageRecord",
    "ResolveNodeRecord",
    "TargetRecord",
    "WorkspaceMetadata",
]
