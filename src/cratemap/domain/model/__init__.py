"""Public domain model surface."""

from __future__ import annotations

from cratemap.domain.model.diagnostics import WorkspaceWarning
from cratemap.domain.model.enums import Edition, TargetKind, WarningKind
from cratemap.domain.model.package import PackageData, PackageDependency, TargetData

__all__ = [
    "Edition",
    "PackageData",
    "PackageDependency",
    "TargetData",
    "TargetKind",
    "WarningKind",
    "WorkspaceWarning",
]
