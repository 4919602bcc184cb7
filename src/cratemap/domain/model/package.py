"""Package and target records stored in the workspace arenas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from cratemap.domain.arena import PackageIdx, TargetIdx

    from .enums import Edition, TargetKind


@dataclass(frozen=True, slots=True)
class PackageDependency:
    """Edge to another package; ``name`` is the alias used by the depending package."""

    pkg: PackageIdx
    name: str


@dataclass(frozen=True, slots=True)
class TargetData:
    package: PackageIdx
    name: str
    root: Path
    kind: TargetKind
    is_proc_macro: bool = False


@dataclass(frozen=True, slots=True)
class PackageData:
    name: str
    version: str
    manifest: Path
    edition: Edition
    is_member: bool
    targets: tuple[TargetIdx, ...] = ()
    dependencies: tuple[PackageDependency, ...] = ()
    features: tuple[str, ...] = ()
    cfgs: tuple[str, ...] = ()
    out_dir: Path | None = None
    proc_macro_dylib_path: Path | None = None

    @property
    def root(self) -> Path:
        """Directory holding the package manifest."""
        return self.manifest.parent
