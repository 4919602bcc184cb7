"""The finished, read-only workspace graph."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, overload

from cratemap.domain.arena import PackageIdx, TargetIdx

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from cratemap.domain.arena import Arena
    from cratemap.domain.model import (
        PackageData,
        PackageDependency,
        TargetData,
        WorkspaceWarning,
    )


class CargoWorkspace:
    """Logical structure of a cargo workspace.

    Mirrors ``cargo metadata`` closely: it knows about packages and targets, and
    which package depends on which. Packages and targets are addressed by
    :class:`PackageIdx` and :class:`TargetIdx`; both stay valid for the lifetime
    of the workspace. A refreshed workspace is a new instance.
    """

    __slots__ = ("_name_counts", "_packages", "_targets", "_warnings", "_workspace_root")

    def __init__(
        self,
        *,
        packages: Arena[PackageIdx, PackageData],
        targets: Arena[TargetIdx, TargetData],
        workspace_root: Path,
        warnings: Iterable[WorkspaceWarning] = (),
    ) -> None:
        self._packages = packages
        self._targets = targets
        self._workspace_root = workspace_root
        self._warnings = tuple(warnings)
        self._name_counts = Counter(package.name for package in packages)

    @overload
    def __getitem__(self, idx: PackageIdx) -> PackageData: ...
    @overload
    def __getitem__(self, idx: TargetIdx) -> TargetData: ...
    def __getitem__(self, idx: PackageIdx | TargetIdx) -> PackageData | TargetData:
        if isinstance(idx, PackageIdx):
            return self._packages[idx]
        if isinstance(idx, TargetIdx):
            return self._targets[idx]
        raise TypeError(f"Unsupported workspace index: {idx!r}")

    def __len__(self) -> int:
        return len(self._packages)

    def __repr__(self) -> str:
        return (
            f"CargoWorkspace(root={self._workspace_root}, packages={len(self._packages)}, "
            f"targets={len(self._targets)}, warnings={len(self._warnings)})"
        )

    @property
    def workspace_root(self) -> Path:
        return self._workspace_root

    @property
    def warnings(self) -> tuple[WorkspaceWarning, ...]:
        return self._warnings

    def package(self, idx: PackageIdx) -> PackageData:
        return self._packages[idx]

    def target(self, idx: TargetIdx) -> TargetData:
        return self._targets[idx]

    def packages(self) -> Iterator[PackageIdx]:
        return self._packages.indices()

    def targets(self) -> Iterator[TargetIdx]:
        return self._targets.indices()

    def members(self) -> Iterator[PackageIdx]:
        return (idx for idx, package in self._packages.items() if package.is_member)

    def dependencies(self, idx: PackageIdx) -> tuple[PackageDependency, ...]:
        return self._packages[idx].dependencies

    def target_by_root(self, root: Path) -> TargetIdx | None:
        """Return the first target, in package order, whose source root is ``root``."""

        for package in self._packages:
            for target_idx in package.targets:
                if self._targets[target_idx].root == root:
                    return target_idx
        return None

    def find_package(self, name: str, version: str | None = None) -> PackageIdx | None:
        for idx, package in self._packages.items():
            if package.name == name and (version is None or package.version == version):
                return idx
        return None

    def package_flag(self, package: PackageData | PackageIdx) -> str:
        """Return the ``-p`` spec that selects ``package`` unambiguously."""

        data = self._packages[package] if isinstance(package, PackageIdx) else package
        if self.is_unique(data.name):
            return data.name
        return f"{data.name}:{data.version}"

    def is_unique(self, name: str) -> bool:
        return self._name_counts[name] == 1
