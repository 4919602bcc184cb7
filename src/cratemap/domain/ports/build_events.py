"""Port for collecting build telemetry from a check pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from cratemap.domain.features import FeatureSelection


@dataclass(frozen=True, slots=True)
class BuildScriptExecuted:
    package_id: str
    out_dir: Path
    cfgs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CompilerArtifact:
    package_id: str
    target_kind: tuple[str, ...]
    filenames: tuple[Path, ...] = ()


type BuildEvent = BuildScriptExecuted | CompilerArtifact


@runtime_checkable
class BuildEventSource(Protocol):
    """Callable port yielding the recognised events of one check pass.

    Implementations drop malformed and uninteresting messages themselves.
    """

    def __call__(
        self,
        manifest_path: Path,
        *,
        selection: FeatureSelection,
    ) -> Iterable[BuildEvent]:
        ...


__all__ = ["BuildEvent", "BuildEventSource", "BuildScriptExecuted", "CompilerArtifact"]
