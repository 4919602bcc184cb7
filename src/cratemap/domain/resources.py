"""Build-script telemetry folded into workspace packages.

A check pass reports, per package id, the ``OUT_DIR`` and ``--cfg`` flags emitted
by build scripts and the dylib produced for proc-macro crates. The resulting side
tables are keyed by the external package id so the builder can merge them into the
matching packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from cratemap.domain.classification import PROC_MACRO_LABEL
from cratemap.domain.features import FeatureSelection
from cratemap.domain.ports.build_events import BuildScriptExecuted, CompilerArtifact

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from cratemap.config import CargoConfig
    from cratemap.domain.ports.build_events import BuildEvent, BuildEventSource

log = getLogger(__name__)

DYLIB_EXTENSIONS = frozenset({"dll", "dylib", "so"})


@dataclass(slots=True)
class ExternResources:
    out_dirs: dict[str, Path] = field(default_factory=dict["str", "Path"])
    cfgs: dict[str, tuple[str, ...]] = field(default_factory=dict["str", "tuple[str, ...]"])
    proc_macro_dylib_paths: dict[str, Path] = field(default_factory=dict["str", "Path"])


def is_dylib(path: Path) -> bool:
    return path.suffix[1:].lower() in DYLIB_EXTENSIONS


def collect_extern_resources(events: Iterable[BuildEvent]) -> ExternResources:
    resources = ExternResources()
    for event in events:
        match event:
            case BuildScriptExecuted(package_id=package_id, out_dir=out_dir, cfgs=cfgs):
                resources.out_dirs[package_id] = out_dir
                resources.cfgs[package_id] = cfgs
            case CompilerArtifact(package_id=package_id, target_kind=kind, filenames=filenames):
                if PROC_MACRO_LABEL not in kind:
                    continue
                # skip .rmeta and friends
                dylib = next((name for name in filenames if is_dylib(name)), None)
                if dylib is not None:
                    resources.proc_macro_dylib_paths[package_id] = dylib
    return resources


def load_extern_resources(
    manifest_path: Path,
    config: CargoConfig,
    *,
    event_source: BuildEventSource,
) -> ExternResources:
    """Run a check pass through ``event_source`` and collect its telemetry."""

    selection = FeatureSelection.from_config(config)
    log.info("Collecting build telemetry for %s (%s)", manifest_path, selection.mode)
    resources = collect_extern_resources(event_source(manifest_path, selection=selection))
    log.debug(
        "Build telemetry: out_dirs=%s, cfgs=%s, proc_macro_dylibs=%s",
        len(resources.out_dirs),
        len(resources.cfgs),
        len(resources.proc_macro_dylib_paths),
    )
    return resources
