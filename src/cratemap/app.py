"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from cratemap.adapters.cargo import build_cargo_sources
from cratemap.config import get_cargo_config
from cratemap.domain import build_workspace
from cratemap.domain.errors import ManifestNotFoundError

if TYPE_CHECKING:
    from cratemap.config import CargoConfig, ToolchainConfig
    from cratemap.domain import CargoWorkspace
    from cratemap.domain.ports import BuildEventSource, MetadataSource

MANIFEST_FILENAME = "Cargo.toml"

log = getLogger(__name__)


def resolve_manifest_path(path: Path | str) -> Path:
    """Accept either a manifest or the directory holding one."""

    candidate = Path(path).expanduser()
    if candidate.is_dir():
        candidate = candidate / MANIFEST_FILENAME
    if not candidate.is_file():
        raise ManifestNotFoundError(f"No {MANIFEST_FILENAME} found at {candidate}")
    return candidate.absolute()


def load_cargo_workspace(
    manifest_path: Path | str,
    *,
    config: CargoConfig | None = None,
    toolchain: ToolchainConfig | None = None,
    metadata_source: MetadataSource | None = None,
    event_source: BuildEventSource | None = None,
) -> CargoWorkspace:
    """Build the workspace for ``manifest_path`` using the configured adapters."""

    manifest = resolve_manifest_path(manifest_path)
    effective_config = config or get_cargo_config()
    if metadata_source is None or event_source is None:
        default_metadata, default_events = build_cargo_sources(toolchain)
        metadata_source = metadata_source or default_metadata
        event_source = event_source or default_events

    return build_workspace(
        manifest,
        effective_config,
        metadata_source=metadata_source,
        event_source=event_source,
    )
