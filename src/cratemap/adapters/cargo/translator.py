"""Translate cargo payloads into the records consumed by the domain."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from cratemap.domain.ports import (
    BuildScriptExecuted,
    CompilerArtifact,
    DependencyEdgeRecord,
    PackageRecord,
    ResolveNodeRecord,
    TargetRecord,
    WorkspaceMetadata,
)

from .schema import (
    CARGO_MESSAGE_ADAPTER,
    BuildScriptExecutedMessage,
    CargoMetadata,
    CompilerArtifactMessage,
    MetadataPackage,
    ResolveNode,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from cratemap.domain.ports import BuildEvent

    from .schema import CargoMessage

log = getLogger(__name__)


def translate_metadata(metadata: CargoMetadata) -> WorkspaceMetadata:
    """Convert a validated metadata document; the resolve section must be present."""

    if metadata.resolve is None:
        raise ValueError("cargo metadata was produced without dependency resolution")
    return WorkspaceMetadata(
        workspace_root=Path(metadata.workspace_root),
        workspace_members=frozenset(metadata.workspace_members),
        packages=tuple(_package_record(package) for package in metadata.packages),
        resolve=tuple(_node_record(node) for node in metadata.resolve.nodes),
    )


def _package_record(package: MetadataPackage) -> PackageRecord:
    return PackageRecord(
        id=package.id,
        name=package.name,
        version=package.version,
        edition=package.edition,
        manifest_path=Path(package.manifest_path),
        targets=tuple(
            TargetRecord(name=target.name, kind=tuple(target.kind), src_path=Path(target.src_path))
            for target in package.targets
        ),
    )


def _node_record(node: ResolveNode) -> ResolveNodeRecord:
    return ResolveNodeRecord(
        id=node.id,
        deps=tuple(DependencyEdgeRecord(pkg=dep.pkg, name=dep.name) for dep in node.deps),
        features=tuple(node.features),
    )


def translate_message(message: CargoMessage) -> BuildEvent | None:
    """Return the domain event for ``message``, or ``None`` for kinds we discard."""

    if isinstance(message, BuildScriptExecutedMessage):
        return BuildScriptExecuted(
            package_id=message.package_id,
            out_dir=Path(message.out_dir),
            cfgs=tuple(message.cfgs),
        )
    if isinstance(message, CompilerArtifactMessage):
        return CompilerArtifact(
            package_id=message.package_id,
            target_kind=tuple(message.target.kind),
            filenames=tuple(Path(name) for name in message.filenames),
        )
    return None


def parse_build_events(lines: Iterable[str]) -> Iterator[BuildEvent]:
    """Parse each line independently, skipping text and malformed messages."""

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line.startswith("{"):
            continue
        try:
            message = CARGO_MESSAGE_ADAPTER.validate_json(line)
        except ValidationError as exc:
            log.debug("Skipping unrecognised cargo message on line %s: %s", lineno, exc)
            continue
        event = translate_message(message)
        if event is not None:
            yield event
