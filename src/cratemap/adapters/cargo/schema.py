"""Pydantic models describing cargo's JSON output.

Covers ``cargo metadata --format-version 1`` and the line-delimited messages of
``cargo check --message-format=json``. Only the fields the workspace model needs
are declared; everything else is ignored.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

type PackageId = str


class CargoBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MetadataTarget(CargoBaseModel):
    name: str
    kind: list[str]
    crate_types: list[str] = Field(default_factory=list)
    src_path: str


class MetadataPackage(CargoBaseModel):
    id: PackageId
    name: str
    version: str
    # older cargo releases omit the field for 2015-edition packages
    edition: str = "2015"
    manifest_path: str
    targets: list[MetadataTarget] = Field(default_factory=list)


class NodeDep(CargoBaseModel):
    name: str
    pkg: PackageId


class ResolveNode(CargoBaseModel):
    id: PackageId
    deps: list[NodeDep] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)


class Resolve(CargoBaseModel):
    nodes: list[ResolveNode]
    root: PackageId | None = None


class CargoMetadata(CargoBaseModel):
    packages: list[MetadataPackage]
    workspace_members: list[PackageId]
    workspace_root: str
    resolve: Resolve | None = None
    target_directory: str | None = None
    version: int = 1


class ArtifactTarget(CargoBaseModel):
    name: str
    kind: list[str]
    crate_types: list[str] = Field(default_factory=list)
    src_path: str | None = None


class BuildScriptExecutedMessage(CargoBaseModel):
    reason: Literal["build-script-executed"]
    package_id: PackageId
    out_dir: str
    cfgs: list[str] = Field(default_factory=list)
    linked_libs: list[str] = Field(default_factory=list)
    linked_paths: list[str] = Field(default_factory=list)


class CompilerArtifactMessage(CargoBaseModel):
    reason: Literal["compiler-artifact"]
    package_id: PackageId
    target: ArtifactTarget
    filenames: list[str] = Field(default_factory=list)
    executable: str | None = None
    fresh: bool = False


class CompilerMessage(CargoBaseModel):
    reason: Literal["compiler-message"]
    package_id: PackageId | None = None


class BuildFinishedMessage(CargoBaseModel):
    reason: Literal["build-finished"]
    success: bool


CargoMessage = Annotated[
    BuildScriptExecutedMessage | CompilerArtifactMessage | CompilerMessage | BuildFinishedMessage,
    Field(discriminator="reason"),
]

CARGO_MESSAGE_ADAPTER: TypeAdapter[CargoMessage] = TypeAdapter(CargoMessage)
