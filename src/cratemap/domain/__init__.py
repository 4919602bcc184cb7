"""Workspace model built from cargo metadata."""

from __future__ import annotations

from .arena import Arena, Idx, PackageIdx, TargetIdx
from .builder import build_workspace
from .classification import classify_target_kind, is_proc_macro_target
from .errors import CratemapError, EditionParseError, FetchError, ManifestNotFoundError
from .features import FeatureMode, FeatureSelection
from .resources import ExternResources, collect_extern_resources, load_extern_resources
from .workspace import CargoWorkspace

__all__ = [
    "Arena",
    "CargoWorkspace",
    "CratemapError",
    "EditionParseError",
    "ExternResources",
    "FeatureMode",
    "FeatureSelection",
    "FetchError",
    "Idx",
    "ManifestNotFoundError",
    "PackageIdx",
    "TargetIdx",
    "build_workspace",
    "classify_target_kind",
    "collect_extern_resources",
    "is_proc_macro_target",
    "load_extern_resources",
]
