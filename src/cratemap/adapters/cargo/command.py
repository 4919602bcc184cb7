"""Argument construction for cargo invocations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cratemap.domain.features import FeatureMode

if TYPE_CHECKING:
    from pathlib import Path

    from cratemap.domain.features import FeatureSelection

METADATA_FORMAT_VERSION = "1"


def feature_args(selection: FeatureSelection) -> list[str]:
    match selection.mode:
        case FeatureMode.ALL_FEATURES:
            return ["--all-features"]
        case FeatureMode.NO_DEFAULT_FEATURES:
            return ["--no-default-features"]
        case FeatureMode.FEATURES:
            return ["--features", ",".join(selection.features)]
        case _:
            return []


def metadata_command(
    cargo: str,
    manifest_path: Path,
    *,
    selection: FeatureSelection,
    target: str | None = None,
) -> list[str]:
    args = [
        cargo,
        "metadata",
        "--format-version",
        METADATA_FORMAT_VERSION,
        "--manifest-path",
        str(manifest_path),
        *feature_args(selection),
    ]
    if target is not None:
        args.extend(["--filter-platform", target])
    return args


def check_command(cargo: str, manifest_path: Path, *, selection: FeatureSelection) -> list[str]:
    return [
        cargo,
        "check",
        "--message-format=json",
        "--manifest-path",
        str(manifest_path),
        *feature_args(selection),
    ]
