"""Subprocess-backed implementations of the cargo ports."""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from cratemap.config import ToolchainConfig, get_toolchain_config
from cratemap.domain.errors import FetchError

from .command import check_command, metadata_command
from .schema import CargoMetadata
from .translator import parse_build_events, translate_metadata

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from cratemap.domain.features import FeatureSelection
    from cratemap.domain.ports import (
        BuildEvent,
        BuildEventSource,
        MetadataSource,
        WorkspaceMetadata,
    )

log = getLogger(__name__)

type CommandRunner = Callable[..., subprocess.CompletedProcess[bytes]]


def _run_cargo(
    runner: CommandRunner,
    args: Sequence[str],
    *,
    cwd: Path | None,
    timeout: float | None,
) -> subprocess.CompletedProcess[bytes]:
    log.debug("Running %s", shlex.join(args))
    try:
        return runner(
            list(args),
            cwd=cwd,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise FetchError(f"Failed to run `{shlex.join(args)}`: {exc}", command=args) from exc


def _stderr_text(completed: subprocess.CompletedProcess[bytes]) -> str:
    return (completed.stderr or b"").decode("utf-8", errors="replace")


def _decoded_lines(output: bytes) -> Iterator[str]:
    """Decode each output line on its own, dropping lines that are not UTF-8."""

    for lineno, raw in enumerate(output.splitlines(), start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            log.debug("Skipping undecodable cargo output on line %s: %s", lineno, exc)


@dataclass(slots=True)
class CargoMetadataFetcher:
    """Runs ``cargo metadata`` and returns the translated workspace metadata."""

    toolchain: ToolchainConfig = field(default_factory=get_toolchain_config)
    runner: CommandRunner = field(default=subprocess.run)

    def __call__(
        self,
        manifest_path: Path,
        *,
        selection: FeatureSelection,
        target: str | None = None,
    ) -> WorkspaceMetadata:
        manifest = Path(manifest_path).absolute()
        args = metadata_command(
            self.toolchain.cargo, manifest, selection=selection, target=target
        )
        completed = _run_cargo(
            self.runner, args, cwd=manifest.parent, timeout=self.toolchain.timeout_seconds
        )
        if completed.returncode != 0:
            log.error("cargo metadata failed with exit code %s", completed.returncode)
            raise FetchError(
                f"Failed to run `cargo metadata --manifest-path {manifest}`",
                command=args,
                returncode=completed.returncode,
                stderr=_stderr_text(completed),
            )

        try:
            metadata = CargoMetadata.model_validate_json(completed.stdout.decode("utf-8"))
            return translate_metadata(metadata)
        except ValueError as exc:
            raise FetchError(
                f"Unexpected `cargo metadata` output for {manifest}: {exc}",
                command=args,
                returncode=completed.returncode,
                stderr=_stderr_text(completed),
            ) from exc


@dataclass(slots=True)
class CargoCheckEventSource:
    """Runs ``cargo check --message-format=json`` and yields its build events.

    Compile errors make cargo exit non-zero while still reporting build scripts and
    artifacts, so only a failure to spawn or read the process is an error.
    """

    toolchain: ToolchainConfig = field(default_factory=get_toolchain_config)
    runner: CommandRunner = field(default=subprocess.run)

    def __call__(
        self,
        manifest_path: Path,
        *,
        selection: FeatureSelection,
    ) -> list[BuildEvent]:
        manifest = Path(manifest_path).absolute()
        args = check_command(self.toolchain.cargo, manifest, selection=selection)
        completed = _run_cargo(
            self.runner, args, cwd=manifest.parent, timeout=self.toolchain.timeout_seconds
        )
        if completed.returncode != 0:
            log.warning(
                "cargo check exited with code %s; using the telemetry it reported",
                completed.returncode,
            )
        return list(parse_build_events(_decoded_lines(completed.stdout)))


def build_cargo_sources(
    toolchain: ToolchainConfig | None = None,
) -> tuple[CargoMetadataFetcher, CargoCheckEventSource]:
    effective = toolchain or get_toolchain_config()
    return CargoMetadataFetcher(toolchain=effective), CargoCheckEventSource(toolchain=effective)


if TYPE_CHECKING:
    _metadata_check: MetadataSource = CargoMetadataFetcher()
    _events_check: BuildEventSource = CargoCheckEventSource()
