"""Errors raised while loading a cargo workspace."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class CratemapError(RuntimeError):
    """Base class for fatal workspace loading errors."""


class FetchError(CratemapError):
    """Raised when a cargo invocation fails or its output cannot be understood."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.command = tuple(command) if command is not None else None
        self.returncode = returncode
        self.stderr = stderr


class EditionParseError(CratemapError, ValueError):
    """Raised when a package declares an edition we do not know how to compile."""

    def __init__(self, edition: str) -> None:
        super().__init__(f"Failed to parse edition {edition!r}")
        self.edition = edition


class ManifestNotFoundError(CratemapError, FileNotFoundError):
    """Raised when no Cargo.toml exists at the requested location."""
