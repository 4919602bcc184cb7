"""Non-fatal findings collected while building a workspace."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import WarningKind


@dataclass(frozen=True, slots=True)
class WorkspaceWarning:
    kind: WarningKind
    package_id: str
    message: str
