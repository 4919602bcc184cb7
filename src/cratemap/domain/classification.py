"""Map cargo target kind labels onto :class:`TargetKind`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cratemap.domain.model.enums import TargetKind

if TYPE_CHECKING:
    from collections.abc import Sequence

PROC_MACRO_LABEL = "proc-macro"

_EXACT_LABELS: dict[str, TargetKind] = {
    "bin": TargetKind.BIN,
    "test": TargetKind.TEST,
    "bench": TargetKind.BENCH,
    "example": TargetKind.EXAMPLE,
    PROC_MACRO_LABEL: TargetKind.LIB,
}


def classify_target_kind(labels: Sequence[str]) -> TargetKind:
    """Return the kind of the first recognised label, or ``OTHER``.

    Labels such as ``custom-build`` are skipped; any label mentioning ``lib``
    (``lib``, ``rlib``, ``cdylib``, ...) counts as a library.
    """

    for label in labels:
        kind = _EXACT_LABELS.get(label)
        if kind is not None:
            return kind
        if "lib" in label:
            return TargetKind.LIB
    return TargetKind.OTHER


def is_proc_macro_target(labels: Sequence[str]) -> bool:
    return list(labels) == [PROC_MACRO_LABEL]
