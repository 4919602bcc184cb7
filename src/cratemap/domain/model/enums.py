"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum

from cratemap.domain.errors import EditionParseError


class TargetKind(StrEnum):
    BIN = "bin"
    # Any kind of lib crate-type (dylib, rlib, proc-macro, ...).
    LIB = "lib"
    EXAMPLE = "example"
    TEST = "test"
    BENCH = "bench"
    OTHER = "other"


class Edition(StrEnum):
    EDITION_2015 = "2015"
    EDITION_2018 = "2018"
    EDITION_2021 = "2021"
    EDITION_2024 = "2024"

    @classmethod
    def parse(cls, value: str) -> Edition:
        try:
            return cls(value.strip())
        except ValueError:
            raise EditionParseError(value) from None


class WarningKind(StrEnum):
    UNKNOWN_NODE = "unknown-node"
    UNKNOWN_DEPENDENCY = "unknown-dependency"
