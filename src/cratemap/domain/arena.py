"""Append-only storage addressed by typed indices.

Packages and targets refer to each other through indices instead of object
references. Each entity kind gets its own index type so a package index can never
be used to look up a target.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclass(frozen=True, slots=True, order=True)
class Idx:
    raw: int

    def __post_init__(self) -> None:
        if self.raw < 0:
            raise ValueError(f"Arena index must be non-negative, got {self.raw}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw})"


@dataclass(frozen=True, slots=True, order=True, repr=False)
class PackageIdx(Idx):
    pass


@dataclass(frozen=True, slots=True, order=True, repr=False)
class TargetIdx(Idx):
    pass


class Arena[I: Idx, T]:
    """Sequence of values that only ever grows."""

    __slots__ = ("_index_type", "_values")

    def __init__(self, index_type: type[I]) -> None:
        self._index_type = index_type
        self._values: list[T] = []

    @property
    def index_type(self) -> type[I]:
        return self._index_type

    def alloc(self, value: T) -> I:
        idx = self._index_type(len(self._values))
        self._values.append(value)
        return idx

    def __getitem__(self, idx: I) -> T:
        if type(idx) is not self._index_type:
            raise TypeError(
                f"{self._index_type.__name__} arena cannot be indexed by {type(idx).__name__}"
            )
        if idx.raw >= len(self._values):
            raise IndexError(f"{idx!r} is out of range for arena of size {len(self._values)}")
        return self._values[idx.raw]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __contains__(self, idx: object) -> bool:
        if not isinstance(idx, Idx) or type(idx) is not self._index_type:
            return False
        return idx.raw < len(self._values)

    def indices(self) -> Iterator[I]:
        return (self._index_type(raw) for raw in range(len(self._values)))

    def items(self) -> Iterator[tuple[I, T]]:
        return ((self._index_type(raw), value) for raw, value in enumerate(self._values))

    def map[U](self, func: Callable[[T], U]) -> Arena[I, U]:
        """Return a new arena holding ``func(value)`` under the same indices."""

        mapped: Arena[I, U] = Arena(self._index_type)
        mapped._values.extend(func(value) for value in self._values)  # noqa: SLF001
        return mapped
