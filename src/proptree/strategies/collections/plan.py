# src/proptree/strategies/collections/plan.py
"""Shared building blocks for variable-length collection trees.

Every variable-length tree shrinks in two phases:

Phase 1 (length): walk a drop plan of halving chunk sizes, removing
    contiguous runs of elements while the minimum length still holds.
Phase 2 (elements): shrink element trees index by index.

Each successful step pushes a history record so complicate() can undo
exactly that step. The per-container trees (vec, set, map) own their
simplify/complicate logic because each rebuilds a different native
container and guards a different invariant; this module holds only the
pieces that are genuinely identical.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from proptree.contracts.errors import StructuralViolation

T = TypeVar("T")


def build_drop_plan(length: int) -> tuple[int, ...]:
    """Chunk sizes for length shrinking: len//2, len//4, ..., ending in 1.

    Example:
        build_drop_plan(8) == (4, 2, 1)
        build_drop_plan(5) == (2, 1)
        build_drop_plan(1) == (1,)
        build_drop_plan(0) == ()
    """
    plan: list[int] = []
    size = length // 2
    while size > 0:
        plan.append(size)
        size //= 2
    if length > 0 and 1 not in plan:
        plan.append(1)
    return tuple(plan)


@dataclass(frozen=True, slots=True)
class LengthStage:
    """Phase 1 cursor: next plan entry and offset to try."""

    chunk_index: int
    offset: int


@dataclass(frozen=True, slots=True)
class ElementStage:
    """Phase 2 cursor: next element index to shrink."""

    index: int


@dataclass(frozen=True, slots=True)
class RemovedChunk(Generic[T]):
    """History record for a Phase 1 removal.

    Holds the removed element trees and their values verbatim so they can
    be spliced back at the same offset.
    """

    index: int
    chunk_index: int
    trees: list[T]
    values: list[Any]


@dataclass(frozen=True, slots=True)
class ElementChanged:
    """History record for a Phase 2 element simplification."""

    index: int


class DropPlan:
    """Precomputed drop plan plus the minimum-length floor it must respect."""

    def __init__(self, initial_length: int, min_len: int) -> None:
        self.sizes = build_drop_plan(initial_length)
        self.min_len = min_len

    def __len__(self) -> int:
        return len(self.sizes)

    def seek(self, chunk_index: int, offset: int, length: int) -> LengthStage | None:
        """Find the next removable chunk at or after (chunk_index, offset).

        A chunk is removable when it fits inside the collection and removing
        it keeps length >= min_len. Entries that cannot be used are skipped
        rather than stalled on.

        Returns:
            The stage to remove next, or None when the plan is exhausted
        """
        while chunk_index < len(self.sizes):
            size = self.sizes[chunk_index]
            if length <= self.min_len or size > length or length - size < self.min_len:
                chunk_index += 1
                offset = 0
                continue
            if offset + size > length:
                chunk_index += 1
                offset = 0
                continue
            return LengthStage(chunk_index, offset)
        return None

    def size_at(self, stage: LengthStage) -> int:
        return self.sizes[stage.chunk_index]


def check_length_floor(kind: str, length: int, min_len: int) -> None:
    if length < min_len:
        raise StructuralViolation(f"{kind} tree shrank to length {length}, below minimum {min_len}")


def check_unique(kind: str, values: list[Any]) -> None:
    seen: list[Any] = []
    for value in values:
        if value in seen:
            raise StructuralViolation(f"{kind} tree holds duplicate {value!r}")
        seen.append(value)
