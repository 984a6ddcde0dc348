# src/proptree/strategies/collections/vecs.py
"""Vector strategy and the sequence-shaped wrappers built on it.

VecValueTree implements the two-phase length-then-element protocol over a
list of element trees. DequeValueTree and HeapValueTree are thin wrappers
that convert the vector's current list into their native container after
every transition.

Container snapshots are rebuilt (never mutated in place) on every
transition, so a value handed out by current() never changes afterwards.
"""

from __future__ import annotations

import heapq
from abc import abstractmethod
from collections import deque
from typing import Generic, TypeVar

from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.core.size_hint import SizeHint, SizeHintLike
from proptree.strategies.collections.plan import (
    DropPlan,
    ElementChanged,
    ElementStage,
    LengthStage,
    RemovedChunk,
    check_length_floor,
)

T = TypeVar("T")
C = TypeVar("C")


class VecValueTree(ValueTree[list[T]]):
    """Shrinks a list: drop contiguous chunks first, then shrink elements."""

    KIND = "vec"

    def __init__(self, trees: list[ValueTree[T]], min_len: int) -> None:
        self._trees = list(trees)
        self._values: list[T] = [tree.current() for tree in self._trees]
        self._plan = DropPlan(len(self._trees), min_len)
        self._stage: LengthStage | ElementStage = LengthStage(0, 0) if len(self._plan) else ElementStage(0)
        self._history: list[RemovedChunk[ValueTree[T]] | ElementChanged] = []
        self._current: list[T] = list(self._values)

    @property
    def min_len(self) -> int:
        return self._plan.min_len

    def current(self) -> list[T]:
        return self._current

    def _sync(self) -> None:
        self._current = list(self._values)

    def _seek_length_from(self, chunk_index: int, offset: int) -> LengthStage | None:
        stage = self._plan.seek(chunk_index, offset, len(self._trees))
        self._stage = stage if stage is not None else ElementStage(0)
        return stage

    def simplify(self) -> bool:
        while True:
            stage = self._stage
            if isinstance(stage, LengthStage):
                found = self._seek_length_from(stage.chunk_index, stage.offset)
                if found is None:
                    continue
                start = found.offset
                stop = start + self._plan.size_at(found)
                removed_trees = self._trees[start:stop]
                removed_values = self._values[start:stop]
                del self._trees[start:stop]
                del self._values[start:stop]
                check_length_floor(self.KIND, len(self._trees), self.min_len)
                self._sync()
                self._history.append(RemovedChunk(start, found.chunk_index, removed_trees, removed_values))
                return True

            index = stage.index
            if index >= len(self._trees):
                return False
            if self._trees[index].simplify():
                self._values[index] = self._trees[index].current()
                self._sync()
                self._history.append(ElementChanged(index))
                return True
            self._stage = ElementStage(index + 1)

    def complicate(self) -> bool:
        if not self._history:
            return False
        entry = self._history.pop()

        if isinstance(entry, RemovedChunk):
            self._trees[entry.index : entry.index] = entry.trees
            self._values[entry.index : entry.index] = entry.values
            self._sync()
            if self._seek_length_from(entry.chunk_index, entry.index + 1) is not None:
                return True
            return bool(self._values)

        index = entry.index
        tree = self._trees[index]
        more = tree.complicate()
        self._values[index] = tree.current()
        self._sync()
        if more:
            self._history.append(ElementChanged(index))
            return True
        if index + 1 < len(self._trees):
            self._stage = ElementStage(index + 1)
            return True
        return False


class VecStrategy(Strategy[list[T]]):
    """Lists whose length is drawn uniformly from a size hint.

    Example:
        VecStrategy(AnyU8(), range(3, 6))   # lists of 3, 4, or 5 bytes
    """

    def __init__(self, element: Strategy[T], size: SizeHintLike = ...) -> None:
        self.element = element
        self.size = SizeHint.of(size)

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[list[T]]]:
        length = self.size.pick(context.rng)
        trees: list[ValueTree[T]] = []
        for _ in range(length):
            outcome = self.element.new_tree(context)
            if outcome.is_rejected:
                return outcome.map(lambda _tree: VecValueTree(trees, self.size.min_len))
            trees.append(outcome.value)
        return context.accept(VecValueTree(trees, self.size.min_len))

    def __repr__(self) -> str:
        return f"VecStrategy({self.element!r}, {self.size.min_len}..={self.size.max_len})"


class _VecWrapperTree(ValueTree[C], Generic[T, C]):
    """Delegates shrinking to a VecValueTree and converts its current list."""

    def __init__(self, inner: VecValueTree[T]) -> None:
        self._inner = inner
        self._current = self._convert(inner.current())

    @abstractmethod
    def _convert(self, values: list[T]) -> C:
        """Build the native container from the inner tree's list."""

    def current(self) -> C:
        return self._current

    def simplify(self) -> bool:
        if self._inner.simplify():
            self._current = self._convert(self._inner.current())
            return True
        return False

    def complicate(self) -> bool:
        more = self._inner.complicate()
        self._current = self._convert(self._inner.current())
        return more


class DequeValueTree(_VecWrapperTree[T, deque[T]]):
    def _convert(self, values: list[T]) -> deque[T]:
        return deque(values)


class HeapValueTree(_VecWrapperTree[T, list[T]]):
    """Lists that satisfy the heapq min-heap invariant after every step."""

    def _convert(self, values: list[T]) -> list[T]:
        heap = list(values)
        heapq.heapify(heap)
        return heap


class DequeStrategy(Strategy[deque[T]]):
    def __init__(self, element: Strategy[T], size: SizeHintLike = ...) -> None:
        self.inner = VecStrategy(element, size)

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[deque[T]]]:
        return self.inner.new_tree(context).map(DequeValueTree)


class HeapStrategy(Strategy[list[T]]):
    """Heap-ordered lists (see heapq); elements must be mutually orderable."""

    def __init__(self, element: Strategy[T], size: SizeHintLike = ...) -> None:
        self.inner = VecStrategy(element, size)

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[list[T]]]:
        return self.inner.new_tree(context).map(HeapValueTree)
