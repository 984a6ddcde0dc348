# src/proptree/strategies/collections/sets.py
"""Set strategy with uniqueness-preserving shrinking.

Generation draws elements until the target length is reached, absorbing
collisions with a bounded number of extra attempts
(MAX_STRATEGY_ATTEMPTS * target length). When the element domain is small
the set may come out shorter than requested; termination wins over exact
length.

Shrinking follows the shared length-then-element protocol. An element
simplification that would collide with another element is undone on the
spot (complicate on that element) and the next alternative is tried; if the
element has none left, shrinking moves to the next index.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.core.limits import MAX_STRATEGY_ATTEMPTS
from proptree.core.size_hint import SizeHint, SizeHintLike
from proptree.strategies.collections.plan import (
    DropPlan,
    ElementChanged,
    ElementStage,
    LengthStage,
    RemovedChunk,
    check_length_floor,
    check_unique,
)

T = TypeVar("T")


class SetValueTree(ValueTree["set[T] | frozenset[T]"], Generic[T]):
    """Shrinks a set of distinct element values."""

    KIND = "set"

    def __init__(self, trees: list[ValueTree[T]], min_len: int, *, frozen: bool = False) -> None:
        self._trees = list(trees)
        self._values: list[T] = [tree.current() for tree in self._trees]
        self._frozen = frozen
        self._plan = DropPlan(len(self._trees), min_len)
        self._stage: LengthStage | ElementStage = LengthStage(0, 0) if len(self._plan) else ElementStage(0)
        self._history: list[RemovedChunk[ValueTree[T]] | ElementChanged] = []
        self._current = self._build()

    @property
    def min_len(self) -> int:
        return self._plan.min_len

    def _build(self) -> set[T] | frozenset[T]:
        return frozenset(self._values) if self._frozen else set(self._values)

    def _sync(self) -> None:
        check_unique(self.KIND, self._values)
        self._current = self._build()

    def current(self) -> set[T] | frozenset[T]:
        return self._current

    def _is_duplicate(self, index: int, candidate: T) -> bool:
        return any(i != index and value == candidate for i, value in enumerate(self._values))

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
            tree = self._trees[index]
            if not tree.simplify():
                self._stage = ElementStage(index + 1)
                continue
            candidate = tree.current()
            if self._is_duplicate(index, candidate):
                if not tree.complicate():
                    self._stage = ElementStage(index + 1)
                continue
            self._values[index] = candidate
            self._sync()
            self._history.append(ElementChanged(index))
            return True

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


class SetStrategy(Strategy["set[T] | frozenset[T]"], Generic[T]):
    """Sets of distinct elements; element values must be hashable.

    Args:
        element: Strategy for members
        size: Size hint for the target length
        frozen: Produce frozenset instead of set
    """

    def __init__(self, element: Strategy[T], size: SizeHintLike = ..., *, frozen: bool = False) -> None:
        self.element = element
        self.size = SizeHint.of(size)
        self.frozen = frozen

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[set[T] | frozenset[T]]]:
        target = self.size.pick(context.rng)
        min_len = self.size.min_len
        trees: list[ValueTree[T]] = []
        seen: set[T] = set()
        attempts_remaining = MAX_STRATEGY_ATTEMPTS * max(target, 1)

        while len(trees) < target and attempts_remaining > 0:
            attempts_remaining -= 1
            outcome = self.element.new_tree(context)
            if outcome.is_rejected:
                return outcome.map(lambda _tree: SetValueTree(trees, min_len, frozen=self.frozen))
            candidate = outcome.value.current()
            if candidate in seen:
                continue
            seen.add(candidate)
            trees.append(outcome.value)

        return context.accept(SetValueTree(trees, min_len, frozen=self.frozen))
