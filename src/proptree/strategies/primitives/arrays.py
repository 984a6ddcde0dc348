# src/proptree/strategies/primitives/arrays.py
"""Fixed-length arrays: lists of exactly N elements from one strategy."""

from __future__ import annotations

from typing import Generic, TypeVar

from proptree.contracts.errors import ConfigurationError
from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.strategies.primitives.tuples import FixedValueTree

T = TypeVar("T")


class ArrayValueTree(FixedValueTree[list[T]], Generic[T]):
    def _build(self) -> list[T]:
        return [tree.current() for tree in self._trees]


class ArrayStrategy(Strategy[list[T]]):
    """Lists of exactly `length` elements; shrinking never changes the length."""

    def __init__(self, element: Strategy[T], length: int) -> None:
        if isinstance(length, bool) or length < 0:
            raise ConfigurationError(f"array length must be a non-negative int, got {length!r}")
        self.element = element
        self.length = length

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[list[T]]]:
        trees: list[ValueTree[T]] = []
        for _ in range(self.length):
            outcome = self.element.new_tree(context)
            if outcome.is_rejected:
                return outcome.map(lambda _tree: ArrayValueTree(trees))
            trees.append(outcome.value)
        return context.accept(ArrayValueTree(trees))

    def __repr__(self) -> str:
        return f"ArrayStrategy({self.element!r}, {self.length})"
