# src/proptree/strategies/primitives/tuples.py
"""Fixed-shape composites: tuples of any arity.

Fixed-size containers have no length dimension. Each simplify() asks the
components in declared order for one step and remembers which component
changed, so complicate() reverts exactly that component.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from proptree.contracts.errors import ConfigurationError
from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext

C = TypeVar("C")


class FixedValueTree(ValueTree[C], Generic[C]):
    """Component-wise shrinking over a fixed list of trees."""

    def __init__(self, trees: Sequence[ValueTree[Any]]) -> None:
        self._trees = list(trees)
        self._cursor = 0
        self._last_changed: int | None = None
        self._current = self._build()

    @abstractmethod
    def _build(self) -> C:
        """Assemble the value from the components' current values."""

    @property
    def trees(self) -> list[ValueTree[Any]]:
        return self._trees

    def current(self) -> C:
        return self._current

    def simplify(self) -> bool:
        while self._cursor < len(self._trees):
            if self._trees[self._cursor].simplify():
                self._last_changed = self._cursor
                self._current = self._build()
                return True
            self._cursor += 1
        self._last_changed = None
        return False

    def complicate(self) -> bool:
        index = self._last_changed
        if index is None:
            return False
        more = self._trees[index].complicate()
        self._current = self._build()
        if more:
            return True
        self._last_changed = None
        # Component exhausted; later components may still shrink
        self._cursor = index + 1
        return self._cursor < len(self._trees)


class TupleValueTree(FixedValueTree[tuple[Any, ...]]):
    def _build(self) -> tuple[Any, ...]:
        return tuple(tree.current() for tree in self._trees)


class TupleStrategy(Strategy[tuple[Any, ...]]):
    """Tuples whose components come from one strategy each.

    Example:
        TupleStrategy(AnyBool(), AnyU8())   # (True, 17)
    """

    def __init__(self, *components: Strategy[Any]) -> None:
        if not components:
            raise ConfigurationError("TupleStrategy needs at least one component strategy")
        self.components = components

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[tuple[Any, ...]]]:
        trees: list[ValueTree[Any]] = []
        for component in self.components:
            outcome = component.new_tree(context)
            if outcome.is_rejected:
                return outcome.map(lambda _tree: TupleValueTree(trees))
            trees.append(outcome.value)
        return context.accept(TupleValueTree(trees))

    def __repr__(self) -> str:
        inner = ", ".join(repr(component) for component in self.components)
        return f"TupleStrategy({inner})"
