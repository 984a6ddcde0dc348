# src/proptree/strategies/primitives/options.py
"""Option strategy: None or a value from an inner strategy."""

from __future__ import annotations

from typing import Generic, TypeVar

from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext

T = TypeVar("T")


class OptionValueTree(ValueTree["T | None"], Generic[T]):
    """Tries None first, then shrinks the inner value.

    Args:
        inner: Tree for the Some value, or None when None was drawn
    """

    def __init__(self, inner: ValueTree[T] | None) -> None:
        self._inner = inner
        self._is_none = inner is None
        self._tried_none = inner is None
        # True only while the most recent simplify was the switch to None
        self._just_set_none = False

    def current(self) -> T | None:
        if self._is_none or self._inner is None:
            return None
        return self._inner.current()

    def simplify(self) -> bool:
        if self._inner is None:
            return False
        if not self._tried_none:
            self._tried_none = True
            self._is_none = True
            self._just_set_none = True
            return True
        self._just_set_none = False
        if self._is_none:
            return False
        return self._inner.simplify()

    def complicate(self) -> bool:
        if self._inner is None:
            return False
        if self._is_none and self._just_set_none:
            self._is_none = False
            self._just_set_none = False
            return True
        if self._is_none:
            return False
        return self._inner.complicate()


class OptionStrategy(Strategy["T | None"], Generic[T]):
    """None with probability none_probability, else Some(inner)."""

    def __init__(self, inner: Strategy[T], none_probability: float = 0.5) -> None:
        self.inner = inner
        self.none_probability = none_probability

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[T | None]]:
        if context.rng.random() < self.none_probability:
            return context.accept(OptionValueTree(None))
        return self.inner.new_tree(context).map(OptionValueTree)

    def __repr__(self) -> str:
        return f"OptionStrategy({self.inner!r})"
