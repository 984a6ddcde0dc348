# src/proptree/strategies/primitives/booleans.py
"""Boolean strategy: the only simpler value is False."""

from __future__ import annotations

from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext


class BoolValueTree(ValueTree[bool]):
    """Exactly one simplify step (True -> False); complicate restores True."""

    def __init__(self, value: bool) -> None:
        self._current = value
        self._original = value
        self._tried_false = not value
        self._can_complicate = False

    def current(self) -> bool:
        return self._current

    def simplify(self) -> bool:
        if self._tried_false:
            return False
        self._tried_false = True
        self._can_complicate = self._original
        if self._original:
            self._current = False
            return True
        return False

    def complicate(self) -> bool:
        if not self._can_complicate:
            return False
        self._current = self._original
        self._can_complicate = False
        return False


class AnyBool(Strategy[bool]):
    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[bool]]:
        return context.accept(BoolValueTree(context.rng.random() < 0.5))
