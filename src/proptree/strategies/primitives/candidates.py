# src/proptree/strategies/primitives/candidates.py
"""CandidateTree: the shrink tree behind every scalar strategy.

Integers, floats, and characters all precompute their full candidate
sequence at construction time. simplify() consumes the next candidate;
complicate() restores the value before the last step but keeps the cursor,
so the next simplify() tries the following (less aggressive) candidate.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from proptree.contracts.tree import ValueTree

T = TypeVar("T")


class CandidateTree(ValueTree[T]):
    """Walks a precomputed candidate sequence with an undo stack.

    Example:
        tree = CandidateTree(8, [4, 2, 1])
        tree.simplify()      # current() == 4
        tree.simplify()      # current() == 2
        tree.complicate()    # current() == 4, True (1 still untried)
        tree.simplify()      # current() == 1
    """

    def __init__(self, value: T, candidates: Sequence[T]) -> None:
        self._current = value
        self._candidates = tuple(candidates)
        self._next_index = 0
        self._history: list[T] = []

    @property
    def candidates(self) -> tuple[T, ...]:
        return self._candidates

    def current(self) -> T:
        return self._current

    def simplify(self) -> bool:
        if self._next_index >= len(self._candidates):
            return False
        self._history.append(self._current)
        self._current = self._candidates[self._next_index]
        self._next_index += 1
        return True

    def complicate(self) -> bool:
        if not self._history:
            return False
        self._current = self._history.pop()
        return self._next_index < len(self._candidates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(current={self._current!r}, remaining={len(self._candidates) - self._next_index})"
