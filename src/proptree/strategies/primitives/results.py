# src/proptree/strategies/primitives/results.py
"""Result strategy: Ok(value) or Err(error).

Both variant trees are drawn up front so an Ok can be converted to an Err
during shrinking without touching the random source again.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from proptree.contracts.outcome import Outcome
from proptree.contracts.result import Err, Ok
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext

T = TypeVar("T")
E = TypeVar("E")


class ResultValueTree(ValueTree["Ok[T] | Err[E]"], Generic[T, E]):
    """Converts Ok to Err once, then shrinks whichever variant is active."""

    def __init__(self, ok: ValueTree[T], err: ValueTree[E], *, is_ok: bool) -> None:
        self._ok = ok
        self._err = err
        self._is_ok = is_ok
        self._converted_from_ok = False
        self._just_converted = False

    def current(self) -> Ok[T] | Err[E]:
        if self._is_ok:
            return Ok(self._ok.current())
        return Err(self._err.current())

    def _active(self) -> ValueTree[T] | ValueTree[E]:
        return self._ok if self._is_ok else self._err

    def simplify(self) -> bool:
        if self._is_ok and not self._converted_from_ok:
            self._is_ok = False
            self._converted_from_ok = True
            self._just_converted = True
            return True
        self._just_converted = False
        return self._active().simplify()

    def complicate(self) -> bool:
        if self._just_converted:
            self._is_ok = True
            self._just_converted = False
            return True
        return self._active().complicate()


class ResultStrategy(Strategy["Ok[T] | Err[E]"], Generic[T, E]):
    def __init__(self, ok: Strategy[T], err: Strategy[E], ok_probability: float = 0.5) -> None:
        self.ok = ok
        self.err = err
        self.ok_probability = ok_probability

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[Ok[T] | Err[E]]]:
        is_ok = context.rng.random() < self.ok_probability
        ok_outcome = self.ok.new_tree(context)
        err_outcome = self.err.new_tree(context)
        tree = ResultValueTree(ok_outcome.value, err_outcome.value, is_ok=is_ok)
        if ok_outcome.is_rejected:
            return ok_outcome.map(lambda _tree: tree)
        if err_outcome.is_rejected:
            return err_outcome.map(lambda _tree: tree)
        return context.accept(tree)

    def __repr__(self) -> str:
        return f"ResultStrategy({self.ok!r}, {self.err!r})"
