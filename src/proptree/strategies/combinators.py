# src/proptree/strategies/combinators.py
"""Strategies built from other strategies: constants, projections, filters,
and recursion."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.strategies.primitives.tuples import TupleStrategy

T = TypeVar("T")
U = TypeVar("U")


class ConstantValueTree(ValueTree[T]):
    """A value with no simpler alternatives."""

    def __init__(self, value: T) -> None:
        self._value = value

    def current(self) -> T:
        return self._value

    def simplify(self) -> bool:
        return False

    def complicate(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"ConstantValueTree({self._value!r})"


class Just(Strategy[T]):
    def __init__(self, value: T) -> None:
        self.value = value

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[T]]:
        return context.accept(ConstantValueTree(self.value))

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


class MappedValueTree(ValueTree[U], Generic[T, U]):
    def __init__(self, inner: ValueTree[T], fn: Callable[[T], U]) -> None:
        self._inner = inner
        self._fn = fn
        self._current = fn(inner.current())

    def current(self) -> U:
        return self._current

    def simplify(self) -> bool:
        if self._inner.simplify():
            self._current = self._fn(self._inner.current())
            return True
        return False

    def complicate(self) -> bool:
        more = self._inner.complicate()
        self._current = self._fn(self._inner.current())
        return more


class Mapped(Strategy[U], Generic[T, U]):
    """Projects every value of `inner` through `fn`; shrinking follows `inner`."""

    def __init__(self, inner: Strategy[T], fn: Callable[[T], U]) -> None:
        self.inner = inner
        self.fn = fn

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[U]]:
        return self.inner.new_tree(context).map(lambda tree: MappedValueTree(tree, self.fn))


class FilteredValueTree(ValueTree[T]):
    """Skips shrink candidates that fail the predicate.

    A failing candidate is undone immediately via complicate on the inner
    tree, the same local rejection rule sets use for duplicates.
    """

    def __init__(self, inner: ValueTree[T], predicate: Callable[[T], bool]) -> None:
        self._inner = inner
        self._predicate = predicate

    def current(self) -> T:
        return self._inner.current()

    def simplify(self) -> bool:
        while self._inner.simplify():
            if self._predicate(self._inner.current()):
                return True
            if not self._inner.complicate():
                return False
        return False

    def complicate(self) -> bool:
        return self._inner.complicate()


class Filtered(Strategy[T]):
    """Rejects draws of `inner` that fail `predicate`.

    The runner retries rejected draws up to its rejection limit, so a
    predicate that almost never holds ends in RejectionLimitExceeded.
    """

    def __init__(self, inner: Strategy[T], predicate: Callable[[T], bool]) -> None:
        self.inner = inner
        self.predicate = predicate

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[T]]:
        outcome = self.inner.new_tree(context)
        if outcome.is_rejected:
            return outcome.map(lambda tree: FilteredValueTree(tree, self.predicate))
        tree = FilteredValueTree(outcome.value, self.predicate)
        if self.predicate(tree.current()):
            return context.accept(tree)
        return context.reject(tree)


class Recursive(Strategy[T]):
    """Draws from build() one recursion level deeper.

    build is called lazily (once) so the strategy it returns may refer back
    to this Recursive instance:

        node = Recursive(lambda: OptionStrategy(VecStrategy(node, (0, 3))))

    Each level of nesting passes through context.recurse(), so the
    configured recursion limit bounds the depth of generated values.
    """

    def __init__(self, build: Callable[[], Strategy[T]]) -> None:
        self._build = build
        self._strategy: Strategy[T] | None = None

    @property
    def strategy(self) -> Strategy[T]:
        if self._strategy is None:
            self._strategy = self._build()
        return self._strategy

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[T]]:
        return context.recurse(self.strategy.new_tree)


def different(strategy: Strategy[T]) -> Strategy[tuple[Any, ...]]:
    """Pairs of two unequal values drawn from the same strategy."""
    return Filtered(TupleStrategy(strategy, strategy), lambda pair: pair[0] != pair[1])
