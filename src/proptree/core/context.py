# src/proptree/core/context.py
"""GenerationContext: randomness, case counter, and recursion bookkeeping.

One context is created per test case and discarded afterwards. Every
strategy draws from context.rng and wraps its result via accept()/reject(),
which snapshot the counters without advancing them: several sub-draws inside
one logical case share an iteration number until the caller explicitly calls
advance_iteration().

Recursion:
    recurse() enters a scope one level deeper. Entering a scope at the
    configured ceiling raises RecursionLimitExceeded; this is fatal by
    design so that a recursive strategy without a base case crashes loudly
    instead of hanging. The depth counter is restored in a finally block, so
    it is correct again after normal return AND after an exception unwinds
    through the scope.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from proptree.contracts.errors import ConfigurationError, RecursionLimitExceeded
from proptree.contracts.outcome import Outcome

T = TypeVar("T")


class GenerationContext:
    """Per-case generation state.

    Attributes:
        rng: Random source, mutated by every draw
    """

    def __init__(self, rng: random.Random, *, recursion_limit: int | None = None) -> None:
        """Initialize with iteration=0 and depth=0.

        Args:
            rng: Random source owned by this context
            recursion_limit: Maximum nesting depth, None for unbounded
        """
        if recursion_limit is not None and recursion_limit < 0:
            raise ConfigurationError(f"recursion_limit must be >= 0, got {recursion_limit}")
        self.rng = rng
        self._iteration = 0
        self._depth = 0
        self._recursion_limit = recursion_limit

    @classmethod
    def build(cls, rng: random.Random) -> GenerationContext:
        """Context with an unbounded recursion ceiling."""
        return cls(rng)

    @classmethod
    def build_with_limit(cls, rng: random.Random, recursion_limit: int | None) -> GenerationContext:
        return cls(rng, recursion_limit=recursion_limit)

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def recursion_limit(self) -> int | None:
        return self._recursion_limit

    def accept(self, value: T) -> Outcome[T]:
        return Outcome.accepted(value, iteration=self._iteration, depth=self._depth)

    def reject(self, value: T) -> Outcome[T]:
        return Outcome.rejected(value, iteration=self._iteration, depth=self._depth)

    def advance_iteration(self) -> int:
        """Move to the next iteration number and return it."""
        self._iteration += 1
        return self._iteration

    @contextmanager
    def depth_scope(self) -> Iterator[GenerationContext]:
        """Scope guard: check the ceiling, increment depth, always decrement.

        Raises:
            RecursionLimitExceeded: If depth is already at the ceiling
        """
        if self._recursion_limit is not None and self._depth >= self._recursion_limit:
            raise RecursionLimitExceeded(
                limit=self._recursion_limit,
                depth=self._depth,
                iteration=self._iteration,
            )
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    def recurse(self, fn: Callable[[GenerationContext], T]) -> T:
        """Run fn one recursion level deeper.

        Args:
            fn: Callable receiving this context at depth + 1

        Returns:
            Whatever fn returns
        """
        with self.depth_scope() as scoped:
            return fn(scoped)
