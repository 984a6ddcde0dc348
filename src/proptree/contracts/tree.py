# src/proptree/contracts/tree.py
"""ValueTree and Strategy: the two abstractions the whole engine rests on.

A Strategy is a factory: given a GenerationContext it draws one random value
and returns it wrapped in a ValueTree. The tree is a stateful handle over
that value which can step to a simpler candidate (simplify) and back off
again (complicate). The tree never drives itself; the external shrink loop
calls simplify/complicate in lockstep with re-running the property.

Contract for implementers:
    - current() never raises and has no side effects
    - simplify()/complicate() are pure state transitions (no I/O)
    - current() always satisfies every constraint that held for the
      originally generated value (length bounds, uniqueness, ordering)
    - a finite number of simplify() calls exhausts the tree
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from proptree.contracts.outcome import Outcome
    from proptree.core.context import GenerationContext

T = TypeVar("T")


class ValueTree(ABC, Generic[T]):
    """Shrinkable search space around one generated value."""

    @abstractmethod
    def current(self) -> T:
        """Return the value this tree currently represents."""

    @abstractmethod
    def simplify(self) -> bool:
        """Attempt to move to a strictly simpler candidate.

        Returns:
            True when current() changed to a new candidate, regardless of
            whether the property still fails with it. False means the tree
            is exhausted.
        """

    @abstractmethod
    def complicate(self) -> bool:
        """Revert the most recent simplification.

        Called after a simplify() whose candidate made the property pass.

        Returns:
            True when further alternatives remain from this node, i.e. another
            simplify() could still find something smaller than the value just
            restored.
        """


class Strategy(ABC, Generic[T]):
    """Factory for ValueTrees over a constrained domain.

    Strategies may hold sub-strategies (a vector strategy owns its element
    strategy). Successive calls return different trees of the same kind.
    """

    @abstractmethod
    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[T]]:
        """Draw a value and wrap it in a tree.

        Args:
            context: Generation context supplying randomness and counters

        Returns:
            ACCEPTED outcome with a usable tree, or REJECTED outcome carrying
            whatever (possibly partial) tree was assembled.
        """
