# src/proptree/contracts/outcome.py
"""Outcome: the uniform currency every generation step passes through.

Every call to Strategy.new_tree() returns an Outcome wrapping the produced
tree together with the context counters at the moment of production.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from proptree.contracts.enums import OutcomeStatus

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Accepted or rejected value plus the counters it was produced under.

    Attributes:
        status: ACCEPTED or REJECTED
        iteration: Case/draw counter of the producing context
        depth: Recursion depth of the producing context
        value: The produced value (usually a ValueTree)
    """

    status: OutcomeStatus
    iteration: int
    depth: int
    value: T

    @classmethod
    def accepted(cls, value: T, *, iteration: int, depth: int) -> Outcome[T]:
        return cls(OutcomeStatus.ACCEPTED, iteration, depth, value)

    @classmethod
    def rejected(cls, value: T, *, iteration: int, depth: int) -> Outcome[T]:
        return cls(OutcomeStatus.REJECTED, iteration, depth, value)

    @property
    def is_accepted(self) -> bool:
        return self.status is OutcomeStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status is OutcomeStatus.REJECTED

    def take(self) -> T:
        """Return the wrapped value regardless of status."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> Outcome[U]:
        """Re-wrap fn(value), keeping status and counters."""
        return Outcome(self.status, self.iteration, self.depth, fn(self.value))

    def with_status(self, status: OutcomeStatus) -> Outcome[T]:
        return Outcome(status, self.iteration, self.depth, self.value)
