# src/proptree/engine/shrinker.py
"""The shrink search loop.

Drives one ValueTree toward a minimal failing value:

    last_failed = True
    loop:
        step = simplify() if last_failed else complicate()
        stop when step is False or the budget is spent
        after simplify: re-run the check; failure keeps the candidate
        after complicate: the restored value is known to fail, so no re-run

The check is only ever evaluated after simplify(), so the step budget counts
property evaluations.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from proptree.contracts.tree import ValueTree
from proptree.core.limits import DEFAULT_MAX_SHRINK_STEPS
from proptree.core.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ShrinkResult(Generic[T]):
    """Outcome of a shrink search.

    Attributes:
        minimal: Smallest value that still failed the check
        failure: Exception the check raised for `minimal`
        steps: Check evaluations spent
        simplifications: Evaluations that still failed (accepted candidates)
        budget_exhausted: True if the search stopped on the step budget
    """

    minimal: T
    failure: BaseException
    steps: int
    simplifications: int
    budget_exhausted: bool


def shrink(
    tree: ValueTree[T],
    check: Callable[[T], BaseException | None],
    initial_failure: BaseException,
    *,
    max_steps: int = DEFAULT_MAX_SHRINK_STEPS,
) -> ShrinkResult[T]:
    """Search for a smaller value that still fails `check`.

    Args:
        tree: Tree whose current value is known to fail
        check: Returns the failure for a value, or None if it passes. Must not
            mutate its argument in a way that matters; callers pass copies.
        initial_failure: Failure observed for tree.current()
        max_steps: Maximum number of check evaluations

    Returns:
        ShrinkResult holding a deep copy of the minimal failing value
    """
    minimal = copy.deepcopy(tree.current())
    failure = initial_failure
    steps = 0
    simplifications = 0
    last_failed = True

    while steps < max_steps:
        if not last_failed:
            if not tree.complicate():
                break
            last_failed = True
            continue

        if not tree.simplify():
            break
        candidate = tree.current()
        steps += 1
        outcome = check(candidate)
        if outcome is None:
            last_failed = False
            logger.debug("shrink_step", step=steps, failed=False)
            continue
        simplifications += 1
        minimal = copy.deepcopy(candidate)
        failure = outcome
        logger.debug("shrink_step", step=steps, failed=True, candidate=repr(candidate))

    budget_exhausted = steps >= max_steps
    logger.info(
        "shrink_completed",
        steps=steps,
        simplifications=simplifications,
        budget_exhausted=budget_exhausted,
    )
    return ShrinkResult(minimal, failure, steps, simplifications, budget_exhausted)
