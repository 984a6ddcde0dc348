# src/proptree/contracts/errors.py
"""Exception taxonomy for proptree.

Four classes of failure exist, and only one of them is recoverable:

- Rejection: NOT an exception. A strategy declines a candidate by returning
  a REJECTED Outcome and the caller retries (bounded).
- Configuration errors: caller mistakes (malformed size hints, inverted
  bounds). Raised immediately, never clamped into something "close enough".
- Resource exhaustion: recursion or rejection ceilings exceeded. These abort
  the case loudly with the counters needed to diagnose it.
- Structural violations: a shrink tree broke an invariant it promised to
  keep. Always a bug in a tree implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proptree.contracts.reports import CaseFailure


class ProptreeError(Exception):
    """Base class for everything proptree raises."""


# =============================================================================
# Configuration Errors (caller mistakes)
# =============================================================================


class ConfigurationError(ProptreeError, ValueError):
    """Raised when a strategy or setting is constructed with invalid arguments."""


class SizeHintError(ConfigurationError):
    """Raised for malformed collection size hints.

    Covers empty ranges, minimums above the supported maximum length, and
    minimums greater than maximums after clamping.
    """


class UnsupportedTypeError(ConfigurationError):
    """Raised when the unstructured fallback has no generator for a type."""

    def __init__(self, tp: object) -> None:
        self.tp = tp
        super().__init__(f"no arbitrary generator registered for {tp!r}")


# =============================================================================
# Resource Exhaustion (fatal, defensive)
# =============================================================================


class ResourceExhaustedError(ProptreeError):
    """Raised when a defensive generation ceiling is exceeded.

    These are deliberately fatal: they indicate a runaway generator or a
    property whose precondition can never hold.
    """


class RecursionLimitExceeded(ResourceExhaustedError):
    """Raised when a recursive strategy nests deeper than the configured limit."""

    def __init__(self, *, limit: int, depth: int, iteration: int) -> None:
        self.limit = limit
        self.depth = depth
        self.iteration = iteration
        super().__init__(
            f"strategy recursion exceeded limit of {limit} (depth {depth}, iteration {iteration})"
        )


class RejectionLimitExceeded(ResourceExhaustedError):
    """Raised when a strategy keeps rejecting past the attempt ceiling."""

    def __init__(self, *, attempts: int, limit: int, iteration: int, depth: int, parameter: str | None = None) -> None:
        self.attempts = attempts
        self.limit = limit
        self.iteration = iteration
        self.depth = depth
        self.parameter = parameter
        target = f" for parameter '{parameter}'" if parameter is not None else ""
        super().__init__(
            f"strategy rejected value{target} after {attempts} attempts "
            f"(iteration {iteration}, depth {depth}; limit {limit})"
        )


# =============================================================================
# Invariant Violations (bugs)
# =============================================================================


class StructuralViolation(ProptreeError):
    """Raised when a shrink tree's current value breaks a declared invariant.

    Examples: a collection shrunk below its minimum length, or a set/map
    tree holding two equal elements/keys. Never expected in correct code.
    """


# =============================================================================
# Property Failures
# =============================================================================


class PropertyFailed(AssertionError):
    """Raised by the runner when a property fails for some input.

    Subclasses AssertionError so test runners report it as an ordinary
    test failure. The minimal failing exception is chained as __cause__.

    Attributes:
        failure: Structured details of the failing case
    """

    def __init__(self, failure: CaseFailure) -> None:
        self.failure = failure
        super().__init__(failure.describe())
