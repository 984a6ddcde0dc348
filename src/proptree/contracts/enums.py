"""Status codes shared across subsystem boundaries."""

from enum import StrEnum


class OutcomeStatus(StrEnum):
    """Whether a generation step produced a usable value.

    A REJECTED outcome must never reach a property body; the caller
    retries the draw instead.
    """

    ACCEPTED = "accepted"
    REJECTED = "rejected"
