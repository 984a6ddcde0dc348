"""Shared contracts for cross-boundary types.

This package is a LEAF MODULE with no outbound dependencies to core/engine;
GenerationContext appears only under TYPE_CHECKING.

Import patterns:
    from proptree.contracts import Outcome, Strategy, ValueTree
    from proptree.contracts import RejectionLimitExceeded, PropertyFailed
"""

from proptree.contracts.enums import OutcomeStatus
from proptree.contracts.errors import (
    ConfigurationError,
    PropertyFailed,
    ProptreeError,
    RecursionLimitExceeded,
    RejectionLimitExceeded,
    ResourceExhaustedError,
    SizeHintError,
    StructuralViolation,
    UnsupportedTypeError,
)
from proptree.contracts.outcome import Outcome
from proptree.contracts.reports import CaseFailure, RunReport
from proptree.contracts.result import Err, Ok
from proptree.contracts.tree import Strategy, ValueTree

__all__ = [
    "CaseFailure",
    "ConfigurationError",
    "Err",
    "Ok",
    "Outcome",
    "OutcomeStatus",
    "PropertyFailed",
    "ProptreeError",
    "RecursionLimitExceeded",
    "RejectionLimitExceeded",
    "ResourceExhaustedError",
    "RunReport",
    "SizeHintError",
    "Strategy",
    "StructuralViolation",
    "UnsupportedTypeError",
    "ValueTree",
]
