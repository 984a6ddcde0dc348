"""Core infrastructure: generation context, size hints, limits, settings, logging.

Settings classes pull in pydantic; import them from proptree.core.config.
"""

from proptree.core.context import GenerationContext
from proptree.core.limits import (
    COLLECTION_MAX_LEN,
    DEFAULT_CASES,
    DEFAULT_MAX_SHRINK_STEPS,
    MAX_STRATEGY_ATTEMPTS,
    STRING_MAX_LEN,
)
from proptree.core.size_hint import SizeHint

__all__ = [
    "COLLECTION_MAX_LEN",
    "DEFAULT_CASES",
    "DEFAULT_MAX_SHRINK_STEPS",
    "MAX_STRATEGY_ATTEMPTS",
    "STRING_MAX_LEN",
    "GenerationContext",
    "SizeHint",
]
