"""Hard limits shared by strategies, the fallback path, and the runner."""

# Longest collection any size hint may request. Upper bounds above this are
# clamped; minimums above it are configuration errors.
COLLECTION_MAX_LEN = 32

# Longest string the unstructured fallback and default string strategy emit.
STRING_MAX_LEN = 128

# Default rejection ceiling per parameter draw, and the per-element attempt
# multiplier for uniqueness-constrained collections.
MAX_STRATEGY_ATTEMPTS = 64

# Cases per property when nothing else is configured.
DEFAULT_CASES = 10_000

# Property evaluations the shrink loop may spend per failing case.
DEFAULT_MAX_SHRINK_STEPS = 4096
