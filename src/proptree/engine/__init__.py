"""Case execution: runner, shrink loop, and the @proptest decorator."""

from proptree.engine.harness import proptest
from proptree.engine.runner import PropertyRunner
from proptree.engine.shrinker import ShrinkResult, shrink

__all__ = ["PropertyRunner", "ShrinkResult", "proptest", "shrink"]
