# tests/property/engine/test_runner_properties.py
"""Property-based tests for end-to-end runs.

Invariants:
- Shrinking is monotone: the reported minimal example still fails
- The minimal example never leaves the strategy's domain
- Runs with the same seed are reproducible
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from proptree.contracts.errors import PropertyFailed
from proptree.core.config import RunnerSettings
from proptree.engine.runner import PropertyRunner
from proptree.strategies.collections.vecs import VecStrategy
from proptree.strategies.primitives.integers import AnyU8
from tests.property.settings import SLOW_SETTINGS, seeds


def _sum_below(limit: int):  # type: ignore[no-untyped-def]
    def prop(xs: list[int]) -> None:
        assert sum(xs) < limit

    return prop


@pytest.mark.slow
class TestShrinkMonotonicity:
    @given(seed=seeds, limit=st.integers(1, 600))
    @SLOW_SETTINGS
    def test_minimal_example_still_fails(self, seed: int, limit: int) -> None:
        runner = PropertyRunner(RunnerSettings(cases=200, seed=seed, max_shrink_steps=2000))

        try:
            runner.run(_sum_below(limit), {"xs": VecStrategy(AnyU8(), range(1, 9))})
        except PropertyFailed as failure:
            minimal = failure.failure.minimal["xs"]
            assert sum(minimal) >= limit
            assert 1 <= len(minimal) <= 8
            assert all(0 <= x <= 255 for x in minimal)
            assert sum(minimal) <= sum(failure.failure.original["xs"])

    @given(seed=seeds)
    @SLOW_SETTINGS
    def test_runs_are_reproducible(self, seed: int) -> None:
        settings = RunnerSettings(cases=100, seed=seed)
        prop = _sum_below(300)

        reports = []
        for _ in range(2):
            with pytest.raises(PropertyFailed) as excinfo:
                PropertyRunner(settings).run(prop, {"xs": VecStrategy(AnyU8(), range(4, 9))})
            reports.append(excinfo.value.failure)

        assert reports[0] == reports[1]
