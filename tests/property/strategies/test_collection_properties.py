# tests/property/strategies/test_collection_properties.py
"""Property-based tests for collection shrink trees.

Invariants:
- Length floor: no value ever observed during a shrink search is shorter
  than the declared minimum
- Uniqueness: set and map trees never expose duplicate elements or keys
- Reversibility: complicate() right after simplify() restores the value
- Termination: simplify-only walks always exhaust
"""

from __future__ import annotations

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from proptree.strategies.collections.maps import MapStrategy
from proptree.strategies.collections.sets import SetStrategy
from proptree.strategies.collections.vecs import VecStrategy
from proptree.strategies.primitives.booleans import AnyBool
from proptree.strategies.primitives.chars import AnyChar
from proptree.strategies.primitives.integers import AnyI32, AnyU8
from proptree.strategies.primitives.strings import AnyString
from tests.helpers.trees import accepted_tree, drain, make_context, walk
from tests.property.settings import SHRINK_SETTINGS, STANDARD_SETTINGS, seeds

bounds = st.tuples(st.integers(0, 8), st.integers(0, 12)).map(lambda b: (b[0], b[0] + b[1]))


class TestLengthFloor:
    @given(seed=seeds, size=bounds, threshold=st.integers(0, 255))
    @SHRINK_SETTINGS
    def test_vec_search_never_breaks_floor(self, seed: int, size: tuple[int, int], threshold: int) -> None:
        tree = accepted_tree(VecStrategy(AnyU8(), size), make_context(seed))
        assert size[0] <= len(tree.current()) <= size[1]

        _, visited = walk(tree, lambda xs: sum(xs) >= threshold)

        assert all(len(v) >= size[0] for v in visited)

    @given(seed=seeds)
    @STANDARD_SETTINGS
    def test_u8_vec_three_to_five_drops_chunk_first(self, seed: int) -> None:
        tree = accepted_tree(VecStrategy(AnyU8(), range(3, 6)), make_context(seed))
        before = tree.current()
        assert len(before) in {3, 4, 5}

        changed = tree.simplify()

        if len(before) > 3:
            assert changed
            assert len(tree.current()) == 3
        else:
            assert len(tree.current()) == 3

    @given(seed=seeds, size=bounds)
    @STANDARD_SETTINGS
    def test_string_drain_respects_floor(self, seed: int, size: tuple[int, int]) -> None:
        tree = accepted_tree(AnyString(size, AnyChar("a", "z")), make_context(seed))

        seen = drain(tree)

        assert all(len(s) >= size[0] for s in seen)
        assert all(c.isascii() and c.islower() for s in seen for c in s)


class TestUniqueness:
    @given(seed=seeds, threshold=st.integers(0, 40))
    @SHRINK_SETTINGS
    def test_set_never_holds_duplicates(self, seed: int, threshold: int) -> None:
        tree = accepted_tree(SetStrategy(AnyU8(0, 40), range(2, 8)), make_context(seed))
        floor = min(2, len(tree.current()))

        _, visited = walk(tree, lambda s: max(s, default=0) >= threshold)

        assert all(len(v) >= floor for v in visited)

    @given(seed=seeds)
    @SHRINK_SETTINGS
    def test_map_with_i32_keys_keeps_entries_through_collisions(self, seed: int) -> None:
        tree = accepted_tree(MapStrategy(AnyI32(-4, 4), AnyBool(), range(2, 6)), make_context(seed))
        seen = drain(tree)

        assert all(len(m) >= 2 for m in seen)
        # Keys and values shrink fully; entries above the floor are dropped first
        assert len(seen[-1]) == 2
        assert all(value is False for value in seen[-1].values())


class TestReversibility:
    @given(seed=seeds, steps=st.integers(0, 20))
    @STANDARD_SETTINGS
    def test_complicate_restores_previous_value(self, seed: int, steps: int) -> None:
        tree = accepted_tree(VecStrategy(AnyU8(), (0, 10)), make_context(seed))
        for _ in range(steps):
            if not tree.simplify():
                break

        before: Any = list(tree.current())
        if tree.simplify():
            tree.complicate()
            assert tree.current() == before
