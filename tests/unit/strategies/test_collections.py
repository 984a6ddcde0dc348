# tests/unit/strategies/test_collections.py
"""Tests for vec, deque, heap, set, map, and string trees.

Trees are mostly built by hand from CandidateTrees so the exact shrink
sequence is known.
"""

from collections import deque

import pytest

from proptree.contracts.tree import ValueTree
from proptree.strategies.collections.maps import MapStrategy, MapValueTree
from proptree.strategies.collections.plan import DropPlan, LengthStage, build_drop_plan
from proptree.strategies.collections.sets import SetStrategy, SetValueTree
from proptree.strategies.collections.vecs import (
    DequeStrategy,
    DequeValueTree,
    HeapStrategy,
    HeapValueTree,
    VecStrategy,
    VecValueTree,
    _VecWrapperTree,
)
from proptree.strategies.combinators import Filtered
from proptree.strategies.primitives.booleans import AnyBool
from proptree.strategies.primitives.candidates import CandidateTree
from proptree.strategies.primitives.chars import AnyChar, CharRange, build_char_candidates
from proptree.strategies.primitives.integers import AnyI32, AnyU8, build_integer_candidates
from proptree.strategies.primitives.strings import AnyString, StringValueTree
from tests.helpers.trees import accepted_tree, drain, make_context, walk


def int_tree(value: int) -> CandidateTree[int]:
    return CandidateTree(value, build_integer_candidates(value, 0))


def int_trees(*values: int) -> list[ValueTree[int]]:
    return [int_tree(v) for v in values]


class TestDropPlan:
    @pytest.mark.parametrize(
        ("length", "plan"),
        [(0, ()), (1, (1,)), (2, (1,)), (5, (2, 1)), (8, (4, 2, 1)), (32, (16, 8, 4, 2, 1))],
    )
    def test_halving_sequence(self, length: int, plan: tuple[int, ...]) -> None:
        assert build_drop_plan(length) == plan

    def test_seek_skips_chunks_that_break_the_floor(self) -> None:
        plan = DropPlan(5, min_len=3)

        assert plan.seek(0, 0, 5) == LengthStage(0, 0)
        assert plan.seek(0, 0, 4) == LengthStage(1, 0)
        assert plan.seek(0, 0, 3) is None

    def test_seek_advances_past_offsets_that_do_not_fit(self) -> None:
        plan = DropPlan(4, min_len=0)

        assert plan.seek(0, 3, 4) == LengthStage(1, 0)


class TestVec:
    def test_first_step_drops_a_chunk_down_to_the_floor(self) -> None:
        tree = VecValueTree(int_trees(5, 6, 7, 8, 9), min_len=3)

        assert tree.simplify() is True
        assert tree.current() == [7, 8, 9]

    def test_complicate_restores_chunk_and_tries_next_offset(self) -> None:
        tree = VecValueTree(int_trees(5, 6, 7, 8, 9), min_len=3)
        tree.simplify()

        assert tree.complicate() is True
        assert tree.current() == [5, 6, 7, 8, 9]
        assert tree.simplify() is True
        assert tree.current() == [5, 8, 9]

    def test_search_finds_single_failing_element(self) -> None:
        tree = VecValueTree(int_trees(3, 0, 7, 0, 2), min_len=0)

        minimal, _ = walk(tree, lambda xs: any(x >= 5 for x in xs))

        assert minimal == [7]

    def test_drain_respects_floor(self) -> None:
        tree = VecValueTree(int_trees(9, 9, 9, 9), min_len=2)

        seen = drain(tree)

        assert all(len(v) >= 2 for v in seen)
        assert seen[-1] == [0, 0]

    def test_snapshots_are_not_mutated(self) -> None:
        tree = VecValueTree(int_trees(4, 4), min_len=0)
        before = tree.current()

        tree.simplify()

        assert before == [4, 4]
        assert tree.current() is not before

    def test_empty_vec_is_exhausted(self) -> None:
        tree = VecValueTree([], min_len=0)

        assert tree.simplify() is False
        assert tree.complicate() is False
        assert tree.current() == []

    def test_strategy_lengths_follow_hint(self) -> None:
        context = make_context(21)
        strategy = VecStrategy(AnyU8(), range(3, 6))

        lengths = {len(accepted_tree(strategy, context).current()) for _ in range(100)}

        assert lengths == {3, 4, 5}

    def test_rejected_element_yields_rejected_partial_tree(self) -> None:
        strategy = VecStrategy(Filtered(AnyU8(), lambda _v: False), 3)

        outcome = strategy.new_tree(make_context())

        assert outcome.is_rejected
        assert outcome.value.current() == []


class TestDequeAndHeap:
    def test_deque_wraps_vec(self) -> None:
        tree = DequeValueTree(VecValueTree(int_trees(1, 2, 3), min_len=0))

        assert tree.current() == deque([1, 2, 3])
        tree.simplify()
        assert isinstance(tree.current(), deque)

    def test_heap_invariant_after_every_step(self) -> None:
        tree = HeapValueTree(VecValueTree(int_trees(9, 3, 7, 1, 8, 2), min_len=0))

        for value in drain(tree):
            assert _is_heap(value)

    def test_strategies_produce_native_containers(self) -> None:
        context = make_context(5)

        assert isinstance(accepted_tree(DequeStrategy(AnyU8(), 4), context).current(), deque)
        heap = accepted_tree(HeapStrategy(AnyU8(), 6), context).current()
        assert _is_heap(heap)

    def test_wrapper_base_requires_conversion(self) -> None:
        with pytest.raises(TypeError, match="_convert"):
            _VecWrapperTree(VecValueTree(int_trees(1), min_len=0))  # type: ignore[abstract]


def _is_heap(values: list[int]) -> bool:
    return all(values[(i - 1) // 2] <= values[i] for i in range(1, len(values)))


class TestSet:
    def test_duplicate_candidate_is_skipped(self) -> None:
        tree = SetValueTree(int_trees(4, 2), min_len=2)

        seen = drain(tree)

        assert seen == [{4, 2}, {1, 2}, {0, 2}, {0, 1}]

    def test_frozen_variant(self) -> None:
        tree = SetValueTree(int_trees(3), min_len=0, frozen=True)

        assert tree.current() == frozenset({3})
        tree.simplify()
        assert isinstance(tree.current(), frozenset)

    def test_small_domain_terminates_short(self) -> None:
        outcome = SetStrategy(AnyBool(), 5).new_tree(make_context())

        assert outcome.is_accepted
        assert outcome.value.current() <= {True, False}

    def test_generated_elements_are_distinct(self) -> None:
        context = make_context(13)

        for _ in range(30):
            tree = accepted_tree(SetStrategy(AnyU8(0, 20), range(2, 10)), context)
            for value in drain(tree):
                assert len(value) >= 2


class TestMap:
    def _tree(self, *, ordered: bool = False) -> MapValueTree[int, int]:
        return MapValueTree(
            [(int_tree(4), int_tree(9)), (int_tree(2), int_tree(5))],
            min_len=2,
            ordered=ordered,
        )

    def test_key_collision_is_rejected_without_losing_entries(self) -> None:
        tree = self._tree()

        seen = drain(tree)

        assert seen[1] == {1: 9, 2: 5}
        assert all(len(v) == 2 for v in seen)
        assert seen[-1] == {0: 0, 1: 0}

    def test_values_stay_paired_with_keys(self) -> None:
        tree = self._tree()

        tree.simplify()
        tree.simplify()

        assert tree.current() == {0: 9, 2: 5}

    def test_ordered_map_sorts_keys(self) -> None:
        tree = MapValueTree([(int_tree(3), int_tree(1)), (int_tree(1), int_tree(1))], min_len=0, ordered=True)

        assert list(tree.current()) == [1, 3]

    def test_length_phase_drops_entries(self) -> None:
        tree = MapValueTree([(int_tree(k), int_tree(0)) for k in (10, 20, 30, 40)], min_len=1)

        assert tree.simplify() is True
        assert tree.current() == {30: 0, 40: 0}
        assert tree.complicate() is True
        assert tree.current() == {10: 0, 20: 0, 30: 0, 40: 0}

    def test_strategy_keys_distinct(self) -> None:
        context = make_context(17)

        for _ in range(30):
            tree = accepted_tree(MapStrategy(AnyI32(-3, 3), AnyBool(), range(2, 5)), context)
            assert 2 <= len(tree.current()) <= 4


class TestString:
    def test_string_joins_chars_after_every_step(self) -> None:
        char_range = CharRange("a", "z")
        trees: list[ValueTree[str]] = [CandidateTree(c, build_char_candidates(c, char_range)) for c in "xyz"]
        tree = StringValueTree(VecValueTree(trees, min_len=0))

        seen = drain(tree)

        assert seen[0] == "xyz"
        assert seen[1] == "yz"
        assert seen[-1] == ""
        assert all(isinstance(s, str) for s in seen)

    def test_string_strategy_respects_hint_and_chars(self) -> None:
        context = make_context(3)
        strategy = AnyString(range(3, 6), AnyChar("a", "z"))

        for _ in range(30):
            value = accepted_tree(strategy, context).current()
            assert 3 <= len(value) <= 5
            assert value.isascii() and value.islower()

    def test_default_string_length_bounded(self) -> None:
        strategy = AnyString()

        assert strategy.size.max_len == 128
        assert len(accepted_tree(strategy, make_context()).current()) <= 128
