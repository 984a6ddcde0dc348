# tests/unit/strategies/test_scalars.py
"""Tests for bool, float, and char strategies."""

import math

import pytest

from proptree.contracts.errors import ConfigurationError
from proptree.strategies.primitives.booleans import AnyBool, BoolValueTree
from proptree.strategies.primitives.chars import AnyChar, CharRange, build_char_candidates, is_surrogate
from proptree.strategies.primitives.floats import (
    MAX_FLOAT_SIMPLIFY_STEPS,
    AnyF32,
    AnyF64,
    build_float_candidates,
    round_to_f32,
)
from tests.helpers.trees import accepted_tree, drain, make_context


class TestBool:
    def test_true_simplifies_once_to_false(self) -> None:
        tree = BoolValueTree(True)

        assert tree.simplify() is True
        assert tree.current() is False
        assert tree.simplify() is False

    def test_complicate_restores_true_and_reports_exhausted(self) -> None:
        tree = BoolValueTree(True)
        tree.simplify()

        assert tree.complicate() is False
        assert tree.current() is True
        assert tree.simplify() is False

    def test_false_is_already_minimal(self) -> None:
        tree = BoolValueTree(False)

        assert tree.simplify() is False
        assert tree.complicate() is False
        assert tree.current() is False

    def test_both_values_drawn(self) -> None:
        context = make_context(2)

        values = {accepted_tree(AnyBool(), context).current() for _ in range(64)}

        assert values == {True, False}


class TestFloatCandidates:
    def test_halves_toward_zero_and_ends_there(self) -> None:
        candidates = build_float_candidates(8.0, 0.0)

        assert candidates[:4] == [4.0, 2.0, 1.0, 0.5]
        assert candidates[-1] == 0.0
        assert len(candidates) <= MAX_FLOAT_SIMPLIFY_STEPS + 1
        assert all(a > b for a, b in zip(candidates, candidates[1:], strict=False))

    def test_negative_zero_is_canonical(self) -> None:
        assert build_float_candidates(-0.0, 0.0) == []
        assert all(math.copysign(1.0, c) > 0 for c in build_float_candidates(-3.0, 0.0) if c == 0.0)

    def test_nan_goes_straight_to_target(self) -> None:
        assert build_float_candidates(math.nan, 1.5) == [1.5]

    def test_value_at_target(self) -> None:
        assert build_float_candidates(2.5, 2.5) == []

    @pytest.mark.parametrize("value", [1e-300, 5e-324, -2.2e-17, 1.0e-16])
    def test_values_near_target_still_reach_it(self, value: float) -> None:
        assert build_float_candidates(value, 0.0)[-1] == 0.0

    def test_near_nonzero_target_reaches_it_exactly(self) -> None:
        target = 1.0
        value = math.nextafter(target, 2.0)

        assert build_float_candidates(value, target) == [target]

    def test_full_span_does_not_overflow(self) -> None:
        candidates = build_float_candidates(1.7e308, -1.7e308)

        assert all(math.isfinite(c) for c in candidates)
        assert candidates[-1] == -1.7e308


class TestFloatStrategies:
    def test_f64_shrinks_to_anchor_within_range(self) -> None:
        context = make_context(9)
        strategy = AnyF64(2.0, 50.0)

        for _ in range(20):
            seen = drain(accepted_tree(strategy, context))
            assert all(2.0 <= v <= 50.0 for v in seen)
            assert seen[-1] == 2.0

    def test_tiny_range_shrinks_exactly_to_zero(self) -> None:
        context = make_context(1)
        strategy = AnyF64(0.0, 1e-200)

        for _ in range(20):
            seen = drain(accepted_tree(strategy, context))
            assert all(0.0 <= v <= 1e-200 for v in seen)
            assert seen[-1] == 0.0

    def test_f32_values_are_single_precision(self) -> None:
        context = make_context(4)
        strategy = AnyF32(-1000.0, 1000.0)

        for _ in range(20):
            for value in drain(accepted_tree(strategy, context)):
                assert round_to_f32(value) == value

    def test_default_f64_draws_are_finite(self) -> None:
        context = make_context(1)

        for _ in range(50):
            assert math.isfinite(accepted_tree(AnyF64(), context).current())

    @pytest.mark.parametrize(
        "build",
        [
            lambda: AnyF64(1.0, 0.0),
            lambda: AnyF64(0.0, math.inf),
            lambda: AnyF64(math.nan, 1.0),
            lambda: AnyF32(0.0, 0.1),
        ],
    )
    def test_invalid_bounds(self, build: object) -> None:
        with pytest.raises(ConfigurationError):
            build()  # type: ignore[operator]


class TestChars:
    def test_candidate_order_prefers_readable_characters(self) -> None:
        candidates = build_char_candidates("z", CharRange("\x00", "\U0010ffff"))

        assert candidates[0] == " "
        assert candidates[1:11] == list("0123456789")
        assert candidates[11] == "a"
        assert "z" not in candidates
        assert len(candidates) == len(set(candidates))

    def test_lowercase_range_targets_a(self) -> None:
        char_range = CharRange("a", "z")

        candidates = build_char_candidates("q", char_range)

        assert candidates[0] == "a"
        assert all(c in char_range for c in candidates)

    def test_preferred_character_has_no_candidates_below_itself(self) -> None:
        candidates = build_char_candidates(" ", CharRange("\x00", "\x7f"))

        assert " " not in candidates

    def test_surrogates_never_drawn(self) -> None:
        context = make_context(6)
        strategy = AnyChar("\ud7ff", "\ue000")

        values = {accepted_tree(strategy, context).current() for _ in range(50)}

        assert values == {"\ud7ff", "\ue000"}

    def test_surrogate_only_range_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            CharRange("\ud800", "\udfff")

    @pytest.mark.parametrize(("lo", "hi"), [("b", "a"), ("ab", "c"), ("", "a")])
    def test_invalid_char_bounds(self, lo: str, hi: str) -> None:
        with pytest.raises(ConfigurationError):
            AnyChar(lo, hi)

    def test_shrinking_stays_in_range_and_avoids_surrogates(self) -> None:
        context = make_context(8)
        strategy = AnyChar()

        for _ in range(20):
            for ch in drain(accepted_tree(strategy, context)):
                assert not is_surrogate(ord(ch))
