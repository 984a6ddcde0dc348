# src/proptree/strategies/primitives/floats.py
"""Float strategies (double and single precision).

Same halving principle as integers, computed in double precision:

- -0.0 is canonicalized to 0.0 everywhere
- at most MAX_FLOAT_SIMPLIFY_STEPS halvings, because halving toward a target
  can otherwise creep along representable values for a very long time
- the anchor itself is always the final candidate
- NaN has a single degenerate candidate: the anchor
"""

from __future__ import annotations

import math
import struct
import sys
from typing import ClassVar

from proptree.contracts.errors import ConfigurationError
from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.strategies.primitives.candidates import CandidateTree

MAX_FLOAT_SIMPLIFY_STEPS = 64

F32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]


def canonical_zero(value: float) -> float:
    return 0.0 if value == 0.0 else value


def approx_eq(value: float, other: float) -> bool:
    if math.isinf(value) or math.isinf(other):
        return value == other
    return abs(value - other) <= sys.float_info.epsilon * max(abs(value), abs(other), 1.0)


def float_anchor(lo: float, hi: float) -> float:
    if lo > 0.0:
        return lo
    if hi < 0.0:
        return hi
    return 0.0


def round_to_f32(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def build_float_candidates(value: float, target: float) -> list[float]:
    """Halve the distance from value to target, ending exactly at target."""
    if math.isnan(value):
        return [canonical_zero(target)]

    current = canonical_zero(value)
    target = canonical_zero(target)
    candidates: list[float] = []
    if current == target:
        return candidates

    for _ in range(MAX_FLOAT_SIMPLIFY_STEPS):
        delta = current - target
        if math.isinf(delta):
            # Both halves are finite even when the full span overflows
            next_value = canonical_zero(current / 2.0 + target / 2.0)
        else:
            next_value = canonical_zero(current - delta / 2.0)
        if approx_eq(next_value, current):
            break
        if not candidates or candidates[-1] != next_value:
            candidates.append(next_value)
        current = next_value
        if approx_eq(current, target):
            break

    if not candidates or candidates[-1] != target:
        candidates.append(target)
    return candidates


class FloatStrategy(Strategy[float]):
    """Uniform floats in an inclusive range."""

    SINGLE_PRECISION: ClassVar[bool] = False
    TYPE_MAX: ClassVar[float] = sys.float_info.max

    def __init__(self, min_value: float | None = None, max_value: float | None = None) -> None:
        lo = -self.TYPE_MAX if min_value is None else float(min_value)
        hi = self.TYPE_MAX if max_value is None else float(max_value)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise ConfigurationError(f"{type(self).__name__} bounds must be finite, got {lo}..={hi}")
        if lo > hi:
            raise ConfigurationError(f"{type(self).__name__} range {lo}..={hi} has start greater than end")
        if self.SINGLE_PRECISION and (round_to_f32(lo) != lo or round_to_f32(hi) != hi):
            raise ConfigurationError(f"{type(self).__name__} bounds {lo}..={hi} are not representable in 32 bits")
        self.min_value = lo
        self.max_value = hi

    def _narrow(self, value: float) -> float:
        return canonical_zero(round_to_f32(value) if self.SINGLE_PRECISION else value)

    def _sample(self, context: GenerationContext) -> float:
        if self.min_value == self.max_value:
            return self.min_value
        u = context.rng.random()
        # Weighted sum instead of lo + (hi - lo) * u: the span can overflow
        value = (1.0 - u) * self.min_value + u * self.max_value
        return min(max(self._narrow(value), self.min_value), self.max_value)

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[float]]:
        value = self._sample(context)
        target = float_anchor(self.min_value, self.max_value)
        candidates = [
            narrowed
            for narrowed in (self._narrow(c) for c in build_float_candidates(value, target))
            if self.min_value <= narrowed <= self.max_value and narrowed != value
        ]
        deduped: list[float] = []
        for candidate in candidates:
            if not deduped or deduped[-1] != candidate:
                deduped.append(candidate)
        return context.accept(CandidateTree(value, deduped))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.min_value}, {self.max_value})"


class AnyF64(FloatStrategy):
    pass


class AnyF32(FloatStrategy):
    SINGLE_PRECISION = True
    TYPE_MAX = F32_MAX
