# src/proptree/strategies/primitives/integers.py
"""Integer strategies for every fixed width.

Shrinking halves the distance to an anchor until it reaches the anchor:

    anchor = 0 if lo <= 0 <= hi, else the in-range bound nearest to zero
    23 -> 12 -> 6 -> 3 -> 2 -> 1 -> 0

The sequence is strictly decreasing in distance from the anchor, never
revisits a value, and never leaves [lo, hi] because every candidate lies
between the drawn value and the anchor.
"""

from __future__ import annotations

from typing import ClassVar

from proptree.contracts.errors import ConfigurationError
from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.strategies.primitives.candidates import CandidateTree


def integer_anchor(lo: int, hi: int) -> int:
    """Return the value shrinking converges toward for [lo, hi]."""
    if lo <= 0 <= hi:
        return 0
    if lo > 0:
        return lo
    return hi


def build_integer_candidates(value: int, target: int) -> list[int]:
    """Halve the distance from value to target until target is reached."""
    candidates: list[int] = []
    current = value
    while current != target:
        delta = current - target
        step = max(abs(delta) // 2, 1)
        current = current - step if delta > 0 else current + step
        candidates.append(current)
    return candidates


class IntegerStrategy(Strategy[int]):
    """Uniform integers in an inclusive range.

    Subclasses pin BITS/SIGNED to model a machine width; the base class
    accepts any bounds.
    """

    BITS: ClassVar[int | None] = None
    SIGNED: ClassVar[bool] = True

    def __init__(self, min_value: int | None = None, max_value: int | None = None) -> None:
        type_lo, type_hi = self.type_bounds()
        lo = type_lo if min_value is None else min_value
        hi = type_hi if max_value is None else max_value
        if lo is None or hi is None:
            raise ConfigurationError(f"{type(self).__name__} requires explicit min_value and max_value")
        if lo > hi:
            raise ConfigurationError(f"{type(self).__name__} range {lo}..={hi} has start greater than end")
        if type_lo is not None and type_hi is not None and (lo < type_lo or hi > type_hi):
            raise ConfigurationError(
                f"{type(self).__name__} range {lo}..={hi} exceeds type bounds {type_lo}..={type_hi}"
            )
        self.min_value = lo
        self.max_value = hi

    @classmethod
    def type_bounds(cls) -> tuple[int | None, int | None]:
        if cls.BITS is None:
            return None, None
        if cls.SIGNED:
            return -(1 << (cls.BITS - 1)), (1 << (cls.BITS - 1)) - 1
        return 0, (1 << cls.BITS) - 1

    @classmethod
    def over(cls, bounds: range | tuple[int, int]) -> IntegerStrategy:
        """Build from a half-open range() or an inclusive (lo, hi) tuple."""
        if isinstance(bounds, range):
            if bounds.step != 1 or bounds.start >= bounds.stop:
                raise ConfigurationError(f"{cls.__name__} range {bounds!r} is empty or stepped")
            return cls(bounds.start, bounds.stop - 1)
        lo, hi = bounds
        return cls(lo, hi)

    @property
    def anchor(self) -> int:
        return integer_anchor(self.min_value, self.max_value)

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[int]]:
        value = context.rng.randint(self.min_value, self.max_value)
        return context.accept(CandidateTree(value, build_integer_candidates(value, self.anchor)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.min_value}, {self.max_value})"


class AnyI8(IntegerStrategy):
    BITS = 8


class AnyI16(IntegerStrategy):
    BITS = 16


class AnyI32(IntegerStrategy):
    BITS = 32


class AnyI64(IntegerStrategy):
    BITS = 64


class AnyI128(IntegerStrategy):
    BITS = 128


class AnyIsize(IntegerStrategy):
    BITS = 64


class AnyU8(IntegerStrategy):
    BITS = 8
    SIGNED = False


class AnyU16(IntegerStrategy):
    BITS = 16
    SIGNED = False


class AnyU32(IntegerStrategy):
    BITS = 32
    SIGNED = False


class AnyU64(IntegerStrategy):
    BITS = 64
    SIGNED = False


class AnyU128(IntegerStrategy):
    BITS = 128
    SIGNED = False


class AnyUsize(IntegerStrategy):
    BITS = 64
    SIGNED = False
