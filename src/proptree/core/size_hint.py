# src/proptree/core/size_hint.py
"""Collection size hints.

A size hint tells a collection strategy how many elements to draw. Callers
may pass any of:

    5                 exactly five
    range(2, 6)       2..5 (half-open, like range() everywhere else)
    slice(3, None)    at least three (None = unbounded)
    slice(None, 4)    at most three
    (1, 8)            1..8 inclusive; either side may be None
    ...               anything up to the cap

Upper bounds are clamped to the cap (COLLECTION_MAX_LEN unless a strategy
supplies its own). Everything else that is malformed is a SizeHintError:
an empty range, a minimum above the cap, or min > max after clamping.
Nothing is silently adjusted beyond the documented upper-bound clamp.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from types import EllipsisType
from typing import TypeAlias

from proptree.contracts.errors import SizeHintError
from proptree.core.limits import COLLECTION_MAX_LEN

SizeHintLike: TypeAlias = "int | range | slice | tuple[int | None, int | None] | EllipsisType | SizeHint"


def _clamp_bounds(minimum: int, maximum: int | None, cap: int) -> tuple[int, int]:
    if minimum < 0:
        raise SizeHintError(f"size hint minimum {minimum} is negative")
    if minimum > cap:
        raise SizeHintError(f"size hint minimum {minimum} exceeds maximum supported length {cap}")
    clamped_max = cap if maximum is None else min(maximum, cap)
    if minimum > clamped_max:
        raise SizeHintError(f"size hint minimum {minimum} exceeds maximum {clamped_max} after clamping")
    return minimum, clamped_max


@dataclass(frozen=True, slots=True)
class SizeHint:
    """Inclusive, validated length bounds."""

    min_len: int
    max_len: int

    @classmethod
    def of(cls, hint: SizeHintLike, *, cap: int = COLLECTION_MAX_LEN) -> SizeHint:
        """Normalize any accepted hint form into inclusive bounds.

        Raises:
            SizeHintError: If the hint is malformed or its type unsupported
        """
        if isinstance(hint, SizeHint):
            return cls(*_clamp_bounds(hint.min_len, hint.max_len, cap))
        # bool is an int subclass; True as a length is almost certainly a bug
        if isinstance(hint, bool):
            raise SizeHintError(f"size hint must not be a bool, got {hint!r}")
        if isinstance(hint, int):
            if hint > cap:
                raise SizeHintError(f"size hint {hint} exceeds maximum supported length {cap}")
            return cls(*_clamp_bounds(hint, hint, cap))
        if isinstance(hint, range):
            if hint.step != 1:
                raise SizeHintError(f"size hint range must have step 1, got {hint!r}")
            if hint.start >= hint.stop:
                raise SizeHintError(f"size hint range {hint.start}..{hint.stop} is empty")
            return cls(*_clamp_bounds(hint.start, hint.stop - 1, cap))
        if isinstance(hint, slice):
            if hint.step is not None:
                raise SizeHintError(f"size hint slice must not have a step, got {hint!r}")
            start = 0 if hint.start is None else hint.start
            if hint.stop is None:
                return cls(*_clamp_bounds(start, None, cap))
            if start >= hint.stop:
                raise SizeHintError(f"size hint range {start}..{hint.stop} is empty")
            return cls(*_clamp_bounds(start, hint.stop - 1, cap))
        if isinstance(hint, tuple):
            if len(hint) != 2:
                raise SizeHintError(f"size hint tuple must be (min, max), got {hint!r}")
            lo, hi = hint
            start = 0 if lo is None else lo
            if hi is not None and start > hi:
                raise SizeHintError(f"size hint range {start}..={hi} has start greater than end")
            return cls(*_clamp_bounds(start, hi, cap))
        if hint is Ellipsis:
            return cls(*_clamp_bounds(0, None, cap))
        raise SizeHintError(f"unsupported size hint {hint!r}")

    def pick(self, rng: random.Random) -> int:
        """Uniformly sample a length within the bounds."""
        if self.min_len == self.max_len:
            return self.min_len
        return rng.randint(self.min_len, self.max_len)

    def __contains__(self, length: object) -> bool:
        return isinstance(length, int) and self.min_len <= length <= self.max_len
