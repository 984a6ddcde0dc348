# src/proptree/strategies/primitives/chars.py
"""Character strategy.

Shrunk output should be readable, so candidates are ordered:

1. the preferred target: first of ' ', '0', 'a' inside the range
   (else the range start)
2. digits '0'..'9'
3. lowercase letters 'a'..'z'
4. a codepoint halving sequence from the drawn value toward the target

Surrogates (U+D800..U+DFFF) are not scalar values and are never produced.
"""

from __future__ import annotations

from proptree.contracts.errors import ConfigurationError
from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.strategies.primitives.candidates import CandidateTree

MIN_CODEPOINT = 0
MAX_CODEPOINT = 0x10FFFF
SURROGATE_LO = 0xD800
SURROGATE_HI = 0xDFFF

_PREFERRED = (" ", "0", "a")
_DIGITS = tuple("0123456789")
_LOWERCASE = tuple("abcdefghijklmnopqrstuvwxyz")


def is_surrogate(codepoint: int) -> bool:
    return SURROGATE_LO <= codepoint <= SURROGATE_HI


def _surrogates_below(codepoint: int) -> int:
    """Count surrogate codepoints strictly below codepoint."""
    if codepoint <= SURROGATE_LO:
        return 0
    return min(codepoint, SURROGATE_HI + 1) - SURROGATE_LO


def scalar_count(lo: int, hi: int) -> int:
    """Number of non-surrogate codepoints in [lo, hi]."""
    return (hi - lo + 1) - (_surrogates_below(hi + 1) - _surrogates_below(lo))


def nth_scalar(lo: int, offset: int) -> int:
    """The offset-th non-surrogate codepoint at or after lo."""
    codepoint = lo + offset
    if lo < SURROGATE_LO <= codepoint:
        codepoint += SURROGATE_HI - SURROGATE_LO + 1
    elif is_surrogate(lo):
        codepoint = SURROGATE_HI + 1 + offset
    return codepoint


class CharRange:
    """Inclusive codepoint range excluding surrogates."""

    def __init__(self, lo: str, hi: str) -> None:
        if len(lo) != 1 or len(hi) != 1:
            raise ConfigurationError(f"char bounds must be single characters, got {lo!r}..={hi!r}")
        self.lo = ord(lo)
        self.hi = ord(hi)
        if self.lo > self.hi:
            raise ConfigurationError(f"char range {lo!r}..={hi!r} has start greater than end")
        if scalar_count(self.lo, self.hi) == 0:
            raise ConfigurationError(f"char range {lo!r}..={hi!r} contains only surrogates")

    def __contains__(self, ch: object) -> bool:
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        codepoint = ord(ch)
        return self.lo <= codepoint <= self.hi and not is_surrogate(codepoint)

    @property
    def start(self) -> str:
        return chr(nth_scalar(self.lo, 0))

    def sample(self, context: GenerationContext) -> str:
        offset = context.rng.randrange(scalar_count(self.lo, self.hi))
        return chr(nth_scalar(self.lo, offset))


def preferred_char(char_range: CharRange) -> str:
    for candidate in _PREFERRED:
        if candidate in char_range:
            return candidate
    return char_range.start


def halving_sequence(start: int, target: int) -> list[str]:
    """Codepoints halving toward target, skipping surrogates, ending at target."""
    sequence: list[str] = []
    current = start
    while current != target:
        diff = abs(current - target)
        step = max(diff // 2, 1)
        current = current - step if current > target else current + step
        if not is_surrogate(current):
            ch = chr(current)
            if not sequence or sequence[-1] != ch:
                sequence.append(ch)
    if not is_surrogate(target):
        ch = chr(target)
        if not sequence or sequence[-1] != ch:
            sequence.append(ch)
    return sequence


def build_char_candidates(value: str, char_range: CharRange) -> list[str]:
    candidates: list[str] = []
    target = preferred_char(char_range)

    if value != target:
        candidates.append(target)

    for digit in _DIGITS:
        if digit != value and digit != target and digit in char_range:
            candidates.append(digit)

    for letter in _LOWERCASE:
        if letter != value and letter in char_range and letter not in candidates:
            candidates.append(letter)

    for ch in halving_sequence(ord(value), ord(target)):
        if ch != value and ch in char_range and ch not in candidates:
            candidates.append(ch)

    return candidates


class AnyChar(Strategy[str]):
    """Single characters within an inclusive range."""

    def __init__(self, min_char: str = chr(MIN_CODEPOINT), max_char: str = chr(MAX_CODEPOINT)) -> None:
        self.char_range = CharRange(min_char, max_char)

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[str]]:
        value = self.char_range.sample(context)
        return context.accept(CandidateTree(value, build_char_candidates(value, self.char_range)))

    def __repr__(self) -> str:
        return f"AnyChar({chr(self.char_range.lo)!r}, {chr(self.char_range.hi)!r})"
