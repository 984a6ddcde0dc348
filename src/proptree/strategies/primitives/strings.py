# src/proptree/strategies/primitives/strings.py
"""String strategy: a vector of character trees joined after every step.

Strings reuse the vector's length-then-element protocol unchanged, so a
shrunk string first loses whole runs of characters and only then has its
remaining characters simplified toward readable ones.
"""

from __future__ import annotations

from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.core.limits import STRING_MAX_LEN
from proptree.core.size_hint import SizeHint, SizeHintLike
from proptree.strategies.collections.vecs import VecValueTree, _VecWrapperTree
from proptree.strategies.primitives.chars import AnyChar


class StringValueTree(_VecWrapperTree[str, str]):
    def _convert(self, values: list[str]) -> str:
        return "".join(values)


class AnyString(Strategy[str]):
    """Strings of characters drawn from a char strategy.

    Args:
        size: Length hint, capped at STRING_MAX_LEN (default 0..=STRING_MAX_LEN)
        chars: Strategy for each character (default: any scalar value)
    """

    def __init__(self, size: SizeHintLike | None = None, chars: AnyChar | None = None) -> None:
        hint: SizeHintLike = (0, STRING_MAX_LEN) if size is None else size
        self.size = SizeHint.of(hint, cap=STRING_MAX_LEN)
        self.chars = AnyChar() if chars is None else chars

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[str]]:
        length = self.size.pick(context.rng)
        trees: list[ValueTree[str]] = []
        for _ in range(length):
            outcome = self.chars.new_tree(context)
            if outcome.is_rejected:
                return outcome.map(lambda _tree: StringValueTree(VecValueTree(trees, self.size.min_len)))
            trees.append(outcome.value)
        return context.accept(StringValueTree(VecValueTree(trees, self.size.min_len)))

    def __repr__(self) -> str:
        return f"AnyString({self.size.min_len}..={self.size.max_len}, {self.chars!r})"
