# src/proptree/strategies/collections/maps.py
"""Map strategy: unique keys, paired values, row count preserved.

Shrinking runs three sequential phases:

1. length: remove contiguous runs of entries (key and value together)
2. keys: shrink every key in turn, rejecting candidates that collide with
   another key (undone immediately via complicate on that key)
3. values: shrink every value in turn

No phase ever drops an entry because of a collision, so a map built with a
minimum length never loses rows to deduplication.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from proptree.contracts.outcome import Outcome
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.core.limits import MAX_STRATEGY_ATTEMPTS
from proptree.core.size_hint import SizeHint, SizeHintLike
from proptree.strategies.collections.plan import (
    DropPlan,
    LengthStage,
    RemovedChunk,
    check_length_floor,
    check_unique,
)

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class KeyStage:
    index: int


@dataclass(frozen=True, slots=True)
class ValueStage:
    index: int


@dataclass(frozen=True, slots=True)
class KeyChanged:
    index: int


@dataclass(frozen=True, slots=True)
class ValueChanged:
    index: int


Entry = tuple[ValueTree[K], ValueTree[V]]


class MapValueTree(ValueTree[dict[K, V]], Generic[K, V]):
    """Shrinks a dict built from parallel key/value trees.

    Args:
        entries: (key tree, value tree) pairs with pairwise-distinct keys
        min_len: Length floor for phase 1
        ordered: Emit dicts in sorted key order instead of entry order
    """

    KIND = "map"

    def __init__(self, entries: list[Entry[K, V]], min_len: int, *, ordered: bool = False) -> None:
        self._entries = list(entries)
        self._keys: list[K] = [key.current() for key, _ in self._entries]
        self._values: list[V] = [value.current() for _, value in self._entries]
        self._ordered = ordered
        self._plan = DropPlan(len(self._entries), min_len)
        self._stage: LengthStage | KeyStage | ValueStage = LengthStage(0, 0) if len(self._plan) else KeyStage(0)
        self._history: list[RemovedChunk[Entry[K, V]] | KeyChanged | ValueChanged] = []
        self._current = self._build()

    @property
    def min_len(self) -> int:
        return self._plan.min_len

    def _build(self) -> dict[K, V]:
        pairs = zip(self._keys, self._values, strict=True)
        if self._ordered:
            return dict(sorted(pairs, key=lambda pair: pair[0]))  # type: ignore[arg-type,return-value]
        return dict(pairs)

    def _sync(self) -> None:
        check_unique(self.KIND, self._keys)
        self._current = self._build()

    def current(self) -> dict[K, V]:
        return self._current

    def _key_is_duplicate(self, index: int, candidate: K) -> bool:
        return any(i != index and key == candidate for i, key in enumerate(self._keys))

    def _seek_length_from(self, chunk_index: int, offset: int) -> LengthStage | None:
        stage = self._plan.seek(chunk_index, offset, len(self._entries))
        self._stage = stage if stage is not None else KeyStage(0)
        return stage

    def simplify(self) -> bool:
        while True:
            stage = self._stage
            if isinstance(stage, LengthStage):
                found = self._seek_length_from(stage.chunk_index, stage.offset)
                if found is None:
                    continue
                start = found.offset
                stop = start + self._plan.size_at(found)
                removed_entries = self._entries[start:stop]
                removed_pairs = list(zip(self._keys[start:stop], self._values[start:stop], strict=True))
                del self._entries[start:stop]
                del self._keys[start:stop]
                del self._values[start:stop]
                check_length_floor(self.KIND, len(self._entries), self.min_len)
                self._sync()
                self._history.append(RemovedChunk(start, found.chunk_index, removed_entries, removed_pairs))
                return True

            if isinstance(stage, KeyStage):
                index = stage.index
                if index >= len(self._entries):
                    self._stage = ValueStage(0)
                    continue
                key_tree = self._entries[index][0]
                if not key_tree.simplify():
                    self._stage = KeyStage(index + 1)
                    continue
                candidate = key_tree.current()
                if self._key_is_duplicate(index, candidate):
                    if not key_tree.complicate():
                        self._stage = KeyStage(index + 1)
                    continue
                self._keys[index] = candidate
                self._sync()
                self._history.append(KeyChanged(index))
                return True

            index = stage.index
            if index >= len(self._entries):
                return False
            value_tree = self._entries[index][1]
            if not value_tree.simplify():
                self._stage = ValueStage(index + 1)
                continue
            self._values[index] = value_tree.current()
            self._sync()
            self._history.append(ValueChanged(index))
            return True

    def complicate(self) -> bool:
        if not self._history:
            return False
        entry = self._history.pop()

        if isinstance(entry, RemovedChunk):
            keys = [key for key, _ in entry.values]
            values = [value for _, value in entry.values]
            self._entries[entry.index : entry.index] = entry.trees
            self._keys[entry.index : entry.index] = keys
            self._values[entry.index : entry.index] = values
            self._sync()
            if self._seek_length_from(entry.chunk_index, entry.index + 1) is not None:
                return True
            return bool(self._entries)

        index = entry.index
        if isinstance(entry, KeyChanged):
            key_tree = self._entries[index][0]
            more = key_tree.complicate()
            self._keys[index] = key_tree.current()
            self._sync()
            if more:
                self._history.append(KeyChanged(index))
                return True
            if index + 1 < len(self._entries):
                self._stage = KeyStage(index + 1)
                return True
            self._stage = ValueStage(0)
            return bool(self._entries)

        value_tree = self._entries[index][1]
        more = value_tree.complicate()
        self._values[index] = value_tree.current()
        self._sync()
        if more:
            self._history.append(ValueChanged(index))
            return True
        if index + 1 < len(self._entries):
            self._stage = ValueStage(index + 1)
            return True
        return False


class MapStrategy(Strategy[dict[K, V]], Generic[K, V]):
    """Dicts with distinct keys; key values must be hashable.

    Args:
        key: Strategy for keys
        value: Strategy for values
        size: Size hint for the target number of entries
        ordered: Emit keys in sorted order (keys must be mutually orderable)
    """

    def __init__(
        self,
        key: Strategy[K],
        value: Strategy[V],
        size: SizeHintLike = ...,
        *,
        ordered: bool = False,
    ) -> None:
        self.key = key
        self.value = value
        self.size = SizeHint.of(size)
        self.ordered = ordered

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[dict[K, V]]]:
        target = self.size.pick(context.rng)
        min_len = self.size.min_len
        entries: list[Entry[K, V]] = []
        seen: set[K] = set()
        attempts_remaining = MAX_STRATEGY_ATTEMPTS * max(target, 1)

        def partial(_tree: object) -> MapValueTree[K, V]:
            return MapValueTree(entries, min_len, ordered=self.ordered)

        while len(entries) < target and attempts_remaining > 0:
            attempts_remaining -= 1

            key_outcome = self.key.new_tree(context)
            if key_outcome.is_rejected:
                return key_outcome.map(partial)
            candidate = key_outcome.value.current()
            if candidate in seen:
                continue

            value_outcome = self.value.new_tree(context)
            if value_outcome.is_rejected:
                return value_outcome.map(partial)

            seen.add(candidate)
            entries.append((key_outcome.value, value_outcome.value))

        return context.accept(MapValueTree(entries, min_len, ordered=self.ordered))
