# src/proptree/arbitrary.py
"""Unstructured fallback generation: one random value per type, no shrinking.

Used for harness parameters that carry only a type annotation. Every
generator here is total (never rejects) and bounded: strings stop at
STRING_MAX_LEN characters, collections at COLLECTION_MAX_LEN elements, and
unordered collections give up after MAX_STRATEGY_ATTEMPTS insertions that
added nothing new.

Supported out of the box:
    bool, int (64-bit signed), float (finite doubles), str, bytes, None,
    list[T], tuple[...], dict[K, V], set[T], frozenset[T], deque[T],
    Optional/Union, Ok[T], Err[E]

Anything else needs either register_arbitrary() or an ``__arbitrary__(rng)``
classmethod on the type itself.
"""

from __future__ import annotations

import math
import random
import struct
import types
import typing
from collections import deque
from collections.abc import Callable
from typing import Any, TypeVar, overload

from proptree.contracts.errors import UnsupportedTypeError
from proptree.contracts.outcome import Outcome
from proptree.contracts.result import Err, Ok
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.context import GenerationContext
from proptree.core.limits import COLLECTION_MAX_LEN, MAX_STRATEGY_ATTEMPTS, STRING_MAX_LEN
from proptree.strategies.combinators import ConstantValueTree
from proptree.strategies.primitives.chars import MAX_CODEPOINT, nth_scalar, scalar_count

T = TypeVar("T")

Generator = Callable[[random.Random], Any]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_REGISTRY: dict[type, Generator] = {}


@overload
def register_arbitrary(tp: type[T]) -> Callable[[Callable[[random.Random], T]], Callable[[random.Random], T]]: ...


@overload
def register_arbitrary(tp: type[T], generator: Callable[[random.Random], T]) -> Callable[[random.Random], T]: ...


def register_arbitrary(tp: type[T], generator: Callable[[random.Random], T] | None = None) -> Any:
    """Register the unstructured generator for a type.

    Usable directly or as a decorator:

        @register_arbitrary(Point)
        def _point(rng: random.Random) -> Point:
            return Point(rng.random(), rng.random())

    A registration replaces any previous one for the same type.
    """
    if generator is not None:
        _REGISTRY[tp] = generator
        return generator

    def decorator(fn: Callable[[random.Random], T]) -> Callable[[random.Random], T]:
        _REGISTRY[tp] = fn
        return fn

    return decorator


def unregister_arbitrary(tp: type) -> None:
    _REGISTRY.pop(tp, None)


def _any_float(rng: random.Random) -> float:
    # Random bit patterns cover the full double range; resample non-finite ones
    while True:
        value: float = struct.unpack("<d", rng.getrandbits(64).to_bytes(8, "little"))[0]
        if math.isfinite(value):
            return 0.0 if value == 0.0 else value


def _any_char(rng: random.Random) -> str:
    return chr(nth_scalar(0, rng.randrange(scalar_count(0, MAX_CODEPOINT))))


def _any_str(rng: random.Random, min_len: int = 0) -> str:
    length = rng.randint(min_len, STRING_MAX_LEN)
    return "".join(_any_char(rng) for _ in range(length))


def _any_bytes(rng: random.Random, min_len: int = 0) -> bytes:
    length = rng.randint(min_len, COLLECTION_MAX_LEN)
    return bytes(rng.getrandbits(8) for _ in range(length))


def _fill_unique(
    rng: random.Random,
    min_len: int,
    draw: Callable[[], Any],
    add: Callable[[Any], bool],
) -> None:
    """Call draw/add until the drawn length is reached or attempts run out.

    add() returns True when the drawn value was new.
    """
    target = rng.randint(min_len, COLLECTION_MAX_LEN)
    added = 0
    wasted = 0
    while added < target and wasted < MAX_STRATEGY_ATTEMPTS:
        if add(draw()):
            added += 1
        else:
            wasted += 1


def _generate(tp: Any, rng: random.Random, min_len: int) -> Any:
    if tp is None or tp is type(None):
        return None
    if tp is Any:
        raise UnsupportedTypeError(tp)

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is typing.Union or origin is types.UnionType:
        return _generate(rng.choice(args), rng, min_len)
    if origin is typing.Annotated:
        return _generate(args[0], rng, min_len)

    if origin is None:
        if tp in _REGISTRY:
            return _REGISTRY[tp](rng)
        hook = getattr(tp, "__arbitrary__", None)
        if hook is not None:
            return hook(rng)
        # bool before int: bool is an int subclass
        if tp is bool:
            return rng.random() < 0.5
        if tp is int:
            return rng.randint(_INT64_MIN, _INT64_MAX)
        if tp is float:
            return _any_float(rng)
        if tp is str:
            return _any_str(rng, min_len)
        if tp is bytes:
            return _any_bytes(rng, min_len)
        raise UnsupportedTypeError(tp)

    if origin is list:
        (element,) = args
        return [arbitrary(element, rng) for _ in range(rng.randint(min_len, COLLECTION_MAX_LEN))]
    if origin is deque:
        (element,) = args
        return deque(arbitrary(element, rng) for _ in range(rng.randint(min_len, COLLECTION_MAX_LEN)))
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(arbitrary(args[0], rng) for _ in range(rng.randint(min_len, COLLECTION_MAX_LEN)))
        return tuple(arbitrary(arg, rng) for arg in args)
    if origin is set or origin is frozenset:
        (element,) = args
        out: set[Any] = set()

        def add_element(value: Any) -> bool:
            if value in out:
                return False
            out.add(value)
            return True

        _fill_unique(rng, min_len, lambda: arbitrary(element, rng), add_element)
        return out if origin is set else frozenset(out)
    if origin is dict:
        key, value = args
        mapping: dict[Any, Any] = {}

        def add_entry(candidate: Any) -> bool:
            if candidate in mapping:
                return False
            mapping[candidate] = arbitrary(value, rng)
            return True

        _fill_unique(rng, min_len, lambda: arbitrary(key, rng), add_entry)
        return mapping
    if origin is Ok:
        return Ok(arbitrary(args[0], rng))
    if origin is Err:
        return Err(arbitrary(args[0], rng))

    raise UnsupportedTypeError(tp)


def arbitrary(tp: Any, rng: random.Random) -> Any:
    """Draw one unstructured value of type tp.

    Raises:
        UnsupportedTypeError: If no generator is known for tp
    """
    return _generate(tp, rng, 0)


def non_empty(tp: Any, rng: random.Random) -> Any:
    """Like arbitrary(), but sized types (str, bytes, variadic collections)
    get at least one element.

    Unordered collections over a one-value domain still end up with that one
    element, so the result is never empty. A Union passes the floor to the
    member it picks; None stays None.
    """
    return _generate(tp, rng, 1)


def from_arbitrary(context: GenerationContext, tp: Any) -> Outcome[Any]:
    """Accepted Outcome holding a raw unstructured value."""
    return context.accept(arbitrary(tp, context.rng))


class ArbitraryStrategy(Strategy[Any]):
    """Adapts the unstructured path to the Strategy interface.

    The resulting trees never shrink.
    """

    def __init__(self, tp: Any) -> None:
        self.tp = tp

    def new_tree(self, context: GenerationContext) -> Outcome[ValueTree[Any]]:
        return from_arbitrary(context, self.tp).map(ConstantValueTree)

    def __repr__(self) -> str:
        return f"ArbitraryStrategy({self.tp!r})"
