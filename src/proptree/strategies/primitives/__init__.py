"""Leaf and fixed-shape strategies."""

from proptree.strategies.primitives.arrays import ArrayStrategy, ArrayValueTree
from proptree.strategies.primitives.booleans import AnyBool, BoolValueTree
from proptree.strategies.primitives.candidates import CandidateTree
from proptree.strategies.primitives.chars import AnyChar, CharRange
from proptree.strategies.primitives.floats import AnyF32, AnyF64, FloatStrategy
from proptree.strategies.primitives.integers import (
    AnyI8,
    AnyI16,
    AnyI32,
    AnyI64,
    AnyI128,
    AnyIsize,
    AnyU8,
    AnyU16,
    AnyU32,
    AnyU64,
    AnyU128,
    AnyUsize,
    IntegerStrategy,
)
from proptree.strategies.primitives.options import OptionStrategy, OptionValueTree
from proptree.strategies.primitives.results import ResultStrategy, ResultValueTree
from proptree.strategies.primitives.strings import AnyString, StringValueTree
from proptree.strategies.primitives.tuples import FixedValueTree, TupleStrategy, TupleValueTree

__all__ = [
    "AnyBool",
    "AnyChar",
    "AnyF32",
    "AnyF64",
    "AnyI8",
    "AnyI16",
    "AnyI32",
    "AnyI64",
    "AnyI128",
    "AnyIsize",
    "AnyString",
    "AnyU8",
    "AnyU16",
    "AnyU32",
    "AnyU64",
    "AnyU128",
    "AnyUsize",
    "ArrayStrategy",
    "ArrayValueTree",
    "BoolValueTree",
    "CandidateTree",
    "CharRange",
    "FixedValueTree",
    "FloatStrategy",
    "IntegerStrategy",
    "OptionStrategy",
    "OptionValueTree",
    "ResultStrategy",
    "ResultValueTree",
    "StringValueTree",
    "TupleStrategy",
    "TupleValueTree",
]
