"""Strategy and value tree implementations."""

from proptree.strategies.collections import (
    DequeStrategy,
    DequeValueTree,
    HeapStrategy,
    HeapValueTree,
    MapStrategy,
    MapValueTree,
    SetStrategy,
    SetValueTree,
    VecStrategy,
    VecValueTree,
)
from proptree.strategies.combinators import (
    ConstantValueTree,
    Filtered,
    FilteredValueTree,
    Just,
    Mapped,
    MappedValueTree,
    Recursive,
    different,
)
from proptree.strategies.primitives import (
    AnyBool,
    AnyChar,
    AnyF32,
    AnyF64,
    AnyI8,
    AnyI16,
    AnyI32,
    AnyI64,
    AnyI128,
    AnyIsize,
    AnyString,
    AnyU8,
    AnyU16,
    AnyU32,
    AnyU64,
    AnyU128,
    AnyUsize,
    ArrayStrategy,
    ArrayValueTree,
    BoolValueTree,
    CandidateTree,
    IntegerStrategy,
    OptionStrategy,
    OptionValueTree,
    ResultStrategy,
    ResultValueTree,
    StringValueTree,
    TupleStrategy,
    TupleValueTree,
)

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
    "ConstantValueTree",
    "DequeStrategy",
    "DequeValueTree",
    "Filtered",
    "FilteredValueTree",
    "HeapStrategy",
    "HeapValueTree",
    "IntegerStrategy",
    "Just",
    "MapStrategy",
    "MapValueTree",
    "Mapped",
    "MappedValueTree",
    "OptionStrategy",
    "OptionValueTree",
    "Recursive",
    "ResultStrategy",
    "ResultValueTree",
    "SetStrategy",
    "SetValueTree",
    "StringValueTree",
    "TupleStrategy",
    "TupleValueTree",
    "VecStrategy",
    "VecValueTree",
    "different",
]
