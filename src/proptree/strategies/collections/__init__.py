"""Variable-length collection strategies sharing the drop-plan protocol."""

from proptree.strategies.collections.maps import MapStrategy, MapValueTree
from proptree.strategies.collections.plan import DropPlan, build_drop_plan
from proptree.strategies.collections.sets import SetStrategy, SetValueTree
from proptree.strategies.collections.vecs import (
    DequeStrategy,
    DequeValueTree,
    HeapStrategy,
    HeapValueTree,
    VecStrategy,
    VecValueTree,
)

__all__ = [
    "DequeStrategy",
    "DequeValueTree",
    "DropPlan",
    "HeapStrategy",
    "HeapValueTree",
    "MapStrategy",
    "MapValueTree",
    "SetStrategy",
    "SetValueTree",
    "VecStrategy",
    "VecValueTree",
    "build_drop_plan",
]
