from .model import Range
from .transform import (
    Map,
    MapChain,
    PreconditionError,
    RangeMap,
    minimal_output,
    minimal_point_output,
)

__all__ = [
    "Map",
    "MapChain",
    "PreconditionError",
    "Range",
    "RangeMap",
    "minimal_output",
    "minimal_point_output",
]
