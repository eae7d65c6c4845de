from .chain import MapChain
from .map import Map, PreconditionError, RangeMap
from .solver import minimal_output, minimal_point_output

__all__ = [
    "Map",
    "MapChain",
    "PreconditionError",
    "RangeMap",
    "minimal_output",
    "minimal_point_output",
]
