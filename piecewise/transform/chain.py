from collections.abc import Iterable, Iterator
from functools import reduce

from piecewise.model import Range

from .map import Map


class MapChain:
    """
    Stages applied in order, ``maps[0]`` first. The composed function is
    total: every stage falls back to identity for values it does not cover.
    """

    def __init__(self, maps: Iterable[Map] = ()) -> None:
        self.maps = tuple(maps)

    def slice(self, from_: int = 0, to: int | None = None) -> "MapChain":
        if to is None:
            to = len(self.maps)
        return MapChain(self.maps[from_:to])

    @property
    def final_stage(self) -> Map:
        return self.maps[-1] if self.maps else Map.empty

    @property
    def bound(self) -> int:
        return max((map.bound for map in self.maps), default=0)

    def evaluate(self, point: int) -> int:
        return reduce(lambda value, map: map.forward(value), self.maps, point)

    def image(self, ranges: Iterable[Range]) -> list[Range]:
        return reduce(
            lambda fragments, map: [
                piece for fragment in fragments for piece in map.image(fragment)
            ],
            self.maps,
            list(ranges),
        )

    def invert(self, range_: Range) -> list[Range]:
        """
        Domain ranges that evaluate into ``range_``, taking each stage's
        reverse rule: a value inside a destination comes from that entry's
        source only, a value outside every destination comes from itself.

        A value that lies inside some destination but outside every source
        also reaches itself by identity. That preimage is not returned, so
        the result is a full preimage only when every stage's sources and
        destinations cover the same values.
        """
        return reduce(
            lambda fragments, map: [
                piece for fragment in fragments for piece in map.backward(fragment)
            ],
            reversed(self.maps),
            [range_],
        )

    def __len__(self) -> int:
        return len(self.maps)

    def __iter__(self) -> Iterator[Map]:
        return iter(self.maps)

    def __str__(self) -> str:
        return " | ".join(str(map) for map in self.maps)
