from bisect import bisect_right
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from piecewise.model import Range
from piecewise.utils import Triples


class PreconditionError(AssertionError):
    """A value or range was handed to an entry that does not cover it."""


@dataclass(frozen=True)
class RangeMap:
    """
    One ``destination source length`` rule: the order-preserving bijection
    that sends ``source.start + k`` to ``destination.start + k``.
    """

    source: Range
    destination: Range

    def __post_init__(self) -> None:
        if self.source.length != self.destination.length:
            raise ValueError(
                f"Source {self.source} and destination {self.destination} "
                "differ in length"
            )

    @classmethod
    def create(
        cls, source_start: int, destination_start: int, length: int
    ) -> "RangeMap":
        return cls(Range(source_start, length), Range(destination_start, length))

    @property
    def offset(self) -> int:
        return self.destination.start - self.source.start

    def forward(self, value: int) -> int:
        if not self.source.contains(value):
            raise PreconditionError(f"Value {value} out of range for {self}")
        return value + self.offset

    def image(self, subrange: Range) -> Range:
        if not self.source.contains_range(subrange):
            raise PreconditionError(f"Range {subrange} out of range for {self}")
        if not subrange.length:
            return Range(self.destination.start, 0)
        return Range(subrange.start + self.offset, subrange.length)

    def backward(self, subrange: Range) -> Range:
        if not self.destination.contains_range(subrange):
            raise PreconditionError(f"Range {subrange} out of range for {self}")
        if not subrange.length:
            return Range(self.source.start, 0)
        return Range(subrange.start - self.offset, subrange.length)

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"


class Map:
    """
    One stage of a chain. Values outside every entry's source pass through
    unchanged, in both directions.
    """

    empty: ClassVar["Map"]

    def __init__(self, entries: Iterable[RangeMap]) -> None:
        # empty entries cover nothing in either direction
        self.entries = tuple(
            sorted(
                (entry for entry in entries if entry.source.length),
                key=lambda entry: entry.source.start,
            )
        )
        self.by_destination = tuple(
            sorted(self.entries, key=lambda entry: entry.destination.start)
        )
        self._starts = [entry.source.start for entry in self.entries]

    @classmethod
    def from_triples(cls, triples: Triples) -> "Map":
        return cls(RangeMap.create(*triple) for triple in triples)

    def forward(self, value: int) -> int:
        index = bisect_right(self._starts, value) - 1
        if index >= 0 and self.entries[index].source.contains(value):
            return self.entries[index].forward(value)
        return value

    def image(self, range_: Range) -> list[Range]:
        """
        Forward image of ``range_``, split at source boundaries. Covered parts
        are shifted by their entry, the rest passes through unchanged.
        """
        mapped: list[Range] = []
        tail: Range | None = range_ if range_.length else None
        for entry in self.entries:
            if tail is None or entry.source.start >= tail.end:
                break
            if not entry.source.intersects_with(tail):
                continue
            remainder = None
            for fragment in tail.decomposition(entry.source):
                if entry.source.contains_range(fragment):
                    mapped.append(entry.image(fragment))
                elif fragment.start < entry.source.start:
                    mapped.append(fragment)
                else:
                    remainder = fragment
            tail = remainder
        if tail is not None:
            mapped.append(tail)
        return mapped

    def backward(self, range_: Range) -> list[Range]:
        resolved: list[Range] = []
        tail: Range | None = range_ if range_.length else None
        for entry in self.by_destination:
            if tail is None or entry.destination.start >= tail.end:
                break
            if not entry.destination.intersects_with(tail):
                continue
            remainder = None
            for fragment in tail.decomposition(entry.destination):
                if entry.destination.contains_range(fragment):
                    resolved.append(entry.backward(fragment))
                elif fragment.start < entry.destination.start:
                    resolved.append(fragment)
                else:
                    remainder = fragment
            tail = remainder
        if tail is not None:
            resolved.append(tail)
        return resolved

    def destinations(self) -> list[Range]:
        return [entry.destination for entry in self.by_destination]

    @property
    def bound(self) -> int:
        return max(
            (max(entry.source.end, entry.destination.end) for entry in self.entries),
            default=0,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "{" + ", ".join(str(entry) for entry in self.entries) + "}"


Map.empty = Map([])
