from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Range:
    """
    Half-open interval ``[start, start + length)`` of non-negative integers.

    A range of length 0 is the empty set: it intersects nothing and is
    contained in every range.
    """

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Range start must not be negative, got {self.start}")
        if self.length < 0:
            raise ValueError(f"Range length must not be negative, got {self.length}")

    @classmethod
    def between(cls, start: int, end: int) -> "Range":
        return cls(start, end - start)

    @property
    def end(self) -> int:
        return self.start + self.length

    def contains(self, value: int) -> bool:
        return self.start <= value < self.end

    def contains_range(self, other: "Range") -> bool:
        if not other.length:
            return True
        return self.start <= other.start and other.end <= self.end

    def intersects_with(self, other: "Range") -> bool:
        if not self.length or not other.length:
            return False
        return self.contains(other.start) or other.contains(self.start)

    def intersection(self, other: "Range") -> Optional["Range"]:
        """
        The overlap of both ranges, or ``None`` when they share no value.
        An empty range overlaps nothing, not even itself.
        """
        if not self.intersects_with(other):
            return None
        return Range.between(max(self.start, other.start), min(self.end, other.end))

    def difference(self, other: "Range") -> list["Range"]:
        """
        Parts of this range not covered by ``other``: nothing, one remainder,
        or a left and a right remainder when ``other`` sits strictly inside.
        """
        common = self.intersection(other)
        if common is None:
            return [self] if self.length else []
        remainders = []
        if common.start > self.start:
            remainders.append(Range.between(self.start, common.start))
        if common.end < self.end:
            remainders.append(Range.between(common.end, self.end))
        return remainders

    def decomposition(self, other: "Range") -> list["Range"]:
        """
        Split this range at the boundaries of ``other``.

        The fragments partition this range and come back ordered by start,
        so the part covered by ``other`` (if any) sits between the left and
        right remainders.
        """
        fragments = self.difference(other)
        common = self.intersection(other)
        if common is not None:
            fragments.append(common)
            fragments.sort(key=lambda fragment: fragment.start)
        return fragments

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
