from collections.abc import Iterator, Sequence

from piecewise.model import Range
from piecewise.transform import Map, MapChain
from piecewise.utils import Triple


class AlmanacError(ValueError):
    pass


def _parse_int(item: str, line: str) -> int:
    if not item.isdigit():
        raise AlmanacError(f"Expected a non-negative integer, got {item!r} in {line!r}")
    return int(item)


def parse_seeds(line: str) -> list[int]:
    label, sep, values = line.partition(":")
    if not sep or label.strip() != "seeds":
        raise AlmanacError(f"Expected a seed list, got {line!r}")
    return [_parse_int(item, line) for item in values.split()]


def parse_triple(line: str) -> Triple:
    items = line.split()
    if len(items) != 3:
        raise AlmanacError(f"Expected 'destination source length', got {line!r}")
    destination, source, length = (_parse_int(item, line) for item in items)
    return (source, destination, length)


def _parse_map(lines: Iterator[str]) -> Map | None:
    if next(lines, None) is None:
        return None
    triples = []
    for line in lines:
        if not line.strip():
            break
        triples.append(parse_triple(line))
    if not triples:
        return None
    return Map.from_triples(triples)


def parse_almanac(text: str) -> tuple[list[int], MapChain]:
    lines = iter(text.splitlines())
    first = next(lines, None)
    if first is None:
        raise AlmanacError("Empty almanac")
    seeds = parse_seeds(first)
    separator = next(lines, "")
    if separator.strip():
        raise AlmanacError(f"Seed list not followed by an empty line: {separator!r}")

    maps = []
    while (map := _parse_map(lines)) is not None:
        maps.append(map)
    return seeds, MapChain(maps)


def pair_seeds(values: Sequence[int]) -> list[Range]:
    if len(values) % 2:
        raise AlmanacError(
            f"Seed ranges need an even number of values, got {len(values)}"
        )
    return [Range(start, length) for start, length in zip(values[::2], values[1::2])]
