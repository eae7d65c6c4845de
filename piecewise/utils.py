from collections.abc import Iterable
from typing import TypeAlias

# (source_start, destination_start, length)
Triple: TypeAlias = tuple[int, int, int]
Triples: TypeAlias = Iterable[Triple]
