from .range import Range

__all__ = [
    "Range",
]
