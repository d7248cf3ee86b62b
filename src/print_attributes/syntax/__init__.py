from .set_of_integers import (
    SetOfIntegers,
    canonical_ranges,
    parse_ranges,
)

__all__ = [
    "SetOfIntegers",
    "canonical_ranges",
    "parse_ranges",
]
