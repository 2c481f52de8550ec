"""Domain models for polyfinder.

This module contains the value types shared by the search algorithms, the
I/O layer and the CLI. All models are:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (parallel searches)

Key classes:
- Point: A 2D coordinate
- Polygon: An ordered closed vertex cycle
- SearchMethod: Exhaustive or greedy search
- SearchResult: Outcome of one search, found or not
"""

from polyfinder.domain.polygon import Point, Polygon, signed_area
from polyfinder.domain.result import SearchMethod, SearchResult

__all__: list[str] = [
    # Enums
    "SearchMethod",
    # Core types
    "Point",
    "Polygon",
    "SearchResult",
    # Functions
    "signed_area",
]
