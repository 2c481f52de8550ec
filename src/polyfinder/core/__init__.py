"""Core search algorithms for polyfinder.

This module contains:

- Geometry primitives (cross product, shoelace area, convexity test)
- Lexicographic k-combination enumeration
- Exhaustive search over every vertex subset
- Greedy incremental search from every starting point
- Orchestration of several searches with timing and statistics

All search functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- exhaustive_search: Optimal convex polygon by brute force
- greedy_search: Heuristic convex polygon by greedy growth
- run_search: Dispatch on SearchMethod
- is_convex: Convexity test with an explicit policy for short sequences

Key classes:
- SearchProcessor: Runs a method for several vertex counts
- SearchReport: Results and statistics of a run
"""

from polyfinder.core.combinations import iter_index_combinations
from polyfinder.core.exhaustive import find_max_polygon
from polyfinder.core.geometry import cross, is_convex, polygon_area
from polyfinder.core.greedy import find_max_greedy_polygon, grow_polygon
from polyfinder.core.processor import SearchProcessor, SearchReport, process_search
from polyfinder.core.search import (
    as_points,
    exhaustive_search,
    greedy_search,
    run_search,
    validate_vertex_count,
    validate_vertex_counts,
)

__all__ = [
    # Processor classes
    "SearchProcessor",
    "SearchReport",
    # Geometry functions
    "cross",
    "is_convex",
    "polygon_area",
    # Enumeration
    "iter_index_combinations",
    # Search algorithms
    "find_max_greedy_polygon",
    "find_max_polygon",
    "grow_polygon",
    # Search entry points
    "as_points",
    "exhaustive_search",
    "greedy_search",
    "process_search",
    "run_search",
    "validate_vertex_count",
    "validate_vertex_counts",
]
