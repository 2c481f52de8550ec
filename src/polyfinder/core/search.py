"""Public entry points for polygon search.

Both searches accept ``Point`` instances or plain ``(x, y)`` pairs and
return the found ``Polygon`` or None. None is an ordinary outcome (too few
points, or no convex polygon of the requested size) and never an error.
"""

from collections.abc import Callable, Sequence

from polyfinder.core.exhaustive import find_max_polygon
from polyfinder.core.greedy import find_max_greedy_polygon
from polyfinder.domain import Point, Polygon, SearchMethod
from polyfinder.exceptions import DuplicateVertexCountError, InvalidVertexCountError

PointLike = Point | Sequence[float]

MIN_VERTEX_COUNT = 3

_SEARCHES: dict[SearchMethod, Callable[[Sequence[Point], int], Polygon | None]] = {
    SearchMethod.BRUTE_FORCE: find_max_polygon,
    SearchMethod.GREEDY: find_max_greedy_polygon,
}


def as_points(points: Sequence[PointLike]) -> list[Point]:
    """Normalize a sequence of points or (x, y) pairs to Points.

    Args:
        points: Point instances or two-element coordinate sequences

    Returns:
        New list of Points in the same order
    """
    return [p if isinstance(p, Point) else Point.from_tuple(p) for p in points]


def validate_vertex_count(vertex_count: int) -> None:
    """Check that a vertex count can describe a polygon.

    Raises:
        InvalidVertexCountError: If vertex_count is below 3
    """
    if vertex_count < MIN_VERTEX_COUNT:
        raise InvalidVertexCountError(vertex_count)


def validate_vertex_counts(vertex_counts: Sequence[int]) -> None:
    """Check a list of vertex counts for one search run.

    Raises:
        InvalidVertexCountError: If any count is below 3
        DuplicateVertexCountError: If a count appears more than once
    """
    seen: set[int] = set()
    for vertex_count in vertex_counts:
        validate_vertex_count(vertex_count)
        if vertex_count in seen:
            raise DuplicateVertexCountError(vertex_count)
        seen.add(vertex_count)


def exhaustive_search(points: Sequence[PointLike], vertex_count: int) -> Polygon | None:
    """Find the maximum-area convex polygon by trying every vertex subset.

    Args:
        points: Candidate vertices
        vertex_count: Number of polygon vertices (>= 3)

    Returns:
        Optimal polygon, or None if none exists

    Raises:
        InvalidVertexCountError: If vertex_count is below 3
    """
    validate_vertex_count(vertex_count)
    return find_max_polygon(as_points(points), vertex_count)


def greedy_search(points: Sequence[PointLike], vertex_count: int) -> Polygon | None:
    """Find a large convex polygon with the greedy growth heuristic.

    Args:
        points: Candidate vertices
        vertex_count: Number of polygon vertices (>= 3)

    Returns:
        Best greedy polygon, or None if none was completed

    Raises:
        InvalidVertexCountError: If vertex_count is below 3
    """
    validate_vertex_count(vertex_count)
    return find_max_greedy_polygon(as_points(points), vertex_count)


def run_search(
    points: Sequence[PointLike],
    vertex_count: int,
    method: SearchMethod,
) -> Polygon | None:
    """Run the search selected by ``method``."""
    validate_vertex_count(vertex_count)
    return _SEARCHES[SearchMethod(method)](as_points(points), vertex_count)
