"""Greedy incremental search for a large convex polygon.

Each input point in turn seeds a polygon that is grown one vertex at a
time. At every step the point that keeps the polygon convex and gives the
largest area is appended. Choices are never revisited, so the result can be
smaller than the true maximum, but the cost is O(n^2 * k^2) instead of
C(n, k).
"""

import logging
from collections.abc import Sequence

from polyfinder.core.geometry import is_convex, polygon_area
from polyfinder.domain import Point, Polygon

logger = logging.getLogger(__name__)


def grow_polygon(points: Sequence[Point], start_index: int, vertex_count: int) -> list[Point]:
    """Grow a convex vertex chain from one starting point.

    Points are excluded by input index once used, so coincident points at
    different indices remain distinct candidates. Chains with fewer than
    three vertices are accepted unconditionally; the first two appended
    points are therefore chosen purely by area, which is zero until the
    third vertex arrives, and fall back to input order.

    Args:
        points: Candidate vertices
        start_index: Index of the seed vertex in ``points``
        vertex_count: Target chain length

    Returns:
        The grown chain. Shorter than ``vertex_count`` when no remaining
        point could be appended without breaking convexity.
    """
    chain = [points[start_index]]
    used = {start_index}

    while len(chain) < vertex_count:
        best_index: int | None = None
        best_area = -1.0

        for i, point in enumerate(points):
            if i in used:
                continue

            extended = [*chain, point]
            if not is_convex(extended, accept_below_three=True):
                continue

            area = polygon_area(extended)
            if area > best_area:
                best_area = area
                best_index = i

        if best_index is None:
            break

        chain.append(points[best_index])
        used.add(best_index)

    return chain


def find_max_greedy_polygon(points: Sequence[Point], vertex_count: int) -> Polygon | None:
    """Find a large convex polygon by greedy growth from every point.

    Only chains that reach exactly ``vertex_count`` vertices are scored.
    The best chain is replaced only by a strictly larger area, so the
    earliest starting point wins ties.

    Args:
        points: Candidate vertices
        vertex_count: Number of vertices of the polygon to find

    Returns:
        Largest completed polygon, or None if there are fewer points than
        vertices or no starting point produced a convex chain of full size
    """
    if len(points) < vertex_count:
        return None

    max_area = 0.0
    best: list[Point] | None = None
    completed = 0

    for start_index in range(len(points)):
        chain = grow_polygon(points, start_index, vertex_count)
        if len(chain) != vertex_count:
            continue

        completed += 1
        area = polygon_area(chain)
        if area > max_area:
            max_area = area
            best = chain

    logger.debug(
        "Greedy search finished: k=%d, starts=%d, completed=%d, best_area=%.2f",
        vertex_count, len(points), completed, max_area
    )

    if best is None:
        return None
    return Polygon(vertices=tuple(best))
