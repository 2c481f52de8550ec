"""Exhaustive search for the maximum-area convex polygon.

Every k-subset of the input is tried, so the result is optimal among
polygons whose vertex order follows the input order. The cost is
C(n, k) convexity checks, which makes this the reference the greedy
search is measured against rather than a method for large inputs.
"""

import logging
from collections.abc import Sequence

from polyfinder.core.combinations import iter_index_combinations
from polyfinder.core.geometry import is_convex, polygon_area
from polyfinder.domain import Point, Polygon

logger = logging.getLogger(__name__)


def find_max_polygon(points: Sequence[Point], vertex_count: int) -> Polygon | None:
    """Find the largest convex polygon over all vertex subsets.

    Subsets are visited in lexicographic index order and keep the input's
    relative order as their vertex order. Subsets that are not convex are
    skipped. A subset replaces the current best only when its area is
    strictly larger, so the earliest subset wins ties and zero-area subsets
    are never returned.

    Args:
        points: Candidate vertices
        vertex_count: Number of vertices of the polygon to find

    Returns:
        Largest convex polygon with exactly ``vertex_count`` vertices, or
        None if there are fewer points than vertices or no subset is convex
    """
    if len(points) < vertex_count:
        return None

    max_area = 0.0
    best: list[Point] | None = None
    examined = 0
    convex = 0

    for indices in iter_index_combinations(len(points), vertex_count):
        examined += 1
        candidate = [points[i] for i in indices]
        if not is_convex(candidate, accept_below_three=False):
            continue

        convex += 1
        area = polygon_area(candidate)
        if area > max_area:
            max_area = area
            best = candidate

    logger.debug(
        "Exhaustive search finished: k=%d, subsets=%d, convex=%d, best_area=%.2f",
        vertex_count, examined, convex, max_area
    )

    if best is None:
        return None
    return Polygon(vertices=tuple(best))
