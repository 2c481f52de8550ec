"""Geometric predicates for polygon search.

This module provides the primitives both search algorithms are built on:
- Turn direction of a vertex triple (2D cross product)
- Signed and absolute area of a vertex cycle (shoelace formula)
- Convexity classification of a vertex cycle

All functions are pure, stateless, and safe for use in worker processes.
"""

from collections.abc import Sequence

from polyfinder.domain import Point, signed_area


def cross(a: Point, b: Point, c: Point) -> float:
    """Calculate the 2D cross product of (b - a) and (c - a).

    Positive for a counter-clockwise turn a -> b -> c, negative for a
    clockwise turn, zero when the three points are collinear.

    Args:
        a: Origin of both vectors
        b: End of the first vector
        c: End of the second vector

    Returns:
        Signed cross product

    Examples:
        >>> cross(Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0))
        1.0
        >>> cross(Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0))
        0.0
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def polygon_area(points: Sequence[Point]) -> float:
    """Calculate the enclosed area of a vertex cycle.

    Args:
        points: Points forming the closed boundary, in walk order

    Returns:
        Absolute shoelace area, 0.0 for fewer than 3 points
    """
    return abs(signed_area(points))


def is_convex(points: Sequence[Point], *, accept_below_three: bool) -> bool:
    """Determine whether a vertex cycle turns consistently in one direction.

    For every cyclic triple (a, b, c) the sign of cross(a, b, c) is recorded.
    The cycle is non-convex as soon as both a strictly negative and a strictly
    positive turn have been seen. Collinear triples (zero cross product) do
    not count towards either sign.

    Sequences with fewer than three points have no turns to test. The
    exhaustive search rejects them and the greedy search accepts them while
    a polygon is still being grown, so the caller chooses the outcome.

    Args:
        points: Vertices in boundary order
        accept_below_three: Result returned for fewer than three points

    Returns:
        True if the cycle is convex, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> is_convex(square, accept_below_three=False)
        True
        >>> bowtie = [Point(0.0, 0.0), Point(2.0, 2.0), Point(2.0, 0.0), Point(0.0, 2.0)]
        >>> is_convex(bowtie, accept_below_three=False)
        False
    """
    n = len(points)
    if n < 3:
        return accept_below_three

    got_negative = False
    got_positive = False

    for i in range(n):
        turn = cross(points[i], points[(i + 1) % n], points[(i + 2) % n])
        if turn < 0:
            got_negative = True
        elif turn > 0:
            got_positive = True

        if got_negative and got_positive:
            return False

    return True
