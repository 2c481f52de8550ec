"""PolyFinder - Find maximum-area convex polygons in point sets.

PolyFinder searches a set of 2-D points for the convex polygon with a fixed
number of vertices (typically 3, 4 and 5) that encloses the largest area.
Two search methods are available: an exhaustive search over every vertex
subset and a greedy heuristic that grows one polygon per starting point.

Example:
    $ polyfinder search points.txt --method greedy

This prints the largest triangle, quadrilateral and pentagon found among
the points listed in points.txt.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
