"""Core geometric value types.

This module defines the value types every search works with:
- Point: An immutable 2D coordinate
- Polygon: An immutable closed vertex cycle with area queries
- signed_area: Shoelace formula over a plain point sequence
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Equality is by coordinate pair.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pair: Sequence[float]) -> "Point":
        """Create a point from an (x, y) pair."""
        x, y = pair
        return cls(float(x), float(y))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a vertex cycle using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the closed boundary, in walk order

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        area += a.x * b.y - b.x * a.y

    return area / 2.0


@dataclass(frozen=True)
class Polygon:
    """A closed polygon defined by an ordered vertex cycle.

    Vertex i connects to vertex (i + 1) mod n. The order is the boundary
    walk used for both area and convexity, so reordering the same points
    can change whether the polygon is convex.

    Attributes:
        vertices: Vertices in boundary order
    """

    vertices: tuple[Point, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.vertices, tuple):
            object.__setattr__(self, "vertices", tuple(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    def signed_area(self) -> float:
        """Calculate signed area (positive when counter-clockwise)."""
        return signed_area(self.vertices)

    def area(self) -> float:
        """Calculate enclosed area.

        Returns:
            Absolute shoelace area, 0.0 for fewer than 3 vertices
        """
        return abs(self.signed_area())

    def to_tuples(self) -> list[tuple[float, float]]:
        """Convert vertices to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.vertices]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with the vertex list
        """
        return {"vertices": [p.to_dict() for p in self.vertices]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(vertices=tuple(Point.from_dict(p) for p in data["vertices"]))
