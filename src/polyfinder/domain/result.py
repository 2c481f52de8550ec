"""Search method and search outcome types."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from polyfinder.domain.polygon import Polygon


class SearchMethod(str, Enum):
    """Polygon search algorithm."""

    BRUTE_FORCE = "brute-force"
    GREEDY = "greedy"

    @property
    def label(self) -> str:
        """Human-readable method name."""
        return "Brute Force" if self is SearchMethod.BRUTE_FORCE else "Greedy"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search for one vertex count.

    A search that finds nothing is a valid outcome: ``polygon`` is None and
    ``found`` is False. This is distinct from a found polygon whose area
    happens to be small.

    Attributes:
        method: Algorithm that produced the result
        vertex_count: Requested number of vertices
        polygon: Best polygon found, or None
        duration_ms: Wall time spent in the search
    """

    method: SearchMethod
    vertex_count: int
    polygon: Polygon | None
    duration_ms: float = 0.0

    @property
    def found(self) -> bool:
        """Whether a polygon was found."""
        return self.polygon is not None

    @property
    def area(self) -> float | None:
        """Area of the found polygon, or None when nothing was found."""
        if self.polygon is None:
            return None
        return self.polygon.area()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC and JSON export."""
        return {
            "method": self.method.value,
            "vertex_count": self.vertex_count,
            "polygon": self.polygon.to_dict() if self.polygon is not None else None,
            "area": self.area,
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResult":
        """Deserialize from dictionary."""
        polygon_data = data.get("polygon")
        return cls(
            method=SearchMethod(data["method"]),
            vertex_count=data["vertex_count"],
            polygon=Polygon.from_dict(polygon_data) if polygon_data is not None else None,
            duration_ms=data.get("duration_ms", 0.0),
        )
