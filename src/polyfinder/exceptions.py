"""Exception hierarchy for PolyFinder."""


class PolyFinderError(Exception):
    """Base exception for all PolyFinder errors."""

    pass


class PointsError(PolyFinderError):
    """Errors related to loading or saving point sets."""

    pass


class PointsLoadError(PointsError):
    """Error loading a points file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load points '{path}': {reason}")


class PointsFormatError(PointsError):
    """Points file contains no recognizable point entries."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid points file '{path}': {details}")


class PointsSaveError(PointsError):
    """Error saving points or a search report."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")


class SearchError(PolyFinderError):
    """Errors related to setting up a polygon search."""

    pass


class InvalidVertexCountError(SearchError):
    """Requested vertex count cannot form a polygon."""

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(
            f"Invalid vertex count {vertex_count}: a polygon needs at least 3 vertices"
        )


class DuplicateVertexCountError(SearchError):
    """Same vertex count requested more than once in a run."""

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(f"Vertex count {vertex_count} requested more than once")


class InputTooLargeError(SearchError):
    """Point set exceeds the configured limit for a search method."""

    def __init__(self, point_count: int, limit: int, method: str) -> None:
        self.point_count = point_count
        self.limit = limit
        self.method = method
        super().__init__(
            f"Too many points for {method} search: {point_count} (limit {limit})"
        )
