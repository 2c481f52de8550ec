"""Point file reader.

Points files hold one point per line in the form ``x=<int>, y=<int>``.
Lines that do not contain a point are ignored, so files may carry headers
or comments.
"""

import re
from collections.abc import Iterable
from pathlib import Path

from polyfinder.domain import Point
from polyfinder.exceptions import PointsFormatError, PointsLoadError

POINT_PATTERN = re.compile(r"x=(-?[0-9]+),\s*y=(-?[0-9]+)")


def parse_points(lines: Iterable[str]) -> list[Point]:
    """Extract points from text lines.

    Args:
        lines: Text lines, each holding at most one point

    Returns:
        Points in line order
    """
    points: list[Point] = []
    for line in lines:
        match = POINT_PATTERN.search(line)
        if match:
            points.append(Point(float(match.group(1)), float(match.group(2))))
    return points


class PointReader:
    """Loads a point set from a points file.

    Example:
        reader = PointReader(Path("points.txt"))
        reader.load()
        print(len(reader.points))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the points file
        """
        self._path = path
        self._points: list[Point] | None = None

    def load(self) -> None:
        """Load and parse the points file.

        Raises:
            FileNotFoundError: If the file does not exist
            PointsLoadError: If the file cannot be read
            PointsFormatError: If the file contains no points
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Points file not found: {self._path}")

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PointsLoadError(str(self._path), str(e)) from e

        points = parse_points(text.splitlines())
        if not points:
            raise PointsFormatError(
                str(self._path), "no lines of the form 'x=<int>, y=<int>'"
            )
        self._points = points

    @property
    def points(self) -> list[Point]:
        """Return the loaded points.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._points is None:
            raise RuntimeError("Points not loaded. Call load() first.")
        return list(self._points)

    @property
    def point_count(self) -> int:
        """Return the number of loaded points."""
        return len(self.points)

    def __enter__(self) -> "PointReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._points = None
