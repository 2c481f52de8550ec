"""Point file and search report writers."""

import json
from collections.abc import Sequence
from pathlib import Path

from polyfinder.core.processor import SearchReport
from polyfinder.domain import Point
from polyfinder.exceptions import PointsSaveError


def format_point(point: Point) -> str:
    """Format a point as a points file line.

    Raises:
        ValueError: If a coordinate is not integral
    """
    if not (float(point.x).is_integer() and float(point.y).is_integer()):
        raise ValueError(f"points file coordinates must be integers, got {point}")
    return f"x={int(point.x)}, y={int(point.y)}"


class PointWriter:
    """Writes point sets and search reports to disk.

    Example:
        PointWriter.write_points(points, Path("points.txt"))
        PointWriter.write_report(report, Path("report.json"))
    """

    @staticmethod
    def write_points(points: Sequence[Point], path: Path) -> None:
        """Write points in the format read by PointReader.

        Args:
            points: Points with integer coordinates
            path: Output file path

        Raises:
            PointsSaveError: If a coordinate is not integral or the file
                cannot be written
        """
        try:
            lines = [format_point(p) for p in points]
        except ValueError as e:
            raise PointsSaveError(str(path), str(e)) from e

        try:
            path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            raise PointsSaveError(str(path), str(e)) from e

    @staticmethod
    def write_report(report: SearchReport, path: Path) -> None:
        """Write a search report as JSON.

        Args:
            report: Report to export
            path: Output file path

        Raises:
            PointsSaveError: If the file cannot be written
        """
        try:
            path.write_text(json.dumps(report.to_dict(), indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise PointsSaveError(str(path), str(e)) from e
