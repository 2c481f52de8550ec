"""Point I/O layer for polyfinder.

This module handles getting point sets into the search and results out.

Key responsibilities:
- Generate random integer point sets
- Read points files (``x=<int>, y=<int>`` per line)
- Write points files and JSON search reports

Key classes:
- PointReader: Load points from a file
- PointWriter: Save points and reports
"""

from polyfinder.io.generator import generate_from_config, generate_points
from polyfinder.io.reader import PointReader, parse_points
from polyfinder.io.writer import PointWriter, format_point

__all__ = [
    "PointReader",
    "PointWriter",
    "format_point",
    "generate_from_config",
    "generate_points",
    "parse_points",
]
