"""Search orchestration across several polygon sizes.

This module runs one search method for every requested vertex count, times
each search, and collects the outcomes into a report. Searches for different
vertex counts are independent, so they can run in worker processes using
ProcessPoolExecutor; each worker runs the unchanged sequential algorithm and
produces the same polygon a sequential run would.

Key components:
- process_search: Top-level picklable function for one search
- SearchProcessor: Main orchestrator class
- SearchReport: Collected results and statistics
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from polyfinder.config import PolyFinderSettings
from polyfinder.core.search import run_search, validate_vertex_counts
from polyfinder.domain import Point, Polygon, SearchMethod, SearchResult
from polyfinder.exceptions import InputTooLargeError
from polyfinder.utils import SearchLogger, SearchStats, configure_logging


def process_search(
    points_data: list[dict[str, Any]],
    vertex_count: int,
    method: str,
) -> dict[str, Any]:
    """Run a single search.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes points, runs the search, and returns the serialized result.

    Args:
        points_data: Serialized points (from Point.to_dict())
        vertex_count: Number of polygon vertices
        method: SearchMethod value

    Returns:
        Dictionary containing either:
        - Success: {"polygon": dict | None, "vertex_count": int, "method": str,
          "duration_ms": float}
        - Error: {"error": str, "vertex_count": int, "traceback": str,
          "duration_ms": float}
    """
    start_time = time.perf_counter()

    try:
        points = [Point.from_dict(p) for p in points_data]
        polygon = run_search(points, vertex_count, SearchMethod(method))

        duration_ms = (time.perf_counter() - start_time) * 1000
        return {
            "polygon": polygon.to_dict() if polygon is not None else None,
            "vertex_count": vertex_count,
            "method": method,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.perf_counter() - start_time) * 1000
        return {
            "error": str(e),
            "vertex_count": vertex_count,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class SearchReport:
    """Results of a search run.

    Attributes:
        method: Algorithm used for every search in the run
        point_count: Size of the searched point set
        results: One result per successful search, in requested order
        stats: Counts and timings for the run
    """

    method: SearchMethod
    point_count: int
    results: list[SearchResult] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)

    def result_for(self, vertex_count: int) -> SearchResult | None:
        """Get the result for a vertex count.

        Returns:
            The result, or None if that search failed or was not requested
        """
        for result in self.results:
            if result.vertex_count == vertex_count:
                return result
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON export."""
        return {
            "method": self.method.value,
            "point_count": self.point_count,
            "results": [r.to_dict() for r in self.results],
            "duration_seconds": self.stats.duration_seconds,
            "errors": [
                {"vertex_count": k, "error": message} for k, message in self.stats.errors
            ],
        }


class SearchProcessor:
    """Runs polygon searches for several vertex counts.

    Example:
        settings = PolyFinderSettings()
        processor = SearchProcessor(settings)
        report = processor.process(points, vertex_counts=[3, 4, 5])
        for result in report.results:
            print(result.vertex_count, result.area)
    """

    def __init__(self, config: PolyFinderSettings) -> None:
        """Initialize search processor with configuration.

        Args:
            config: PolyFinder settings containing search and processing config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )

    def _check_limits(self, point_count: int, method: SearchMethod) -> None:
        """Reject point sets larger than the configured limits.

        Raises:
            InputTooLargeError: If the point set is too large for the method
        """
        search = self.config.search
        if point_count > search.max_points:
            raise InputTooLargeError(point_count, search.max_points, method.value)
        if method is SearchMethod.BRUTE_FORCE and point_count > search.max_exhaustive_points:
            raise InputTooLargeError(point_count, search.max_exhaustive_points, method.value)

    def process(
        self,
        points: Sequence[Point],
        vertex_counts: Sequence[int] | None = None,
        method: SearchMethod | str | None = None,
        parallel: bool | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, int, bool], None] | None = None,
    ) -> SearchReport:
        """Search a point set for the largest convex polygon of each size.

        Args:
            points: Point set to search
            vertex_counts: Polygon sizes (None = config default)
            method: Search algorithm or its value string (None = config default)
            parallel: Use worker processes (None = config default)
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, vertex_count, success)
                for progress updates

        Returns:
            SearchReport with one result per successful search

        Raises:
            InvalidVertexCountError: If a vertex count is below 3
            DuplicateVertexCountError: If a vertex count is requested twice
            InputTooLargeError: If the point set exceeds the configured limits
            KeyboardInterrupt: If the run is cancelled by user
        """
        if vertex_counts is None:
            vertex_counts = self.config.search.vertex_counts
        if method is None:
            method = self.config.search.method
        if parallel is None:
            parallel = self.config.processing.parallel
        if max_workers is None:
            max_workers = self.config.processing.max_workers

        method = SearchMethod(method)
        vertex_counts = list(vertex_counts)
        validate_vertex_counts(vertex_counts)
        self._check_limits(len(points), method)

        search_logger = SearchLogger(self.logger)
        stats = search_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting search run",
            method=method.value,
            points=len(points),
            vertex_counts=vertex_counts,
            parallel=parallel,
        )

        points_data = [p.to_dict() for p in points]
        if parallel and len(vertex_counts) > 1:
            raw_results = self._process_parallel(
                points_data, vertex_counts, method, max_workers, search_logger, progress_callback
            )
        else:
            raw_results = self._process_sequential(
                points_data, vertex_counts, method, search_logger, progress_callback
            )

        report = SearchReport(method=method, point_count=len(points), stats=stats)
        for vertex_count in vertex_counts:
            result = raw_results.get(vertex_count)
            if result is not None:
                report.results.append(result)

        stats.end_time = time.time()

        self.logger.info(
            "Search run complete",
            found=stats.completed_count,
            not_found=stats.not_found_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return report

    def _record(
        self,
        raw: dict[str, Any],
        method: SearchMethod,
        search_logger: SearchLogger,
    ) -> SearchResult | None:
        """Convert a worker result dict into a SearchResult and log it."""
        vertex_count = raw["vertex_count"]
        duration_ms = raw.get("duration_ms", 0.0)

        if "error" in raw:
            search_logger.log_search_error(
                vertex_count=vertex_count,
                error=Exception(raw["error"]),
                traceback=raw.get("traceback"),
            )
            return None

        polygon_data = raw["polygon"]
        polygon = Polygon.from_dict(polygon_data) if polygon_data is not None else None
        result = SearchResult(
            method=method,
            vertex_count=vertex_count,
            polygon=polygon,
            duration_ms=duration_ms,
        )

        if polygon is None:
            search_logger.log_search_not_found(vertex_count, duration_ms)
        else:
            search_logger.log_search_complete(vertex_count, polygon.area(), duration_ms)
        return result

    def _process_sequential(
        self,
        points_data: list[dict[str, Any]],
        vertex_counts: list[int],
        method: SearchMethod,
        search_logger: SearchLogger,
        progress_callback: Callable[[int, int, int, bool], None] | None,
    ) -> dict[int, SearchResult]:
        """Run each search in the current process."""
        results: dict[int, SearchResult] = {}
        total = len(vertex_counts)

        for completed, vertex_count in enumerate(vertex_counts, start=1):
            search_logger.log_search_start(vertex_count, method.value, len(points_data))
            raw = process_search(points_data, vertex_count, method.value)
            result = self._record(raw, method, search_logger)
            if result is not None:
                results[vertex_count] = result

            if progress_callback is not None:
                progress_callback(completed, total, vertex_count, result is not None)

        return results

    def _process_parallel(
        self,
        points_data: list[dict[str, Any]],
        vertex_counts: list[int],
        method: SearchMethod,
        max_workers: int | None,
        search_logger: SearchLogger,
        progress_callback: Callable[[int, int, int, bool], None] | None,
    ) -> dict[int, SearchResult]:
        """Run each search in a worker process.

        Args:
            points_data: Serialized point set
            vertex_counts: Polygon sizes to search
            method: Search algorithm
            max_workers: Maximum worker processes
            search_logger: Logger collecting statistics
            progress_callback: Optional callback(completed, total, vertex_count, success)

        Returns:
            Dictionary mapping vertex count to result for successful searches
        """
        results: dict[int, SearchResult] = {}
        total = len(vertex_counts)
        completed = 0
        pending_futures: dict[Future, int] = {}

        self.logger.info(
            "Starting parallel search",
            searches=total,
            max_workers=max_workers,
        )

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for vertex_count in vertex_counts:
                search_logger.log_search_start(vertex_count, method.value, len(points_data))
                future = executor.submit(process_search, points_data, vertex_count, method.value)
                pending_futures[future] = vertex_count

            try:
                for future in as_completed(list(pending_futures)):
                    vertex_count = pending_futures.pop(future)
                    result: SearchResult | None = None

                    try:
                        result = self._record(future.result(), method, search_logger)
                    except Exception as e:
                        # Executor-level error
                        search_logger.log_search_error(
                            vertex_count=vertex_count,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    if result is not None:
                        results[vertex_count] = result

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, vertex_count, result is not None)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                search_logger.stats.was_cancelled = True
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results
