"""Tests for search orchestration."""

import logging
from unittest.mock import patch

import pytest

from polyfinder.config import PolyFinderSettings, ProcessingConfig, SearchConfig
from polyfinder.core.processor import SearchProcessor, SearchReport, process_search
from polyfinder.domain import Point, Polygon, SearchMethod, SearchResult
from polyfinder.exceptions import (
    DuplicateVertexCountError,
    InputTooLargeError,
    InvalidVertexCountError,
)
from polyfinder.utils import configure_logging


@pytest.fixture
def square_with_center() -> list[Point]:
    return [Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3), Point(2, 1)]


@pytest.fixture
def settings() -> PolyFinderSettings:
    """Create test settings."""
    return PolyFinderSettings()


class TestProcessSearch:
    """Tests for process_search function."""

    def test_found(self, square_with_center):
        points_data = [p.to_dict() for p in square_with_center]
        result = process_search(points_data, 4, "brute-force")

        assert "error" not in result
        assert result["vertex_count"] == 4
        assert result["method"] == "brute-force"
        assert result["duration_ms"] >= 0
        polygon = Polygon.from_dict(result["polygon"])
        assert polygon.area() == pytest.approx(12.0)

    def test_not_found(self, square_with_center):
        points_data = [p.to_dict() for p in square_with_center]
        result = process_search(points_data, 5, "greedy")

        assert "error" not in result
        assert result["polygon"] is None

    def test_error_is_captured(self, square_with_center):
        points_data = [p.to_dict() for p in square_with_center]
        result = process_search(points_data, 2, "greedy")

        assert "error" in result
        assert result["vertex_count"] == 2
        assert "InvalidVertexCountError" in result["traceback"]

    def test_unknown_method_is_captured(self, square_with_center):
        points_data = [p.to_dict() for p in square_with_center]
        result = process_search(points_data, 3, "simulated-annealing")
        assert "error" in result


class TestSearchProcessor:
    """Tests for SearchProcessor class."""

    def test_process_defaults(self, settings, square_with_center):
        """Default run searches 3, 4 and 5 vertices with brute force."""
        processor = SearchProcessor(settings)
        report = processor.process(square_with_center)

        assert isinstance(report, SearchReport)
        assert report.method is SearchMethod.BRUTE_FORCE
        assert report.point_count == 5
        assert [r.vertex_count for r in report.results] == [3, 4, 5]

        assert report.result_for(3).area == pytest.approx(6.0)
        assert report.result_for(4).area == pytest.approx(12.0)
        assert not report.result_for(5).found

        assert report.stats.completed_count == 2
        assert report.stats.not_found_count == 1
        assert report.stats.error_count == 0
        assert len(report.stats.search_timings_ms) == 3
        assert report.stats.duration_seconds >= 0

    def test_process_greedy(self, settings, square_with_center):
        processor = SearchProcessor(settings)
        report = processor.process(
            square_with_center, vertex_counts=[4, 3], method=SearchMethod.GREEDY
        )

        assert report.method is SearchMethod.GREEDY
        assert [r.vertex_count for r in report.results] == [4, 3]
        assert all(r.method is SearchMethod.GREEDY for r in report.results)
        assert report.result_for(4).area == pytest.approx(12.0)

    def test_result_for_missing(self, settings, square_with_center):
        report = SearchProcessor(settings).process(square_with_center, vertex_counts=[3])
        assert report.result_for(4) is None

    def test_progress_callback(self, settings, square_with_center):
        calls = []

        def callback(completed, total, vertex_count, success):
            calls.append((completed, total, vertex_count, success))

        SearchProcessor(settings).process(
            square_with_center, vertex_counts=[3, 4], progress_callback=callback
        )
        assert calls == [(1, 2, 3, True), (2, 2, 4, True)]

    def test_invalid_vertex_count(self, settings, square_with_center):
        with pytest.raises(InvalidVertexCountError):
            SearchProcessor(settings).process(square_with_center, vertex_counts=[3, 2])

    def test_duplicate_vertex_count(self, settings, square_with_center):
        """Repeated sizes are rejected before any search runs."""
        with patch("polyfinder.core.processor.process_search") as mock_search:
            with pytest.raises(DuplicateVertexCountError) as exc_info:
                SearchProcessor(settings).process(square_with_center, vertex_counts=[4, 4])

        assert exc_info.value.vertex_count == 4
        mock_search.assert_not_called()

    def test_method_value_string(self, settings, square_with_center):
        report = SearchProcessor(settings).process(
            square_with_center, vertex_counts=[4], method="greedy"
        )

        assert report.method is SearchMethod.GREEDY
        assert report.results[0].method is SearchMethod.GREEDY
        assert report.results[0].area == pytest.approx(12.0)

    def test_exhaustive_limit(self, square_with_center):
        settings = PolyFinderSettings(search=SearchConfig(max_exhaustive_points=4))
        processor = SearchProcessor(settings)

        with pytest.raises(InputTooLargeError) as exc_info:
            processor.process(square_with_center)
        assert exc_info.value.limit == 4
        assert exc_info.value.point_count == 5

        # Greedy is only bound by max_points
        report = processor.process(square_with_center, method=SearchMethod.GREEDY)
        assert len(report.results) == 3

    def test_point_limit(self, square_with_center):
        settings = PolyFinderSettings(search=SearchConfig(max_points=4))
        with pytest.raises(InputTooLargeError):
            SearchProcessor(settings).process(square_with_center, method=SearchMethod.GREEDY)

    def test_search_error_counted(self, settings, square_with_center):
        """A failing search is logged and counted without stopping the run."""
        error_result = {
            "error": "boom",
            "vertex_count": 4,
            "traceback": "Traceback ...",
            "duration_ms": 0.1,
        }
        real = process_search

        def fake(points_data, vertex_count, method):
            if vertex_count == 4:
                return error_result
            return real(points_data, vertex_count, method)

        with patch("polyfinder.core.processor.process_search", side_effect=fake):
            report = SearchProcessor(settings).process(square_with_center)

        assert [r.vertex_count for r in report.results] == [3, 5]
        assert report.stats.error_count == 1
        assert report.stats.errors == [(4, "boom")]

    def test_parallel_matches_sequential(self, square_with_center):
        settings = PolyFinderSettings(
            processing=ProcessingConfig(parallel=True, max_workers=2)
        )
        processor = SearchProcessor(settings)

        parallel = processor.process(square_with_center)
        sequential = processor.process(square_with_center, parallel=False)

        assert [r.vertex_count for r in parallel.results] == [3, 4, 5]
        assert [r.polygon for r in parallel.results] == [
            r.polygon for r in sequential.results
        ]


class TestSearchReport:
    """Tests for SearchReport serialization."""

    def test_to_dict(self):
        polygon = Polygon((Point(0, 0), Point(4, 0), Point(4, 3)))
        report = SearchReport(method=SearchMethod.GREEDY, point_count=5)
        report.results.append(SearchResult(SearchMethod.GREEDY, 3, polygon, 1.0))
        report.results.append(SearchResult(SearchMethod.GREEDY, 5, None, 1.0))
        report.stats.errors.append((4, "boom"))

        data = report.to_dict()
        assert data["method"] == "greedy"
        assert data["point_count"] == 5
        assert data["results"][0]["area"] == pytest.approx(6.0)
        assert data["results"][1]["polygon"] is None
        assert data["errors"] == [{"vertex_count": 4, "error": "boom"}]


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_polyfinder", False)]


class TestConfigureLogging:
    """Tests for configure_logging handler setup."""

    def test_console_only_without_log_file(self):
        configure_logging(console_level="INFO")

        handlers = _own_handlers()
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)
        assert handlers[0].level == logging.INFO

    def test_quiet_raises_console_level(self):
        configure_logging(console_level="DEBUG", quiet=True)

        (handler,) = _own_handlers()
        assert handler.level == logging.ERROR

    def test_file_handler_with_log_file(self, tmp_path):
        log_file = tmp_path / "search.log"
        configure_logging(log_file=log_file, file_level="DEBUG")
        try:
            file_handlers = [h for h in _own_handlers() if isinstance(h, logging.FileHandler)]
            assert len(file_handlers) == 1
            assert file_handlers[0].level == logging.DEBUG
        finally:
            configure_logging()
        assert not any(isinstance(h, logging.FileHandler) for h in _own_handlers())
