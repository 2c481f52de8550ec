"""Logging utilities for PolyFinder."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class SearchStats:
    """Statistics from a search run."""

    completed_count: int = 0
    not_found_count: int = 0
    error_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    search_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_search_time_ms(self) -> float | None:
        """Average time per search, None before any search completed."""
        if not self.search_timings_ms:
            return None
        return sum(self.search_timings_ms) / len(self.search_timings_ms)

    @property
    def min_search_time_ms(self) -> float | None:
        if not self.search_timings_ms:
            return None
        return min(self.search_timings_ms)

    @property
    def max_search_time_ms(self) -> float | None:
        if not self.search_timings_ms:
            return None
        return max(self.search_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output follows ``console_level`` (ERROR when ``quiet``). A file
    handler at ``file_level`` is added only when ``log_file`` is given.

    Args:
        log_file: Path to log file (None = no file output)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_polyfinder", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._polyfinder = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._polyfinder = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polyfinder")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SearchLogger:
    """Logger for tracking search progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SearchStats()

    def log_search_start(self, vertex_count: int, method: str, point_count: int) -> None:
        """Log start of one search."""
        self._logger.debug(
            "Search started",
            vertex_count=vertex_count,
            method=method,
            points=point_count,
        )

    def log_search_complete(
        self,
        vertex_count: int,
        area: float,
        duration_ms: float,
    ) -> None:
        """Log a search that found a polygon."""
        self._logger.info(
            "Polygon found",
            vertex_count=vertex_count,
            area=round(area, 2),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.completed_count += 1
        self._stats.search_timings_ms.append(duration_ms)

    def log_search_not_found(self, vertex_count: int, duration_ms: float) -> None:
        """Log a search that finished without a polygon."""
        self._logger.info(
            "No convex polygon found",
            vertex_count=vertex_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.not_found_count += 1
        self._stats.search_timings_ms.append(duration_ms)

    def log_search_error(
        self,
        vertex_count: int,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log search failure."""
        self._logger.error(
            "Search failed",
            vertex_count=vertex_count,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((vertex_count, str(error)))

    @property
    def stats(self) -> SearchStats:
        """Get current search statistics."""
        return self._stats
