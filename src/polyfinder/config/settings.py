"""Configuration settings for PolyFinder."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from polyfinder.domain import SearchMethod


class SearchConfig(BaseModel):
    """Configuration for polygon searches."""

    method: SearchMethod = Field(
        default=SearchMethod.BRUTE_FORCE,
        description="Search algorithm",
    )
    vertex_counts: list[int] = Field(
        default_factory=lambda: [3, 4, 5],
        min_length=1,
        description="Polygon sizes to search for, in report order",
    )
    max_points: int = Field(
        default=5000,
        ge=3,
        description="Largest point set accepted by any method",
    )
    max_exhaustive_points: int = Field(
        default=200,
        ge=3,
        description="Largest point set accepted by the exhaustive search",
    )

    @field_validator("vertex_counts")
    @classmethod
    def _check_vertex_counts(cls, value: list[int]) -> list[int]:
        for count in value:
            if count < 3:
                raise ValueError(f"vertex count must be at least 3, got {count}")
        if len(set(value)) != len(value):
            raise ValueError("vertex counts must be unique")
        return value


class GenerationConfig(BaseModel):
    """Configuration for random point generation."""

    count: int = Field(
        default=100,
        ge=3,
        le=5000,
        description="Number of points to generate",
    )
    min_coordinate: int = Field(
        default=-150,
        description="Smallest coordinate value (inclusive)",
    )
    max_coordinate: int = Field(
        default=150,
        description="Largest coordinate value (inclusive)",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed (None = nondeterministic)",
    )

    @model_validator(mode="after")
    def _check_range(self) -> "GenerationConfig":
        if self.min_coordinate > self.max_coordinate:
            raise ValueError("min_coordinate must not exceed max_coordinate")
        return self


class ProcessingConfig(BaseModel):
    """Configuration for running searches."""

    parallel: bool = Field(
        default=False,
        description="Run each vertex count in a separate worker process",
    )
    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyFinderSettings(BaseModel):
    """Main application settings."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyFinderSettings:
    """Get default application settings."""
    return PolyFinderSettings()
