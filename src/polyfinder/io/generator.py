"""Random point set generation."""

import random

from polyfinder.config import GenerationConfig
from polyfinder.domain import Point


def generate_points(
    count: int,
    min_coordinate: int = -150,
    max_coordinate: int = 150,
    seed: int | None = None,
) -> list[Point]:
    """Generate points with integer coordinates drawn uniformly at random.

    Args:
        count: Number of points
        min_coordinate: Smallest coordinate value (inclusive)
        max_coordinate: Largest coordinate value (inclusive)
        seed: Random seed for reproducible sets

    Returns:
        List of ``count`` points. Duplicates are possible.

    Raises:
        ValueError: If count is negative or the range is empty
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if min_coordinate > max_coordinate:
        raise ValueError(
            f"empty coordinate range [{min_coordinate}, {max_coordinate}]"
        )

    rng = random.Random(seed)
    return [
        Point(
            float(rng.randint(min_coordinate, max_coordinate)),
            float(rng.randint(min_coordinate, max_coordinate)),
        )
        for _ in range(count)
    ]


def generate_from_config(config: GenerationConfig) -> list[Point]:
    """Generate points using generation settings."""
    return generate_points(
        count=config.count,
        min_coordinate=config.min_coordinate,
        max_coordinate=config.max_coordinate,
        seed=config.seed,
    )
