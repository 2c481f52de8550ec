"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from polyfinder.config import (
    GenerationConfig,
    PolyFinderSettings,
    SearchConfig,
    get_default_settings,
)
from polyfinder.domain import SearchMethod


class TestSearchConfig:
    def test_defaults(self):
        config = SearchConfig()
        assert config.method is SearchMethod.BRUTE_FORCE
        assert config.vertex_counts == [3, 4, 5]
        assert config.max_points == 5000

    def test_method_from_string(self):
        assert SearchConfig(method="greedy").method is SearchMethod.GREEDY

    def test_rejects_small_vertex_count(self):
        with pytest.raises(ValidationError):
            SearchConfig(vertex_counts=[2, 3])

    def test_rejects_duplicate_vertex_counts(self):
        with pytest.raises(ValidationError):
            SearchConfig(vertex_counts=[4, 4])

    def test_rejects_empty_vertex_counts(self):
        with pytest.raises(ValidationError):
            SearchConfig(vertex_counts=[])


class TestGenerationConfig:
    def test_defaults(self):
        config = GenerationConfig()
        assert config.count == 100
        assert (config.min_coordinate, config.max_coordinate) == (-150, 150)
        assert config.seed is None

    def test_rejects_inverted_range(self):
        with pytest.raises(ValidationError):
            GenerationConfig(min_coordinate=10, max_coordinate=-10)

    def test_count_bounds(self):
        with pytest.raises(ValidationError):
            GenerationConfig(count=2)
        with pytest.raises(ValidationError):
            GenerationConfig(count=5001)


class TestSettings:
    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, PolyFinderSettings)
        assert settings.processing.parallel is False
        assert settings.logging.log_file is None

    def test_model_dump_round_trip(self):
        settings = PolyFinderSettings(search=SearchConfig(vertex_counts=[3, 6]))
        restored = PolyFinderSettings(**settings.model_dump())
        assert restored == settings
