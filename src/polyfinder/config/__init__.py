"""Configuration management for polyfinder.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SearchConfig: Search method, vertex counts and input limits
- GenerationConfig: Random point generation settings
- ProcessingConfig: Sequential or parallel execution
- LoggingConfig: Logging settings
- PolyFinderSettings: Main application settings
"""

from polyfinder.config.settings import (
    GenerationConfig,
    LoggingConfig,
    PolyFinderSettings,
    ProcessingConfig,
    SearchConfig,
    get_default_settings,
)

__all__ = [
    "GenerationConfig",
    "LoggingConfig",
    "PolyFinderSettings",
    "ProcessingConfig",
    "SearchConfig",
    "get_default_settings",
]
