"""Utility functions for polyfinder.

This module provides utility functions including:

- Logging setup and configuration
- Search statistics tracking
"""

from polyfinder.utils.logging import (
    SearchLogger,
    SearchStats,
    configure_logging,
)

__all__ = [
    "SearchLogger",
    "SearchStats",
    "configure_logging",
]
