"""Command-line interface for polyfinder.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Search a points file or a random point set
- Brute force or greedy method selection
- Result table with areas and timings
- JSON report export
- Random points file generation
"""

from polyfinder.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
