"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from polyfinder.core import SearchReport

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

POLYGON_NAMES = {3: "Triangle", 4: "Quadrilateral", 5: "Pentagon", 6: "Hexagon"}


def polygon_name(vertex_count: int) -> str:
    """Return a display name for a polygon size."""
    return POLYGON_NAMES.get(vertex_count, f"{vertex_count}-gon")


def create_progress() -> Progress:
    """Create a rich progress bar for search runs.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]PolyFinder[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_points_info(source: str, point_count: int) -> None:
    """Print point set information.

    Args:
        source: File path or description of the generated set
        point_count: Number of points
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {point_count:,} points")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_results(report: SearchReport, vertex_counts: list[int], verbose: bool) -> None:
    """Print one table row per requested polygon size.

    Args:
        report: Search report
        vertex_counts: Requested sizes, in display order
        verbose: Also print the vertices of each polygon
    """
    table = Table(title=f"{report.method.label} search", title_justify="left")
    table.add_column("Polygon")
    table.add_column("Area", justify="right")
    table.add_column("Time", justify="right")
    if verbose:
        table.add_column("Vertices")

    for vertex_count in vertex_counts:
        result = report.result_for(vertex_count)
        name = polygon_name(vertex_count)
        if result is None:
            row = [name, "[red]error[/red]", "-"]
            if verbose:
                row.append("")
        else:
            area = f"{result.area:.2f}" if result.area is not None else "[yellow]not found[/yellow]"
            row = [name, area, _format_time(result.duration_ms / 1000)]
            if verbose:
                row.append(
                    " ".join(str(p) for p in result.polygon) if result.polygon is not None else ""
                )
        table.add_row(*row)

    console.print()
    console.print(table)


def print_summary(
    total_time_s: float,
    found: int,
    not_found: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print run summary.

    Args:
        total_time_s: Total run time in seconds
        found: Number of searches that found a polygon
        not_found: Number of searches without a polygon
        errors: Number of failed searches
        avg_time_ms: Average time per search in milliseconds
        min_time_ms: Minimum time per search in milliseconds
        max_time_ms: Maximum time per search in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {found} found {SYM_DOT} {not_found} not found {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    # Per-search timing
    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.1f}ms avg per search"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.1f}–{max_time_ms:.1f}ms range)"
        console.print(f"  {timing_str}")


def print_saved(path: str, description: str) -> None:
    """Print a saved file notice."""
    line = Text(f"  {description}: ")
    line.append(path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No report written")
