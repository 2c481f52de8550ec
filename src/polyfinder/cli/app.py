"""CLI application entry point for polyfinder.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from polyfinder import __version__
from polyfinder.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_cancellation_notice,
    print_error,
    print_header,
    print_points_info,
    print_results,
    print_saved,
    print_step,
    print_summary,
)
from polyfinder.config import (
    GenerationConfig,
    LoggingConfig,
    PolyFinderSettings,
    ProcessingConfig,
    SearchConfig,
)
from polyfinder.core import SearchProcessor
from polyfinder.core.search import MIN_VERTEX_COUNT
from polyfinder.domain import Point, SearchMethod
from polyfinder.exceptions import PolyFinderError
from polyfinder.io import PointReader, PointWriter, generate_from_config

# Create the Typer app
app = typer.Typer(
    name="polyfinder",
    help="Find maximum-area convex polygons with a fixed number of vertices in a point set.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]PolyFinder[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Find maximum-area convex polygons in point sets."""


def parse_sizes(sizes: str) -> list[int]:
    """Parse a comma-separated list of polygon sizes.

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(part) for part in sizes.split(",") if part.strip()]


@app.command()
def search(
    points_file: Annotated[
        Path | None,
        typer.Argument(
            help="Points file with one 'x=<int>, y=<int>' entry per line",
            show_default=False,
        ),
    ] = None,
    random_count: Annotated[
        int | None,
        typer.Option(
            "--random",
            "-r",
            help="Search a random point set of this size instead of a file",
            min=3,
            max=5000,
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Random seed for --random",
        ),
    ] = None,
    method: Annotated[
        str,
        typer.Option(
            "--method",
            "-m",
            help="Search method (brute-force|greedy)",
        ),
    ] = "brute-force",
    sizes: Annotated[
        str,
        typer.Option(
            "--sizes",
            "-s",
            help="Comma-separated polygon sizes",
        ),
    ] = "3,4,5",
    parallel: Annotated[
        bool,
        typer.Option(
            "--parallel",
            help="Run each polygon size in a separate worker process",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write a JSON report to this path",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show polygon vertices",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Search a point set for the largest convex polygon of each size.

    Example:
        polyfinder search points.txt --method greedy --sizes 3,4,5

    Prints the area of the largest triangle, quadrilateral and pentagon
    found, or "not found" when no convex polygon of that size exists.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if points_file is not None and random_count is not None:
        print_error("Cannot use a points file and --random together")
        raise typer.Exit(code=1)

    if points_file is None and random_count is None:
        print_error(
            "No points to search",
            details="Provide a points file or use --random N.",
        )
        raise typer.Exit(code=1)

    if points_file is not None and not points_file.is_file():
        print_error(
            f"Input file not found: {points_file}",
            details=f"The file '{points_file}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        search_method = SearchMethod(method.lower())
    except ValueError:
        print_error(
            f"Invalid method: {method}",
            details="Valid values: brute-force, greedy",
        )
        raise typer.Exit(code=1)

    try:
        vertex_counts = parse_sizes(sizes)
        settings = PolyFinderSettings(
            search=SearchConfig(method=search_method, vertex_counts=vertex_counts),
            generation=GenerationConfig(count=random_count or 100, seed=seed),
            processing=ProcessingConfig(parallel=parallel, max_workers=workers),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except (ValueError, ValidationError) as e:
        print_error("Invalid search options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading points")

        points, source = _load_points(points_file, settings)
        if len(points) < MIN_VERTEX_COUNT:
            print_error(
                f"Not enough points: {len(points)}",
                details=f"A polygon needs at least {MIN_VERTEX_COUNT} points.",
            )
            raise typer.Exit(code=1)

        if not quiet:
            print_points_info(source, len(points))
            print_step(f"Searching ({search_method.label})")

        processor = SearchProcessor(settings)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Searching {len(vertex_counts)} sizes",
                        total=len(vertex_counts),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    report = processor.process(points, progress_callback=update_progress)
            else:
                report = processor.process(points)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        stats = report.stats
        if not quiet:
            print_results(report, vertex_counts, verbose)
            print_summary(
                total_time_s=stats.duration_seconds,
                found=stats.completed_count,
                not_found=stats.not_found_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_search_time_ms,
                min_time_ms=stats.min_search_time_ms,
                max_time_ms=stats.max_search_time_ms,
            )
        else:
            for vertex_count in vertex_counts:
                result = report.result_for(vertex_count)
                area = "error" if result is None else (
                    f"{result.area:.2f}" if result.area is not None else "none"
                )
                console.print(f"{vertex_count}\t{area}")

        if output is not None:
            PointWriter.write_report(report, output)
            if not quiet:
                print_saved(str(output), "Report")

        if stats.error_count > 0:
            raise typer.Exit(code=1)

    except PolyFinderError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _load_points(
    points_file: Path | None, settings: PolyFinderSettings
) -> tuple[list[Point], str]:
    """Load points from a file or generate them from settings.

    Returns:
        Tuple of (points, description of their source)
    """
    if points_file is not None:
        with PointReader(points_file) as reader:
            return reader.points, str(points_file)

    generation = settings.generation
    points = generate_from_config(generation)
    source = (
        f"random in [{generation.min_coordinate}, {generation.max_coordinate}]"
        + (f" (seed {generation.seed})" if generation.seed is not None else "")
    )
    return points, source


@app.command()
def generate(
    output: Annotated[
        Path,
        typer.Argument(
            help="Path of the points file to write",
            show_default=False,
        ),
    ],
    count: Annotated[
        int,
        typer.Option(
            "--count",
            "-n",
            help="Number of points (3-5000)",
            min=3,
            max=5000,
        ),
    ] = 100,
    min_coordinate: Annotated[
        int,
        typer.Option(
            "--min",
            help="Smallest coordinate value",
        ),
    ] = -150,
    max_coordinate: Annotated[
        int,
        typer.Option(
            "--max",
            help="Largest coordinate value",
        ),
    ] = 150,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Random seed",
        ),
    ] = None,
) -> None:
    """Write a random points file.

    Example:
        polyfinder generate points.txt --count 50 --seed 7
    """
    try:
        config = GenerationConfig(
            count=count,
            min_coordinate=min_coordinate,
            max_coordinate=max_coordinate,
            seed=seed,
        )
    except ValidationError as e:
        print_error("Invalid generation options", details=str(e))
        raise typer.Exit(code=1)

    try:
        points = generate_from_config(config)
        PointWriter.write_points(points, output)
    except PolyFinderError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    console.print(f"[bold green]{SYM_OK}[/bold green] Wrote {len(points)} points to {output}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
