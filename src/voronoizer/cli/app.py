"""CLI application entry point for voronoizer.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from voronoizer import __version__
from voronoizer.cli.output import (
    console,
    create_progress,
    print_canvas_info,
    print_cancellation_notice,
    print_error,
    print_header,
    print_processing_info,
    print_seeds,
    print_step,
    print_success,
)
from voronoizer.config import (
    LOG_LEVELS,
    CanvasConfig,
    DistanceMetric,
    LoggingConfig,
    MarkerConfig,
    OutputConfig,
    RenderConfig,
    SeedConfig,
    VoronoizerSettings,
)
from voronoizer.core import VoronoiRenderer
from voronoizer.domain import parse_color
from voronoizer.exceptions import ConfigurationError, ImageWriteError, VoronoizerError
from voronoizer.io import PPMWriter

# Create the Typer app
app = typer.Typer(
    name="voronoizer",
    help="Render a Voronoi diagram of random seeds to a PPM image.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Voronoizer[/bold blue] v{__version__}")
        raise typer.Exit()


def _parse_color_option(option: str, value: str) -> int:
    try:
        return parse_color(value)
    except ValueError as e:
        raise ConfigurationError(option, value, str(e)) from e


@app.command()
def render(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output PPM path",
        ),
    ] = Path("output.ppm"),
    width: Annotated[
        int,
        typer.Option(
            "--width",
            "-W",
            help="Image width in pixels",
            min=1,
            max=65536,
        ),
    ] = 1000,
    height: Annotated[
        int,
        typer.Option(
            "--height",
            "-H",
            help="Image height in pixels",
            min=1,
            max=65536,
        ),
    ] = 1000,
    seeds: Annotated[
        int,
        typer.Option(
            "--seeds",
            "-n",
            help="Number of seeds",
            min=1,
        ),
    ] = 50,
    random_seed: Annotated[
        int | None,
        typer.Option(
            "--random-seed",
            "-s",
            help="Seed for reproducible output (default: non-reproducible)",
            min=0,
        ),
    ] = None,
    marker_radius: Annotated[
        int,
        typer.Option(
            "--marker-radius",
            "-r",
            help="Seed marker radius in pixels (0 disables markers)",
            min=0,
            max=1024,
        ),
    ] = 4,
    marker_color: Annotated[
        str,
        typer.Option(
            "--marker-color",
            help="Marker color (palette name, #RRGGBB or 0xAABBGGRR)",
        ),
    ] = "black",
    background: Annotated[
        str,
        typer.Option(
            "--background",
            help="Background color (palette name, #RRGGBB or 0xAABBGGRR)",
        ),
    ] = "background",
    metric: Annotated[
        str,
        typer.Option(
            "--metric",
            "-m",
            help="Distance metric (euclidean|manhattan)",
        ),
    ] = "euclidean",
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: sequential)",
            min=1,
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
            help="Verbose console output, including log records",
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
    """Render a Voronoi diagram and save it as a binary PPM image.

    Scatters seeds over the canvas, colors every pixel after its nearest seed,
    stamps a marker disc on each seed and writes the result.

    Example:
        voronoizer --seeds 50 --random-seed 42 -o diagram.ppm
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        metric_choice = DistanceMetric(metric.lower())
    except ValueError:
        print_error(
            f"Invalid metric: {metric}",
            details="Valid values: euclidean, manhattan",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    try:
        settings = VoronoizerSettings(
            canvas=CanvasConfig(
                width=width,
                height=height,
                background_color=_parse_color_option("--background", background),
            ),
            seeds=SeedConfig(count=seeds, random_seed=random_seed),
            marker=MarkerConfig(
                radius=marker_radius,
                color=_parse_color_option("--marker-color", marker_color),
            ),
            render=RenderConfig(metric=metric_choice, max_workers=workers),
            output=OutputConfig(path=output),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
                console_output=verbose,
            ),
        )
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValidationError as e:
        print_error("Invalid configuration", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_canvas_info(width, height, seeds, metric_choice.value)

    try:
        renderer = VoronoiRenderer(settings)

        if not quiet:
            print_step("Placing seeds")
        seed_set = renderer.generate_seeds()
        if not quiet:
            print_seeds([p.to_tuple() for p in seed_set], random_seed, verbose)

        try:
            if not quiet:
                print_step("Rendering")
                print_processing_info(workers or 1)
                with create_progress() as progress:
                    task_id = progress.add_task("Classifying rows", total=height)

                    def update_progress(rows_done: int, _total: int) -> None:
                        progress.update(task_id, completed=rows_done)

                    buffer, stats = renderer.render(
                        seed_set, progress_callback=update_progress
                    )
            else:
                buffer, stats = renderer.render(seed_set)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_step("Writing image")
        writer = PPMWriter(output)
        try:
            size_bytes = writer.write(buffer)
        except ImageWriteError as e:
            renderer.render_logger.log_write_error(e.path, e)
            raise
        renderer.render_logger.log_image_written(str(output), width, height, size_bytes)

        if not quiet:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(size_bytes),
                total_time_s=stats.duration_seconds,
                pixels=stats.pixel_count,
                seeds=stats.seed_count,
                marker_pixels=stats.marker_pixels,
            )

    except ImageWriteError as e:
        print_error(f"Cannot write into file {e.path}: {e.reason}")
        raise typer.Exit(code=1)
    except VoronoizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable form.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable file size (e.g., "2.9 MB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
