"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for row classification.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Voronoizer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_canvas_info(width: int, height: int, seed_count: int, metric: str) -> None:
    """Print canvas and seed configuration."""
    console.print(f"  {width}x{height} pixels {SYM_DOT} {seed_count} seeds {SYM_DOT} {metric}")


def print_seeds(points: list[tuple[int, int]], random_seed: int | None, verbose: bool) -> None:
    """Print seed generation result.

    Args:
        points: Generated seeds as (x, y) tuples
        random_seed: Generator seed, None when non-reproducible
        verbose: Whether to list seed coordinates
    """
    source = f"random seed {random_seed}" if random_seed is not None else "entropy"
    console.print(f"  [green]{len(points)}[/green] seeds from {source}")
    if verbose and points:
        coords = ", ".join(f"({x}, {y})" for x, y in points[:20])
        if len(points) > 20:
            coords += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(points) - 20} more)"
        console.print(f"  {coords}")


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


def print_processing_info(workers: int) -> None:
    """Print parallelism configuration."""
    mode = "sequential" if workers <= 1 else f"{workers} workers"
    console.print(f"  {mode} {SYM_DOT} Ctrl+C to cancel")


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    pixels: int,
    seeds: int,
    marker_pixels: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total render time in seconds
        pixels: Number of classified pixels
        seeds: Number of seeds
        marker_pixels: Number of marker pixel writes
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {pixels:,} pixels {SYM_DOT} {seeds} regions {SYM_DOT} {marker_pixels:,} marker pixels"
    )


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
    console.print("  No output file created")
