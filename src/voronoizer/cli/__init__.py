"""Command-line interface for voronoizer.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar for row classification
- Verbose/quiet output modes
- Reproducible renders via --random-seed
- Detailed error reporting
"""

from voronoizer.cli.app import cli, main

__all__ = ["cli", "main"]
