"""Command-line interface for polycore.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One command per core operation (data, hull, simplify, clip, fit)
- Optional JSON output of result polygons
- Quiet mode and file logging
"""

from polycore.cli.app import cli, main

__all__ = ["cli", "main"]
