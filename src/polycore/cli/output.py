"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from polycore.domain import FitResult, MomentResult, Polygon

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

# Vertex tables longer than this are truncated
MAX_TABLE_ROWS = 50


def _format_number(value: float) -> str:
    return f"{value:.6g}" if abs(value) < 1e6 else f"{value:.6e}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polycore[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon_info(path: str, polygon: Polygon) -> None:
    """Print loaded polygon information.

    Args:
        path: Path to the polygon file
        polygon: Loaded polygon
    """
    # Text keeps paths with brackets from being read as markup
    line = Text("  ")
    line.append(path)
    console.print(line)
    winding = "clockwise" if polygon.is_clockwise() else "counter-clockwise"
    console.print(f"  {len(polygon)} vertices {SYM_DOT} {winding}")


def print_moments(result: MomentResult) -> None:
    """Print polygon mass properties as a table."""
    table = Table(title="Mass properties", show_header=True, header_style="bold")
    table.add_column("Property")
    table.add_column("Value", justify="right")
    for name, value in result.to_dict().items():
        table.add_row(name, _format_number(value))
    console.print(table)


def print_vertices(polygon: Polygon, title: str) -> None:
    """Print polygon vertices as a table.

    Args:
        polygon: Polygon to print
        title: Table title
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for i, point in enumerate(polygon.points[:MAX_TABLE_ROWS]):
        table.add_row(str(i), _format_number(point.x), _format_number(point.y))
    console.print(table)
    if len(polygon) > MAX_TABLE_ROWS:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(polygon) - MAX_TABLE_ROWS} more)")


def print_fit(result: FitResult) -> None:
    """Print a radial fit result as a table."""
    table = Table(title=f"{result.kind.value.capitalize()} fit", header_style="bold")
    table.add_column("Parameter")
    table.add_column("Value", justify="right")
    for name, value in result.to_dict().items():
        if name == "kind":
            continue
        table.add_row(name, _format_number(value))
    console.print(table)


def print_success(message: str, vertices_in: int, vertices_out: int, duration_ms: float) -> None:
    """Print success message with a vertex count summary.

    Args:
        message: Summary of what was done
        vertices_in: Vertex count of the input polygon(s)
        vertices_out: Vertex count of the result
        duration_ms: Operation time in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    console.print(
        f"  {vertices_in} {SYM_STEP} {vertices_out} vertices {SYM_DOT} {duration_ms:.1f}ms"
    )


def print_saved(path: str) -> None:
    """Print the path of a written polygon file."""
    line = Text("  Saved ")
    line.append(path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", soft_wrap=True)
    if details:
        console.print(f"  {escape(details)}", soft_wrap=True)
