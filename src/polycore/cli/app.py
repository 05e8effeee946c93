"""CLI application entry point for polycore.

This module provides the main CLI interface using Typer.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError

from polycore import __version__
from polycore.cli.output import (
    console,
    print_error,
    print_fit,
    print_header,
    print_moments,
    print_polygon_info,
    print_saved,
    print_step,
    print_success,
    print_vertices,
)
from polycore.config import GeometryConfig, LoggingConfig, PolycoreSettings
from polycore.core import radial_fit
from polycore.domain import FitKind, Polygon
from polycore.exceptions import PolycoreError
from polycore.io import PolygonReader, PolygonWriter
from polycore.utils import OperationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="polycore",
    help="Clip, wrap, simplify, measure and fit 2D polygons stored as JSON vertex files.",
    add_completion=False,
    no_args_is_help=True,
)


class ClipMode(str, Enum):
    """Boolean operation performed by the clip command."""

    INTERSECT = "intersect"
    UNION = "union"


@dataclass
class CliState:
    """Settings and loggers shared by every command of one invocation."""

    settings: PolycoreSettings
    operations: OperationLogger
    quiet: bool
    override_accuracy: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polycore[/bold blue] v{__version__}")
        raise typer.Exit()


OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the resulting polygon to this JSON file",
    ),
]


@app.callback()
def main_options(
    ctx: typer.Context,
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
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    accuracy: Annotated[
        float | None,
        typer.Option(
            "--accuracy",
            help="Equality tolerance applied to loaded polygons (default: per file)",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print results only",
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
    """Geometry tools for closed 2D polygons."""
    try:
        settings = PolycoreSettings(
            geometry=GeometryConfig() if accuracy is None else GeometryConfig(accuracy=accuracy),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        error = e.errors()[0]
        field_name = ".".join(str(part) for part in error["loc"])
        print_error(f"Invalid option: {field_name}", details=error["msg"])
        raise typer.Exit(code=1) from None

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(
        settings=settings,
        operations=OperationLogger(logger),
        quiet=quiet,
        override_accuracy=accuracy is not None,
    )


def _load(state: CliState, path: Path) -> Polygon:
    """Load a polygon file, applying the --accuracy override."""
    polygon = PolygonReader(path).load()
    if state.override_accuracy:
        polygon.accuracy = state.settings.geometry.accuracy
    if not state.quiet:
        print_polygon_info(str(path), polygon)
    return polygon


def _fail(state: CliState, operation: str, error: PolycoreError) -> NoReturn:
    state.operations.log_operation_error(operation, error)
    state.operations.log_summary()
    print_error(str(error))
    raise typer.Exit(code=1) from None


def _emit(
    state: CliState,
    polygon: Polygon,
    output: Path | None,
    title: str,
    operation: str,
) -> None:
    """Write a result polygon to --output, or print its vertices."""
    if output is None:
        print_vertices(polygon, title)
        return
    try:
        PolygonWriter(output).save(polygon)
    except PolycoreError as e:
        _fail(state, operation, e)
    if not state.quiet:
        print_saved(str(output))


@app.command()
def data(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Polygon JSON file", show_default=False),
    ],
) -> None:
    """Print area, centroid, perimeter and moments of inertia."""
    state: CliState = ctx.obj
    if not state.quiet:
        print_header(__version__)
        print_step("Loading polygon")

    try:
        polygon = _load(state, input_file)
        state.operations.log_operation_start("data", len(polygon))
        result = polygon.data()
    except PolycoreError as e:
        _fail(state, "data", e)

    state.operations.log_operation_complete("data", len(polygon))
    print_moments(result)
    state.operations.log_summary()


@app.command()
def hull(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Polygon JSON file", show_default=False),
    ],
    output: OutputOption = None,
) -> None:
    """Compute the convex hull of a polygon (counter-clockwise)."""
    state: CliState = ctx.obj
    if not state.quiet:
        print_header(__version__)
        print_step("Loading polygon")

    try:
        polygon = _load(state, input_file)
        state.operations.log_operation_start("hull", len(polygon))
        xs, ys = polygon.convex_hull()
        result = Polygon.from_arrays(xs, ys, accuracy=polygon.accuracy)
    except PolycoreError as e:
        _fail(state, "hull", e)

    duration_ms = state.operations.log_operation_complete("hull", len(result))
    if not state.quiet:
        print_success("Convex hull", len(polygon), len(result), duration_ms)
    _emit(state, result, output, "Convex hull", "hull")
    state.operations.log_summary()


@app.command()
def simplify(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Polygon JSON file", show_default=False),
    ],
    tolerance: Annotated[
        float | None,
        typer.Option(
            "--tolerance",
            "-t",
            help="Distance tolerance for vertex removal (default: 0.1)",
        ),
    ] = None,
    output: OutputOption = None,
) -> None:
    """Remove vertices that deviate less than the tolerance from the boundary."""
    state: CliState = ctx.obj
    if tolerance is None:
        tolerance = state.settings.simplify.tolerance
    if not state.quiet:
        print_header(__version__)
        print_step("Loading polygon")

    try:
        polygon = _load(state, input_file)
        vertices_in = len(polygon)
        state.operations.log_operation_start("simplify", vertices_in)
        polygon.simplify(tolerance)
    except PolycoreError as e:
        _fail(state, "simplify", e)

    duration_ms = state.operations.log_operation_complete("simplify", len(polygon))
    if not state.quiet:
        print_success(
            f"Simplified (tolerance {tolerance:g})", vertices_in, len(polygon), duration_ms
        )
    _emit(state, polygon, output, "Simplified polygon", "simplify")
    state.operations.log_summary()


@app.command()
def clip(
    ctx: typer.Context,
    subject_file: Annotated[
        Path,
        typer.Argument(help="Subject polygon JSON file", show_default=False),
    ],
    clipper_file: Annotated[
        Path,
        typer.Argument(help="Convex clipping polygon JSON file", show_default=False),
    ],
    mode: Annotated[
        ClipMode,
        typer.Option(
            "--mode",
            "-m",
            help="Boolean operation to perform",
            case_sensitive=False,
        ),
    ] = ClipMode.INTERSECT,
    output: OutputOption = None,
) -> None:
    """Intersect or unite a polygon with a convex clipping polygon."""
    state: CliState = ctx.obj
    operation = mode.value
    if not state.quiet:
        print_header(__version__)
        print_step("Loading polygons")

    try:
        subject = _load(state, subject_file)
        clipper = _load(state, clipper_file)
        vertices_in = len(subject) + len(clipper)
        state.operations.log_operation_start(operation, vertices_in)
        if mode is ClipMode.UNION:
            result = subject.union(clipper)
        else:
            result = subject.intersect(clipper)
    except PolycoreError as e:
        _fail(state, operation, e)

    duration_ms = state.operations.log_operation_complete(operation, len(result))
    if not state.quiet:
        if result.is_empty():
            console.print("\nPolygons do not overlap. Result is empty.")
        print_success(operation.capitalize(), vertices_in, len(result), duration_ms)
    _emit(state, result, output, operation.capitalize(), operation)
    state.operations.log_summary()


@app.command()
def fit(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Polygon JSON file", show_default=False),
    ],
    kind: Annotated[
        FitKind | None,
        typer.Option(
            "--kind",
            "-k",
            help="Shape to fit (default: circle)",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Fit a circle or an ellipse to the polygon vertices."""
    state: CliState = ctx.obj
    fit_settings = state.settings.fit
    if kind is None:
        kind = fit_settings.kind
    if not state.quiet:
        print_header(__version__)
        print_step("Loading polygon")

    try:
        polygon = _load(state, input_file)
        state.operations.log_operation_start("fit", len(polygon))
        result = radial_fit(polygon, kind, fit_settings.pivot_tolerance)
    except PolycoreError as e:
        _fail(state, "fit", e)

    state.operations.log_operation_complete("fit", 0)
    print_fit(result)
    state.operations.log_summary()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
