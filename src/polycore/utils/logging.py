"""Logging utilities for Polycore."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_MARK = "_polycore_handler"


@dataclass
class OperationStats:
    """Statistics from a sequence of polygon operations."""

    completed_count: int = 0
    error_count: int = 0
    vertices_in: int = 0
    vertices_out: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate elapsed time between the first start and the last end."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0


def _reset_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    _reset_handlers(root_logger)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARK, True)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polycore")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class OperationLogger:
    """Logger for tracking polygon operations and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()
        self._started: dict[str, float] = {}

    def log_operation_start(self, operation: str, vertices: int) -> None:
        """Log start of an operation."""
        now = time.perf_counter()
        self._started[operation] = now
        if self._stats.start_time is None:
            self._stats.start_time = now
        self._stats.vertices_in += vertices
        self._logger.debug("Operation started", operation=operation, vertices=vertices)

    def log_operation_complete(self, operation: str, vertices: int) -> float:
        """Log successful completion of an operation.

        Args:
            operation: Operation name
            vertices: Vertex count of the produced polygon (0 if none)

        Returns:
            Operation duration in milliseconds
        """
        now = time.perf_counter()
        duration_ms = (now - self._started.pop(operation, now)) * 1000.0
        self._logger.info(
            "Operation complete",
            operation=operation,
            vertices=vertices,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.completed_count += 1
        self._stats.vertices_out += vertices
        self._stats.end_time = now
        return duration_ms

    def log_operation_error(self, operation: str, error: Exception) -> None:
        """Log a failed operation."""
        self._started.pop(operation, None)
        self._logger.error(
            "Operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((operation, str(error)))
        self._stats.end_time = time.perf_counter()

    def log_summary(self) -> OperationStats:
        """Log the totals of every operation recorded so far.

        Returns:
            The statistics that were logged
        """
        stats = self._stats
        self._logger.info(
            "Processing complete",
            completed=stats.completed_count,
            errors=stats.error_count,
            vertices_in=stats.vertices_in,
            vertices_out=stats.vertices_out,
            duration_seconds=round(stats.duration_seconds, 4),
        )
        return stats

    @property
    def stats(self) -> OperationStats:
        """Get current operation statistics."""
        return self._stats
