"""Utility functions for polycore.

This module provides utility functions including:

- Logging setup and configuration
- Per-operation statistics for CLI runs
"""

from polycore.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
]
