"""Configuration management for polycore.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Floating point tolerance settings
- SimplifyConfig: Simplification settings
- FitConfig: Radial fit settings
- LoggingConfig: Logging settings
- PolycoreSettings: Main application settings
"""

from polycore.config.settings import (
    FitConfig,
    GeometryConfig,
    LoggingConfig,
    PolycoreSettings,
    SimplifyConfig,
    get_default_settings,
)

__all__ = [
    "FitConfig",
    "GeometryConfig",
    "LoggingConfig",
    "PolycoreSettings",
    "SimplifyConfig",
    "get_default_settings",
]
