"""Configuration settings for Polycore."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from polycore.domain import DEFAULT_ACCURACY, FitKind

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GeometryConfig(BaseModel):
    """Configuration for floating point comparisons in geometry operations."""

    accuracy: float = Field(
        default=DEFAULT_ACCURACY,
        gt=0.0,
        le=1.0,
        description="Tolerance used for floating point equality comparisons",
    )


class SimplifyConfig(BaseModel):
    """Configuration for boundary simplification."""

    tolerance: float = Field(
        default=0.1,
        ge=0.0,
        description="Distance tolerance for vertex removal (coordinate units)",
    )


class FitConfig(BaseModel):
    """Configuration for radial (circle/ellipse) fitting."""

    kind: FitKind = Field(
        default=FitKind.CIRCLE,
        description="Shape to fit",
    )
    pivot_tolerance: float = Field(
        default=1e-12,
        gt=0.0,
        le=1e-3,
        description="Relative pivot magnitude below which a system is singular",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError("must be one of " + ", ".join(LOG_LEVELS))
        return level


class PolycoreSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    simplify: SimplifyConfig = Field(default_factory=SimplifyConfig)
    fit: FitConfig = Field(default_factory=FitConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolycoreSettings:
    """Get default application settings."""
    return PolycoreSettings()
