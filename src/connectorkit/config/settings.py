"""Configuration settings for connectorkit."""

from pathlib import Path

from pydantic import BaseModel, Field


class RoutingConfig(BaseModel):
    """Configuration for elbow route planning."""

    stub_length: float = Field(
        default=30.0,
        ge=0.0,
        le=500.0,
        description="Distance a connector travels straight out of an anchor before turning",
    )
    intersection_weight: float = Field(
        default=1_000_000.0,
        gt=0.0,
        description="Score penalty per illegal self-intersection",
    )
    bend_weight: float = Field(
        default=10_000.0,
        gt=0.0,
        description="Score penalty per bend",
    )


class SnapConfig(BaseModel):
    """Configuration for anchor snapping."""

    threshold: float = Field(
        default=20.0,
        gt=0.0,
        le=200.0,
        description="Maximum distance in pixels at which an endpoint snaps to an anchor",
    )


class BoundsConfig(BaseModel):
    """Configuration for connector bounds and stroke sizing."""

    denominator_epsilon: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Guard for near-zero denominators when solving curve extrema",
    )
    min_stroke_width: float = Field(
        default=2.0,
        ge=0.0,
        description="Minimum rendered stroke width",
    )
    hit_padding: float = Field(
        default=4.0,
        ge=0.0,
        description="Extra width added to the stroke for pointer hit testing",
    )

    def stroke_buffer(self, stroke_width: float | None) -> float:
        """Visual buffer around a connector path for the given stroke.

        Args:
            stroke_width: Configured stroke width (None means default)

        Returns:
            Half of the hit stroke width
        """
        width = max(stroke_width if stroke_width is not None else 0.0, self.min_stroke_width)
        return (width + self.hit_padding) / 2


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


class ConnectorKitSettings(BaseModel):
    """Main application settings."""

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    snap: SnapConfig = Field(default_factory=SnapConfig)
    bounds: BoundsConfig = Field(default_factory=BoundsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ConnectorKitSettings:
    """Get default application settings."""
    return ConnectorKitSettings()
