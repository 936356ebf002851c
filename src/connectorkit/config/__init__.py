"""Configuration management for connectorkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RoutingConfig: Elbow planner settings (stub length, score weights)
- SnapConfig: Anchor snapping settings
- BoundsConfig: Connector bounds and stroke settings
- LoggingConfig: Logging settings
- ConnectorKitSettings: Main application settings
"""

from connectorkit.config.settings import (
    BoundsConfig,
    ConnectorKitSettings,
    LoggingConfig,
    RoutingConfig,
    SnapConfig,
    get_default_settings,
)

__all__ = [
    "BoundsConfig",
    "ConnectorKitSettings",
    "LoggingConfig",
    "RoutingConfig",
    "SnapConfig",
    "get_default_settings",
]
