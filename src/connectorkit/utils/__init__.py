"""Utility functions for connectorkit.

This module provides utility functions including:

- Structured logging setup and configuration
- Routing/snapping statistics
"""

from connectorkit.utils.logging import (
    RoutingLogger,
    RoutingStats,
    configure_logging,
)

__all__ = [
    "RoutingLogger",
    "RoutingStats",
    "configure_logging",
]
