"""Command-line interface for connectorkit.

This module provides the CLI using Typer with rich output for inspecting
the routing and anchor engine from a terminal.

Key features:
- Shape anchor tables, resolved on a rotated frame
- Elbow route planning with handle and fallback reporting
- Connector bounds
- Snap queries against a JSON scene
"""

from connectorkit.cli.app import cli, main

__all__ = ["cli", "main"]
