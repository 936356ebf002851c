"""Connectorkit - Orthogonal connector routing and anchor attachment.

Connectorkit computes how a connector line travels between two shapes (or
free points) on a canvas, and how connector endpoints discover and snap to
attachment points on shapes.

Example:
    >>> from connectorkit.core import plan_elbow_route
    >>> from connectorkit.domain import Point
    >>> plan_elbow_route(Point(0, 0), Point(0, 50), None)
    [Point(x=0, y=0), Point(x=0, y=50)]
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
