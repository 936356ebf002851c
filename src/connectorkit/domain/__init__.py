"""Domain models for connectorkit.

This module contains the value types describing canvas geometry, anchors,
attachments, routes and widget snapshots. All models are:

- Immutable (frozen dataclasses with slots)
- Plain values, safe to pass by value into pure functions
- Serializable to dictionaries using the editor's camelCase keys

Key classes:
- Point, Size, BoundsRect, ShapeFrame: Canvas geometry
- Direction: Exit direction of an anchor
- AnchorPoint: Percentage-based anchor on a shape
- AnchorAttachment: Connector endpoint reference to an anchor
- NearestAnchorResult: Snap query result
- RouteCandidate, ElbowRoute: Elbow planner output
- Widget, ConnectorEndpointRef: Widget snapshots for anchor lookups
"""

from connectorkit.domain.anchor import (
    AnchorAttachment,
    AnchorPoint,
    Direction,
    NearestAnchorResult,
)
from connectorkit.domain.geometry import BoundsRect, Point, ShapeFrame, Size
from connectorkit.domain.route import ElbowRoute, RouteCandidate
from connectorkit.domain.widget import (
    CONNECTOR_TYPE,
    OBJECT_TYPE,
    ConnectorEndpointRef,
    Widget,
)

__all__: list[str] = [
    # Constants
    "CONNECTOR_TYPE",
    "OBJECT_TYPE",
    # Enums
    "Direction",
    # Geometry
    "BoundsRect",
    "Point",
    "ShapeFrame",
    "Size",
    # Anchors
    "AnchorAttachment",
    "AnchorPoint",
    "NearestAnchorResult",
    # Routes
    "ElbowRoute",
    "RouteCandidate",
    # Widgets
    "ConnectorEndpointRef",
    "Widget",
]
