"""Core algorithms for connectorkit.

This module contains the algorithms for:

- Geometry primitives (segment intersection, distances, rotation)
- Shape anchor table lookup
- Anchor resolution (absolute positions, rotation-aware exit directions)
- Nearest-anchor snapping over a page of widgets
- Elbow route planning (candidate generation, validation, scoring)
- Connector bounds and SVG path data

All functions are pure: they read their inputs as a snapshot and keep no
state between calls.

Key functions:
- get_anchors: Anchor set for a shape type
- anchor_direction / direction_with_rotation: Exit direction of an anchor
- absolute_position: Canvas position of an anchor on a frame
- plan_elbow_route: Orthogonal route between two points
- compute_connector_bounds: Container bounds of a connector

Key classes:
- AnchorFinder: Nearest-anchor queries over a widget source
- ElbowRouter: Configurable elbow planner
"""

from connectorkit.core.anchors import (
    anchors_for_widget,
    find_anchor,
    get_anchors,
    get_default_anchors,
    get_shape_types_with_anchors,
    has_custom_anchors,
)
from connectorkit.core.bounds import compute_connector_bounds, connector_kind, quadratic_bounds
from connectorkit.core.finder import AnchorFinder, InMemoryWidgetSource, WidgetSource
from connectorkit.core.geometry import (
    count_bends,
    count_self_intersections,
    distance,
    distance_to_quadratic,
    distance_to_segment,
    manhattan_length,
    nearest_point_on_segment,
    rotate_point,
    segments_intersect,
)
from connectorkit.core.path import connector_path
from connectorkit.core.resolver import (
    absolute_position,
    anchor_direction,
    direction_with_rotation,
    parse_direction,
)
from connectorkit.core.routing import (
    ElbowRouter,
    compute_elbow_handle,
    default_elbow_control,
    default_elbow_handle,
    is_turn_allowed,
    plan_elbow_route,
    plan_elbow_route_detailed,
)

__all__ = [
    # Finder classes
    "AnchorFinder",
    # Routing classes
    "ElbowRouter",
    "InMemoryWidgetSource",
    "WidgetSource",
    # Anchor functions
    "absolute_position",
    "anchor_direction",
    "anchors_for_widget",
    # Routing functions
    "compute_connector_bounds",
    "compute_elbow_handle",
    "connector_kind",
    "connector_path",
    # Geometry functions
    "count_bends",
    "count_self_intersections",
    "default_elbow_control",
    "default_elbow_handle",
    "direction_with_rotation",
    "distance",
    "distance_to_quadratic",
    "distance_to_segment",
    "find_anchor",
    "get_anchors",
    "get_default_anchors",
    "get_shape_types_with_anchors",
    "has_custom_anchors",
    "is_turn_allowed",
    "manhattan_length",
    "nearest_point_on_segment",
    "parse_direction",
    "plan_elbow_route",
    "plan_elbow_route_detailed",
    "quadratic_bounds",
    "rotate_point",
    "segments_intersect",
]
