"""Per-shape anchor table.

Anchors are percentages (0-100) of a widget's unrotated bounding box. Shape
outlines are drawn with a tight viewBox and stretched to fill the widget, so
an outline vertex at SVG coordinate c maps to
``(c - viewBox.min) / viewBox.size * 100``.

For example the triangle path ``M 50 5 L 95 95 L 5 95 Z`` has viewBox
``5 5 90 90``, so its apex (50, 5) becomes (50%, 0%).

The table is immutable process-wide configuration. Unknown shape types fall
back to the 8-point rectangular set, so lookups never return an empty list.
"""

from collections.abc import Mapping
from types import MappingProxyType

from connectorkit.domain import OBJECT_TYPE, AnchorPoint, Widget

AnchorSet = tuple[AnchorPoint, ...]

RECTANGULAR_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0),
    AnchorPoint("top-right", 100, 0),
    AnchorPoint("right", 100, 50),
    AnchorPoint("bottom-right", 100, 100),
    AnchorPoint("bottom", 50, 100),
    AnchorPoint("bottom-left", 0, 100),
    AnchorPoint("left", 0, 50),
    AnchorPoint("top-left", 0, 0),
)

# Diagonals sit at 45 degrees on the ellipse
CIRCLE_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0),
    AnchorPoint("top-right", 85.36, 14.64),
    AnchorPoint("right", 100, 50),
    AnchorPoint("bottom-right", 85.36, 85.36),
    AnchorPoint("bottom", 50, 100),
    AnchorPoint("bottom-left", 14.64, 85.36),
    AnchorPoint("left", 0, 50),
    AnchorPoint("top-left", 14.64, 14.64),
)

# M 50 5 L 95 95 L 5 95 Z, viewBox 5 5 90 90
TRIANGLE_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top vertex"),
    AnchorPoint("bottom-right", 100, 100, "bottom-right vertex"),
    AnchorPoint("bottom-left", 0, 100, "bottom-left vertex"),
    AnchorPoint("right", 75, 50, "right edge mid"),
    AnchorPoint("bottom", 50, 100, "bottom edge mid"),
    AnchorPoint("left", 25, 50, "left edge mid"),
)

# M 50 5 L 95 50 L 50 95 L 5 50 Z, viewBox 5 5 90 90
DIAMOND_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top vertex"),
    AnchorPoint("right", 100, 50, "right vertex"),
    AnchorPoint("bottom", 50, 100, "bottom vertex"),
    AnchorPoint("left", 0, 50, "left vertex"),
    AnchorPoint("top-right", 75, 25, "top-right edge mid"),
    AnchorPoint("bottom-right", 75, 75, "bottom-right edge mid"),
    AnchorPoint("bottom-left", 25, 75, "bottom-left edge mid"),
    AnchorPoint("top-left", 25, 25, "top-left edge mid"),
)

# M 50 5 L 95 38 L 79 95 L 21 95 L 5 38 Z, viewBox 5 5 90 90
PENTAGON_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top vertex"),
    AnchorPoint("top-right", 100, 36.67, "top-right vertex"),
    AnchorPoint("bottom-right", 82.22, 100, "bottom-right vertex"),
    AnchorPoint("bottom-left", 17.78, 100, "bottom-left vertex"),
    AnchorPoint("top-left", 0, 36.67, "top-left vertex"),
    AnchorPoint("right", 91.11, 68.33, "right edge mid"),
    AnchorPoint("bottom", 50, 100, "bottom edge mid"),
    AnchorPoint("left", 8.89, 68.33, "left edge mid"),
)

# M 25 5 L 75 5 L 100 50 L 75 95 L 25 95 L 0 50 Z, viewBox 0 5 100 90
HEXAGON_ANCHORS: AnchorSet = (
    AnchorPoint("top-left", 25, 0, "top-left vertex"),
    AnchorPoint("top-right", 75, 0, "top-right vertex"),
    AnchorPoint("right", 100, 50, "right vertex"),
    AnchorPoint("bottom-right", 75, 100, "bottom-right vertex"),
    AnchorPoint("bottom-left", 25, 100, "bottom-left vertex"),
    AnchorPoint("left", 0, 50, "left vertex"),
    AnchorPoint("top", 50, 0, "top edge mid"),
    AnchorPoint("bottom", 50, 100, "bottom edge mid"),
)

# M 30 5 L 70 5 L 95 30 L 95 70 L 70 95 L 30 95 L 5 70 L 5 30 Z, viewBox 5 5 90 90
OCTAGON_ANCHORS: AnchorSet = (
    AnchorPoint("top-left", 27.78, 0, "top-left vertex"),
    AnchorPoint("top", 50, 0, "top edge mid"),
    AnchorPoint("top-right", 72.22, 0, "top-right vertex"),
    AnchorPoint("right", 100, 50, "right edge mid"),
    AnchorPoint("bottom-right", 72.22, 100, "bottom-right vertex"),
    AnchorPoint("bottom", 50, 100, "bottom edge mid"),
    AnchorPoint("bottom-left", 27.78, 100, "bottom-left vertex"),
    AnchorPoint("left", 0, 50, "left edge mid"),
)

# M 20 5 L 95 5 L 80 95 L 5 95 Z, viewBox 5 5 90 90
PARALLELOGRAM_ANCHORS: AnchorSet = (
    AnchorPoint("top-left", 16.67, 0, "top-left vertex"),
    AnchorPoint("top-right", 100, 0, "top-right vertex"),
    AnchorPoint("bottom-right", 83.33, 100, "bottom-right vertex"),
    AnchorPoint("bottom-left", 0, 100, "bottom-left vertex"),
    AnchorPoint("top", 58.33, 0, "top edge mid"),
    AnchorPoint("right", 91.67, 50, "right edge mid"),
    AnchorPoint("bottom", 41.67, 100, "bottom edge mid"),
    AnchorPoint("left", 8.33, 50, "left edge mid"),
)

# M 20 5 L 80 5 L 95 95 L 5 95 Z, viewBox 5 5 90 90
TRAPEZOID_ANCHORS: AnchorSet = (
    AnchorPoint("top-left", 16.67, 0, "top-left vertex"),
    AnchorPoint("top-right", 83.33, 0, "top-right vertex"),
    AnchorPoint("bottom-right", 100, 100, "bottom-right vertex"),
    AnchorPoint("bottom-left", 0, 100, "bottom-left vertex"),
    AnchorPoint("top", 50, 0, "top edge mid"),
    AnchorPoint("right", 91.67, 50, "right edge mid"),
    AnchorPoint("bottom", 50, 100, "bottom edge mid"),
    AnchorPoint("left", 8.33, 50, "left edge mid"),
)

# M 5 40 L 60 40 L 60 20 L 95 50 L 60 80 L 60 60 L 5 60 Z, viewBox 5 20 90 60
ARROW_RIGHT_ANCHORS: AnchorSet = (
    AnchorPoint("left", 0, 50, "left mid"),
    AnchorPoint("top-left", 0, 33.33, "top-left"),
    AnchorPoint("top", 61.11, 0, "top notch"),
    AnchorPoint("right", 100, 50, "arrow tip"),
    AnchorPoint("bottom", 61.11, 100, "bottom notch"),
    AnchorPoint("bottom-left", 0, 66.67, "bottom-left"),
)

# M 95 40 L 40 40 L 40 20 L 5 50 L 40 80 L 40 60 L 95 60 Z, viewBox 5 20 90 60
ARROW_LEFT_ANCHORS: AnchorSet = (
    AnchorPoint("right", 100, 50, "right mid"),
    AnchorPoint("top-right", 100, 33.33, "top-right"),
    AnchorPoint("top", 38.89, 0, "top notch"),
    AnchorPoint("left", 0, 50, "arrow tip"),
    AnchorPoint("bottom", 38.89, 100, "bottom notch"),
    AnchorPoint("bottom-right", 100, 66.67, "bottom-right"),
)

# M 40 95 L 40 40 L 20 40 L 50 5 L 80 40 L 60 40 L 60 95 Z, viewBox 20 5 60 90
ARROW_UP_ANCHORS: AnchorSet = (
    AnchorPoint("bottom", 50, 100, "bottom mid"),
    AnchorPoint("bottom-left", 33.33, 100, "bottom-left"),
    AnchorPoint("left", 0, 38.89, "left notch"),
    AnchorPoint("top", 50, 0, "arrow tip"),
    AnchorPoint("right", 100, 38.89, "right notch"),
    AnchorPoint("bottom-right", 66.67, 100, "bottom-right"),
)

# M 40 5 L 40 60 L 20 60 L 50 95 L 80 60 L 60 60 L 60 5 Z, viewBox 20 5 60 90
ARROW_DOWN_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top mid"),
    AnchorPoint("top-left", 33.33, 0, "top-left"),
    AnchorPoint("left", 0, 61.11, "left notch"),
    AnchorPoint("bottom", 50, 100, "arrow tip"),
    AnchorPoint("right", 100, 61.11, "right notch"),
    AnchorPoint("top-right", 66.67, 0, "top-right"),
)

# M 5 50 L 25 25 L 25 40 L 75 40 L 75 25 L 95 50 L 75 75 L 75 60 L 25 60 L 25 75 Z,
# viewBox 5 25 90 50
ARROW_DOUBLE_ANCHORS: AnchorSet = (
    AnchorPoint("left", 0, 50, "left tip"),
    AnchorPoint("right", 100, 50, "right tip"),
    AnchorPoint("top-left", 22.22, 0, "top-left notch"),
    AnchorPoint("top-right", 77.78, 0, "top-right notch"),
    AnchorPoint("bottom-left", 22.22, 100, "bottom-left notch"),
    AnchorPoint("bottom-right", 77.78, 100, "bottom-right notch"),
    AnchorPoint("top", 50, 30, "top mid"),
    AnchorPoint("bottom", 50, 70, "bottom mid"),
)

# M 20 5 Q 5 5 5 50 Q 5 95 20 95 L 80 95 Q 95 95 95 50 Q 95 5 80 5 Z, viewBox 5 5 90 90
FLOWCHART_TERMINATOR_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0),
    AnchorPoint("right", 100, 50),
    AnchorPoint("bottom", 50, 100),
    AnchorPoint("left", 0, 50),
    AnchorPoint("top-right", 83.33, 0),
    AnchorPoint("top-left", 16.67, 0),
    AnchorPoint("bottom-right", 83.33, 100),
    AnchorPoint("bottom-left", 16.67, 100),
)

# M 5 5 L 95 5 L 95 70 L 50 70 L 35 95 L 35 70 L 5 70 Z, viewBox 5 5 90 90
CALLOUT_RECTANGLE_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0),
    AnchorPoint("top-right", 100, 0),
    AnchorPoint("right", 100, 36.11),
    AnchorPoint("bottom-right", 100, 72.22),
    AnchorPoint("bottom", 33.33, 100, "callout tip"),
    AnchorPoint("bottom-left", 0, 72.22),
    AnchorPoint("left", 0, 36.11),
    AnchorPoint("top-left", 0, 0),
)

# Rounded box with a tail at (35, 80), viewBox 5 5 90 75
CALLOUT_ROUNDED_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0),
    AnchorPoint("top-right", 88.89, 0),
    AnchorPoint("right", 100, 40),
    AnchorPoint("bottom-right", 88.89, 80),
    AnchorPoint("bottom", 33.33, 100, "callout tip"),
    AnchorPoint("bottom-left", 11.11, 80),
    AnchorPoint("left", 0, 40),
    AnchorPoint("top-left", 11.11, 0),
)

# Organic outline, approximate positions
CALLOUT_CLOUD_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 5),
    AnchorPoint("top-right", 90, 15),
    AnchorPoint("right", 100, 50),
    AnchorPoint("bottom-right", 80, 80),
    AnchorPoint("bottom", 25, 100, "callout tip"),
    AnchorPoint("bottom-left", 10, 80),
    AnchorPoint("left", 0, 50),
    AnchorPoint("top-left", 15, 15),
)

# M 50 5 L 60 40 L 95 50 L 60 60 L 50 95 L 40 60 L 5 50 L 40 40 Z, viewBox 5 5 90 90
STAR_4_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top point"),
    AnchorPoint("right", 100, 50, "right point"),
    AnchorPoint("bottom", 50, 100, "bottom point"),
    AnchorPoint("left", 0, 50, "left point"),
    AnchorPoint("top-right", 61.11, 38.89, "top-right valley"),
    AnchorPoint("bottom-right", 61.11, 61.11, "bottom-right valley"),
    AnchorPoint("bottom-left", 38.89, 61.11, "bottom-left valley"),
    AnchorPoint("top-left", 38.89, 38.89, "top-left valley"),
)

# M 50 5 L 61 38 L 95 38 L 68 59 L 79 95 L 50 73 L 21 95 L 32 59 L 5 38 L 39 38 Z,
# viewBox 5 5 90 90
STAR_5_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top point"),
    AnchorPoint("top-right", 100, 36.67, "top-right point"),
    AnchorPoint("bottom-right", 82.22, 100, "bottom-right point"),
    AnchorPoint("bottom-left", 17.78, 100, "bottom-left point"),
    AnchorPoint("top-left", 0, 36.67, "top-left point"),
    AnchorPoint("right", 70, 60, "right valley"),
    AnchorPoint("bottom", 50, 75.56, "bottom valley"),
    AnchorPoint("left", 30, 60, "left valley"),
)

STAR_6_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top point"),
    AnchorPoint("top-right", 100, 17, "top-right point"),
    AnchorPoint("right", 78, 44, "right valley"),
    AnchorPoint("bottom-right", 100, 86, "bottom-right point"),
    AnchorPoint("bottom", 50, 100, "bottom point"),
    AnchorPoint("bottom-left", 0, 86, "bottom-left point"),
    AnchorPoint("left", 22, 44, "left valley"),
    AnchorPoint("top-left", 0, 17, "top-left point"),
)

STAR_8_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top point"),
    AnchorPoint("top-right", 88.89, 5.56, "top-right point"),
    AnchorPoint("right", 100, 50, "right point"),
    AnchorPoint("bottom-right", 88.89, 94.44, "bottom-right point"),
    AnchorPoint("bottom", 50, 100, "bottom point"),
    AnchorPoint("bottom-left", 11.11, 94.44, "bottom-left point"),
    AnchorPoint("left", 0, 50, "left point"),
    AnchorPoint("top-left", 11.11, 5.56, "top-left point"),
)

# M 5 20 L 95 20 L 85 50 L 95 80 L 5 80 L 15 50 Z, viewBox 5 20 90 60
BANNER_ANCHORS: AnchorSet = (
    AnchorPoint("top-left", 0, 0, "top-left"),
    AnchorPoint("top", 50, 0, "top mid"),
    AnchorPoint("top-right", 100, 0, "top-right"),
    AnchorPoint("right", 88.89, 50, "right indent"),
    AnchorPoint("bottom-right", 100, 100, "bottom-right"),
    AnchorPoint("bottom", 50, 100, "bottom mid"),
    AnchorPoint("bottom-left", 0, 100, "bottom-left"),
    AnchorPoint("left", 11.11, 50, "left indent"),
)

# Plus sign with 30-unit arms, viewBox 5 5 90 90
CROSS_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top"),
    AnchorPoint("top-right", 66.67, 0, "top arm right"),
    AnchorPoint("right", 100, 50, "right"),
    AnchorPoint("bottom-right", 66.67, 100, "bottom arm right"),
    AnchorPoint("bottom", 50, 100, "bottom"),
    AnchorPoint("bottom-left", 33.33, 100, "bottom arm left"),
    AnchorPoint("left", 0, 50, "left"),
    AnchorPoint("top-left", 33.33, 0, "top arm left"),
)

# Two lobes meeting at (50, 30) with the tip at (50, 90), viewBox 5 10 90 80
HEART_ANCHORS: AnchorSet = (
    AnchorPoint("top-left", 24.44, 0, "left lobe top"),
    AnchorPoint("top", 50, 25, "center dip"),
    AnchorPoint("top-right", 75.56, 0, "right lobe top"),
    AnchorPoint("left", 0, 31.25, "left side"),
    AnchorPoint("right", 100, 31.25, "right side"),
    AnchorPoint("bottom-left", 16.67, 62.5, "left curve"),
    AnchorPoint("bottom-right", 83.33, 62.5, "right curve"),
    AnchorPoint("bottom", 50, 100, "bottom tip"),
)

# M 60 5 L 20 50 L 40 50 L 35 95 L 80 45 L 55 45 Z, viewBox 20 5 60 90
LIGHTNING_ANCHORS: AnchorSet = (
    AnchorPoint("top", 66.67, 0, "top"),
    AnchorPoint("top-left", 33.33, 25, "upper-left edge"),
    AnchorPoint("left", 0, 50, "left point"),
    AnchorPoint("bottom-left", 33.33, 75, "lower-left"),
    AnchorPoint("bottom", 25, 100, "bottom tip"),
    AnchorPoint("right", 100, 44.44, "right point"),
    AnchorPoint("top-right", 83.33, 22.22, "upper-right edge"),
)

# Crescent between (30, 50) and (45, 50), viewBox 30 10 40 80
MOON_ANCHORS: AnchorSet = (
    AnchorPoint("top", 50, 0, "top"),
    AnchorPoint("top-right", 100, 0, "outer top"),
    AnchorPoint("right", 62.5, 50, "inner curve"),
    AnchorPoint("bottom-right", 100, 100, "outer bottom"),
    AnchorPoint("bottom", 50, 100, "bottom"),
    AnchorPoint("left", 0, 50, "outer curve"),
    AnchorPoint("top-left", 0, 18.75, "upper left"),
    AnchorPoint("bottom-left", 0, 81.25, "lower left"),
)

# Organic outline, approximate positions
CLOUD_ANCHORS: AnchorSet = (
    AnchorPoint("top", 52.63, 0, "top bulge"),
    AnchorPoint("top-right", 84.21, 11.67, "top-right bulge"),
    AnchorPoint("right", 100, 50, "right side"),
    AnchorPoint("bottom-right", 84.21, 100, "bottom-right"),
    AnchorPoint("bottom", 52.63, 100, "bottom mid"),
    AnchorPoint("bottom-left", 21.05, 100, "bottom-left"),
    AnchorPoint("left", 0, 66.67, "left side"),
    AnchorPoint("top-left", 30, 25, "top-left bulge"),
)

LINE_ANCHORS: AnchorSet = (
    AnchorPoint("left", 0, 50, "start"),
    AnchorPoint("right", 100, 50, "end"),
)

SHAPE_ANCHORS: Mapping[str, AnchorSet] = MappingProxyType(
    {
        "rectangle": RECTANGULAR_ANCHORS,
        "square": RECTANGULAR_ANCHORS,
        "rounded-rectangle": RECTANGULAR_ANCHORS,
        "circle": CIRCLE_ANCHORS,
        "ellipse": CIRCLE_ANCHORS,
        "triangle": TRIANGLE_ANCHORS,
        "diamond": DIAMOND_ANCHORS,
        "pentagon": PENTAGON_ANCHORS,
        "hexagon": HEXAGON_ANCHORS,
        "octagon": OCTAGON_ANCHORS,
        "parallelogram": PARALLELOGRAM_ANCHORS,
        "trapezoid": TRAPEZOID_ANCHORS,
        "line": LINE_ANCHORS,
        "line-arrow": LINE_ANCHORS,
        "line-arrow-double": LINE_ANCHORS,
        "elbow-connector": LINE_ANCHORS,
        "elbow-arrow": LINE_ANCHORS,
        "curved-connector": LINE_ANCHORS,
        "curved-arrow": LINE_ANCHORS,
        "s-connector": LINE_ANCHORS,
        "s-arrow": LINE_ANCHORS,
        "arrow-right": ARROW_RIGHT_ANCHORS,
        "arrow-left": ARROW_LEFT_ANCHORS,
        "arrow-up": ARROW_UP_ANCHORS,
        "arrow-down": ARROW_DOWN_ANCHORS,
        "arrow-double": ARROW_DOUBLE_ANCHORS,
        "flowchart-process": RECTANGULAR_ANCHORS,
        "flowchart-decision": DIAMOND_ANCHORS,
        "flowchart-data": PARALLELOGRAM_ANCHORS,
        "flowchart-terminator": FLOWCHART_TERMINATOR_ANCHORS,
        "callout-rectangle": CALLOUT_RECTANGLE_ANCHORS,
        "callout-rounded": CALLOUT_ROUNDED_ANCHORS,
        "callout-cloud": CALLOUT_CLOUD_ANCHORS,
        "star-4": STAR_4_ANCHORS,
        "star-5": STAR_5_ANCHORS,
        "star-6": STAR_6_ANCHORS,
        "star-8": STAR_8_ANCHORS,
        "wave": RECTANGULAR_ANCHORS,
        "banner": BANNER_ANCHORS,
        "cross": CROSS_ANCHORS,
        "heart": HEART_ANCHORS,
        "lightning": LIGHTNING_ANCHORS,
        "moon": MOON_ANCHORS,
        "cloud": CLOUD_ANCHORS,
    }
)


def get_anchors(shape_type: str | None) -> list[AnchorPoint]:
    """Get anchor points for a shape type.

    Falls back to the rectangular set for unknown or missing shape types.

    Args:
        shape_type: Shape type identifier (e.g. "diamond")

    Returns:
        Non-empty list of anchor points in registration order
    """
    if shape_type is None:
        return list(RECTANGULAR_ANCHORS)
    return list(SHAPE_ANCHORS.get(shape_type, RECTANGULAR_ANCHORS))


def get_default_anchors() -> list[AnchorPoint]:
    """Get the default rectangular 8-point anchors."""
    return list(RECTANGULAR_ANCHORS)


def get_shape_types_with_anchors() -> list[str]:
    """Get all registered shape types."""
    return list(SHAPE_ANCHORS)


def has_custom_anchors(shape_type: str) -> bool:
    """Check if a shape has its own (non-rectangular) anchor set."""
    anchors = SHAPE_ANCHORS.get(shape_type)
    return anchors is not None and anchors is not RECTANGULAR_ANCHORS


def find_anchor(shape_type: str | None, position: str) -> AnchorPoint | None:
    """Look up a named anchor on a shape type.

    Args:
        shape_type: Shape type identifier
        position: Anchor name

    Returns:
        The anchor, or None if the shape has no anchor with that name
    """
    for anchor in get_anchors(shape_type):
        if anchor.position == position:
            return anchor
    return None


def anchors_for_widget(widget: Widget) -> list[AnchorPoint]:
    """Get the anchors a widget exposes.

    Object widgets use their shape-specific set; every other widget kind
    (tables, charts, text) uses the rectangular set.

    Args:
        widget: Widget snapshot

    Returns:
        Non-empty list of anchor points
    """
    if widget.type == OBJECT_TYPE:
        return get_anchors(widget.shape_type or "rectangle")
    return get_default_anchors()
