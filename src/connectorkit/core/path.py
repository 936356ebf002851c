"""SVG path data for connectors.

Paths are built from the same planner output the bounds calculator uses,
so what is drawn always fits the connector's container.
"""

import math
from collections.abc import Sequence

from connectorkit.core.bounds import CURVED, ELBOW, connector_kind, default_curve_control
from connectorkit.core.geometry import distance
from connectorkit.core.routing import ElbowRouter
from connectorkit.domain import Direction, Point

ARROW_LENGTH = 10.0
ARROW_HALF_ANGLE = math.pi / 6
MIN_ARROW_SEGMENT = 1e-3
MIN_ARROW_LEAD = 0.5


def _fmt(value: float) -> str:
    return f"{value:g}"


def arrowhead(start: Point, end: Point, tip: Point) -> str:
    """Open arrowhead at tip, aligned with the segment start -> end.

    Args:
        start: Segment start
        end: Segment end (gives the arrow's heading)
        tip: Arrow tip position

    Returns:
        Path fragment (with leading space), or "" for a degenerate segment
    """
    dx = end.x - start.x
    dy = end.y - start.y
    seg_len = math.hypot(dx, dy)
    if seg_len < MIN_ARROW_SEGMENT:
        return ""

    angle = math.atan2(dy, dx)
    length = min(ARROW_LENGTH, seg_len * 0.8)

    x1 = tip.x - length * math.cos(angle - ARROW_HALF_ANGLE)
    y1 = tip.y - length * math.sin(angle - ARROW_HALF_ANGLE)
    x2 = tip.x - length * math.cos(angle + ARROW_HALF_ANGLE)
    y2 = tip.y - length * math.sin(angle + ARROW_HALF_ANGLE)

    return (
        f" M {_fmt(x1)} {_fmt(y1)} L {_fmt(tip.x)} {_fmt(tip.y)} L {_fmt(x2)} {_fmt(y2)}"
    )


def previous_point_for_arrow(points: Sequence[Point]) -> Point | None:
    """Last point far enough from the end to orient an arrowhead.

    Segments shorter than half a pixel (the handle sitting on the end) are
    skipped.
    """
    if len(points) < 2:
        return None
    end = points[-1]
    for p in reversed(points[:-1]):
        if distance(p, end) >= MIN_ARROW_LEAD:
            return p
    return None


def straight_path(start: Point, end: Point, arrow_start: bool = False, arrow_end: bool = False) -> str:
    """Path for a straight connector."""
    path = f"M {_fmt(start.x)} {_fmt(start.y)} L {_fmt(end.x)} {_fmt(end.y)}"
    if arrow_start:
        path += arrowhead(end, start, start)
    if arrow_end:
        path += arrowhead(start, end, end)
    return path


def polyline_path(points: Sequence[Point]) -> str:
    """Move-to the first point, line-to every following point."""
    head, *rest = points
    path = f"M {_fmt(head.x)} {_fmt(head.y)}"
    for p in rest:
        path += f" L {_fmt(p.x)} {_fmt(p.y)}"
    return path


def elbow_path(
    start: Point,
    end: Point,
    control: Point | None,
    start_dir: Direction | None = None,
    end_dir: Direction | None = None,
    arrow_end: bool = False,
    router: ElbowRouter | None = None,
) -> str:
    """Path for an elbow connector."""
    router = router or ElbowRouter()
    points = router.plan(start, end, control, start_dir, end_dir).points
    path = polyline_path(points)
    if arrow_end:
        prev = previous_point_for_arrow(points)
        if prev is not None:
            path += arrowhead(prev, end, end)
    return path


def curved_path(start: Point, end: Point, control: Point, arrow_end: bool = False) -> str:
    """Path for a quadratic curved connector."""
    path = (
        f"M {_fmt(start.x)} {_fmt(start.y)} "
        f"Q {_fmt(control.x)} {_fmt(control.y)} {_fmt(end.x)} {_fmt(end.y)}"
    )
    if arrow_end:
        path += arrowhead(control, end, end)
    return path


def connector_path(
    shape_type: str | None,
    start: Point,
    end: Point,
    control: Point | None = None,
    start_dir: Direction | None = None,
    end_dir: Direction | None = None,
    arrow_start: bool = False,
    arrow_end: bool = False,
) -> str:
    """Path data for any connector shape type.

    Any shape type containing "arrow" draws an end arrowhead.

    Args:
        shape_type: Connector shape type
        start: Start point
        end: End point
        control: Stored control point, if any
        start_dir: Start anchor direction (elbow only)
        end_dir: End anchor direction (elbow only)
        arrow_start: Draw a start arrowhead (straight only)
        arrow_end: Draw an end arrowhead

    Returns:
        SVG path data
    """
    arrow_end = arrow_end or "arrow" in (shape_type or "")
    kind = connector_kind(shape_type)

    if kind == ELBOW:
        return elbow_path(start, end, control, start_dir, end_dir, arrow_end)
    if kind == CURVED:
        ctrl = control if control is not None else default_curve_control(start, end)
        return curved_path(start, end, ctrl, arrow_end)
    return straight_path(start, end, arrow_start, arrow_end)
