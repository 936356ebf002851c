"""Connector bounding box calculation.

The container of a connector widget must enclose exactly what is drawn:
- Elbow connectors take the extrema of the planner's own polyline
- Curved connectors take the analytic extrema of their quadratic Bezier,
  using the default control when none is stored
- Straight connectors take their two endpoints and ignore any control

A visual buffer (derived from stroke width) is added on every side.
"""

from connectorkit.config import BoundsConfig, RoutingConfig
from connectorkit.core._bezier import extremum_parameter, quadratic_point
from connectorkit.core.geometry import polyline_bounds
from connectorkit.core.routing import ElbowRouter
from connectorkit.domain import BoundsRect, Direction, Point

ELBOW = "elbow"
CURVED = "curved"
STRAIGHT = "straight"


def connector_kind(shape_type: str | None) -> str:
    """Classify a connector shape type.

    Args:
        shape_type: Connector shape type (e.g. "elbow-arrow")

    Returns:
        "elbow", "curved" or "straight"
    """
    if not shape_type:
        return STRAIGHT
    if shape_type.startswith("elbow"):
        return ELBOW
    if shape_type.startswith("curved"):
        return CURVED
    return STRAIGHT


def default_curve_control(start: Point, end: Point) -> Point:
    """Default curve control: 50 px above the chord midpoint."""
    return Point((start.x + end.x) / 2, (start.y + end.y) / 2 - 50)


def quadratic_bounds(start: Point, control: Point, end: Point, epsilon: float = 1e-9) -> BoundsRect:
    """Tight bounds of a quadratic Bezier curve.

    Per axis, the stationary parameter t = (P0 - P1) / (P0 - 2 P1 + P2) is
    included only when 0 < t < 1.

    Args:
        start: Curve start
        control: Curve control point
        end: Curve end
        epsilon: Near-zero guard for the denominator

    Returns:
        Bounding rectangle of the curve
    """
    points = [start, end]
    for t in (
        extremum_parameter(start.x, control.x, end.x, epsilon),
        extremum_parameter(start.y, control.y, end.y, epsilon),
    ):
        if t is not None:
            points.append(quadratic_point(start, control, end, t))
    return polyline_bounds(points)


def compute_connector_bounds(
    start: Point,
    end: Point,
    control: Point | None,
    buffer: float,
    shape_type: str | None,
    start_dir: Direction | None = None,
    end_dir: Direction | None = None,
    routing: RoutingConfig | None = None,
    config: BoundsConfig | None = None,
) -> BoundsRect:
    """Bounding box of a rendered connector plus a visual buffer.

    Elbow shapes are delegated to the elbow planner with the same inputs the
    renderer uses, so the container always matches the drawn polyline.

    Args:
        start: Absolute start point
        end: Absolute end point
        control: Control point (curve control or elbow handle control);
            ignored by straight connectors
        buffer: Margin added on every side
        shape_type: Connector shape type
        start_dir: Start anchor direction (elbow only)
        end_dir: End anchor direction (elbow only)
        routing: Routing configuration for elbow planning
        config: Bounds configuration

    Returns:
        Bounding rectangle grown by buffer
    """
    config = config or BoundsConfig()
    kind = connector_kind(shape_type)

    if kind == ELBOW:
        route = ElbowRouter(routing).plan(start, end, control, start_dir, end_dir)
        bounds = polyline_bounds(route.points)
    elif kind == CURVED:
        ctrl = control if control is not None else default_curve_control(start, end)
        bounds = quadratic_bounds(start, ctrl, end, config.denominator_epsilon)
    else:
        bounds = polyline_bounds([start, end])

    return bounds.expanded(buffer)
