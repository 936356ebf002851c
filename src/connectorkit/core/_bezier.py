"""Internal quadratic Bezier helpers.

This is an internal module used by the geometry and bounds calculations.
Not intended for public use.
"""

import math

from connectorkit.domain import Point


def quadratic_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    mt = 1.0 - t
    a = mt * mt
    b = 2.0 * mt * t
    c = t * t
    return Point(a * p0.x + b * p1.x + c * p2.x, a * p0.y + b * p1.y + c * p2.y)


def extremum_parameter(c0: float, c1: float, c2: float, epsilon: float) -> float | None:
    """Parameter where one coordinate of a quadratic curve is stationary.

    Solves d/dt[(1-t)^2 c0 + 2(1-t)t c1 + t^2 c2] = 0, which gives
    t = (c0 - c1) / (c0 - 2 c1 + c2).

    Args:
        c0: Start coordinate
        c1: Control coordinate
        c2: End coordinate
        epsilon: Denominators with magnitude below this are treated as zero

    Returns:
        t strictly inside (0, 1), or None when the extremum is at an endpoint
        or the axis is (nearly) linear
    """
    denom = c0 - 2.0 * c1 + c2
    if abs(denom) < epsilon:
        return None
    t = (c0 - c1) / denom
    if 0.0 < t < 1.0:
        return t
    return None


def flatten_quadratic(points: list[Point], tolerance: float) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2 = points

    curve_mid = quadratic_point(p0, p1, p2, 0.5)

    # Chord midpoint against curve midpoint measures flatness
    chord_mid_x = (p0.x + p2.x) / 2
    chord_mid_y = (p0.y + p2.y) / 2
    distance = math.hypot(curve_mid.x - chord_mid_x, curve_mid.y - chord_mid_y)

    if distance <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    left_ctrl = Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
    right_ctrl = Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)

    left = flatten_quadratic([p0, left_ctrl, curve_mid], tolerance)
    right = flatten_quadratic([curve_mid, right_ctrl, p2], tolerance)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
