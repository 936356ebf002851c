"""Geometric operations for connector routing and hit testing.

This module provides the mathematical utilities the planner and the anchor
finder depend on:
- Euclidean and Manhattan distances
- Axis-aligned segment intersection (strict: touching overlap counts)
- Bend and self-intersection counting on orthogonal polylines
- Point to segment and point to quadratic curve distance
- Rotation about a center point

All functions are pure and stateless. Callers must supply finite coordinates.
"""

import math
from collections.abc import Sequence

from connectorkit.core._bezier import flatten_quadratic
from connectorkit.domain import BoundsRect, Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def manhattan_length(points: Sequence[Point]) -> float:
    """Sum of |dx| + |dy| over consecutive point pairs.

    Args:
        points: Polyline points

    Returns:
        Manhattan length, 0.0 for fewer than two points
    """
    total = 0.0
    for i in range(1, len(points)):
        total += abs(points[i].x - points[i - 1].x) + abs(points[i].y - points[i - 1].y)
    return total


def count_bends(points: Sequence[Point]) -> int:
    """Count direction changes along an orthogonal polyline.

    A segment counts as vertical when its endpoints share x, horizontal
    otherwise.

    Args:
        points: Orthogonal polyline points

    Returns:
        Number of bends
    """
    bends = 0
    for i in range(2, len(points)):
        a, b, c = points[i - 2], points[i - 1], points[i]
        first_vertical = a.x == b.x
        second_vertical = b.x == c.x
        if first_vertical != second_vertical:
            bends += 1
    return bends


def segments_intersect(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """Test two axis-aligned segments for an illegal intersection.

    Segments sharing an exact endpoint never intersect, so T-junctions at
    shared vertices are legal. Perpendicular segments intersect when the
    crossing point lies within both ranges (inclusive). Parallel segments on
    the same line intersect when their ranges overlap or touch.

    Args:
        a1: First endpoint of segment A
        a2: Second endpoint of segment A
        b1: First endpoint of segment B
        b2: Second endpoint of segment B

    Returns:
        True if the segments cross, touch or overlap

    Examples:
        >>> segments_intersect(Point(0, 5), Point(10, 5), Point(5, 0), Point(5, 10))
        True
        >>> segments_intersect(Point(0, 0), Point(10, 0), Point(10, 0), Point(10, 10))
        False
    """
    if a1 == b1 or a1 == b2 or a2 == b1 or a2 == b2:
        return False

    a_horizontal = a1.y == a2.y
    b_horizontal = b1.y == b2.y

    if a_horizontal != b_horizontal:
        h1, h2 = (a1, a2) if a_horizontal else (b1, b2)
        v1, v2 = (b1, b2) if a_horizontal else (a1, a2)

        ix = v1.x
        iy = h1.y
        return (
            min(h1.x, h2.x) <= ix <= max(h1.x, h2.x)
            and min(v1.y, v2.y) <= iy <= max(v1.y, v2.y)
        )

    if a_horizontal and a1.y == b1.y:
        return _ranges_touch(a1.x, a2.x, b1.x, b2.x)

    if not a_horizontal and a1.x == b1.x:
        return _ranges_touch(a1.y, a2.y, b1.y, b2.y)

    return False


def _ranges_touch(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    """Check whether two closed 1D ranges overlap or touch."""
    low = max(min(a_start, a_end), min(b_start, b_end))
    high = min(max(a_start, a_end), max(b_start, b_end))
    return low <= high


def count_self_intersections(points: Sequence[Point]) -> int:
    """Count illegal intersections between non-adjacent polyline segments.

    Zero-length segments are dropped first. Segments whose indices differ by
    at most one share an endpoint legitimately and are not compared.

    Args:
        points: Orthogonal polyline points

    Returns:
        Number of intersecting segment pairs
    """
    segments: list[tuple[Point, Point]] = []
    for i in range(1, len(points)):
        a, b = points[i - 1], points[i]
        if a == b:
            continue
        segments.append((a, b))

    count = 0
    for i in range(len(segments)):
        for j in range(i + 2, len(segments)):
            if segments_intersect(*segments[i], *segments[j]):
                count += 1
    return count


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance)
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    # Degenerate segment
    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-12:
        return seg_start, distance(point, seg_start)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = Point(seg_start.x + t * dx, seg_start.y + t * dy)
    return nearest, distance(point, nearest)


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to a line segment."""
    return nearest_point_on_segment(point, seg_start, seg_end)[1]


def distance_to_polyline(point: Point, points: Sequence[Point]) -> float:
    """Minimum distance from a point to any segment of a polyline.

    Args:
        point: Query point
        points: Polyline points (at least one)

    Returns:
        Minimum distance

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Polyline must have at least 1 point")
    if len(points) == 1:
        return distance(point, points[0])
    return min(distance_to_segment(point, points[i - 1], points[i]) for i in range(1, len(points)))


def distance_to_quadratic(
    point: Point, start: Point, control: Point, end: Point, tolerance: float = 0.25
) -> float:
    """Approximate distance from a point to a quadratic Bezier curve.

    The curve is flattened by recursive subdivision until each piece is within
    tolerance of the true curve, so the result is accurate to about tolerance.

    Args:
        point: Query point
        start: Curve start point
        control: Curve control point
        end: Curve end point
        tolerance: Flattening tolerance in canvas units (must be positive)

    Returns:
        Approximate minimum distance to the curve

    Raises:
        ValueError: If tolerance is not positive
    """
    if tolerance <= 0:
        raise ValueError(f"Flattening tolerance must be positive, got {tolerance}")
    flattened = flatten_quadratic([start, control, end], tolerance)
    return distance_to_polyline(point, flattened)


def rotate_point(point: Point, center: Point, degrees: float) -> Point:
    """Rotate a point about a center by the given angle.

    Canvas y grows downwards, so positive angles rotate clockwise on screen.
    A zero angle returns the point unchanged without touching trigonometry.

    Args:
        point: Point to rotate
        center: Rotation center
        degrees: Rotation angle in degrees

    Returns:
        Rotated point
    """
    if degrees == 0:
        return point

    rad = math.radians(degrees)
    cos = math.cos(rad)
    sin = math.sin(rad)

    dx = point.x - center.x
    dy = point.y - center.y
    return Point(
        center.x + dx * cos - dy * sin,
        center.y + dx * sin + dy * cos,
    )


def polyline_bounds(points: Sequence[Point]) -> BoundsRect:
    """Axis-aligned bounds of a set of points.

    Args:
        points: Points to enclose (at least one)

    Returns:
        Tight bounding rectangle

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute bounds of an empty point list")
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundsRect(min(xs), min(ys), max(xs), max(ys))
