"""Elbow (orthogonal) connector route planning.

This module implements the route planner for elbow connectors:
- Resolving the draggable handle from the stored control point
- Projecting stubs so routes leave anchors perpendicular to their edge
- Generating up to four single-bend-per-leg candidates through the handle
- Compacting candidates without ever dropping the handle
- Rejecting candidates with illegal turns or self-intersections
- Scoring the survivors (crossings >> bends >> length)

Planning is pure and cheap enough to run on every pointer move. Inputs must
be finite numbers.

Key classes:
- ElbowRouter: Configurable planner

Key functions:
- plan_elbow_route: Plan with default settings and return the points
- compute_elbow_handle: Handle position for a control point
- default_elbow_handle / default_elbow_control: Anchor-aware defaults
"""

import logging
from collections.abc import Sequence
from typing import Literal

from connectorkit.config import RoutingConfig
from connectorkit.core.geometry import count_bends, count_self_intersections, manhattan_length
from connectorkit.domain import Direction, ElbowRoute, Point, RouteCandidate

logger = logging.getLogger(__name__)

Axis = Literal["h", "v"]


def compute_elbow_handle(start: Point, end: Point, control: Point | None) -> Point:
    """Handle point an elbow route must pass through.

    With a control point this is the quadratic Bezier midpoint
    0.25*start + 0.5*control + 0.25*end, so elbow and curved connectors
    share the same drag math. Without one, the handle is the implicit
    right-angle corner (start.x, end.y).

    Args:
        start: Route start
        end: Route end
        control: Stored control point, if any

    Returns:
        Handle point
    """
    if control is None:
        return Point(start.x, end.y)
    return Point(
        0.25 * start.x + 0.5 * control.x + 0.25 * end.x,
        0.25 * start.y + 0.5 * control.y + 0.25 * end.y,
    )


def control_from_handle(start: Point, end: Point, handle: Point) -> Point:
    """Inverse of compute_elbow_handle: control = 2*handle - 0.5*(start+end)."""
    return Point(
        2 * handle.x - 0.5 * (start.x + end.x),
        2 * handle.y - 0.5 * (start.y + end.y),
    )


def default_elbow_handle(
    start: Point,
    end: Point,
    start_dir: Direction | None,
    end_dir: Direction | None,
) -> Point:
    """Anchor-aware default handle for a connector without a stored control.

    - No directions: classic L-bend at (start.x, end.y)
    - Both horizontal or both vertical: midpoint, giving a Z shape
    - Horizontal start, vertical end: L-bend at (end.x, start.y)
    - Vertical start, horizontal end: L-bend at (start.x, end.y)

    Args:
        start: Route start
        end: Route end
        start_dir: Start anchor direction
        end_dir: End anchor direction

    Returns:
        Default handle point
    """
    if start_dir is None and end_dir is None:
        return Point(start.x, end.y)

    start_horizontal = start_dir is not None and start_dir.is_horizontal
    end_horizontal = end_dir is not None and end_dir.is_horizontal

    if start_horizontal == end_horizontal:
        return Point((start.x + end.x) / 2, (start.y + end.y) / 2)
    if start_horizontal:
        return Point(end.x, start.y)
    return Point(start.x, end.y)


def default_elbow_control(
    start: Point,
    end: Point,
    start_dir: Direction | None,
    end_dir: Direction | None,
) -> Point:
    """Control point whose handle is the anchor-aware default handle."""
    return control_from_handle(start, end, default_elbow_handle(start, end, start_dir, end_dir))


def _axis_preferences(direction: Direction | None) -> tuple[Axis, Axis]:
    """Both axis orders, the direction's own axis first."""
    if direction is not None and direction.is_horizontal:
        return ("h", "v")
    return ("v", "h")


def connect_orthogonal(a: Point, b: Point, first_axis: Axis) -> list[Point]:
    """Connect two points with at most one bend.

    Args:
        a: Leg start
        b: Leg end
        first_axis: Axis to travel along first when a bend is needed

    Returns:
        [a, b] when aligned, otherwise [a, corner, b]
    """
    if a.x == b.x or a.y == b.y:
        return [a, b]
    if first_axis == "h":
        return [a, Point(b.x, a.y), b]
    return [a, Point(a.x, b.y), b]


def _collinear(a: Point, b: Point, c: Point) -> bool:
    return (a.x == b.x == c.x) or (a.y == b.y == c.y)


def compact_orthogonal_points(points: Sequence[Point], keep: Point) -> list[Point]:
    """Remove duplicate and redundant collinear points from a polyline.

    Consecutive duplicates are dropped first. Then each interior point that
    is collinear with its neighbours is removed, unless it equals keep (the
    handle, which must stay draggable). A collapse that folds a spike back
    onto its own start also drops the resulting duplicate.

    Args:
        points: Orthogonal polyline points
        keep: Point that must never be collapsed away

    Returns:
        Compacted polyline
    """
    deduped: list[Point] = []
    for p in points:
        if not deduped or deduped[-1] != p:
            deduped.append(p)

    out: list[Point] = []
    for p in deduped:
        out.append(p)
        while len(out) >= 3:
            a, b, c = out[-3], out[-2], out[-1]
            if b == keep or not _collinear(a, b, c):
                break
            del out[-2]
            if out[-1] == out[-2]:
                out.pop()
    return out


def is_turn_allowed(
    prev: Point,
    at: Point,
    next_point: Point,
    anchor_dir: Direction,
    is_start: bool,
) -> bool:
    """Check the second segment of a turn against an anchor direction.

    At the start, a horizontal second segment must move in the anchor's
    horizontal sense (right means dx >= 0, left means dx <= 0), and a
    vertical one in its vertical sense. At the end the required sense is
    the opposite of the anchor direction, since the route arrives into the
    shape. Segments on the other axis, or that are not axis-aligned, are
    always allowed.

    Args:
        prev: Point before the turn (unused, kept for symmetry)
        at: Turn point
        next_point: Point after the turn
        anchor_dir: Anchor exit direction
        is_start: True for the start anchor, False for the end anchor

    Returns:
        True if the turn is legal
    """
    dx = next_point.x - at.x
    dy = next_point.y - at.y
    horizontal = dy == 0 and dx != 0
    vertical = dx == 0 and dy != 0

    if not horizontal and not vertical:
        return True

    required = anchor_dir if is_start else anchor_dir.opposite

    if required.is_horizontal and horizontal:
        return dx >= 0 if required is Direction.RIGHT else dx <= 0
    if not required.is_horizontal and vertical:
        return dy >= 0 if required is Direction.DOWN else dy <= 0
    return True


def is_route_valid(
    points: Sequence[Point],
    start_dir: Direction | None,
    end_dir: Direction | None,
) -> bool:
    """Check turn legality at both ends and absence of self-intersections."""
    if len(points) < 2:
        return False

    if start_dir is not None and len(points) >= 3:
        if not is_turn_allowed(points[0], points[1], points[2], start_dir, True):
            return False

    if end_dir is not None and len(points) >= 3:
        if not is_turn_allowed(points[-3], points[-2], points[-1], end_dir, False):
            return False

    return count_self_intersections(points) == 0


def evaluate_candidate(points: Sequence[Point]) -> RouteCandidate:
    """Measure a polyline for scoring."""
    return RouteCandidate(
        points=tuple(points),
        self_intersections=count_self_intersections(points),
        bends=count_bends(points),
        length=manhattan_length(points),
    )


class ElbowRouter:
    """Plans orthogonal connector routes through a handle point.

    Uses a generate-filter-score approach:
    1. Resolve the handle and project stubs from directed endpoints
    2. Build one candidate per (start leg axis, end leg axis) combination
    3. Compact each candidate, keeping the handle
    4. Drop candidates with illegal turns or self-intersections
    5. Pick the lowest score, falling back to a fixed path if none survive
    """

    def __init__(self, config: RoutingConfig | None = None) -> None:
        """Initialize the router.

        Args:
            config: Routing configuration (stub length, score weights)
        """
        self.config = config or RoutingConfig()

    def plan(
        self,
        start: Point,
        end: Point,
        control: Point | None = None,
        start_dir: Direction | None = None,
        end_dir: Direction | None = None,
        stub_length: float | None = None,
    ) -> ElbowRoute:
        """Plan an elbow route.

        Args:
            start: Route start
            end: Route end
            control: Stored control point biasing the route, if any
            start_dir: Exit direction at the start anchor
            end_dir: Exit direction at the end anchor
            stub_length: Override for the configured stub length

        Returns:
            The chosen route with its handle and scored candidates. When
            start, end and handle coincide the route is the fallback
            [start, end]: two identical points, so the two-point minimum
            holds at the cost of a zero-length segment.
        """
        stub = self.config.stub_length if stub_length is None else stub_length
        handle = compute_elbow_handle(start, end, control)

        start_stub = start_dir.offset(start, stub) if start_dir is not None else start
        end_stub = end_dir.offset(end, stub) if end_dir is not None else end

        candidates: list[RouteCandidate] = []
        for start_axis in _axis_preferences(start_dir):
            for end_axis in _axis_preferences(end_dir):
                leg1 = connect_orthogonal(start_stub, handle, start_axis)
                leg2 = connect_orthogonal(handle, end_stub, end_axis)

                raw = [start]
                if start_stub != start:
                    raw.append(start_stub)
                raw.extend(leg1[1:])
                raw.extend(leg2[1:])
                if end_stub != end:
                    raw.append(end)

                compact = compact_orthogonal_points(raw, handle)
                if not is_route_valid(compact, start_dir, end_dir):
                    logger.debug(
                        "Rejected elbow candidate (%s, %s): %d points",
                        start_axis, end_axis, len(compact),
                    )
                    continue
                candidates.append(evaluate_candidate(compact))

        if not candidates:
            points = self._fallback(start, end, handle, start_stub, end_stub)
            logger.debug(
                "No valid elbow candidate from (%.1f, %.1f) to (%.1f, %.1f), using fallback",
                start.x, start.y, end.x, end.y,
            )
            return ElbowRoute(points=tuple(points), handle=handle, is_fallback=True)

        best = self.select_best(candidates)
        return ElbowRoute(points=best.points, handle=handle, candidates=tuple(candidates))

    def select_best(self, candidates: Sequence[RouteCandidate]) -> RouteCandidate:
        """Pick the lowest-scoring candidate; ties keep the earliest.

        Args:
            candidates: Non-empty list of candidates in generation order

        Returns:
            The best candidate

        Raises:
            ValueError: If candidates is empty
        """
        if not candidates:
            raise ValueError("Cannot select from an empty candidate list")

        best = candidates[0]
        best_score = float("inf")
        for candidate in candidates:
            score = candidate.score(self.config.intersection_weight, self.config.bend_weight)
            if score < best_score:
                best_score = score
                best = candidate
        return best

    @staticmethod
    def _fallback(
        start: Point, end: Point, handle: Point, start_stub: Point, end_stub: Point
    ) -> list[Point]:
        """Fixed two-bend path through the handle; may contain crossings.

        Returns [start, end] when compaction leaves a single point.
        """
        points = compact_orthogonal_points(
            [
                start,
                start_stub,
                Point(handle.x, start_stub.y),
                handle,
                Point(end_stub.x, handle.y),
                end_stub,
                end,
            ],
            handle,
        )
        if len(points) < 2:
            # start, end and handle coincide
            return [start, end]
        return points


def plan_elbow_route(
    start: Point,
    end: Point,
    control: Point | None = None,
    start_dir: Direction | None = None,
    end_dir: Direction | None = None,
    stub_length: float = 30.0,
) -> list[Point]:
    """Plan an elbow route and return its points.

    Args:
        start: Route start
        end: Route end
        control: Stored control point, if any
        start_dir: Exit direction at the start anchor
        end_dir: Exit direction at the end anchor
        stub_length: Straight run out of a directed anchor before turning

    Returns:
        Orthogonal polyline from start to end

    Examples:
        >>> plan_elbow_route(Point(0, 0), Point(0, 50), None)
        [Point(x=0, y=0), Point(x=0, y=50)]
    """
    return ElbowRouter().plan(start, end, control, start_dir, end_dir, stub_length).as_list()


def plan_elbow_route_detailed(
    start: Point,
    end: Point,
    control: Point | None = None,
    start_dir: Direction | None = None,
    end_dir: Direction | None = None,
    config: RoutingConfig | None = None,
) -> ElbowRoute:
    """Plan an elbow route and return the full diagnostic result."""
    return ElbowRouter(config).plan(start, end, control, start_dir, end_dir)
