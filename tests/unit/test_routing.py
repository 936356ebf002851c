"""Unit tests for elbow route planning."""

import pytest

from connectorkit.config import RoutingConfig
from connectorkit.core.routing import (
    ElbowRouter,
    compact_orthogonal_points,
    compute_elbow_handle,
    connect_orthogonal,
    control_from_handle,
    default_elbow_control,
    default_elbow_handle,
    evaluate_candidate,
    is_route_valid,
    is_turn_allowed,
    plan_elbow_route,
    plan_elbow_route_detailed,
)
from connectorkit.domain import Direction, Point, RouteCandidate


class TestElbowHandle:
    """Tests for handle and control point math."""

    def test_handle_without_control(self) -> None:
        """The implicit handle is the (start.x, end.y) corner."""
        assert compute_elbow_handle(Point(0, 0), Point(100, 80), None) == Point(0, 80)

    def test_handle_is_quadratic_midpoint(self) -> None:
        """The handle is the Bezier midpoint of start, control and end."""
        handle = compute_elbow_handle(Point(0, 0), Point(200, 100), Point(100, 50))
        assert handle == Point(100, 50)

        handle = compute_elbow_handle(Point(0, 0), Point(100, 0), Point(50, 100))
        assert handle == Point(50, 50)

    def test_control_from_handle_inverts(self) -> None:
        """Dragging the handle to a point stores the matching control."""
        start, end = Point(10, 20), Point(210, 120)
        control = control_from_handle(start, end, Point(60, 300))
        assert compute_elbow_handle(start, end, control) == Point(60, 300)

    def test_default_handle_shapes(self) -> None:
        """Default handles give L bends and Z shapes by anchor axes."""
        start, end = Point(0, 0), Point(200, 100)

        assert default_elbow_handle(start, end, None, None) == Point(0, 100)
        assert default_elbow_handle(start, end, Direction.RIGHT, Direction.LEFT) == Point(100, 50)
        assert default_elbow_handle(start, end, Direction.DOWN, Direction.UP) == Point(100, 50)
        assert default_elbow_handle(start, end, Direction.RIGHT, Direction.UP) == Point(200, 0)
        assert default_elbow_handle(start, end, Direction.DOWN, Direction.LEFT) == Point(0, 100)

    def test_default_control_reproduces_default_handle(self) -> None:
        """The default control maps back onto the default handle."""
        start, end = Point(0, 0), Point(200, 100)
        control = default_elbow_control(start, end, Direction.RIGHT, Direction.LEFT)
        assert compute_elbow_handle(start, end, control) == Point(100, 50)


class TestConnectOrthogonal:
    """Tests for single-bend leg construction."""

    def test_aligned_points(self) -> None:
        """Aligned points need no corner."""
        assert connect_orthogonal(Point(0, 0), Point(0, 50), "h") == [Point(0, 0), Point(0, 50)]

    def test_horizontal_first(self) -> None:
        """Test corner placement for a horizontal first leg."""
        assert connect_orthogonal(Point(0, 0), Point(50, 30), "h") == [
            Point(0, 0),
            Point(50, 0),
            Point(50, 30),
        ]

    def test_vertical_first(self) -> None:
        """Test corner placement for a vertical first leg."""
        assert connect_orthogonal(Point(0, 0), Point(50, 30), "v") == [
            Point(0, 0),
            Point(0, 30),
            Point(50, 30),
        ]


class TestCompactOrthogonalPoints:
    """Tests for polyline compaction."""

    def test_drops_duplicates(self) -> None:
        """Consecutive duplicates collapse."""
        points = [Point(0, 0), Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 10)]
        assert compact_orthogonal_points(points, Point(99, 99)) == [
            Point(0, 0),
            Point(0, 10),
            Point(10, 10),
        ]

    def test_collapses_collinear_points(self) -> None:
        """Interior collinear points are removed."""
        points = [Point(0, 0), Point(30, 0), Point(100, 0), Point(100, 50)]
        assert compact_orthogonal_points(points, Point(99, 99)) == [
            Point(0, 0),
            Point(100, 0),
            Point(100, 50),
        ]

    def test_keeps_handle(self) -> None:
        """A collinear handle survives compaction."""
        points = [Point(0, 0), Point(50, 0), Point(100, 0)]
        assert compact_orthogonal_points(points, Point(50, 0)) == points

    def test_spike_folds_back(self) -> None:
        """A stub that doubles back onto the start leaves no duplicate."""
        points = [Point(0, 0), Point(30, 0), Point(0, 0), Point(0, 100)]
        assert compact_orthogonal_points(points, Point(0, 100)) == [Point(0, 0), Point(0, 100)]

    def test_empty(self) -> None:
        """Empty input stays empty."""
        assert compact_orthogonal_points([], Point(0, 0)) == []


class TestTurnRules:
    """Tests for direction-aware turn validation."""

    def test_start_right_rejects_leftward(self) -> None:
        """Leaving a right anchor, a horizontal run must go right."""
        prev, at = Point(0, 0), Point(30, 0)
        assert is_turn_allowed(prev, at, Point(80, 0), Direction.RIGHT, True)
        assert not is_turn_allowed(prev, at, Point(-20, 0), Direction.RIGHT, True)

    def test_other_axis_is_allowed(self) -> None:
        """A vertical run is never constrained by a horizontal anchor."""
        assert is_turn_allowed(Point(0, 0), Point(30, 0), Point(30, -50), Direction.RIGHT, True)

    def test_end_uses_opposite_direction(self) -> None:
        """Arriving at a left anchor means travelling right."""
        prev, at = Point(0, 0), Point(0, 50)
        assert is_turn_allowed(prev, at, Point(100, 50), Direction.LEFT, False)
        assert not is_turn_allowed(prev, at, Point(-100, 50), Direction.LEFT, False)

    def test_vertical_senses(self) -> None:
        """Up means dy <= 0 and down means dy >= 0."""
        at = Point(0, 0)
        assert is_turn_allowed(at, at, Point(0, -10), Direction.UP, True)
        assert not is_turn_allowed(at, at, Point(0, 10), Direction.UP, True)
        assert is_turn_allowed(at, at, Point(0, 10), Direction.DOWN, True)

    def test_zero_length_and_diagonal_are_allowed(self) -> None:
        """Segments that are not axis-aligned runs are not checked."""
        at = Point(0, 0)
        assert is_turn_allowed(at, at, at, Direction.UP, True)
        assert is_turn_allowed(at, at, Point(5, 5), Direction.UP, True)

    def test_route_validity(self) -> None:
        """Routes need two points and no crossings."""
        assert not is_route_valid([Point(0, 0)], None, None)
        assert is_route_valid([Point(0, 0), Point(10, 0)], Direction.LEFT, Direction.LEFT)

        crossing = [Point(0, 0), Point(100, 0), Point(100, 50), Point(50, 50), Point(50, -50)]
        assert not is_route_valid(crossing, None, None)


class TestElbowRouter:
    """Tests for ElbowRouter class."""

    @pytest.fixture
    def router(self) -> ElbowRouter:
        """Create router with default config."""
        return ElbowRouter()

    def test_l_route_without_directions(self, router: ElbowRouter) -> None:
        """Without directions the route is an L through (start.x, end.y)."""
        route = router.plan(Point(0, 0), Point(100, 100))

        assert route.as_list() == [Point(0, 0), Point(0, 100), Point(100, 100)]
        assert route.handle == Point(0, 100)
        assert not route.is_fallback

    def test_aligned_points_collapse(self) -> None:
        """Vertically aligned endpoints give a single segment."""
        assert plan_elbow_route(Point(0, 0), Point(0, 50), None) == [Point(0, 0), Point(0, 50)]

    def test_facing_anchors_pick_fewest_bends(self, router: ElbowRouter) -> None:
        """Right-to-left anchors through a midpoint handle form a two-bend route."""
        start, end = Point(0, 0), Point(200, 100)
        route = router.plan(start, end, Point(100, 50), Direction.RIGHT, Direction.LEFT)

        assert route.handle == Point(100, 50)
        assert route.as_list() == [
            Point(0, 0),
            Point(100, 0),
            Point(100, 50),
            Point(100, 100),
            Point(200, 100),
        ]
        assert len(route.candidates) == 4
        assert not route.is_fallback

    def test_route_passes_through_handle(self, router: ElbowRouter) -> None:
        """The handle is always a vertex of the chosen route."""
        start, end = Point(0, 0), Point(300, 200)
        control = control_from_handle(start, end, Point(150, -40))
        route = router.plan(start, end, control, Direction.DOWN, Direction.UP)

        assert Point(150, -40) in route.points

    def test_route_is_orthogonal(self, router: ElbowRouter) -> None:
        """Every segment is horizontal or vertical."""
        route = router.plan(Point(10, 10), Point(250, 180), None, Direction.UP, Direction.RIGHT)

        for a, b in zip(route.points, route.points[1:], strict=False):
            assert a.x == b.x or a.y == b.y

    def test_degenerate_route(self, router: ElbowRouter) -> None:
        """Coincident start, end and handle keep the two-point minimum."""
        route = router.plan(Point(5, 5), Point(5, 5))

        assert route.is_fallback
        assert route.handle == Point(5, 5)
        assert route.as_list() == [Point(5, 5), Point(5, 5)]
        assert route.candidates == ()

    def test_coincident_endpoints_with_offset_handle(self, router: ElbowRouter) -> None:
        """A handle away from coincident endpoints gives a real loop without repeats."""
        start = end = Point(0, 0)
        control = control_from_handle(start, end, Point(40, 40))
        route = router.plan(start, end, control)

        assert Point(40, 40) in route.points
        for a, b in zip(route.points, route.points[1:], strict=False):
            assert a != b

    def test_custom_stub_length(self) -> None:
        """The stub length moves the first turn."""
        router = ElbowRouter(RoutingConfig(stub_length=50))
        start, end = Point(0, 0), Point(200, 100)
        control = control_from_handle(start, end, Point(200, 50))
        route = router.plan(start, end, control, Direction.DOWN, None)

        assert route.points[1] == Point(0, 50)

    def test_stub_override(self, router: ElbowRouter) -> None:
        """A per-call stub length overrides the config."""
        start, end = Point(0, 0), Point(200, 100)
        control = control_from_handle(start, end, Point(200, 10))
        route = router.plan(start, end, control, Direction.DOWN, None, stub_length=10)

        assert route.points[1] == Point(0, 10)

    def test_select_best_prefers_fewer_bends(self, router: ElbowRouter) -> None:
        """Bends dominate length in scoring."""
        short_bendy = RouteCandidate((), self_intersections=0, bends=3, length=10)
        long_direct = RouteCandidate((), self_intersections=0, bends=1, length=500)
        assert router.select_best([short_bendy, long_direct]) is long_direct

    def test_select_best_tie_keeps_first(self, router: ElbowRouter) -> None:
        """Equal scores keep the earliest candidate."""
        first = RouteCandidate((Point(0, 0),), self_intersections=0, bends=1, length=10)
        second = RouteCandidate((Point(1, 1),), self_intersections=0, bends=1, length=10)
        assert router.select_best([first, second]) is first

    def test_select_best_empty(self, router: ElbowRouter) -> None:
        """Selecting from nothing is an error."""
        with pytest.raises(ValueError, match="empty"):
            router.select_best([])

    def test_evaluate_candidate(self) -> None:
        """Test candidate metrics."""
        candidate = evaluate_candidate([Point(0, 0), Point(0, 40), Point(30, 40)])

        assert candidate.bends == 1
        assert candidate.length == 70
        assert candidate.self_intersections == 0

    def test_detailed_matches_plain(self) -> None:
        """Both entry points return the same polyline."""
        start, end = Point(0, 0), Point(120, 60)
        detailed = plan_elbow_route_detailed(start, end, None, Direction.RIGHT, Direction.UP)
        plain = plan_elbow_route(start, end, None, Direction.RIGHT, Direction.UP)
        assert detailed.as_list() == plain

    def test_fallback_path(self) -> None:
        """The fallback runs through both stubs and the handle."""
        points = ElbowRouter._fallback(
            Point(0, 0), Point(100, 0), Point(50, 50), Point(30, 0), Point(70, 0)
        )
        assert points == [
            Point(0, 0),
            Point(50, 0),
            Point(50, 50),
            Point(70, 50),
            Point(70, 0),
            Point(100, 0),
        ]
