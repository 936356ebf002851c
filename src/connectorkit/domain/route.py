"""Route types produced by the elbow planner."""

from dataclasses import dataclass, field

from connectorkit.domain.geometry import Point


@dataclass(frozen=True, slots=True)
class RouteCandidate:
    """A candidate orthogonal polyline with its scoring metrics.

    Candidates are transient: they live for one planning call.

    Attributes:
        points: Compacted polyline points
        self_intersections: Number of illegal segment crossings/overlaps
        bends: Number of direction changes along the polyline
        length: Manhattan length of the polyline
    """

    points: tuple[Point, ...]
    self_intersections: int
    bends: int
    length: float

    def score(self, intersection_weight: float = 1_000_000, bend_weight: float = 10_000) -> float:
        """Weighted score, lower is better.

        Crossings dominate bends, which dominate length.
        """
        return (
            self.self_intersections * intersection_weight
            + self.bends * bend_weight
            + self.length
        )


@dataclass(frozen=True, slots=True)
class ElbowRoute:
    """Full result of an elbow planning call.

    Attributes:
        points: Chosen polyline
        handle: The protected handle point the route passes through
        is_fallback: True when no candidate passed validation
        candidates: Valid candidates that were scored, in generation order
    """

    points: tuple[Point, ...]
    handle: Point
    is_fallback: bool = False
    candidates: tuple[RouteCandidate, ...] = field(default=())

    def as_list(self) -> list[Point]:
        return list(self.points)
