"""Anchor and attachment types.

This module defines the types that describe where a connector can attach:
- Direction: Outward-facing exit direction of an anchor
- AnchorPoint: Named, percentage-based point on a shape's bounding box
- AnchorAttachment: ID-based reference from a connector endpoint to an anchor
- NearestAnchorResult: Outcome of a snap query
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from connectorkit.domain.geometry import Point


class Direction(str, Enum):
    """Nominal outward direction a connector leaves an anchor.

    Canvas space has y growing downwards, so UP decreases y.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def offset(self, point: Point, distance: float) -> Point:
        """Move a point the given distance along this direction.

        Args:
            point: Starting point
            distance: Distance to travel

        Returns:
            The translated point
        """
        if self is Direction.LEFT:
            return Point(point.x - distance, point.y)
        if self is Direction.RIGHT:
            return Point(point.x + distance, point.y)
        if self is Direction.UP:
            return Point(point.x, point.y - distance)
        return Point(point.x, point.y + distance)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True, slots=True)
class AnchorPoint:
    """A named attachment point on a shape's unrotated bounding box.

    Percentages keep anchors resolution-independent.

    Attributes:
        position: Unique name within the shape's anchor set (e.g. "top-left")
        x_percent: Horizontal offset as percentage of width (0-100)
        y_percent: Vertical offset as percentage of height (0-100)
        label: Optional description of the geometric feature
    """

    position: str
    x_percent: float
    y_percent: float
    label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "position": self.position,
            "xPercent": self.x_percent,
            "yPercent": self.y_percent,
        }
        if self.label is not None:
            data["label"] = self.label
        return data


@dataclass(frozen=True, slots=True)
class AnchorAttachment:
    """Weak, ID-based reference from a connector endpoint to a shape anchor.

    If the target widget disappears, lookups through this attachment fail and
    the endpoint behaves as a free point.

    Attributes:
        widget_id: ID of the target widget
        anchor: Anchor position name on the target
        dir: Exit direction captured when the attachment was made
    """

    widget_id: str
    anchor: str
    dir: Direction | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"widgetId": self.widget_id, "anchor": self.anchor}
        if self.dir is not None:
            data["dir"] = self.dir.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnchorAttachment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with widgetId, anchor and optional dir

        Returns:
            AnchorAttachment instance
        """
        raw_dir = data.get("dir")
        return cls(
            widget_id=data["widgetId"],
            anchor=data["anchor"],
            dir=Direction(raw_dir) if raw_dir else None,
        )


@dataclass(frozen=True, slots=True)
class NearestAnchorResult:
    """Closest anchor found within the snap threshold.

    Attributes:
        widget_id: Widget owning the anchor
        anchor: Anchor position name
        x: Absolute canvas X of the anchor
        y: Absolute canvas Y of the anchor
        distance: Euclidean distance from the query point
        dir: Rotation-aware exit direction, if the anchor has one
    """

    widget_id: str
    anchor: str
    x: float
    y: float
    distance: float
    dir: Direction | None = None

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    def to_attachment(self) -> AnchorAttachment:
        """Build the attachment a connector endpoint stores after snapping."""
        return AnchorAttachment(widget_id=self.widget_id, anchor=self.anchor, dir=self.dir)

    def to_dict(self) -> dict[str, Any]:
        return {
            "widgetId": self.widget_id,
            "anchor": self.anchor,
            "x": self.x,
            "y": self.y,
            "distance": self.distance,
            "dir": self.dir.value if self.dir else None,
        }
