"""Core geometric value types.

This module defines the canvas-space value types used throughout connectorkit:
- Point: A 2D canvas coordinate
- Size: Width and height of a shape's bounding box
- BoundsRect: Axis-aligned bounding rectangle
- ShapeFrame: Position, size and rotation of a shape instance

Coordinates are floating point canvas units; no unit conversion happens here.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in canvas space.

    Immutable and hashable so routes can be compared and deduplicated.

    Attributes:
        x: X coordinate (grows to the right)
        y: Y coordinate (grows downwards)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Size:
    """Width and height of a shape's unrotated bounding box."""

    width: float
    height: float

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Size":
        return cls(width=data["width"], height=data["height"])


@dataclass(frozen=True, slots=True)
class BoundsRect:
    """Axis-aligned bounding rectangle.

    Attributes:
        min_x: Left edge
        min_y: Top edge
        max_x: Right edge
        max_y: Bottom edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def expanded(self, margin: float) -> "BoundsRect":
        """Return a new rectangle grown by margin on every side."""
        return BoundsRect(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y) tuple."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "minX": self.min_x,
            "minY": self.min_y,
            "maxX": self.max_x,
            "maxY": self.max_y,
        }


@dataclass(frozen=True, slots=True)
class ShapeFrame:
    """Placement of a shape instance on the canvas.

    The frame is a snapshot: callers build one per call from whatever
    (possibly in-progress) widget state they own.

    Attributes:
        position: Top-left corner of the unrotated bounding box
        size: Size of the unrotated bounding box
        rotation: Clockwise rotation in degrees about the box center
    """

    position: Point
    size: Size
    rotation: float = 0.0

    @property
    def center(self) -> Point:
        """Center of the bounding box in canvas space."""
        return Point(
            self.position.x + self.size.width / 2,
            self.position.y + self.size.height / 2,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position.to_dict(),
            "size": self.size.to_dict(),
            "rotation": self.rotation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeFrame":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with position, size and optional rotation

        Returns:
            ShapeFrame instance
        """
        return cls(
            position=Point.from_dict(data["position"]),
            size=Size.from_dict(data["size"]),
            rotation=data.get("rotation") or 0.0,
        )
