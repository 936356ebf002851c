"""Anchor resolution: absolute positions and exit directions.

Functions here turn a named anchor on a shape frame into canvas geometry:
- anchor_direction: nominal exit direction of an anchor name
- direction_with_rotation: exit direction after rotating the shape
- absolute_position: canvas position of an anchor on a (rotated) frame

Frames must hold finite numbers; NaN or infinite input is not handled.
"""

import math

from connectorkit.core.geometry import rotate_point
from connectorkit.domain import AnchorPoint, Direction, Point, ShapeFrame
from connectorkit.exceptions import InvalidDirectionError

_ANCHOR_DIRECTIONS: dict[str, Direction] = {
    "top": Direction.UP,
    "top-left": Direction.UP,
    "top-right": Direction.UP,
    "bottom": Direction.DOWN,
    "bottom-left": Direction.DOWN,
    "bottom-right": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

# Clockwise on screen, matching positive rotation with y pointing down
_CLOCKWISE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


def anchor_direction(anchor: str | None) -> Direction | None:
    """Nominal exit direction for an anchor name.

    Corner anchors follow their vertical edge: top-left and top-right exit
    up, bottom-left and bottom-right exit down.

    Args:
        anchor: Anchor position name

    Returns:
        Direction, or None for unknown/absent anchors (no preference)
    """
    if not anchor:
        return None
    return _ANCHOR_DIRECTIONS.get(anchor)


def quarter_turns(rotation: float) -> int:
    """Number of clockwise quarter turns nearest to a rotation.

    Rotations are normalized to [0, 360) first and halfway cases round up,
    so 45 degrees counts as one quarter turn and 44.9 as none.

    Args:
        rotation: Rotation in degrees (any sign or magnitude)

    Returns:
        Quarter turns in range 0-3
    """
    normalized = rotation % 360.0
    return int(math.floor(normalized / 90.0 + 0.5)) % 4


def rotate_direction(direction: Direction, rotation: float) -> Direction:
    """Rotate a direction by the nearest multiple of 90 degrees."""
    index = _CLOCKWISE.index(direction)
    return _CLOCKWISE[(index + quarter_turns(rotation)) % 4]


def direction_with_rotation(anchor: str | None, rotation: float) -> Direction | None:
    """Exit direction of an anchor on a rotated shape.

    The anchor's nominal direction is rotated by the quarter turn nearest to
    the shape's rotation (see quarter_turns for the rounding rule).

    Args:
        anchor: Anchor position name
        rotation: Shape rotation in degrees, clockwise

    Returns:
        Rotated direction, or None if the anchor has no nominal direction
    """
    direction = anchor_direction(anchor)
    if direction is None:
        return None
    if rotation == 0:
        return direction
    return rotate_direction(direction, rotation)


def absolute_position(frame: ShapeFrame, anchor: AnchorPoint) -> Point:
    """Canvas position of an anchor on a shape frame.

    The anchor's percentages are applied to the unrotated box. When the
    frame is rotated, the local point is rotated about the box center.
    Zero rotation takes an exact path with no trigonometry.

    Args:
        frame: Effective shape frame (position, size, rotation)
        anchor: Anchor definition

    Returns:
        Absolute canvas point
    """
    local_x = (anchor.x_percent / 100) * frame.size.width
    local_y = (anchor.y_percent / 100) * frame.size.height

    unrotated = Point(frame.position.x + local_x, frame.position.y + local_y)
    if frame.rotation == 0:
        return unrotated

    return rotate_point(unrotated, frame.center, frame.rotation)


def parse_direction(value: str | Direction | None) -> Direction | None:
    """Parse a user-supplied direction name.

    Args:
        value: Direction name (case-insensitive), a Direction, or None

    Returns:
        Direction, or None for None/empty input

    Raises:
        InvalidDirectionError: If the name is not a known direction
    """
    if value is None or isinstance(value, Direction):
        return value
    text = value.strip().lower()
    if not text or text == "none":
        return None
    try:
        return Direction(text)
    except ValueError as e:
        raise InvalidDirectionError(value) from e
