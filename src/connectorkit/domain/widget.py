"""Widget snapshot types consumed by the anchor finder.

A widget here is a read-only snapshot of whatever the surrounding editor
owns (including in-progress drag overrides). Nothing in connectorkit keeps
these snapshots across calls.
"""

from dataclasses import dataclass
from typing import Any, Literal

from connectorkit.domain.anchor import AnchorAttachment
from connectorkit.domain.geometry import Point, ShapeFrame

CONNECTOR_TYPE = "connector"
OBJECT_TYPE = "object"


@dataclass(frozen=True, slots=True)
class Widget:
    """Snapshot of a widget on a page.

    Attributes:
        id: Unique widget ID
        type: Widget kind ("object", "connector", "table", "chart", ...)
        frame: Effective position, size and rotation
        shape_type: Shape identifier for object and connector widgets
        start_attachment: Start attachment (connectors only)
        end_attachment: End attachment (connectors only)
        control_point: Stored curve or elbow handle control (connectors only)
    """

    id: str
    type: str
    frame: ShapeFrame
    shape_type: str | None = None
    start_attachment: AnchorAttachment | None = None
    end_attachment: AnchorAttachment | None = None
    control_point: Point | None = None

    @property
    def is_connector(self) -> bool:
        return self.type == CONNECTOR_TYPE

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            **self.frame.to_dict(),
        }
        if self.shape_type is not None:
            data["shapeType"] = self.shape_type
        if self.start_attachment is not None:
            data["startAttachment"] = self.start_attachment.to_dict()
        if self.end_attachment is not None:
            data["endAttachment"] = self.end_attachment.to_dict()
        if self.control_point is not None:
            data["controlPoint"] = self.control_point.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Widget":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with id, type, position, size and optional
                rotation, shapeType, startAttachment, endAttachment,
                controlPoint

        Returns:
            Widget instance
        """
        start = data.get("startAttachment")
        end = data.get("endAttachment")
        control = data.get("controlPoint")
        return cls(
            id=data["id"],
            type=data["type"],
            frame=ShapeFrame.from_dict(data),
            shape_type=data.get("shapeType"),
            start_attachment=AnchorAttachment.from_dict(start) if start else None,
            end_attachment=AnchorAttachment.from_dict(end) if end else None,
            control_point=Point.from_dict(control) if control else None,
        )


@dataclass(frozen=True, slots=True)
class ConnectorEndpointRef:
    """A connector endpoint that references a given widget.

    Attributes:
        connector_id: ID of the connector widget
        endpoint: Which end of the connector is attached
        attachment: The stored attachment
    """

    connector_id: str
    endpoint: Literal["start", "end"]
    attachment: AnchorAttachment
