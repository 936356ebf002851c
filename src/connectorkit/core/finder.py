"""Nearest-anchor lookup across the widgets of a page.

The finder is a read-only query layer over widget state owned elsewhere.
Widget state reaches it through the WidgetSource protocol, which must
return the effective (draft-merged) snapshot of each widget so anchors
follow shapes that are mid-drag or mid-resize.

Key classes:
- WidgetSource: Protocol for the page/widget lookup
- InMemoryWidgetSource: Dictionary-backed source with a draft overlay
- AnchorFinder: Snap queries and attachment resolution
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Protocol

from connectorkit.config import SnapConfig
from connectorkit.core.anchors import anchors_for_widget
from connectorkit.core.geometry import distance
from connectorkit.core.resolver import absolute_position, direction_with_rotation
from connectorkit.domain import (
    AnchorAttachment,
    ConnectorEndpointRef,
    NearestAnchorResult,
    Point,
    ShapeFrame,
    Widget,
)
from connectorkit.exceptions import WidgetNotFoundError

logger = logging.getLogger(__name__)


class WidgetSource(Protocol):
    """Lookup of widget snapshots by page and ID."""

    def widget_ids_on_page(self, page_id: str) -> list[str]:
        """Widget IDs on a page in registration order (empty if unknown)."""
        ...

    def get_widget(self, widget_id: str) -> Widget | None:
        """Effective widget snapshot, or None if the widget does not exist."""
        ...


class InMemoryWidgetSource:
    """Widget source backed by dictionaries.

    Draft frames override persisted frames while a drag or resize is in
    progress, mirroring how the editor's draft state layers over the store.
    """

    def __init__(self) -> None:
        self._widgets: dict[str, Widget] = {}
        self._pages: dict[str, list[str]] = {}
        self._drafts: dict[str, ShapeFrame] = {}

    def add_page(self, page_id: str) -> None:
        """Register a page, keeping its widgets if it already exists."""
        self._pages.setdefault(page_id, [])

    def add_widget(self, page_id: str, widget: Widget) -> None:
        """Register a widget on a page, replacing any widget with the same ID."""
        if widget.id in self._widgets:
            self.remove_widget(widget.id)
        self._widgets[widget.id] = widget
        self._pages.setdefault(page_id, []).append(widget.id)

    def add_widgets(self, page_id: str, widgets: Iterable[Widget]) -> None:
        for widget in widgets:
            self.add_widget(page_id, widget)

    def remove_widget(self, widget_id: str) -> None:
        """Remove a widget; attachments pointing at it stop resolving."""
        self._widgets.pop(widget_id, None)
        self._drafts.pop(widget_id, None)
        for ids in self._pages.values():
            if widget_id in ids:
                ids.remove(widget_id)

    def set_draft(self, widget_id: str, frame: ShapeFrame) -> None:
        """Override a widget's frame with an in-progress drag/resize frame.

        Raises:
            WidgetNotFoundError: If the widget is not registered
        """
        if widget_id not in self._widgets:
            raise WidgetNotFoundError(widget_id)
        self._drafts[widget_id] = frame

    def clear_draft(self, widget_id: str) -> None:
        self._drafts.pop(widget_id, None)

    @property
    def page_ids(self) -> list[str]:
        return list(self._pages)

    def widget_ids_on_page(self, page_id: str) -> list[str]:
        return list(self._pages.get(page_id, []))

    def get_widget(self, widget_id: str) -> Widget | None:
        widget = self._widgets.get(widget_id)
        if widget is None:
            return None
        draft = self._drafts.get(widget_id)
        if draft is None:
            return widget
        return replace(widget, frame=draft)


class AnchorFinder:
    """Finds and resolves connector anchors on a page.

    Every query reads the source afresh, so results always reflect the
    snapshot current at call time.
    """

    def __init__(self, source: WidgetSource, config: SnapConfig | None = None) -> None:
        """Initialize the finder.

        Args:
            source: Widget lookup
            config: Snap configuration (defaults to a 20 px threshold)
        """
        self.source = source
        self.config = config or SnapConfig()

    @property
    def threshold(self) -> float:
        return self.config.threshold

    def find_nearest_anchor(
        self,
        page_id: str,
        point: Point,
        exclude_widget_id: str | None = None,
    ) -> NearestAnchorResult | None:
        """Find the closest anchor within the snap threshold.

        Connectors and the excluded widget (usually the connector being
        dragged) are skipped. A candidate replaces the current best only when
        it is strictly closer, so among equidistant anchors the first one in
        page order, then anchor registration order, wins.

        Args:
            page_id: Page to search
            point: Current connector endpoint position
            exclude_widget_id: Widget to ignore

        Returns:
            The nearest anchor, or None if none lies within the threshold
        """
        nearest: NearestAnchorResult | None = None

        for widget_id in self.source.widget_ids_on_page(page_id):
            if widget_id == exclude_widget_id:
                continue

            widget = self.source.get_widget(widget_id)
            if widget is None or widget.is_connector:
                continue

            for anchor in anchors_for_widget(widget):
                anchor_pos = absolute_position(widget.frame, anchor)
                dist = distance(point, anchor_pos)
                if dist > self.threshold:
                    continue
                if nearest is None or dist < nearest.distance:
                    nearest = NearestAnchorResult(
                        widget_id=widget_id,
                        anchor=anchor.position,
                        x=anchor_pos.x,
                        y=anchor_pos.y,
                        distance=dist,
                        dir=direction_with_rotation(anchor.position, widget.frame.rotation),
                    )

        if nearest is None:
            logger.debug("No anchor within %.1f px of (%.1f, %.1f)", self.threshold, point.x, point.y)
        return nearest

    def anchor_position_by_widget_id(self, widget_id: str, anchor: str) -> Point | None:
        """Absolute position of a named anchor on a widget.

        Args:
            widget_id: Target widget ID
            anchor: Anchor position name

        Returns:
            The anchor position, or None if the widget or anchor is missing
        """
        widget = self.source.get_widget(widget_id)
        if widget is None:
            return None

        for candidate in anchors_for_widget(widget):
            if candidate.position == anchor:
                return absolute_position(widget.frame, candidate)
        return None

    def attached_endpoint_position(self, attachment: AnchorAttachment | None) -> Point | None:
        """Current position of an attached connector endpoint.

        Args:
            attachment: Stored attachment, or None for a free endpoint

        Returns:
            The anchor's current position, or None when the endpoint is free
            or its target no longer exists
        """
        if attachment is None:
            return None
        return self.anchor_position_by_widget_id(attachment.widget_id, attachment.anchor)

    def find_connectors_attached_to_widget(
        self, page_id: str, target_widget_id: str
    ) -> list[ConnectorEndpointRef]:
        """Find connector endpoints on a page that reference a widget.

        Args:
            page_id: Page to search
            target_widget_id: Widget the connectors attach to

        Returns:
            One entry per attached endpoint, start before end
        """
        results: list[ConnectorEndpointRef] = []

        for widget_id in self.source.widget_ids_on_page(page_id):
            widget = self.source.get_widget(widget_id)
            if widget is None or not widget.is_connector:
                continue

            start = widget.start_attachment
            if start is not None and start.widget_id == target_widget_id:
                results.append(ConnectorEndpointRef(widget_id, "start", start))

            end = widget.end_attachment
            if end is not None and end.widget_id == target_widget_id:
                results.append(ConnectorEndpointRef(widget_id, "end", end))

        return results
