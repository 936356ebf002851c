"""Unit tests for the anchor finder and in-memory widget source."""

import pytest

from connectorkit.config import SnapConfig
from connectorkit.core.finder import AnchorFinder, InMemoryWidgetSource
from connectorkit.domain import (
    AnchorAttachment,
    ConnectorEndpointRef,
    Direction,
    Point,
    ShapeFrame,
    Size,
    Widget,
)
from connectorkit.exceptions import WidgetNotFoundError


def make_shape(
    widget_id: str, x: float, y: float, shape_type: str = "rectangle", rotation: float = 0.0
) -> Widget:
    """Create a 100x100 object widget."""
    return Widget(
        id=widget_id,
        type="object",
        frame=ShapeFrame(Point(x, y), Size(100, 100), rotation),
        shape_type=shape_type,
    )


def make_connector(
    widget_id: str,
    start: AnchorAttachment | None = None,
    end: AnchorAttachment | None = None,
) -> Widget:
    """Create a connector widget with optional attachments."""
    return Widget(
        id=widget_id,
        type="connector",
        frame=ShapeFrame(Point(0, 0), Size(10, 10)),
        shape_type="elbow-arrow",
        start_attachment=start,
        end_attachment=end,
    )


class TestInMemoryWidgetSource:
    """Tests for InMemoryWidgetSource class."""

    def test_pages_keep_insertion_order(self) -> None:
        """Widgets are listed in the order they were added."""
        source = InMemoryWidgetSource()
        source.add_widgets("p1", [make_shape("a", 0, 0), make_shape("b", 200, 0)])
        source.add_widget("p2", make_shape("c", 0, 0))

        assert source.widget_ids_on_page("p1") == ["a", "b"]
        assert source.widget_ids_on_page("missing") == []
        assert source.page_ids == ["p1", "p2"]

    def test_empty_page_is_listed(self) -> None:
        """Pages registered without widgets still appear."""
        source = InMemoryWidgetSource()
        source.add_page("blank")
        source.add_widget("p1", make_shape("a", 0, 0))
        source.add_page("p1")

        assert source.page_ids == ["blank", "p1"]
        assert source.widget_ids_on_page("blank") == []
        assert source.widget_ids_on_page("p1") == ["a"]

    def test_draft_overrides_frame(self) -> None:
        """Draft frames win over persisted frames until cleared."""
        source = InMemoryWidgetSource()
        source.add_widget("p1", make_shape("a", 0, 0))
        draft = ShapeFrame(Point(500, 500), Size(10, 10))

        source.set_draft("a", draft)
        assert source.get_widget("a").frame == draft  # type: ignore[union-attr]

        source.clear_draft("a")
        assert source.get_widget("a").frame.position == Point(0, 0)  # type: ignore[union-attr]

    def test_draft_keeps_connector_fields(self) -> None:
        """A draft replaces only the frame."""
        connector = Widget(
            id="c",
            type="connector",
            frame=ShapeFrame(Point(0, 0), Size(10, 10)),
            shape_type="elbow-arrow",
            start_attachment=AnchorAttachment("a", "right"),
            control_point=Point(5, 5),
        )
        source = InMemoryWidgetSource()
        source.add_widget("p1", connector)
        source.set_draft("c", ShapeFrame(Point(1, 1), Size(10, 10)))

        drafted = source.get_widget("c")
        assert drafted is not None
        assert drafted.control_point == Point(5, 5)
        assert drafted.start_attachment == AnchorAttachment("a", "right")

    def test_draft_for_unknown_widget(self) -> None:
        """Drafts require a registered widget."""
        with pytest.raises(WidgetNotFoundError, match="ghost"):
            InMemoryWidgetSource().set_draft("ghost", ShapeFrame(Point(0, 0), Size(1, 1)))

    def test_remove_widget(self) -> None:
        """Removed widgets disappear from pages."""
        source = InMemoryWidgetSource()
        source.add_widget("p1", make_shape("a", 0, 0))
        source.remove_widget("a")

        assert source.get_widget("a") is None
        assert source.widget_ids_on_page("p1") == []

    def test_re_adding_replaces(self) -> None:
        """Adding a widget with an existing ID replaces it."""
        source = InMemoryWidgetSource()
        source.add_widget("p1", make_shape("a", 0, 0))
        source.add_widget("p1", make_shape("a", 50, 50))

        assert source.widget_ids_on_page("p1") == ["a"]
        assert source.get_widget("a").frame.position == Point(50, 50)  # type: ignore[union-attr]


class TestFindNearestAnchor:
    """Tests for AnchorFinder.find_nearest_anchor."""

    @pytest.fixture
    def source(self) -> InMemoryWidgetSource:
        """Create a page with two shapes and a connector."""
        source = InMemoryWidgetSource()
        source.add_widgets(
            "page",
            [
                make_shape("box", 0, 0),
                make_shape("gem", 300, 0, shape_type="diamond"),
                make_connector("conn"),
            ],
        )
        return source

    @pytest.fixture
    def finder(self, source: InMemoryWidgetSource) -> AnchorFinder:
        """Create finder with the default threshold."""
        return AnchorFinder(source)

    def test_snaps_within_threshold(self, finder: AnchorFinder) -> None:
        """Test a point near the right edge snaps to it."""
        result = finder.find_nearest_anchor("page", Point(110, 50))

        assert result is not None
        assert result.widget_id == "box"
        assert result.anchor == "right"
        assert (result.x, result.y) == (100, 50)
        assert result.distance == pytest.approx(10)
        assert result.dir is Direction.RIGHT

    def test_nothing_within_threshold(self, finder: AnchorFinder) -> None:
        """Test far points do not snap."""
        assert finder.find_nearest_anchor("page", Point(200, 300)) is None

    def test_threshold_is_inclusive(self, finder: AnchorFinder) -> None:
        """An anchor exactly at the threshold still snaps."""
        result = finder.find_nearest_anchor("page", Point(120, 50))
        assert result is not None
        assert result.distance == pytest.approx(20)

    def test_exclude_widget(self, finder: AnchorFinder) -> None:
        """The excluded widget is never a candidate."""
        assert finder.find_nearest_anchor("page", Point(110, 50), exclude_widget_id="box") is None

    def test_connectors_are_skipped(self) -> None:
        """Connectors expose no anchors even when a point sits on them."""
        source = InMemoryWidgetSource()
        source.add_widget("page", make_connector("conn"))
        finder = AnchorFinder(source)
        assert finder.find_nearest_anchor("page", Point(5, 0)) is None

    def test_diamond_uses_shape_anchors(self, finder: AnchorFinder) -> None:
        """Edge midpoints of the diamond are snap targets."""
        result = finder.find_nearest_anchor("page", Point(376, 26))

        assert result is not None
        assert result.widget_id == "gem"
        assert result.anchor == "top-right"

    def test_custom_threshold(self, source: InMemoryWidgetSource) -> None:
        """Test threshold from config."""
        strict = AnchorFinder(source, SnapConfig(threshold=5))
        assert strict.threshold == 5
        assert strict.find_nearest_anchor("page", Point(110, 50)) is None

    def test_equidistant_keeps_first(self) -> None:
        """Among equally close anchors the first in page order wins."""
        source = InMemoryWidgetSource()
        source.add_widgets("page", [make_shape("left", 0, 0), make_shape("right", 120, 0)])
        result = AnchorFinder(source).find_nearest_anchor("page", Point(110, 50))

        assert result is not None
        assert result.widget_id == "left"
        assert result.anchor == "right"

    def test_rotated_direction(self) -> None:
        """The reported direction follows the shape's rotation."""
        source = InMemoryWidgetSource()
        source.add_widget("page", make_shape("box", 0, 0, rotation=90))
        # Rotated 90 degrees, the top anchor sits at (100, 50)
        result = AnchorFinder(source).find_nearest_anchor("page", Point(105, 50))

        assert result is not None
        assert result.anchor == "top"
        assert result.dir is Direction.RIGHT

    def test_follows_draft_frame(self, source: InMemoryWidgetSource, finder: AnchorFinder) -> None:
        """Anchors move with in-progress drags."""
        source.set_draft("box", ShapeFrame(Point(1000, 1000), Size(100, 100)))

        assert finder.find_nearest_anchor("page", Point(110, 50)) is None
        result = finder.find_nearest_anchor("page", Point(1105, 1050))
        assert result is not None
        assert result.widget_id == "box"

    def test_non_object_widgets_use_rectangle(self) -> None:
        """Tables and other widgets snap to the rectangular set."""
        source = InMemoryWidgetSource()
        source.add_widget(
            "page",
            Widget(id="tbl", type="table", frame=ShapeFrame(Point(0, 0), Size(100, 100))),
        )
        result = AnchorFinder(source).find_nearest_anchor("page", Point(2, 2))

        assert result is not None
        assert result.anchor == "top-left"


class TestAttachmentResolution:
    """Tests for resolving stored attachments."""

    @pytest.fixture
    def source(self) -> InMemoryWidgetSource:
        """Create a page with two shapes joined by a connector."""
        source = InMemoryWidgetSource()
        source.add_widgets(
            "page",
            [
                make_shape("a", 0, 0),
                make_shape("b", 300, 0),
                make_connector(
                    "c1",
                    start=AnchorAttachment("a", "right", Direction.RIGHT),
                    end=AnchorAttachment("b", "left", Direction.LEFT),
                ),
                make_connector("c2", start=AnchorAttachment("b", "top")),
            ],
        )
        return source

    @pytest.fixture
    def finder(self, source: InMemoryWidgetSource) -> AnchorFinder:
        """Create finder."""
        return AnchorFinder(source)

    def test_anchor_position_by_widget_id(self, finder: AnchorFinder) -> None:
        """Test named anchor lookup."""
        assert finder.anchor_position_by_widget_id("b", "left") == Point(300, 50)
        assert finder.anchor_position_by_widget_id("b", "nowhere") is None
        assert finder.anchor_position_by_widget_id("ghost", "left") is None

    def test_attached_endpoint_follows_target(
        self, source: InMemoryWidgetSource, finder: AnchorFinder
    ) -> None:
        """Attached endpoints track their target's current frame."""
        attachment = AnchorAttachment("a", "right")
        assert finder.attached_endpoint_position(attachment) == Point(100, 50)

        source.set_draft("a", ShapeFrame(Point(0, 200), Size(100, 100)))
        assert finder.attached_endpoint_position(attachment) == Point(100, 250)

    def test_free_and_dangling_endpoints(
        self, source: InMemoryWidgetSource, finder: AnchorFinder
    ) -> None:
        """Free endpoints and deleted targets resolve to None."""
        assert finder.attached_endpoint_position(None) is None

        source.remove_widget("a")
        assert finder.attached_endpoint_position(AnchorAttachment("a", "right")) is None

    def test_find_connectors_attached_to_widget(self, finder: AnchorFinder) -> None:
        """Test reverse lookup of attachments."""
        refs = finder.find_connectors_attached_to_widget("page", "b")

        assert refs == [
            ConnectorEndpointRef("c1", "end", AnchorAttachment("b", "left", Direction.LEFT)),
            ConnectorEndpointRef("c2", "start", AnchorAttachment("b", "top")),
        ]
        assert finder.find_connectors_attached_to_widget("page", "nobody") == []
