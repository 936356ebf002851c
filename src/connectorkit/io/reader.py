"""Scene reader for loading widget layouts from JSON.

A scene is a small JSON description of pages and widgets used by the CLI
and tests to feed the anchor finder:

    {
      "pages": {
        "page-1": [
          {"id": "a", "type": "object", "shapeType": "diamond",
           "position": {"x": 0, "y": 0}, "size": {"width": 100, "height": 60},
           "rotation": 0}
        ]
      }
    }
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from connectorkit.core.finder import InMemoryWidgetSource
from connectorkit.domain import Widget
from connectorkit.exceptions import SceneFormatError, SceneLoadError


class SceneReader:
    """Loads a JSON scene into an in-memory widget source.

    Example:
        reader = SceneReader(Path("scene.json"))
        reader.load()
        finder = AnchorFinder(reader.source)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path
        self._source: InMemoryWidgetSource | None = None

    def load(self) -> InMemoryWidgetSource:
        """Read and parse the scene file.

        Returns:
            Widget source populated with every page's widgets

        Raises:
            SceneLoadError: If the file is missing or is not valid JSON
            SceneFormatError: If the JSON does not describe a scene
        """
        try:
            text = self._scene_path.read_text(encoding="utf-8")
        except OSError as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SceneLoadError(str(self._scene_path), f"invalid JSON: {e}") from e

        self._source = self._build_source(data)
        return self._source

    @property
    def source(self) -> InMemoryWidgetSource:
        """Loaded widget source.

        Raises:
            RuntimeError: If the scene has not been loaded yet
        """
        if self._source is None:
            raise RuntimeError("Scene not loaded. Call load() first.")
        return self._source

    def iter_widgets(self, page_id: str) -> Iterator[Widget]:
        """Iterate over the widgets of a page in scene order."""
        source = self.source
        for widget_id in source.widget_ids_on_page(page_id):
            widget = source.get_widget(widget_id)
            if widget is not None:
                yield widget

    def _build_source(self, data: Any) -> InMemoryWidgetSource:
        path = str(self._scene_path)
        if not isinstance(data, dict) or not isinstance(data.get("pages"), dict):
            raise SceneFormatError(path, "expected an object with a 'pages' mapping")

        source = InMemoryWidgetSource()
        for page_id, widgets in data["pages"].items():
            if not isinstance(widgets, list):
                raise SceneFormatError(path, f"page '{page_id}' must be a list of widgets")
            source.add_page(page_id)
            for index, raw in enumerate(widgets):
                try:
                    widget = Widget.from_dict(raw)
                except (KeyError, TypeError, ValueError) as e:
                    raise SceneFormatError(
                        path, f"widget {index} on page '{page_id}': {e!r}"
                    ) from e
                source.add_widget(page_id, widget)
        return source
