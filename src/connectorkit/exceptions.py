"""Exception hierarchy for connectorkit.

The routing and anchor algorithms never raise for geometric degeneracies;
these exceptions cover input boundaries (scene files, user-supplied names).
"""


class ConnectorKitError(Exception):
    """Base exception for all connectorkit errors."""

    pass


class SceneError(ConnectorKitError):
    """Errors related to loading scene descriptions."""

    pass


class SceneLoadError(SceneError):
    """Error reading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Scene file has an invalid structure."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid scene format '{path}': {details}")


class WidgetNotFoundError(ConnectorKitError):
    """Requested widget does not exist."""

    def __init__(self, widget_id: str) -> None:
        self.widget_id = widget_id
        super().__init__(f"Widget '{widget_id}' not found")


class GeometryError(ConnectorKitError):
    """Errors in geometric input."""

    pass


class InvalidDirectionError(GeometryError):
    """Direction name is not one of up, down, left, right."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid direction '{value}': expected up, down, left or right")


class InvalidPointError(GeometryError):
    """Point text could not be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid point '{value}': expected 'X,Y'")
