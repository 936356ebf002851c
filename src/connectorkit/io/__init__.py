"""Scene I/O layer for connectorkit.

This module loads JSON scene descriptions (pages of widget snapshots) into
a widget source the anchor finder can query.

Key classes:
- SceneReader: Load scenes from JSON files
"""

from connectorkit.io.reader import SceneReader

__all__ = [
    "SceneReader",
]
