"""Logging utilities for connectorkit."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog

from connectorkit.domain import ElbowRoute, NearestAnchorResult, Point


@dataclass
class RoutingStats:
    """Statistics from a batch of routing and snapping calls."""

    routes_planned: int = 0
    fallback_routes: int = 0
    snaps: int = 0
    snap_misses: int = 0

    @property
    def fallback_ratio(self) -> float:
        """Share of planned routes that needed the fallback path."""
        if self.routes_planned == 0:
            return 0.0
        return self.fallback_routes / self.routes_planned


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"connectorkit_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("connectorkit")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class RoutingLogger:
    """Logger for routing and snapping calls that also keeps statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RoutingStats()

    def log_route(self, connector_id: str, route: ElbowRoute) -> None:
        """Log a planned elbow route."""
        self._stats.routes_planned += 1
        if route.is_fallback:
            self._stats.fallback_routes += 1
            self._logger.warning(
                "Elbow route fell back",
                connector=connector_id,
                points=len(route.points),
            )
            return
        self._logger.debug(
            "Elbow route planned",
            connector=connector_id,
            points=len(route.points),
            candidates=len(route.candidates),
        )

    def log_snap(self, point: Point, result: NearestAnchorResult | None) -> None:
        """Log the outcome of a snap query."""
        if result is None:
            self._stats.snap_misses += 1
            self._logger.debug("No anchor in range", x=point.x, y=point.y)
            return
        self._stats.snaps += 1
        self._logger.debug(
            "Snapped to anchor",
            widget=result.widget_id,
            anchor=result.anchor,
            distance=round(result.distance, 2),
        )

    @property
    def stats(self) -> RoutingStats:
        """Get current statistics."""
        return self._stats
