"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library:
tables of anchors and route points, and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from connectorkit.domain import AnchorPoint, BoundsRect, NearestAnchorResult, Point
from connectorkit.utils import RoutingStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_shapes(rows: Sequence[tuple[str, int, bool]]) -> None:
    """Print registered shape types.

    Args:
        rows: (shape type, anchor count, has custom anchors) tuples
    """
    table = Table(title="Shape anchors")
    table.add_column("Shape")
    table.add_column("Anchors", justify="right")
    table.add_column("Custom", justify="center")
    for shape, count, custom in rows:
        table.add_row(shape, str(count), SYM_OK if custom else SYM_DOT)
    console.print(table)


def print_anchors(
    shape_type: str,
    anchors: Sequence[AnchorPoint],
    positions: Sequence[Point],
    directions: Sequence[str | None],
) -> None:
    """Print a shape's anchors with their resolved positions.

    Args:
        shape_type: Shape type the anchors belong to
        anchors: Anchor definitions
        positions: Absolute positions, parallel to anchors
        directions: Exit direction names, parallel to anchors
    """
    table = Table(title=f"Anchors {SYM_DOT} {shape_type}")
    table.add_column("Anchor")
    table.add_column("%", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Exit")
    for anchor, pos, direction in zip(anchors, positions, directions, strict=True):
        table.add_row(
            anchor.position,
            f"{_num(anchor.x_percent)}, {_num(anchor.y_percent)}",
            _num(pos.x),
            _num(pos.y),
            direction or SYM_DOT,
        )
    console.print(table)


def print_route(points: Sequence[Point], handle: Point, is_fallback: bool, bends: int, length: float) -> None:
    """Print a planned route.

    Args:
        points: Route points
        handle: Handle point of the route
        is_fallback: Whether the fallback path was used
        bends: Number of bends
        length: Manhattan length
    """
    table = Table(title="Elbow route")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("")
    for index, p in enumerate(points):
        marker = "handle" if p == handle else ""
        table.add_row(str(index), _num(p.x), _num(p.y), marker)
    console.print(table)

    status = "[yellow]fallback[/yellow]" if is_fallback else f"[green]{SYM_OK} valid[/green]"
    console.print(f"  {status} {SYM_DOT} {bends} bends {SYM_DOT} length {_num(length)}")


def print_bounds(bounds: BoundsRect) -> None:
    """Print a bounding rectangle."""
    console.print(
        f"  min ({_num(bounds.min_x)}, {_num(bounds.min_y)}) {SYM_DOT} "
        f"max ({_num(bounds.max_x)}, {_num(bounds.max_y)}) {SYM_DOT} "
        f"{_num(bounds.width)} x {_num(bounds.height)}"
    )


def print_snap(result: NearestAnchorResult | None, threshold: float) -> None:
    """Print the outcome of a snap query."""
    if result is None:
        console.print(f"  No anchor within {_num(threshold)} px")
        return
    direction = result.dir.value if result.dir else "none"
    console.print(
        f"[bold green]{SYM_OK}[/bold green] {result.widget_id} {SYM_DOT} {result.anchor} "
        f"at ({_num(result.x)}, {_num(result.y)}) {SYM_DOT} {_num(result.distance)} px "
        f"{SYM_DOT} exit {direction}"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_reroute(rows: Sequence[tuple[str, int, bool]]) -> None:
    """Print re-planned connectors.

    Args:
        rows: (connector id, point count, used fallback) tuples
    """
    table = Table(title="Re-planned connectors")
    table.add_column("Connector")
    table.add_column("Points", justify="right")
    table.add_column("Route")
    for connector_id, count, fallback in rows:
        table.add_row(connector_id, str(count), "[yellow]fallback[/yellow]" if fallback else SYM_OK)
    console.print(table)


def print_summary(stats: RoutingStats) -> None:
    """Print routing statistics."""
    console.print(
        f"\n[bold green]{SYM_OK}[/bold green] {stats.routes_planned} routes planned "
        f"{SYM_DOT} {stats.fallback_routes} fallback ({stats.fallback_ratio:.0%})"
    )
