"""CLI application entry point for connectorkit.

This module provides a developer CLI using Typer for inspecting anchors,
planning elbow routes, computing connector bounds and testing snapping.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from connectorkit import __version__
from connectorkit.cli.output import (
    console,
    print_anchors,
    print_bounds,
    print_error,
    print_reroute,
    print_route,
    print_shapes,
    print_snap,
    print_step,
    print_summary,
)
from connectorkit.config import (
    BoundsConfig,
    ConnectorKitSettings,
    LoggingConfig,
    RoutingConfig,
    SnapConfig,
)
from connectorkit.core import (
    AnchorFinder,
    ElbowRouter,
    InMemoryWidgetSource,
    absolute_position,
    compute_connector_bounds,
    connector_kind,
    count_bends,
    default_elbow_control,
    direction_with_rotation,
    get_anchors,
    get_shape_types_with_anchors,
    has_custom_anchors,
    manhattan_length,
    parse_direction,
)
from connectorkit.core.bounds import ELBOW
from connectorkit.domain import (
    AnchorAttachment,
    Direction,
    ElbowRoute,
    Point,
    ShapeFrame,
    Size,
    Widget,
)
from connectorkit.exceptions import ConnectorKitError, InvalidPointError, SceneError
from connectorkit.io import SceneReader
from connectorkit.utils import RoutingLogger, configure_logging

app = typer.Typer(
    name="connectorkit",
    help="Inspect connector anchors, elbow routes and snapping.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Connectorkit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Connector routing and anchor attachment tools."""


def parse_point(text: str) -> Point:
    """Parse "X,Y" into a point.

    Raises:
        InvalidPointError: If the text is not two comma-separated numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise InvalidPointError(text)
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise InvalidPointError(text) from e


def _parse_options(
    control: str | None, start_dir: str | None, end_dir: str | None
) -> tuple[Point | None, Direction | None, Direction | None]:
    return (
        parse_point(control) if control else None,
        parse_direction(start_dir),
        parse_direction(end_dir),
    )


CoordArg = Annotated[float, typer.Argument(show_default=False)]
ControlOpt = Annotated[str | None, typer.Option("--control", "-c", help="Control point as X,Y")]
StartDirOpt = Annotated[
    str | None, typer.Option("--start-dir", help="Start exit direction (up|down|left|right)")
]
EndDirOpt = Annotated[
    str | None, typer.Option("--end-dir", help="End exit direction (up|down|left|right)")
]
JsonOpt = Annotated[bool, typer.Option("--json", help="Print machine-readable JSON")]


@app.command()
def shapes(as_json: JsonOpt = False) -> None:
    """List shape types with registered anchors."""
    rows = [
        (shape, len(get_anchors(shape)), has_custom_anchors(shape))
        for shape in get_shape_types_with_anchors()
    ]

    if as_json:
        payload = [
            {"shapeType": shape, "anchors": count, "custom": custom}
            for shape, count, custom in rows
        ]
        console.print_json(json.dumps(payload))
        return

    print_shapes(rows)


@app.command()
def anchors(
    shape_type: Annotated[str, typer.Argument(help="Shape type, e.g. diamond")],
    x: Annotated[float, typer.Option("--x", help="Frame left")] = 0.0,
    y: Annotated[float, typer.Option("--y", help="Frame top")] = 0.0,
    width: Annotated[float, typer.Option("--width", "-w", help="Frame width", min=0.0)] = 100.0,
    height: Annotated[float, typer.Option("--height", "-h", help="Frame height", min=0.0)] = 100.0,
    rotation: Annotated[float, typer.Option("--rotation", "-r", help="Rotation in degrees")] = 0.0,
    as_json: JsonOpt = False,
) -> None:
    """Show a shape's anchors resolved on a frame."""
    frame = ShapeFrame(Point(x, y), Size(width, height), rotation)
    shape_anchors = get_anchors(shape_type)
    positions = [absolute_position(frame, a) for a in shape_anchors]
    directions = [direction_with_rotation(a.position, rotation) for a in shape_anchors]

    if as_json:
        payload = [
            {**a.to_dict(), "x": p.x, "y": p.y, "dir": d.value if d else None}
            for a, p, d in zip(shape_anchors, positions, directions, strict=True)
        ]
        console.print_json(json.dumps(payload))
        return

    print_anchors(
        shape_type,
        shape_anchors,
        positions,
        [d.value if d else None for d in directions],
    )


@app.command()
def route(
    sx: CoordArg,
    sy: CoordArg,
    ex: CoordArg,
    ey: CoordArg,
    control: ControlOpt = None,
    start_dir: StartDirOpt = None,
    end_dir: EndDirOpt = None,
    stub: Annotated[
        float,
        typer.Option(
            "--stub", "-s", help="Stub length before the first turn", min=0.0, max=500.0
        ),
    ] = 30.0,
    as_json: JsonOpt = False,
) -> None:
    """Plan an elbow route between two points."""
    try:
        control_pt, sdir, edir = _parse_options(control, start_dir, end_dir)
    except ConnectorKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    router = ElbowRouter(RoutingConfig(stub_length=stub))
    result = router.plan(Point(sx, sy), Point(ex, ey), control_pt, sdir, edir)

    if as_json:
        payload = {
            "points": [p.to_dict() for p in result.points],
            "handle": result.handle.to_dict(),
            "fallback": result.is_fallback,
        }
        console.print_json(json.dumps(payload))
        return

    print_route(
        result.points,
        result.handle,
        result.is_fallback,
        count_bends(result.points),
        manhattan_length(result.points),
    )


@app.command()
def bounds(
    sx: CoordArg,
    sy: CoordArg,
    ex: CoordArg,
    ey: CoordArg,
    control: ControlOpt = None,
    start_dir: StartDirOpt = None,
    end_dir: EndDirOpt = None,
    shape_type: Annotated[
        str, typer.Option("--shape-type", "-t", help="Connector shape type")
    ] = "elbow-connector",
    stroke_width: Annotated[
        float | None, typer.Option("--stroke-width", help="Stroke width", min=0.0)
    ] = None,
    as_json: JsonOpt = False,
) -> None:
    """Compute the container bounds of a connector."""
    try:
        control_pt, sdir, edir = _parse_options(control, start_dir, end_dir)
    except ConnectorKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    config = BoundsConfig()
    rect = compute_connector_bounds(
        Point(sx, sy),
        Point(ex, ey),
        control_pt,
        config.stroke_buffer(stroke_width),
        shape_type,
        start_dir=sdir,
        end_dir=edir,
        config=config,
    )

    if as_json:
        console.print_json(json.dumps(rect.to_dict()))
        return
    print_bounds(rect)


SceneArg = Annotated[Path, typer.Argument(help="Path to JSON scene file", show_default=False)]
PageArg = Annotated[str, typer.Argument(help="Page ID", show_default=False)]


def _load_scene(scene: Path, quiet: bool) -> InMemoryWidgetSource:
    if not quiet:
        print_step(f"Loading scene {scene}")
    try:
        return SceneReader(scene).load()
    except SceneError as e:
        print_error("Could not load scene", details=str(e))
        raise typer.Exit(code=1) from e


@app.command()
def snap(
    scene: SceneArg,
    page: PageArg,
    x: CoordArg,
    y: CoordArg,
    exclude: Annotated[
        str | None, typer.Option("--exclude", "-x", help="Widget ID to ignore")
    ] = None,
    threshold: Annotated[
        float,
        typer.Option("--threshold", help="Snap threshold in pixels", min=0.1, max=200.0),
    ] = 20.0,
    as_json: JsonOpt = False,
) -> None:
    """Find the anchor an endpoint would snap to."""
    source = _load_scene(scene, quiet=as_json)

    finder = AnchorFinder(source, SnapConfig(threshold=threshold))
    result = finder.find_nearest_anchor(page, Point(x, y), exclude)

    if as_json:
        console.print_json(json.dumps(result.to_dict() if result else None))
        return
    print_snap(result, threshold)


def _endpoint_direction(source: InMemoryWidgetSource, attachment: AnchorAttachment) -> Direction | None:
    if attachment.dir is not None:
        return attachment.dir
    target = source.get_widget(attachment.widget_id)
    if target is None:
        return None
    return direction_with_rotation(attachment.anchor, target.frame.rotation)


def plan_attached_route(
    source: InMemoryWidgetSource,
    finder: AnchorFinder,
    router: ElbowRouter,
    widget: Widget,
) -> ElbowRoute | None:
    """Re-plan an elbow connector whose ends are both attached.

    The stored control point biases the route. Without one, the
    anchor-aware default control is used so the route leaves each anchor
    along its exit direction.

    Args:
        source: Widget lookup holding the connector's targets
        finder: Finder used to resolve attachments
        router: Elbow planner
        widget: Connector widget

    Returns:
        The planned route, or None when the widget is not an attached elbow
        connector or an attachment target is missing
    """
    if not widget.is_connector or connector_kind(widget.shape_type) != ELBOW:
        return None
    if widget.start_attachment is None or widget.end_attachment is None:
        return None

    start = finder.attached_endpoint_position(widget.start_attachment)
    end = finder.attached_endpoint_position(widget.end_attachment)
    if start is None or end is None:
        return None

    start_dir = _endpoint_direction(source, widget.start_attachment)
    end_dir = _endpoint_direction(source, widget.end_attachment)
    control = widget.control_point or default_elbow_control(start, end, start_dir, end_dir)
    return router.plan(start, end, control, start_dir, end_dir)


@app.command()
def reroute(
    scene: SceneArg,
    page: PageArg,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", "-l", help="Log file path (auto-generated if omitted)"),
    ] = None,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only print the summary")
    ] = False,
) -> None:
    """Re-plan every attached elbow connector on a page."""
    settings = ConnectorKitSettings(logging=LoggingConfig(log_file=log_file))
    source = _load_scene(scene, quiet)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    routing_logger = RoutingLogger(logger)

    finder = AnchorFinder(source, settings.snap)
    router = ElbowRouter(settings.routing)
    rows: list[tuple[str, int, bool]] = []

    for widget_id in source.widget_ids_on_page(page):
        widget = source.get_widget(widget_id)
        if widget is None or not widget.is_connector:
            continue
        if connector_kind(widget.shape_type) != ELBOW:
            continue
        if widget.start_attachment is None or widget.end_attachment is None:
            continue

        route_result = plan_attached_route(source, finder, router, widget)
        if route_result is None:
            logger.warning("Attachment target missing", connector=widget_id)
            continue
        routing_logger.log_route(widget_id, route_result)
        rows.append((widget_id, len(route_result.points), route_result.is_fallback))

    if not quiet:
        print_reroute(rows)
    print_summary(routing_logger.stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
