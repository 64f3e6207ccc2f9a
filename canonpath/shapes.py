"""
Turn primitive geometry records into positioned shapes.

Every converter scales the record by ``scale``, runs the matching curve
converter, then normalizes the path so the shape's bounding box starts at
(0, 0) with the original minimum kept as the shape position.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from .arcs import arc_point, arc_to_bezier, elliptical_arc_to_bezier, ellipse_commands, quadratic_to_cubic
from .bounds import drawing_bounds, normalize_shape
from .bulge import polyline_commands
from .entities import (
    ArcEntity,
    CircleEntity,
    EllipseEntity,
    EllipticalArcEntity,
    LineEntity,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    PolylineEntity,
    PolylineVertex,
    QuadraticEntity,
    Record,
    ShapeGeometry,
    SplineEntity,
    VectorPath,
    WindingRule,
    YSign,
)
from .geometry import FULL_TURN_TOL, MIN_SHAPE_EXTENT, rotate_about
from .logging import ConversionLogger
from .splines import catmull_rom_path
from .units import ImportOptions


@dataclass(frozen=True)
class ConversionResult:
    shapes: List[ShapeGeometry]
    bounds: Tuple[float, float, float, float]
    scale: float
    skipped: int = 0


def _scaled(point: Point, scale: float) -> Point:
    return (point[0] * scale, point[1] * scale)


def _shape(
    commands: Sequence[PathCommand],
    name: str,
    layer: str,
    winding_rule: WindingRule,
) -> ShapeGeometry:
    return normalize_shape(VectorPath(winding_rule=winding_rule, commands=tuple(commands)), name=name, layer=layer)


def placeholder_shape(name: str, layer: str, winding_rule: WindingRule = WindingRule.NON_ZERO) -> ShapeGeometry:
    """Selectable 1x1 stand-in for records with too few points to draw."""

    return ShapeGeometry(
        name=name,
        layer=layer,
        position=(0.0, 0.0),
        size=(MIN_SHAPE_EXTENT, MIN_SHAPE_EXTENT),
        path=VectorPath(winding_rule=winding_rule),
    )


def convert_line(
    line: LineEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    x1, y1 = _scaled(line.start, scale)
    x2, y2 = _scaled(line.end, scale)
    return _shape([MoveTo(x1, y1), LineTo(x2, y2)], "Line", line.layer, winding_rule)


def convert_circle(
    circle: CircleEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    center = _scaled(circle.center, scale)
    radius = abs(circle.radius * scale)
    if radius == 0.0:
        if logger:
            logger.record(kind="degenerate-circle", note="zero radius circle kept as a point", points=(center,))
        return _shape([MoveTo(*center)], "Circle", circle.layer, winding_rule)
    return _shape(ellipse_commands(center, radius, radius), "Circle", circle.layer, winding_rule)


def convert_arc(
    arc: ArcEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    """DXF ARC: angles in degrees, counter-clockwise, drawn with the screen Y flip."""

    center = _scaled(arc.center, scale)
    radius = abs(arc.radius * scale)
    start = math.radians(arc.start_angle)
    end = math.radians(arc.end_angle)
    first = arc_point(center, radius, radius, start, YSign.SCREEN_CCW)
    commands: List[PathCommand] = [MoveTo(*first)]
    commands.extend(arc_to_bezier(center, radius, radius, start, end, y_sign=YSign.SCREEN_CCW, logger=logger))
    return _shape(commands, "Arc", arc.layer, winding_rule)


def is_full_ellipse(start_param: float, end_param: float) -> bool:
    return abs(end_param - start_param - math.tau) < FULL_TURN_TOL or (
        start_param == 0 and abs(end_param - math.tau) < FULL_TURN_TOL
    )


def convert_ellipse(
    ellipse: EllipseEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    """DXF ELLIPSE: major axis vector relative to the center plus minor/major ratio.

    Drawn with the same screen Y flip as arcs, so the axis rotation is
    mirrored as well.
    """

    center = _scaled(ellipse.center, scale)
    radius_x = math.hypot(*ellipse.major_axis) * abs(scale)
    radius_y = radius_x * abs(ellipse.ratio)
    rotation = -math.atan2(ellipse.major_axis[1], ellipse.major_axis[0])

    if is_full_ellipse(ellipse.start_param, ellipse.end_param):
        commands = ellipse_commands(center, radius_x, radius_y, rotation, YSign.SCREEN_CCW)
    else:
        first = arc_point(center, radius_x, radius_y, ellipse.start_param, YSign.SCREEN_CCW)
        first = rotate_about(first, center, rotation)
        commands = [MoveTo(*first)]
        commands.extend(
            arc_to_bezier(
                center,
                radius_x,
                radius_y,
                ellipse.start_param,
                ellipse.end_param,
                rotation,
                YSign.SCREEN_CCW,
                logger=logger,
            )
        )
    return _shape(commands, "Ellipse", ellipse.layer, winding_rule)


def convert_polyline(
    polyline: PolylineEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    if len(polyline.vertices) < 2:
        return placeholder_shape("Polyline", polyline.layer, winding_rule)
    vertices = [PolylineVertex(v.x * scale, v.y * scale, v.bulge) for v in polyline.vertices]
    commands = polyline_commands(vertices, polyline.closed, logger=logger)
    return _shape(commands, "Polyline", polyline.layer, winding_rule)


def convert_spline(
    spline: SplineEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    """Interpolate the control points (or the fit points when there are none)."""

    points = spline.control_points or spline.fit_points
    if len(points) < 2:
        return placeholder_shape("Spline", spline.layer, winding_rule)
    commands = catmull_rom_path([_scaled(p, scale) for p in points], spline.closed)
    return _shape(commands, "Spline", spline.layer, winding_rule)


def convert_elliptical_arc(
    arc: EllipticalArcEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    """SVG ``A`` segment in endpoint form (rotation in degrees)."""

    start = _scaled(arc.start, scale)
    end = _scaled(arc.end, scale)
    commands: List[PathCommand] = [MoveTo(*start)]
    commands.extend(
        elliptical_arc_to_bezier(
            start,
            end,
            arc.radius_x * scale,
            arc.radius_y * scale,
            math.radians(arc.rotation),
            arc.large_arc,
            arc.sweep,
            logger=logger,
        )
    )
    return _shape(commands, "Path", arc.layer, winding_rule)


def convert_quadratic(
    curve: QuadraticEntity,
    *,
    scale: float = 1.0,
    winding_rule: WindingRule = WindingRule.NON_ZERO,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    start = _scaled(curve.start, scale)
    commands: List[PathCommand] = [
        MoveTo(*start),
        quadratic_to_cubic(start, _scaled(curve.control, scale), _scaled(curve.end, scale)),
    ]
    return _shape(commands, "Path", curve.layer, winding_rule)


CONVERTERS: Dict[type, Callable[..., ShapeGeometry]] = {
    LineEntity: convert_line,
    CircleEntity: convert_circle,
    ArcEntity: convert_arc,
    EllipseEntity: convert_ellipse,
    PolylineEntity: convert_polyline,
    SplineEntity: convert_spline,
    EllipticalArcEntity: convert_elliptical_arc,
    QuadraticEntity: convert_quadratic,
}


def convert_record(
    record: Record,
    options: ImportOptions | None = None,
    *,
    logger: ConversionLogger | None = None,
) -> ShapeGeometry:
    options = options or ImportOptions()
    converter = CONVERTERS.get(type(record))
    if converter is None:
        raise TypeError(f"No converter for record type {type(record).__name__}")
    return converter(record, scale=options.scale, winding_rule=options.winding_rule, logger=logger)


def convert_records(
    records: Sequence[Record],
    options: ImportOptions | None = None,
    *,
    logger: ConversionLogger | None = None,
) -> ConversionResult:
    """Convert every record on an accepted layer and measure the whole drawing."""

    options = options or ImportOptions()
    shapes: List[ShapeGeometry] = []
    skipped = 0
    for record in records:
        if not options.accepts_layer(record.layer):
            skipped += 1
            continue
        shapes.append(convert_record(record, options, logger=logger))
    return ConversionResult(
        shapes=shapes,
        bounds=drawing_bounds(shapes),
        scale=options.scale,
        skipped=skipped,
    )
