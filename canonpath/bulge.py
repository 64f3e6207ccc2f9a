"""
CAD polyline bulge arcs.

A bulge is ``tan(theta / 4)`` of the arc's included angle ``theta``; positive
bulges turn counter-clockwise from the first vertex to the second, negative
bulges clockwise. ``|bulge| == 1`` is a semicircle and larger values are major
arcs.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .arcs import arc_to_bezier
from .entities import ArcSpec, ClosePath, LineTo, MoveTo, PathCommand, Point, PolylineVertex, YSign
from .geometry import BULGE_EPSILON
from .logging import ConversionLogger


def bulge_arc_spec(start: Point, end: Point, bulge: float) -> ArcSpec | None:
    """Center, radius and angles of a bulge arc, or ``None`` when the edge is straight.

    Angles are measured with ``atan2`` in the drawing's own Y direction, so
    they pair with ``YSign.MATH_CCW``.
    """

    if abs(bulge) < BULGE_EPSILON:
        return None
    x1, y1 = start
    x2, y2 = end
    dx = x2 - x1
    dy = y2 - y1
    chord = math.hypot(dx, dy)
    if chord == 0.0:
        return None

    radius = chord / (2.0 * math.sin(2.0 * math.atan(bulge)))
    offset = math.copysign(math.sqrt(max(0.0, radius * radius - (chord / 2.0) ** 2)), bulge)
    if abs(bulge) > 1.0:
        # Past a semicircle the center crosses to the bulge side of the chord.
        offset = -offset

    mx = (x1 + x2) / 2.0
    my = (y1 + y2) / 2.0
    cx = mx - offset * dy / chord
    cy = my + offset * dx / chord
    return ArcSpec(
        center=(cx, cy),
        radius_x=abs(radius),
        radius_y=abs(radius),
        x_axis_rotation=0.0,
        start_angle=math.atan2(y1 - cy, x1 - cx),
        end_angle=math.atan2(y2 - cy, x2 - cx),
    )


def bulge_to_arc(
    start: Point,
    end: Point,
    bulge: float,
    *,
    logger: ConversionLogger | None = None,
) -> List[PathCommand]:
    """Commands (without the leading ``MoveTo``) for one polyline edge."""

    spec = bulge_arc_spec(start, end, bulge)
    if spec is None:
        if logger and bulge != 0.0:
            logger.record(
                kind="degenerate-bulge",
                note="bulge below threshold or zero chord drawn as a line",
                points=(start, end),
                bulge=bulge,
            )
        return [LineTo(end[0], end[1])]

    if bulge > 0:
        return arc_to_bezier(
            spec.center,
            spec.radius_x,
            spec.radius_y,
            spec.start_angle,
            spec.end_angle,
            y_sign=YSign.MATH_CCW,
            logger=logger,
        )
    # Clockwise: mirror the angles and flip the Y sign so the sweep still
    # increases from the first vertex to the second.
    return arc_to_bezier(
        spec.center,
        spec.radius_x,
        spec.radius_y,
        -spec.start_angle,
        -spec.end_angle,
        y_sign=YSign.SCREEN_CCW,
        logger=logger,
    )


def polyline_commands(
    vertices: Sequence[PolylineVertex],
    closed: bool = False,
    *,
    logger: ConversionLogger | None = None,
) -> List[PathCommand]:
    """Full command list for a bulge polyline; empty for fewer than two vertices."""

    if len(vertices) < 2:
        return []
    first = vertices[0]
    commands: List[PathCommand] = [MoveTo(first.x, first.y)]
    for v1, v2 in zip(vertices, vertices[1:]):
        commands.extend(bulge_to_arc((v1.x, v1.y), (v2.x, v2.y), v1.bulge, logger=logger))
    if closed:
        last = vertices[-1]
        if abs(last.bulge) >= BULGE_EPSILON:
            commands.extend(bulge_to_arc((last.x, last.y), (first.x, first.y), last.bulge, logger=logger))
        commands.append(ClosePath())
    return commands
