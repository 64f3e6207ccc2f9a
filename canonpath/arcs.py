"""
Arc to cubic Bezier conversion.

Two entry points share one per-segment derivation:

* ``arc_to_bezier`` works from a center, radii and an angle range, with the Y
  convention passed in explicitly (DXF arcs flip Y, SVG ellipses do not).
* ``elliptical_arc_to_bezier`` implements the SVG endpoint parameterization
  (two endpoints, radii, x-axis rotation, large-arc and sweep flags).

Neither emits the leading ``MoveTo``; the caller owns the start of the path.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from .entities import ClosePath, CubicBezierTo, LineTo, MoveTo, PathCommand, Point, YSign
from .geometry import arc_sweep, points_match, rotate_about, split_sweep, vector_angle
from .logging import ConversionLogger


def arc_point(
    center: Point,
    radius_x: float,
    radius_y: float,
    angle: float,
    y_sign: YSign = YSign.MATH_CCW,
) -> Point:
    return (
        center[0] + radius_x * math.cos(angle),
        center[1] + y_sign.value * radius_y * math.sin(angle),
    )


def bezier_alpha(delta: float) -> float:
    """Control arm length, relative to the radius, for an arc spanning ``delta``.

    ``4/3 * tan(delta/4)`` puts the cubic's midpoint on the arc; a quarter turn
    gives the familiar 0.5522847498.
    """

    return 4.0 / 3.0 * math.tan(delta / 4.0)


def arc_segment_to_bezier(
    center: Point,
    radius_x: float,
    radius_y: float,
    theta1: float,
    theta2: float,
    y_sign: YSign = YSign.MATH_CCW,
) -> CubicBezierTo:
    """Single cubic for ``[theta1, theta2]``; the span must not exceed a quarter turn."""

    alpha = bezier_alpha(theta2 - theta1)
    sign = y_sign.value
    x1, y1 = arc_point(center, radius_x, radius_y, theta1, y_sign)
    x2, y2 = arc_point(center, radius_x, radius_y, theta2, y_sign)

    # Tangents (derivative of the arc point with respect to the angle).
    tx1 = -radius_x * math.sin(theta1)
    ty1 = sign * radius_y * math.cos(theta1)
    tx2 = -radius_x * math.sin(theta2)
    ty2 = sign * radius_y * math.cos(theta2)

    return CubicBezierTo(
        x1 + alpha * tx1,
        y1 + alpha * ty1,
        x2 - alpha * tx2,
        y2 - alpha * ty2,
        x2,
        y2,
    )


def _rotated(cmd: CubicBezierTo, center: Point, rotation: float) -> CubicBezierTo:
    c1 = rotate_about((cmd.x1, cmd.y1), center, rotation)
    c2 = rotate_about((cmd.x2, cmd.y2), center, rotation)
    end = rotate_about((cmd.x, cmd.y), center, rotation)
    return CubicBezierTo(c1[0], c1[1], c2[0], c2[1], end[0], end[1])


def arc_to_bezier(
    center: Point,
    radius_x: float,
    radius_y: float,
    start_angle: float,
    end_angle: float,
    rotation: float = 0.0,
    y_sign: YSign = YSign.MATH_CCW,
    *,
    logger: ConversionLogger | None = None,
) -> List[PathCommand]:
    """Approximate the arc from ``start_angle`` to ``end_angle`` (radians) with cubics.

    The arc always runs in the direction of increasing angle: an end angle
    behind the start angle is moved forward by whole turns, and sweeps longer
    than a turn are drawn once. Each cubic spans at most 90 degrees.
    ``rotation`` turns the finished arc about ``center``. A zero radius or a
    zero sweep degrades to one ``LineTo`` the end point.
    """

    sweep = arc_sweep(start_angle, end_angle)
    end_angle = start_angle + sweep

    if radius_x == 0 or radius_y == 0 or sweep == 0:
        end = rotate_about(arc_point(center, radius_x, radius_y, end_angle, y_sign), center, rotation)
        if logger:
            logger.record(
                kind="degenerate-arc",
                note="zero radius or zero sweep drawn as a line",
                points=(center, end),
                radius_x=radius_x,
                radius_y=radius_y,
                sweep=sweep,
            )
        return [LineTo(end[0], end[1])]

    commands: List[PathCommand] = []
    for theta1, theta2 in split_sweep(start_angle, sweep):
        cmd = arc_segment_to_bezier(center, radius_x, radius_y, theta1, theta2, y_sign)
        commands.append(_rotated(cmd, center, rotation) if rotation else cmd)
    return commands


def ellipse_commands(
    center: Point,
    radius_x: float,
    radius_y: float,
    rotation: float = 0.0,
    y_sign: YSign = YSign.MATH_CCW,
) -> List[PathCommand]:
    """Closed ellipse: ``MoveTo`` at angle 0, four quarter cubics, ``ClosePath``."""

    start = rotate_about(arc_point(center, radius_x, radius_y, 0.0, y_sign), center, rotation)
    commands: List[PathCommand] = [MoveTo(start[0], start[1])]
    commands.extend(arc_to_bezier(center, radius_x, radius_y, 0.0, math.tau, rotation, y_sign))
    commands.append(ClosePath())
    return commands


def endpoint_to_center(
    start: Point,
    end: Point,
    radius_x: float,
    radius_y: float,
    phi: float,
    large_arc: bool,
    sweep: bool,
) -> Tuple[Point, float, float, float, float]:
    """Resolve an SVG endpoint arc into ``(center, rx, ry, theta1, dtheta)``.

    Radii are returned after the out-of-range correction. ``dtheta`` is
    negative for ``sweep=False`` and positive for ``sweep=True``.
    """

    x1, y1 = start
    x2, y2 = end
    rx = abs(radius_x)
    ry = abs(radius_y)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    dx = (x1 - x2) / 2.0
    dy = (y1 - y2) / 2.0
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    x1p_sq = x1p * x1p
    y1p_sq = y1p * y1p
    lam = x1p_sq / (rx * rx) + y1p_sq / (ry * ry)
    if lam > 1.0:
        root = math.sqrt(lam)
        rx *= root
        ry *= root
    rx_sq = rx * rx
    ry_sq = ry * ry

    num = rx_sq * ry_sq - rx_sq * y1p_sq - ry_sq * x1p_sq
    den = rx_sq * y1p_sq + ry_sq * x1p_sq
    coef = math.sqrt(max(0.0, num / den)) if den else 0.0
    if large_arc == sweep:
        coef = -coef

    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2.0

    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry
    theta1 = vector_angle(1.0, 0.0, ux, uy)
    dtheta = vector_angle(ux, uy, vx, vy)
    if not sweep and dtheta > 0:
        dtheta -= math.tau
    elif sweep and dtheta < 0:
        dtheta += math.tau

    return (cx, cy), rx, ry, theta1, dtheta


def elliptical_arc_to_bezier(
    start: Point,
    end: Point,
    radius_x: float,
    radius_y: float,
    phi: float,
    large_arc: bool,
    sweep: bool,
    *,
    logger: ConversionLogger | None = None,
) -> List[PathCommand]:
    """Convert one SVG endpoint arc (``phi`` in radians) into cubics ending at ``end``."""

    if radius_x == 0 or radius_y == 0 or points_match(start, end, tol=0.0):
        if logger:
            logger.record(
                kind="degenerate-arc",
                note="zero radius or coincident endpoints drawn as a line",
                points=(start, end),
                radius_x=radius_x,
                radius_y=radius_y,
            )
        return [LineTo(end[0], end[1])]

    center, rx, ry, theta1, dtheta = endpoint_to_center(start, end, radius_x, radius_y, phi, large_arc, sweep)
    if logger and (rx, ry) != (abs(radius_x), abs(radius_y)):
        logger.record(
            kind="radius-correction",
            note="radii too small for the chord were scaled up",
            points=(start, end),
            radius_x=rx,
            radius_y=ry,
        )

    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    def to_user(px: float, py: float) -> Point:
        return (
            center[0] + rx * cos_phi * px - ry * sin_phi * py,
            center[1] + rx * sin_phi * px + ry * cos_phi * py,
        )

    commands: List[PathCommand] = []
    for theta_a, theta_b in split_sweep(theta1, dtheta):
        unit = arc_segment_to_bezier((0.0, 0.0), 1.0, 1.0, theta_a, theta_b, YSign.MATH_CCW)
        c1 = to_user(unit.x1, unit.y1)
        c2 = to_user(unit.x2, unit.y2)
        p2 = to_user(unit.x, unit.y)
        commands.append(CubicBezierTo(c1[0], c1[1], c2[0], c2[1], p2[0], p2[1]))
    return commands


def quadratic_to_cubic(start: Point, control: Point, end: Point) -> CubicBezierTo:
    """Degree-elevate a quadratic Bezier; the curve itself is unchanged."""

    return CubicBezierTo(
        start[0] + 2.0 / 3.0 * (control[0] - start[0]),
        start[1] + 2.0 / 3.0 * (control[1] - start[1]),
        end[0] + 2.0 / 3.0 * (control[0] - end[0]),
        end[1] + 2.0 / 3.0 * (control[1] - end[1]),
        end[0],
        end[1],
    )
