from __future__ import annotations

import math
from typing import List, Tuple

from .entities import Point

# Below this |bulge| a polyline edge is straight: sin(2*atan(b)) -> 0 blows up the radius.
BULGE_EPSILON = 1e-4
# One cubic per quarter turn keeps the radial error under 0.03% of the radius.
MAX_SEGMENT_SWEEP = math.pi / 2
# Imported shapes never collapse below one unit on either axis.
MIN_SHAPE_EXTENT = 1.0
# Ellipse parameter spans this close to a full turn are drawn as closed ellipses.
FULL_TURN_TOL = 0.01
# Absorbs rounding in sweep / MAX_SEGMENT_SWEEP so a full turn stays at 4 pieces.
SEGMENT_COUNT_SLACK = 1e-9
# Control point distance of a quarter circle of radius 1.
KAPPA = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0


def fuzzy_eq(a: float, b: float, tol: float = 1e-6) -> bool:
    return abs(a - b) <= tol


def points_match(p1: Point, p2: Point, tol: float = 1e-6) -> bool:
    return fuzzy_eq(p1[0], p2[0], tol) and fuzzy_eq(p1[1], p2[1], tol)


def rotate_about(point: Point, center: Point, angle: float) -> Point:
    if angle == 0.0:
        return point
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return (
        center[0] + cos_a * dx - sin_a * dy,
        center[1] + sin_a * dx + cos_a * dy,
    )


def arc_sweep(start: float, end: float) -> float:
    """Counter-clockwise sweep from ``start`` to ``end``, in ``[0, tau]``.

    An end angle behind the start is moved forward by whole turns; anything
    past one full turn is drawn as a single full turn.
    """

    sweep = end - start
    if sweep < 0:
        remainder = math.fmod(sweep, math.tau)
        sweep = remainder + math.tau if remainder < 0 else 0.0
    return min(sweep, math.tau)


def segment_count(sweep: float) -> int:
    return max(1, math.ceil(abs(sweep) / MAX_SEGMENT_SWEEP - SEGMENT_COUNT_SLACK))


def split_sweep(start: float, sweep: float) -> List[Tuple[float, float]]:
    """Split ``[start, start + sweep]`` into equal pieces of at most a quarter turn."""

    count = segment_count(sweep)
    step = sweep / count
    pieces: List[Tuple[float, float]] = []
    theta = start
    for idx in range(count):
        nxt = start + sweep if idx == count - 1 else theta + step
        pieces.append((theta, nxt))
        theta = nxt
    return pieces


def vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from ``u`` to ``v`` in radians, in ``[-pi, pi]``."""

    sign = -1.0 if ux * vy - uy * vx < 0 else 1.0
    umag = math.hypot(ux, uy)
    vmag = math.hypot(vx, vy)
    if umag == 0.0 or vmag == 0.0:
        return 0.0
    ratio = (ux * vx + uy * vy) / (umag * vmag)
    ratio = max(-1.0, min(1.0, ratio))
    return sign * math.acos(ratio)
