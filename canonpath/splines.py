from __future__ import annotations

from typing import List, Sequence

from .entities import ClosePath, CubicBezierTo, MoveTo, PathCommand, Point


def catmull_rom_to_bezier(points: Sequence[Point], closed: bool = False) -> List[PathCommand]:
    """Uniform Catmull-Rom through ``points`` as one cubic per edge.

    Neighbours are clamped at both ends, even for closed splines, and a closed
    spline is finished with ``ClosePath`` rather than a smooth wrap-around
    curve. The leading ``MoveTo`` is not included.
    """

    n = len(points)
    if n < 2:
        return []
    commands: List[PathCommand] = []
    for i in range(n - 1):
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(n - 1, i + 2)]
        commands.append(
            CubicBezierTo(
                p1[0] + (p2[0] - p0[0]) / 6.0,
                p1[1] + (p2[1] - p0[1]) / 6.0,
                p2[0] - (p3[0] - p1[0]) / 6.0,
                p2[1] - (p3[1] - p1[1]) / 6.0,
                p2[0],
                p2[1],
            )
        )
    if closed:
        commands.append(ClosePath())
    return commands


def catmull_rom_path(points: Sequence[Point], closed: bool = False) -> List[PathCommand]:
    body = catmull_rom_to_bezier(points, closed)
    if not body:
        return []
    return [MoveTo(points[0][0], points[0][1]), *body]
