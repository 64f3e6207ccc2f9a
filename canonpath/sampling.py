from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .entities import ClosePath, CubicBezierTo, LineTo, MoveTo, PathCommand, Point

DEFAULT_CURVE_SAMPLES = 32


def evaluate_cubic(p0: Point, p1: Point, p2: Point, p3: Point, t: np.ndarray) -> np.ndarray:
    """Points of one cubic at parameters ``t``; returns an ``(len(t), 2)`` array."""

    t = np.asarray(t, dtype=float)[:, None]
    mt = 1.0 - t
    ctrl = np.array([p0, p1, p2, p3], dtype=float)
    return (
        (mt**3) * ctrl[0]
        + 3.0 * (mt**2) * t * ctrl[1]
        + 3.0 * mt * (t**2) * ctrl[2]
        + (t**3) * ctrl[3]
    )


def flatten_commands(
    commands: Sequence[PathCommand],
    samples_per_curve: int = DEFAULT_CURVE_SAMPLES,
) -> List[np.ndarray]:
    """Flatten a command list into one polyline array per subpath."""

    if samples_per_curve < 1:
        raise ValueError("samples_per_curve must be at least 1")
    t = np.linspace(0.0, 1.0, samples_per_curve + 1)[1:]
    polylines: List[np.ndarray] = []
    current: List[np.ndarray] = []
    start: Point | None = None
    pen: Point | None = None

    def finish() -> None:
        if current:
            polylines.append(np.vstack(current))

    for cmd in commands:
        if isinstance(cmd, MoveTo):
            finish()
            current = [np.array([[cmd.x, cmd.y]])]
            start = pen = (cmd.x, cmd.y)
        elif pen is None:
            continue
        elif isinstance(cmd, LineTo):
            current.append(np.array([[cmd.x, cmd.y]]))
            pen = (cmd.x, cmd.y)
        elif isinstance(cmd, CubicBezierTo):
            current.append(evaluate_cubic(pen, (cmd.x1, cmd.y1), (cmd.x2, cmd.y2), (cmd.x, cmd.y), t))
            pen = (cmd.x, cmd.y)
        elif isinstance(cmd, ClosePath) and start is not None:
            current.append(np.array([start]))
            pen = start
    finish()
    return polylines


def max_radial_error(
    commands: Sequence[PathCommand],
    center: Point,
    radius: float,
    samples_per_curve: int = 256,
) -> float:
    """Largest ``| |p - center| - radius |`` over the sampled path."""

    polylines = flatten_commands(commands, samples_per_curve)
    if not polylines:
        return 0.0
    pts = np.vstack(polylines)
    dist = np.hypot(pts[:, 0] - center[0], pts[:, 1] - center[1])
    return float(np.max(np.abs(dist - radius)))
