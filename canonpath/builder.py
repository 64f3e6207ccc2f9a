from __future__ import annotations

from typing import Iterable, List, Tuple

from .bounds import EMPTY_BOUNDS, Bounds
from .entities import ClosePath, CubicBezierTo, LineTo, MoveTo, PathCommand, VectorPath, WindingRule


def _append(path: VectorPath, bounds: Bounds, cmd: PathCommand) -> Tuple[VectorPath, Bounds]:
    return (
        VectorPath(winding_rule=path.winding_rule, commands=path.commands + (cmd,)),
        bounds.include_command(cmd),
    )


def append_move(path: VectorPath, bounds: Bounds, x: float, y: float) -> Tuple[VectorPath, Bounds]:
    return _append(path, bounds, MoveTo(x, y))


def append_line(path: VectorPath, bounds: Bounds, x: float, y: float) -> Tuple[VectorPath, Bounds]:
    return _append(path, bounds, LineTo(x, y))


def append_cubic(
    path: VectorPath,
    bounds: Bounds,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x: float,
    y: float,
) -> Tuple[VectorPath, Bounds]:
    return _append(path, bounds, CubicBezierTo(x1, y1, x2, y2, x, y))


def append_close(path: VectorPath, bounds: Bounds) -> Tuple[VectorPath, Bounds]:
    return _append(path, bounds, ClosePath())


class PathBuilder:
    """Collects commands for one shape and folds their points into bounds.

    The builder is the mutable scratch space; ``build()`` hands back the
    immutable ``(VectorPath, Bounds)`` pair.
    """

    def __init__(self, winding_rule: WindingRule = WindingRule.NON_ZERO) -> None:
        self.winding_rule = winding_rule
        self._commands: List[PathCommand] = []
        self._bounds = EMPTY_BOUNDS

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def add(self, cmd: PathCommand) -> "PathBuilder":
        if not self._commands and not isinstance(cmd, MoveTo):
            raise ValueError(f"A path must start with MoveTo, got {type(cmd).__name__}")
        self._commands.append(cmd)
        self._bounds = self._bounds.include_command(cmd)
        return self

    def extend(self, commands: Iterable[PathCommand]) -> "PathBuilder":
        for cmd in commands:
            self.add(cmd)
        return self

    def move_to(self, x: float, y: float) -> "PathBuilder":
        return self.add(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> "PathBuilder":
        return self.add(LineTo(x, y))

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> "PathBuilder":
        return self.add(CubicBezierTo(x1, y1, x2, y2, x, y))

    def close(self) -> "PathBuilder":
        return self.add(ClosePath())

    def build(self) -> Tuple[VectorPath, Bounds]:
        return VectorPath(winding_rule=self.winding_rule, commands=tuple(self._commands)), self._bounds
