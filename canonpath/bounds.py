from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .entities import PathCommand, ShapeGeometry, VectorPath
from .geometry import MIN_SHAPE_EXTENT

DEFAULT_DRAWING_BOUNDS = (0.0, 0.0, 100.0, 100.0)


@dataclass(frozen=True)
class Bounds:
    """Running min/max of every anchor and control point folded so far.

    Control points are included, so the box of a curved path can be larger
    than the curve itself.
    """

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    @property
    def is_empty(self) -> bool:
        return not math.isfinite(self.min_x)

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    def include(self, x: float, y: float) -> "Bounds":
        return Bounds(
            min(self.min_x, x),
            min(self.min_y, y),
            max(self.max_x, x),
            max(self.max_y, y),
        )

    def include_command(self, cmd: PathCommand) -> "Bounds":
        bounds = self
        for x, y in cmd.points:
            bounds = bounds.include(x, y)
        return bounds

    def union(self, other: "Bounds") -> "Bounds":
        if other.is_empty:
            return self
        return self.include(other.min_x, other.min_y).include(other.max_x, other.max_y)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


EMPTY_BOUNDS = Bounds()


def bounds_of(commands: Iterable[PathCommand], start: Bounds = EMPTY_BOUNDS) -> Bounds:
    bounds = start
    for cmd in commands:
        bounds = bounds.include_command(cmd)
    return bounds


def normalize(path: VectorPath, origin_x: float, origin_y: float) -> VectorPath:
    """Return ``path`` with ``(origin_x, origin_y)`` subtracted from every coordinate."""

    if origin_x == 0.0 and origin_y == 0.0:
        return path
    return VectorPath(
        winding_rule=path.winding_rule,
        commands=tuple(cmd.translated(-origin_x, -origin_y) for cmd in path.commands),
    )


def normalize_shape(path: VectorPath, *, name: str, layer: str = "0", rotation: float = 0.0) -> ShapeGeometry:
    """Move ``path`` so its bounding box starts at the origin and wrap it as a shape."""

    bounds = bounds_of(path.commands)
    if bounds.is_empty:
        return ShapeGeometry(
            name=name,
            layer=layer,
            position=(0.0, 0.0),
            size=(MIN_SHAPE_EXTENT, MIN_SHAPE_EXTENT),
            path=path,
            rotation=rotation,
        )
    return ShapeGeometry(
        name=name,
        layer=layer,
        position=(bounds.min_x, bounds.min_y),
        size=(
            bounds.width if bounds.width > 0 else MIN_SHAPE_EXTENT,
            bounds.height if bounds.height > 0 else MIN_SHAPE_EXTENT,
        ),
        path=normalize(path, bounds.min_x, bounds.min_y),
        rotation=rotation,
    )


def shape_bounds(shape: ShapeGeometry) -> Bounds:
    x, y = shape.position
    w, h = shape.size
    return Bounds(x, y, x + w, y + h)


def drawing_bounds(shapes: Iterable[ShapeGeometry]) -> tuple[float, float, float, float]:
    """Union of every shape rectangle; a default canvas when there is nothing to measure."""

    total = EMPTY_BOUNDS
    for shape in shapes:
        total = total.union(shape_bounds(shape))
    if total.is_empty:
        return DEFAULT_DRAWING_BOUNDS
    return total.as_tuple()
