from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Point = Tuple[float, float]


class WindingRule(Enum):
    NON_ZERO = "NONZERO"
    EVEN_ODD = "EVENODD"

    @classmethod
    def from_fill_rule(cls, value: str | None) -> "WindingRule":
        """Map an SVG ``fill-rule`` style value onto a winding rule."""

        if value and value.strip().lower() == "evenodd":
            return cls.EVEN_ODD
        return cls.NON_ZERO


class YSign(Enum):
    """Sign applied to ``r * sin(angle)`` when placing points on an arc."""

    MATH_CCW = 1  # SVG / unit circle: y = cy + r*sin(a)
    SCREEN_CCW = -1  # DXF arcs drawn into a flipped screen Y axis: y = cy - r*sin(a)


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    @property
    def points(self) -> Tuple[Point, ...]:
        return ((self.x, self.y),)

    def translated(self, dx: float, dy: float) -> "MoveTo":
        return MoveTo(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    @property
    def points(self) -> Tuple[Point, ...]:
        return ((self.x, self.y),)

    def translated(self, dx: float, dy: float) -> "LineTo":
        return LineTo(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class CubicBezierTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    @property
    def points(self) -> Tuple[Point, ...]:
        return ((self.x1, self.y1), (self.x2, self.y2), (self.x, self.y))

    def translated(self, dx: float, dy: float) -> "CubicBezierTo":
        return CubicBezierTo(
            self.x1 + dx,
            self.y1 + dy,
            self.x2 + dx,
            self.y2 + dy,
            self.x + dx,
            self.y + dy,
        )


@dataclass(frozen=True)
class ClosePath:
    @property
    def points(self) -> Tuple[Point, ...]:
        return ()

    def translated(self, dx: float, dy: float) -> "ClosePath":
        return self


PathCommand = Union[MoveTo, LineTo, CubicBezierTo, ClosePath]


@dataclass(frozen=True)
class VectorPath:
    winding_rule: WindingRule = WindingRule.NON_ZERO
    commands: Tuple[PathCommand, ...] = ()

    def __post_init__(self) -> None:
        # Commands are always stored as a tuple.
        object.__setattr__(self, "commands", tuple(self.commands))

    def __len__(self) -> int:
        return len(self.commands)

    def count(self, kind: type) -> int:
        return sum(1 for cmd in self.commands if isinstance(cmd, kind))


@dataclass(frozen=True)
class ArcSpec:
    center: Point
    radius_x: float
    radius_y: float
    x_axis_rotation: float
    start_angle: float
    end_angle: float


@dataclass(frozen=True)
class ShapeGeometry:
    name: str
    layer: str
    position: Point
    size: Tuple[float, float]
    path: VectorPath
    rotation: float = 0.0


# --- Primitive records handed over by format parsers ---


@dataclass(frozen=True)
class LineEntity:
    start: Point
    end: Point
    layer: str = "0"


@dataclass(frozen=True)
class CircleEntity:
    center: Point
    radius: float
    layer: str = "0"


@dataclass(frozen=True)
class ArcEntity:
    center: Point
    radius: float
    start_angle: float  # degrees
    end_angle: float  # degrees
    layer: str = "0"


@dataclass(frozen=True)
class EllipseEntity:
    center: Point
    major_axis: Point  # relative to center
    ratio: float  # minor / major
    start_param: float = 0.0  # radians
    end_param: float = math.tau
    layer: str = "0"


@dataclass(frozen=True)
class PolylineVertex:
    x: float
    y: float
    bulge: float = 0.0


@dataclass(frozen=True)
class PolylineEntity:
    vertices: Tuple[PolylineVertex, ...]
    closed: bool = False
    layer: str = "0"


@dataclass(frozen=True)
class SplineEntity:
    control_points: Tuple[Point, ...] = ()
    fit_points: Tuple[Point, ...] = ()
    closed: bool = False
    layer: str = "0"


@dataclass(frozen=True)
class EllipticalArcEntity:
    """One SVG ``A`` segment in endpoint form; ``rotation`` is in degrees."""

    start: Point
    end: Point
    radius_x: float
    radius_y: float
    rotation: float = 0.0
    large_arc: bool = False
    sweep: bool = False
    layer: str = "0"


@dataclass(frozen=True)
class QuadraticEntity:
    start: Point
    control: Point
    end: Point
    layer: str = "0"


Record = Union[
    LineEntity,
    CircleEntity,
    ArcEntity,
    EllipseEntity,
    PolylineEntity,
    SplineEntity,
    EllipticalArcEntity,
    QuadraticEntity,
]
