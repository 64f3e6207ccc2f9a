"""
Curve primitives (arcs, SVG elliptical arcs, bulge polylines, Catmull-Rom
splines) converted into canonical MoveTo/LineTo/CubicBezierTo/ClosePath paths.
"""

from .entities import (
    ArcEntity,
    ArcSpec,
    CircleEntity,
    ClosePath,
    CubicBezierTo,
    EllipseEntity,
    EllipticalArcEntity,
    LineEntity,
    LineTo,
    MoveTo,
    PathCommand,
    PolylineEntity,
    PolylineVertex,
    QuadraticEntity,
    ShapeGeometry,
    SplineEntity,
    VectorPath,
    WindingRule,
    YSign,
)
from .geometry import (
    BULGE_EPSILON,
    KAPPA,
    MAX_SEGMENT_SWEEP,
    MIN_SHAPE_EXTENT,
    fuzzy_eq,
    points_match,
    vector_angle,
)
from .bounds import EMPTY_BOUNDS, Bounds, bounds_of, drawing_bounds, normalize, normalize_shape
from .builder import PathBuilder, append_close, append_cubic, append_line, append_move
from .logging import ConversionLogger
from .arcs import (
    arc_segment_to_bezier,
    arc_to_bezier,
    ellipse_commands,
    elliptical_arc_to_bezier,
    endpoint_to_center,
    quadratic_to_cubic,
)
from .bulge import bulge_arc_spec, bulge_to_arc, polyline_commands
from .splines import catmull_rom_path, catmull_rom_to_bezier
from .units import ImportOptions, resolve_options, unit_scale
from .shapes import ConversionResult, convert_record, convert_records

__all__ = [
    "ArcEntity",
    "ArcSpec",
    "CircleEntity",
    "ClosePath",
    "CubicBezierTo",
    "EllipseEntity",
    "EllipticalArcEntity",
    "LineEntity",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PolylineEntity",
    "PolylineVertex",
    "QuadraticEntity",
    "ShapeGeometry",
    "SplineEntity",
    "VectorPath",
    "WindingRule",
    "YSign",
    "BULGE_EPSILON",
    "KAPPA",
    "MAX_SEGMENT_SWEEP",
    "MIN_SHAPE_EXTENT",
    "fuzzy_eq",
    "points_match",
    "vector_angle",
    "EMPTY_BOUNDS",
    "Bounds",
    "bounds_of",
    "drawing_bounds",
    "normalize",
    "normalize_shape",
    "PathBuilder",
    "append_close",
    "append_cubic",
    "append_line",
    "append_move",
    "ConversionLogger",
    "arc_segment_to_bezier",
    "arc_to_bezier",
    "ellipse_commands",
    "elliptical_arc_to_bezier",
    "endpoint_to_center",
    "quadratic_to_cubic",
    "bulge_arc_spec",
    "bulge_to_arc",
    "polyline_commands",
    "catmull_rom_path",
    "catmull_rom_to_bezier",
    "ImportOptions",
    "resolve_options",
    "unit_scale",
    "ConversionResult",
    "convert_record",
    "convert_records",
]
