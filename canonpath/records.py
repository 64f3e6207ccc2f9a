"""
Load primitive geometry records from the JSON interchange used by the CLIs.

A document is either a list of record objects or an object with a
``"records"`` list plus optional ``"insunits"``, ``"fill_rule"`` and
``"layers"`` keys. Every record has a ``"type"`` and an optional ``"layer"``:

    {"type": "arc", "center": [0, 0], "radius": 5, "start_angle": 0, "end_angle": 90}
    {"type": "polyline", "vertices": [[0, 0, 0.5], [10, 0]], "closed": true}
    {"type": "svg_arc", "start": [0, 0], "end": [10, 0], "rx": 5, "ry": 5,
     "rotation": 0, "large_arc": false, "sweep": true}
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

from .entities import (
    ArcEntity,
    CircleEntity,
    EllipseEntity,
    EllipticalArcEntity,
    LineEntity,
    Point,
    PolylineEntity,
    PolylineVertex,
    QuadraticEntity,
    Record,
    SplineEntity,
)


@dataclass
class RecordDocument:
    records: List[Record]
    insunits: int | None = None
    fill_rule: str | None = None
    layers: List[str] = field(default_factory=list)


def _number(data: Dict[str, Any], key: str, index: int, default: float | None = None) -> float:
    if key not in data:
        if default is None:
            raise ValueError(f"record #{index}: missing required field {key!r}")
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"record #{index}: field {key!r} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"record #{index}: field {key!r} must be finite")
    return float(value)


def _point(value: Any, key: str, index: int) -> Point:
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        raise ValueError(f"record #{index}: field {key!r} must be an [x, y] pair")
    x, y = value[0], value[1]
    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, (int, float)) or not math.isfinite(coord):
            raise ValueError(f"record #{index}: field {key!r} has a non-numeric coordinate {coord!r}")
    return (float(x), float(y))


def _required_point(data: Dict[str, Any], key: str, index: int) -> Point:
    if key not in data:
        raise ValueError(f"record #{index}: missing required field {key!r}")
    return _point(data[key], key, index)


def _points(data: Dict[str, Any], key: str, index: int) -> Tuple[Point, ...]:
    raw = data.get(key, [])
    if not isinstance(raw, list):
        raise ValueError(f"record #{index}: field {key!r} must be a list of points")
    return tuple(_point(item, key, index) for item in raw)


def _layer(data: Dict[str, Any]) -> str:
    return str(data.get("layer", "0"))


def _line(data: Dict[str, Any], index: int) -> Record:
    return LineEntity(_required_point(data, "start", index), _required_point(data, "end", index), _layer(data))


def _circle(data: Dict[str, Any], index: int) -> Record:
    return CircleEntity(_required_point(data, "center", index), _number(data, "radius", index), _layer(data))


def _arc(data: Dict[str, Any], index: int) -> Record:
    return ArcEntity(
        center=_required_point(data, "center", index),
        radius=_number(data, "radius", index),
        start_angle=_number(data, "start_angle", index),
        end_angle=_number(data, "end_angle", index),
        layer=_layer(data),
    )


def _ellipse(data: Dict[str, Any], index: int) -> Record:
    return EllipseEntity(
        center=_required_point(data, "center", index),
        major_axis=_required_point(data, "major_axis", index),
        ratio=_number(data, "ratio", index),
        start_param=_number(data, "start_param", index, 0.0),
        end_param=_number(data, "end_param", index, math.tau),
        layer=_layer(data),
    )


def _polyline(data: Dict[str, Any], index: int) -> Record:
    raw = data.get("vertices")
    if not isinstance(raw, list):
        raise ValueError(f"record #{index}: missing required field 'vertices'")
    vertices: List[PolylineVertex] = []
    for item in raw:
        x, y = _point(item, "vertices", index)
        bulge = item[2] if len(item) > 2 else 0.0
        if isinstance(bulge, bool) or not isinstance(bulge, (int, float)) or not math.isfinite(bulge):
            raise ValueError(f"record #{index}: bulge must be a finite number, got {bulge!r}")
        vertices.append(PolylineVertex(x, y, float(bulge)))
    return PolylineEntity(tuple(vertices), bool(data.get("closed", False)), _layer(data))


def _spline(data: Dict[str, Any], index: int) -> Record:
    return SplineEntity(
        control_points=_points(data, "control_points", index),
        fit_points=_points(data, "fit_points", index),
        closed=bool(data.get("closed", False)),
        layer=_layer(data),
    )


def _svg_arc(data: Dict[str, Any], index: int) -> Record:
    return EllipticalArcEntity(
        start=_required_point(data, "start", index),
        end=_required_point(data, "end", index),
        radius_x=_number(data, "rx", index),
        radius_y=_number(data, "ry", index),
        rotation=_number(data, "rotation", index, 0.0),
        large_arc=bool(data.get("large_arc", False)),
        sweep=bool(data.get("sweep", False)),
        layer=_layer(data),
    )


def _quadratic(data: Dict[str, Any], index: int) -> Record:
    return QuadraticEntity(
        start=_required_point(data, "start", index),
        control=_required_point(data, "control", index),
        end=_required_point(data, "end", index),
        layer=_layer(data),
    )


RECORD_PARSERS: Dict[str, Callable[[Dict[str, Any], int], Record]] = {
    "line": _line,
    "circle": _circle,
    "arc": _arc,
    "ellipse": _ellipse,
    "polyline": _polyline,
    "lwpolyline": _polyline,
    "spline": _spline,
    "svg_arc": _svg_arc,
    "quadratic": _quadratic,
}


def parse_record(data: Any, index: int = 0) -> Record:
    if not isinstance(data, dict):
        raise ValueError(f"record #{index}: expected an object, got {type(data).__name__}")
    kind = str(data.get("type", "")).lower()
    parser = RECORD_PARSERS.get(kind)
    if parser is None:
        raise ValueError(f"record #{index}: unknown record type {data.get('type')!r}")
    return parser(data, index)


def parse_document(data: Any) -> RecordDocument:
    if isinstance(data, list):
        return RecordDocument([parse_record(item, idx) for idx, item in enumerate(data)])
    if not isinstance(data, dict) or not isinstance(data.get("records"), list):
        raise ValueError("expected a list of records or an object with a 'records' list")
    insunits = data.get("insunits")
    if insunits is not None and (isinstance(insunits, bool) or not isinstance(insunits, int)):
        raise ValueError(f"insunits must be an integer code, got {insunits!r}")
    layers = data.get("layers") or []
    return RecordDocument(
        records=[parse_record(item, idx) for idx, item in enumerate(data["records"])],
        insunits=insunits,
        fill_rule=data.get("fill_rule"),
        layers=[str(name) for name in layers],
    )


def load_records(path: Path) -> RecordDocument:
    return parse_document(json.loads(path.read_text(encoding="utf-8")))
