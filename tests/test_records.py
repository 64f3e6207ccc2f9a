import json
import math

import pytest

from canonpath.entities import (
    ArcEntity,
    EllipseEntity,
    EllipticalArcEntity,
    LineEntity,
    PolylineEntity,
    PolylineVertex,
    QuadraticEntity,
    SplineEntity,
)
from canonpath.records import load_records, parse_document, parse_record


def test_parse_arc():
    record = parse_record(
        {"type": "arc", "center": [1, 2], "radius": 5, "start_angle": 0, "end_angle": 90, "layer": "A"}
    )
    assert record == ArcEntity((1.0, 2.0), 5.0, 0.0, 90.0, "A")


def test_type_is_case_insensitive_and_layer_defaults():
    record = parse_record({"type": "LINE", "start": [0, 0], "end": [3, 4]})
    assert record == LineEntity((0.0, 0.0), (3.0, 4.0))
    assert record.layer == "0"


def test_polyline_vertices_take_optional_bulge():
    record = parse_record({"type": "lwpolyline", "vertices": [[0, 0, 0.5], [10, 0]], "closed": True})
    assert record == PolylineEntity((PolylineVertex(0.0, 0.0, 0.5), PolylineVertex(10.0, 0.0, 0.0)), True)


def test_ellipse_defaults_to_full_turn():
    record = parse_record({"type": "ellipse", "center": [0, 0], "major_axis": [4, 0], "ratio": 0.5})
    assert isinstance(record, EllipseEntity)
    assert record.start_param == 0.0
    assert record.end_param == math.tau


def test_svg_arc_and_quadratic():
    arc = parse_record(
        {"type": "svg_arc", "start": [0, 0], "end": [10, 0], "rx": 5, "ry": 3, "rotation": 15, "sweep": True}
    )
    assert arc == EllipticalArcEntity((0.0, 0.0), (10.0, 0.0), 5.0, 3.0, 15.0, False, True)
    quad = parse_record({"type": "quadratic", "start": [0, 0], "control": [1, 2], "end": [2, 0]})
    assert quad == QuadraticEntity((0.0, 0.0), (1.0, 2.0), (2.0, 0.0))


def test_spline_points():
    record = parse_record({"type": "spline", "fit_points": [[0, 0], [1, 1]]})
    assert record == SplineEntity((), ((0.0, 0.0), (1.0, 1.0)))


@pytest.mark.parametrize(
    "data, message",
    [
        ({"type": "circle", "center": [0, 0]}, "radius"),
        ({"type": "circle", "center": [0, 0], "radius": "big"}, "radius"),
        ({"type": "circle", "center": [0, 0], "radius": True}, "radius"),
        ({"type": "circle", "center": [0], "radius": 1}, "center"),
        ({"type": "line", "start": [0, "a"], "end": [1, 1]}, "start"),
        ({"type": "circle", "center": [0, 0], "radius": float("nan")}, "finite"),
        ({"type": "polyline", "vertices": [[0, 0, "x"], [1, 1]]}, "bulge"),
        ({"type": "polyline"}, "vertices"),
        ({"type": "hatch"}, "unknown record type"),
        ([1, 2], "expected an object"),
    ],
)
def test_invalid_records(data, message):
    with pytest.raises(ValueError, match=message):
        parse_record(data, 3)


def test_error_names_the_record_index():
    with pytest.raises(ValueError, match="record #1"):
        parse_document([{"type": "line", "start": [0, 0], "end": [1, 1]}, {"type": "line"}])


def test_document_object_form():
    document = parse_document(
        {
            "insunits": 1,
            "fill_rule": "evenodd",
            "layers": ["walls"],
            "records": [{"type": "circle", "center": [0, 0], "radius": 1, "layer": "walls"}],
        }
    )
    assert document.insunits == 1
    assert document.fill_rule == "evenodd"
    assert document.layers == ["walls"]
    assert len(document.records) == 1


@pytest.mark.parametrize("data", [{"records": "nope"}, {"insunits": "in", "records": []}, 42])
def test_invalid_documents(data):
    with pytest.raises(ValueError):
        parse_document(data)


def test_load_records(tmp_path):
    source = tmp_path / "drawing.json"
    source.write_text(json.dumps([{"type": "line", "start": [0, 0], "end": [1, 0]}]), encoding="utf-8")
    document = load_records(source)
    assert document.records == [LineEntity((0.0, 0.0), (1.0, 0.0))]
    assert document.insunits is None
