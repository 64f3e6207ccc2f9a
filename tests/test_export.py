import xml.etree.ElementTree as ET

import pytest

from canonpath.entities import (
    CircleEntity,
    ClosePath,
    CubicBezierTo,
    LineEntity,
    LineTo,
    MoveTo,
    PolylineEntity,
    PolylineVertex,
    VectorPath,
    WindingRule,
)
from canonpath.export import path_data, write_svg
from canonpath.shapes import convert_records
from canonpath.units import ImportOptions

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_path_data_uses_absolute_commands():
    path = VectorPath(
        commands=(
            MoveTo(0.0, 0.0),
            LineTo(10.0, 0.5),
            CubicBezierTo(1.0, 2.0, 3.0, 4.0, 5.0, 6.0),
            ClosePath(),
        )
    )
    assert path_data(path) == "M 0 0 L 10 0.5 C 1 2 3 4 5 6 Z"


def test_path_data_rounds_and_drops_negative_zero():
    path = VectorPath(commands=(MoveTo(-0.0000001, 1.23456789),))
    assert path_data(path, places=3) == "M 0 1.235"


def test_write_svg_groups_layers(tmp_path):
    records = [
        LineEntity((0.0, 0.0), (10.0, 0.0), layer="walls"),
        CircleEntity((5.0, 5.0), 2.0, layer="holes"),
        PolylineEntity((PolylineVertex(0.0, 0.0),), layer="walls"),
    ]
    result = convert_records(records, ImportOptions(winding_rule=WindingRule.EVEN_ODD))
    destination = tmp_path / "out" / "drawing.svg"
    write_svg(result.shapes, destination, result.bounds, stroke_width=0.5)

    root = ET.parse(destination).getroot()
    groups = root.findall(f"{SVG_NS}g")
    assert [g.get("id") for g in groups] == ["layer-walls", "layer-holes"]
    # The one-vertex polyline has no commands and is not written.
    walls = groups[0].findall(f"{SVG_NS}path")
    assert len(walls) == 1
    circle = groups[1].find(f"{SVG_NS}path")
    assert circle.get("data-name") == "Circle"
    assert circle.get("transform") == "translate(3 3)"
    assert circle.get("fill-rule") == "evenodd"
    assert circle.get("stroke-width") == "0.5"
    assert circle.get("d").startswith("M ")
    assert circle.get("d").endswith(" Z")


def test_write_svg_view_box_is_padded(tmp_path):
    destination = tmp_path / "empty.svg"
    write_svg([], destination, (0.0, 0.0, 100.0, 100.0), padding=5.0)
    root = ET.parse(destination).getroot()
    assert root.get("viewBox") == "-5 -5 110 110"


@pytest.mark.parametrize("layer", ['A&B "walls"', "<hidden>", "it's & <more>"])
def test_layer_names_are_escaped(tmp_path, layer):
    result = convert_records([LineEntity((0.0, 0.0), (10.0, 0.0), layer=layer)])
    destination = tmp_path / "escaped.svg"
    write_svg(result.shapes, destination, result.bounds, stroke='url("#a")')

    root = ET.parse(destination).getroot()
    group = root.find(f"{SVG_NS}g")
    assert group.get("id") == f"layer-{layer}"
    assert group.find(f"{SVG_NS}path").get("stroke") == 'url("#a")'
