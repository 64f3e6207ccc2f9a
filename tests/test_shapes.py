import math

import pytest

from canonpath.bounds import bounds_of
from canonpath.entities import (
    ArcEntity,
    CircleEntity,
    ClosePath,
    CubicBezierTo,
    EllipseEntity,
    EllipticalArcEntity,
    LineEntity,
    LineTo,
    MoveTo,
    PolylineEntity,
    PolylineVertex,
    QuadraticEntity,
    SplineEntity,
    WindingRule,
)
from canonpath.logging import ConversionLogger
from canonpath.shapes import (
    convert_arc,
    convert_circle,
    convert_ellipse,
    convert_elliptical_arc,
    convert_line,
    convert_polyline,
    convert_quadratic,
    convert_record,
    convert_records,
    convert_spline,
    is_full_ellipse,
)
from canonpath.units import ImportOptions


def assert_normalized(shape):
    bounds = bounds_of(shape.path.commands)
    assert bounds.min_x == pytest.approx(0.0, abs=1e-9)
    assert bounds.min_y == pytest.approx(0.0, abs=1e-9)


def test_line_position_and_size():
    shape = convert_line(LineEntity((2.0, 3.0), (12.0, 8.0), layer="walls"))
    assert shape.name == "Line"
    assert shape.layer == "walls"
    assert shape.position == (2.0, 3.0)
    assert shape.size == (10.0, 5.0)
    assert shape.path.commands == (MoveTo(0.0, 0.0), LineTo(10.0, 5.0))


def test_circle_box_is_two_radii():
    shape = convert_circle(CircleEntity((10.0, 10.0), 5.0))
    assert shape.name == "Circle"
    assert shape.position == pytest.approx((5.0, 5.0))
    assert shape.size == pytest.approx((10.0, 10.0))
    assert shape.path.count(CubicBezierTo) == 4
    assert isinstance(shape.path.commands[-1], ClosePath)
    assert_normalized(shape)


def test_zero_radius_circle_is_logged(tmp_path):
    logger = ConversionLogger(tmp_path / "events.txt")
    shape = convert_circle(CircleEntity((3.0, 4.0), 0.0), logger=logger)
    assert shape.path.commands == (MoveTo(0.0, 0.0),)
    assert shape.position == (3.0, 4.0)
    assert shape.size == (1.0, 1.0)
    assert logger.count("degenerate-circle") == 1


def test_arc_uses_screen_y():
    shape = convert_arc(ArcEntity((0.0, 0.0), 10.0, 0.0, 90.0))
    assert shape.name == "Arc"
    # Counter-clockwise from 0 to 90 degrees with Y pointing down ends above the center.
    assert shape.position == pytest.approx((0.0, -10.0), abs=1e-9)
    assert shape.size == pytest.approx((10.0, 10.0), abs=1e-9)
    assert shape.path.count(CubicBezierTo) == 1
    assert_normalized(shape)


def test_arc_crossing_zero_degrees():
    shape = convert_arc(ArcEntity((0.0, 0.0), 1.0, 350.0, 10.0))
    assert shape.path.count(CubicBezierTo) == 1


def test_full_ellipse():
    shape = convert_ellipse(EllipseEntity((0.0, 0.0), (10.0, 0.0), 0.5))
    assert shape.name == "Ellipse"
    assert shape.position == pytest.approx((-10.0, -5.0))
    assert shape.size == pytest.approx((20.0, 10.0))
    assert shape.path.count(CubicBezierTo) == 4
    assert isinstance(shape.path.commands[-1], ClosePath)


def test_rotated_ellipse_is_baked_into_path():
    shape = convert_ellipse(EllipseEntity((0.0, 0.0), (0.0, 10.0), 0.5))
    assert shape.rotation == 0.0
    assert shape.position == pytest.approx((-5.0, -10.0), abs=1e-9)
    assert shape.size == pytest.approx((10.0, 20.0), abs=1e-9)


def test_partial_ellipse_is_open():
    shape = convert_ellipse(EllipseEntity((0.0, 0.0), (4.0, 0.0), 0.5, 0.0, math.pi))
    assert shape.path.count(CubicBezierTo) == 2
    assert not any(isinstance(cmd, ClosePath) for cmd in shape.path.commands)


@pytest.mark.parametrize(
    "start, end, full",
    [(0.0, math.tau, True), (1.0, 1.0 + math.tau, True), (0.0, math.tau - 0.005, True), (0.0, math.pi, False)],
)
def test_is_full_ellipse(start, end, full):
    assert is_full_ellipse(start, end) is full


def test_polyline_with_bulge():
    vertices = (PolylineVertex(0.0, 0.0, 1.0), PolylineVertex(10.0, 0.0))
    shape = convert_polyline(PolylineEntity(vertices))
    assert shape.name == "Polyline"
    assert shape.path.count(CubicBezierTo) == 2
    assert shape.size[0] == pytest.approx(10.0)


def test_short_polyline_is_a_placeholder():
    shape = convert_polyline(PolylineEntity((PolylineVertex(5.0, 5.0),), layer="x"))
    assert shape.position == (0.0, 0.0)
    assert shape.size == (1.0, 1.0)
    assert len(shape.path) == 0
    assert shape.layer == "x"


def test_spline_falls_back_to_fit_points():
    shape = convert_spline(SplineEntity(fit_points=((0.0, 0.0), (5.0, 5.0), (10.0, 0.0))))
    assert shape.name == "Spline"
    assert shape.path.count(CubicBezierTo) == 2


def test_short_spline_is_a_placeholder():
    shape = convert_spline(SplineEntity(control_points=((1.0, 1.0),)))
    assert shape.size == (1.0, 1.0)
    assert len(shape.path) == 0


def test_elliptical_arc_shape():
    record = EllipticalArcEntity((0.0, 0.0), (10.0, 0.0), 5.0, 5.0, 0.0, False, True)
    shape = convert_elliptical_arc(record)
    assert shape.name == "Path"
    assert shape.path.count(CubicBezierTo) == 2
    assert shape.size[0] == pytest.approx(10.0)
    assert shape.size[1] == pytest.approx(5.0)


def test_quadratic_shape():
    shape = convert_quadratic(QuadraticEntity((0.0, 0.0), (3.0, 6.0), (6.0, 0.0)))
    assert shape.path.count(CubicBezierTo) == 1
    assert shape.size == pytest.approx((6.0, 4.0))


def test_scale_and_winding_rule_flow_through():
    options = ImportOptions(scale=2.0, winding_rule=WindingRule.EVEN_ODD)
    shape = convert_record(LineEntity((1.0, 1.0), (3.0, 4.0)), options)
    assert shape.position == (2.0, 2.0)
    assert shape.size == (4.0, 6.0)
    assert shape.path.winding_rule is WindingRule.EVEN_ODD


def test_unknown_record_type():
    with pytest.raises(TypeError):
        convert_record(object())


def test_layer_filter_and_drawing_bounds():
    records = [
        LineEntity((0.0, 0.0), (10.0, 10.0), layer="keep"),
        LineEntity((50.0, 50.0), (60.0, 60.0), layer="drop"),
        CircleEntity((20.0, 20.0), 5.0, layer="keep"),
    ]
    result = convert_records(records, ImportOptions(layers=frozenset({"keep"})))
    assert len(result.shapes) == 2
    assert result.skipped == 1
    assert result.scale == 1.0
    assert result.bounds == pytest.approx((0.0, 0.0, 25.0, 25.0))


def test_empty_drawing_uses_default_bounds():
    result = convert_records([])
    assert result.shapes == []
    assert result.bounds == (0.0, 0.0, 100.0, 100.0)
