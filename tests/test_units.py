import pytest

from canonpath.entities import WindingRule
from canonpath.units import PIXELS_PER_MM, ImportOptions, resolve_options, unit_scale, unit_to_mm


def test_default_unit_is_millimetres():
    assert unit_to_mm(None) == 1.0
    assert unit_to_mm(0) == 1.0
    assert unit_to_mm(999) == 1.0


@pytest.mark.parametrize(
    "insunits, target, expected",
    [
        (1, "mm", 25.4),
        (1, "in", 1.0),
        (4, "px", PIXELS_PER_MM),
        (6, "mm", 1000.0),
        (5, "in", 10.0 / 25.4),
    ],
)
def test_unit_scale(insunits, target, expected):
    assert unit_scale(insunits, target) == pytest.approx(expected)


def test_custom_pixel_density():
    assert unit_scale(1, "px", pixels_per_mm=4.0) == pytest.approx(101.6)


def test_unknown_target_unit():
    with pytest.raises(ValueError, match="Unsupported target unit"):
        unit_scale(4, "pt")


def test_resolve_options():
    options = resolve_options(insunits=1, target_unit="mm", fill_rule="evenodd", layers=["a", "b"])
    assert options.scale == pytest.approx(25.4)
    assert options.winding_rule is WindingRule.EVEN_ODD
    assert options.accepts_layer("a")
    assert not options.accepts_layer("c")


def test_resolve_options_rejects_bad_density():
    with pytest.raises(ValueError):
        resolve_options(pixels_per_mm=0.0)


def test_no_layer_filter_accepts_everything():
    assert ImportOptions().accepts_layer("anything")


@pytest.mark.parametrize(
    "value, rule",
    [("evenodd", WindingRule.EVEN_ODD), (" EvenOdd ", WindingRule.EVEN_ODD), ("nonzero", WindingRule.NON_ZERO), (None, WindingRule.NON_ZERO)],
)
def test_fill_rule_mapping(value, rule):
    assert WindingRule.from_fill_rule(value) is rule
