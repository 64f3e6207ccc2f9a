from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from .entities import WindingRule

# 96 DPI.
PIXELS_PER_MM = 3.7795275591
MM_PER_INCH = 25.4

# DXF $INSUNITS code -> millimetres per drawing unit. Unknown codes and 0
# (unitless) are treated as millimetres.
INSUNITS_TO_MM = {
    0: 1.0,
    1: 25.4,  # inches
    2: 304.8,  # feet
    3: 1609344.0,  # miles
    4: 1.0,  # millimetres
    5: 10.0,  # centimetres
    6: 1000.0,  # metres
    7: 1000000.0,  # kilometres
    8: 0.0000254,  # microinches
    9: 0.0254,  # mils
    10: 914.4,  # yards
    11: 1e-7,  # angstroms
    12: 1e-6,  # nanometres
    13: 0.001,  # microns
    14: 100.0,  # decimetres
    15: 10000.0,  # decametres
    16: 100000.0,  # hectometres
}

TARGET_UNITS = ("mm", "in", "px")


@dataclass(frozen=True)
class ImportOptions:
    scale: float = 1.0
    winding_rule: WindingRule = WindingRule.NON_ZERO
    layers: FrozenSet[str] = frozenset()

    def accepts_layer(self, layer: str) -> bool:
        return not self.layers or layer in self.layers


def unit_to_mm(insunits: int | None) -> float:
    if insunits is None:
        return 1.0
    return INSUNITS_TO_MM.get(insunits, 1.0)


def unit_scale(insunits: int | None, target_unit: str = "px", *, pixels_per_mm: float = PIXELS_PER_MM) -> float:
    """Factor that takes a drawing coordinate to ``target_unit``."""

    mm_scale = unit_to_mm(insunits)
    if target_unit == "px":
        return mm_scale * pixels_per_mm
    if target_unit == "in":
        return mm_scale / MM_PER_INCH
    if target_unit == "mm":
        return mm_scale
    raise ValueError(f"Unsupported target unit: {target_unit!r} (expected one of {', '.join(TARGET_UNITS)})")


def resolve_options(
    *,
    insunits: int | None = None,
    target_unit: str = "px",
    pixels_per_mm: float = PIXELS_PER_MM,
    fill_rule: str | None = None,
    layers: list[str] | None = None,
) -> ImportOptions:
    if pixels_per_mm <= 0:
        raise ValueError("pixels_per_mm must be positive")
    return ImportOptions(
        scale=unit_scale(insunits, target_unit, pixels_per_mm=pixels_per_mm),
        winding_rule=WindingRule.from_fill_rule(fill_rule),
        layers=frozenset(layers or ()),
    )
