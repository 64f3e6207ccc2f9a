from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple
from xml.sax.saxutils import quoteattr

from .entities import ClosePath, CubicBezierTo, LineTo, MoveTo, ShapeGeometry, VectorPath, WindingRule


def _num(value: float, places: int) -> str:
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def path_data(path: VectorPath, *, places: int = 6) -> str:
    """SVG ``d`` attribute for a canonical path (absolute M/L/C/Z only)."""

    parts: List[str] = []
    for cmd in path.commands:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {_num(cmd.x, places)} {_num(cmd.y, places)}")
        elif isinstance(cmd, LineTo):
            parts.append(f"L {_num(cmd.x, places)} {_num(cmd.y, places)}")
        elif isinstance(cmd, CubicBezierTo):
            coords = " ".join(_num(v, places) for v in (cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y))
            parts.append(f"C {coords}")
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
    return " ".join(parts)


def _fill_rule(rule: WindingRule) -> str:
    return "evenodd" if rule is WindingRule.EVEN_ODD else "nonzero"


def write_svg(
    shapes: Sequence[ShapeGeometry],
    destination: Path,
    bounds: Tuple[float, float, float, float],
    *,
    stroke: str = "black",
    stroke_width: float = 1.0,
    padding: float = 5.0,
) -> None:
    """
    Emit a standalone SVG with one ``<path>`` per shape, translated back to the
    shape position and grouped by layer name.
    """

    min_x, min_y, max_x, max_y = bounds
    view = (
        min_x - padding,
        min_y - padding,
        (max_x - min_x) + 2 * padding,
        (max_y - min_y) + 2 * padding,
    )
    lines: List[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="{}">'.format(" ".join(_num(v, 6) for v in view)),
    ]
    by_layer: dict[str, List[ShapeGeometry]] = {}
    for shape in shapes:
        by_layer.setdefault(shape.layer, []).append(shape)
    for layer, members in by_layer.items():
        lines.append(f'  <g id={quoteattr("layer-" + layer)}>')
        for shape in members:
            if not shape.path.commands:
                continue
            x, y = shape.position
            lines.append(
                f'    <path data-name={quoteattr(shape.name)} transform="translate({_num(x, 6)} {_num(y, 6)})" '
                f'fill="none" fill-rule="{_fill_rule(shape.path.winding_rule)}" '
                f'stroke={quoteattr(stroke)} stroke-width="{_num(stroke_width, 3)}" d="{path_data(shape.path)}"/>'
            )
        lines.append("  </g>")
    lines.append("</svg>")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text("\n".join(lines) + "\n", encoding="utf-8")
