#!/usr/bin/env python3
"""
Render converted curve records to a PNG preview without an SVG viewer.

The records go through the same conversion as curves_to_svg.py, the canonical
paths are flattened by sampling every cubic, and the result is rasterized with
Pillow.  Example:

    python render_path_png.py drawing.json --preview drawing.png --size 512
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Sequence, Tuple

from PIL import Image, ImageDraw

from canonpath.entities import ShapeGeometry
from canonpath.records import load_records
from canonpath.sampling import DEFAULT_CURVE_SAMPLES, flatten_commands
from canonpath.shapes import convert_records
from canonpath.units import PIXELS_PER_MM, resolve_options


def _build_transform(
    bounds: Tuple[float, float, float, float],
    size_px: int,
    padding_ratio: float,
) -> Callable[[float, float], Tuple[float, float]]:
    min_x, min_y, max_x, max_y = bounds
    width = max(max_x - min_x, 1e-9)
    height = max(max_y - min_y, 1e-9)
    pad = max(width, height) * padding_ratio

    world_min_x = min_x - pad
    world_min_y = min_y - pad
    world_width = width + 2 * pad
    world_height = height + 2 * pad

    scale = min(size_px / world_width, size_px / world_height)
    offset_x = (size_px - world_width * scale) / 2.0
    offset_y = (size_px - world_height * scale) / 2.0

    # Canonical paths already use screen Y (down), so no flip here.
    def transform(x: float, y: float) -> Tuple[float, float]:
        return (x - world_min_x) * scale + offset_x, (y - world_min_y) * scale + offset_y

    return transform


def render_png(
    shapes: Sequence[ShapeGeometry],
    bounds: Tuple[float, float, float, float],
    destination: Path,
    size_px: int,
    *,
    samples_per_curve: int = DEFAULT_CURVE_SAMPLES,
    padding_ratio: float = 0.05,
) -> int:
    """Draw every shape outline; returns the number of polylines drawn."""

    transform = _build_transform(bounds, size_px, padding_ratio)
    image = Image.new("RGBA", (size_px, size_px), (255, 255, 255, 0))
    draw = ImageDraw.Draw(image)
    stroke = max(1, int(size_px / 256))

    drawn = 0
    for shape in shapes:
        ox, oy = shape.position
        for polyline in flatten_commands(shape.path.commands, samples_per_curve):
            if len(polyline) < 2:
                continue
            draw.line([transform(x + ox, y + oy) for x, y in polyline.tolist()], fill="black", width=stroke)
            drawn += 1

    destination.parent.mkdir(parents=True, exist_ok=True)
    image.save(destination)
    return drawn


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render curve records (JSON) to a PNG preview.")
    parser.add_argument("input", type=Path, help="JSON list of records, or an object with a 'records' list")
    parser.add_argument("--preview", type=Path, required=True, help="Destination PNG")
    parser.add_argument("--size", type=int, default=512, help="Image size in pixels (square)")
    parser.add_argument("--samples", type=int, default=DEFAULT_CURVE_SAMPLES, help="Samples per cubic segment")
    parser.add_argument("--pixels-per-mm", type=float, default=PIXELS_PER_MM, help="Pixel density of the preview coordinates")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        document = load_records(args.input)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"[!] Could not read {args.input}: {exc}")

    try:
        options = resolve_options(
            insunits=document.insunits,
            target_unit="px",
            pixels_per_mm=args.pixels_per_mm,
            fill_rule=document.fill_rule,
            layers=document.layers,
        )
    except ValueError as exc:
        raise SystemExit(f"[!] {exc}")
    result = convert_records(document.records, options)
    if not result.shapes:
        raise RuntimeError("No renderable shapes were produced from the records.")
    drawn = render_png(result.shapes, result.bounds, args.preview, args.size, samples_per_curve=args.samples)
    print(f"[+] {drawn} outlines rendered to {args.preview}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
