#!/usr/bin/env python3
"""
Convert a JSON file of primitive curve records into an SVG built only from
canonical M/L/C/Z path data.

Each record becomes one positioned shape: arcs and ellipses are approximated
with quarter-turn cubics, bulge polylines get their arc edges, splines are
interpolated with Catmull-Rom.  Example:

    python curves_to_svg.py drawing.json -o drawing.svg --insunits 4 --unit px
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from canonpath.entities import ClosePath, CubicBezierTo, LineTo
from canonpath.export import write_svg
from canonpath.logging import ConversionLogger
from canonpath.records import load_records
from canonpath.shapes import convert_records
from canonpath.units import PIXELS_PER_MM, TARGET_UNITS, resolve_options


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert curve records (JSON) into a canonical-path SVG.")
    parser.add_argument("input", type=Path, help="JSON list of records, or an object with a 'records' list")
    parser.add_argument("-o", "--output", type=Path, help="Destination SVG (defaults to <input>.svg)")
    parser.add_argument(
        "--insunits",
        type=int,
        help="DXF $INSUNITS code of the source coordinates (overrides the document value)",
    )
    parser.add_argument("--unit", choices=TARGET_UNITS, default="px", help="Target unit for the output")
    parser.add_argument("--pixels-per-mm", type=float, default=PIXELS_PER_MM, help="Pixel density for --unit px")
    parser.add_argument("--fill-rule", choices=("nonzero", "evenodd"), help="Winding rule for every path")
    parser.add_argument("--layer", action="append", dest="layers", help="Only convert records on this layer (repeatable)")
    parser.add_argument("--stroke-width", type=float, default=1.0, help="Stroke width in output units")
    parser.add_argument(
        "--event-log",
        type=Path,
        help="Write degenerate-case substitutions and radius corrections to this text file",
    )
    parser.add_argument("--summary", action="store_true", help="Print a JSON summary of the converted shapes")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        document = load_records(args.input)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"[!] Could not read {args.input}: {exc}")
    print(f"[+] Loaded {len(document.records)} records from {args.input}")

    try:
        options = resolve_options(
            insunits=args.insunits if args.insunits is not None else document.insunits,
            target_unit=args.unit,
            pixels_per_mm=args.pixels_per_mm,
            fill_rule=args.fill_rule or document.fill_rule,
            layers=args.layers or document.layers,
        )
    except ValueError as exc:
        raise SystemExit(f"[!] {exc}")

    logger = ConversionLogger(args.event_log) if args.event_log else None
    result = convert_records(document.records, options, logger=logger)
    if result.skipped:
        print(f"[i] Skipped {result.skipped} records outside the selected layers")
    if not result.shapes:
        raise SystemExit("[!] No shapes were produced.")

    output_path = args.output or args.input.with_suffix(".svg")
    write_svg(result.shapes, output_path, result.bounds, stroke_width=args.stroke_width)

    cubic_count = sum(shape.path.count(CubicBezierTo) for shape in result.shapes)
    line_count = sum(shape.path.count(LineTo) for shape in result.shapes)
    closed_count = sum(1 for shape in result.shapes if shape.path.count(ClosePath))
    print(
        f"[+] {len(result.shapes)} shapes: {cubic_count} cubics, {line_count} lines, "
        f"{closed_count} closed (scale {result.scale:.6f})"
    )
    if logger:
        logger.flush()
        if logger.events:
            print(f"[i] {len(logger.events)} conversion events written to {args.event_log}")
    if args.summary:
        summary = [
            {
                "name": shape.name,
                "layer": shape.layer,
                "position": list(shape.position),
                "size": list(shape.size),
                "commands": len(shape.path),
            }
            for shape in result.shapes
        ]
        print(json.dumps({"bounds": list(result.bounds), "shapes": summary}, indent=2))
    print(f"[+] SVG written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
