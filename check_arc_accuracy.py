#!/usr/bin/env python3
"""
Measure how far the cubic arc approximation strays from the true circle.

Usage:
    python check_arc_accuracy.py --radius 100 --sweeps 15 45 90 180 360

For each sweep (degrees) the arc is converted, every cubic is sampled densely,
and the worst radial deviation is reported both absolutely and relative to
the radius.  Exit status is 1 when any sweep exceeds --max-relative-error.
"""

from __future__ import annotations

import argparse
import math
from typing import Sequence

import numpy as np

from canonpath.arcs import arc_point, arc_to_bezier
from canonpath.entities import CubicBezierTo, MoveTo, YSign
from canonpath.sampling import max_radial_error

DEFAULT_SWEEPS = (15.0, 30.0, 45.0, 90.0, 135.0, 180.0, 270.0, 360.0)


def measure(radius: float, sweep_deg: float, y_sign: YSign, samples: int) -> tuple[int, float]:
    center = (0.0, 0.0)
    end = math.radians(sweep_deg)
    body = arc_to_bezier(center, radius, radius, 0.0, end, y_sign=y_sign)
    commands = [MoveTo(*arc_point(center, radius, radius, 0.0, y_sign)), *body]
    cubics = sum(1 for cmd in body if isinstance(cmd, CubicBezierTo))
    return cubics, max_radial_error(commands, center, radius, samples)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report radial error of the cubic arc approximation.")
    parser.add_argument("--radius", type=float, default=1.0, help="Arc radius")
    parser.add_argument("--sweeps", type=float, nargs="+", default=list(DEFAULT_SWEEPS), help="Sweeps in degrees")
    parser.add_argument("--samples", type=int, default=512, help="Samples per cubic")
    parser.add_argument("--screen", action="store_true", help="Use the flipped screen Y convention")
    parser.add_argument(
        "--max-relative-error",
        type=float,
        default=3e-4,
        help="Fail when error / radius exceeds this value",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.radius <= 0:
        raise SystemExit("--radius must be positive")
    y_sign = YSign.SCREEN_CCW if args.screen else YSign.MATH_CCW

    rows = [(sweep, *measure(args.radius, sweep, y_sign, args.samples)) for sweep in args.sweeps]
    relative = np.array([err / args.radius for _, _, err in rows])

    print(f"{'sweep':>8} {'cubics':>6} {'max error':>14} {'relative':>12}")
    for (sweep, cubics, err), rel in zip(rows, relative):
        print(f"{sweep:8.2f} {cubics:6d} {err:14.9f} {rel:12.3e}")

    worst = int(np.argmax(relative))
    print(f"[i] Worst sweep {rows[worst][0]:.2f} deg: relative error {relative[worst]:.3e}")
    if np.any(relative > args.max_relative_error):
        print(f"[!] Relative error above {args.max_relative_error:.1e}")
        return 1
    print("[+] All sweeps within tolerance")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
