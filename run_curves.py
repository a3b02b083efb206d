"""
Curves Demo
===========

Demonstrates paracurve_core usage end to end.

Example: one million random curves, circles projected out, sorted by
radius, and their radii summed sequentially and in parallel.

Architecture:
- geometry: Circle, Ellipse, Helix (immutable curves)
- collection: get_circles, sort_by_radius, count_sum_of_radii
"""

import math
import time

from paracurve_core import (
    ExecutionPolicy,
    count_sum_of_radii,
    create_curves,
    get_circles,
    sort_by_radius,
)
from paracurve_cli.cli import format_reduction_line

CURVE_COUNT = 1_000_000
PREVIEW_COUNT = 5


def main(curve_count: int = CURVE_COUNT):
    """Run the full generate/select/sort/reduce flow."""

    # 1. Random mixed collection
    curves = create_curves(curve_count)

    # 2. Evaluate a few curves at t = pi/4
    t = math.pi / 4
    for curve in curves[:PREVIEW_COUNT]:
        print(f"{type(curve).__name__}: point {curve.get_point(t)}, derivative {curve.get_derivative(t)}")
    print()

    # 3. Circles only, same instances as in `curves`
    circles = get_circles(curves)
    sort_by_radius(circles)
    print(f"Circles: {len(circles)} of {len(curves)} curves")

    # 4. Both reductions
    for policy in ExecutionPolicy:
        start = time.perf_counter()
        total = count_sum_of_radii(circles, policy)
        elapsed_us = int((time.perf_counter() - start) * 1_000_000)
        print(format_reduction_line(total, policy, elapsed_us))


if __name__ == "__main__":
    main()
