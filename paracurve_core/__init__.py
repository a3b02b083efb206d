"""
paracurve core
==============

Bounded Context: Parametric curve evaluation and radius reductions.

Architecture:

    paracurve_core/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── point.py       # Point
    │   └── shapes.py      # Curve, Circle, Ellipse, Helix
    │
    ├── collection/        # Pipelines over mixed collections
    │   ├── selection.py   # get_circles, sort_by_radius
    │   └── reduction.py   # count_sum_of_radii, ExecutionPolicy
    │
    ├── generator.py       # Random collections
    ├── config.py          # YAML run configuration
    └── logging/           # Structured JSON logging

Usage:

    from paracurve_core import (
        Circle, Ellipse, Helix,
        get_circles, sort_by_radius, count_sum_of_radii, ExecutionPolicy,
    )

    curves = [Circle(3.0), Ellipse(1.0, 2.0), Circle(1.0), Helix(1.0, 2.0)]
    point = curves[0].get_point(0.5)

    circles = get_circles(curves)      # same instances, original order
    sort_by_radius(circles)            # in place, ascending

    total = count_sum_of_radii(circles)
    total = count_sum_of_radii(circles, ExecutionPolicy.PARALLEL)
"""

from paracurve_core.geometry import Point, Curve, Circle, Ellipse, Helix, CURVE_TYPES
from paracurve_core.collection import (
    get_circles,
    sort_by_radius,
    ExecutionPolicy,
    count_sum_of_radii,
)
from paracurve_core.generator import create_curves, describe_curves

__all__ = [
    # Geometry
    "Point",
    "Curve",
    "Circle",
    "Ellipse",
    "Helix",
    "CURVE_TYPES",
    # Collection
    "get_circles",
    "sort_by_radius",
    "ExecutionPolicy",
    "count_sum_of_radii",
    # Generator
    "create_curves",
    "describe_curves",
]

__version__ = "1.0.0"
