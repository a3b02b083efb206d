"""
Geometry Layer
==============

Bounded Context: Parametric curves and their evaluation results.

Responsibilities:
- Point value type
- Curve contract (get_point, get_derivative)
- Circle, Ellipse, Helix closed-form variants
- NO collections, NO reductions, NO logging

Design Philosophy:
- Pure functions
- Immutable data structures
- Zero side effects
"""

from paracurve_core.geometry.point import Point
from paracurve_core.geometry.shapes import Curve, Circle, Ellipse, Helix, CURVE_TYPES

__all__ = [
    "Point",
    "Curve",
    "Circle",
    "Ellipse",
    "Helix",
    "CURVE_TYPES",
]
