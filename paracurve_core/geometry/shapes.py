"""
Parametric Curves Module
========================

Closed-form parametric curves - NO state, NO side effects.

Design:
- One abstract contract (Curve), exactly three variants
- Immutable variants (frozen dataclass pattern)
- Parameters accepted as given: degenerate shapes evaluate to degenerate points
- Thread-safe by design (immutability)
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from paracurve_core.geometry.point import Point


TWO_PI = 2 * math.pi


class Curve(ABC):
    """
    Evaluation contract shared by every curve variant.

    Both operations are pure functions of t and the variant's
    construction-time parameters.
    """

    @abstractmethod
    def get_point(self, t: float) -> Point:
        """Position on the curve at parameter t."""

    @abstractmethod
    def get_derivative(self, t: float) -> Point:
        """First derivative (tangent, not normalized) at parameter t."""


@dataclass(frozen=True)
class Circle(Curve):
    """
    Circle of a given radius centered at the origin in the z=0 plane.

    point(t)      = (r·cos t, r·sin t, 0)
    derivative(t) = (-r·sin t, r·cos t, 0)
    """

    radius: float

    def get_point(self, t: float) -> Point:
        return Point(self.radius * math.cos(t), self.radius * math.sin(t), 0.0)

    def get_derivative(self, t: float) -> Point:
        return Point(-self.radius * math.sin(t), self.radius * math.cos(t), 0.0)

    def get_radius(self) -> float:
        """Radius used by the selection and reduction pipeline."""
        return self.radius


@dataclass(frozen=True)
class Ellipse(Curve):
    """
    Axis-aligned ellipse centered at the origin in the z=0 plane.

    point(t)      = (rx·cos t, ry·sin t, 0)
    derivative(t) = (-rx·sin t, ry·cos t, 0)
    """

    radius_x: float
    radius_y: float

    def get_point(self, t: float) -> Point:
        return Point(self.radius_x * math.cos(t), self.radius_y * math.sin(t), 0.0)

    def get_derivative(self, t: float) -> Point:
        return Point(-self.radius_x * math.sin(t), self.radius_y * math.cos(t), 0.0)


@dataclass(frozen=True)
class Helix(Curve):
    """
    Circular helix around the z axis.

    `step` is the rise along z per full turn (t advancing by 2π).

    point(t)      = (r·cos t, r·sin t, t·step/2π)
    derivative(t) = (-r·sin t, r·cos t, step/2π)
    """

    radius: float
    step: float

    def get_point(self, t: float) -> Point:
        return Point(
            self.radius * math.cos(t),
            self.radius * math.sin(t),
            t * self.step / TWO_PI,
        )

    def get_derivative(self, t: float) -> Point:
        return Point(
            -self.radius * math.sin(t),
            self.radius * math.cos(t),
            self.step / TWO_PI,
        )


# The closed set of variants; nothing else implements Curve.
CURVE_TYPES = (Circle, Ellipse, Helix)
