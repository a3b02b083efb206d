"""
Circle Selection Module
=======================

Stateless projection and ordering over mixed curve collections.

Design:
- Pure filtering (new list, same instances)
- In-place ordering (caller owns the list)
- Selection keyed on the Circle variant only
"""

from typing import List, Sequence

from paracurve_core.geometry.shapes import Curve, Circle


def get_circles(curves: Sequence[Curve]) -> List[Circle]:
    """
    Project the circles out of a mixed collection.

    Relative order is preserved and the returned list holds the same
    instances as the input (no copies). Other variants are dropped.

    Args:
        curves: Any ordered sequence of curves

    Returns:
        New list of Circle references, possibly empty
    """
    return [curve for curve in curves if isinstance(curve, Circle)]


def sort_by_radius(circles: List[Circle]) -> None:
    """
    Order circles by ascending radius, in place.

    Equal radii may end up in either relative order. NaN radii have no
    defined position.
    """
    circles.sort(key=Circle.get_radius)
