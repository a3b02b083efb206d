"""
Collection Layer
================

Bounded Context: Pipelines over mixed curve collections.

Responsibilities:
- Circle selection (get_circles)
- Ordering by radius (sort_by_radius)
- Sum of radii, sequential or parallel (count_sum_of_radii)
"""

from paracurve_core.collection.selection import get_circles, sort_by_radius
from paracurve_core.collection.reduction import ExecutionPolicy, count_sum_of_radii

__all__ = [
    "get_circles",
    "sort_by_radius",
    "ExecutionPolicy",
    "count_sum_of_radii",
]
