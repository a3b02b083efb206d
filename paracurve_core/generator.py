"""
Random Curve Generator
======================

Builds heterogeneous curve collections for exercising the pipeline.

Each element picks Circle, Ellipse or Helix with equal probability.
Pass a seed for reproducible collections.
"""

import math
from typing import Iterable, Iterator, List, Optional

import numpy as np

from paracurve_core.config import GeneratorConfig
from paracurve_core.geometry.shapes import Curve, Circle, Ellipse, Helix


def create_curves(
    n: int,
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[Curve]:
    """
    Create `n` random curves.

    Args:
        n: Number of curves (0 yields an empty list)
        seed: Seed for numpy's default_rng (None = fresh entropy)
        config: Sampling ranges (default: GeneratorConfig())

    Returns:
        List of curves in generation order

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")

    config = config or GeneratorConfig()
    rng = np.random.default_rng(seed)

    kinds = rng.integers(0, 3, size=n)
    curves: List[Curve] = []

    for kind in kinds:
        if kind == 0:
            curves.append(Circle(_uniform(rng, config.radius_min, config.radius_max)))
        elif kind == 1:
            curves.append(Ellipse(
                _uniform(rng, config.radius_min, config.radius_max),
                _uniform(rng, config.radius_min, config.radius_max),
            ))
        else:
            curves.append(Helix(
                _uniform(rng, config.radius_min, config.radius_max),
                _uniform(rng, config.step_min, config.step_max),
            ))

    return curves


def _uniform(rng: np.random.Generator, low: float, high: float) -> float:
    return float(rng.uniform(low, high))


def describe_curves(curves: Iterable[Curve], t: float = math.pi / 4) -> Iterator[str]:
    """Yield one `point: ..., derivative: ...` line per curve, evaluated at t."""
    for curve in curves:
        yield f"point: {curve.get_point(t)}, derivative: {curve.get_derivative(t)}"
