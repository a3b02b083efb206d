"""
Radius Reduction Module
=======================

Sum of radii over a sequence of circles, sequential or parallel.

Threading Model:
- SEQUENCED: left fold on the calling thread
- PARALLEL: contiguous chunks summed on a thread pool, partials combined
  on the calling thread once every worker has finished

Thread Safety:
- Input sequence is only read during a reduction
- Each worker owns its partial accumulator; no locks are needed

The two policies can disagree in the last bits of the result because
floating-point addition is not associative.
"""

import logging
import numbers
import os
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from paracurve_core.geometry.shapes import Circle


logger = logging.getLogger(__name__)


class ExecutionPolicy(str, Enum):
    """How count_sum_of_radii schedules its work."""

    SEQUENCED = "sequenced"
    PARALLEL = "parallel"


def _default_workers() -> int:
    return os.cpu_count() or 1


def _partition(size: int, parts: int) -> List[Tuple[int, int]]:
    """Split [0, size) into at most `parts` contiguous, non-empty ranges."""
    parts = max(1, min(parts, size))
    bounds = np.linspace(0, size, parts + 1, dtype=np.int64)
    return [
        (int(start), int(stop))
        for start, stop in zip(bounds[:-1], bounds[1:])
        if stop > start
    ]


def _sum_range(circles: Sequence[Circle], start: int, stop: int) -> float:
    running_total = 0.0
    for i in range(start, stop):
        running_total += circles[i].get_radius()
    return running_total


def _sum_sequenced(circles: Sequence[Circle]) -> float:
    total = 0.0
    for circle in circles:
        total += circle.get_radius()
    return total


def _sum_parallel(circles: Sequence[Circle], max_workers: Optional[int]) -> float:
    if len(circles) == 0:
        return 0.0

    workers = max_workers or _default_workers()
    chunks = _partition(len(circles), workers)
    logger.debug(
        "Summing %d radii in %d chunks on %d workers",
        len(circles), len(chunks), workers,
    )

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="radii") as pool:
        partials = list(pool.map(lambda r: _sum_range(circles, r[0], r[1]), chunks))

    total = 0.0
    for partial in partials:
        total += partial
    return total


def count_sum_of_radii(
    circles: Sequence[Circle],
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENCED,
    max_workers: Optional[int] = None,
) -> float:
    """
    Sum the radii of a sequence of circles.

    Args:
        circles: Circles to reduce (only read, never modified)
        policy: SEQUENCED or PARALLEL
        max_workers: Pool size for PARALLEL (default: CPU count).
            Ignored for SEQUENCED.

    Returns:
        Sum of radii; 0.0 for an empty sequence

    Raises:
        ValueError: If policy is not an ExecutionPolicy value
        ValueError: If max_workers is given and is not an integer >= 1
    """
    policy = ExecutionPolicy(policy)
    if max_workers is not None:
        if not isinstance(max_workers, numbers.Integral) or isinstance(max_workers, bool):
            raise ValueError(f"max_workers must be an integer, got {max_workers!r}")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    if policy is ExecutionPolicy.SEQUENCED:
        return _sum_sequenced(circles)
    return _sum_parallel(circles, max_workers)
