"""
Point Value Type
================

Immutable 3-D coordinate returned by curve evaluation.
"""

import numpy as np
from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class Point:
    """
    Immutable point (or vector) in 3-D space.

    Value object: no identity, componentwise equality.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate

    Example:
        >>> str(Point(1.0, 2.0, 0.0))
        '{1.0, 2.0, 0.0}'
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"{{{self.x}, {self.y}, {self.z}}}"

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    def as_array(self) -> np.ndarray:
        """Return coordinates as a float64 vector of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def norm(self) -> float:
        """Euclidean length of the vector from the origin."""
        return float(np.linalg.norm(self.as_array()))
