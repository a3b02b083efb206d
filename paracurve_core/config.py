"""
Configuration schema for curve runs.

Defines the random generation ranges, the reduction pool size and the
top-level run settings used by the paracurve CLI.
"""

import math
import numbers
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional
import yaml


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Sampling ranges for random curve generation.

    Radii and helix steps are drawn uniformly from [min, max).
    """

    radius_min: float = 0.1
    radius_max: float = 100.0
    step_min: float = 0.1
    step_max: float = 20.0

    def __post_init__(self):
        """Validate sampling ranges."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not _is_real(value):
                raise ValueError(f"{f.name} must be a number, got {value!r}")

        if not 0.0 < self.radius_min < self.radius_max:
            raise ValueError(
                f"radius range must satisfy 0 < radius_min < radius_max, "
                f"got [{self.radius_min}, {self.radius_max})"
            )

        if not 0.0 < self.step_min < self.step_max:
            raise ValueError(
                f"step range must satisfy 0 < step_min < step_max, "
                f"got [{self.step_min}, {self.step_max})"
            )


@dataclass(frozen=True)
class ReductionConfig:
    """Thread pool sizing for parallel reductions."""

    max_workers: Optional[int] = None  # None = CPU count

    def __post_init__(self):
        if self.max_workers is None:
            return

        if not _is_int(self.max_workers):
            raise ValueError(
                f"max_workers must be an integer, got {self.max_workers!r}"
            )

        if self.max_workers < 1:
            raise ValueError(
                f"max_workers must be >= 1, got {self.max_workers}"
            )


@dataclass(frozen=True)
class RunConfig:
    """
    Main configuration for a curve run.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    curve_count: int = 1000
    seed: Optional[int] = None
    evaluation_t: float = math.pi / 4
    print_curves: bool = False

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    reduction: ReductionConfig = field(default_factory=ReductionConfig)

    def __post_init__(self):
        """Validate run configuration."""
        if not _is_int(self.curve_count):
            raise ValueError(
                f"curve_count must be an integer, got {self.curve_count!r}"
            )

        if self.curve_count < 0:
            raise ValueError(
                f"curve_count must be >= 0, got {self.curve_count}"
            )

        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(
                f"seed must be an integer or null, got {self.seed!r}"
            )

        if not _is_real(self.evaluation_t):
            raise ValueError(
                f"evaluation_t must be a number, got {self.evaluation_t!r}"
            )

        if not math.isfinite(self.evaluation_t):
            raise ValueError(
                f"evaluation_t must be finite, got {self.evaluation_t}"
            )

        if not isinstance(self.print_curves, bool):
            raise ValueError(
                f"print_curves must be true or false, got {self.print_curves!r}"
            )

        # evaluation_t is always a float, even when written as an integer
        object.__setattr__(self, 'evaluation_t', float(self.evaluation_t))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "RunConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            curve_count: 1000000
            seed: 42
            evaluation_t: 0.7853981633974483
            print_curves: false

            generator:
              radius_min: 0.1
              radius_max: 100.0
              step_min: 0.1
              step_max: 20.0

            reduction:
              max_workers: 8

        Values are taken as written: wrong types and unknown keys are
        rejected, never coerced or ignored.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is malformed, a key is unknown or a
                value is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ValueError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

        kwargs: Dict[str, Any] = {
            key: value for key, value in data.items()
            if key not in ("generator", "reduction")
        }
        kwargs["generator"] = _load_section(GeneratorConfig, data, "generator", path)
        kwargs["reduction"] = _load_section(ReductionConfig, data, "reduction", path)

        return cls(**kwargs)


def _load_section(section_cls, data: Dict[str, Any], name: str, path: Path):
    """Build a nested config from its YAML mapping (missing or null = defaults)."""
    section = data.get(name)
    if section is None:
        return section_cls()

    if not isinstance(section, dict):
        raise ValueError(
            f"'{name}' in {path} must be a mapping, got {type(section).__name__}"
        )

    known = {f.name for f in fields(section_cls)}
    unknown = sorted(str(key) for key in section if key not in known)
    if unknown:
        raise ValueError(f"Unknown config key(s) in {path} under '{name}': {', '.join(unknown)}")

    return section_cls(**section)
