"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <area>.<action>

    area: curves, reduction, config, error
    action: generated, selected, sorted, completed, loaded
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - curves.*: Collection building and selection
    - reduction.*: Sum-of-radii reductions
    - config.*: Configuration lifecycle
    - error.*: Error conditions
    """

    # ========== Curve Events ==========
    CURVES_GENERATED = "curves.generated"
    """Random curve collection created."""

    CURVES_SELECTED = "curves.selected"
    """Circles projected out of a mixed collection."""

    CURVES_SORTED = "curves.sorted"
    """Circles ordered by radius."""

    # ========== Reduction Events ==========
    REDUCTION_COMPLETED = "reduction.completed"
    """Sum of radii computed under an execution policy."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Run configuration loaded and validated."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration could not be loaded or failed validation."""

