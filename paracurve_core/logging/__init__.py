"""
Structured Logging for paracurve
================================

Bounded Context: Observability

JSON-structured logging with typed events and contextual metadata.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from paracurve_core.logging import create_logger, LogEvent
    >>> logger = create_logger("cli")
    >>> logger.info(
    ...     event=LogEvent.CURVES_GENERATED,
    ...     message="Generated 1000 curves",
    ...     metadata={'count': 1000, 'seed': 42}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
