"""Utility helpers shared across the :mod:`rhymecraft` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    start_span,
    timed,
)
from .syllables import estimate_syllable_count

__all__ = [
    "configure_logging",
    "estimate_syllable_count",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "start_span",
    "timed",
]
