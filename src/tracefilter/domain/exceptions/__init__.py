"""Domain exceptions."""

from tracefilter.domain.exceptions.base import TraceFilterError
from tracefilter.domain.exceptions.pattern import PatternCompileError

__all__ = [
    "PatternCompileError",
    "TraceFilterError",
]
