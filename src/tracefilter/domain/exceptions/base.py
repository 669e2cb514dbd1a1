"""Base exceptions for tracefilter domain."""


class TraceFilterError(Exception):
    """Root exception for all tracefilter errors.

    All domain exceptions inherit from this.
    Allows catching all tracefilter-specific errors.
    """
