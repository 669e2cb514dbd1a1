"""Pattern compilation exceptions."""

from __future__ import annotations

from tracefilter.domain.exceptions.base import TraceFilterError


class PatternCompileError(TraceFilterError):
    """Combined match pattern failed to compile.

    Only raised in strict mode; the default is to degrade to a
    pattern that matches nothing.

    Attributes:
        patterns: Source text of the patterns being combined
        reason: Error reported by the regex engine
    """

    def __init__(self, patterns: tuple[str, ...], reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if patterns is None:
            raise TypeError("patterns must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.patterns = patterns
        self.reason = reason
        super().__init__(f"Failed to compile {len(patterns)} pattern(s) {patterns!r}: {reason}")
