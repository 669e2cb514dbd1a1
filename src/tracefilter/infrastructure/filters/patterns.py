"""Pattern compiler: many user patterns -> one regex with OR semantics.

Each input is rendered to its source text and joined with '|'. Flags of
an input (passed to re.compile or written as a leading "(?i)" group) are
scoped to that input's own alternative: "(?i:...)". The result is compiled
once, when the filter is built, never per event.

Matching is unanchored (re.search); patterns anchor themselves with ^/$.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from tracefilter.domain.exceptions import PatternCompileError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = structlog.get_logger()

# Empty negative lookahead: fails at every position.
NEVER_MATCH: re.Pattern[str] = re.compile(r"(?!)")

# Flags that can be scoped to a group. UNICODE is the default for str patterns.
_SCOPED_FLAGS: tuple[tuple[re.RegexFlag, str], ...] = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)

# Leading global flag groups, e.g. "(?i)" or "(?im)(?s)". Already in pattern.flags.
_GLOBAL_FLAGS = re.compile(r"\A(?:\(\?[aiLmsux]+\))+")


def _render(pattern: re.Pattern[str]) -> str:
    """Render pattern as one alternative carrying its own flags."""
    source = _GLOBAL_FLAGS.sub("", pattern.pattern)
    letters = "".join(letter for flag, letter in _SCOPED_FLAGS if pattern.flags & flag)
    if pattern.flags & re.VERBOSE:
        # A trailing comment would swallow the closing parenthesis
        source += "\n"
    return f"(?{letters}:{source})"


def compile_patterns(
    patterns: Iterable[re.Pattern[str]],
    *,
    strict: bool = False,
) -> re.Pattern[str]:
    """Combine patterns into one regex matching if any input matches.

    Args:
        patterns: Compiled str patterns, in priority order (order does not
            change the match result)
        strict: Raise on compilation failure instead of degrading

    Returns:
        Combined pattern. Empty input or compilation failure (non-strict)
        returns NEVER_MATCH.

    Raises:
        TypeError: If an element is not a compiled str re.Pattern
        PatternCompileError: If strict and the combined regex is invalid
    """
    sources: list[str] = []
    alternatives: list[str] = []
    for pattern in patterns:
        if not isinstance(pattern, re.Pattern):
            raise TypeError(f"expected re.Pattern, got {type(pattern).__name__}")
        if not isinstance(pattern.pattern, str):
            raise TypeError(f"expected str pattern, got {type(pattern.pattern).__name__}")
        sources.append(pattern.pattern)
        alternatives.append(_render(pattern))

    if not alternatives:
        return NEVER_MATCH

    try:
        return re.compile("|".join(alternatives))
    except re.error as e:
        if strict:
            raise PatternCompileError(tuple(sources), str(e)) from e
        logger.warning(
            "pattern compilation failed, filter disabled",
            patterns=sources,
            error=str(e),
        )
        return NEVER_MATCH
