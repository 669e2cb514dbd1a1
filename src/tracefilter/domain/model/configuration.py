"""Filter chain configuration.

User-provided configuration that decides which filter stages are installed.
Empty tuple / False = stage not installed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterChainConfig:
    """Filter chain configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.
    Patterns are already compiled: parsing flags or config files
    is the caller's job.

    Attributes:
        # Denylists (fail open on requests without URL)
        path_exclusions: Drop requests whose path matches any pattern.
        host_exclusions: Drop requests whose host matches any pattern.

        # Allowlists (fail closed on requests without URL)
        path_allowlist: Keep only requests whose path matches any pattern.
        host_allowlist: Keep only requests whose host matches any pattern.

        # Trackers
        filter_third_party_trackers: Drop requests to tracker domains.
            Requires a classifier when building the chain.

        # Stage behaviour
        strict_patterns: Raise PatternCompileError instead of degrading
            to a never-matching pattern.
        evict_on_match: Forget a witness ID once its response was dropped.
        max_tracked_witnesses: Bound on pending witness IDs per stage.
            None = unbounded.
    """

    # Denylists
    path_exclusions: tuple[re.Pattern[str], ...] = ()
    host_exclusions: tuple[re.Pattern[str], ...] = ()

    # Allowlists
    path_allowlist: tuple[re.Pattern[str], ...] = ()
    host_allowlist: tuple[re.Pattern[str], ...] = ()

    # Trackers
    filter_third_party_trackers: bool = False

    # Stage behaviour
    strict_patterns: bool = False
    evict_on_match: bool = False
    max_tracked_witnesses: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("path_exclusions", "host_exclusions", "path_allowlist", "host_allowlist"):
            patterns = getattr(self, name)
            if not isinstance(patterns, tuple):
                raise TypeError(f"{name} must be tuple, got {type(patterns).__name__}")
            for pattern in patterns:
                if not isinstance(pattern, re.Pattern):
                    raise TypeError(f"{name} must contain re.Pattern, got {type(pattern).__name__}")

        # max_tracked_witnesses must be >= 1 if set
        if self.max_tracked_witnesses is not None and self.max_tracked_witnesses < 1:
            raise ValueError(f"max_tracked_witnesses must be >= 1, got {self.max_tracked_witnesses}")

    def has_filters(self) -> bool:
        """Check if at least one filter stage is configured."""
        return bool(
            self.path_exclusions
            or self.host_exclusions
            or self.path_allowlist
            or self.host_allowlist
            or self.filter_third_party_trackers
        )
