"""Named constructors for the standard filter stages.

Each factory compiles its patterns once and returns a
RequestFilterCollector wrapping the given collector:

    path_denylist_collector    drop matching paths      (no URL: keep)
    host_denylist_collector    drop matching hosts      (no URL: keep)
    path_allowlist_collector   keep only matching paths (no URL: drop)
    host_allowlist_collector   keep only matching hosts (no URL: drop)
    tracker_denylist_collector drop tracker hosts       (no URL: keep)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracefilter.application.collectors.pairing import WitnessTracker
from tracefilter.application.collectors.request_filter import RequestFilterCollector
from tracefilter.infrastructure.filters import (
    compile_patterns,
    exclude_hosts,
    exclude_paths,
    exclude_trackers,
    include_hosts,
    include_paths,
)

if TYPE_CHECKING:
    import re
    from collections.abc import Iterable

    from tracefilter.application.collectors.request_filter import TrackerFactory
    from tracefilter.domain.ports.classifier import TrackerClassifierProtocol
    from tracefilter.domain.ports.collector import CollectorProtocol


def path_denylist_collector(
    matchers: Iterable[re.Pattern[str]],
    collector: CollectorProtocol,
    *,
    strict: bool = False,
    tracker_factory: TrackerFactory = WitnessTracker,
) -> RequestFilterCollector:
    """Filter out requests whose URL path matches any of matchers."""
    return RequestFilterCollector(
        collector,
        exclude_paths(compile_patterns(matchers, strict=strict)),
        name="path-denylist",
        tracker_factory=tracker_factory,
    )


def host_denylist_collector(
    matchers: Iterable[re.Pattern[str]],
    collector: CollectorProtocol,
    *,
    strict: bool = False,
    tracker_factory: TrackerFactory = WitnessTracker,
) -> RequestFilterCollector:
    """Filter out requests whose host matches any of matchers."""
    return RequestFilterCollector(
        collector,
        exclude_hosts(compile_patterns(matchers, strict=strict)),
        name="host-denylist",
        tracker_factory=tracker_factory,
    )


def path_allowlist_collector(
    matchers: Iterable[re.Pattern[str]],
    collector: CollectorProtocol,
    *,
    strict: bool = False,
    tracker_factory: TrackerFactory = WitnessTracker,
) -> RequestFilterCollector:
    """Allow only requests whose URL path matches any of matchers."""
    return RequestFilterCollector(
        collector,
        include_paths(compile_patterns(matchers, strict=strict)),
        name="path-allowlist",
        tracker_factory=tracker_factory,
    )


def host_allowlist_collector(
    matchers: Iterable[re.Pattern[str]],
    collector: CollectorProtocol,
    *,
    strict: bool = False,
    tracker_factory: TrackerFactory = WitnessTracker,
) -> RequestFilterCollector:
    """Allow only requests whose host matches any of matchers."""
    return RequestFilterCollector(
        collector,
        include_hosts(compile_patterns(matchers, strict=strict)),
        name="host-allowlist",
        tracker_factory=tracker_factory,
    )


def tracker_denylist_collector(
    collector: CollectorProtocol,
    classifier: TrackerClassifierProtocol,
    *,
    tracker_factory: TrackerFactory = WitnessTracker,
) -> RequestFilterCollector:
    """Filter out requests to third-party tracker domains."""
    if classifier is None:
        raise TypeError("classifier must not be None")
    return RequestFilterCollector(
        collector,
        exclude_trackers(classifier),
        name="tracker-denylist",
        tracker_factory=tracker_factory,
    )
