"""Chain builder: FilterChainConfig -> wrapped collector.

Stages are installed innermost first:
    path exclusions, host exclusions, path allowlist, host allowlist, trackers
so the tracker stage (if any) sees traffic first. Stages with no
configuration are not installed at all.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import structlog

from tracefilter.application.collectors.factories import (
    host_allowlist_collector,
    host_denylist_collector,
    path_allowlist_collector,
    path_denylist_collector,
    tracker_denylist_collector,
)
from tracefilter.application.collectors.pairing import WitnessTracker

if TYPE_CHECKING:
    from tracefilter.domain.model.configuration import FilterChainConfig
    from tracefilter.domain.ports.classifier import TrackerClassifierProtocol
    from tracefilter.domain.ports.collector import CollectorProtocol

logger = structlog.get_logger()


def build_filter_chain(
    config: FilterChainConfig,
    collector: CollectorProtocol,
    classifier: TrackerClassifierProtocol | None = None,
) -> CollectorProtocol:
    """Wrap collector with the filter stages config asks for.

    Args:
        config: Which stages to install and how
        collector: Downstream collector at the end of the chain
        classifier: Tracker classifier, required if
            config.filter_third_party_trackers

    Returns:
        Outermost collector of the chain. collector itself if
        config has no filters.

    Raises:
        ValueError: If tracker filtering is enabled without classifier
        PatternCompileError: If config.strict_patterns and a pattern set
            does not compile
    """
    if config.filter_third_party_trackers and classifier is None:
        raise ValueError("filter_third_party_trackers requires a classifier")

    log = logger.bind(component="chain_builder")
    if not config.has_filters():
        log.debug("no filter stages configured")
        return collector

    tracker_factory = partial(
        WitnessTracker,
        config.max_tracked_witnesses,
        evict_on_match=config.evict_on_match,
    )
    strict = config.strict_patterns

    pattern_stages = (
        (config.path_exclusions, path_denylist_collector),
        (config.host_exclusions, host_denylist_collector),
        (config.path_allowlist, path_allowlist_collector),
        (config.host_allowlist, host_allowlist_collector),
    )
    for patterns, factory in pattern_stages:
        if not patterns:
            continue
        collector = factory(patterns, collector, strict=strict, tracker_factory=tracker_factory)
        log.debug("filter stage installed", stage=collector.name, patterns=len(patterns))

    if config.filter_third_party_trackers and classifier is not None:
        collector = tracker_denylist_collector(collector, classifier, tracker_factory=tracker_factory)
        log.debug("filter stage installed", stage=collector.name)

    return collector
