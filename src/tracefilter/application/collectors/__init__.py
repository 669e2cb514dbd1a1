"""Collectors: filter stages, their witness table and terminal sinks.

Every collector implements CollectorProtocol (process/close), so filter
stages wrap terminal sinks and each other in any order.
"""

from tracefilter.application.collectors.chain import iter_chain, iter_stages, terminal_collector
from tracefilter.application.collectors.factories import (
    host_allowlist_collector,
    host_denylist_collector,
    path_allowlist_collector,
    path_denylist_collector,
    tracker_denylist_collector,
)
from tracefilter.application.collectors.pairing import WitnessTracker
from tracefilter.application.collectors.request_filter import FilterStats, RequestFilterCollector
from tracefilter.application.collectors.sinks import BufferCollector, NullCollector
from tracefilter.application.collectors.synchronized import SynchronizedCollector

__all__ = [
    # Stage
    "FilterStats",
    "RequestFilterCollector",
    "WitnessTracker",
    # Factories
    "host_allowlist_collector",
    "host_denylist_collector",
    "path_allowlist_collector",
    "path_denylist_collector",
    "tracker_denylist_collector",
    # Sinks and wrappers
    "BufferCollector",
    "NullCollector",
    "SynchronizedCollector",
    # Introspection
    "iter_chain",
    "iter_stages",
    "terminal_collector",
]
