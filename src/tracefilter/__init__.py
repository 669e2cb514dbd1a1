"""tracefilter - request/response filter stages for network traffic pipelines."""

__version__ = "0.1.0"

from tracefilter.application.collectors import (
    BufferCollector,
    RequestFilterCollector,
    host_allowlist_collector,
    host_denylist_collector,
    path_allowlist_collector,
    path_denylist_collector,
    tracker_denylist_collector,
)
from tracefilter.application.services import build_filter_chain
from tracefilter.domain import FilterChainConfig, PatternCompileError, TraceFilterError

__all__ = [
    "BufferCollector",
    "FilterChainConfig",
    "PatternCompileError",
    "RequestFilterCollector",
    "TraceFilterError",
    "__version__",
    "build_filter_chain",
    "host_allowlist_collector",
    "host_denylist_collector",
    "path_allowlist_collector",
    "path_denylist_collector",
    "tracker_denylist_collector",
]
