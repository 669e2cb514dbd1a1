"""Infrastructure layer: stateless request filter functions.

Filters are pure functions: RequestFilter = Callable[[HTTPRequest], bool]
True = include request, False = exclude request.

Usage:
    from tracefilter.infrastructure.filters import compile_patterns, exclude_paths

    # Single filter
    flt = exclude_paths(compile_patterns([re.compile(r"^/health$")]))
    kept = [r for r in requests if flt(r)]
"""

from tracefilter.infrastructure.filters.patterns import NEVER_MATCH, compile_patterns
from tracefilter.infrastructure.filters.trackers import exclude_trackers
from tracefilter.infrastructure.filters.types import RequestFilter
from tracefilter.infrastructure.filters.url import (
    exclude_hosts,
    exclude_paths,
    include_hosts,
    include_paths,
    request_host,
    request_path,
    url_filter,
)

__all__ = [
    "NEVER_MATCH",
    "RequestFilter",
    "compile_patterns",
    "exclude_hosts",
    "exclude_paths",
    "exclude_trackers",
    "include_hosts",
    "include_paths",
    "request_host",
    "request_path",
    "url_filter",
]
