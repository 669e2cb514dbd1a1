"""Third-party tracker filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracefilter.infrastructure.filters.url import request_host, url_filter

if TYPE_CHECKING:
    from tracefilter.domain.ports.classifier import TrackerClassifierProtocol
    from tracefilter.infrastructure.filters.types import RequestFilter


def exclude_trackers(classifier: TrackerClassifierProtocol) -> RequestFilter:
    """Create filter that excludes requests to third-party tracker domains.

    Host is resolved the same way as for host filters
    (URL host, else Host header).

    Args:
        classifier: Decides whether a host is a tracker domain.

    Returns:
        Filter that returns False for tracker hosts.
        Returns True for requests with None URL (not excluded).
    """
    return url_filter(
        request_host,
        classifier.is_tracker_domain,
        include_on_match=False,
        on_missing=True,
    )
