"""URL filters: path and host denylists/allowlists.

Requests without a URL have nothing to match against:
- exclude_* (denylist) lets them through (fail open)
- include_* (allowlist) drops them (fail closed)

Both shapes are built by url_filter() with an on_missing policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import re
    from collections.abc import Callable

    from tracefilter.domain.events import URL, HTTPRequest
    from tracefilter.infrastructure.filters.types import RequestFilter


def request_path(request: HTTPRequest, url: URL) -> str:
    """Path used for path matching."""
    return url.path


def request_host(request: HTTPRequest, url: URL) -> str:
    """Host used for host matching.

    Origin-form targets ("/path") carry no host in the URL,
    so the Host header is used instead. Port is kept as sent.
    """
    return url.host or request.host


def url_filter(
    extract: Callable[[HTTPRequest, URL], str],
    matches: Callable[[str], bool],
    *,
    include_on_match: bool,
    on_missing: bool,
) -> RequestFilter:
    """Create filter from a URL component extractor and a matcher.

    Args:
        extract: Picks the string to match from request and its URL
        matches: Returns True when the string matches
        include_on_match: True = allowlist, False = denylist
        on_missing: Result for requests without URL

    Returns:
        Filter returning True to include the request.
    """

    def _filter(request: HTTPRequest) -> bool:
        url = request.url
        if url is None:
            return on_missing
        return bool(matches(extract(request, url))) == include_on_match

    return _filter


def _searcher(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    def _search(value: str) -> bool:
        return pattern.search(value) is not None

    return _search


def exclude_paths(pattern: re.Pattern[str]) -> RequestFilter:
    """Create filter that excludes requests whose path matches pattern.

    Returns:
        Filter that returns False for matching paths.
        Returns True for requests with None URL (not excluded).
    """
    return url_filter(request_path, _searcher(pattern), include_on_match=False, on_missing=True)


def exclude_hosts(pattern: re.Pattern[str]) -> RequestFilter:
    """Create filter that excludes requests whose host matches pattern.

    Returns:
        Filter that returns False for matching hosts.
        Returns True for requests with None URL (not excluded).
    """
    return url_filter(request_host, _searcher(pattern), include_on_match=False, on_missing=True)


def include_paths(pattern: re.Pattern[str]) -> RequestFilter:
    """Create filter that includes only requests whose path matches pattern.

    Returns:
        Filter that returns True for matching paths.
        Returns False for requests with None URL.
    """
    return url_filter(request_path, _searcher(pattern), include_on_match=True, on_missing=False)


def include_hosts(pattern: re.Pattern[str]) -> RequestFilter:
    """Create filter that includes only requests whose host matches pattern.

    Returns:
        Filter that returns True for matching hosts.
        Returns False for requests with None URL.
    """
    return url_filter(request_host, _searcher(pattern), include_on_match=True, on_missing=False)
