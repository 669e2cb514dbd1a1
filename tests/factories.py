"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from datetime import UTC, datetime
from uuid import UUID

from tracefilter.domain.events import (
    URL,
    DroppedBytes,
    HTTPRequest,
    HTTPResponse,
    NetworkContent,
    ParsedNetworkTraffic,
    TCPConnectionMetadata,
    TLSHandshakeMetadata,
)

# Default stream - consistent across all tests
DEFAULT_STREAM_ID = UUID("6f1c1d4e-2b9a-4f3e-9d6b-0a1b2c3d4e5f")
OTHER_STREAM_ID = UUID("0d8e7f6a-5b4c-4d3e-8f2a-1b0c9d8e7f6a")
DEFAULT_HOST = "api.example.com"
DEFAULT_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

_NO_URL = object()


def make_url(path: str = "/", host: str = DEFAULT_HOST, scheme: str = "https") -> URL:
    """Create an absolute URL for tests."""
    return URL(scheme=scheme, host=host, path=path)


def make_request(
    path: str = "/",
    host: str = DEFAULT_HOST,
    *,
    stream_id: UUID = DEFAULT_STREAM_ID,
    seq: int = 1,
    method: str = "GET",
    url: URL | None | object = _NO_URL,
) -> HTTPRequest:
    """Create an HTTPRequest for tests.

    Args:
        path: URL path (ignored if url given)
        host: URL host and Host header (ignored for URL if url given)
        stream_id: Stream ID (default DEFAULT_STREAM_ID)
        seq: Sequence number (default 1)
        method: HTTP method (default GET)
        url: Explicit URL; pass None for a request without URL

    Returns:
        HTTPRequest instance
    """
    resolved = make_url(path=path, host=host) if url is _NO_URL else url
    return HTTPRequest(stream_id=stream_id, seq=seq, method=method, url=resolved, host=host)


def make_response(
    *,
    stream_id: UUID = DEFAULT_STREAM_ID,
    seq: int = 1,
    status_code: int = 200,
) -> HTTPResponse:
    """Create an HTTPResponse for tests."""
    return HTTPResponse(stream_id=stream_id, seq=seq, status_code=status_code)


def make_traffic(content: NetworkContent) -> ParsedNetworkTraffic:
    """Wrap content in a ParsedNetworkTraffic envelope."""
    return ParsedNetworkTraffic(
        content=content,
        src_ip="10.0.0.1",
        src_port=50000,
        dst_ip="10.0.0.2",
        dst_port=443,
        observation_time=DEFAULT_TIME,
        final_packet_time=DEFAULT_TIME,
    )


def request_traffic(path: str = "/", host: str = DEFAULT_HOST, **kwargs: object) -> ParsedNetworkTraffic:
    """Create request traffic. kwargs as for make_request."""
    return make_traffic(make_request(path, host, **kwargs))  # type: ignore[arg-type]


def response_traffic(**kwargs: object) -> ParsedNetworkTraffic:
    """Create response traffic. kwargs as for make_response."""
    return make_traffic(make_response(**kwargs))  # type: ignore[arg-type]


def make_other_contents() -> tuple[NetworkContent, ...]:
    """One instance of every non-HTTP content kind."""
    return (
        TCPConnectionMetadata(connection_id=DEFAULT_STREAM_ID, initiator="client"),
        TLSHandshakeMetadata(connection_id=DEFAULT_STREAM_ID, server_name=DEFAULT_HOST),
        DroppedBytes(count=42),
    )


class FailingCollector:
    """Collector whose process()/close() raise the given exception."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def process(self, traffic: ParsedNetworkTraffic) -> None:
        self.calls += 1
        raise self.error

    def close(self) -> None:
        raise self.error


class StaticClassifier:
    """Tracker classifier with a fixed host set, recording queries."""

    def __init__(self, *hosts: str) -> None:
        self.hosts = frozenset(hosts)
        self.queries: list[str] = []

    def is_tracker_domain(self, host: str) -> bool:
        self.queries.append(host)
        return host in self.hosts
