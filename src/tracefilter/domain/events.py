"""Domain layer: immutable value objects for parsed network traffic.

Every collector receives a ParsedNetworkTraffic envelope. Its content is one
of the NetworkContent kinds; only HTTPRequest and HTTPResponse are inspected
by filter stages, everything else passes through.
All objects frozen, invariants validated in __post_init__.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from urllib.parse import urlsplit
from uuid import UUID

from tracefilter.domain.witness import WitnessID, to_witness_id


_EMPTY_HEADERS: Mapping[str, str] = MappingProxyType({})


def _validate_stream(stream_id: UUID, seq: int) -> None:
    if not isinstance(stream_id, UUID):
        raise TypeError(f"stream_id must be UUID, got {type(stream_id).__name__}")
    if seq < 0:
        raise ValueError(f"seq must be >= 0, got {seq}")


@dataclass(frozen=True, slots=True)
class URL:
    """Request target split into the parts filters match on.

    Attributes:
        scheme: URL scheme, empty for origin-form targets
        host: Host (with optional port), empty for origin-form targets
        path: URL path
        query: Raw query string without the leading '?'
    """

    scheme: str
    host: str
    path: str
    query: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.host is None:
            raise TypeError("host must not be None")
        if self.path is None:
            raise TypeError("path must not be None")

    @classmethod
    def parse(cls, raw: str) -> URL:
        """Parse absolute or origin-form request target.

        Args:
            raw: Request target, e.g. "https://api.example.com/v1" or "/v1?x=1"

        Returns:
            URL with empty scheme/host when raw is origin-form
        """
        parts = urlsplit(raw)
        return cls(scheme=parts.scheme, host=parts.netloc, path=parts.path, query=parts.query)

    def __str__(self) -> str:
        """Format back to request-target form."""
        prefix = f"{self.scheme}://{self.host}" if self.host else ""
        suffix = f"?{self.query}" if self.query else ""
        return f"{prefix}{self.path}{suffix}"


@dataclass(frozen=True, slots=True)
class HTTPRequest:
    """HTTP request content.

    Attributes:
        stream_id: Logical connection the request belongs to
        seq: Position of the request/response pair within the stream
        method: HTTP method
        url: Parsed request target, None if it could not be parsed
        host: Host header value
        headers: Request headers (read-only)
    """

    stream_id: UUID
    seq: int
    method: str
    url: URL | None
    host: str = ""
    headers: Mapping[str, str] = field(default=_EMPTY_HEADERS, hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_stream(self.stream_id, self.seq)
        if not self.method:
            raise ValueError("method must not be empty")

    @property
    def witness_id(self) -> WitnessID:
        """Join key shared with the paired response."""
        return to_witness_id(self.stream_id, self.seq)


@dataclass(frozen=True, slots=True)
class HTTPResponse:
    """HTTP response content.

    Attributes:
        stream_id: Logical connection the response belongs to
        seq: Same seq as the request this response answers
        status_code: HTTP status code (100-999)
        headers: Response headers (read-only)
    """

    stream_id: UUID
    seq: int
    status_code: int
    headers: Mapping[str, str] = field(default=_EMPTY_HEADERS, hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_stream(self.stream_id, self.seq)
        if not 100 <= self.status_code <= 999:
            raise ValueError(f"status_code must be 100-999, got {self.status_code}")

    @property
    def witness_id(self) -> WitnessID:
        """Join key shared with the paired request."""
        return to_witness_id(self.stream_id, self.seq)


@dataclass(frozen=True, slots=True)
class TCPConnectionMetadata:
    """TCP connection seen on the wire."""

    connection_id: UUID
    initiator: str


@dataclass(frozen=True, slots=True)
class TLSHandshakeMetadata:
    """TLS handshake seen on a connection. server_name is the SNI, if sent."""

    connection_id: UUID
    server_name: str | None


@dataclass(frozen=True, slots=True)
class DroppedBytes:
    """Bytes the parser could not attribute to any protocol."""

    count: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")


NetworkContent = HTTPRequest | HTTPResponse | TCPConnectionMetadata | TLSHandshakeMetadata | DroppedBytes


@dataclass(frozen=True, slots=True)
class ParsedNetworkTraffic:
    """One parsed unit of traffic with its capture metadata.

    Filter stages forward this object as-is; they never copy or modify it.

    Attributes:
        content: Parsed content (discriminated by type)
        src_ip: Source address
        src_port: Source port (0-65535)
        dst_ip: Destination address
        dst_port: Destination port (0-65535)
        observation_time: Time the first packet was seen
        final_packet_time: Time the last packet was seen
    """

    content: NetworkContent
    src_ip: str
    src_port: int
    dst_ip: str
    dst_port: int
    observation_time: datetime
    final_packet_time: datetime

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.content is None:
            raise TypeError("content must not be None")
        for name, port in (("src_port", self.src_port), ("dst_port", self.dst_port)):
            if not 0 <= port <= 65535:
                raise ValueError(f"{name} must be 0-65535, got {port}")
        if self.final_packet_time < self.observation_time:
            raise ValueError("final_packet_time must be >= observation_time")
