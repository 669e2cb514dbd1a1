"""tracefilter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, uuid, urllib, datetime, re, collections.abc
"""

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
from tracefilter.domain.exceptions import PatternCompileError, TraceFilterError
from tracefilter.domain.model import FilterChainConfig
from tracefilter.domain.ports import CollectorProtocol, TrackerClassifierProtocol
from tracefilter.domain.witness import WitnessID, to_witness_id

__all__ = [
    # Exceptions
    "TraceFilterError",
    "PatternCompileError",
    # Value objects
    "URL",
    "WitnessID",
    "FilterChainConfig",
    # Traffic
    "HTTPRequest",
    "HTTPResponse",
    "TCPConnectionMetadata",
    "TLSHandshakeMetadata",
    "DroppedBytes",
    "NetworkContent",
    "ParsedNetworkTraffic",
    # Functions
    "to_witness_id",
    # Ports
    "CollectorProtocol",
    "TrackerClassifierProtocol",
]
