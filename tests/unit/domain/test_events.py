"""Tests for traffic events.

Tests:
- URL parsing and formatting
- FAIL-FIRST validation of requests, responses and envelopes
- Pass-through content kinds
"""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from tracefilter.domain.events import (
    URL,
    DroppedBytes,
    HTTPRequest,
    HTTPResponse,
    ParsedNetworkTraffic,
    TCPConnectionMetadata,
    TLSHandshakeMetadata,
)
from tests.factories import (
    DEFAULT_STREAM_ID,
    DEFAULT_TIME,
    make_other_contents,
    make_request,
    make_response,
)


class TestURL:
    """Tests for URL value object."""

    def test_parse_absolute(self) -> None:
        """Absolute target splits into scheme, host, path, query."""
        url = URL.parse("https://api.example.com:8443/v1/users?limit=10")

        assert url.scheme == "https"
        assert url.host == "api.example.com:8443"
        assert url.path == "/v1/users"
        assert url.query == "limit=10"

    def test_parse_origin_form(self) -> None:
        """Origin-form target has empty scheme and host."""
        url = URL.parse("/health?verbose=1")

        assert url.scheme == ""
        assert url.host == ""
        assert url.path == "/health"
        assert url.query == "verbose=1"

    def test_str_round_trip(self) -> None:
        """str() gives back the request target."""
        assert str(URL.parse("https://api.example.com/v1?x=1")) == "https://api.example.com/v1?x=1"
        assert str(URL.parse("/v1")) == "/v1"

    def test_none_path_raises(self) -> None:
        """None path raises TypeError."""
        with pytest.raises(TypeError, match="path"):
            URL(scheme="https", host="a", path=None)  # type: ignore[arg-type]


class TestHTTPRequest:
    """Tests for HTTPRequest validation."""

    def test_url_may_be_none(self) -> None:
        """Request without URL is valid."""
        assert make_request(url=None).url is None

    def test_negative_seq_raises(self) -> None:
        """Negative seq raises ValueError."""
        with pytest.raises(ValueError, match="seq"):
            make_request(seq=-1)

    def test_empty_method_raises(self) -> None:
        """Empty method raises ValueError."""
        with pytest.raises(ValueError, match="method"):
            make_request(method="")

    def test_string_stream_id_raises(self) -> None:
        """Non-UUID stream ID raises TypeError."""
        with pytest.raises(TypeError, match="stream_id"):
            HTTPRequest(stream_id="s1", seq=1, method="GET", url=None)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Requests are immutable."""
        request = make_request()
        with pytest.raises(FrozenInstanceError):
            request.seq = 2  # type: ignore[misc]


class TestHTTPResponse:
    """Tests for HTTPResponse validation."""

    @pytest.mark.parametrize("status", [99, 1000])
    def test_status_out_of_range_raises(self, status: int) -> None:
        """Status outside 100-999 raises ValueError."""
        with pytest.raises(ValueError, match="status_code"):
            HTTPResponse(stream_id=DEFAULT_STREAM_ID, seq=1, status_code=status)


class TestParsedNetworkTraffic:
    """Tests for the traffic envelope."""

    def test_invalid_port_raises(self) -> None:
        """Port outside 0-65535 raises ValueError."""
        with pytest.raises(ValueError, match="dst_port"):
            ParsedNetworkTraffic(
                content=make_request(),
                src_ip="10.0.0.1",
                src_port=1,
                dst_ip="10.0.0.2",
                dst_port=70000,
                observation_time=DEFAULT_TIME,
                final_packet_time=DEFAULT_TIME,
            )

    def test_final_before_observation_raises(self) -> None:
        """final_packet_time earlier than observation_time raises ValueError."""
        with pytest.raises(ValueError, match="final_packet_time"):
            ParsedNetworkTraffic(
                content=make_request(),
                src_ip="10.0.0.1",
                src_port=1,
                dst_ip="10.0.0.2",
                dst_port=2,
                observation_time=DEFAULT_TIME,
                final_packet_time=DEFAULT_TIME - timedelta(seconds=1),
            )


class TestPassThroughContents:
    """Tests for non-HTTP content kinds."""

    def test_other_kinds_types(self) -> None:
        """make_other_contents covers each non-HTTP kind once."""
        kinds = {type(c) for c in make_other_contents()}
        assert kinds == {TCPConnectionMetadata, TLSHandshakeMetadata, DroppedBytes}
