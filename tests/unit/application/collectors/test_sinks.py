"""Tests for terminal collectors."""

import pytest

from tracefilter.application.collectors.sinks import BufferCollector, NullCollector
from tests.factories import make_request, request_traffic


class TestBufferCollector:
    """Tests for BufferCollector."""

    def test_keeps_order(self) -> None:
        """Traffic is kept in arrival order."""
        sink = BufferCollector()
        first = request_traffic("/a", seq=1)
        second = request_traffic("/b", seq=2)
        sink.process(first)
        sink.process(second)

        assert sink.traffic == (first, second)
        assert sink.contents == (make_request("/a", seq=1), make_request("/b", seq=2))

    def test_process_after_close_raises(self) -> None:
        """process() after close() raises RuntimeError."""
        sink = BufferCollector()
        sink.close()

        with pytest.raises(RuntimeError, match="closed"):
            sink.process(request_traffic())


class TestNullCollector:
    """Tests for NullCollector."""

    def test_counts_discarded(self) -> None:
        """Counts every processed unit."""
        sink = NullCollector()
        sink.process(request_traffic())
        sink.process(request_traffic())
        sink.close()

        assert sink.count == 2
