"""Terminal collectors.

End-of-chain consumers for tests, tools and dry runs. Real pipelines
plug in their own collector (recording, uploading, ...).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tracefilter.domain.events import NetworkContent, ParsedNetworkTraffic


class BufferCollector:
    """Keeps every traffic unit it receives, in order.

    Raises RuntimeError on process() after close().
    """

    def __init__(self) -> None:
        self._traffic: list[ParsedNetworkTraffic] = []
        self._closed = False

    def process(self, traffic: ParsedNetworkTraffic) -> None:
        """Append traffic to the buffer."""
        if self._closed:
            raise RuntimeError("collector already closed")
        self._traffic.append(traffic)

    def close(self) -> None:
        """Mark buffer closed. Contents stay readable."""
        self._closed = True

    @property
    def traffic(self) -> tuple[ParsedNetworkTraffic, ...]:
        """Received traffic, in arrival order."""
        return tuple(self._traffic)

    @property
    def contents(self) -> tuple[NetworkContent, ...]:
        """Content of received traffic, in arrival order."""
        return tuple(t.content for t in self._traffic)

    @property
    def is_closed(self) -> bool:
        """Check if close() was called."""
        return self._closed

    def __len__(self) -> int:
        return len(self._traffic)


class NullCollector:
    """Discards everything. Counts what it discarded."""

    def __init__(self) -> None:
        self.count = 0

    def process(self, traffic: ParsedNetworkTraffic) -> None:
        self.count += 1

    def close(self) -> None:
        pass
