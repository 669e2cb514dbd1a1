"""Collector protocol: the consumer contract every pipeline stage satisfies.

Terminal consumers and filter stages implement the same two methods,
so stages can wrap each other to any depth without a class hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tracefilter.domain.events import ParsedNetworkTraffic


class CollectorProtocol(Protocol):
    """Contract for traffic collectors.

    Lifecycle:
    1. process() - Called once per parsed traffic unit, in capture order
    2. close() - Called at most once, when the pipeline shuts down

    Errors are exceptions. A collector raises only on unrecoverable
    failure; wrapping stages propagate it unchanged.

    Example:
        collector = BufferCollector()
        collector = path_denylist_collector([re.compile(r"^/health$")], collector)
        for traffic in parsed:
            collector.process(traffic)
        collector.close()
    """

    def process(self, traffic: ParsedNetworkTraffic) -> None:
        """Handle one traffic unit.

        Args:
            traffic: Parsed traffic to consume or forward

        Raises:
            Exception: Any unrecoverable downstream failure
        """
        ...

    def close(self) -> None:
        """Release resources. Idempotency not required."""
        ...
