"""Generic request filter stage.

Wraps one downstream collector and implements the same CollectorProtocol,
so stages chain to any depth. Drops requests rejected by a RequestFilter
and the responses paired with them.

Design decisions:
- Only HTTPRequest and HTTPResponse content is inspected; all other
  content is forwarded untouched and never reaches the tracker
- Witness table created on first drop, owned by this stage only
- Downstream exceptions propagate unchanged (no retry, no logging)
- Synchronous: each process() call finishes before it returns,
  nothing is buffered between calls
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from tracefilter.application.collectors.pairing import WitnessTracker
from tracefilter.domain.events import HTTPRequest, HTTPResponse

if TYPE_CHECKING:
    from tracefilter.domain.events import ParsedNetworkTraffic
    from tracefilter.domain.ports.collector import CollectorProtocol
    from tracefilter.infrastructure.filters.types import RequestFilter

logger = structlog.get_logger()

type TrackerFactory = Callable[[], WitnessTracker]


@dataclass(frozen=True, slots=True)
class FilterStats:
    """Snapshot of one stage's decisions.

    Attributes:
        requests_forwarded: Requests the filter included
        requests_dropped: Requests the filter excluded
        responses_forwarded: Responses without a dropped request
        responses_dropped: Responses paired with a dropped request
        passed_through: Non-HTTP content forwarded unexamined
    """

    requests_forwarded: int = 0
    requests_dropped: int = 0
    responses_forwarded: int = 0
    responses_dropped: int = 0
    passed_through: int = 0

    @property
    def forwarded(self) -> int:
        """Total traffic forwarded downstream."""
        return self.requests_forwarded + self.responses_forwarded + self.passed_through

    @property
    def dropped(self) -> int:
        """Total traffic dropped."""
        return self.requests_dropped + self.responses_dropped


class RequestFilterCollector:
    """Filter stage dropping requests and their paired responses.

    Not thread-safe: one caller per stage. Wrap the chain in
    SynchronizedCollector if several threads feed it.

    Lifecycle:
        stage = RequestFilterCollector(downstream, exclude_paths(pattern))
        for traffic in parsed:
            stage.process(traffic)
        stage.close()
    """

    def __init__(
        self,
        collector: CollectorProtocol,
        request_filter: RequestFilter | None,
        *,
        name: str = "request-filter",
        tracker_factory: TrackerFactory = WitnessTracker,
    ) -> None:
        """Initialize stage.

        Args:
            collector: Downstream collector receiving included traffic
            request_filter: Returns True to include a request.
                None = include every request.
            name: Stage name for reports and logs
            tracker_factory: Builds the witness table on first drop

        Raises:
            TypeError: If collector is None
            ValueError: If name is empty
        """
        if collector is None:
            raise TypeError("collector must not be None")
        if not name:
            raise ValueError("name must not be empty")

        self._collector = collector
        self._filter = request_filter
        self._name = name
        self._tracker_factory = tracker_factory
        self._tracker: WitnessTracker | None = None

        self._requests_forwarded = 0
        self._requests_dropped = 0
        self._responses_forwarded = 0
        self._responses_dropped = 0
        self._passed_through = 0

    @property
    def collector(self) -> CollectorProtocol:
        """Wrapped downstream collector."""
        return self._collector

    @property
    def name(self) -> str:
        """Stage name."""
        return self._name

    @property
    def tracked_count(self) -> int:
        """Witness IDs currently pending a response."""
        return 0 if self._tracker is None else len(self._tracker)

    @property
    def stats(self) -> FilterStats:
        """Snapshot of decisions made so far."""
        return FilterStats(
            requests_forwarded=self._requests_forwarded,
            requests_dropped=self._requests_dropped,
            responses_forwarded=self._responses_forwarded,
            responses_dropped=self._responses_dropped,
            passed_through=self._passed_through,
        )

    def process(self, traffic: ParsedNetworkTraffic) -> None:
        """Forward traffic unless it is an excluded request or its response.

        Args:
            traffic: Parsed traffic unit

        Raises:
            Exception: Whatever the downstream collector raises
        """
        match traffic.content:
            case HTTPRequest() as request:
                if self._filter is not None and not self._filter(request):
                    self._drop_request(request)
                    return
                self._requests_forwarded += 1
            case HTTPResponse() as response:
                if self._tracker is not None and self._tracker.match(response.witness_id):
                    self._responses_dropped += 1
                    return
                self._responses_forwarded += 1
            case _:
                self._passed_through += 1

        self._collector.process(traffic)

    def close(self) -> None:
        """Close downstream collector. No stage-specific cleanup.

        Raises:
            Exception: Whatever the downstream collector raises
        """
        logger.debug(
            "filter stage closed",
            stage=self._name,
            pending=self.tracked_count,
            forwarded=self.stats.forwarded,
            dropped=self.stats.dropped,
        )
        self._collector.close()

    def _drop_request(self, request: HTTPRequest) -> None:
        if self._tracker is None:
            self._tracker = self._tracker_factory()
        self._tracker.add(request.witness_id)
        self._requests_dropped += 1

    def __repr__(self) -> str:
        return f"RequestFilterCollector({self._name!r}, pending={self.tracked_count})"
