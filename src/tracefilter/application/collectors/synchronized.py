"""SynchronizedCollector: serialise calls into a collector chain.

Filter stages assume one caller. When several capture threads feed the
same chain, wrap the outermost stage so witness table inserts and
lookups never interleave.

Thread-safe for free-threaded Python (PEP 703): a plain lock, no reliance
on the GIL.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tracefilter.domain.events import ParsedNetworkTraffic
    from tracefilter.domain.ports.collector import CollectorProtocol


class SynchronizedCollector:
    """Collector wrapper holding a lock for each process()/close() call.

    Order between concurrent callers is whatever order they acquire the
    lock in. Exceptions propagate after the lock is released.
    """

    __slots__ = ("_collector", "_lock")

    def __init__(self, collector: CollectorProtocol) -> None:
        if collector is None:
            raise TypeError("collector must not be None")
        self._collector = collector
        self._lock = threading.Lock()

    @property
    def collector(self) -> CollectorProtocol:
        """Wrapped collector."""
        return self._collector

    def process(self, traffic: ParsedNetworkTraffic) -> None:
        """Forward traffic while holding the lock."""
        with self._lock:
            self._collector.process(traffic)

    def close(self) -> None:
        """Close wrapped collector while holding the lock."""
        with self._lock:
            self._collector.close()
