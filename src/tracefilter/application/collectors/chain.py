"""Chain introspection: walk nested collectors from the outside in."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracefilter.application.collectors.request_filter import RequestFilterCollector
from tracefilter.application.collectors.synchronized import SynchronizedCollector

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tracefilter.domain.ports.collector import CollectorProtocol

# Wrappers that expose the next collector as .collector
_WRAPPER_TYPES = (RequestFilterCollector, SynchronizedCollector)


def iter_chain(collector: CollectorProtocol) -> Iterator[CollectorProtocol]:
    """Yield every collector in the chain, outermost first, terminal last."""
    current = collector
    while isinstance(current, _WRAPPER_TYPES):
        yield current
        current = current.collector
    yield current


def iter_stages(collector: CollectorProtocol) -> Iterator[RequestFilterCollector]:
    """Yield filter stages of the chain, outermost first."""
    for item in iter_chain(collector):
        if isinstance(item, RequestFilterCollector):
            yield item


def terminal_collector(collector: CollectorProtocol) -> CollectorProtocol:
    """Return the collector at the end of the chain."""
    *_, last = iter_chain(collector)
    return last
