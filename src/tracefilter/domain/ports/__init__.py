"""Domain ports (interfaces/protocols)."""

from tracefilter.domain.ports.classifier import TrackerClassifierProtocol
from tracefilter.domain.ports.collector import CollectorProtocol

__all__ = [
    "CollectorProtocol",
    "TrackerClassifierProtocol",
]
