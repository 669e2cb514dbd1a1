"""Tracker-domain classifier protocol.

The knowledge base of third-party tracker domains lives outside this
package. Users plug one in by implementing this Protocol.
"""

from __future__ import annotations

from typing import Protocol


class TrackerClassifierProtocol(Protocol):
    """Contract for third-party tracker classifiers.

    Must be pure: the same host always yields the same answer
    for the lifetime of a filter stage.
    """

    def is_tracker_domain(self, host: str) -> bool:
        """Check whether host belongs to a known third-party tracker.

        Args:
            host: Host name, possibly with a port

        Returns:
            True if host is a tracker domain
        """
        ...
