"""Matched-pair tracker: witness IDs of dropped requests.

A filter stage records the witness ID of every request it drops, then
drops any response carrying a recorded ID.

Witness ID lifecycle:
    unseen -> pending (request dropped) -> resolved (response seen)

Requests are assumed to arrive before their responses. A response
without a recorded request (capture started mid-connection) is forwarded.

Default: entries are never removed. Witness IDs come from unique
(stream, seq) pairs, so a stale entry never matches unrelated traffic.
The table grows with the number of dropped requests.
Opt-in bounds:
- evict_on_match: remove the entry when its response is dropped
- max_entries: keep at most N entries, forgetting the oldest first
"""

from __future__ import annotations

from collections import OrderedDict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tracefilter.domain.witness import WitnessID


class WitnessTracker:
    """Set of witness IDs pending a response.

    Not thread-safe. Owned by exactly one filter stage.
    """

    __slots__ = ("_entries", "_evict_on_match", "_evicted", "_max_entries")

    def __init__(self, max_entries: int | None = None, *, evict_on_match: bool = False) -> None:
        """Initialize empty tracker.

        Args:
            max_entries: Capacity bound. None = unbounded.
            evict_on_match: Forget an ID once its response matched.

        Raises:
            ValueError: If max_entries < 1
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")

        self._max_entries = max_entries
        self._evict_on_match = evict_on_match
        # Insertion order = eviction order
        self._entries: OrderedDict[WitnessID, None] = OrderedDict()
        self._evicted = 0

    def add(self, witness_id: WitnessID) -> None:
        """Record a dropped request.

        Re-adding an ID refreshes its position for capacity eviction.
        """
        self._entries[witness_id] = None
        self._entries.move_to_end(witness_id)
        if self._max_entries is not None and len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)
            self._evicted += 1

    def match(self, witness_id: WitnessID) -> bool:
        """Check whether a response belongs to a dropped request.

        Args:
            witness_id: Witness ID of the response

        Returns:
            True if the paired request was dropped
        """
        if witness_id not in self._entries:
            return False
        if self._evict_on_match:
            del self._entries[witness_id]
        return True

    @property
    def evicted(self) -> int:
        """Number of entries dropped by the capacity bound."""
        return self._evicted

    def __contains__(self, witness_id: object) -> bool:
        return witness_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"WitnessTracker(pending={len(self._entries)}, max_entries={self._max_entries})"
