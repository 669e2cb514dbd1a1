"""Witness identifiers: join key between a request and its response.

A witness ID is derived from (stream_id, seq) with a name-based UUID
(SHA-1, RFC 4122 version 5) using the stream ID as namespace.
Same inputs always give the same ID for the lifetime of the process
and across processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid5

WITNESS_ID_PREFIX = "wit_"


@dataclass(frozen=True, slots=True)
class WitnessID:
    """Identifier of one request/response exchange.

    Attributes:
        uuid: Name-based UUID derived from stream ID and sequence number
    """

    uuid: UUID

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.uuid, UUID):
            raise TypeError(f"uuid must be UUID, got {type(self.uuid).__name__}")

    def __str__(self) -> str:
        """Format as wit_<uuid>."""
        return f"{WITNESS_ID_PREFIX}{self.uuid}"


def to_witness_id(stream_id: UUID, seq: int) -> WitnessID:
    """Derive witness ID for a request/response pair.

    Args:
        stream_id: Stream the exchange belongs to
        seq: Sequence number of the exchange within the stream

    Returns:
        Deterministic WitnessID

    Raises:
        TypeError: If stream_id is not a UUID
        ValueError: If seq is negative
    """
    if not isinstance(stream_id, UUID):
        raise TypeError(f"stream_id must be UUID, got {type(stream_id).__name__}")
    if seq < 0:
        raise ValueError(f"seq must be >= 0, got {seq}")
    return WitnessID(uuid5(stream_id, str(seq)))
