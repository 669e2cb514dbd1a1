"""Domain-set tracker classifier.

Adapter that satisfies TrackerClassifierProtocol from a caller-supplied
list of domains. A domain matches itself and all of its subdomains:
"doubleclick.net" matches "ad.doubleclick.net" but not "notdoubleclick.net".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def normalize_host(host: str) -> str:
    """Lowercase host and strip port and trailing dot.

    IPv6 literals in brackets keep their colons.
    """
    host = host.strip().lower()
    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else host[1:]
    host, _, _ = host.partition(":")
    return host.rstrip(".")


class DomainSetClassifier:
    """Tracker classifier backed by an immutable set of domains."""

    __slots__ = ("_domains",)

    def __init__(self, domains: Iterable[str]) -> None:
        """Initialize classifier.

        Args:
            domains: Tracker domains (case-insensitive, ports ignored)

        Raises:
            ValueError: If a domain is empty
        """
        normalized: set[str] = set()
        for domain in domains:
            name = normalize_host(domain)
            if not name:
                raise ValueError(f"domain must not be empty, got {domain!r}")
            normalized.add(name)
        self._domains = frozenset(normalized)

    @property
    def domains(self) -> frozenset[str]:
        """Normalized domains."""
        return self._domains

    def is_tracker_domain(self, host: str) -> bool:
        """Check host and each parent domain against the set."""
        name = normalize_host(host)
        while name:
            if name in self._domains:
                return True
            _, _, name = name.partition(".")
        return False

    def __repr__(self) -> str:
        """Return repr with domain count."""
        return f"DomainSetClassifier({len(self._domains)} domains)"
