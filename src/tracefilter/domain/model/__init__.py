"""Domain model: configuration value objects."""

from tracefilter.domain.model.configuration import FilterChainConfig

__all__ = ["FilterChainConfig"]
