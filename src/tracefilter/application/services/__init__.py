"""Application services."""

from tracefilter.application.services.chain_builder import build_filter_chain

__all__ = ["build_filter_chain"]
