"""Reporters: render filter chain statistics."""

from tracefilter.application.reporters.console import ChainReporter, ReporterConfig

__all__ = ["ChainReporter", "ReporterConfig"]
