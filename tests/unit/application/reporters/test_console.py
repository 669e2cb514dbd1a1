"""Tests for ChainReporter.

Tests:
- ReporterConfig defaults and validation
- report() output: header, one row per stage, totals
"""

import re

import pytest

from tracefilter.application.collectors.factories import host_denylist_collector, path_denylist_collector
from tracefilter.application.collectors.sinks import BufferCollector
from tracefilter.application.reporters.console import ChainReporter, ReporterConfig
from tests.factories import request_traffic, response_traffic

_PLAIN = ReporterConfig(color=False)


class TestReporterConfig:
    """Tests for ReporterConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ReporterConfig()

        assert config.width == 120
        assert config.show_pending is True
        assert config.color is True

    def test_narrow_width_raises(self) -> None:
        """Width below 40 raises ValueError."""
        with pytest.raises(ValueError, match="width"):
            ReporterConfig(width=10)


class TestChainReporter:
    """Tests for ChainReporter."""

    def test_header(self) -> None:
        """report() contains FILTER CHAIN header."""
        output = ChainReporter(_PLAIN).report(BufferCollector())

        assert "FILTER CHAIN" in output

    def test_no_stages(self) -> None:
        """Chain without stages says so."""
        output = ChainReporter(_PLAIN).report(BufferCollector())

        assert "No filter stages installed." in output

    def test_stage_rows(self) -> None:
        """Each stage gets a row with its counts."""
        sink = BufferCollector()
        chain = host_denylist_collector(
            [re.compile(r"\.internal$")],
            path_denylist_collector([re.compile(r"^/health$")], sink),
        )
        chain.process(request_traffic("/health", seq=1))
        chain.process(response_traffic(seq=1))

        output = ChainReporter(_PLAIN).report(chain)
        lines = output.splitlines()
        path_line = next(line for line in lines if "path-denylist" in line)
        host_line = next(line for line in lines if "host-denylist" in line)

        assert path_line.split()[1:] == ["0", "1", "0", "1", "0", "1"]
        assert host_line.split()[1:] == ["1", "0", "1", "0", "0", "0"]
        assert lines.index(host_line) < lines.index(path_line)
        assert any(line.split()[:1] == ["total"] for line in lines)

    def test_hide_pending(self) -> None:
        """show_pending=False drops the Pending column."""
        chain = path_denylist_collector([re.compile(r"^/health$")], BufferCollector())
        output = ChainReporter(ReporterConfig(color=False, show_pending=False)).report(chain)

        assert "Pending" not in output
        assert "Resp drop" in output
