#!/usr/bin/env python3
"""Benchmark script for tracefilter performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import re
import time
import uuid
from datetime import UTC, datetime
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of tracefilter package."""
    start = time.perf_counter()
    import tracefilter  # noqa: F401

    return time.perf_counter() - start


def _make_traffic(count: int) -> list:
    """Build alternating request/response traffic, one exchange in four filtered."""
    from tracefilter.domain.events import URL, HTTPRequest, HTTPResponse, ParsedNetworkTraffic

    now = datetime.now(UTC)
    stream_id = uuid.uuid4()
    traffic = []
    for seq in range(count):
        path = "/health" if seq % 4 == 0 else f"/api/items/{seq}"
        for content in (
            HTTPRequest(stream_id=stream_id, seq=seq, method="GET", url=URL.parse(path), host="api.example.com"),
            HTTPResponse(stream_id=stream_id, seq=seq, status_code=200),
        ):
            traffic.append(
                ParsedNetworkTraffic(
                    content=content,
                    src_ip="10.0.0.1",
                    src_port=50000,
                    dst_ip="10.0.0.2",
                    dst_port=443,
                    observation_time=now,
                    final_packet_time=now,
                )
            )
    return traffic


def benchmark_filter_chain(count: int) -> float:
    """Measure time to push count exchanges through a three-stage chain."""
    from tracefilter.application.collectors import (
        NullCollector,
        host_denylist_collector,
        path_denylist_collector,
        tracker_denylist_collector,
    )
    from tracefilter.infrastructure.classifiers import DomainSetClassifier

    traffic = _make_traffic(count)
    collector = path_denylist_collector([re.compile(r"^/health$"), re.compile(r"^/metrics$")], NullCollector())
    collector = host_denylist_collector([re.compile(r"\.internal$")], collector)
    collector = tracker_denylist_collector(collector, DomainSetClassifier(["doubleclick.net"]))

    start = time.perf_counter()
    for item in traffic:
        collector.process(item)
    collector.close()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run tracefilter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--exchanges",
        type=int,
        default=10000,
        help="Request/response pairs pushed through the chain",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    # Filter chain throughput
    chain_time = benchmark_filter_chain(args.exchanges)
    results.append(
        {
            "name": f"Filter Chain ({args.exchanges} exchanges)",
            "unit": "seconds",
            "value": chain_time,
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
