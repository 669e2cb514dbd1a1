"""Console reporter: filter chain -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from tracefilter.application.collectors.chain import iter_stages
from tracefilter.application.collectors.request_filter import FilterStats

if TYPE_CHECKING:
    from tracefilter.application.collectors.request_filter import RequestFilterCollector
    from tracefilter.domain.ports.collector import CollectorProtocol


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Configuration for chain reporter.

    Attributes:
        width: Console width in characters.
        show_pending: Show pending witness ID column.
        color: Emit ANSI styles. False = plain text.
    """

    width: int = 120
    show_pending: bool = True
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ChainReporter:
    """Chain reporter: one table row per filter stage, plus totals.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ReporterConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ReporterConfig()

    def report(self, collector: CollectorProtocol) -> str:
        """Format statistics of every filter stage in the chain.

        Args:
            collector: Outermost collector of the chain.

        Returns:
            Formatted string, stages listed outermost first.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        stages = tuple(iter_stages(collector))

        console.print()
        console.rule("[bold]FILTER CHAIN[/bold]")
        console.print()

        if not stages:
            console.print("[dim]No filter stages installed.[/dim]")
            console.print()
            return output.getvalue()

        console.print(self._build_table(stages))
        console.print()
        return output.getvalue()

    def _build_table(self, stages: tuple[RequestFilterCollector, ...]) -> Table:
        """Build stats table with totals row."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Stage", style="cyan")
        table.add_column("Req fwd", justify="right", style="green")
        table.add_column("Req drop", justify="right", style="red")
        table.add_column("Resp fwd", justify="right", style="green")
        table.add_column("Resp drop", justify="right", style="red")
        table.add_column("Other", justify="right", style="dim")
        if self._config.show_pending:
            table.add_column("Pending", justify="right", style="yellow")

        for stage in stages:
            table.add_row(*self._row(stage.name, stage.stats, stage.tracked_count))

        total = FilterStats(
            requests_forwarded=sum(s.stats.requests_forwarded for s in stages),
            requests_dropped=sum(s.stats.requests_dropped for s in stages),
            responses_forwarded=sum(s.stats.responses_forwarded for s in stages),
            responses_dropped=sum(s.stats.responses_dropped for s in stages),
            passed_through=sum(s.stats.passed_through for s in stages),
        )
        table.add_section()
        table.add_row(*self._row("[bold]total[/bold]", total, sum(s.tracked_count for s in stages)))
        return table

    def _row(self, name: str, stats: FilterStats, pending: int) -> list[str]:
        row = [
            name,
            str(stats.requests_forwarded),
            str(stats.requests_dropped),
            str(stats.responses_forwarded),
            str(stats.responses_dropped),
            str(stats.passed_through),
        ]
        if self._config.show_pending:
            row.append(str(pending))
        return row
