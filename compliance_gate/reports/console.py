"""Console summary of a compliance run using Rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.aggregator import AggregateRun, StandardRun
from ..models.standard import STANDARDS

_STATUS_CONFIG: dict[bool, tuple[str, str]] = {
    True: ("✅", "green"),
    False: ("❌", "red"),
}


class ConsoleReporter:
    """Prints the human-readable side of a run; stdout stays free for the score."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def standard(self, run: StandardRun) -> None:
        symbol, color = _STATUS_CONFIG[run.passed]
        report = run.report
        self.console.print(
            f"{symbol} [{color}]{escape(run.standard)}: {report.score}% compliance[/{color}] "
            f"(threshold: {report.threshold}%)"
        )
        if run.passed or not report.details.has_failures:
            return

        self.console.print("\nFailed requirements:")
        for failure in report.details.failures:
            self.console.print(f"  - {escape(failure.requirement)}: {escape(failure.title)}")

    def aggregate(self, run: AggregateRun) -> None:
        for standard_run in run.runs:
            self.standard(standard_run)

        table = Table(title="European Accessibility Compliance")
        table.add_column("Standard")
        table.add_column("Country")
        table.add_column("Compliance", justify="right")
        table.add_column("Status")
        for code, score in run.report.standards.items():
            info = STANDARDS.get(code)
            symbol, color = _STATUS_CONFIG[score == 100]
            table.add_row(
                escape(code),
                info.country if info else "-",
                f"{score}%",
                f"[{color}]{symbol}[/{color}]",
            )
        self.console.print()
        self.console.print(table)

        symbol, color = _STATUS_CONFIG[run.passed]
        self.console.print(f"{symbol} [bold {color}]Overall compliance: {run.overall_compliance}%[/bold {color}]")
