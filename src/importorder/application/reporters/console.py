"""Console reporter: check results as rich tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from importorder.application.reporters._base import BaseReporter, summarize

if TYPE_CHECKING:
    from importorder.domain.model.check_result import CheckResult


class ConsoleReporter(BaseReporter):
    """Console reporter: one table per failing file, then a summary line."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Force ANSI styling (None = autodetect)
            width: Console width (None = autodetect)
        """
        super().__init__(output)
        self._console = Console(file=self._output, force_terminal=force_terminal, width=width)

    def report(self, results: tuple[CheckResult, ...]) -> None:
        """Render results to the console."""
        for result in results:
            if not result.passed:
                self._render_file(result)

        self._render_summary(results)

    def _render_file(self, result: CheckResult) -> None:
        table = Table(title=str(result.path), title_justify="left", box=None, header_style="bold")
        table.add_column("Line", style="cyan", justify="right")
        table.add_column("Rule", style="yellow")
        table.add_column("Message")
        table.add_column("Fix", style="green")

        for violation in result.violations:
            table.add_row(
                f"{violation.location.line}:{violation.location.column + 1}",
                violation.kind.value,
                violation.message,
                "yes" if violation.fixable else "",
            )

        self._console.print(table)
        self._console.print()

    def _render_summary(self, results: tuple[CheckResult, ...]) -> None:
        summary = summarize(results)
        if summary["violation_count"] == 0:
            self._console.print(
                f"[bold green]All imports sorted[/bold green] ({summary['files_checked']} file(s))"
            )
            return

        self._console.print(
            f"[bold red]{summary['violation_count']} violation(s)[/bold red] "
            f"in {summary['files_failed']} of {summary['files_checked']} file(s), "
            f"[green]{summary['fixable_count']} fixable[/green]"
        )
