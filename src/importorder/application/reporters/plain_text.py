"""Plain text reporter using print().

Stdlib-only reporter, one line per violation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from importorder.application.reporters._base import BaseReporter, summarize

if TYPE_CHECKING:
    from importorder.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter: `file:line:col: message [kind]` lines and a summary."""

    def report(self, results: tuple[CheckResult, ...]) -> None:
        """Report check results as plain text.

        Args:
            results: One result per analyzed file
        """
        for result in results:
            for violation in result.violations:
                suffix = " (fixable)" if violation.fixable else ""
                self._write(f"{violation}{suffix}")

        self._report_summary(results)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_summary(self, results: tuple[CheckResult, ...]) -> None:
        summary = summarize(results)
        if summary["violation_count"] == 0:
            self._write(f"All imports sorted ({summary['files_checked']} file(s) checked)")
            return

        self._write()
        self._write(
            f"Found {summary['violation_count']} violation(s) "
            f"in {summary['files_failed']} of {summary['files_checked']} file(s), "
            f"{summary['fixable_count']} fixable with --fix"
        )
