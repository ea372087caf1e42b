"""Reporter protocol for output formatting.

Users extend importorder by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from importorder.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    importorder provides PlainTextReporter, JSONReporter and
    ConsoleReporter. Users can implement their own (SARIF, HTML, ...).

    Example:
        class CountReporter:
            def report(self, results: tuple[CheckResult, ...]) -> None:
                print(sum(r.violation_count for r in results))
    """

    def report(self, results: tuple[CheckResult, ...]) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            results: One result per analyzed file
        """
        ...
