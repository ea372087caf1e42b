"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from importorder.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class MyReporter(BaseReporter):
            def report(self, results: tuple[CheckResult, ...]) -> None:
                self._output.write(f"{len(results)} file(s)\\n")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, results: tuple[CheckResult, ...]) -> None:
        """Report check results.

        Args:
            results: One result per analyzed file
        """


def summarize(results: tuple[CheckResult, ...]) -> dict[str, int]:
    """Totals shared by all reporters."""
    return {
        "files_checked": len(results),
        "files_failed": sum(1 for r in results if not r.passed),
        "violation_count": sum(r.violation_count for r in results),
        "fixable_count": sum(r.fixable_count for r in results),
    }
