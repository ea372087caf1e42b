"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from importorder.application.reporters._base import BaseReporter, summarize

if TYPE_CHECKING:
    from importorder.domain.model.check_result import CheckResult
    from importorder.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Rewrites are included so other tools can apply them.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, results: tuple[CheckResult, ...]) -> None:
        """Report check results as JSON.

        Args:
            results: One result per analyzed file
        """
        data = {
            "passed": all(r.passed for r in results),
            "summary": summarize(results),
            "files": [
                {
                    "path": str(result.path),
                    "violations": [_violation_to_dict(v) for v in result.violations],
                }
                for result in results
            ],
        }
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")


def _violation_to_dict(violation: Violation) -> dict[str, object]:
    """Convert Violation to JSON-serializable dict."""
    rewrite = violation.rewrite
    return {
        "kind": violation.kind.value,
        "message": violation.message,
        "line": violation.location.line,
        "column": violation.location.column + 1,
        "span": [violation.span.start, violation.span.end],
        "rewrite": (
            None
            if rewrite is None
            else {"span": [rewrite.span.start, rewrite.span.end], "replacement": rewrite.replacement}
        ),
    }
