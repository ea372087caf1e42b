"""Check result aggregate for one analyzed file."""

from dataclasses import dataclass
from pathlib import Path

from importorder.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of checking one module.

    Immutable aggregate used by ReporterProtocol.report().

    Attributes:
        path: Analyzed file
        violations: Violations in emission order
    """

    path: Path
    violations: tuple[Violation, ...]

    @property
    def passed(self) -> bool:
        """Check if the module passed (no violations)."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def fixable_count(self) -> int:
        """Number of violations carrying a rewrite."""
        return sum(1 for v in self.violations if v.fixable)
