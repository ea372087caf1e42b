"""importorder - canonical ordering of leading import statements with autofix."""

__version__ = "0.1.0"

from importorder.application.services import (
    ImportOrderChecker,
    analyze,
    check_statements,
    fix_source,
)
from importorder.domain.model import (
    CheckResult,
    ImportOrderConfig,
    Rewrite,
    Violation,
    ViolationKind,
)

__all__ = [
    "CheckResult",
    "ImportOrderChecker",
    "ImportOrderConfig",
    "Rewrite",
    "Violation",
    "ViolationKind",
    "__version__",
    "analyze",
    "check_statements",
    "fix_source",
]
