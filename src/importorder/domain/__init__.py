"""importorder domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, collections.abc
"""

from importorder.domain.exceptions import (
    ConfigurationError,
    ImportOrderError,
    ImportOrderViolationError,
    InvalidStatementError,
    ParseError,
    SpliceError,
)
from importorder.domain.model import (
    CheckResult,
    ImportedBinding,
    ImportOrderConfig,
    ImportStatement,
    Location,
    Rewrite,
    Span,
    Violation,
    ViolationKind,
)

__all__ = [
    # Exceptions
    "ConfigurationError",
    "ImportOrderError",
    "ImportOrderViolationError",
    "InvalidStatementError",
    "ParseError",
    "SpliceError",
    # Model
    "CheckResult",
    "ImportOrderConfig",
    "ImportStatement",
    "ImportedBinding",
    "Location",
    "Rewrite",
    "Span",
    "Violation",
    "ViolationKind",
]
