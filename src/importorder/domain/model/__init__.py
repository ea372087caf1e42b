"""Domain model entities."""

from importorder.domain.model.check_result import CheckResult
from importorder.domain.model.configuration import ImportOrderConfig
from importorder.domain.model.enums import ViolationKind
from importorder.domain.model.import_statement import ImportedBinding, ImportStatement
from importorder.domain.model.location import Location
from importorder.domain.model.span import Span
from importorder.domain.model.violation import Rewrite, Violation

__all__ = [
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
