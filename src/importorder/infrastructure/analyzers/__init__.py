"""AST analyzers: syntax tree to domain values."""

from importorder.infrastructure.analyzers.base import LineIndex, make_location, make_span
from importorder.infrastructure.analyzers.import_analyzer import (
    ImportAnalyzer,
    classify,
    leading_imports,
)

__all__ = [
    "ImportAnalyzer",
    "LineIndex",
    "classify",
    "leading_imports",
    "make_location",
    "make_span",
]
