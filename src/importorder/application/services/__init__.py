"""Application services for import order analysis.

ImportOrderChecker is the main facade for checking and fixing files.
"""

from importorder.application.services.analyzer import analyze, check_statements
from importorder.application.services.checker import ImportOrderChecker
from importorder.application.services.fixer import apply_rewrites, fix_source
from importorder.application.services.parser import (
    DEFAULT_EXCLUDES,
    collect_files,
    parse_source,
    read_source,
)

__all__ = [
    "DEFAULT_EXCLUDES",
    "ImportOrderChecker",
    "analyze",
    "apply_rewrites",
    "check_statements",
    "collect_files",
    "fix_source",
    "parse_source",
    "read_source",
]
