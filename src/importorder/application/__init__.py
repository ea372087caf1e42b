"""Application layer for import order analysis.

- sorting: ordering rules and the gap-preserving splicer
- services: parsing, orchestration, fixing, the checker facade
- reporters: output formatting (PlainText, JSON, Console)
"""

from importorder.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from importorder.application.services import ImportOrderChecker, analyze, fix_source

__all__ = [
    # Reporters
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    # Services
    "ImportOrderChecker",
    "analyze",
    "fix_source",
]
