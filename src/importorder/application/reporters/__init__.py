"""Reporters for import order check results.

PlainTextReporter and JSONReporter use stdlib only; ConsoleReporter uses rich.
"""

from importorder.application.reporters._base import BaseReporter
from importorder.application.reporters.console import ConsoleReporter
from importorder.application.reporters.json_reporter import JSONReporter
from importorder.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
