"""Orchestrator: one analysis pass over one module.

Binding violations come first (one per statement, source order), then
declaration violations (one per adjacent pair, source order).
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from importorder.application.services.parser import STRING_PATH, parse_source
from importorder.application.sorting.bindings import check_bindings
from importorder.application.sorting.declarations import check_declarations
from importorder.domain.model.configuration import ImportOrderConfig
from importorder.domain.model.import_statement import ImportStatement
from importorder.domain.model.violation import Violation
from importorder.infrastructure.analyzers.import_analyzer import ImportAnalyzer


def check_statements(
    statements: Sequence[ImportStatement],
    source: str,
    config: ImportOrderConfig | None = None,
) -> tuple[Violation, ...]:
    """Check already-classified statements.

    Pure function of its inputs: no parsing, no I/O.

    Args:
        statements: Import block in source order
        source: Text the statement spans point into
        config: Rule options (defaults if None)

    Returns:
        Violations in emission order
    """
    config = config or ImportOrderConfig()
    violations: list[Violation] = []

    if config.sort_members:
        for statement in statements:
            violation = check_bindings(statement, source, case_sensitive=config.case_sensitive)
            if violation is not None:
                violations.append(violation)

    violations.extend(check_declarations(statements, source))
    return tuple(violations)


def analyze(
    source: str,
    config: ImportOrderConfig | None = None,
    *,
    path: Path = STRING_PATH,
) -> tuple[Violation, ...]:
    """Parse Python source and check its leading import block.

    Raises:
        ParseError: Invalid Python syntax.
    """
    tree = parse_source(source, path)
    statements = ImportAnalyzer().analyze(tree, source, path)
    return check_statements(statements, source, config)
