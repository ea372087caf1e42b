"""Declaration order checker: order of import statements in the block.

Decision per adjacent pair (prev, current), first match wins:

    same module                      -> DUPLICATE_MODULE (no rewrite)
    empty -> non-empty               -> ok
    absolute -> relative             -> ok
    non-empty -> empty               -> EMPTY_IMPORT_OUT_OF_ORDER
    relative -> absolute             -> ABSOLUTE_IMPORT_OUT_OF_ORDER
    current < prev                   -> ALPHABETICAL_OUT_OF_ORDER

Every fixable violation carries the same rewrite: the whole block, stably
sorted by ImportStatement.sort_key. One application converges the block.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from importorder.application.sorting.splicer import covering_span, splice
from importorder.domain.model.enums import ViolationKind
from importorder.domain.model.import_statement import ImportStatement
from importorder.domain.model.violation import Rewrite, Violation

MESSAGES: dict[ViolationKind, str] = {
    ViolationKind.DUPLICATE_MODULE: "Module {current} imported twice",
    ViolationKind.EMPTY_IMPORT_OUT_OF_ORDER: (
        "Expected empty import {current} to be before import {prev}"
    ),
    ViolationKind.ABSOLUTE_IMPORT_OUT_OF_ORDER: (
        "Expected absolute module {current} to be before relative {prev}"
    ),
    ViolationKind.ALPHABETICAL_OUT_OF_ORDER: "Expected module {current} to be before module {prev}",
}


def compare_pair(prev: ImportStatement, current: ImportStatement) -> ViolationKind | None:
    """Violation for an adjacent pair of statements, None if in order."""
    if prev.module_identifier == current.module_identifier:
        return ViolationKind.DUPLICATE_MODULE

    if (prev.is_empty and not current.is_empty) or (prev.is_absolute and not current.is_absolute):
        return None

    if not prev.is_empty and current.is_empty:
        return ViolationKind.EMPTY_IMPORT_OUT_OF_ORDER

    if not prev.is_absolute and current.is_absolute:
        return ViolationKind.ABSOLUTE_IMPORT_OUT_OF_ORDER

    if current.module_identifier < prev.module_identifier:
        return ViolationKind.ALPHABETICAL_OUT_OF_ORDER

    return None


def sort_statements(statements: Sequence[ImportStatement]) -> tuple[ImportStatement, ...]:
    """Canonical order; duplicates keep their relative order."""
    return tuple(sorted(statements, key=lambda statement: statement.sort_key))


def declarations_rewrite(statements: Sequence[ImportStatement], source: str) -> Rewrite:
    """Rewrite covering the whole block with statements in canonical order."""
    return Rewrite(
        span=covering_span(statements),
        replacement=splice(source, statements, sort_statements(statements)),
    )


def check_declarations(
    statements: Sequence[ImportStatement],
    source: str,
) -> tuple[Violation, ...]:
    """Check every adjacent pair; at most one violation per pair."""
    violations: list[Violation] = []
    rewrite: Rewrite | None = None

    for prev, current in pairwise(statements):
        kind = compare_pair(prev, current)
        if kind is None:
            continue

        fix: Rewrite | None = None
        if kind is not ViolationKind.DUPLICATE_MODULE:
            if rewrite is None:
                rewrite = declarations_rewrite(statements, source)
            fix = rewrite

        violations.append(
            Violation(
                kind=kind,
                message=MESSAGES[kind].format(
                    current=current.module_identifier,
                    prev=prev.module_identifier,
                ),
                location=current.location,
                span=current.span,
                rewrite=fix,
            )
        )

    return tuple(violations)
