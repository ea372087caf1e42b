"""Binding sorter: alphabetical order of named bindings within a statement."""

from __future__ import annotations

from collections.abc import Sequence

from importorder.application.sorting.splicer import covering_span, splice
from importorder.domain.model.enums import ViolationKind
from importorder.domain.model.import_statement import ImportedBinding, ImportStatement
from importorder.domain.model.violation import Rewrite, Violation

ALIAS_DELIMITER = ","

MESSAGE = 'Expected "{name}" in import declaration to be sorted alphabetically.'


def find_unsorted_binding(
    bindings: Sequence[ImportedBinding],
    case_sensitive: bool = False,
) -> int | None:
    """Index of the first binding whose key is smaller than its predecessor's.

    Returns:
        Index into bindings, or None if already sorted
    """
    keys = [binding.sort_key(case_sensitive) for binding in bindings]
    for index in range(1, len(keys)):
        if keys[index] < keys[index - 1]:
            return index
    return None


def sort_bindings(
    bindings: Sequence[ImportedBinding],
    case_sensitive: bool = False,
) -> tuple[ImportedBinding, ...]:
    """Stable sort on sort key."""
    return tuple(sorted(bindings, key=lambda binding: binding.sort_key(case_sensitive)))


def bindings_rewrite(
    bindings: Sequence[ImportedBinding],
    source: str,
    case_sensitive: bool = False,
) -> Rewrite:
    """Rewrite covering first..last binding with all bindings sorted."""
    return Rewrite(
        span=covering_span(bindings),
        replacement=splice(
            source,
            bindings,
            sort_bindings(bindings, case_sensitive),
            delimiter=ALIAS_DELIMITER,
        ),
    )


def check_bindings(
    statement: ImportStatement,
    source: str,
    *,
    case_sensitive: bool = False,
) -> Violation | None:
    """Report the first out-of-order binding of a statement, if any."""
    index = find_unsorted_binding(statement.bindings, case_sensitive)
    if index is None:
        return None

    binding = statement.bindings[index]
    return Violation(
        kind=ViolationKind.UNSORTED_BINDING,
        message=MESSAGE.format(name=binding.local_name),
        location=binding.location,
        span=binding.span,
        rewrite=bindings_rewrite(statement.bindings, source, case_sensitive),
    )
