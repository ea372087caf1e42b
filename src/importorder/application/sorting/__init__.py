"""Ordering rules and the gap-preserving splicer."""

from importorder.application.sorting.bindings import (
    bindings_rewrite,
    check_bindings,
    find_unsorted_binding,
    sort_bindings,
)
from importorder.application.sorting.declarations import (
    check_declarations,
    compare_pair,
    declarations_rewrite,
    sort_statements,
)
from importorder.application.sorting.splicer import covering_span, splice

__all__ = [
    "bindings_rewrite",
    "check_bindings",
    "check_declarations",
    "compare_pair",
    "covering_span",
    "declarations_rewrite",
    "find_unsorted_binding",
    "sort_bindings",
    "sort_statements",
    "splice",
]
