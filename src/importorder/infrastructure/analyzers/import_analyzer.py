"""Import statement classifier."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from importorder.domain.exceptions import InvalidStatementError
from importorder.domain.model.import_statement import (
    RELATIVE_MARKER,
    ImportedBinding,
    ImportStatement,
)
from importorder.infrastructure.analyzers.base import LineIndex, make_location, make_span

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

FUTURE_MODULE = "__future__"
STAR = "*"


class ImportAnalyzer:
    """Extracts the leading import block from a Python AST.

    Stateless analyzer - no state between analyze() calls.
    Output keeps source order; classification never reorders.
    """

    def analyze(
        self,
        tree: ast.Module,
        source: str,
        path: Path,
    ) -> tuple[ImportStatement, ...]:
        """Classify the leading import statements of a module.

        Args:
            tree: Parsed AST module
            source: Source text the tree was parsed from
            path: Source file path (for locations)

        Returns:
            Tuple of ImportStatement objects in source order
        """
        index = LineIndex(source)
        return tuple(classify(node, path, index) for node in leading_imports(tree.body))


def leading_imports(body: Sequence[ast.stmt]) -> Iterator[ast.Import | ast.ImportFrom]:
    """Yield the contiguous run of import statements at the top of a module.

    A module docstring and `from __future__` imports are skipped: they must
    stay first, so they are never part of the sortable block. The run ends
    at the first statement that is not an import.
    """
    statements = iter(body)
    for position, node in enumerate(statements):
        match node:
            case ast.Expr(value=ast.Constant(value=str())) if position == 0:
                continue
            case ast.ImportFrom(module=module, level=0) if module == FUTURE_MODULE:
                continue
            case ast.Import() | ast.ImportFrom():
                yield node
                break
            case _:
                return

    for node in statements:
        match node:
            case ast.Import() | ast.ImportFrom():
                yield node
            case _:
                return


def classify(node: ast.Import | ast.ImportFrom, path: Path, index: LineIndex) -> ImportStatement:
    """Map one import node to an ImportStatement.

    Raises:
        InvalidStatementError: Node has no names or no module identifier
    """
    if not node.names:
        raise InvalidStatementError(f"import at line {node.lineno} has no names")

    match node:
        case ast.ImportFrom(module=module, level=level):
            module_identifier = RELATIVE_MARKER * (level or 0) + (module or "")
            bindings = tuple(
                ImportedBinding(
                    local_name=alias.asname or alias.name,
                    span=make_span(alias, index),
                    location=make_location(alias, path, index),
                )
                for alias in node.names
                if alias.name != STAR
            )
        case _:
            # `import a, b` binds whole modules, not named members.
            module_identifier = node.names[0].name
            bindings = ()

    if not module_identifier:
        raise InvalidStatementError(f"import at line {node.lineno} has no module identifier")

    return ImportStatement(
        module_identifier=module_identifier,
        is_empty=not bindings,
        bindings=bindings,
        span=make_span(node, index),
        location=make_location(node, path, index),
    )
