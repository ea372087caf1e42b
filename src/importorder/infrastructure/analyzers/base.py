"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
import re
from typing import TYPE_CHECKING

from importorder.domain.exceptions import InvalidStatementError
from importorder.domain.model.location import Location
from importorder.domain.model.span import Span

if TYPE_CHECKING:
    from pathlib import Path

_NEWLINE = re.compile(r"\r\n|\r|\n")

# Nodes carrying full position info: statements, expressions, aliases.
PositionedNode = ast.stmt | ast.expr | ast.alias


class LineIndex:
    """Maps AST (line, UTF-8 byte column) positions to string offsets.

    AST columns count UTF-8 bytes; slicing source text needs characters.
    Built once per source, then queried for every node.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._line_starts = [0] + [m.end() for m in _NEWLINE.finditer(source)]

    def offset(self, line: int, byte_column: int) -> int:
        """Character offset of a (1-based line, byte column) position."""
        if not 1 <= line <= len(self._line_starts):
            raise InvalidStatementError(f"line {line} is outside the source")

        start = self._line_starts[line - 1]
        end = self._line_starts[line] if line < len(self._line_starts) else len(self._source)
        prefix = self._source[start:end].encode("utf-8")[:byte_column]
        return start + len(prefix.decode("utf-8", errors="ignore"))


def make_span(node: PositionedNode, index: LineIndex) -> Span:
    """Create Span from AST node.

    Raises:
        InvalidStatementError: If node has no position info (FAIL-FIRST)
    """
    _require_positions(node)
    return Span(
        index.offset(node.lineno, node.col_offset),
        index.offset(node.end_lineno, node.end_col_offset),  # type: ignore[arg-type]
    )


def make_location(node: PositionedNode, path: Path, index: LineIndex) -> Location:
    """Create Location from AST node.

    Columns are converted to characters so they agree with spans.

    Raises:
        InvalidStatementError: If node has no position info (FAIL-FIRST)
    """
    _require_positions(node)
    span = make_span(node, index)
    start_column = span.start - index.offset(node.lineno, 0)
    end_column = span.end - index.offset(node.end_lineno, 0)  # type: ignore[arg-type]
    return Location(
        file=path,
        line=node.lineno,
        column=start_column,
        end_line=node.end_lineno,
        end_column=end_column,
    )


def _require_positions(node: PositionedNode) -> None:
    if getattr(node, "lineno", None) is None or getattr(node, "end_lineno", None) is None:
        raise InvalidStatementError(f"{type(node).__name__} node has no position info")
