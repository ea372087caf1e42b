"""Gap-preserving splicer.

Rebuilds a contiguous run of nodes in a new order while every node keeps
the verbatim text (comments and blank lines) that preceded it in
the original source. Gaps travel with the node that followed them, so no
comment is duplicated or dropped.

Example (statements, target order [a, b]):

    import b            gap(a) = "\\n# about a\\n"
    # about a     -->   # about a
    import a            import a
                        import b     <- formerly first: synthetic "\\n"
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Protocol, TypeVar

from importorder.domain.exceptions import SpliceError
from importorder.domain.model.span import Span

LINE_BREAK = "\n"
STATEMENT_DELIMITER = ";"

_NEWLINE = re.compile(r"\r\n|\r|\n")


class SpanNode(Protocol):
    """Anything with a source span."""

    @property
    def span(self) -> Span: ...


NodeT = TypeVar("NodeT", bound=SpanNode)


def splice(
    source: str,
    original: Sequence[NodeT],
    target: Sequence[NodeT],
    *,
    separator: str | None = None,
    delimiter: str | None = None,
) -> str:
    """Build replacement text for original's span with nodes in target order.

    Args:
        source: Full source text the spans point into
        original: Nodes in source order
        target: The same nodes in the desired order
        separator: Synthetic gap for a formerly-first node that moves.
            Defaults to the first line break of source, or in delimited
            mode to the whitespace after the delimiter in the first
            original gap (a `\\` continuation is kept, a comment is not).
        delimiter: Token every gap contains exactly once (`,` between
            aliases). A node moved to the front drops it; a formerly-first
            node gets it back in front of its separator. Without one, a
            node moved to the front drops a leading `;` from its gap.

    Returns:
        Replacement text, stripped of leading and trailing whitespace

    Raises:
        SpliceError: target is not a permutation of original
    """
    order = _permutation(original, target)
    gaps = [""] + [
        source[original[i - 1].span.end : original[i].span.start] for i in range(1, len(original))
    ]
    if separator is None:
        separator = _default_separator(source, gaps, delimiter)

    parts: list[str] = []
    for position, old in enumerate(order):
        parts.append(_gap_before(gaps[old], old, position, separator, delimiter))
        parts.append(original[old].span.text(source))

    return "".join(parts).strip()


def covering_span(nodes: Sequence[SpanNode]) -> Span:
    """Span from the first node's start to the last node's end."""
    if not nodes:
        raise SpliceError("no nodes")
    return nodes[0].span.cover(nodes[-1].span)


def _gap_before(gap: str, old: int, position: int, separator: str, delimiter: str | None) -> str:
    if old == 0:
        if position == 0:
            return ""
        return separator if delimiter is None else delimiter + separator
    if position == 0:
        if delimiter is not None:
            return gap.replace(delimiter, "", 1)
        # A statement cannot open with the ";" that joined it to its predecessor.
        return gap.lstrip(" \t").removeprefix(STATEMENT_DELIMITER)
    return gap


def _line_break(source: str) -> str:
    """First line break used in source, LINE_BREAK if there is none."""
    match = _NEWLINE.search(source)
    return match.group() if match else LINE_BREAK


def _default_separator(source: str, gaps: list[str], delimiter: str | None) -> str:
    if delimiter is None:
        return _line_break(source)
    if len(gaps) < 2:
        return " "

    _, found, tail = gaps[1].partition(delimiter)
    if not found:
        return " "

    breaks = list(_NEWLINE.finditer(tail))
    if not breaks:
        return tail
    last = breaks[-1]
    line = tail[breaks[-2].end() if len(breaks) > 1 else 0 : last.start()]
    indent = tail[last.end() :]
    # Keep a line continuation, never a comment.
    if "#" not in line and line.rstrip().endswith("\\"):
        return line + last.group() + indent
    return last.group() + indent


def _permutation(original: Sequence[SpanNode], target: Sequence[SpanNode]) -> list[int]:
    """Original index of every target node, in target order."""
    positions = {node.span: i for i, node in enumerate(original)}
    if len(positions) != len(original):
        raise SpliceError("original nodes must have distinct spans")
    if len(target) != len(original):
        raise SpliceError(f"expected {len(original)} nodes, got {len(target)}")

    order: list[int] = []
    for node in target:
        old = positions.get(node.span)
        if old is None:
            raise SpliceError(f"node at {node.span.start}..{node.span.end} is not in original")
        order.append(old)

    if len(set(order)) != len(order):
        raise SpliceError("target repeats a node")
    return order
