"""Fixer service: apply rewrites until the import block is stable."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from importorder.application.services.analyzer import analyze
from importorder.application.services.parser import STRING_PATH
from importorder.domain.exceptions import ParseError
from importorder.domain.model.configuration import ImportOrderConfig
from importorder.domain.model.violation import Rewrite

logger = logging.getLogger(__name__)

# Block rewrite, then binding rewrites, then a clean pass.
MAX_FIX_PASSES = 10


def apply_rewrites(source: str, rewrites: Iterable[Rewrite]) -> tuple[str, int]:
    """Apply non-overlapping rewrites in one go.

    Rewrites are taken by span start; one overlapping an already accepted
    rewrite is skipped (it is recomputed on the next pass). Equal rewrites
    count once.

    Returns:
        New source and the number of rewrites applied
    """
    accepted: list[Rewrite] = []
    for rewrite in sorted(set(rewrites), key=lambda r: (r.span.start, r.span.end)):
        if accepted and rewrite.span.start < accepted[-1].span.end:
            continue
        accepted.append(rewrite)

    # Back to front so earlier spans stay valid.
    for rewrite in reversed(accepted):
        source = rewrite.apply(source)
    return source, len(accepted)


def fix_source(
    source: str,
    config: ImportOrderConfig | None = None,
    *,
    path: Path = STRING_PATH,
) -> str:
    """Return source with every fixable violation resolved.

    DUPLICATE_MODULE violations stay as they are. A pass whose result no
    longer parses is discarded and fixing stops there.

    Raises:
        ParseError: The input itself is not valid Python.
    """
    current = source
    violations = analyze(current, config, path=path)
    for attempt in range(1, MAX_FIX_PASSES + 1):
        rewrites = [v.rewrite for v in violations if v.rewrite is not None]
        if not rewrites:
            return current

        updated, applied = apply_rewrites(current, rewrites)
        logger.debug("%s: pass %d applied %d rewrite(s)", path, attempt, applied)
        if updated == current:
            return current

        try:
            violations = analyze(updated, config, path=path)
        except ParseError:
            logger.warning("%s: rewrite produced invalid syntax, leaving imports as they are", path)
            return current
        current = updated

    logger.warning("%s: imports did not settle after %d passes", path, MAX_FIX_PASSES)
    return current
