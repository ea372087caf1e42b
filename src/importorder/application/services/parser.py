"""Parser service: read and parse Python sources, discover files.

FAIL-FIRST: ParseError on unreadable files and syntax errors.
"""

from __future__ import annotations

import ast
import codecs
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from importorder.domain.exceptions import ParseError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Pseudo-path for sources that do not come from a file
STRING_PATH = Path("<string>")

# Default directories to exclude from discovery
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)


def parse_source(source: str, path: Path = STRING_PATH) -> ast.Module:
    """Parse source text into an AST module.

    Raises:
        ParseError: Invalid Python syntax.
    """
    try:
        return ast.parse(source, filename=str(path))
    except SyntaxError as e:
        raise ParseError(path=str(path), reason=str(e)) from e


def read_source(path: Path) -> str:
    """Read a source file keeping its line endings; a UTF-8 BOM is dropped.

    Raises:
        ParseError: File missing, unreadable or not UTF-8.
    """
    try:
        with path.open(encoding="utf-8-sig", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ParseError(path=str(path), reason="file not found") from e
    except PermissionError as e:
        raise ParseError(path=str(path), reason="permission denied") from e
    except UnicodeDecodeError as e:
        raise ParseError(path=str(path), reason=f"encoding error: {e}") from e


def write_source(path: Path, source: str) -> None:
    """Write source back without translating line endings.

    A file that starts with a UTF-8 BOM keeps it.
    """
    encoding = "utf-8-sig" if _has_bom(path) else "utf-8"
    with path.open("w", encoding=encoding, newline="") as f:
        f.write(source)


def _has_bom(path: Path) -> bool:
    if not path.is_file():
        return False
    with path.open("rb") as f:
        return f.read(len(codecs.BOM_UTF8)) == codecs.BOM_UTF8


def collect_files(
    paths: Iterable[Path],
    *,
    exclude: frozenset[str] = DEFAULT_EXCLUDES,
) -> tuple[Path, ...]:
    """Expand directories into the .py files they contain.

    Files are taken as given, whatever their suffix. Order is stable:
    argument order, then sorted directory contents.
    """
    result: list[Path] = []
    for path in paths:
        if path.is_dir():
            result.extend(_find_python_files(path, exclude))
        else:
            result.append(path)

    logger.debug("collected %d file(s)", len(result))
    return tuple(result)


def _find_python_files(root: Path, exclude: frozenset[str]) -> list[Path]:
    """Find all .py files in directory, excluding specified directories."""
    result: list[Path] = []

    for item in sorted(root.iterdir()):
        if item.is_dir():
            if item.name not in exclude:
                result.extend(_find_python_files(item, exclude))
        elif item.is_file() and item.suffix == ".py":
            result.append(item)

    return result
