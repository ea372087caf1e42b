"""Main facade for import order checking.

ImportOrderChecker is the primary entry point for checking and fixing files.
Composition-based: accepts configuration and an optional reporter.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from importorder.application.services.analyzer import analyze
from importorder.application.services.fixer import fix_source
from importorder.application.services.parser import (
    DEFAULT_EXCLUDES,
    STRING_PATH,
    collect_files,
    read_source,
    write_source,
)
from importorder.domain.model.check_result import CheckResult
from importorder.domain.model.configuration import ImportOrderConfig
from importorder.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class ImportOrderChecker:
    """Main facade for import order checking.

    Stateless between calls: every file is an independent analysis pass.

    Example:
        checker = ImportOrderChecker(ImportOrderConfig(case_sensitive=True))
        results = checker.check_paths([Path("src")])
        if not all(r.passed for r in results):
            print("imports out of order")
    """

    def __init__(
        self,
        config: ImportOrderConfig | None = None,
        *,
        reporter: ReporterProtocol | None = None,
        exclude: frozenset[str] = DEFAULT_EXCLUDES,
    ) -> None:
        """Initialize checker.

        Args:
            config: Rule options (defaults if None)
            reporter: Optional reporter, called by check_paths()
            exclude: Directory names skipped during discovery
        """
        self._config = config or ImportOrderConfig()
        self._reporter = reporter
        self._exclude = exclude

    @property
    def config(self) -> ImportOrderConfig:
        """Rule options in use."""
        return self._config

    def check_source(self, source: str, path: Path = STRING_PATH) -> CheckResult:
        """Check source text.

        Raises:
            ParseError: Invalid Python syntax.
        """
        return CheckResult(path=path, violations=analyze(source, self._config, path=path))

    def check_file(self, path: Path) -> CheckResult:
        """Check one file.

        Raises:
            ParseError: File unreadable or invalid Python.
        """
        return self.check_source(read_source(path), path)

    def check_paths(self, paths: Iterable[Path]) -> tuple[CheckResult, ...]:
        """Check files and directories, then report if a reporter is set.

        Raises:
            ParseError: Any file unreadable or invalid Python.
        """
        results = tuple(self.check_file(path) for path in collect_files(paths, exclude=self._exclude))

        if self._reporter is not None:
            self._reporter.report(results)

        return results

    def fix_source(self, source: str, path: Path = STRING_PATH) -> str:
        """Return source with fixable violations resolved."""
        return fix_source(source, self._config, path=path)

    def fix_file(self, path: Path) -> bool:
        """Fix one file in place.

        Returns:
            True if the file was rewritten
        """
        source = read_source(path)
        fixed = self.fix_source(source, path)
        if fixed == source:
            return False

        write_source(path, fixed)
        logger.info("fixed %s", path)
        return True
