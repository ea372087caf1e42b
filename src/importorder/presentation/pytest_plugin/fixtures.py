"""pytest fixtures for import order checks.

User overrides import_order_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from importorder.application.services.checker import ImportOrderChecker
from importorder.domain.exceptions import ImportOrderViolationError
from importorder.domain.model.check_result import CheckResult
from importorder.domain.model.configuration import ImportOrderConfig

SOURCE_DIR_OPTION = "import_order_source_dir"


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback."""
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture(scope="session")
def import_order_config() -> ImportOrderConfig:
    """Default rule options.

    Override this fixture in conftest.py to customize.
    """
    return ImportOrderConfig()


@pytest.fixture(scope="session")
def import_order_results(
    request: pytest.FixtureRequest,
    import_order_config: ImportOrderConfig,
) -> tuple[CheckResult, ...]:
    """Check every module under the configured source directory.

    Reads import_order_source_dir from pytest.ini (default: "src").
    """
    root_dir = Path(str(request.config.rootpath))
    source_path = root_dir / _get_ini_value(request.config, SOURCE_DIR_OPTION, "src")

    if not source_path.exists():
        raise FileNotFoundError(
            f"{SOURCE_DIR_OPTION} '{source_path}' does not exist. "
            f"Configure {SOURCE_DIR_OPTION} in pytest.ini or pyproject.toml."
        )

    return ImportOrderChecker(import_order_config).check_paths([source_path])


def assert_import_order(results: tuple[CheckResult, ...]) -> None:
    """Fail with every violation listed.

    Raises:
        ImportOrderViolationError: Any result has violations
    """
    if not all(r.passed for r in results):
        raise ImportOrderViolationError(results)
