"""pytest plugin for importorder.

Provides fixtures:
    import_order_config: Rule options (override in conftest.py)
    import_order_results: Check results for the configured source directory

Configuration (pytest.ini or pyproject.toml):
    import_order_source_dir: Source directory to check (default: "src")

Example:
    def test_imports_sorted(import_order_results):
        assert_import_order(import_order_results)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from importorder.presentation.pytest_plugin.fixtures import (
    SOURCE_DIR_OPTION,
    assert_import_order,
    import_order_config,
    import_order_results,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "assert_import_order",
    "import_order_config",
    "import_order_results",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(SOURCE_DIR_OPTION, "Source directory checked by importorder", default="src")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "import_order: mark test as import order check",
    )
