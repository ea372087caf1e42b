"""Tests for presentation/pytest_plugin."""

import pytest

from importorder.domain.exceptions import ImportOrderViolationError
from importorder.presentation.pytest_plugin import assert_import_order
from tests.factories import make_result, make_violation


class TestAssertImportOrder:
    """Tests for assert_import_order()."""

    def test_passes_when_clean(self) -> None:
        assert_import_order((make_result(), make_result()))

    def test_passes_when_nothing_checked(self) -> None:
        assert_import_order(())

    def test_raises_with_violations(self) -> None:
        with pytest.raises(ImportOrderViolationError, match="1 import order violation"):
            assert_import_order((make_result(make_violation()),))
