"""Tests for domain/exceptions.py."""

import pytest

from importorder.domain.exceptions import (
    ConfigurationError,
    ImportOrderError,
    ImportOrderViolationError,
    InvalidStatementError,
    ParseError,
    SpliceError,
)
from tests.factories import make_result, make_violation


class TestHierarchy:
    """All public errors share one root."""

    @pytest.mark.parametrize(
        "exc",
        [
            ParseError(path="a.py", reason="bad"),
            InvalidStatementError("no module"),
            SpliceError("mismatch"),
            ConfigurationError("x", "bad"),
        ],
    )
    def test_inherits_root(self, exc: Exception) -> None:
        assert isinstance(exc, ImportOrderError)

    def test_parse_error_is_syntax_error(self) -> None:
        exc = ParseError(path="a.py", reason="invalid syntax")
        assert isinstance(exc, SyntaxError)
        assert exc.path == "a.py"
        assert "a.py: invalid syntax" in str(exc)

    def test_value_errors(self) -> None:
        assert isinstance(InvalidStatementError("x"), ValueError)
        assert isinstance(SpliceError("x"), ValueError)
        assert isinstance(ConfigurationError("x", "y"), ValueError)


class TestImportOrderViolationError:
    """Tests for ImportOrderViolationError."""

    def test_lists_violations(self) -> None:
        exc = ImportOrderViolationError((make_result(make_violation(line=2)), make_result()))

        assert len(exc.results) == 1
        assert "Found 1 import order violation(s):" in str(exc)
        assert "/test/file.py:2:1" in str(exc)

    def test_requires_violation(self) -> None:
        with pytest.raises(ValueError, match="at least one violation"):
            ImportOrderViolationError((make_result(),))
