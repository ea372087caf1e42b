"""Tests for domain/model/violation.py."""

import pytest

from importorder.domain.model.enums import ViolationKind
from importorder.domain.model.span import Span
from importorder.domain.model.violation import Rewrite
from tests.factories import make_violation


class TestRewrite:
    """Tests for Rewrite.apply()."""

    def test_replaces_span(self) -> None:
        rewrite = Rewrite(span=Span(15, 19), replacement="a, b")
        assert rewrite.apply("from .x import b, a\n") == "from .x import a, b\n"

    def test_insertion_at_empty_span(self) -> None:
        assert Rewrite(span=Span(0, 0), replacement="# x\n").apply("import os") == "# x\nimport os"

    def test_span_beyond_source_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds source length"):
            Rewrite(span=Span(0, 100), replacement="").apply("import os")


class TestViolation:
    """Tests for Violation entity."""

    def test_fixable_with_rewrite(self) -> None:
        violation = make_violation(rewrite=Rewrite(span=Span(0, 1), replacement="x"))
        assert violation.fixable is True

    def test_not_fixable_without_rewrite(self) -> None:
        assert make_violation().fixable is False

    def test_str(self) -> None:
        violation = make_violation(line=3)
        assert str(violation) == (
            "/test/file.py:3:1: Expected module a to be before module b "
            "[alphabetical-out-of-order]"
        )

    def test_is_frozen(self) -> None:
        violation = make_violation()
        with pytest.raises(AttributeError):
            violation.message = "other"  # type: ignore[misc]


class TestViolationFailFirst:
    """Tests for FAIL-FIRST validation in Violation."""

    def test_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            make_violation(message="")

    def test_kind_must_be_enum(self) -> None:
        with pytest.raises(TypeError, match="kind must be ViolationKind"):
            make_violation(kind="alphabetical-out-of-order")  # type: ignore[arg-type]

    def test_duplicate_module_with_rewrite_raises(self) -> None:
        with pytest.raises(ValueError, match="never auto-fixed"):
            make_violation(
                kind=ViolationKind.DUPLICATE_MODULE,
                message="Module os imported twice",
                rewrite=Rewrite(span=Span(0, 1), replacement="x"),
            )
