"""Tests for application/services/fixer.py."""

import itertools
import logging

import pytest

from importorder.application.services import fixer
from importorder.application.services.analyzer import analyze
from importorder.application.services.fixer import apply_rewrites, fix_source
from importorder.domain.exceptions import ParseError
from importorder.domain.model.configuration import ImportOrderConfig
from importorder.domain.model.enums import ViolationKind
from importorder.domain.model.span import Span
from importorder.domain.model.violation import Rewrite
from tests.factories import classify_source

STATEMENTS = (
    "from .local import helper",
    "import sys",
    "from collections import defaultdict, OrderedDict",
    "import os",
)


class TestApplyRewrites:
    """Tests for apply_rewrites()."""

    def test_applies_disjoint_rewrites(self) -> None:
        source = "aaa bbb ccc"
        rewrites = [Rewrite(Span(8, 11), "C"), Rewrite(Span(0, 3), "A")]

        result, applied = apply_rewrites(source, rewrites)

        assert result == "A bbb C"
        assert applied == 2

    def test_skips_overlapping(self) -> None:
        source = "aaa bbb"
        rewrites = [Rewrite(Span(0, 7), "X"), Rewrite(Span(4, 7), "B")]

        result, applied = apply_rewrites(source, rewrites)

        assert result == "X"
        assert applied == 1

    def test_equal_rewrites_count_once(self) -> None:
        rewrite = Rewrite(Span(0, 1), "b")
        assert apply_rewrites("a", [rewrite, rewrite]) == ("b", 1)

    def test_nothing_to_apply(self) -> None:
        assert apply_rewrites("a", []) == ("a", 0)


class TestFixSource:
    """Tests for fix_source()."""

    def test_bindings_then_declarations(self) -> None:
        source = "from .b import y, x\nfrom .a import d, c\n"
        assert fix_source(source) == "from .a import c, d\nfrom .b import x, y\n"

    def test_clean_source_unchanged(self) -> None:
        source = "import os\nfrom a import b\n"
        assert fix_source(source) == source

    def test_duplicate_left_alone(self) -> None:
        source = "from .a import x\nfrom .a import y\n"
        fixed = fix_source(source)
        assert fixed == source
        assert [v.kind for v in analyze(fixed)] == [ViolationKind.DUPLICATE_MODULE]

    def test_respects_config(self) -> None:
        source = "from m import b, a\n"
        assert fix_source(source, ImportOrderConfig(sort_members=False)) == source

    def test_code_after_block_untouched(self) -> None:
        source = "import sys\nimport os\n\n\nimport_order = 'keep me'  # comment\n"
        assert fix_source(source) == "import os\nimport sys\n\n\nimport_order = 'keep me'  # comment\n"

    def test_semicolon_joined_statements_split(self) -> None:
        assert fix_source("import b; import a\n") == "import a\nimport b\n"

    def test_line_continuation_binding_converges(self) -> None:
        fixed = fix_source("from x import b, \\\n    a\n")
        assert analyze(fixed) == ()
        assert fix_source(fixed) == fixed

    def test_invalid_rewrite_discarded(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        source = "import b\nimport a\n"
        monkeypatch.setattr(fixer, "apply_rewrites", lambda current, rewrites: ("import (\n", 1))

        with caplog.at_level(logging.WARNING):
            assert fix_source(source) == source

        assert "invalid syntax" in caplog.text

    def test_invalid_input_raises(self) -> None:
        with pytest.raises(ParseError):
            fix_source("from import\n")


class TestFixProperties:
    """Idempotence and the order invariant over every permutation."""

    @pytest.mark.parametrize("order", list(itertools.permutations(STATEMENTS)))
    def test_fix_converges(self, order: tuple[str, ...]) -> None:
        source = "\n".join(order) + "\n"

        fixed = fix_source(source)

        assert analyze(fixed) == ()
        assert fix_source(fixed) == fixed
        assert [s.module_identifier for s in classify_source(fixed)] == [
            "os",
            "sys",
            "collections",
            ".local",
        ]

    @pytest.mark.parametrize("order", list(itertools.permutations(STATEMENTS)))
    def test_fix_keeps_every_comment_once(self, order: tuple[str, ...]) -> None:
        source = "".join(f"# about {line.split()[1]}\n{line}\n" for line in order)

        fixed = fix_source(source)

        for line in order:
            assert fixed.count(f"# about {line.split()[1]}\n") == 1
        assert sorted(fixed.splitlines()) == sorted(source.splitlines())
