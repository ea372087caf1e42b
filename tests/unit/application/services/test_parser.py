"""Tests for application/services/parser.py."""

from pathlib import Path

import pytest

from importorder.application.services.parser import (
    collect_files,
    parse_source,
    read_source,
    write_source,
)
from importorder.domain.exceptions import ParseError


class TestParseSource:
    """Tests for parse_source()."""

    def test_valid_source(self) -> None:
        assert len(parse_source("import os\n").body) == 1

    def test_syntax_error_wrapped(self) -> None:
        with pytest.raises(ParseError, match="bad.py") as exc_info:
            parse_source("def (:\n", Path("bad.py"))
        assert isinstance(exc_info.value.__cause__, SyntaxError)


class TestReadWrite:
    """Tests for read_source() and write_source()."""

    def test_keeps_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "mod.py"
        path.write_bytes(b"import os\r\nimport sys\r\n")
        assert read_source(path) == "import os\r\nimport sys\r\n"

    def test_write_keeps_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "mod.py"
        write_source(path, "import os\r\n")
        assert path.read_bytes() == b"import os\r\n"

    def test_bom_dropped_on_read(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.py"
        path.write_bytes(b"\xef\xbb\xbfimport os\n")

        source = read_source(path)

        assert source == "import os\n"
        assert len(parse_source(source).body) == 1

    def test_bom_restored_on_write(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.py"
        path.write_bytes(b"\xef\xbb\xbfimport sys\n")
        write_source(path, "import os\n")
        assert path.read_bytes() == b"\xef\xbb\xbfimport os\n"

    def test_no_bom_added(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.py"
        path.write_bytes(b"import sys\n")
        write_source(path, "import os\n")
        assert path.read_bytes() == b"import os\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="file not found"):
            read_source(tmp_path / "missing.py")

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.py"
        path.write_bytes(b"# \xe9\n")
        with pytest.raises(ParseError, match="encoding error"):
            read_source(path)


class TestCollectFiles:
    """Tests for collect_files()."""

    def test_expands_directories_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "b.py").write_text("")
        (tmp_path / "pkg" / "a.py").write_text("")
        (tmp_path / "pkg" / "notes.txt").write_text("")

        files = collect_files([tmp_path])

        assert files == (tmp_path / "pkg" / "a.py", tmp_path / "pkg" / "b.py")

    def test_skips_excluded_directories(self, tmp_path: Path) -> None:
        (tmp_path / ".venv").mkdir()
        (tmp_path / ".venv" / "site.py").write_text("")
        (tmp_path / "mod.py").write_text("")

        assert collect_files([tmp_path]) == (tmp_path / "mod.py",)

    def test_custom_exclude(self, tmp_path: Path) -> None:
        (tmp_path / "gen").mkdir()
        (tmp_path / "gen" / "out.py").write_text("")

        assert collect_files([tmp_path], exclude=frozenset({"gen"})) == ()

    def test_files_taken_as_given(self, tmp_path: Path) -> None:
        script = tmp_path / "script"
        script.write_text("")
        assert collect_files([script]) == (script,)
