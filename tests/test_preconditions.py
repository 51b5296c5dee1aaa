"""Tests for the input file checks that run before any processing."""

from __future__ import annotations

import os

import pytest

from docaudit.application.preconditions import ASCIIDOC_SUFFIXES, require_file
from docaudit.domain.errors import PreconditionError


class TestRequireFile:
    def test_readable_file_passes(self, tmp_path):
        path = tmp_path / "con_a.adoc"
        path.write_text("", encoding="utf-8")
        assert require_file(path, ASCIIDOC_SUFFIXES) == path

    def test_suffix_is_case_insensitive(self, tmp_path):
        path = tmp_path / "CON_A.ADOC"
        path.write_text("", encoding="utf-8")
        assert require_file(path, ASCIIDOC_SUFFIXES) == path

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(PreconditionError, match="Not an AsciiDoc file") as excinfo:
            require_file(path, ASCIIDOC_SUFFIXES)
        assert excinfo.value.exit_code == 22

    def test_extension_checked_before_existence(self, tmp_path):
        with pytest.raises(PreconditionError) as excinfo:
            require_file(tmp_path / "missing.txt", ASCIIDOC_SUFFIXES)
        assert excinfo.value.exit_code == 22

    def test_missing_file(self, tmp_path):
        with pytest.raises(PreconditionError, match="No such file") as excinfo:
            require_file(tmp_path / "missing.adoc", ASCIIDOC_SUFFIXES)
        assert excinfo.value.exit_code == 2

    def test_directory(self, tmp_path):
        folder = tmp_path / "guide.adoc"
        folder.mkdir()
        with pytest.raises(PreconditionError, match="Not a file") as excinfo:
            require_file(folder, ASCIIDOC_SUFFIXES)
        assert excinfo.value.exit_code == 21

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root can read any file",
    )
    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "con_secret.adoc"
        path.write_text("", encoding="utf-8")
        path.chmod(0)
        try:
            with pytest.raises(PreconditionError, match="Permission denied") as excinfo:
                require_file(path, ASCIIDOC_SUFFIXES)
            assert excinfo.value.exit_code == 13
        finally:
            path.chmod(0o644)

    def test_custom_kind_in_message(self, tmp_path):
        path = tmp_path / "book.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(PreconditionError, match="Not a DocBook file"):
            require_file(path, {".xml"}, kind="a DocBook")
