"""
Unit tests for derived paths and staleness checks.
"""

import os
from pathlib import Path

import pytest

from brief.paths import derive_file_path, is_newer_than


class TestDeriveFilePath:
    """Tests for derive_file_path."""

    @pytest.mark.parametrize("path, new_ext, expected", [
        ("/my/path/file.brf", "tex", "/my/path/file.tex"),
        ("/my/path/file.brf", ".tex", "/my/path/file.tex"),
        ("file.brf", ".tex", "file.tex"),
        ("dir.d/letter", "pdf", "dir.d/letter.pdf"),
    ])
    def test_derive(self, path, new_ext, expected):
        assert derive_file_path(path, new_ext) == Path(expected)


class TestIsNewerThan:
    """Tests for is_newer_than."""

    @pytest.fixture
    def older(self, tmp_path):
        path = tmp_path / "older"
        path.write_text("x")
        os.utime(path, (1_000_000, 1_000_000))
        return path

    @pytest.fixture
    def newer(self, tmp_path):
        path = tmp_path / "newer"
        path.write_text("x")
        os.utime(path, (2_000_000, 2_000_000))
        return path

    def test_newer(self, older, newer):
        assert is_newer_than(newer, older) is True

    def test_older(self, older, newer):
        assert is_newer_than(older, newer) is False

    def test_same_time_is_not_newer(self, older):
        assert is_newer_than(older, older) is False

    def test_second_missing(self, older, tmp_path):
        assert is_newer_than(older, tmp_path / "missing") is True

    def test_first_missing(self, older, tmp_path):
        assert is_newer_than(tmp_path / "missing", older) is False

    def test_both_missing(self, tmp_path):
        assert is_newer_than(tmp_path / "a", tmp_path / "b") is True
