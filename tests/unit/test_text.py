"""
Unit tests for the trim/normalize helpers.
"""

import pytest

from brief.errors import FormatError
from brief.text import escape_special, join_hard_breaks, single_value, trim_edges


class TestTrimEdges:
    """Tests for trim_edges."""

    def test_keeps_interior_blank_lines(self):
        """Test that only surrounding blank lines are removed."""
        assert trim_edges(["", "x", "", "y", ""]) == ["x", "", "y"]

    def test_whitespace_only_lines_count_as_blank(self):
        """Test that lines with only whitespace are trimmed too."""
        assert trim_edges(["  ", "\t", "x", " "]) == ["x"]

    def test_all_blank(self):
        """Test that input without content gives an empty list."""
        assert trim_edges(["", "   ", ""]) == []

    def test_empty(self):
        """Test empty input."""
        assert trim_edges([]) == []

    def test_content_lines_are_unchanged(self):
        """Test that content lines keep their own whitespace."""
        assert trim_edges(["", "  indented  ", ""]) == ["  indented  "]

    @pytest.mark.parametrize("lines", [
        [],
        ["a"],
        ["", "a", "", "b", ""],
        ["", "", ""],
        [" x ", "", "", "y"],
    ])
    def test_idempotent(self, lines):
        """Test that trimming twice equals trimming once."""
        assert trim_edges(trim_edges(lines)) == trim_edges(lines)

    def test_accepts_tuples(self):
        """Test that section tuples can be trimmed directly."""
        assert trim_edges(("", "a", "")) == ["a"]


class TestSingleValue:
    """Tests for single_value."""

    def test_single_line(self):
        """Test the value of a single surrounded line."""
        assert single_value(["", "hello", ""]) == "hello"

    def test_value_is_stripped(self):
        """Test that whitespace around the value is removed."""
        assert single_value(["  letter.tex \t"]) == "letter.tex"

    def test_multiple_values(self):
        """Test that two content lines are an error."""
        with pytest.raises(FormatError, match="Multiple values found"):
            single_value(["a", "b"])

    def test_multiple_values_with_blank_between(self):
        """Test that interior blank lines do not make a single value."""
        with pytest.raises(FormatError, match="Multiple values found"):
            single_value(["a", "", "b"])

    def test_no_value(self):
        """Test that an empty section is an error."""
        with pytest.raises(FormatError, match="No line with content found"):
            single_value([])

    def test_blank_only(self):
        """Test that blank lines only are an error."""
        with pytest.raises(FormatError, match="No line with content found"):
            single_value(["", "  "])


class TestJoinAndEscape:
    """Tests for join_hard_breaks and escape_special."""

    def test_join_hard_breaks(self):
        """Test joining lines with LaTeX line breaks."""
        assert join_hard_breaks(["Jane", "Street 1"]) == "Jane\\\\\nStreet 1"

    def test_join_single_line(self):
        """Test that a single line gets no line break."""
        assert join_hard_breaks(["Jane"]) == "Jane"

    def test_join_nothing(self):
        """Test joining no lines."""
        assert join_hard_breaks([]) == ""

    def test_escape_underscore_and_caret(self):
        """Test escaping LaTeX special characters."""
        assert escape_special("a_b^c") == "a\\string_b\\string^c"

    def test_escape_narrow_no_break_space(self):
        """Test that a narrow no-break space becomes a thin space."""
        assert escape_special("10\u202fkm") == "10\\,km"

    def test_escape_is_single_pass(self):
        """Test that replacements are not applied to their own output."""
        assert escape_special("__") == "\\string_\\string_"

    def test_escape_leaves_other_text(self):
        """Test that ordinary text is unchanged."""
        assert escape_special("Dear Jane, \\textbf{hi}") == "Dear Jane, \\textbf{hi}"
