"""
Tests for the LCS line diff.
"""

from patchspace.entities.patch import DiffLineType
from patchspace.utils.diff import diff_lines, lcs_table, render_unified, summarize_diff


def _shape(lines):
    return [(line.type.value, line.content) for line in lines]


class TestDiffLines:
    """Test cases for diff_lines."""

    def test_identical_texts_are_all_context(self):
        """Test that diffing a text with itself yields only context lines."""
        text = "a\nb\nc"
        lines = list(diff_lines(text, text))

        assert [line.type for line in lines] == [DiffLineType.CONTEXT] * 3
        assert [(l.old_line_number, l.new_line_number) for l in lines] == [
            (1, 1),
            (2, 2),
            (3, 3),
        ]

    def test_from_empty_is_all_adds(self):
        """Test that an empty old text produces one add per new line."""
        lines = list(diff_lines("", "x\ny"))

        assert _shape(lines) == [("add", "x"), ("add", "y")]
        assert all(line.old_line_number is None for line in lines)
        assert [line.new_line_number for line in lines] == [1, 2]

    def test_to_empty_is_all_removes(self):
        lines = list(diff_lines("x\ny", ""))

        assert _shape(lines) == [("remove", "x"), ("remove", "y")]
        assert all(line.new_line_number is None for line in lines)

    def test_both_empty(self):
        assert list(diff_lines("", "")) == []

    def test_mixed_change(self):
        """Test a removal and an addition around shared lines."""
        lines = list(diff_lines("a\nb\nc", "a\nc\nd"))

        assert _shape(lines) == [
            ("context", "a"),
            ("remove", "b"),
            ("context", "c"),
            ("add", "d"),
        ]
        assert lines[1].old_line_number == 2
        assert lines[2].old_line_number == 3
        assert lines[2].new_line_number == 2
        assert lines[3].new_line_number == 3

    def test_tie_emits_remove_before_add(self):
        """Test the forward order produced when add is preferred on ties."""
        lines = list(diff_lines("old", "new"))

        assert _shape(lines) == [("remove", "old"), ("add", "new")]

    def test_single_pass_iterator(self):
        """Test that the result is consumed once."""
        lines = diff_lines("a", "b")

        assert len(list(lines)) == 2
        assert list(lines) == []


class TestLcsTable:
    """Test cases for lcs_table."""

    def test_lcs_length(self):
        table = lcs_table(["a", "b", "c", "d"], ["b", "d", "e"])

        assert table[4][3] == 2


class TestSummaries:
    """Test cases for summarize_diff and render_unified."""

    def test_summarize(self):
        summary = summarize_diff(diff_lines("a\nb\nc", "a\nc\nd\ne"))

        assert summary.additions == 2
        assert summary.removals == 1

    def test_render_unified(self):
        """Test the numbered rendering with its +N -M header."""
        text = render_unified(diff_lines("a\nb", "a\nc"), path="f.txt")

        assert text.split("\n") == [
            "f.txt +1 -1",
            "1 1  a",
            "2   -b",
            "  2 +c",
        ]
