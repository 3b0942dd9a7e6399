"""
Tests for the search/replace block parser.
"""

from patchspace.utils.patch_block import parse_patch_block


def _block(search, replace):
    return f"<<<<<<< SEARCH\n{search}\n=======\n{replace}\n>>>>>>> REPLACE"


class TestParsePatchBlock:
    """Test cases for parse_patch_block."""

    def test_simple_block(self):
        """Test parsing a single-line search and replace."""
        instruction = parse_patch_block(_block("console.log(1)", "console.log(2)"))

        assert instruction.search == "console.log(1)"
        assert instruction.replace == "console.log(2)"

    def test_multiline_keeps_inner_whitespace(self):
        """Test that payload lines are kept verbatim."""
        instruction = parse_patch_block(_block("  if (x) {\n    y();\n  }", "  z();"))

        assert instruction.search == "  if (x) {\n    y();\n  }"
        assert instruction.replace == "  z();"

    def test_markers_tolerate_surrounding_whitespace(self):
        """Test markers padded with spaces are still recognized."""
        block = "  <<<<<<< SEARCH  \nold\n   =======\nnew\n>>>>>>> REPLACE   "
        instruction = parse_patch_block(block)

        assert instruction.search == "old"
        assert instruction.replace == "new"

    def test_divider_inside_replace_is_content(self):
        """Test that a second divider line belongs to the replace text."""
        instruction = parse_patch_block(_block("a", "b\n=======\nc"))

        assert instruction.search == "a"
        assert instruction.replace == "b\n=======\nc"

    def test_trailing_text_ignored(self):
        """Test that anything after the closing marker is dropped."""
        block = _block("a", "b") + "\nextra line\n<<<<<<< SEARCH\nz"
        instruction = parse_patch_block(block)

        assert instruction.search == "a"
        assert instruction.replace == "b"

    def test_text_before_opening_marker_ignored(self):
        """Test that preamble text is not part of the search."""
        instruction = parse_patch_block("Here is my edit:\n" + _block("a", "b"))

        assert instruction.search == "a"

    def test_empty_replace_means_deletion(self):
        """Test that an empty replace side is accepted."""
        instruction = parse_patch_block("<<<<<<< SEARCH\nremove me\n=======\n>>>>>>> REPLACE")

        assert instruction.search == "remove me"
        assert instruction.replace == ""

    def test_empty_search_means_insertion(self):
        """Test that an empty search side is accepted."""
        instruction = parse_patch_block("<<<<<<< SEARCH\n=======\n// header\n>>>>>>> REPLACE")

        assert instruction.search == ""
        assert instruction.replace == "// header"

    def test_blank_block_rejected(self):
        """Test that a block with no content on either side yields None."""
        assert parse_patch_block("<<<<<<< SEARCH\n   \n=======\n\n>>>>>>> REPLACE") is None

    def test_no_markers(self):
        """Test free text without markers."""
        assert parse_patch_block("just replace foo with bar") is None
        assert parse_patch_block("") is None
