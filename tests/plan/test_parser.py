"""Tests for the plain text plan format."""

import pytest

from reading_app.errors import EmptyPlanError, LeadingDescriptionError, ParseError
from reading_app.plan.models import Cursor, Entry
from reading_app.plan.parser import (
    LineKind,
    classify_line,
    parse_plan_lines,
    parse_plan_text,
    render_plan_text,
)


class TestClassifyLine:
    """Test the line classifier."""

    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t  \n"])
    def test_blank_lines(self, line):
        assert classify_line(line) == LineKind.BLANK

    @pytest.mark.parametrize("line", ["Title", "Title   ", "Psalm 23\n", "a"])
    def test_title_lines(self, line):
        assert classify_line(line) == LineKind.TITLE

    @pytest.mark.parametrize("line", ["    desc", "\tdesc", " d", "\t  mixed"])
    def test_description_lines(self, line):
        assert classify_line(line) == LineKind.DESCRIPTION


class TestParsePlanText:
    """Test parsing plans from text."""

    def test_titles_and_description(self):
        """Parsing "A\\n    desc\\nB\\nC" yields A (with desc), B and C."""
        plan = parse_plan_text("A\n    desc\nB\nC")

        assert [entry.title for entry in plan.entries] == ["A", "B", "C"]
        assert plan.entries[0].description == "desc"
        assert plan.entries[1].description == ""
        assert plan.entries[2].description == ""

    def test_initial_state(self):
        """A parsed plan starts on its first entry and is acyclic by default."""
        plan = parse_plan_text("A\nB", name="reading")

        assert plan.name == "reading"
        assert plan.cursor == Cursor.at(0)
        assert plan.cyclic is False

    def test_cyclic_flag_supplied_by_caller(self):
        plan = parse_plan_text("A\nB", cyclic=True)
        assert plan.cyclic is True

    def test_multiline_description_joined_with_space(self, sample_plan_text):
        plan = parse_plan_text(sample_plan_text)

        assert len(plan) == 3
        assert plan.entries[0] == Entry("Genesis 1-3", "Creation and the fall")
        assert plan.entries[2].description == "The flood and the tower of Babel"

    def test_tabs_and_spaces_both_indent(self):
        plan = parse_plan_text("A\n\tfirst\n  second")
        assert plan.entries[0].description == "first second"

    def test_trailing_whitespace_ignored(self):
        plan = parse_plan_text("Title   \n    text  \t\n")
        assert plan.entries[0] == Entry("Title", "text")

    def test_blank_lines_between_entries_skipped(self):
        plan = parse_plan_text("\n\nA\n\n\nB\n   \nC\n\n")
        assert [entry.title for entry in plan.entries] == ["A", "B", "C"]

    def test_duplicate_titles_are_distinct_entries(self):
        plan = parse_plan_text("Review\nChapter 1\nReview")

        assert len(plan) == 3
        assert plan.entries[0].title == plan.entries[2].title == "Review"

    def test_windows_line_endings(self):
        plan = parse_plan_text("A\r\n    desc\r\nB\r\n")
        assert plan.entries == (Entry("A", "desc"), Entry("B"))

    @pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1e", "\x85", "\u2028"])
    def test_only_newline_ends_a_line(self, separator):
        plan = parse_plan_text(f"Chapter{separator}One\nTwo")

        assert [entry.title for entry in plan.entries] == [f"Chapter{separator}One", "Two"]

    def test_parse_plan_lines_accepts_file_like_iterables(self, tmp_path):
        path = tmp_path / "plan.txt"
        path.write_text("One\n    first\nTwo\n")

        with open(path) as f:
            plan = parse_plan_lines(f, name="file")

        assert plan.entries == (Entry("One", "first"), Entry("Two"))


class TestParseErrors:
    """Test malformed plan text."""

    @pytest.mark.parametrize("text", ["", "\n\n", "   \n\t\n"])
    def test_empty_text(self, text):
        with pytest.raises(EmptyPlanError):
            parse_plan_text(text)

    def test_leading_description(self):
        with pytest.raises(LeadingDescriptionError) as exc_info:
            parse_plan_text("\n    orphan\nA")

        assert exc_info.value.line_number == 2
        assert "line 2" in str(exc_info.value)

    def test_description_after_blank_line_has_no_entry(self):
        """A blank line closes the entry, so a later indented line is orphaned."""
        with pytest.raises(LeadingDescriptionError) as exc_info:
            parse_plan_text("A\n\n    detached")

        assert exc_info.value.line_number == 3

    def test_errors_share_parse_error_base(self):
        for text in ("", "  x"):
            with pytest.raises(ParseError):
                parse_plan_text(text)


class TestRenderPlanText:
    """Test writing plans back to text."""

    def test_render_format(self, genesis_plan):
        text = render_plan_text(genesis_plan)

        assert text == (
            "Genesis 1-3\n"
            "    Creation and the fall\n"
            "Genesis 4-7\n"
            "Genesis 8-11\n"
            "    The flood and the tower of Babel\n"
        )

    def test_rendered_text_parses_to_same_entries(self, genesis_plan):
        reparsed = parse_plan_text(render_plan_text(genesis_plan), name="genesis")
        assert reparsed.entries == genesis_plan.entries
