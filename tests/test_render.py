"""
Tests for the plain, markdown and rich renderers.
"""

from rich.console import Console

from truthtab.config import TruthTableConfig
from truthtab.logic.driver import build_latex_table, build_table, compare_steps
from truthtab.render.console import build_equality_table, build_rich_table, print_equality, print_table
from truthtab.render.markdown import (
    FALSE_LATEX,
    TRUE_LATEX,
    escape_markdown_cell,
    render_markdown_table,
)
from truthtab.render.text import render_equality, render_table


def recording_console() -> Console:
    return Console(record=True, width=120, force_terminal=False, color_system=None)


class TestPlainText:
    def test_table_layout(self):
        text = render_table(build_table("A & B"))
        lines = text.splitlines()
        assert lines[0] == "Expressions:"
        assert lines[1] == "  E1: A & B"
        assert lines[3] == "A | B | E1"
        assert lines[4] == "--+---+---"
        assert lines[5] == "T | T |  T"
        assert lines[-1] == "F | F |  F"

    def test_custom_glyphs(self):
        config = TruthTableConfig(true_glyph="1", false_glyph="0")
        text = render_table(build_table("!A"), config)
        assert text.splitlines()[-1] == "0 |  1"

    def test_empty_table_renders_status_message(self):
        assert render_table(build_table("1")) == "No variables found in expressions."
        assert render_table(build_table()) == "No expressions provided."

    def test_equality_report(self):
        text = render_equality(compare_steps(["A & B", "A | B"]))
        lines = text.splitlines()
        assert lines[:3] == ["Steps:", "  S1: A & B", "  S2: A | B"]
        assert lines[4] == " A |  B | S1 | S2 | EQ"
        assert lines[6] == " T |  T |  T |  T |  ✓"
        assert lines[7] == " T |  F |  F |  T |  ✗"
        assert text.splitlines()[-1] == "✗ Found 2 row(s) with mismatches"

    def test_equality_report_all_equal(self):
        text = render_equality(compare_steps(["!!A", "A"]))
        assert text.splitlines()[-1] == "✓ All steps are equivalent!"

    def test_equality_nothing_to_compare(self):
        assert render_equality(compare_steps(["A"])) == "Need at least 2 expressions to compare."


class TestMarkdown:
    def test_headers_are_math_cells(self):
        table = build_latex_table(r"A \land B")
        header = render_markdown_table(table).splitlines()[0]
        assert header.startswith("| $A$")
        assert r"$A \land B$" in header

    def test_cells_use_colored_glyphs(self):
        lines = render_markdown_table(build_table("!A")).splitlines()
        assert len(lines) == 2 + 2
        assert f"${TRUE_LATEX}$" in lines[2]
        assert f"${FALSE_LATEX}$" in lines[2]
        assert lines[1].startswith("| ---")

    def test_pipes_in_headers_are_escaped(self):
        assert escape_markdown_cell("A | B\nC") == "A \\| B C"
        header = render_markdown_table(build_table("A | B")).splitlines()[0]
        assert "$A \\| B$" in header

    def test_rows_have_same_width(self):
        lines = render_markdown_table(build_table("A & B", "A | B")).splitlines()
        assert len({len(line) for line in lines}) == 1


class TestRichConsole:
    def test_rich_table_columns(self):
        rich_table = build_rich_table(build_table("A & B", "!A"))
        assert len(rich_table.columns) == 4
        assert rich_table.row_count == 4

    def test_equality_table_has_eq_column(self):
        rich_table = build_equality_table(compare_steps(["A", "!!A"]))
        assert [str(c.header) for c in rich_table.columns] == ["A", "S1", "S2", "EQ"]

    def test_print_table(self):
        console = recording_console()
        print_table(build_table("A | B"), console)
        output = console.export_text()
        assert "E1: A | B" in output
        assert "T" in output and "F" in output

    def test_print_empty_table(self):
        console = recording_console()
        print_table(build_table("0 | 1"), console)
        assert "No variables found" in console.export_text()

    def test_print_equality_summary(self):
        console = recording_console()
        print_equality(compare_steps(["A & B", "A | B"]), console)
        output = console.export_text()
        assert "S1: A & B" in output
        assert "Found 2 row(s) with mismatches" in output
