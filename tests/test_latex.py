"""
Tests for the LaTeX → native normalizer.
"""

import logging

import pytest

from truthtab.logic.errors import UnresolvableImplicationScope
from truthtab.logic.evaluator import evaluate
from truthtab.logic.latex import (
    IMPLIES,
    absorb_negations,
    eliminate_implications,
    find_left_operand,
    from_latex,
    lex,
    match_open_paren,
    normalize,
    normalize_with_diagnostics,
    render_tokens,
    replace_overlines,
)
from truthtab.logic.symbols import generate_assignments


class TestSimpleMacros:
    def test_or(self):
        assert from_latex(r"A \lor B") == "A | B"

    def test_and(self):
        assert from_latex(r"A \land B") == "A & B"

    def test_alternative_spellings(self):
        assert from_latex(r"A \vee B \wedge C") == "A | B & C"

    def test_negation_attaches_to_operand(self):
        assert from_latex(r"\neg A") == "!A"
        assert from_latex(r"\lnot   A") == "!A"
        assert from_latex(r"\neg\neg A") == "!!A"
        assert from_latex(r"\neg(A \lor B)") == "!(A | B)"

    def test_constants(self):
        assert from_latex(r"A \land \top \lor \bot") == "A & 1 | 0"

    def test_biconditional(self):
        assert from_latex(r"A \leftrightarrow B") == "A == B"
        assert from_latex(r"A \iff \neg B") == "A == !B"

    def test_unicode_connectives(self):
        assert from_latex("¬A ∧ B ∨ C") == "!A & B | C"
        assert from_latex("A ↔ B") == "A == B"

    def test_normalize_is_from_latex(self):
        assert normalize(r"A \lor B") == from_latex(r"A \lor B")

    def test_whitespace_is_collapsed(self):
        assert from_latex("  A   \\land\n  B  ") == "A & B"

    def test_unknown_macros_survive_and_are_rejected_later(self):
        formula = from_latex(r"A \oplus B")
        assert r"\oplus" in formula
        with pytest.raises(ValueError):
            evaluate(formula, {"A": True, "B": True})


class TestOverline:
    def test_single_variable(self):
        assert from_latex(r"\overline{A}") == "!A"

    def test_compound_content_is_grouped(self):
        assert from_latex(r"\overline{A \lor B}") == "!(A | B)"

    def test_inner_latex_is_normalized(self):
        assert from_latex(r"\overline{A \land B} \lor C") == "!(A & B) | C"

    def test_nested_overlines(self):
        assert replace_overlines(r"\overline{\overline{A} \lor B}") == r"!(!A \lor B)"

    def test_nested_braces_in_content(self):
        assert replace_overlines(r"\overline{{A}}") == "!({A})"

    def test_unclosed_overline_left_untouched(self):
        assert replace_overlines(r"\overline{A") == r"\overline{A"


class TestImplication:
    def test_simple(self):
        assert from_latex(r"A \rightarrow B") == "!A | B"

    @pytest.mark.parametrize("arrow", [r"\rightarrow", r"\to", r"\implies", r"\Rightarrow", "->", "→"])
    def test_arrow_spellings(self, arrow):
        assert from_latex(f"A {arrow} B") == "!A | B"

    def test_to_does_not_match_inside_top(self):
        assert from_latex(r"\top \to A") == "!1 | A"

    def test_parenthesized_antecedent(self):
        assert from_latex(r"(A \lor B) \rightarrow C") == "!(A | B) | C"

    def test_nested_parentheses(self):
        assert from_latex(r"((A \lor B)) \rightarrow C") == "!((A | B)) | C"

    def test_negated_group_is_wrapped(self):
        assert from_latex(r"\neg(A \lor B) \rightarrow C") == "!(!(A | B)) | C"

    def test_negated_atom_is_not_wrapped(self):
        assert from_latex(r"\neg B \rightarrow \neg A") == "!!B | !A"

    def test_constant_antecedent(self):
        assert from_latex(r"\top \rightarrow A") == "!1 | A"

    def test_chained_is_right_associative(self):
        assert from_latex(r"A \rightarrow B \rightarrow C") == "!A | !B | C"

    def test_implication_inside_group(self):
        assert from_latex(r"(A \rightarrow B) \land (B \rightarrow A)") == "(!A | B) & (!B | A)"

    def test_matches_material_implication_on_every_row(self):
        native = from_latex(r"A \rightarrow B")
        for row in generate_assignments(["A", "B"]):
            assert evaluate(native, row) == evaluate("!A | B", row)

    def test_overline_antecedent(self):
        assert from_latex(r"\overline{A \land B} \rightarrow C") == "!(!(A & B)) | C"


class TestUnresolvableScope:
    def test_falls_back_to_disjunction(self):
        assert from_latex(r"\rightarrow A") == "| A"

    def test_fallback_is_reported(self):
        formula, diagnostics = normalize_with_diagnostics(r"A \land \rightarrow B")
        assert formula == "A & | B"
        assert len(diagnostics) == 1

    def test_fallback_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="truthtab.logic.latex"):
            from_latex(r"\rightarrow A")
        assert "left operand" in caplog.text

    def test_clean_input_has_no_diagnostics(self):
        _, diagnostics = normalize_with_diagnostics(r"A \rightarrow B")
        assert diagnostics == []

    def test_strict_mode_raises(self):
        with pytest.raises(UnresolvableImplicationScope):
            from_latex(r"\rightarrow A", strict=True)

    def test_unbalanced_group_is_unresolvable(self):
        with pytest.raises(UnresolvableImplicationScope):
            from_latex(r"A) \rightarrow B", strict=True)


class TestTokenOperations:
    def test_lex(self):
        assert lex(r"!(A | B) \rightarrow C") == ["!", "(", "A", "|", "B", ")", IMPLIES, "C"]

    def test_lex_keeps_equality_operators(self):
        assert lex("A === B != C") == ["A", "==", "B", "!=", "C"]

    def test_render_tokens(self):
        assert render_tokens(["!", "(", "A", "&", "B", ")", "|", "C"]) == "!(A & B) | C"

    def test_match_open_paren_spans_nested_groups(self):
        tokens = ["(", "(", "A", ")", "|", "(", "B", ")", ")"]
        assert match_open_paren(tokens, 8) == 0
        assert match_open_paren(tokens, 7) == 5

    def test_match_open_paren_unbalanced(self):
        assert match_open_paren(["A", ")"], 1) is None

    def test_absorb_negations(self):
        tokens = ["A", "&", "!", "!", "B"]
        assert absorb_negations(tokens, 4) == 2
        assert absorb_negations(tokens, 0) == 0

    def test_find_left_operand(self):
        assert find_left_operand(["!", "(", "A", ")", IMPLIES, "B"], 4) == 0
        assert find_left_operand(["A", "&", "B", IMPLIES, "C"], 3) == 2
        assert find_left_operand(["&", IMPLIES, "C"], 1) is None
        assert find_left_operand([IMPLIES, "C"], 0) is None

    def test_eliminate_does_not_mutate_input(self):
        tokens = ["A", IMPLIES, "B"]
        assert eliminate_implications(tokens) == ["!", "A", "|", "B"]
        assert tokens == ["A", IMPLIES, "B"]
