"""
Tests for cleaning and splitting multi-step LaTeX derivations.
"""

from truthtab.logic.steps import (
    DerivationStep,
    clean_latex_equation,
    parse_derivation,
    split_steps,
    split_top_level,
)

SIMPLIFICATION_PROOF = r"""
  (A \lor B) \land (A \lor \neg B)
    &= A \lor (B \land \neg B) &\text{(Distributive)} \\
    &= A \lor \bot &\text{(Contradiction)} \\
    &= A &\text{(Identity)} \\
"""


class TestCleanLatexEquation:
    def test_removes_annotations_breaks_and_alignment(self):
        assert clean_latex_equation(r"A &= B &\text{(Def)} \\") == "A = B"

    def test_removes_math_delimiters(self):
        assert clean_latex_equation(r"$A \lor B$ = $B \lor A$") == r"A \lor B = B \lor A"

    def test_drops_blank_lines_and_trims(self):
        assert clean_latex_equation("\n   A\n\n   = B  \n\n") == "A\n= B"

    def test_removes_environments_and_spacing(self):
        text = r"\begin{aligned} A &= B \quad \textbf{(x)} \end{aligned}"
        assert clean_latex_equation(text) == "A = B"

    def test_sizing_macros_do_not_touch_arrows(self):
        cleaned = clean_latex_equation(r"\left( A \rightarrow B \right)")
        assert cleaned == r"( A \rightarrow B )"


class TestSplitSteps:
    def test_two_steps(self):
        assert split_steps(r"\neg(A \lor B) &= \neg A \land \neg B \\") == ["!(A | B)", "!A & !B"]

    def test_multi_step_proof_in_order(self):
        assert split_steps(SIMPLIFICATION_PROOF) == [
            "(A | B) & (A | !B)",
            "A | (B & !B)",
            "A | 0",
            "A",
        ]

    def test_implication_steps_are_normalized(self):
        steps = split_steps(r"A \rightarrow B &= \neg B \rightarrow \neg A")
        assert steps == ["!A | B", "!!B | !A"]

    def test_empty_segments_discarded(self):
        assert split_steps("= A = = B =") == ["A", "B"]

    def test_single_formula(self):
        assert split_steps(r"A \lor B") == ["A | B"]

    def test_empty_input(self):
        assert split_steps("   \n  ") == []

    def test_split_only_at_top_level(self):
        assert split_top_level("A = (B = C) = D") == ["A ", " (B = C) ", " D"]


class TestParseDerivation:
    def test_steps_are_numbered_from_one(self):
        steps = parse_derivation(SIMPLIFICATION_PROOF)
        assert [s.index for s in steps] == [1, 2, 3, 4]
        assert [s.label for s in steps] == ["S1", "S2", "S3", "S4"]

    def test_source_keeps_latex(self):
        steps = parse_derivation(r"A \land B &= B \land A")
        assert steps[0] == DerivationStep(1, "A & B", r"A \land B")

    def test_degraded_implication_is_flagged(self):
        steps = parse_derivation(r"A \land \rightarrow B &= A")
        assert steps[0].diagnostics
        assert steps[1].diagnostics == ()
