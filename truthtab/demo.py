"""
demo.py - Galeria de ejemplos: operadores, LaTeX, implicacion, leyes del algebra de Boole.

Se ejecuta con:
    truthtab demo
    truthtab demo --style plain
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from truthtab.config import RenderStyle, TruthTableConfig
from truthtab.logic.driver import build_latex_table, build_table, verify_equality
from truthtab.render.console import print_equality, print_table
from truthtab.render.markdown import render_markdown_table
from truthtab.render.text import render_equality, render_table


@dataclass(frozen=True)
class Example:
    """Un ejemplo de la galeria.

    kind:
        "table"  → formulas nativas
        "latex"  → formulas LaTeX (se muestran tal cual y se evaluan normalizadas)
        "verify" → derivacion LaTeX de varios pasos
    """

    title: str
    kind: str
    formulas: tuple[str, ...]


SECTIONS: list[tuple[str, list[Example]]] = [
    (
        "BASIC OPERATORS",
        [
            Example("Simple AND operation", "table", ("A & B",)),
            Example("Simple OR operation", "table", ("A | B",)),
            Example("Simple NOT operation", "table", ("!A",)),
            Example("Comparing all basic operators", "table", ("A & B", "A | B", "!A")),
        ],
    ),
    (
        "COMPOUND EXPRESSIONS",
        [
            Example("XOR (exclusive OR) using A != B", "table", ("A != B",)),
            Example("NAND operation", "table", ("A & B", "!(A & B)")),
            Example("NOR operation", "table", ("A | B", "!(A | B)")),
            Example("Complex expression with precedence", "table", ("A | B & C", "(A | B) & C")),
        ],
    ),
    (
        "LATEX NOTATION",
        [
            Example("Using LaTeX operators", "latex", (r"A \land B \lor C",)),
            Example("Negation in LaTeX", "latex", (r"\neg(A \lor B)",)),
            Example("Constants in LaTeX", "latex", (r"A \land \top \lor \bot",)),
            Example("Complement with overline", "latex", (r"\overline{A \land B}", r"\overline{A} \lor \overline{B}")),
        ],
    ),
    (
        "IMPLICATION (A → B = !A | B)",
        [
            Example("Simple implication", "latex", (r"A \rightarrow B",)),
            Example("Nested parentheses in implication", "latex", (r"((A \lor B)) \rightarrow C",)),
            Example("Negated expression as antecedent", "latex", (r"\neg(A \lor B) \rightarrow C",)),
            Example("Constant as antecedent", "latex", (r"\top \rightarrow A",)),
            Example("Chained implication", "latex", (r"A \rightarrow B \rightarrow C",)),
        ],
    ),
    (
        "BICONDITIONAL (A ↔ B)",
        [
            Example("Biconditional operator", "latex", (r"A \leftrightarrow B",)),
            Example(
                "Comparing A ↔ B with (A → B) ∧ (B → A)",
                "latex",
                (r"A \leftrightarrow B", r"(A \rightarrow B) \land (B \rightarrow A)"),
            ),
        ],
    ),
    (
        "BOOLEAN ALGEBRA LAWS",
        [
            Example("DeMorgan's Law #1", "verify", (r"\neg(A \lor B) &= \neg A \land \neg B \\",)),
            Example("DeMorgan's Law #2", "verify", (r"\neg(A \land B) &= \neg A \lor \neg B \\",)),
            Example(
                "Distributive Law",
                "verify",
                (r"A \land (B \lor C) &= (A \land B) \lor (A \land C) \\",),
            ),
            Example("Absorption Law", "verify", (r"A \lor (A \land B) &= A \\",)),
            Example("Idempotent Law", "verify", (r"A \land A &= A \\",)),
            Example("Double Negation", "verify", (r"\neg\neg A &= A \\",)),
            Example("Associativity", "verify", (r"(A \lor B) \lor C &= A \lor (B \lor C) \\",)),
            Example("Commutativity", "verify", (r"A \land B &= B \land A \\",)),
        ],
    ),
    (
        "COMPLEX MULTI-STEP PROOFS",
        [
            Example(
                "Simplification proof",
                "verify",
                (
                    r"""
  (A \lor B) \land (A \lor \neg B)
    &= A \lor (B \land \neg B) &\text{(Distributive)} \\
    &= A \lor \bot &\text{(Contradiction)} \\
    &= A &\text{(Identity)} \\
""",
                ),
            ),
            Example(
                "Contrapositive equivalence",
                "verify",
                (
                    r"""
  A \rightarrow B
    &= \neg A \lor B &\text{(Implication)} \\
    &= B \lor \neg A &\text{(Commutative)} \\
    &= \neg B \rightarrow \neg A &\text{(Contrapositive)} \\
""",
                ),
            ),
            Example(
                "Consensus theorem",
                "verify",
                (
                    r"""
  (A \land B) \lor (\neg A \land C) \lor (B \land C)
    &= (A \land B) \lor (\neg A \land C) \\
""",
                ),
            ),
        ],
    ),
    (
        "REAL-WORLD LOGIC",
        [
            Example("If it rains, I bring an umbrella (R → U)", "latex", (r"R \rightarrow U",)),
            Example("Alarm: (M ∧ S) → A", "latex", (r"(M \land S) \rightarrow A",)),
            Example("I exercise iff I'm not tired: E ↔ ¬T", "latex", (r"E \leftrightarrow \neg T",)),
        ],
    ),
    (
        "EDGE CASES",
        [
            Example("Tautology (always true)", "table", ("A | !A",)),
            Example("Contradiction (always false)", "table", ("A & !A",)),
            Example("Four variables", "table", ("(A & B) | (C & D)",)),
            Example("Deeply nested expression", "table", ("!((A | B) & !(C | !D))",)),
            Example("A wrong step is caught", "verify", (r"A \land B &= A \lor B",)),
        ],
    ),
]


def run_example(example: Example, console: Console, config: TruthTableConfig) -> None:
    """Construye y muestra un ejemplo con el estilo del config."""
    style = config.render_style

    if example.kind == "verify":
        verdict = verify_equality(example.formulas[0], strict=config.strict_implication)
        if style is RenderStyle.COLORIZED:
            print_equality(verdict, console, config)
        else:
            console.print(render_equality(verdict, config), markup=False, highlight=False)
        return

    if example.kind == "latex":
        table = build_latex_table(*example.formulas, strict=config.strict_implication)
        for source, native in zip(table.headers, table.formulas):
            console.print(f"   LaTeX:     {escape(source)}", highlight=False)
            console.print(f"   Converted: {escape(native)}", highlight=False)
    else:
        table = build_table(*example.formulas)

    if style is RenderStyle.MARKDOWN:
        console.print(render_markdown_table(table), markup=False, highlight=False)
    elif style is RenderStyle.PLAIN:
        console.print(render_table(table, config), markup=False, highlight=False)
    else:
        print_table(table, console, config)


def run_demo(console: Console | None = None, config: TruthTableConfig | None = None) -> None:
    """Recorre toda la galeria."""
    console = console or Console()
    config = config or TruthTableConfig()

    console.print(Rule("[bold]TRUTH TABLE GENERATOR - EXAMPLES[/]"))
    for section, examples in SECTIONS:
        console.print(f"\n[bold cyan]{escape(section)}[/]\n")
        for example in examples:
            console.print(f"[bold]{escape(example.title)}:[/]")
            run_example(example, console, config)
            console.print()
    console.print(Rule("[bold]END OF EXAMPLES[/]"))
