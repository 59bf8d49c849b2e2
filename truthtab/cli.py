"""
truthtab CLI - Truth tables and derivation checks from the terminal.

Usage:
    truthtab table "A & B" "A | B"
    truthtab table --latex "A \\rightarrow B" "\\neg A \\lor B" --style markdown
    truthtab verify "\\neg(A \\lor B) &= \\neg A \\land \\neg B"
    truthtab verify --file proof.tex
    cat proof.tex | truthtab verify
    truthtab demo

Examples:
    $ truthtab verify "A \\land B = A \\lor B" --style plain
    ...
    ✗ Found 2 row(s) with mismatches

Exit codes:
    0  success (and, for verify, all steps equivalent)
    1  invalid input or non-equivalent derivation
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from truthtab.config import RenderStyle, TruthTableConfig
from truthtab.demo import run_demo
from truthtab.logic.driver import build_latex_table, build_table, compare_steps
from truthtab.logic.errors import TruthTabError
from truthtab.logic.latex import from_latex
from truthtab.logic.steps import parse_derivation
from truthtab.logic.symbols import collect_variables
from truthtab.render.console import print_equality, print_table
from truthtab.render.markdown import render_markdown_table
from truthtab.render.text import render_equality, render_table

console = Console()
logger = logging.getLogger("truthtab")


def setup_logging(verbose: bool = False) -> None:
    """Send library warnings (e.g. degraded implications) through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def load_config(args: argparse.Namespace) -> TruthTableConfig:
    """Config from --config JSON or TRUTHTAB_* env vars, then CLI overrides."""
    if args.config:
        config = TruthTableConfig.from_json(args.config)
    else:
        config = TruthTableConfig.from_env()
    return config.with_overrides(
        style=args.style,
        strict_implication=True if args.strict else None,
    )


def check_variable_budget(formulas: list[str], config: TruthTableConfig) -> None:
    """Refuse tables whose 2^n rows would be unreasonable."""
    count = len(collect_variables(formulas))
    if count > config.max_variables:
        raise TruthTabError(
            f"{count} variables would produce {2 ** count} rows "
            f"(max_variables={config.max_variables})"
        )


# =============================================================================
# COMMANDS
# =============================================================================


def cmd_table(args: argparse.Namespace, config: TruthTableConfig) -> int:
    """Build one truth table for all given formulas."""
    strict = config.strict_implication

    if args.latex:
        check_variable_budget([from_latex(f, strict=strict) for f in args.formulas], config)
        table = build_latex_table(*args.formulas, strict=strict)
    else:
        check_variable_budget(args.formulas, config)
        table = build_table(*args.formulas)

    style = config.render_style
    if style is RenderStyle.MARKDOWN:
        print(render_markdown_table(table))
    elif style is RenderStyle.PLAIN:
        print(render_table(table, config))
    else:
        print_table(table, console, config)

    return 0


def read_derivation(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.derivation:
        return args.derivation
    return sys.stdin.read()


def cmd_verify(args: argparse.Namespace, config: TruthTableConfig) -> int:
    """Check that every step of a derivation has the same truth table."""
    steps = parse_derivation(read_derivation(args), strict=config.strict_implication)
    formulas = [step.formula for step in steps]
    check_variable_budget(formulas, config)

    for step in steps:
        if step.diagnostics:
            logger.warning("%s (%s) is suspect: degraded implication", step.label, step.source)

    verdict = compare_steps(formulas)

    if args.json:
        print(json.dumps(verdict.to_dict(), ensure_ascii=False, indent=2))
    elif config.render_style is RenderStyle.COLORIZED:
        print_equality(verdict, console, config)
    else:
        print(render_equality(verdict, config))

    return 0 if verdict.all_equal else 1


def cmd_demo(args: argparse.Namespace, config: TruthTableConfig) -> int:
    """Run the example gallery."""
    run_demo(console, config)
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="truthtab",
        description="Truth tables for propositional logic (native or LaTeX notation)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--style",
        choices=[s.value for s in RenderStyle],
        default=None,
        help="Output style (default: from config, colorized)",
    )
    common.add_argument("--config", type=str, default=None, help="JSON config file")
    common.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of degrading an implication whose left operand is unclear",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    table_parser = subparsers.add_parser("table", parents=[common], help="Build a truth table")
    table_parser.add_argument("formulas", nargs="+", help="Formulas (one column each)")
    table_parser.add_argument("--latex", action="store_true", help="Formulas use LaTeX notation")
    table_parser.set_defaults(func=cmd_table)

    verify_parser = subparsers.add_parser(
        "verify", parents=[common], help="Check a multi-step LaTeX derivation"
    )
    verify_parser.add_argument(
        "derivation", nargs="?", help="Derivation text (stdin when omitted)"
    )
    verify_parser.add_argument("--file", "-f", type=str, default=None, help="Read derivation from file")
    verify_parser.add_argument("--json", action="store_true", help="Print the verdict as JSON")
    verify_parser.set_defaults(func=cmd_verify)

    demo_parser = subparsers.add_parser("demo", parents=[common], help="Run the example gallery")
    demo_parser.set_defaults(func=cmd_demo)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    try:
        config = load_config(args)
        return args.func(args, config)
    except (TruthTabError, OSError, ValueError) as e:
        console.print(f"[bold red]❌ {escape(str(e))}[/]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
