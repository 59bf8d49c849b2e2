"""
console.py - Tablas de verdad con colores en la terminal (rich).

Verdadero en verde, falso en rojo. En la verificacion de igualdad,
los pasos que no coinciden con el primero se marcan en rojo y la
columna EQ muestra ✓ o ✗.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from truthtab.config import TruthTableConfig
from truthtab.logic.driver import EqualityVerdict, TableStatus, TruthTable
from truthtab.render.text import CHECK, CROSS, summary_line


def _cell(value: bool, config: TruthTableConfig) -> str:
    color = "green" if value else "red"
    return f"[{color}]{config.format_bool(value)}[/]"


def build_rich_table(table: TruthTable, config: TruthTableConfig | None = None) -> Table:
    """Convierte una TruthTable en una rich.Table lista para imprimir."""
    config = config or TruthTableConfig()
    rich_table = Table(show_lines=False)

    for variable in table.variables:
        rich_table.add_column(variable, justify="center", style="bold")
    for i, header in enumerate(table.headers):
        rich_table.add_column(f"E{i + 1}: {escape(header)}", justify="center", overflow="fold")

    for row in table.rows:
        rich_table.add_row(*(_cell(value, config) for value in row.cells(table.variables)))

    return rich_table


def build_equality_table(verdict: EqualityVerdict, config: TruthTableConfig | None = None) -> Table:
    """Tabla de verificacion: variables, un valor por paso y la columna EQ."""
    config = config or TruthTableConfig()
    rich_table = Table(title="Equality Verification", title_style="bold cyan")

    for variable in verdict.variables:
        rich_table.add_column(variable, justify="center", style="bold")
    for i in range(len(verdict.steps)):
        rich_table.add_column(f"S{i + 1}", justify="center", header_style="yellow")
    rich_table.add_column("EQ", justify="center")

    for row in verdict.rows:
        mismatched = set(row.mismatched_steps)
        cells = [config.format_bool(row.assignment[v]) for v in verdict.variables]
        for i, result in enumerate(row.results):
            formatted = config.format_bool(result)
            cells.append(f"[red]{formatted}[/]" if i in mismatched else formatted)
        cells.append(f"[green]{CHECK}[/]" if row.matches else f"[red]{CROSS}[/]")
        rich_table.add_row(*cells)

    return rich_table


def print_table(
    table: TruthTable,
    console: Console | None = None,
    config: TruthTableConfig | None = None,
) -> None:
    console = console or Console()
    if table.is_empty:
        console.print(f"[yellow]{table.status.message}[/]")
        return
    console.print(build_rich_table(table, config))


def print_equality(
    verdict: EqualityVerdict,
    console: Console | None = None,
    config: TruthTableConfig | None = None,
) -> None:
    console = console or Console()
    if verdict.status is not TableStatus.OK:
        console.print(f"[yellow]{verdict.status.message}[/]")
        return

    console.print("\n[bold]Steps:[/]")
    for i, step in enumerate(verdict.steps):
        console.print(f"  [yellow]S{i + 1}[/]: {escape(step)}", highlight=False)
    console.print()
    console.print(build_equality_table(verdict, config))
    console.print()

    color = "green" if verdict.all_equal else "red"
    console.print(f"[bold {color}]{summary_line(verdict)}[/]")
