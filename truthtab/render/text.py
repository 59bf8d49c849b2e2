"""
text.py - Tablas de verdad en texto plano.

    Expressions:
      E1: A & B

    A | B | E1
    --+---+---
    T | T |  T
    T | F |  F
    ...
"""

from __future__ import annotations

from truthtab.config import TruthTableConfig
from truthtab.logic.driver import EqualityVerdict, TableStatus, TruthTable

CHECK = "✓"
CROSS = "✗"


def _format_row(values: list[str], widths: list[int]) -> str:
    return " | ".join(value.rjust(width) for value, width in zip(values, widths))


def _separator(widths: list[int]) -> str:
    return "-+-".join("-" * width for width in widths)


def render_table(table: TruthTable, config: TruthTableConfig | None = None) -> str:
    """Tabla de verdad en texto plano, con leyenda E1..En."""
    config = config or TruthTableConfig()
    if table.is_empty:
        return table.status.message

    labels = [f"E{i + 1}" for i in range(len(table.formulas))]
    headers = [*table.variables, *labels]
    glyph_width = max(len(config.true_glyph), len(config.false_glyph))
    widths = [max(len(h), glyph_width) for h in headers]

    lines = ["Expressions:"]
    lines.extend(f"  {label}: {header}" for label, header in zip(labels, table.headers))
    lines.append("")
    lines.append(_format_row(headers, widths))
    lines.append(_separator(widths))
    for row in table.rows:
        values = [config.format_bool(cell) for cell in row.cells(table.variables)]
        lines.append(_format_row(values, widths))

    return "\n".join(lines)


def render_equality(verdict: EqualityVerdict, config: TruthTableConfig | None = None) -> str:
    """Verificacion de igualdad en texto plano, con columna EQ y resumen."""
    config = config or TruthTableConfig()
    if verdict.status is not TableStatus.OK:
        return verdict.status.message

    labels = [f"S{i + 1}" for i in range(len(verdict.steps))]
    headers = [*verdict.variables, *labels, "EQ"]
    widths = [max(len(h), 2) for h in headers]

    lines = ["Steps:"]
    lines.extend(f"  {label}: {step}" for label, step in zip(labels, verdict.steps))
    lines.append("")
    lines.append(_format_row(headers, widths))
    lines.append(_separator(widths))
    for row in verdict.rows:
        values = [config.format_bool(row.assignment[v]) for v in verdict.variables]
        values += [config.format_bool(result) for result in row.results]
        values.append(CHECK if row.matches else CROSS)
        lines.append(_format_row(values, widths))

    lines.append("")
    lines.append(summary_line(verdict))
    return "\n".join(lines)


def summary_line(verdict: EqualityVerdict) -> str:
    if verdict.all_equal:
        return f"{CHECK} All steps are equivalent!"
    return f"{CROSS} Found {verdict.mismatch_count} row(s) with mismatches"
