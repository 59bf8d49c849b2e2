"""
markdown.py - Tablas de verdad en markdown con celdas LaTeX.

Cada celda va entre $...$ para que un visor de markdown con soporte
matematico la muestre como formula:

    | $A$                 | $B$                 | $A \\land B$        |
    | ------------------- | ------------------- | ------------------- |
    | $\\color{green}\\top$ | $\\color{green}\\top$ | $\\color{green}\\top$ |
"""

from __future__ import annotations

from truthtab.logic.driver import TruthTable

TRUE_LATEX = r"\color{green}\top"
FALSE_LATEX = r"\color{red}\bot"
MIN_COLUMN_WIDTH = 3


def format_bool_latex(value: bool) -> str:
    return TRUE_LATEX if value else FALSE_LATEX


def escape_markdown_cell(content: str) -> str:
    """Escapa '|' y saltos de linea para que no rompan la tabla."""
    return content.replace("|", "\\|").replace("\n", " ")


def render_markdown_table(table: TruthTable) -> str:
    """Tabla de verdad como tabla markdown. Usa table.headers como encabezados."""
    if table.is_empty:
        return table.status.message

    header_cells = [f"${escape_markdown_cell(h)}$" for h in (*table.variables, *table.headers)]
    data_rows = [
        [f"${format_bool_latex(cell)}$" for cell in row.cells(table.variables)]
        for row in table.rows
    ]

    widths = [
        max(MIN_COLUMN_WIDTH, len(cell), *(len(row[i]) for row in data_rows))
        for i, cell in enumerate(header_cells)
    ]

    def format_row(cells: list[str]) -> str:
        return "| " + " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)) + " |"

    lines = [format_row(header_cells)]
    lines.append("| " + " | ".join("-" * width for width in widths) + " |")
    lines.extend(format_row(row) for row in data_rows)
    return "\n".join(lines)
