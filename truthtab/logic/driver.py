"""
driver.py - Construccion de tablas de verdad y verificacion de igualdad.

Dos modos:

    TABLA:     build_table("A & B", "A | B")
               → variables ['A', 'B'], 4 filas, columnas A | B | E1 | E2

    IGUALDAD:  verify_equality(r"\\neg(A \\lor B) &= \\neg A \\land \\neg B")
               → all_equal=True, mismatch_count=0

Los casos degenerados (sin formulas, sin variables, menos de 2 pasos)
no son errores: se reportan con un TableStatus y sin filas.

Este modulo NUNCA imprime. Los renderers en truthtab/render/ se
encargan de mostrar los resultados.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from truthtab.logic.evaluator import evaluate
from truthtab.logic.latex import from_latex
from truthtab.logic.steps import parse_derivation
from truthtab.logic.symbols import Assignment, collect_variables, generate_assignments

SINGLE_VARIABLE_PATTERN = re.compile(r"\s*([A-Z])\s*")


class TableStatus(Enum):
    """Resultado de una peticion de tabla o de verificacion."""

    OK = "OK"
    NO_EXPRESSIONS = "No expressions provided."
    NO_VARIABLES = "No variables found in expressions."
    NOTHING_TO_COMPARE = "Need at least 2 expressions to compare."

    @property
    def message(self) -> str:
        return self.value


# =====================================================================
# TABLA DE VERDAD
# =====================================================================


@dataclass(frozen=True)
class TableRow:
    """Una fila: la asignacion y el resultado de cada formula."""

    assignment: Assignment
    results: tuple[bool, ...]

    def cells(self, variables: Sequence[str]) -> tuple[bool, ...]:
        """Valores de la fila en orden de columnas (variables, luego formulas)."""
        return tuple(self.assignment[v] for v in variables) + self.results


@dataclass(frozen=True)
class TruthTable:
    """Tabla de verdad de una o mas formulas sobre sus variables combinadas.

    Invariante (status OK):
        len(rows) == 2 ** len(variables)
        cada fila tiene len(variables) + len(formulas) celdas
    """

    variables: tuple[str, ...]
    formulas: tuple[str, ...]
    rows: tuple[TableRow, ...] = ()
    status: TableStatus = TableStatus.OK
    # Etiquetas para mostrar (ej. el LaTeX original); por defecto las formulas
    headers: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.headers:
            object.__setattr__(self, "headers", self.formulas)

    @property
    def is_empty(self) -> bool:
        return self.status is not TableStatus.OK

    @property
    def column_count(self) -> int:
        return len(self.variables) + len(self.formulas)

    def column(self, formula_index: int) -> list[bool]:
        """Columna de resultados de una formula (indice desde 0)."""
        return [row.results[formula_index] for row in self.rows]

    def to_dict(self) -> dict:
        """Serializa a dict para export JSON."""
        return {
            "status": self.status.name,
            "variables": list(self.variables),
            "formulas": list(self.formulas),
            "rows": [
                {"inputs": dict(row.assignment), "results": list(row.results)}
                for row in self.rows
            ],
        }


def _tabulate(
    variables: Sequence[str],
    formulas: Sequence[str],
    headers: Sequence[str] = (),
) -> TruthTable:
    rows = tuple(
        TableRow(assignment, tuple(evaluate(formula, assignment) for formula in formulas))
        for assignment in generate_assignments(list(variables))
    )
    return TruthTable(
        variables=tuple(variables),
        formulas=tuple(formulas),
        rows=rows,
        headers=tuple(headers),
    )


def build_table(*formulas: str) -> TruthTable:
    """Genera la tabla de verdad de varias formulas nativas, lado a lado.

    Raises:
        InvalidExpression / EvaluationFailure: Si alguna formula es invalida.

    Ejemplo:
        table = build_table("A & B", "!A")
        table.variables  → ('A', 'B')
        table.rows[0]    → TableRow({'A': True, 'B': True}, (True, False))
    """
    if not formulas:
        return TruthTable((), (), status=TableStatus.NO_EXPRESSIONS)

    variables = collect_variables(formulas)
    if not variables:
        return TruthTable((), tuple(formulas), status=TableStatus.NO_VARIABLES)

    return _tabulate(variables, formulas)


def get_truth_table(formula: str) -> TruthTable:
    """Tabla de verdad de una sola formula nativa."""
    return build_table(formula)


def build_latex_table(*latex_formulas: str, strict: bool = False) -> TruthTable:
    """Tabla de verdad para formulas LaTeX, con el LaTeX como encabezado.

    Las formulas que son una variable sola (ej. "A", "B") no generan
    columna propia: fijan el orden de esas variables al principio,
    en el orden en que se pasaron. El resto de variables va despues,
    ordenado alfabeticamente.

    Ejemplo:
        build_latex_table("B", "A", r"A \\rightarrow B")
        → variables ('B', 'A'), una sola columna: A \\rightarrow B
    """
    if not latex_formulas:
        return TruthTable((), (), status=TableStatus.NO_EXPRESSIONS)

    evaluated = [from_latex(expr, strict=strict) for expr in latex_formulas]

    pinned: list[str] = []
    pinned_indexes: set[int] = set()
    for index, formula in enumerate(evaluated):
        match = SINGLE_VARIABLE_PATTERN.fullmatch(formula)
        if match:
            pinned_indexes.add(index)
            if match.group(1) not in pinned:
                pinned.append(match.group(1))

    remaining = [v for v in collect_variables(evaluated) if v not in pinned]
    variables = pinned + remaining

    kept = [i for i in range(len(evaluated)) if i not in pinned_indexes]
    formulas = tuple(evaluated[i] for i in kept)
    headers = tuple(latex_formulas[i].strip() for i in kept)

    if not variables:
        return TruthTable((), formulas, status=TableStatus.NO_VARIABLES, headers=headers)

    return _tabulate(variables, formulas, headers)


# =====================================================================
# VERIFICACION DE IGUALDAD
# =====================================================================


@dataclass(frozen=True)
class EqualityRow:
    """Una fila de la verificacion: el valor de cada paso."""

    assignment: Assignment
    results: tuple[bool, ...]

    @property
    def matches(self) -> bool:
        """True si todos los pasos valen lo mismo que el primero."""
        return all(result == self.results[0] for result in self.results)

    @property
    def mismatched_steps(self) -> list[int]:
        """Indices (desde 0) de los pasos que difieren del primero."""
        return [i for i, result in enumerate(self.results) if result != self.results[0]]


@dataclass(frozen=True)
class EqualityVerdict:
    """Veredicto de una derivacion: ¿todos los pasos son equivalentes?"""

    all_equal: bool
    steps: tuple[str, ...]
    mismatch_count: int = 0
    variables: tuple[str, ...] = ()
    rows: tuple[EqualityRow, ...] = ()
    status: TableStatus = TableStatus.OK

    def to_dict(self) -> dict:
        """Serializa a dict para export JSON."""
        return {
            "all_equal": self.all_equal,
            "steps": list(self.steps),
            "mismatch_count": self.mismatch_count,
        }


def compare_steps(steps: Sequence[str]) -> EqualityVerdict:
    """Compara pasos nativos fila por fila contra el primero.

    Menos de 2 pasos, o ninguna variable, da un veredicto vacio
    (all_equal=True) con el status correspondiente.
    """
    steps = tuple(steps)
    if len(steps) < 2:
        return EqualityVerdict(True, steps, status=TableStatus.NOTHING_TO_COMPARE)

    variables = collect_variables(steps)
    if not variables:
        return EqualityVerdict(True, steps, status=TableStatus.NO_VARIABLES)

    rows = tuple(
        EqualityRow(assignment, tuple(evaluate(step, assignment) for step in steps))
        for assignment in generate_assignments(variables)
    )
    mismatches = sum(1 for row in rows if not row.matches)

    return EqualityVerdict(
        all_equal=mismatches == 0,
        steps=steps,
        mismatch_count=mismatches,
        variables=tuple(variables),
        rows=rows,
    )


def verify_equality(latex_equation: str, strict: bool = False) -> EqualityVerdict:
    """Verifica que todos los pasos de una derivacion LaTeX sean equivalentes.

    Ejemplo:
        verify_equality(r"A \\rightarrow B &= \\neg A \\lor B")
        → EqualityVerdict(all_equal=True, steps=('!A | B', '!A | B'), mismatch_count=0, ...)
    """
    steps = parse_derivation(latex_equation, strict=strict)
    return compare_steps([step.formula for step in steps])
