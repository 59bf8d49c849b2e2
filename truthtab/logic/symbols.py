"""
symbols.py - Extraccion de variables y enumeracion de asignaciones.

Una variable es UNA letra mayuscula (A-Z). No hay identificadores
de varios caracteres: "AB" son dos variables, A y B.

Flujo:
    1. extract_variables("A & B | A")  →  ['A', 'B']
    2. generate_assignments(['A', 'B']) →
           [{'A': True,  'B': True},
            {'A': True,  'B': False},
            {'A': False, 'B': True},
            {'A': False, 'B': False}]

El orden de las filas es el convencional en libros de logica:
todo verdadero primero, todo falso al final, y la variable de mas
a la derecha cambia mas rapido.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Tipo de una fila de la tabla: variable → valor de verdad.
Assignment = dict[str, bool]

VARIABLE_PATTERN = re.compile(r"[A-Z]")


def extract_variables(formula: str) -> list[str]:
    """Extrae las variables distintas de una formula, ordenadas.

    Ejemplo:
        extract_variables("B & A & B & C & A")  → ['A', 'B', 'C']
        extract_variables("1 & 0")              → []
    """
    return sorted(set(VARIABLE_PATTERN.findall(formula)))


def collect_variables(formulas: Iterable[str]) -> list[str]:
    """Union ordenada de las variables de varias formulas."""
    found: set[str] = set()
    for formula in formulas:
        found.update(extract_variables(formula))
    return sorted(found)


def generate_assignments(variables: list[str]) -> list[Assignment]:
    """Genera las 2^n asignaciones de verdad para las variables dadas.

    La fila i (contando desde 2^n - 1 hacia 0) asigna True a la
    variable en la posicion j si el bit (n - 1 - j) de i esta encendido.

    Args:
        variables: Lista ordenada de variables distintas.

    Returns:
        Lista de asignaciones, materializada completa (2^n elementos).
        Con cero variables retorna una sola asignacion vacia.

    Ejemplo:
        generate_assignments(['A'])  → [{'A': True}, {'A': False}]
    """
    count = len(variables)
    assignments: list[Assignment] = []

    for i in range((1 << count) - 1, -1, -1):
        assignments.append(
            {variable: bool((i >> (count - 1 - j)) & 1) for j, variable in enumerate(variables)}
        )

    return assignments
