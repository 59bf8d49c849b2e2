"""
steps.py - Division de derivaciones LaTeX en pasos.

Una derivacion tipica se ve asi:

    (A \\lor B) \\land (A \\lor \\neg B)
        &= A \\lor (B \\land \\neg B) &\\text{(Distributive)} \\\\
        &= A \\lor \\bot              &\\text{(Contradiction)} \\\\
        &= A                         &\\text{(Identity)} \\\\

Flujo:
    1. Limpiar: quitar \\text{...}, \\\\, $, & y lineas vacias
    2. Dividir por '=' de nivel superior (fuera de parentesis y llaves)
    3. Normalizar cada paso con from_latex()

Resultado: ['(A | B) & (A | !B)', 'A | (B & !B)', 'A | 0', 'A']
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from truthtab.logic.latex import normalize_with_diagnostics

# Anotaciones de texto libre: \text{...}, \textrm{...}, \textbf{...}, \textit{...}
ANNOTATION_PATTERN = re.compile(r"\\text(?:rm|bf|it)?\s*\{[^}]*\}")
ENVIRONMENT_PATTERN = re.compile(r"\\(?:begin|end)\s*\{[A-Za-z*]+\}")
LINE_BREAK_PATTERN = re.compile(r"\\\\")
# \left( y \right) solo cambian el tamano; \right no debe tocar \rightarrow
SIZING_PATTERN = re.compile(r"\\(?:left|right|bigl|bigr|Bigl|Bigr|big|Big)(?![A-Za-z])")
SPACING_PATTERN = re.compile(r"\\(?:qquad|quad)(?![A-Za-z])|\\[,;:]")


@dataclass(frozen=True)
class DerivationStep:
    """Un paso de una derivacion.

    Attributes:
        index: Posicion del paso en la derivacion (empieza en 1).
        formula: Formula normalizada a notacion nativa.
        source: Texto LaTeX original del paso.
        diagnostics: Flechas cuyo operando no se pudo determinar.
    """

    index: int
    formula: str
    source: str
    diagnostics: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return f"S{self.index}"


def clean_latex_equation(text: str) -> str:
    """Quita los artefactos de presentacion de una ecuacion LaTeX.

    Ejemplo:
        clean_latex_equation("A &= B &\\text{(Def)} \\\\")  → "A = B"
    """
    result = ANNOTATION_PATTERN.sub("", text)
    result = ENVIRONMENT_PATTERN.sub("", result)
    result = LINE_BREAK_PATTERN.sub("", result)
    result = SIZING_PATTERN.sub("", result)
    result = SPACING_PATTERN.sub(" ", result)
    result = result.replace("$", "")
    result = result.replace("&", "")

    lines = (line.strip() for line in result.split("\n"))
    return "\n".join(line for line in lines if line)


def split_top_level(text: str, separator: str = "=") -> list[str]:
    """Divide por separator solo fuera de parentesis y llaves."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []

    for char in text:
        if char in "({":
            depth += 1
        elif char in ")}":
            depth = max(depth - 1, 0)

        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)

    parts.append("".join(current))
    return parts


def parse_derivation(text: str, strict: bool = False) -> list[DerivationStep]:
    """Convierte una derivacion LaTeX en la lista ordenada de sus pasos."""
    cleaned = clean_latex_equation(text)
    segments = [part.strip() for part in split_top_level(cleaned)]

    steps: list[DerivationStep] = []
    for source in (segment for segment in segments if segment):
        formula, diagnostics = normalize_with_diagnostics(source, strict=strict)
        steps.append(
            DerivationStep(
                index=len(steps) + 1,
                formula=formula,
                source=" ".join(source.split()),
                diagnostics=tuple(diagnostics),
            )
        )
    return steps


def split_steps(text: str, strict: bool = False) -> list[str]:
    """Pasos de una derivacion como formulas nativas, en orden.

    Ejemplo:
        split_steps("\\neg(A \\lor B) &= \\neg A \\land \\neg B \\\\")
        → ['!(A | B)', '!A & !B']
    """
    return [step.formula for step in parse_derivation(text, strict=strict)]
