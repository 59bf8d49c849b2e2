"""
errors.py - Excepciones del motor de tablas de verdad.

Todas heredan de ValueError, igual que los errores del parser:
quien ya atrapa ValueError sigue funcionando sin cambios.
"""

from __future__ import annotations


class TruthTabError(ValueError):
    """Base de todos los errores de truthtab."""


class InvalidExpression(TruthTabError):
    """Raised when a substituted formula contains a character outside the allow-list."""

    def __init__(self, formula: str, offending: str) -> None:
        self.formula = formula
        self.offending = offending
        super().__init__(
            f"Expresion invalida: {formula!r} (caracter no permitido: {offending!r})"
        )


class EvaluationFailure(TruthTabError):
    """Raised when allow-listed text is not a well-formed formula."""

    def __init__(self, formula: str, reason: str) -> None:
        self.formula = formula
        self.reason = reason
        super().__init__(f"No se pudo evaluar {formula!r}: {reason}")


class UnresolvableImplicationScope(TruthTabError):
    """Raised (strict mode only) when the left operand of an arrow cannot be found."""

    def __init__(self, context: str) -> None:
        self.context = context
        super().__init__(
            f"No se puede determinar el operando izquierdo de la implicacion en: {context!r}"
        )
