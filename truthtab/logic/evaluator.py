"""
evaluator.py - Evaluador de formulas en notacion nativa.

Notacion nativa (la que produce el normalizador LaTeX):
    !   negacion
    &   conjuncion
    |   disyuncion
    ==  bicondicional (tambien se acepta = y ===)
    !=  bicondicional negado / XOR (tambien !==)
    0 1 constantes
    ( ) agrupacion
    A-Z variables (se sustituyen por 0/1 antes de parsear)

Flujo:
    1. Sustituir: "A & !B" con {A: True, B: False}  →  "1 & !0"
    2. Lista blanca: solo 0 1 & | ! = ( ) y espacios, si no → InvalidExpression
    3. Tokenizar: "1 & !0"  →  [CONST(1), AND, NOT, CONST(0)]
    4. Parsear: tokens → AST (si esta mal formada → EvaluationFailure)
    5. Evaluar: AST → True/False

Gramatica (BNF):
    formula       ::= biconditional
    biconditional ::= disjunction (('==' | '!=') disjunction)*
    disjunction   ::= conjunction ('|' conjunction)*
    conjunction   ::= unary ('&' unary)*
    unary         ::= '!' unary | '0' | '1' | '(' formula ')'

Precedencia de operadores (de menor a mayor):
    1. == !=  (bicondicional)
    2. |      (disyuncion)
    3. &      (conjuncion)
    4. !      (negacion)

Todos los binarios son asociativos por la izquierda.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from truthtab.logic.errors import EvaluationFailure, InvalidExpression
from truthtab.logic.symbols import Assignment, extract_variables

# Cualquier caracter fuera de esta lista invalida la formula ya sustituida.
DISALLOWED_PATTERN = re.compile(r"[^01&|!=()\s]")


# =====================================================================
# TOKENIZER
# =====================================================================


class TokenType(Enum):
    """Tipos de token en una formula nativa."""

    CONST = auto()      # 0 o 1
    NOT = auto()        # !
    AND = auto()        # &
    OR = auto()         # |
    EQUIV = auto()      # =, ==, ===
    XOR = auto()        # !=, !==
    LPAREN = auto()     # (
    RPAREN = auto()     # )
    EOF = auto()        # Fin de la formula


@dataclass
class Token:
    """Un token individual de una formula."""

    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "&": TokenType.AND,
    "|": TokenType.OR,
    "0": TokenType.CONST,
    "1": TokenType.CONST,
}


def _equals_run(text: str, start: int) -> int:
    """Largo de la racha de '=' que empieza en start."""
    end = start
    while end < len(text) and text[end] == "=":
        end += 1
    return end - start


def tokenize(formula: str) -> list[Token]:
    """Convierte una formula ya sustituida en una lista de tokens.

    Raises:
        EvaluationFailure: Si encuentra un caracter u operador no reconocido.
    """
    tokens: list[Token] = []
    i = 0

    while i < len(formula):
        char = formula[i]

        if char.isspace():
            i += 1
            continue

        if char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[char], char))
            i += 1
            continue

        # '!' seguido de '=' es siempre XOR, nunca una negacion
        if char == "!":
            run = _equals_run(formula, i + 1)
            if run == 0:
                tokens.append(Token(TokenType.NOT, "!"))
                i += 1
                continue
            if run > 2:
                raise EvaluationFailure(formula, f"operador desconocido en posicion {i}")
            tokens.append(Token(TokenType.XOR, formula[i : i + 1 + run]))
            i += 1 + run
            continue

        if char == "=":
            run = _equals_run(formula, i)
            if run > 3:
                raise EvaluationFailure(formula, f"operador desconocido en posicion {i}")
            tokens.append(Token(TokenType.EQUIV, formula[i : i + run]))
            i += run
            continue

        raise EvaluationFailure(formula, f"caracter no reconocido en posicion {i}: {char!r}")

    tokens.append(Token(TokenType.EOF, ""))
    return tokens


# =====================================================================
# AST
# =====================================================================


class ASTNode:
    """Nodo base del arbol de sintaxis abstracta."""

    pass


@dataclass
class ConstNode(ASTNode):
    """Constante booleana (hoja del arbol)."""

    value: bool

    def __repr__(self) -> str:
        return "1" if self.value else "0"


@dataclass
class NotNode(ASTNode):
    """Negacion: !φ"""

    operand: ASTNode

    def __repr__(self) -> str:
        return f"!({self.operand})"


@dataclass
class BinaryNode(ASTNode):
    """Operacion binaria: φ ○ ψ"""

    operator: TokenType
    left: ASTNode
    right: ASTNode

    def __repr__(self) -> str:
        op_symbols = {
            TokenType.AND: "&",
            TokenType.OR: "|",
            TokenType.EQUIV: "==",
            TokenType.XOR: "!=",
        }
        op = op_symbols.get(self.operator, "?")
        return f"({self.left} {op} {self.right})"


# =====================================================================
# PARSER: tokens → AST
# =====================================================================


class FormulaParser:
    """Parser de recursive descent para formulas nativas ya sustituidas.

    Ejemplo:
        ast = FormulaParser("1 | !0 & 1").parse()
        # ast = BinaryNode(OR, Const(1), BinaryNode(AND, Not(Const(0)), Const(1)))
    """

    def __init__(self, formula: str) -> None:
        self.formula = formula
        self.tokens = tokenize(formula)
        self.pos = 0

    def parse(self) -> ASTNode:
        """Parsea la formula completa y retorna el AST.

        Raises:
            EvaluationFailure: Si la formula tiene errores de sintaxis.
        """
        if self._current().type == TokenType.EOF:
            raise EvaluationFailure(self.formula, "formula vacia")

        ast = self._biconditional()

        if self._current().type != TokenType.EOF:
            raise EvaluationFailure(
                self.formula,
                f"token inesperado '{self._current().value}' en posicion {self.pos}",
            )

        return ast

    def _current(self) -> Token:
        """Token actual sin avanzar."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return Token(TokenType.EOF, "")

    def _advance(self) -> Token:
        """Consume y retorna el token actual."""
        token = self._current()
        self.pos += 1
        return token

    def _expect(self, token_type: TokenType) -> Token:
        """Consume un token del tipo esperado o lanza error."""
        token = self._current()
        if token.type != token_type:
            raise EvaluationFailure(
                self.formula,
                f"se esperaba {token_type.name}, se encontro "
                f"{token.type.name} ('{token.value}') en posicion {self.pos}",
            )
        return self._advance()

    # --- Niveles de precedencia (de menor a mayor) ---

    def _biconditional(self) -> ASTNode:
        """biconditional ::= disjunction (('==' | '!=') disjunction)*"""
        left = self._disjunction()
        while self._current().type in (TokenType.EQUIV, TokenType.XOR):
            operator = self._advance().type
            right = self._disjunction()
            left = BinaryNode(operator, left, right)
        return left

    def _disjunction(self) -> ASTNode:
        """disjunction ::= conjunction ('|' conjunction)*"""
        left = self._conjunction()
        while self._current().type == TokenType.OR:
            self._advance()
            right = self._conjunction()
            left = BinaryNode(TokenType.OR, left, right)
        return left

    def _conjunction(self) -> ASTNode:
        """conjunction ::= unary ('&' unary)*"""
        left = self._unary()
        while self._current().type == TokenType.AND:
            self._advance()
            right = self._unary()
            left = BinaryNode(TokenType.AND, left, right)
        return left

    def _unary(self) -> ASTNode:
        """unary ::= '!' unary | '0' | '1' | '(' formula ')'"""
        if self._current().type == TokenType.NOT:
            self._advance()
            return NotNode(self._unary())

        if self._current().type == TokenType.LPAREN:
            self._advance()
            node = self._biconditional()
            self._expect(TokenType.RPAREN)
            return node

        if self._current().type == TokenType.CONST:
            token = self._advance()
            return ConstNode(token.value == "1")

        raise EvaluationFailure(
            self.formula,
            f"se esperaba constante, '!' o '(' pero se encontro "
            f"{self._current().type.name} ('{self._current().value}') en posicion {self.pos}",
        )


# =====================================================================
# EVALUADOR
# =====================================================================


def evaluate_node(node: ASTNode) -> bool:
    """Evalua un AST cuyas hojas ya son constantes."""
    if isinstance(node, ConstNode):
        return node.value

    if isinstance(node, NotNode):
        return not evaluate_node(node.operand)

    if isinstance(node, BinaryNode):
        left = evaluate_node(node.left)
        right = evaluate_node(node.right)

        if node.operator == TokenType.AND:
            return left and right
        elif node.operator == TokenType.OR:
            return left or right
        elif node.operator == TokenType.EQUIV:
            return left == right
        elif node.operator == TokenType.XOR:
            return left != right

    raise EvaluationFailure(repr(node), f"nodo desconocido: {type(node).__name__}")


def substitute(formula: str, assignment: Assignment) -> str:
    """Reemplaza cada variable asignada por 1 o 0 (sustitucion textual)."""
    result = formula
    for variable, value in assignment.items():
        result = result.replace(variable, "1" if value else "0")
    return result


def compile_formula(formula: str) -> ASTNode:
    """Valida contra la lista blanca y parsea una formula ya sustituida.

    Raises:
        InvalidExpression: Si hay caracteres fuera de la lista blanca.
        EvaluationFailure: Si la formula esta mal formada.
    """
    disallowed = DISALLOWED_PATTERN.search(formula)
    if disallowed:
        raise InvalidExpression(formula, disallowed.group())
    return FormulaParser(formula).parse()


def evaluate(formula: str, assignment: Assignment) -> bool:
    """Evalua una formula con una asignacion de valores.

    Args:
        formula: Formula en notacion nativa. Ej: "A | !B & C"
        assignment: Dict de variable → valor. Ej: {'A': False, 'B': False, 'C': True}

    Returns:
        Valor de verdad de la formula con esa asignacion.

    Raises:
        InvalidExpression: Si tras sustituir quedan caracteres no permitidos
            (incluye variables sin valor asignado).
        EvaluationFailure: Si la formula esta mal formada.

    Ejemplo:
        evaluate("A & B", {'A': True, 'B': True})   → True
        evaluate("A & B", {'A': True, 'B': False})  → False
    """
    substituted = substitute(formula, assignment)
    disallowed = DISALLOWED_PATTERN.search(substituted)
    if disallowed:
        raise InvalidExpression(formula, disallowed.group())

    try:
        ast = FormulaParser(substituted).parse()
    except EvaluationFailure as e:
        raise EvaluationFailure(formula, e.reason) from e

    return evaluate_node(ast)


def is_valid_formula(formula: str) -> tuple[bool, str]:
    """Verifica si una formula nativa es sintacticamente valida.

    Returns:
        Tupla de (es_valida, mensaje_de_error). Si es valida, mensaje es "OK".

    Ejemplo:
        is_valid_formula("A & B")     → (True, "OK")
        is_valid_formula("A & (B")    → (False, "No se pudo evaluar ...")
        is_valid_formula("")          → (False, "Formula vacia")
    """
    if not formula.strip():
        return False, "Formula vacia"

    try:
        evaluate(formula, {variable: True for variable in extract_variables(formula)})
        return True, "OK"
    except (InvalidExpression, EvaluationFailure) as e:
        return False, str(e)
