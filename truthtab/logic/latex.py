"""
latex.py - Normalizador de notacion LaTeX a notacion nativa.

Convierte formulas escritas con macros de LaTeX en formulas que el
evaluador entiende. El orden de los pasos importa: cada paso asume
que los anteriores ya se resolvieron.

    1. Complemento:    \\overline{A}          →  !A
                       \\overline{A \\lor B}   →  !(A \\lor B)
    2. Constantes:     \\bot → 0, \\top → 1
    3. Conectores:     \\lor → |, \\land → &, \\neg / \\lnot → !
    4. Bicondicional:  \\leftrightarrow, \\iff → ==
    5. Implicacion:    L \\rightarrow R       →  !L | R
    6. Espacios canonicos.

Tambien acepta los conectores Unicode (∧, ∨, ¬, →, ↔) y ASCII
(->, <->, ~) que usa el resto del proyecto.

Implicacion (el paso dificil):
    No hay AST aqui; la implicacion se elimina sobre una LISTA DE TOKENS.
    Para cada flecha (la primera que quede) se busca hacia atras su
    operando izquierdo:
        - si antes hay ')', se camina hacia atras contando profundidad
          hasta el '(' que la abre;
        - si antes hay un atomo (A-Z, 0, 1), el operando es ese atomo;
        - en ambos casos se absorben los '!' que lo preceden.
    Si no se encuentra operando, la flecha se degrada a '|' y se deja
    un diagnostico (o se lanza UnresolvableImplicationScope en modo strict).

    Ejemplo de encadenamiento (asociativo por la derecha):
        A → B → C  →  !A | B → C  →  !A | !B | C
"""

from __future__ import annotations

import logging
import re

from truthtab.logic.errors import UnresolvableImplicationScope

logger = logging.getLogger(__name__)

# Marcador interno de implicacion dentro de la lista de tokens.
IMPLIES = "->"

IMPLICATION_MACROS = {"rightarrow", "to", "implies", "Rightarrow", "longrightarrow"}

# Simbolos de flecha que no son macros. Los mas largos primero.
ARROW_SYMBOLS: list[tuple[str, str]] = [
    ("<->", "=="),
    ("<=>", "=="),
    ("->", IMPLIES),
    ("=>", IMPLIES),
    ("→", IMPLIES),
    ("⇒", IMPLIES),
]

BINARY_TOKENS = {"&", "|", "==", "!="}

ATOM_PATTERN = re.compile(r"[A-Z01]")
NEGATED_ATOM_PATTERN = re.compile(r"!*[A-Z01]")
SINGLE_VARIABLE_PATTERN = re.compile(r"[A-Z]")
MACRO_PATTERN = re.compile(r"\\[A-Za-z]+")
WORD_PATTERN = re.compile(r"[a-z]+")
OVERLINE_PATTERN = re.compile(r"\\overline\s*\{")

# Pasos 2-4, en orden. (?![A-Za-z]) evita que \to coincida dentro de \top.
REWRITES: list[tuple[re.Pattern[str], str]] = [
    # 2. Constantes
    (re.compile(r"\\bot(?![A-Za-z])|⊥"), "0"),
    (re.compile(r"\\top(?![A-Za-z])|⊤"), "1"),
    # 3. Conectores simples; la negacion se pega a su operando
    (re.compile(r"\\(?:lor|vee)(?![A-Za-z])|∨"), " | "),
    (re.compile(r"\\(?:land|wedge)(?![A-Za-z])|∧"), " & "),
    (re.compile(r"(?:\\(?:lnot|neg|sim)(?![A-Za-z])|[¬~])\s*"), "!"),
    # 4. Bicondicional
    (re.compile(r"\\(?:leftrightarrow|Leftrightarrow|iff|equiv)(?![A-Za-z])|[↔⇔]"), " == "),
]


# =====================================================================
# PASO 1: COMPLEMENTO (\overline{...})
# =====================================================================


def _matching_brace(text: str, open_index: int) -> int | None:
    """Indice de la '}' que cierra la '{' en open_index, o None si no cierra."""
    depth = 0
    for index in range(open_index, len(text)):
        if text[index] == "{":
            depth += 1
        elif text[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def replace_overlines(text: str) -> str:
    """Reemplaza cada \\overline{X} por !X (variable sola) o !(X).

    Soporta llaves anidadas y overlines anidados:
        \\overline{\\overline{A} \\lor B}  →  !(!A \\lor B)
    """
    pieces: list[str] = []
    position = 0

    while True:
        match = OVERLINE_PATTERN.search(text, position)
        if match is None:
            pieces.append(text[position:])
            break

        open_index = match.end() - 1
        close_index = _matching_brace(text, open_index)
        if close_index is None:
            # Llave sin cerrar: se deja el resto intacto para que el evaluador lo rechace
            pieces.append(text[position:])
            break

        pieces.append(text[position : match.start()])
        content = replace_overlines(text[open_index + 1 : close_index]).strip()
        if SINGLE_VARIABLE_PATTERN.fullmatch(content):
            pieces.append(f"!{content}")
        else:
            pieces.append(f"!({content})")
        position = close_index + 1

    return "".join(pieces)


# =====================================================================
# LEXER: texto → tokens
# =====================================================================


def lex(text: str) -> list[str]:
    """Divide el texto (ya sin macros simples) en tokens.

    Los tokens desconocidos (macros no soportadas, palabras, digitos
    distintos de 0/1) se conservan tal cual: el evaluador los rechazara.

    Ejemplo:
        lex("!(A | B) \\rightarrow C")  → ['!', '(', 'A', '|', 'B', ')', '->', 'C']
    """
    tokens: list[str] = []
    i = 0

    while i < len(text):
        char = text[i]

        if char.isspace():
            i += 1
            continue

        if char == "\\":
            match = MACRO_PATTERN.match(text, i)
            if match:
                name = match.group()[1:]
                tokens.append(IMPLIES if name in IMPLICATION_MACROS else match.group())
                i = match.end()
            else:
                tokens.append(text[i : i + 2])
                i += 2
            continue

        arrow = next(((s, t) for s, t in ARROW_SYMBOLS if text.startswith(s, i)), None)
        if arrow:
            tokens.append(arrow[1])
            i += len(arrow[0])
            continue

        if char == "!" and text.startswith("=", i + 1):
            end = i + 1
            while end < len(text) and text[end] == "=":
                end += 1
            tokens.append("!=")
            i = end
            continue

        if char == "=":
            while i < len(text) and text[i] == "=":
                i += 1
            tokens.append("==")
            continue

        word = WORD_PATTERN.match(text, i)
        if word:
            tokens.append(word.group())
            i = word.end()
            continue

        tokens.append(char)
        i += 1

    return tokens


def render_tokens(tokens: list[str]) -> str:
    """Une tokens en texto canonico: operadores binarios con un espacio a cada lado."""
    pieces: list[str] = []
    for token in tokens:
        if token in BINARY_TOKENS:
            pieces.append(f" {token} ")
        elif token == IMPLIES:
            pieces.append(f" {IMPLIES} ")
        elif token.startswith("\\") or WORD_PATTERN.fullmatch(token):
            pieces.append(f" {token} ")
        else:
            pieces.append(token)
    return re.sub(r"\s+", " ", "".join(pieces)).strip()


# =====================================================================
# PASO 5: ELIMINACION DE IMPLICACIONES
# =====================================================================


def match_open_paren(tokens: list[str], close_index: int) -> int | None:
    """Camina hacia atras desde una ')' hasta el '(' que la abre.

    Returns:
        Indice del '(' correspondiente, o None si no esta balanceado.

    Ejemplo:
        match_open_paren(['(', '(', 'A', ')', ')'], 4)  → 0
    """
    depth = 0
    for index in range(close_index, -1, -1):
        if tokens[index] == ")":
            depth += 1
        elif tokens[index] == "(":
            depth -= 1
            if depth == 0:
                return index
    return None


def absorb_negations(tokens: list[str], start: int) -> int:
    """Extiende start hacia atras sobre los '!' que preceden al operando."""
    while start > 0 and tokens[start - 1] == "!":
        start -= 1
    return start


def find_left_operand(tokens: list[str], arrow_index: int) -> int | None:
    """Indice donde empieza el operando izquierdo de la flecha, o None.

    Ejemplo:
        tokens = ['!', '(', 'A', ')', '->', 'B']
        find_left_operand(tokens, 4)  → 0
    """
    end = arrow_index - 1
    if end < 0:
        return None

    if tokens[end] == ")":
        start = match_open_paren(tokens, end)
    elif ATOM_PATTERN.fullmatch(tokens[end]):
        start = end
    else:
        return None

    if start is None:
        return None
    return absorb_negations(tokens, start)


def eliminate_implications(
    tokens: list[str],
    strict: bool = False,
    diagnostics: list[str] | None = None,
) -> list[str]:
    """Reescribe cada L → R como !L | R, de izquierda a derecha.

    Despues de cada reescritura se vuelve a buscar la PRIMERA flecha
    sobre los tokens actuales, asi el alcance siempre se calcula sobre
    el estado vigente del texto.

    Args:
        tokens: Tokens producidos por lex().
        strict: Si True, un operando indeterminable lanza excepcion.
        diagnostics: Lista donde se anotan las flechas degradadas a '|'.

    Raises:
        UnresolvableImplicationScope: Solo en modo strict.
    """
    tokens = list(tokens)

    while IMPLIES in tokens:
        arrow_index = tokens.index(IMPLIES)
        start = find_left_operand(tokens, arrow_index)

        if start is None:
            context = render_tokens(tokens[max(0, arrow_index - 6) : arrow_index + 4])
            if strict:
                raise UnresolvableImplicationScope(context)
            logger.warning("Cannot parse left operand for implication at: %s", context)
            if diagnostics is not None:
                diagnostics.append(context)
            tokens[arrow_index] = "|"
            continue

        left = tokens[start:arrow_index]
        if not (left[0] == "(" or NEGATED_ATOM_PATTERN.fullmatch("".join(left))):
            left = ["(", *left, ")"]

        tokens = tokens[:start] + ["!", *left, "|"] + tokens[arrow_index + 1 :]

    return tokens


# =====================================================================
# API PUBLICA
# =====================================================================


def normalize_with_diagnostics(text: str, strict: bool = False) -> tuple[str, list[str]]:
    """Igual que from_latex(), pero ademas retorna los diagnosticos.

    Cada diagnostico es el fragmento de texto alrededor de una flecha
    cuyo operando izquierdo no se pudo determinar. Si la lista no esta
    vacia, la formula resultante es sospechosa.
    """
    result = replace_overlines(text)
    for pattern, replacement in REWRITES:
        result = pattern.sub(replacement, result)

    diagnostics: list[str] = []
    tokens = eliminate_implications(lex(result), strict=strict, diagnostics=diagnostics)
    return render_tokens(tokens), diagnostics


def from_latex(text: str, strict: bool = False) -> str:
    """Convierte una formula LaTeX a notacion nativa.

    Ejemplo:
        from_latex("A \\lor B")                   → "A | B"
        from_latex("A \\rightarrow B")            → "!A | B"
        from_latex("(A \\lor B) \\rightarrow C")  → "!(A | B) | C"
        from_latex("\\overline{A \\land B}")      → "!(A & B)"
    """
    formula, _ = normalize_with_diagnostics(text, strict=strict)
    return formula


normalize = from_latex
