"""
TruthTableConfig - Opciones de presentacion y de normalizacion.

¿Que hay aqui?
    Todo lo que cambia COMO se muestran los resultados, nunca QUE se
    calcula. El nucleo (truthtab/logic) no lee este config: el CLI y
    los renderers se lo pasan explicitamente.

¿Como se usa?
    config = TruthTableConfig()                          # defaults
    config = TruthTableConfig(style="markdown")          # override un valor
    config = TruthTableConfig.from_json("truthtab.json") # cargar de archivo
    config = TruthTableConfig.from_env()                 # variables TRUTHTAB_* / .env

Variables de entorno reconocidas:
    TRUTHTAB_STYLE              plain | colorized | markdown
    TRUTHTAB_TRUE_GLYPH         simbolo para verdadero (default "T")
    TRUTHTAB_FALSE_GLYPH        simbolo para falso (default "F")
    TRUTHTAB_STRICT_IMPLICATION 1/true para fallar si una flecha no tiene operando
    TRUTHTAB_MAX_VARIABLES      limite de variables por tabla
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, replace
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TRUTHTAB_"
TRUTHY = {"1", "true", "yes", "on"}


class RenderStyle(str, Enum):
    """Estilos de salida reconocidos."""

    PLAIN = "plain"
    COLORIZED = "colorized"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class TruthTableConfig:
    """Configuracion de presentacion.

    frozen=True: si quieres otra configuracion, crea otra instancia
    (o usa with_overrides()).
    """

    # Estilo de salida por defecto del CLI
    style: str = RenderStyle.COLORIZED.value

    # Simbolos para las tablas de texto y de consola
    true_glyph: str = "T"
    false_glyph: str = "F"

    # Si True, una flecha sin operando izquierdo es un error y no un '|'
    strict_implication: bool = False

    # Las tablas crecen como 2^n. Por encima de esto el CLI se niega.
    # 12 variables = 4096 filas.
    max_variables: int = 12

    @property
    def render_style(self) -> RenderStyle:
        return RenderStyle(self.style)

    def format_bool(self, value: bool) -> str:
        return self.true_glyph if value else self.false_glyph

    def with_overrides(self, **changes) -> TruthTableConfig:
        """Copia del config con los campos no-None reemplazados."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_json(self, path: str) -> None:
        """Guarda el config como JSON."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, path: str) -> TruthTableConfig:
        """Carga un config desde un archivo JSON.

        Uso:
            config = TruthTableConfig.from_json("truthtab.json")
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> TruthTableConfig:
        """Carga overrides desde variables de entorno (y .env si existe).

        Las variables ya definidas en el entorno tienen prioridad sobre .env.
        """
        load_dotenv(env_file)

        changes: dict[str, object] = {}
        if f"{ENV_PREFIX}STYLE" in os.environ:
            changes["style"] = os.environ[f"{ENV_PREFIX}STYLE"].strip().lower()
        if f"{ENV_PREFIX}TRUE_GLYPH" in os.environ:
            changes["true_glyph"] = os.environ[f"{ENV_PREFIX}TRUE_GLYPH"]
        if f"{ENV_PREFIX}FALSE_GLYPH" in os.environ:
            changes["false_glyph"] = os.environ[f"{ENV_PREFIX}FALSE_GLYPH"]
        if f"{ENV_PREFIX}STRICT_IMPLICATION" in os.environ:
            value = os.environ[f"{ENV_PREFIX}STRICT_IMPLICATION"].strip().lower()
            changes["strict_implication"] = value in TRUTHY
        if f"{ENV_PREFIX}MAX_VARIABLES" in os.environ:
            raw = os.environ[f"{ENV_PREFIX}MAX_VARIABLES"]
            try:
                changes["max_variables"] = int(raw)
            except ValueError as e:
                raise ValueError(f"{ENV_PREFIX}MAX_VARIABLES debe ser entero, recibi {raw!r}") from e

        return cls(**changes)

    def __post_init__(self) -> None:
        """Validaciones que se ejecutan al crear el config."""
        valid_styles = [s.value for s in RenderStyle]
        if self.style not in valid_styles:
            raise ValueError(f"style debe ser uno de {valid_styles}, recibi {self.style!r}")

        if not self.true_glyph or not self.false_glyph:
            raise ValueError("true_glyph y false_glyph no pueden estar vacios")

        if self.true_glyph == self.false_glyph:
            raise ValueError(
                f"true_glyph y false_glyph deben ser distintos, ambos son {self.true_glyph!r}"
            )

        if self.max_variables < 1:
            raise ValueError(f"max_variables debe ser positivo, recibi {self.max_variables}")
