"""Tagged variants for the text/number dispatcher.

Por qué variantes explícitas:
- El contrato es cerrado (texto | número); `as_value` rechaza cualquier otro
  tipo al construir, no durante el procesamiento.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TextValue:
    text: str


@dataclass(frozen=True)
class NumberValue:
    number: int | float


Value = Union[TextValue, NumberValue]


def as_value(raw: object) -> Value:
    """Envuelve un `str` o número crudo en su variante.

    `bool` se rechaza aunque sea subclase de `int`.
    """

    if isinstance(raw, (TextValue, NumberValue)):
        return raw
    if isinstance(raw, str):
        return TextValue(raw)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NumberValue(raw)
    raise TypeError(f"Expected str or number, got {type(raw).__name__}")
