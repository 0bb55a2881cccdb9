"""Errores del Core.

Por qué una jerarquía propia:
- La CLI puede distinguir fallos de dominio de bugs reales.
- La ausencia de resultado (`None`, `[]`) nunca es un error: solo los casos
  de validación de dominio viven aquí.
"""

from __future__ import annotations

from pathlib import Path


class LeafkitError(Exception):
    """Base para todos los errores de leafkit."""


class NegativeNumberError(LeafkitError, ValueError):
    """El cálculo diferido recibió un número negativo."""

    MESSAGE = "Negative number not allowed"

    def __init__(self, value: float | None = None) -> None:
        super().__init__(self.MESSAGE)
        self.value = value


class InputFileError(LeafkitError):
    """Un archivo JSON de entrada no se pudo leer o validar."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
