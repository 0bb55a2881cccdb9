"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que los tipos del dominio cumplen de forma
  estructural.
"""

from core.interfaces.describable import Describable

__all__ = ["Describable"]
