"""Contrato de objetos descriptibles.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- `Vehicle` y `Car` lo cumplen sin compartir una clase base.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    """Cualquier objeto capaz de producir su descripción en texto."""

    def get_info(self) -> str:
        """Devuelve la descripción formateada."""

        ...
