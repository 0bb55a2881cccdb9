"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde cuando los datos llegan desde JSON (CLI/adaptadores).
- Modelos congelados: nada se muta después de construirse.

Nota:
- Son formas de valor efímeras; no tienen identidad más allá de una llamada.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RatedItem(BaseModel):
    """Elemento con título y puntuación."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(
        ...,
        description="Título del elemento.",
    )
    rating: float = Field(
        ...,
        description="Puntuación comparable (sin rango impuesto).",
    )


class Product(BaseModel):
    """Producto con nombre y precio.

    Solo se compara por `price`; el orden de llegada resuelve empates.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        ...,
        description="Nombre del producto.",
    )
    price: float = Field(
        ...,
        description="Precio del producto.",
    )
