"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables.
- El dominio no conoce CLI, archivos ni settings: solo conceptos del problema.
"""

from core.domain.calendar import Day, DayType
from core.domain.casing import CaseMode
from core.domain.models import Product, RatedItem
from core.domain.values import NumberValue, TextValue, Value, as_value
from core.domain.vehicles import Car, Vehicle

__all__ = [
    "Car",
    "CaseMode",
    "Day",
    "DayType",
    "NumberValue",
    "Product",
    "RatedItem",
    "TextValue",
    "Value",
    "Vehicle",
    "as_value",
]
