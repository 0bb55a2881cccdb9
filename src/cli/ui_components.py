"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import Product, RatedItem
from core.domain.vehicles import Car, Vehicle


def build_ratings_table(items: Sequence[RatedItem]) -> Table:
    """Tabla Rich con los elementos que superan el filtro."""

    table = Table(title="Rated Items")
    table.add_column("Title", style="cyan")
    table.add_column("Rating", style="green", justify="right")
    for item in items:
        table.add_row(item.title, f"{item.rating:g}")
    return table


def build_product_panel(product: Product) -> Panel:
    body = Text()
    body.append(product.name, style="bold")
    body.append(f"\nPrice: {product.price:g}")
    return Panel(body, title=Text("Most expensive", style="bold yellow"), border_style="yellow")


def build_vehicle_panel(vehicle: Vehicle | Car) -> Panel:
    """Panel con la descripción del vehículo (y el modelo si es un `Car`)."""

    body = Text(vehicle.get_info())
    if isinstance(vehicle, Car):
        body.append("\n" + vehicle.get_model())
    return Panel(body, border_style="cyan")


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="leafkit settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))
    return table
