"""Adaptadores de I/O (archivos JSON) para la CLI."""

from adapters.json_exporter import export_json
from adapters.json_loader import load_products, load_rated_items

__all__ = ["export_json", "load_products", "load_rated_items"]
