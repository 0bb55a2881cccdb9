"""Operaciones independientes del Core.

Cada módulo es una hoja: ninguna operación depende de otra ni comparte
estado. Este paquete solo las re-exporta como superficie pública.
"""

from core.services.calendar import get_day_type
from core.services.deferred import SQUARE_DELAY_SECONDS, square_async
from core.services.products import get_most_expensive_product
from core.services.ratings import MIN_RATING, filter_by_rating
from core.services.sequences import concatenate_arrays
from core.services.text import format_string
from core.services.values import process_value

__all__ = [
    "MIN_RATING",
    "SQUARE_DELAY_SECONDS",
    "concatenate_arrays",
    "filter_by_rating",
    "format_string",
    "get_day_type",
    "get_most_expensive_product",
    "process_value",
    "square_async",
]
