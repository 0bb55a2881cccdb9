"""Maximum-price selection."""

from __future__ import annotations

from typing import Sequence

from core.domain.models import Product


def get_most_expensive_product(products: Sequence[Product]) -> Product | None:
    """Return the product with the highest price, or `None` when empty.

    The current maximum is only replaced on a strictly greater price, so the
    first product among ties wins.
    """

    if not products:
        return None

    most_expensive = products[0]
    for product in products:
        if product.price > most_expensive.price:
            most_expensive = product
    return most_expensive
