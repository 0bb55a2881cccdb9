"""Rating filter."""

from __future__ import annotations

from typing import Iterable

from core.domain.models import RatedItem

MIN_RATING = 4


def filter_by_rating(items: Iterable[RatedItem]) -> list[RatedItem]:
    """Keep the items rated `MIN_RATING` or higher, in their original order."""

    return [item for item in items if item.rating >= MIN_RATING]
