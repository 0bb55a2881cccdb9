"""Text/number dispatcher."""

from __future__ import annotations

from core.domain.values import TextValue, Value, as_value


def process_value(value: Value | str | int | float) -> int | float:
    """Return the length of text, or twice a number.

    Raw inputs are wrapped with `as_value`, so anything other than text or a
    number raises `TypeError`.
    """

    variant = as_value(value)
    if isinstance(variant, TextValue):
        return len(variant.text)
    return variant.number * 2
