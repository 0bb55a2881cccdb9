"""Sequence concatenation."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, TypeVar

T = TypeVar("T")


def concatenate_arrays(*sequences: Iterable[T]) -> list[T]:
    """Flatten the sequences one level, in argument order.

    Always returns a new list; no input is modified.
    """

    return list(chain.from_iterable(sequences))
