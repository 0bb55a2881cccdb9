"""Delayed squaring computation.

Each call sleeps on its own; there is no shared timer state between
concurrent invocations and no cancellation or retry logic.
"""

from __future__ import annotations

import asyncio

from core.errors import NegativeNumberError
from core.logging_setup import get_logger

SQUARE_DELAY_SECONDS = 1.0

logger = get_logger(__name__)


async def square_async(n: float, *, delay_seconds: float = SQUARE_DELAY_SECONDS) -> float:
    """Resolve with `n * n` after `delay_seconds`.

    Raises:
        NegativeNumberError: once the delay has elapsed, if `n` is negative.
    """

    logger.debug("Scheduling square of %s in %.3fs", n, delay_seconds)
    await asyncio.sleep(delay_seconds)
    if n < 0:
        logger.debug("Rejecting negative input %s", n)
        raise NegativeNumberError(n)
    return n * n
