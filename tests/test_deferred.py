"""
Tests for the delayed squaring coroutine.
"""

import asyncio
import time

import pytest

from core.errors import NegativeNumberError
from core.services.deferred import SQUARE_DELAY_SECONDS, square_async


class TestSquareAsync:
    """Test delayed resolution and rejection."""

    @pytest.mark.asyncio
    async def test_resolves_square(self):
        assert await square_async(4, delay_seconds=0.01) == 16

    @pytest.mark.asyncio
    async def test_zero(self):
        assert await square_async(0, delay_seconds=0) == 0

    @pytest.mark.asyncio
    async def test_negative_rejected(self):
        with pytest.raises(NegativeNumberError, match="Negative number not allowed"):
            await square_async(-1, delay_seconds=0.01)

    @pytest.mark.asyncio
    async def test_negative_is_value_error(self):
        with pytest.raises(ValueError):
            await square_async(-2.5, delay_seconds=0)

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self):
        results = await asyncio.gather(
            square_async(2, delay_seconds=0.05),
            square_async(-3, delay_seconds=0.01),
            square_async(3, delay_seconds=0.02),
            return_exceptions=True,
        )

        assert results[0] == 4
        assert isinstance(results[1], NegativeNumberError)
        assert results[2] == 9

    @pytest.mark.asyncio
    async def test_concurrent_delays_overlap(self):
        start = time.monotonic()
        await asyncio.gather(*(square_async(n, delay_seconds=0.2) for n in range(5)))

        assert time.monotonic() - start < 0.9

    @pytest.mark.asyncio
    async def test_exact_for_non_negative(self):
        for n in (1, 7, 12.5, 10**6):
            assert await square_async(n, delay_seconds=0) == n * n

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_default_delay_is_one_second(self):
        assert SQUARE_DELAY_SECONDS == 1.0
        start = time.monotonic()

        assert await square_async(5) == 25
        assert time.monotonic() - start >= 0.95
