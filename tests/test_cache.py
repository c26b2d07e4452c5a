"""
Tests for the AsyncOnce cache cell.
"""
import asyncio

import pytest
from verb_lookup.cache import AsyncOnce


class TestAsyncOnce:
    """Tests for AsyncOnce."""

    def test_builds_once_for_concurrent_callers(self):
        """Test that concurrent callers share one build."""
        calls = []

        async def build():
            calls.append(1)
            await asyncio.sleep(0)
            return object()

        async def scenario():
            cell = AsyncOnce()
            values = await asyncio.gather(*(cell.get(build) for _ in range(4)))
            return values, await cell.get(build)

        values, later = asyncio.run(scenario())

        assert len(calls) == 1
        assert all(v is later for v in values)

    def test_failure_is_shared_and_sticky(self):
        """Test that a failed build raises for every caller without rebuilding."""
        calls = []

        async def build():
            calls.append(1)
            raise RuntimeError("boom")

        async def scenario():
            cell = AsyncOnce()
            for _ in range(2):
                with pytest.raises(RuntimeError):
                    await cell.get(build)

        asyncio.run(scenario())

        assert len(calls) == 1

    def test_cancelled_waiter_does_not_cancel_build(self):
        """Test that other waiters still get the value when one gives up."""
        async def scenario():
            cell = AsyncOnce()
            gate = asyncio.Event()

            async def build():
                await gate.wait()
                return 42

            first = asyncio.ensure_future(cell.get(build))
            second = asyncio.ensure_future(cell.get(build))
            await asyncio.sleep(0)
            first.cancel()
            gate.set()
            return first, await second

        first, value = asyncio.run(scenario())

        assert first.cancelled()
        assert value == 42

    def test_reset(self):
        async def scenario():
            cell = AsyncOnce()

            async def build():
                return 1

            await cell.get(build)
            initialized = cell.is_initialized
            cell.reset()
            return initialized, cell.is_initialized

        assert asyncio.run(scenario()) == (True, False)
