"""
Single-construction async cache cell.

The first caller starts the build; every caller, concurrent or later,
awaits the same task. A failed build stays failed.
"""
import asyncio
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class AsyncOnce(Generic[T]):
    """
    Memoized future for cooperative (asyncio) callers.

    Usage:
        cell = AsyncOnce("form index")
        index = await cell.get(build_index)
    """

    def __init__(self, name: str = "value"):
        self.name = name
        self._task: Optional["asyncio.Future[T]"] = None

    @property
    def is_initialized(self) -> bool:
        """True once a build has been started (it may still be in flight)."""
        return self._task is not None

    async def get(self, factory: Callable[[], Awaitable[T]]) -> T:
        """
        Return the cached value, starting the build on first call.

        :param factory: Coroutine function producing the value. Called at most once.
        :return: The built value
        :raises: Whatever the build raised, for every caller
        """
        if self._task is None:
            self._task = asyncio.ensure_future(factory())
        # A cancelled waiter must not cancel the shared build
        return await asyncio.shield(self._task)

    def reset(self) -> None:
        """Forget the cached build. Only meant for tests."""
        self._task = None
