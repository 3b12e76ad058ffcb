"""Single-flight call de-duplication for asyncio.

Concurrent do() calls with the same key share one execution of the loader
and all receive its result or its exception. The registry entry is removed as
soon as the execution finishes, so the next call after that runs a fresh load.

The shared execution runs in its own task owned by the group, not by the
caller that started it. A caller that is cancelled just stops waiting; the
execution is cancelled only once no caller is waiting for it any more.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class _Call:
    task: asyncio.Task[Any]
    waiters: int = 0
    joined: int = 0


class SingleFlightGroup:
    """Registry of in-flight loads keyed by string.

    Check-and-insert on the registry never awaits, so it is atomic with
    respect to other tasks on the same event loop. A group must only be used
    from one event loop.
    """

    def __init__(self) -> None:
        self._calls: dict[str, _Call] = {}

    def __len__(self) -> int:
        return len(self._calls)

    def in_flight(self, key: str) -> bool:
        """Return True while a load for key is running."""
        return key in self._calls

    async def do(self, key: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Run fn once for all concurrent callers with the same key.

        Args:
            key: De-duplication key (e.g. the record id as a string).
            fn: Zero-argument coroutine function performing the load.

        Returns:
            The shared result of fn.

        Raises:
            Whatever fn raised; the same exception is raised in every caller.
        """
        call = self._calls.get(key)
        if call is None:
            call = _Call(asyncio.create_task(self._run(key, fn)))
            self._calls[key] = call
        else:
            call.joined += 1
            logger.debug("Single-flight JOIN: %s (%s joined)", key, call.joined)
        task = call.task
        call.waiters += 1
        try:
            return await asyncio.shield(task)
        finally:
            call.waiters -= 1
            if call.waiters == 0 and not task.done():
                logger.debug("Single-flight CANCEL: %s (no waiters left)", key)
                if self._calls.get(key) is call:
                    del self._calls[key]
                task.cancel()

    async def _run(self, key: str, fn: Callable[[], Awaitable[T]]) -> T:
        try:
            return await fn()
        finally:
            # A newer call may own the key after a cancel
            call = self._calls.get(key)
            if call is not None and call.task is asyncio.current_task():
                del self._calls[key]
