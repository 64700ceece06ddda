"""
Scheduling primitives for timer-driven game behavior.

The engine never touches the event loop directly: it asks a Scheduler for
one-shot callbacks and keeps the returned handles so it can cancel them.
AsyncioScheduler runs callbacks as asyncio tasks on the running loop; tests
substitute a manual fake clock with the same interface.

All callbacks run serialized on a single loop, so engine state needs no locking.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Protocol

import structlog

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import Callable


class TimerHandle(Protocol):
    """Cancellable handle for a scheduled callback."""

    @property
    def done(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Source of one-shot delayed callbacks and a monotonic clock."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...

    def time(self) -> float: ...


class TaskTimerHandle:
    """TimerHandle backed by an asyncio task."""

    def __init__(self, task: asyncio.Task[None]) -> None:
        self._task = task

    @property
    def done(self) -> bool:
        return self._task.done()

    def cancel(self) -> None:
        if not self._task.done():
            self._task.cancel()


class AsyncioScheduler:
    """
    Schedule callbacks as asyncio tasks on the running event loop.

    Each scheduled callback gets its own task that sleeps for the delay and
    then invokes the callback. Cancelling the handle cancels the sleep, so a
    cancelled callback never runs.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TaskTimerHandle:
        task = asyncio.create_task(self._run_timer(max(0.0, delay), callback))
        return TaskTimerHandle(task)

    def time(self) -> float:
        return time.monotonic()

    async def _run_timer(self, seconds: float, callback: Callable[[], None]) -> None:
        try:
            await asyncio.sleep(seconds)
            callback()
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("timer callback failed")
