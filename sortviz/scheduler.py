"""Cancelable delayed-callback scheduling for playback."""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class ScheduledTask(Protocol):
    """Handle returned by ``Scheduler.call_later``."""

    def cancel(self) -> None: ...


class Scheduler(ABC):
    """Abstract source of timed callbacks."""

    @abstractmethod
    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> ScheduledTask:
        """Run *callback* once after *delay* seconds."""
        ...


class AsyncioScheduler(Scheduler):
    """Delegates to an asyncio event loop's ``call_later``.

    When no loop is given, the running loop is looked up on each call, so
    the scheduler must be used from inside a coroutine or loop callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ManualTask:
    """A callback queued on a ``ManualScheduler``."""

    __slots__ = ("due", "callback", "cancelled")

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler: time only moves when told to.

    Useful for replaying a trace without waiting and for deterministic
    tests of timed playback.
    """

    def __init__(self):
        self.now: float = 0.0
        self._queue: list[tuple[float, int, ManualTask]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTask:
        task = ManualTask(self.now + delay, callback)
        heapq.heappush(self._queue, (task.due, next(self._seq), task))
        return task

    @property
    def pending(self) -> int:
        """Number of queued tasks that have not been cancelled."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every task that falls due.

        Returns the number of callbacks run.
        """
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            self.now = due
            if task.cancelled:
                continue
            task.callback()
            ran += 1
        self.now = target
        return ran

    def run_until_idle(self, max_tasks: int = 100_000) -> int:
        """Run queued tasks in due order until none remain.

        Raises ``RuntimeError`` if more than *max_tasks* callbacks run,
        which means something keeps rescheduling itself forever.
        """
        ran = 0
        while self._queue:
            due, _, task = heapq.heappop(self._queue)
            self.now = max(self.now, due)
            if task.cancelled:
                continue
            task.callback()
            ran += 1
            if ran > max_tasks:
                raise RuntimeError(
                    f"ManualScheduler ran more than {max_tasks} tasks without going idle"
                )
        logger.debug("ManualScheduler idle after %d tasks at t=%.3fs", ran, self.now)
        return ran
