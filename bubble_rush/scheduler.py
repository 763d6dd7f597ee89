"""
Millisecond timer scheduler.

Stands in for wall-clock callbacks: the frame loop feeds it real elapsed time
from ``pygame.time.Clock.tick`` while tests drive it directly with
``advance``. Every callback runs on the caller's thread, one at a time.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable


class TimerHandle:
    def __init__(self, due_ms: int, interval_ms: int | None, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False

    @property
    def repeating(self) -> bool:
        return self.interval_ms is not None

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    def __init__(self) -> None:
        self._now_ms = 0
        self._queue: list[tuple[int, int, TimerHandle]] = []
        self._seq = itertools.count()

    @property
    def now_ms(self) -> int:
        return self._now_ms

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        handle = TimerHandle(self._now_ms + delay_ms, None, callback)
        self._push(handle)
        return handle

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
        handle = TimerHandle(self._now_ms + interval_ms, interval_ms, callback)
        self._push(handle)
        return handle

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, elapsed_ms: int) -> None:
        """Move the clock forward, firing every timer that falls due on the way."""
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be >= 0, got {elapsed_ms}")
        target = self._now_ms + elapsed_ms
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now_ms = due
            if handle.repeating:
                handle.due_ms = due + handle.interval_ms
                self._push(handle)
            handle.callback()
        self._now_ms = target

    def _push(self, handle: TimerHandle) -> None:
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
