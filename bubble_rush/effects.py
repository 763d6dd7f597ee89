from __future__ import annotations

import logging
from collections import deque

from bubble_rush.entities import Populations
from bubble_rush.scheduler import Scheduler, TimerHandle
from bubble_rush.settings import SLOW_MODE_DURATION_MS
from bubble_rush.state import GameState

logger = logging.getLogger(__name__)


class SlowMode:
    """
    Temporary halving of the Neutral/Bonus speed, undone after a fixed delay.

    Overlapping activations compound: each one halves now and doubles later.
    Restoration rescales whatever circles are alive when it runs, not the
    ones that were alive at activation.
    """

    def __init__(self, state: GameState, populations: Populations, scheduler: Scheduler) -> None:
        self._state = state
        self._populations = populations
        self._scheduler = scheduler
        self._pending: deque[TimerHandle] = deque()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def activate(self) -> None:
        self._rescale(0.5)
        self._state.slow_mode = True
        self._pending.append(self._scheduler.call_later(SLOW_MODE_DURATION_MS, self._restore))
        logger.info("Slow mode on (circle speed %.2f, %d active)", self._state.circle_speed, len(self._pending))

    def cancel(self) -> None:
        while self._pending:
            self._pending.popleft().cancel()
        self._state.slow_mode = False

    def _restore(self) -> None:
        # Equal durations, so restorations fire in activation order
        self._pending.popleft()
        self._rescale(2.0)
        self._state.slow_mode = bool(self._pending)
        logger.info("Slow mode restored (circle speed %.2f)", self._state.circle_speed)

    def _rescale(self, factor: float) -> None:
        self._state.circle_speed *= factor
        for circle in self._populations.speed_scaled():
            circle.speed *= factor
