from __future__ import annotations

import logging
from collections.abc import Callable

from bubble_rush.scheduler import Scheduler, TimerHandle
from bubble_rush.settings import (
    CLOCK_TICK_MS,
    NEUTRAL_SPAWN_INTERVAL_MIN_MS,
    SPAWN_INTERVAL_DECREASE_MS,
    SPEED_INCREASE_PER_TICK,
)
from bubble_rush.state import GameState

logger = logging.getLogger(__name__)


class GameClock:
    """Once-a-second countdown that also ramps circle speed and spawn rate."""

    def __init__(self, state: GameState, scheduler: Scheduler, on_expired: Callable[[], None]) -> None:
        self._state = state
        self._scheduler = scheduler
        self._on_expired = on_expired
        self._handle: TimerHandle | None = None
        self._expired = False

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self._expired:
            return
        # Exactly one clock timer at a time
        self.stop()
        self._handle = self._scheduler.call_every(CLOCK_TICK_MS, self.tick)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def tick(self) -> None:
        state = self._state
        if not state.running:
            return
        if state.timer > 0:
            state.timer -= 1
            state.circle_speed += SPEED_INCREASE_PER_TICK
            state.spawn_interval = max(NEUTRAL_SPAWN_INTERVAL_MIN_MS, state.spawn_interval - SPAWN_INTERVAL_DECREASE_MS)
            logger.debug(
                "Tick: timer=%d speed=%.2f spawn_interval=%dms",
                state.timer,
                state.circle_speed,
                state.spawn_interval,
            )
        if state.timer <= 0:
            state.timer = 0
            self._expired = True
            self.stop()
            self._on_expired()
