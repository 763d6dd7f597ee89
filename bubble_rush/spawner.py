from __future__ import annotations

import logging
import random

from bubble_rush.entities import Circle, CircleKind, Populations
from bubble_rush.scheduler import Scheduler, TimerHandle
from bubble_rush.settings import (
    BONUS_SPAWN_INTERVAL_MS,
    CIRCLE_RADIUS,
    NEUTRAL_SPAWN_INTERVAL_MIN_MS,
    POWER_UP_SPAWN_INTERVAL_MS,
    POWER_UP_SPEED,
    WORLD_WIDTH,
)
from bubble_rush.state import GameState

logger = logging.getLogger(__name__)


class HazardSpawner:
    """Three independently timed circle populations sharing one scheduler."""

    def __init__(
        self,
        state: GameState,
        populations: Populations,
        scheduler: Scheduler,
        rng: random.Random,
    ) -> None:
        self._state = state
        self._populations = populations
        self._scheduler = scheduler
        self._rng = rng
        self._neutral_handle: TimerHandle | None = None
        self._bonus_handle: TimerHandle | None = None
        self._power_up_handle: TimerHandle | None = None

    @property
    def active(self) -> bool:
        return any(h is not None for h in (self._neutral_handle, self._bonus_handle, self._power_up_handle))

    def start(self) -> None:
        self.start_neutral()
        self.start_bonus()
        self.start_power_ups()

    def stop(self) -> None:
        for handle in (self._neutral_handle, self._bonus_handle, self._power_up_handle):
            if handle is not None:
                handle.cancel()
        self._neutral_handle = None
        self._bonus_handle = None
        self._power_up_handle = None

    def start_neutral(self) -> None:
        if self._neutral_handle is None:
            self._arm_neutral()

    def start_bonus(self) -> None:
        if self._bonus_handle is None:
            self._bonus_handle = self._scheduler.call_every(BONUS_SPAWN_INTERVAL_MS, self.spawn_bonus)

    def start_power_ups(self) -> None:
        if self._power_up_handle is None:
            self._power_up_handle = self._scheduler.call_every(POWER_UP_SPAWN_INTERVAL_MS, self.spawn_power_up)

    def spawn_neutral(self) -> Circle | None:
        return self._spawn(CircleKind.NEUTRAL, self._state.circle_speed)

    def spawn_bonus(self) -> Circle | None:
        return self._spawn(CircleKind.BONUS, self._state.circle_speed)

    def spawn_power_up(self) -> Circle | None:
        # Constant speed, never tied to the global baseline
        return self._spawn(CircleKind.POWER_UP, POWER_UP_SPEED)

    def _arm_neutral(self) -> None:
        # Interval is read per re-arm; the timer already pending keeps its delay
        delay = max(NEUTRAL_SPAWN_INTERVAL_MIN_MS, self._state.spawn_interval)
        self._neutral_handle = self._scheduler.call_later(delay, self._on_neutral_timer)

    def _on_neutral_timer(self) -> None:
        self.spawn_neutral()
        self._arm_neutral()

    def _spawn(self, kind: CircleKind, speed: float) -> Circle | None:
        if not self._state.running:
            return None
        x = self._rng.random() * (WORLD_WIDTH - 2 * CIRCLE_RADIUS) + CIRCLE_RADIUS
        circle = Circle(kind, x, speed)
        self._populations.of_kind(kind).append(circle)
        logger.debug("Spawned %s circle at x=%.1f speed=%.2f", kind.value, x, speed)
        return circle
