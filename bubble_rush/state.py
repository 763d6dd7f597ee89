from __future__ import annotations

from dataclasses import dataclass

from bubble_rush.settings import (
    CIRCLE_START_SPEED,
    NEUTRAL_SPAWN_INTERVAL_START_MS,
    TIMER_START_S,
)


@dataclass
class GameState:
    timer: int = TIMER_START_S
    score: int = 0
    circle_speed: float = CIRCLE_START_SPEED  # baseline for new Neutral/Bonus circles
    spawn_interval: int = NEUTRAL_SPAWN_INTERVAL_START_MS
    slow_mode: bool = False
    paused: bool = False
    game_over: bool = False

    @property
    def running(self) -> bool:
        return not (self.paused or self.game_over)
