from __future__ import annotations

import logging
import random
from collections.abc import Callable

from bubble_rush.clock import GameClock
from bubble_rush.effects import SlowMode
from bubble_rush.entities import Circle, CircleKind, Player, Populations, build_platforms
from bubble_rush.geometry import rect_overlaps_circle
from bubble_rush.input import InputState
from bubble_rush.scheduler import Scheduler
from bubble_rush.settings import BONUS_SECONDS, GRAVITY, NEUTRAL_SCORE
from bubble_rush.spawner import HazardSpawner
from bubble_rush.state import GameState

logger = logging.getLogger(__name__)


class GameSession:
    """
    Everything one game needs: state, entities, timers.

    Sessions share nothing, so several can run side by side (tests do).
    """

    def __init__(self, *, scheduler: Scheduler | None = None, rng: random.Random | None = None) -> None:
        self.scheduler = scheduler or Scheduler()
        self.rng = rng or random.Random()
        self.state = GameState()
        self.player = Player()
        self.platforms = build_platforms()
        self.populations = Populations()
        self.slow_mode = SlowMode(self.state, self.populations, self.scheduler)
        self.spawner = HazardSpawner(self.state, self.populations, self.scheduler, self.rng)
        self.clock = GameClock(self.state, self.scheduler, on_expired=self._end_game)

    def start(self) -> None:
        self.clock.start()
        self.spawner.start()

    # ---------- Pause controller ----------

    def toggle_pause(self) -> None:
        state = self.state
        if state.game_over:
            return
        state.paused = not state.paused
        if state.paused:
            self.clock.stop()
            self.spawner.stop()
            logger.info("Game paused")
        else:
            self.clock.start()
            self.spawner.start()
            logger.info("Game resumed")

    # ---------- Per-frame update ----------

    def step(self, inp: InputState) -> None:
        if not self.state.running:
            return
        player = self.player
        player.steer(inp.left, inp.right)
        if inp.jump_pressed:
            player.jump()

        self._update_population(CircleKind.NEUTRAL, self._collect_neutral)
        self._update_population(CircleKind.BONUS, self._collect_bonus)
        self._update_population(CircleKind.POWER_UP, self._collect_power_up)

        player.integrate(GRAVITY)
        self._land_on_platforms()

    def _update_population(self, kind: CircleKind, on_hit: Callable[[Circle], None]) -> None:
        # Rebuild instead of removing in place so no circle skips a check
        survivors: list[Circle] = []
        player_box = self.player.box
        for circle in self.populations.of_kind(kind):
            circle.advance()
            if circle.off_screen:
                continue
            if rect_overlaps_circle(player_box, circle.position, circle.radius):
                on_hit(circle)
                continue
            survivors.append(circle)
        self.populations.replace(kind, survivors)

    def _collect_neutral(self, _circle: Circle) -> None:
        self.state.score += NEUTRAL_SCORE

    def _collect_bonus(self, _circle: Circle) -> None:
        self.state.timer += BONUS_SECONDS

    def _collect_power_up(self, _circle: Circle) -> None:
        self.slow_mode.activate()

    def _land_on_platforms(self) -> None:
        player = self.player
        for platform in self.platforms:
            box = platform.box
            if (
                player.position.x + player.width > box.x
                and player.position.x < box.right
                and player.bottom > box.y
                and player.bottom <= box.bottom
                and player.velocity.y > 0
            ):
                player.land(box.y)

    # ---------- Terminal state ----------

    def _end_game(self) -> None:
        state = self.state
        if state.game_over:
            return
        state.game_over = True
        self.clock.stop()
        self.spawner.stop()
        self.slow_mode.cancel()
        logger.info("Game over, final score %d", state.score)
