from __future__ import annotations

from typing import Protocol

import pygame

from bubble_rush.geometry import Box
from bubble_rush.session import GameSession
from bubble_rush.state import GameState
from bubble_rush.settings import (
    BACKGROUND_COLOR,
    BANNER_FONT_SIZE,
    FONT_NAME,
    HUD_FONT_SIZE,
    TEXT_COLOR,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)


Color = pygame.Color


class Renderer(Protocol):
    def clear(self) -> None: ...

    def rect(self, color: Color, box: Box) -> None: ...

    def circle(self, color: Color, center: pygame.Vector2, radius: float) -> None: ...

    def text(self, message: str, pos: tuple[float, float], *, large: bool = False) -> None: ...


class SurfaceRenderer:
    """Draw primitives on a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self._hud_font = pygame.font.SysFont(FONT_NAME, HUD_FONT_SIZE)
        self._banner_font = pygame.font.SysFont(FONT_NAME, BANNER_FONT_SIZE)

    def clear(self) -> None:
        self.surface.fill(BACKGROUND_COLOR)

    def rect(self, color: Color, box: Box) -> None:
        pygame.draw.rect(self.surface, color, box.to_rect())

    def circle(self, color: Color, center: pygame.Vector2, radius: float) -> None:
        pygame.draw.circle(self.surface, color, center, radius)

    def text(self, message: str, pos: tuple[float, float], *, large: bool = False) -> None:
        font = self._banner_font if large else self._hud_font
        surf = font.render(message, True, TEXT_COLOR)
        self.surface.blit(surf, pos)


def draw_scene(renderer: Renderer, session: GameSession) -> None:
    for platform in session.platforms:
        renderer.rect(platform.color, platform.box)
    for circle in session.populations.all():
        renderer.circle(circle.color, circle.position, circle.radius)
    player = session.player
    renderer.rect(player.color, player.box)

    state = session.state
    renderer.text(f"Time: {state.timer}", (10, 8))
    renderer.text(f"Score: {state.score}", (10, 38))
    if state.paused:
        renderer.text("Paused", (WORLD_WIDTH / 2 - 100, WORLD_HEIGHT / 2 - 40), large=True)


def draw_game_over(renderer: Renderer, state: GameState) -> None:
    renderer.text("Game Over", (WORLD_WIDTH / 2 - 150, WORLD_HEIGHT / 2 - 40), large=True)
    renderer.text(f"Final Score: {state.score}", (WORLD_WIDTH / 2 - 120, WORLD_HEIGHT / 2 + 10), large=True)
