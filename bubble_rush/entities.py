from __future__ import annotations

import enum
from dataclasses import dataclass, field

import pygame

from bubble_rush.geometry import Box
from bubble_rush.settings import (
    BONUS_COLOR,
    CIRCLE_RADIUS,
    NEUTRAL_COLOR,
    PLATFORM_COLOR,
    PLATFORM_LAYOUT,
    PLAYER_COLOR,
    PLAYER_HEIGHT,
    PLAYER_JUMP_POWER,
    PLAYER_MAX_JUMPS,
    PLAYER_RUN_SPEED,
    PLAYER_START_X,
    PLAYER_START_Y,
    PLAYER_WIDTH,
    POWER_UP_COLOR,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)


Color = pygame.Color


class Player:
    def __init__(self, x: float = PLAYER_START_X, y: float = PLAYER_START_Y) -> None:
        self.position = pygame.Vector2(x, y)
        self.velocity = pygame.Vector2(0.0, 0.0)
        self.width = PLAYER_WIDTH
        self.height = PLAYER_HEIGHT
        self.speed = PLAYER_RUN_SPEED
        self.jump_power = PLAYER_JUMP_POWER
        self.max_jumps = PLAYER_MAX_JUMPS
        self.jump_count = 0
        self.is_jumping = False
        self.color = PLAYER_COLOR

    @property
    def box(self) -> Box:
        return Box(self.position.x, self.position.y, self.width, self.height)

    @property
    def bottom(self) -> float:
        return self.position.y + self.height

    def steer(self, left: bool, right: bool) -> None:
        if left:
            self.velocity.x = -self.speed
        elif right:
            self.velocity.x = self.speed
        else:
            self.velocity.x = 0.0

    def jump(self) -> None:
        # Second jump may happen mid-air; anything past max_jumps is ignored
        if self.jump_count < self.max_jumps:
            self.velocity.y = self.jump_power
            self.jump_count += 1
            self.is_jumping = True

    def land(self, surface_y: float) -> None:
        self.position.y = surface_y - self.height
        self.velocity.y = 0.0
        self.jump_count = 0
        self.is_jumping = False

    def integrate(self, gravity: float) -> None:
        self.velocity.y += gravity
        self.position += self.velocity
        # Constrain to world horizontally
        if self.position.x < 0:
            self.position.x = 0.0
        elif self.position.x + self.width > WORLD_WIDTH:
            self.position.x = WORLD_WIDTH - self.width
        if self.bottom > WORLD_HEIGHT:
            self.land(WORLD_HEIGHT)


@dataclass(frozen=True)
class Platform:
    rect: pygame.Rect
    color: Color = field(default_factory=lambda: Color(PLATFORM_COLOR))

    @property
    def box(self) -> Box:
        return Box.from_rect(self.rect)


def build_platforms() -> tuple[Platform, ...]:
    return tuple(Platform(pygame.Rect(x, y, w, h)) for x, y, w, h in PLATFORM_LAYOUT)


class CircleKind(enum.Enum):
    NEUTRAL = "neutral"
    BONUS = "bonus"
    POWER_UP = "power_up"


CIRCLE_COLORS = {
    CircleKind.NEUTRAL: NEUTRAL_COLOR,
    CircleKind.BONUS: BONUS_COLOR,
    CircleKind.POWER_UP: POWER_UP_COLOR,
}


class Circle:
    def __init__(self, kind: CircleKind, x: float, speed: float, radius: float = CIRCLE_RADIUS) -> None:
        self.kind = kind
        self.position = pygame.Vector2(x, WORLD_HEIGHT)
        self.radius = radius
        # Each circle keeps its own speed so slow mode can rescale live ones
        self.speed = speed

    @property
    def color(self) -> Color:
        return CIRCLE_COLORS[self.kind]

    @property
    def off_screen(self) -> bool:
        return self.position.y + self.radius < 0

    def advance(self) -> None:
        self.position.y -= self.speed


@dataclass
class Populations:
    neutral: list[Circle] = field(default_factory=list)
    bonus: list[Circle] = field(default_factory=list)
    power_up: list[Circle] = field(default_factory=list)

    def of_kind(self, kind: CircleKind) -> list[Circle]:
        if kind is CircleKind.NEUTRAL:
            return self.neutral
        if kind is CircleKind.BONUS:
            return self.bonus
        return self.power_up

    def replace(self, kind: CircleKind, survivors: list[Circle]) -> None:
        if kind is CircleKind.NEUTRAL:
            self.neutral = survivors
        elif kind is CircleKind.BONUS:
            self.bonus = survivors
        else:
            self.power_up = survivors

    def speed_scaled(self) -> list[Circle]:
        """Circles that follow the global speed baseline (PowerUps are exempt)."""
        return [*self.neutral, *self.bonus]

    def all(self) -> list[Circle]:
        return [*self.neutral, *self.bonus, *self.power_up]
