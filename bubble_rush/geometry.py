from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Box:
    """Float axis-aligned rectangle. pygame.Rect truncates to ints, this does not."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @classmethod
    def from_rect(cls, rect: pygame.Rect) -> Box:
        return cls(float(rect.x), float(rect.y), float(rect.width), float(rect.height))

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(round(self.w)), int(round(self.h)))


def rect_overlaps_rect(a: Box, b: Box) -> bool:
    # Touching edges count as no overlap
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def rect_overlaps_circle(box: Box, center: pygame.Vector2, radius: float) -> bool:
    # Circle is treated as its bounding square, not a true distance test
    return (
        box.x < center.x + radius
        and box.right > center.x - radius
        and box.y < center.y + radius
        and box.bottom > center.y - radius
    )
