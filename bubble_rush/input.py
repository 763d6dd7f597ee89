from __future__ import annotations

from dataclasses import dataclass

import pygame


LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
JUMP_KEYS = (pygame.K_UP, pygame.K_w, pygame.K_SPACE)
PAUSE_KEYS = (pygame.K_p,)


@dataclass(frozen=True)
class InputState:
    left: bool = False
    right: bool = False
    jump_pressed: bool = False  # true only on the frame the key went down
    pause_pressed: bool = False


class KeyboardInput:
    """Turns pygame key events into one InputState per frame."""

    def __init__(self) -> None:
        self._left_down: set[int] = set()
        self._right_down: set[int] = set()
        self._jump_edge = False
        self._pause_edge = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in LEFT_KEYS:
                self._left_down.add(event.key)
            elif event.key in RIGHT_KEYS:
                self._right_down.add(event.key)
            elif event.key in JUMP_KEYS:
                self._jump_edge = True
            elif event.key in PAUSE_KEYS:
                self._pause_edge = True
        elif event.type == pygame.KEYUP:
            self._left_down.discard(event.key)
            self._right_down.discard(event.key)

    def sample(self) -> InputState:
        # Edges are consumed here whether or not the frame uses them
        state = InputState(
            left=bool(self._left_down),
            right=bool(self._right_down),
            jump_pressed=self._jump_edge,
            pause_pressed=self._pause_edge,
        )
        self._jump_edge = False
        self._pause_edge = False
        return state
