from __future__ import annotations

from bubble_rush.input import InputState
from bubble_rush.render import Renderer, draw_game_over, draw_scene
from bubble_rush.session import GameSession


def frame(session: GameSession, inp: InputState, renderer: Renderer) -> bool:
    """
    Run one display frame.

    Returns False once the game-over screen has been drawn; the caller must
    stop calling after that.
    """
    # Pause stays live even while paused
    if inp.pause_pressed:
        session.toggle_pause()

    renderer.clear()
    if session.state.game_over:
        draw_game_over(renderer, session.state)
        return False

    if not session.state.paused:
        session.step(inp)

    draw_scene(renderer, session)
    return True
