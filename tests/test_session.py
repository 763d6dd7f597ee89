import pygame

from bubble_rush.entities import Circle, CircleKind
from bubble_rush.input import InputState
from bubble_rush.settings import WORLD_HEIGHT


def place_on_player(session, kind, speed=1.0):
    player = session.player
    circle = Circle(kind, player.position.x + player.width / 2, speed)
    # advance() moves it up by `speed` before the overlap check
    circle.position.y = player.position.y + player.height / 2 + speed
    session.populations.of_kind(kind).append(circle)
    return circle


def test_neutral_collision_scores_ten(session):
    place_on_player(session, CircleKind.NEUTRAL)
    far = Circle(CircleKind.NEUTRAL, 700, 1.0)
    session.populations.neutral.append(far)
    session.step(InputState())
    assert session.state.score == 10
    assert session.populations.neutral == [far]


def test_bonus_collision_adds_twenty_seconds(session):
    place_on_player(session, CircleKind.BONUS)
    session.step(InputState())
    assert session.state.timer == 80
    assert session.populations.bonus == []


def test_power_up_collision_triggers_slow_mode(session, scheduler):
    place_on_player(session, CircleKind.POWER_UP, speed=0.5)
    session.step(InputState())
    assert session.populations.power_up == []
    assert session.state.slow_mode
    assert session.state.circle_speed == 0.5
    scheduler.advance(10000)
    assert session.state.circle_speed == 1.0
    assert not session.state.slow_mode


def test_each_collision_removes_one_circle(session):
    place_on_player(session, CircleKind.NEUTRAL)
    place_on_player(session, CircleKind.NEUTRAL)
    session.step(InputState())
    assert session.state.score == 20
    assert session.populations.neutral == []


def test_off_screen_circles_are_culled(session):
    gone = Circle(CircleKind.NEUTRAL, 700, 1.0)
    gone.position.y = -14.5
    stays = Circle(CircleKind.NEUTRAL, 700, 1.0)
    stays.position.y = -13.5
    session.populations.neutral.extend([gone, stays])
    session.step(InputState())
    assert session.populations.neutral == [stays]


def test_circles_rise_by_their_speed(session):
    circle = Circle(CircleKind.POWER_UP, 700, 0.5)
    session.populations.power_up.append(circle)
    session.step(InputState())
    assert circle.position.y == WORLD_HEIGHT - 0.5


def test_player_settles_on_floor_platform(session):
    for _ in range(10):
        session.step(InputState())
    floor = session.platforms[-1].rect
    assert session.player.bottom == floor.top
    assert session.player.velocity.y == 0


def test_landing_on_platform_resets_jumps(session):
    player = session.player
    platform = session.platforms[0].rect
    player.position.update(platform.x + 20, platform.top - player.height - 5)
    player.velocity.y = 3
    player.jump_count = 2
    player.is_jumping = True
    for _ in range(5):
        session.step(InputState())
        if player.jump_count == 0:
            break
    assert player.bottom == platform.top
    assert player.velocity.y == 0
    assert player.jump_count == 0
    assert not player.is_jumping


def test_rising_through_platform_does_not_land(session):
    player = session.player
    platform = session.platforms[0].rect
    player.position.update(platform.x + 20, platform.bottom - 5)
    player.velocity.y = -8
    session.step(InputState())
    assert player.velocity.y < 0


def test_input_moves_and_jumps(session):
    session.step(InputState(right=True))
    assert session.player.velocity.x == 6
    session.step(InputState(jump_pressed=True))
    assert session.player.jump_count == 1
    assert session.player.velocity.x == 0


def test_pause_stops_timers_and_resume_restarts(session, scheduler):
    session.start()
    scheduler.advance(1500)
    session.toggle_pause()
    assert session.state.paused
    assert scheduler.pending() == 0
    session.toggle_pause()
    assert not session.state.paused
    assert session.clock.running
    assert scheduler.pending() == 4


def test_pause_resume_has_no_net_effect(session, scheduler):
    session.start()
    for _ in range(30):
        scheduler.advance(16)
        session.step(InputState(right=True))
    before = (
        session.state.timer,
        session.state.score,
        pygame.Vector2(session.player.position),
        [pygame.Vector2(c.position) for c in session.populations.all()],
    )
    session.toggle_pause()
    scheduler.advance(45000)
    session.step(InputState(left=True, jump_pressed=True))
    session.toggle_pause()
    after = (
        session.state.timer,
        session.state.score,
        session.player.position,
        [c.position for c in session.populations.all()],
    )
    assert after == before


def test_resume_restarts_clock_with_full_interval(session, scheduler):
    session.start()
    scheduler.advance(900)
    session.toggle_pause()
    session.toggle_pause()
    scheduler.advance(999)
    assert session.state.timer == 60
    scheduler.advance(1)
    assert session.state.timer == 59


def test_clock_runs_out_to_game_over(session, scheduler):
    session.start()
    scheduler.advance(60 * 1000)
    state = session.state
    assert state.game_over
    assert state.timer == 0
    assert scheduler.pending() == 0


def test_game_over_is_terminal(session, scheduler):
    session.start()
    scheduler.advance(60 * 1000)
    session.toggle_pause()
    assert not session.state.paused
    place_on_player(session, CircleKind.NEUTRAL)
    session.step(InputState())
    assert session.state.score == 0


def test_sessions_are_independent(session, scheduler):
    from bubble_rush.session import GameSession

    other = GameSession()
    session.start()
    scheduler.advance(5000)
    assert other.state.timer == 60
    assert other.populations.all() == []
