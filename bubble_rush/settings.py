import pygame


WORLD_WIDTH = 800
WORLD_HEIGHT = 450
FPS = 60

# World physics (per tick, ticks are assumed frame-uniform)
GRAVITY = 0.5

# Player tuning
PLAYER_WIDTH = 37.5
PLAYER_HEIGHT = 50
PLAYER_START_X = 100
PLAYER_START_Y = WORLD_HEIGHT - PLAYER_HEIGHT - 10
PLAYER_RUN_SPEED = 6
PLAYER_JUMP_POWER = -10
PLAYER_MAX_JUMPS = 2

# Stage: (x, y, width, height)
PLATFORM_LAYOUT = (
    (300, WORLD_HEIGHT - 100, 200, 20),
    (550, WORLD_HEIGHT - 200, 200, 20),
    (50, WORLD_HEIGHT - 200, 200, 20),
    (0, WORLD_HEIGHT - 20, WORLD_WIDTH, 20),
)

# Circles
CIRCLE_RADIUS = 15
CIRCLE_START_SPEED = 1.0
POWER_UP_SPEED = 0.5

# Spawn cadence (ms)
NEUTRAL_SPAWN_INTERVAL_START_MS = 2000
NEUTRAL_SPAWN_INTERVAL_MIN_MS = 50
BONUS_SPAWN_INTERVAL_MS = 10000
POWER_UP_SPAWN_INTERVAL_MS = 30000

# Countdown and difficulty ramp
TIMER_START_S = 60
CLOCK_TICK_MS = 1000
SPEED_INCREASE_PER_TICK = 0.05
SPAWN_INTERVAL_DECREASE_MS = 25

# Collision rewards
NEUTRAL_SCORE = 10
BONUS_SECONDS = 20
SLOW_MODE_DURATION_MS = 10000

# Colors
BACKGROUND_COLOR = pygame.Color("skyblue")
PLAYER_COLOR = pygame.Color("red")
PLATFORM_COLOR = pygame.Color("white")
NEUTRAL_COLOR = pygame.Color("lightblue")
BONUS_COLOR = pygame.Color("yellow")
POWER_UP_COLOR = pygame.Color("lightgreen")
TEXT_COLOR = pygame.Color("black")

# HUD
FONT_NAME = "arial"
HUD_FONT_SIZE = 24
BANNER_FONT_SIZE = 48
