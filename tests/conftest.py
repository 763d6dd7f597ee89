import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from bubble_rush.scheduler import Scheduler
from bubble_rush.session import GameSession


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def rect(self, color, box):
        self.calls.append(("rect", tuple(color), box))

    def circle(self, color, center, radius):
        self.calls.append(("circle", tuple(color), (center.x, center.y), radius))

    def text(self, message, pos, *, large=False):
        self.calls.append(("text", message))

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def session(scheduler):
    return GameSession(scheduler=scheduler, rng=random.Random(1234))


@pytest.fixture
def renderer():
    return RecordingRenderer()
