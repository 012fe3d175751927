import os

# Headless pygame for renderer and client tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_sim.controller import GameController
from flappy_sim.events import GameObserver


class RecordingObserver(GameObserver):
    """Stores every notification as (name, args) in arrival order."""

    def __init__(self):
        self.events = []

    def names(self, name):
        return [args for event, args in self.events if event == name]

    def count(self, name):
        return len(self.names(name))

    def actor_moved(self, rect):
        self.events.append(("actor_moved", (rect,)))

    def obstacle_spawned(self, obstacle_id, top_rect, bottom_rect):
        self.events.append(("obstacle_spawned", (obstacle_id, top_rect, bottom_rect)))

    def obstacle_moved(self, obstacle_id, top_rect, bottom_rect):
        self.events.append(("obstacle_moved", (obstacle_id, top_rect, bottom_rect)))

    def obstacle_removed(self, obstacle_id):
        self.events.append(("obstacle_removed", (obstacle_id,)))

    def score_changed(self, score):
        self.events.append(("score_changed", (score,)))

    def game_over(self):
        self.events.append(("game_over", ()))

    def game_started(self):
        self.events.append(("game_started", ()))


class ScriptedRandom:
    """Replays the given values, repeating the last one when exhausted."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def mid_gap_random():
    # 0.5 puts the gap centre at 270 on a 600 high play area: gap [200, 340]
    return ScriptedRandom(0.5)


@pytest.fixture
def make_controller(observer, mid_gap_random):
    def factory(config=None, width=400, height=600, **kwargs):
        kwargs.setdefault("random", mid_gap_random)
        controller = GameController(config=config, observer=observer, **kwargs)
        if width is not None:
            controller.on_resize(width, height)
        return controller
    return factory


@pytest.fixture
def controller(make_controller):
    return make_controller()
