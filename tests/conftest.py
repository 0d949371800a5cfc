import os
import random

# Headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from endless_runner.assets import AssetManager
from endless_runner.game import FrameClock, GameState
from endless_runner.player import Player


class FakeChannel:
    def __init__(self):
        self.paused = False
        self.stopped = False

    def pause(self):
        self.paused = True

    def unpause(self):
        self.paused = False

    def stop(self):
        self.stopped = True


class FakeSound:
    """Stands in for pygame.mixer.Sound and records what was asked of it."""

    def __init__(self):
        self.plays = 0
        self.stops = 0
        self.loops = None
        self.volume = None
        self.channel = FakeChannel()

    def play(self, loops=0):
        self.plays += 1
        self.loops = loops
        return self.channel

    def stop(self):
        self.stops += 1

    def set_volume(self, volume):
        self.volume = volume


class ManualTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def assets(tmp_path):
    manager = AssetManager(root=tmp_path)
    manager.load_animations()
    return manager


@pytest.fixture
def player(assets):
    return Player(assets, sound_random=random.Random(0))


@pytest.fixture
def manual_time():
    return ManualTime()


@pytest.fixture
def game(assets, manual_time):
    return GameState(assets, clock=FrameClock(manual_time), fx_random=random.Random(0))
