import math
import random

import pytest

from endless_runner.actors import Bird, Marker, spawn_birds
from endless_runner.assets import AudioAsset
from endless_runner.config import BIRD_TAKEOFF_X
from endless_runner.level import Platform, PlatformChunk
from tests.conftest import FakeSound


class Fixed(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def test_bird_waits_until_player_is_close(assets):
    flap = FakeSound()
    assets.sounds[AudioAsset.BIRD] = flap
    bird = Bird((BIRD_TAKEOFF_X + 2, 1.0, 0), assets, random.Random(3))
    assert flap.volume == 0.5

    bird.update(0.1)
    assert not bird.flying
    assert tuple(bird.position) == (BIRD_TAKEOFF_X + 2, 1.0, 0)

    bird.position.x = BIRD_TAKEOFF_X - 0.1
    bird.update(0.1)
    assert bird.flying
    assert flap.plays == 1

    y = bird.position.y
    bird.update(0.1)
    assert bird.position.y > y
    assert bird.elapsed == pytest.approx(0.1)


def test_bird_flight_direction(assets):
    bird = Bird((0, 0, 0), assets, random.Random(11))
    assert bird.direction.length() == pytest.approx(1.0)
    assert bird.direction.y > 0
    assert 10 <= bird.speed <= 14
    assert math.copysign(1, bird.direction.x) == bird.facing


def test_bird_without_sound(assets):
    bird = Bird((0, 0, 0), assets, random.Random(1))
    bird.update(0.1)
    assert bird.flying


def test_spawn_birds_on_every_platform(assets):
    chunk = PlatformChunk(20.0, (Platform(10.0, 8.0, 2.0), Platform(30.0, 6.0, -1.0)))
    birds = spawn_birds(chunk, treadmill_travel=5.0, assets=assets, rng=Fixed(0.1))

    assert len(birds) == 2
    first, second = birds
    assert first.position.y == 2.0
    assert second.position.y == -1.0
    assert 10.0 - 3.6 - 5.0 <= first.position.x <= 10.0 + 3.6 - 5.0
    assert first.facing == -1.0


def test_spawn_birds_can_skip(assets):
    chunk = PlatformChunk(20.0, (Platform(10.0, 8.0, 2.0),))
    assert spawn_birds(chunk, 0.0, assets, Fixed(0.9)) == []


def test_marker_spins_and_wraps():
    marker = Marker((4, 0, 0))
    marker.spin(1.0)
    assert marker.rotation == pytest.approx(1.0)
    marker.spin(2 * math.pi)
    assert marker.rotation == pytest.approx(1.0)
