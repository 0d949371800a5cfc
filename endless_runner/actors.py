"""
Decorative actors that ride the treadmill: birds and distance markers.

None of this affects gameplay, so it draws from a plain random.Random
instead of the level's seeded generator.
"""
import math
import random
from typing import List

import pygame

from endless_runner.assets import AssetManager, AudioAsset
from endless_runner.config import (
    BIRD_CHANCE,
    BIRD_MAX_PER_PLATFORM,
    BIRD_SPEED_RANGE,
    BIRD_SPREAD,
    BIRD_TAKEOFF_X,
    BIRD_VOLUME,
)
from endless_runner.level import PlatformChunk


class Bird:
    """Sits on a platform until the player gets close, then flies off."""

    def __init__(self, position, assets: AssetManager, rng: random.Random):
        self.position = pygame.Vector3(position)
        self.flying = False
        self.elapsed = 0.0  # drives the flap sprite frames
        self.speed = rng.uniform(*BIRD_SPEED_RANGE)

        # Random direction that the bird will fly in
        sign = 1.0 if rng.random() * 2.0 - 1.0 >= 0 else -1.0
        self.facing = sign
        self.direction = pygame.Vector3(rng.uniform(0.25, 0.5) * sign, 0.5, 0).normalize()

        self.flap_sound = assets.sound(AudioAsset.BIRD)
        if self.flap_sound is not None:
            self.flap_sound.set_volume(BIRD_VOLUME)

    def update(self, dt: float):
        if not self.flying:
            self.check_distance()
            return

        self.elapsed += dt
        self.position += self.direction * (self.speed * dt)

    def check_distance(self):
        if self.position.x < BIRD_TAKEOFF_X:
            self.flying = True
            if self.flap_sound is not None:
                self.flap_sound.play()


class Marker:
    """Spinning marker at a fixed distance, e.g. where an earlier run ended."""

    def __init__(self, position):
        self.position = pygame.Vector3(position)
        self.rotation = 0.0

    def spin(self, dt: float):
        self.rotation = (self.rotation + dt) % math.tau


def spawn_birds(chunk: PlatformChunk, treadmill_travel: float, assets: AssetManager,
                rng: random.Random) -> List[Bird]:
    birds = []
    for platform in chunk.platforms:
        if rng.random() > BIRD_CHANCE:
            continue
        amount = math.ceil(rng.random() * BIRD_MAX_PER_PLATFORM)
        spread = platform.width * BIRD_SPREAD
        for _ in range(amount):
            x = rng.uniform(platform.position - spread, platform.position + spread) - treadmill_travel
            birds.append(Bird((x, platform.height, 0.0), assets, rng))
    return birds
