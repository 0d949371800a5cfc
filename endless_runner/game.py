"""
Per-frame orchestration of the treadmill, the player and the level.

One call to GameState.tick(dt) is one frame. Within a frame the order is
fixed:

    treadmill -> player physics -> game-over check -> collisions
    -> level extension -> decorative actors -> animation events

Rendering is left to whoever drives the loop.
"""
import logging
import random
import time
from collections import defaultdict
from typing import Callable, Dict, List, Optional

import pygame

from endless_runner.actors import Bird, Marker, spawn_birds
from endless_runner.assets import AssetManager, AudioAsset
from endless_runner.collision import Contact, resolve_collisions
from endless_runner.config import (
    AMBIENCE_VOLUME,
    CHUNK_SIZE,
    INITIAL_CHUNK_JUMP_VELOCITY,
    JUMP_LEEWAY,
    JUMP_VELOCITY,
    MAX_FRAME_DT,
    PLAYER_HEIGHT,
    PRUNE_DISTANCE,
    SEED,
    START_TREADMILL_SPEED,
    TREADMILL_ACCELERATION,
    VIEW_SIZE,
)
from endless_runner.level import Level, PlatformBody, PlatformChunk, generate_chunk
from endless_runner.player import Player
from endless_runner.rng import SeededRandom
from endless_runner.scene import Scene

logger = logging.getLogger(__name__)

GAME_PAUSED = "game-paused"
GAME_RESUMED = "game-resumed"
GAME_OVER = "game-over"


class FrameClock:
    """Wall-clock delta between frames that forgets time spent stopped."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter):
        self._time = time_source
        self._last = 0.0
        self.running = False

    def start(self):
        self._last = self._time()
        self.running = True

    def stop(self):
        self.running = False

    def get_delta(self) -> float:
        if not self.running:
            return 0.0
        now = self._time()
        delta = now - self._last
        self._last = now
        return delta


class GameState:
    def __init__(self, assets: AssetManager, scene: Optional[Scene] = None, *,
                 seed: int = SEED, view_size: float = VIEW_SIZE,
                 clock: Optional[FrameClock] = None,
                 fx_random: Optional[random.Random] = None):
        self.assets = assets
        self.scene = scene if scene is not None else Scene()
        self.seed = seed
        self.view_size = view_size
        self.clock = clock or FrameClock()
        self.rng = SeededRandom(seed)
        self.fx_random = fx_random or random.Random()

        self.running = False
        self.game_over = False
        self.treadmill_speed = START_TREADMILL_SPEED
        self.treadmill_travel = 0.0
        self.background_offset = 0.0
        self.last_contact: Optional[Contact] = None

        self.bodies: List[PlatformBody] = []
        self.birds: List[Bird] = []
        self.markers: List[Marker] = []
        self._listeners: Dict[str, List[Callable]] = defaultdict(list)

        self.player = Player(assets, sound_random=self.fx_random)
        self.scene.add(self.player)

        self.ambience = assets.sound(AudioAsset.AMBIENCE)
        self._ambience_channel: Optional[pygame.mixer.Channel] = None
        if self.ambience is not None:
            self.ambience.set_volume(AMBIENCE_VOLUME)

        self.level = Level.starting()
        self._add_bodies(self.level.last_chunk())

        # The first chunk is planned against a weaker jump to ease the player in
        chunk = generate_chunk(self.level, self.treadmill_speed, self.view_size,
                               INITIAL_CHUNK_JUMP_VELOCITY, CHUNK_SIZE, self.rng)
        self.level.append(chunk)
        self._add_bodies(chunk)

        logger.info("New game, seed %d", seed)

    # --------------------------- Events -------------------------------
    def on(self, event: str, callback: Callable) -> None:
        self._listeners[event].append(callback)

    def _fire(self, event: str, payload=None) -> None:
        for callback in list(self._listeners[event]):
            callback(payload)

    # --------------------------- Control ------------------------------
    def play(self):
        if self.running:
            return
        self.clock.start()
        self.running = True
        if self.ambience is not None:
            if self._ambience_channel is None:
                self._ambience_channel = self.ambience.play(loops=-1)
            else:
                self._ambience_channel.unpause()
        self.player.resume_sounds()
        logger.info("Playing")
        self._fire(GAME_RESUMED)

    def pause(self):
        if not self.running:
            return
        self.clock.stop()
        self.running = False
        if self._ambience_channel is not None:
            self._ambience_channel.pause()
        self.player.pause_sounds()
        logger.info("Paused at distance %.2f", self.distance_travelled())
        self._fire(GAME_PAUSED)

    def stop(self):
        """Tear down a game that is being replaced, releasing its channels."""
        self.pause()
        if self._ambience_channel is not None:
            self._ambience_channel.stop()
            self._ambience_channel = None
        self.player.stop_sounds()
        logger.info("Stopped")

    def jump(self):
        self.player.jump()

    def update(self):
        """Advance one frame by the real time since the last one."""
        if not self.running:
            return
        dt = min(self.clock.get_delta(), MAX_FRAME_DT)
        self.tick(dt)

    # --------------------------- Frame --------------------------------
    def tick(self, dt: float):
        self.update_treadmill(dt)

        self.player.update(dt, self.treadmill_speed)

        if self.is_player_off_screen():
            self.pause()
            self.on_game_over()

        self.last_contact = resolve_collisions(self.player, self.bodies)

        self.generate_new_chunk()

        self.update_birds(dt)
        self.prune_bodies()

        self.player.process_animation_events()

    def update_treadmill(self, dt: float):
        # Treadmill is always speeding up
        self.treadmill_speed += dt * TREADMILL_ACCELERATION

        movement = self.treadmill_speed * dt

        for body in self.bodies:
            body.x -= movement

        for marker in self.markers:
            marker.position.x -= movement
            marker.spin(dt)

        for bird in self.birds:
            bird.position.x -= movement

        self.treadmill_travel += movement
        self.background_offset += movement

    def is_player_off_screen(self) -> bool:
        return self.player.position.y + PLAYER_HEIGHT < -self.view_size

    def distance_travelled(self) -> float:
        return self.treadmill_travel - abs(self.player.position.x)

    def on_game_over(self):
        if self.game_over:
            return

        self.player.splat()
        distance = self.distance_travelled()
        logger.info("GAME OVER! Distance travelled: %.2f", distance)
        self.game_over = True
        self._fire(GAME_OVER, distance)

    # --------------------------- Level --------------------------------
    def generate_new_chunk(self) -> Optional[PlatformChunk]:
        last_chunk = self.level.last_chunk()

        if last_chunk.median_position > self.treadmill_travel:
            return None

        chunk = generate_chunk(self.level, self.treadmill_speed, self.view_size,
                               JUMP_VELOCITY * JUMP_LEEWAY, CHUNK_SIZE, self.rng)

        for bird in spawn_birds(chunk, self.treadmill_travel, self.assets, self.fx_random):
            self.birds.append(bird)
            self.scene.add(bird)

        self.level.append(chunk)
        self._add_bodies(chunk)
        logger.debug("Level extended to %d platforms at travel %.2f",
                     self.level.platform_count(), self.treadmill_travel)
        return chunk

    def _add_bodies(self, chunk: PlatformChunk):
        for platform in chunk.platforms:
            body = PlatformBody(platform, platform.position - self.treadmill_travel)
            self.bodies.append(body)
            self.scene.add(body)

    def prune_bodies(self):
        """Forget platform bodies that have scrolled far off the left edge.

        The logical level keeps every chunk; only the world-space bodies go.
        """
        kept = []
        for body in self.bodies:
            if body.right_edge < -PRUNE_DISTANCE:
                self.scene.remove(body)
            else:
                kept.append(body)
        if len(kept) != len(self.bodies):
            logger.debug("Pruned %d platform bodies", len(self.bodies) - len(kept))
            self.bodies = kept

    # --------------------------- Actors -------------------------------
    def update_birds(self, dt: float):
        kept = []
        for bird in self.birds:
            bird.update(dt)
            if bird.position.y >= self.view_size:
                self.scene.remove(bird)
            else:
                kept.append(bird)
        self.birds = kept

    def add_marker(self, distance: float) -> Marker:
        """Place a marker at a level distance, e.g. a previous run's best."""
        marker = Marker((distance - self.treadmill_travel, 0.0, 0.0))
        self.markers.append(marker)
        self.scene.add(marker)
        return marker
