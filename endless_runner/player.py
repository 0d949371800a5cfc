"""
The runner: gravity, jumping, landing, falling.

The physics lives in a plain dataclass. Player wraps it with the animation
state machine and sound effects, and has no idea how it gets drawn.

States (grounded is implied when neither flag is set):

    GROUNDED --jump()--> JUMPING
    GROUNDED --fall()--> FALLING
    JUMPING / FALLING --land()--> GROUNDED
"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import pygame

from endless_runner.animation import Animator, LoopMode
from endless_runner.assets import (
    JUMP_SOUNDS,
    LAND_SOUNDS,
    STEP_SOUNDS,
    AnimationAsset,
    AssetManager,
    AudioAsset,
)
from endless_runner.bounds import Box3
from endless_runner.config import (
    AIR_SOUND_DELAY,
    GRAVITY,
    JUMP_VELOCITY,
    PLAYER_BOUNDS_CENTER,
    PLAYER_BOUNDS_SIZE,
    RUN_ANIM_SPEEDUP,
    STEP_INTERVAL,
)


# finished clip -> (clip to play next, allowed mid-jump)
CLIP_TRANSITIONS = {
    AnimationAsset.JUMP_START: (AnimationAsset.JUMP_LOOP, True),
    AnimationAsset.JUMP_END: (AnimationAsset.SPRINT, False),
}


class PlayerState(Enum):
    GROUNDED = "grounded"
    JUMPING = "jumping"
    FALLING = "falling"


@dataclass
class PlayerPhysics:
    position: pygame.Vector3 = field(default_factory=pygame.Vector3)
    velocity: pygame.Vector3 = field(default_factory=pygame.Vector3)
    jumping: bool = False
    falling: bool = False

    @property
    def state(self) -> PlayerState:
        if self.jumping:
            return PlayerState.JUMPING
        if self.falling:
            return PlayerState.FALLING
        return PlayerState.GROUNDED

    @property
    def airborne(self) -> bool:
        return self.jumping or self.falling


class Player:
    LOCAL_BOUNDS = Box3.from_center_and_size(PLAYER_BOUNDS_CENTER, PLAYER_BOUNDS_SIZE)

    def __init__(self, assets: AssetManager, sound_random: Optional[random.Random] = None):
        self.physics = PlayerPhysics()
        self.gravity = pygame.Vector3(0, -GRAVITY, 0)
        self.running_anim_speed = 1.0
        self.sounds_paused = False
        self.step_timer = 0.0
        self.air_sound_timer: Optional[float] = None
        self._air_channel: Optional[pygame.mixer.Channel] = None
        self._random = sound_random or random.Random()

        # Animations
        self.animator = Animator(assets.animations)
        self.animator.create_action(AnimationAsset.SPRINT, time_scale=0.8)
        self.animator.create_action(AnimationAsset.JUMP_START, loop=LoopMode.ONCE,
                                    clamp_when_finished=True)
        self.animator.create_action(AnimationAsset.JUMP_LOOP, loop=LoopMode.REPEAT)
        self.animator.create_action(AnimationAsset.JUMP_END, loop=LoopMode.ONCE)
        self.play_animation(AnimationAsset.SPRINT)

        # SFX, missing ones are simply left out
        self.step_sounds = self._collect(assets, STEP_SOUNDS)
        self.jump_sounds = self._collect(assets, JUMP_SOUNDS)
        self.land_sounds = self._collect(assets, LAND_SOUNDS)
        self.air_sound = assets.sound(AudioAsset.AIR)
        self.splat_sound = assets.sound(AudioAsset.SPLAT)

    @staticmethod
    def _collect(assets: AssetManager, keys) -> List[pygame.mixer.Sound]:
        return [s for s in (assets.sound(k) for k in keys) if s is not None]

    # --------------------------- Physics state ------------------------
    @property
    def position(self) -> pygame.Vector3:
        return self.physics.position

    @property
    def velocity(self) -> pygame.Vector3:
        return self.physics.velocity

    @property
    def jumping(self) -> bool:
        return self.physics.jumping

    @property
    def falling(self) -> bool:
        return self.physics.falling

    @property
    def state(self) -> PlayerState:
        return self.physics.state

    def bounds(self) -> Box3:
        return Box3(self.LOCAL_BOUNDS.min, self.LOCAL_BOUNDS.max)

    def world_bounds(self) -> Box3:
        return self.LOCAL_BOUNDS.translated(self.physics.position)

    # --------------------------- Transitions --------------------------
    def jump(self):
        if self.physics.airborne:
            return
        self.physics.velocity.y += JUMP_VELOCITY
        self.physics.jumping = True
        self.play_animation(AnimationAsset.JUMP_START)
        self._play_random(self.jump_sounds)
        self._stop_air()
        self.air_sound_timer = AIR_SOUND_DELAY

    def land(self):
        if self.physics.airborne:
            self.play_animation(AnimationAsset.JUMP_END)
            self._stop_air()
            self._play_random(self.land_sounds)

            self.physics.jumping = False
            self.physics.falling = False

        self.physics.velocity.y = 0

    def fall(self):
        if self.physics.airborne:
            return
        self.play_animation(AnimationAsset.JUMP_LOOP)
        self.physics.falling = True
        self._air_channel = self._restart(self.air_sound)

    def splat(self):
        self._stop_air()
        self._restart(self.splat_sound)

    def pause_sounds(self):
        self.sounds_paused = True
        if self._air_channel is not None:
            self._air_channel.pause()

    def resume_sounds(self):
        self.sounds_paused = False
        if self._air_channel is not None:
            self._air_channel.unpause()

    def stop_sounds(self):
        """Silence everything this player may have left playing."""
        self._stop_air()
        self.air_sound_timer = None
        for sound in self.step_sounds + self.jump_sounds + self.land_sounds:
            sound.stop()
        self._stop(self.splat_sound)

    # --------------------------- Per tick -----------------------------
    def update(self, dt: float, treadmill_speed: float):
        # Gravity applies even on the ground, collision zeroes it again
        self.physics.velocity += self.gravity * dt
        self.physics.position += self.physics.velocity * dt

        self.running_anim_speed += treadmill_speed * dt * RUN_ANIM_SPEEDUP
        for key in (AnimationAsset.SPRINT, AnimationAsset.JUMP_END):
            action = self.animator.action(key)
            if action is not None:
                action.time_scale = self.running_anim_speed

        if not self.physics.airborne:
            self.step_timer -= dt
            if self.step_timer <= 0:
                self._play_random(self.step_sounds)
                self.step_timer = STEP_INTERVAL

        if self.air_sound_timer is not None:
            self.air_sound_timer -= dt
            if self.air_sound_timer <= 0:
                self.air_sound_timer = None
                if self.physics.jumping and not self.sounds_paused:
                    self._air_channel = self._restart(self.air_sound)

        self.animator.update(dt)

    def process_animation_events(self):
        """Apply clip-finished transitions queued during this tick."""
        for key in self.animator.drain_finished():
            transition = CLIP_TRANSITIONS.get(key)
            # A clip that finished while fading out no longer drives the state
            if transition is None or key != self.animator.current:
                continue
            next_clip, while_jumping = transition
            if self.physics.jumping and not while_jumping:
                continue
            self.play_animation(next_clip)

    def play_animation(self, key: AnimationAsset):
        self.animator.play(key, hard_cut=key is AnimationAsset.SPRINT)

    # --------------------------- Sound helpers ------------------------
    def _play_random(self, sounds: List[pygame.mixer.Sound]):
        if not sounds:
            return
        self._restart(self._random.choice(sounds))

    @staticmethod
    def _stop(sound: Optional[pygame.mixer.Sound]):
        if sound is not None:
            sound.stop()

    def _stop_air(self):
        self._stop(self.air_sound)
        self._air_channel = None

    @staticmethod
    def _restart(sound: Optional[pygame.mixer.Sound]) -> Optional[pygame.mixer.Channel]:
        if sound is None:
            return None
        sound.stop()
        return sound.play()
