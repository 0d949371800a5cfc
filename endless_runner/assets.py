"""
Asset lookup for animations and sounds.

Everything here is optional from the game's point of view: a missing sound
is logged and skipped, a missing clip is only a problem once the player
actually asks for it.
"""
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

import pygame

from endless_runner.animation import AnimationClip
from endless_runner.config import ASSETS_PATH

logger = logging.getLogger(__name__)


class AnimationAsset(str, Enum):
    SPRINT = "sprint"
    JUMP_START = "jump_start"
    JUMP_LOOP = "jump_loop"
    JUMP_END = "jump_end"


class AudioAsset(str, Enum):
    STEP_A = "Bare Step Rug Hard A.wav"
    STEP_B = "Bare Step Rug Hard B.wav"
    STEP_C = "Bare Step Rug Hard C.wav"
    STEP_D = "Bare Step Rug Hard D.wav"
    STEP_E = "Bare Step Rug Hard E.wav"
    JUMP_A = "Jump Step Stone A.wav"
    JUMP_B = "Jump Step Stone B.wav"
    JUMP_C = "Jump Step Rug A.wav"
    JUMP_D = "Jump Step Rug B.wav"
    LAND_A = "Land Step Rug A.wav"
    LAND_B = "Land Step Rug B.wav"
    LAND_C = "Land Step Stone A.wav"
    LAND_D = "Land Step Stone B.wav"
    AIR = "Air Reverse Slow A.wav"
    SPLAT = "Concrete Trampoline.wav"
    AMBIENCE = "Windy Roadside Loop.wav"
    BIRD = "bird_flying.wav"


STEP_SOUNDS = (AudioAsset.STEP_A, AudioAsset.STEP_B, AudioAsset.STEP_C,
               AudioAsset.STEP_D, AudioAsset.STEP_E)
JUMP_SOUNDS = (AudioAsset.JUMP_A, AudioAsset.JUMP_B, AudioAsset.JUMP_C, AudioAsset.JUMP_D)
LAND_SOUNDS = (AudioAsset.LAND_A, AudioAsset.LAND_B, AudioAsset.LAND_C, AudioAsset.LAND_D)

# Clip lengths in seconds
DEFAULT_CLIPS = {
    AnimationAsset.SPRINT: 0.8,
    AnimationAsset.JUMP_START: 0.3,
    AnimationAsset.JUMP_LOOP: 0.6,
    AnimationAsset.JUMP_END: 0.35,
}


class AssetManager:
    def __init__(self, root: Union[str, Path] = ASSETS_PATH):
        self.root = Path(root)
        self.animations: Dict[AnimationAsset, AnimationClip] = {}
        self.sounds: Dict[AudioAsset, pygame.mixer.Sound] = {}

    def load(self) -> "AssetManager":
        self.load_animations()
        self.load_audio()
        return self

    def load_animations(self) -> None:
        for asset, duration in DEFAULT_CLIPS.items():
            self.animations[asset] = AnimationClip(asset.value, duration)

    def load_audio(self) -> None:
        if not pygame.mixer.get_init():
            logger.warning("Audio mixer not initialised, playing without sound")
            return

        audio_dir = self.root / "audio"
        for asset in AudioAsset:
            path = audio_dir / asset.value
            if not path.exists():
                logger.warning("Sound %s not found at %s", asset.name, path)
                continue
            try:
                self.sounds[asset] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                logger.warning("Could not load sound %s: %s", path, exc)

        logger.info("Loaded %d of %d sounds", len(self.sounds), len(AudioAsset))

    def animation(self, key: AnimationAsset) -> Optional[AnimationClip]:
        return self.animations.get(key)

    def sound(self, key: AudioAsset) -> Optional[pygame.mixer.Sound]:
        return self.sounds.get(key)
