"""
Animation clip playback for the player.

Clips are driven by the game clock. When a play-once clip runs out, the
animator queues a "finished" event instead of calling back, and the owner
drains the queue at the end of the tick.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Hashable, List, Mapping, Optional

from endless_runner.config import CROSSFADE_TIME
from endless_runner.errors import MissingAnimationError


class LoopMode(Enum):
    ONCE = "once"
    REPEAT = "repeat"


@dataclass(frozen=True)
class AnimationClip:
    name: str
    duration: float


class Action:
    """Playback state of one clip."""

    def __init__(self, clip: AnimationClip, loop: LoopMode = LoopMode.REPEAT,
                 clamp_when_finished: bool = False, time_scale: float = 1.0):
        self.clip = clip
        self.loop = loop
        self.clamp_when_finished = clamp_when_finished
        self.time_scale = time_scale
        self.time = 0.0
        self.weight = 1.0
        self.running = False
        self.fade_out = 0.0  # seconds left of a cross-fade, 0 when not fading

    def __repr__(self):
        return f"Action({self.clip.name!r}, time={self.time:.2f}, running={self.running})"

    def reset(self) -> "Action":
        self.time = 0.0
        self.time_scale = 1.0
        self.weight = 1.0
        self.fade_out = 0.0
        return self

    def play(self) -> "Action":
        self.running = True
        return self

    def stop(self) -> "Action":
        self.running = False
        self.fade_out = 0.0
        return self

    def advance(self, dt: float) -> bool:
        """Move the playhead. Returns True when a play-once clip just ended."""
        if not self.running:
            return False

        if self.fade_out > 0.0:
            self.fade_out = max(0.0, self.fade_out - dt)
            self.weight = self.fade_out / CROSSFADE_TIME
            if self.fade_out == 0.0:
                self.stop()
                return False

        self.time += dt * self.time_scale
        duration = self.clip.duration

        if self.loop is LoopMode.REPEAT:
            if duration > 0:
                self.time %= duration
            return False

        if self.time >= duration:
            self.time = duration if self.clamp_when_finished else 0.0
            self.running = False
            return True
        return False


class Animator:
    """Owns one action per registered clip and tracks the current one."""

    def __init__(self, clips: Mapping[Hashable, AnimationClip]):
        self.clips = clips
        self.actions: Dict[Hashable, Action] = {}
        self.current: Optional[Hashable] = None
        self._finished: List[Hashable] = []

    def create_action(self, key, loop: LoopMode = LoopMode.REPEAT,
                      clamp_when_finished: bool = False,
                      time_scale: float = 1.0) -> Optional[Action]:
        clip = self.clips.get(key)
        if clip is None:
            return None
        action = Action(clip, loop, clamp_when_finished, time_scale)
        self.actions[key] = action
        return action

    def action(self, key) -> Optional[Action]:
        return self.actions.get(key)

    def play(self, key, hard_cut: bool = False) -> Action:
        next_action = self.actions.get(key)
        if next_action is None:
            raise MissingAnimationError(f"Could not find action with name {key}")

        previous = self.actions.get(self.current) if self.current is not None else None
        next_action.reset()

        if hard_cut:
            if previous is not None:
                previous.stop()
        elif previous is not None and previous is not next_action:
            previous.fade_out = CROSSFADE_TIME
        next_action.play()

        self.current = key
        return next_action

    def update(self, dt: float) -> None:
        for key, action in self.actions.items():
            if action.advance(dt):
                self._finished.append(key)

    def drain_finished(self) -> List[Hashable]:
        finished, self._finished = self._finished, []
        return finished
