"""
Level data and the chunk generator.

A level is an append-only strip of chunks. Each chunk is a handful of
platforms placed left to right, each one reachable from the one before it.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from endless_runner.bounds import Box3
from endless_runner.config import (
    GRAVITY,
    MEDIAN_DIVISOR,
    PLATFORM_DEPTH,
    PLATFORM_WIDTH_RANGE,
    STARTING_PLATFORM,
)
from endless_runner.errors import MalformedLevelError
from endless_runner.reachability import apex_height, horizontal_distance_with_vy_max
from endless_runner.rng import SeededRandom

logger = logging.getLogger(__name__)


# ----------------------------- Level Types ----------------------------
@dataclass(frozen=True)
class Platform:
    position: float  # centre x, in level coordinates
    width: float
    height: float    # y of the top face

    @property
    def right_edge(self) -> float:
        return self.position + self.width * 0.5


@dataclass(frozen=True)
class PlatformChunk:
    median_position: float
    platforms: Tuple[Platform, ...]


@dataclass
class Level:
    chunks: List[PlatformChunk] = field(default_factory=list)

    @classmethod
    def starting(cls) -> "Level":
        position, width, height = STARTING_PLATFORM
        start = Platform(position, width, height)
        return cls([PlatformChunk(median_position=position, platforms=(start,))])

    def last_chunk(self) -> PlatformChunk:
        if not self.chunks:
            raise MalformedLevelError("malformed level structure: no chunks")
        return self.chunks[-1]

    def last_platform(self) -> Platform:
        chunk = self.last_chunk()
        if not chunk.platforms:
            raise MalformedLevelError("malformed level structure: last chunk is empty")
        return chunk.platforms[-1]

    def append(self, chunk: PlatformChunk) -> None:
        if not chunk.platforms:
            raise MalformedLevelError("cannot append an empty chunk")
        if self.chunks and self.chunks[-1].platforms:
            last = self.chunks[-1].platforms[-1]
            if not last.position < chunk.platforms[0].position:
                raise MalformedLevelError(
                    f"chunk starts at {chunk.platforms[0].position:.2f}, "
                    f"behind the last platform at {last.position:.2f}")
        self.chunks.append(chunk)

    def platform_count(self) -> int:
        return sum(len(c.platforms) for c in self.chunks)


# ----------------------------- World Bodies ---------------------------
@dataclass
class PlatformBody:
    """World-space stand-in for a platform. Slides left with the treadmill."""
    platform: Platform
    x: float

    def bounds(self) -> Box3:
        height = self.platform.height
        return Box3.from_center_and_size(
            (self.x, height * 0.5 - PLATFORM_DEPTH * 0.5, 0.0),
            (self.platform.width, height + PLATFORM_DEPTH, 1.0),
        )

    @property
    def right_edge(self) -> float:
        return self.x + self.platform.width * 0.5


# ----------------------------- Generator ------------------------------
def generate_chunk(level: Level, current_speed: float, height_radius: float,
                   jump_velocity: float, count: int, rng: SeededRandom,
                   gravity: float = GRAVITY) -> PlatformChunk:
    """Place `count` platforms after the last one in `level`.

    The level itself is not modified; the caller appends the chunk.
    """
    last = level.last_platform()

    platforms = []
    median_position = 0.0

    for _ in range(count):
        edge = last.right_edge

        width = rng.random_float(*PLATFORM_WIDTH_RANGE)

        max_reachable_height = apex_height(last.height, jump_velocity, gravity)

        # Random absolute height, never above the jump apex, always on screen
        desired_height = rng.random_float(-height_radius, height_radius)
        desired_height = min(desired_height, max_reachable_height)
        desired_height = max(-height_radius + 1, min(desired_height, height_radius - 1))

        distance, height = horizontal_distance_with_vy_max(
            current_speed, jump_velocity, last.height, desired_height, rng, gravity)

        platform = Platform(position=edge + distance + width * 0.5, width=width, height=height)
        platforms.append(platform)
        last = platform
        median_position += platform.position

    median_position /= MEDIAN_DIVISOR

    logger.debug("Generated %d platforms at speed %.2f, median %.2f",
                 count, current_speed, median_position)
    return PlatformChunk(median_position=median_position, platforms=tuple(platforms))
