"""
Closed-form jump planning.

Given how fast the treadmill moves and how hard the player can jump, work out
how far ahead the next platform may start so a full jump still lands on it.
"""
import math
from typing import NamedTuple

from endless_runner.config import GRAVITY, HORIZONTAL_LEEWAY
from endless_runner.rng import SeededRandom


class Reach(NamedTuple):
    distance: float      # edge-to-edge gap, may be negative
    adjusted_y1: float   # target height, pulled down to the apex if needed


def apex_height(y0: float, vy_max: float, gravity: float = GRAVITY) -> float:
    """Highest point of a full jump that starts at height y0."""
    return y0 + (vy_max * vy_max) / (2 * gravity)


def horizontal_distance_with_vy_max(vx: float, vy_max: float, y0: float, y1: float,
                                    rng: SeededRandom, gravity: float = GRAVITY) -> Reach:
    """Horizontal distance covered by a full jump from y0 that comes down at y1.

    Targets above the apex are clamped to it. Targets below the start only
    count a random part of the descent, which keeps drops from turning into
    very long gaps.
    """
    max_height = apex_height(y0, vy_max, gravity)

    adjusted_y1 = y1
    if y1 > max_height:
        adjusted_y1 = max_height

    delta_y = adjusted_y1 - y0
    time_to_apex = vy_max / gravity

    if delta_y >= 0:
        # Ascending jump: rise to the apex, then fall onto the target
        fall_distance = max_height - adjusted_y1
    else:
        rnd = rng.random()
        fall_distance = max_height - adjusted_y1 * rnd * 0.9

    # Low platforms have a negative apex; the discounted drop can undershoot it
    fall_distance = max(0.0, fall_distance)

    time_to_fall = math.sqrt((2 * fall_distance) / gravity)
    time = time_to_apex + time_to_fall

    distance = vx * time - HORIZONTAL_LEEWAY
    return Reach(distance, adjusted_y1)
