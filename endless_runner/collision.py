"""Player versus platform collision, resolved once per tick."""
from enum import Enum
from typing import Iterable

from endless_runner.config import OVERLAP_EPSILON
from endless_runner.level import PlatformBody
from endless_runner.player import Player


class Contact(Enum):
    LANDED = "landed"
    BLOCKED = "blocked"
    AIRBORNE = "airborne"


def resolve_collisions(player: Player, bodies: Iterable[PlatformBody]) -> Contact:
    """Push the player out of the first platform it overlaps.

    Platforms are checked in the order they were generated and the first
    real overlap wins, even if a later one is closer.
    """
    player_bounds = player.world_bounds()

    for body in bodies:
        overlap = player_bounds.intersect(body.bounds()).size()

        if overlap.length() < OVERLAP_EPSILON:
            continue

        # Push out along the axis with the smaller overlap
        if overlap.y < overlap.x:
            player.position.y += overlap.y
            player.land()
            return Contact.LANDED

        # Ran into the side of a platform, the treadmill drags us back
        player.position.x -= overlap.x
        return Contact.BLOCKED

    player.fall()
    return Contact.AIRBORNE
