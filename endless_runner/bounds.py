"""Axis-aligned bounding boxes on top of pygame's Vector3."""
import math
from typing import Sequence, Union

import pygame

VectorLike = Union[pygame.Vector3, Sequence[float]]


class Box3:
    """Axis-aligned box given by its min and max corners."""

    __slots__ = ("min", "max")

    def __init__(self, lo: VectorLike, hi: VectorLike):
        self.min = pygame.Vector3(lo)
        self.max = pygame.Vector3(hi)

    @classmethod
    def empty(cls) -> "Box3":
        return cls((math.inf, math.inf, math.inf), (-math.inf, -math.inf, -math.inf))

    @classmethod
    def from_center_and_size(cls, center: VectorLike, size: VectorLike) -> "Box3":
        half = pygame.Vector3(size) * 0.5
        center = pygame.Vector3(center)
        return cls(center - half, center + half)

    def __repr__(self):
        return f"Box3(min={tuple(self.min)}, max={tuple(self.max)})"

    def translated(self, offset: VectorLike) -> "Box3":
        offset = pygame.Vector3(offset)
        return Box3(self.min + offset, self.max + offset)

    def is_empty(self) -> bool:
        # Touching boxes (max == min) still count as non-empty
        return (self.max.x < self.min.x or self.max.y < self.min.y
                or self.max.z < self.min.z)

    def intersect(self, other: "Box3") -> "Box3":
        lo = (max(self.min.x, other.min.x), max(self.min.y, other.min.y), max(self.min.z, other.min.z))
        hi = (min(self.max.x, other.max.x), min(self.max.y, other.max.y), min(self.max.z, other.max.z))
        box = Box3(lo, hi)
        if box.is_empty():
            return Box3.empty()
        return box

    def intersects(self, other: "Box3") -> bool:
        return not self.intersect(other).is_empty()

    def size(self) -> pygame.Vector3:
        if self.is_empty():
            return pygame.Vector3(0, 0, 0)
        return self.max - self.min

    def center(self) -> pygame.Vector3:
        return (self.min + self.max) * 0.5
