"""Render-side bookkeeping of what is currently in the world."""
from typing import Any, List


class Scene:
    """Ordered bag of drawable objects.

    The simulation only ever adds and removes; it never asks the scene
    anything back.
    """

    def __init__(self):
        self.objects: List[Any] = []

    def add(self, obj) -> None:
        self.objects.append(obj)

    def remove(self, obj) -> None:
        if obj in self.objects:
            self.objects.remove(obj)
