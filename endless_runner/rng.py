"""Deterministic pseudo-random numbers for everything that shapes the level."""
import math

MODULUS = 0x100000000
MULTIPLIER = 1664525
INCREMENT = 1013904223


class SeededRandom:
    """Linear congruential generator (Numerical Recipes parameters).

    The same seed always yields the same stream, on any platform.
    """

    def __init__(self, seed: int):
        self.seed = seed & 0xFFFFFFFF

    def next_seed(self) -> int:
        self.seed = (self.seed * MULTIPLIER + INCREMENT) % MODULUS
        return self.seed

    def random(self) -> float:
        """Return a float in [0, 1)."""
        return self.next_seed() / MODULUS

    def random_int(self, lo: int, hi: int) -> int:
        """Return an int in [lo, hi], both ends included."""
        return math.floor(self.random() * (hi - lo + 1)) + lo

    def random_float(self, lo: float, hi: float) -> float:
        """Return a float in [lo, hi)."""
        return self.random() * (hi - lo) + lo
