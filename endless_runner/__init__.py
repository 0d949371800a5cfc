"""
Endless runner on a treadmill.

The world scrolls toward the player while a seeded generator keeps laying
platforms ahead of it. Every platform is placed so it can be reached with one
jump, given the gravity, the jump impulse and the current treadmill speed.
"""

__version__ = "0.1.0"
