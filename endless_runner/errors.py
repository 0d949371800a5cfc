"""Exceptions raised by the simulation core."""


class RunnerError(Exception):
    """Base class for all game errors."""


class MalformedLevelError(RunnerError):
    """The level has no chunk or platform to build on.

    This is a construction bug, not something to recover from at runtime.
    """


class MissingAnimationError(RunnerError):
    """An animation clip the player state machine needs was never loaded."""
