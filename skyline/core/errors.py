"""
errors.py
---------
Exception types raised by the presentation shell.

Initialization and required-asset failures are fatal; optional assets never
raise and are represented by a None handle instead.
"""


class SkylineError(Exception):
    """Base class for all game errors."""


class InitializationError(SkylineError):
    """A pygame subsystem, the window, the mixer or a screen layout failed to start."""


class AssetLoadError(SkylineError):
    """A required asset could not be loaded."""

    def __init__(self, path, reason=""):
        self.path = path
        self.reason = reason
        message = f"Failed to load required asset '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
