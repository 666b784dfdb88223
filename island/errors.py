"""
Exceptions raised by the island animation.
"""


class IslandError(Exception):
    """Base class for fatal animation errors."""


class TerminalUnavailableError(IslandError):
    """The terminal size could not be determined."""
