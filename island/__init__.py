"""
Island - terminal animation of an island, a dripping cloud and rippling water.
"""

from .cloud import Cloud
from .drips import Drip, DripPool
from .errors import IslandError, TerminalUnavailableError
from .render import ColorMode, ColorState, Compositor
from .terminal import AnsiWriter, TerminalExtent
from .water import SurfaceField

__all__ = [
    "AnsiWriter",
    "Cloud",
    "ColorMode",
    "ColorState",
    "Compositor",
    "Drip",
    "DripPool",
    "IslandError",
    "SurfaceField",
    "TerminalExtent",
    "TerminalUnavailableError",
]
