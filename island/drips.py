"""
Falling drips released by the cloud.
"""

import logging
from dataclasses import dataclass

from .config import DRIP_START_ROW, GRAVITY, SUBROWS

logger = logging.getLogger(__name__)


@dataclass
class Drip:
    active: bool = False
    x: int = 0
    y: float = 0.0  # Sub-rows above the bottom of the screen
    speed: float = 0.0

    def row(self, term_height):
        """Screen row the drip is drawn on."""
        return int((term_height * SUBROWS - self.y) // SUBROWS)


class DripPool:
    """Reusable drips; inactive slots are handed out again before the pool grows.

    By default each drip tests and disturbs the water in its own column.
    With ``shared_impact_column`` every drip uses the column of the first
    pooled drip instead.
    """

    def __init__(self, extent, shared_impact_column=False):
        if extent is None:
            raise ValueError("DripPool requires a terminal extent")
        self.extent = extent
        self.shared_impact_column = shared_impact_column
        self.drips = []

    def __len__(self):
        return len(self.drips)

    def __iter__(self):
        return iter(self.drips)

    def active(self):
        return [d for d in self.drips if d.active]

    def spawn(self, column):
        for drip in self.drips:
            if not drip.active:
                break
        else:
            drip = Drip()
            self.drips.append(drip)
            logger.debug(f"Drip pool grew to {len(self.drips)}")

        drip.active = True
        drip.x = column
        drip.y = float((self.extent.height - DRIP_START_ROW) * SUBROWS)
        drip.speed = 0.0
        return drip

    def _impact_column(self, drip, field):
        column = self.drips[0].x if self.shared_impact_column else drip.x
        return min(max(column, 0), field.width - 1)

    def advance(self, field):
        if field is None:
            raise ValueError("DripPool.advance requires a surface field")
        if field.width == 0:
            return

        for drip in self.drips:
            if not drip.active:
                continue

            drip.speed -= GRAVITY
            if drip.y + drip.speed < 0:
                drip.y = 0.0
            else:
                drip.y += drip.speed

            column = self._impact_column(drip, field)
            if drip.y <= field.water_level(column):
                drip.active = False
                field.apply_impulse(column, drip.speed)
                logger.debug(f"Drip landed in column {column} at speed {drip.speed:.2f}")
