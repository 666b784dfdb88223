"""
Water surface simulation.

Each terminal column holds a water height (in sub-rows, 8 per character row)
and a vertical velocity. Columns are pulled toward a shared equilibrium height
by a damped spring, then neighbouring columns trade height through several
diffusion passes, which is what turns a single drip impact into ripples.
"""

import logging

import numpy as np

from .config import (
    SUBROWS,
    WATER_BASELINE,
    WATER_DAMPENING,
    WATER_SPREAD,
    WATER_SUBSTEPS,
    WATER_TENSION,
)

logger = logging.getLogger(__name__)


def island_base_row(term_height):
    """Row where the island's sand slope begins, three quarters down the screen."""
    return term_height * 3 // 4 - 1


class SurfaceField:
    def __init__(self, width=0, height=0):
        self.width = 0
        self.term_height = 0
        self.equilibrium_target = WATER_BASELINE
        self.island_base_row = 0
        self.heights = np.zeros(0)
        self.velocities = np.zeros(0)
        self.left_delta = np.zeros(0)
        self.right_delta = np.zeros(0)
        if width or height:
            self.reinitialize(width, height)

    @property
    def target_cap(self):
        """The equilibrium target never rises past three rows below the top."""
        return (self.term_height - 3) * SUBROWS

    def reinitialize(self, width, height):
        """Discard all wave state and size the field for a width x height terminal."""
        self.width = width
        self.term_height = height
        self.equilibrium_target = min(WATER_BASELINE, self.target_cap)
        self.heights = np.full(width, self.equilibrium_target, dtype=float)
        self.velocities = np.zeros(width, dtype=float)
        self.left_delta = np.zeros(width, dtype=float)
        self.right_delta = np.zeros(width, dtype=float)
        self.island_base_row = island_base_row(height)
        logger.debug(
            f"Water reset: {width} columns, island base row {self.island_base_row}"
        )

    def water_level(self, column):
        return self.heights[column]

    def step(self):
        h = self.heights
        v = self.velocities

        # Spring toward the target
        v += WATER_TENSION * (self.equilibrium_target - h) - v * WATER_DAMPENING
        h += v

        if self.width < 2:
            return

        ld = self.left_delta
        rd = self.right_delta
        for _ in range(WATER_SUBSTEPS):
            # Deltas come from heights untouched by this pass
            ld[1:] = WATER_SPREAD * (h[1:] - h[:-1])
            rd[:-1] = WATER_SPREAD * (h[:-1] - h[1:])
            # Each column receives its left neighbour's push before its right one's
            v[1:] += rd[:-1]
            v[:-1] += ld[1:]
            h[1:] += rd[:-1]
            h[:-1] += ld[1:]

    def apply_impulse(self, column, velocity_delta):
        """Kick one column's velocity and raise the water a little for the landed drip."""
        self.velocities[column] += velocity_delta
        cap = self.target_cap
        if self.equilibrium_target < cap:
            self.equilibrium_target = min(
                self.equilibrium_target + SUBROWS / self.width, cap
            )
