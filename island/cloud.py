"""
The cloud: drifts across the top rows and lets a drip go every few seconds.
"""

import numpy as np

from .config import CLOUD_SPEED, CLOUD_WIDTH, DROP_DELAY, DROP_OFFSET, SUBROWS


class Cloud:
    def __init__(self, extent, rng=None, speed=CLOUD_SPEED, drop_delay=DROP_DELAY):
        if extent is None:
            raise ValueError("Cloud requires a terminal extent")
        self.extent = extent
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position = float((extent.width * SUBROWS) // 2 - 2)
        self.speed = speed
        self.drop_count = 0
        self.drop_delay = drop_delay

    @property
    def max_position(self):
        return max(0, (self.extent.width - CLOUD_WIDTH) * SUBROWS)

    @property
    def column(self):
        """Leftmost screen column of the cloud."""
        return int(self.position / SUBROWS)

    def advance(self, drips):
        if drips is None:
            raise ValueError("Cloud.advance requires a drip pool")
        bound = self.max_position

        if self.extent.changed:
            self.position = min(max(self.position, 0.0), bound)

        # Occasional change of heart
        span = self.extent.width * SUBROWS
        if span > 0 and self.rng.integers(0, span) == 0:
            self.speed = -self.speed

        self.position += self.speed
        if self.position >= bound:
            self.position = float(bound)
            self.speed = -abs(self.speed)
        if self.position <= 0:
            self.position = 0.0
            self.speed = abs(self.speed)

        self.drop_count += 1
        if self.drop_count >= self.drop_delay:
            self.drop_count = 0
            drips.spawn(self.column + DROP_OFFSET)
