"""
Scene compositor.

Every frame the whole screen is rescanned row by row. Each cell is resolved to
at most one visible layer (island, drip, cloud, water) and written through an
output sink. The compositor remembers the last color it set and whether the
terminal cursor already sits on the next cell, so runs of similar cells cost a
glyph each and nothing more.
"""

import math
from dataclasses import dataclass
from enum import Enum

from .config import (
    BG_COLORS,
    BLACK,
    BLUE,
    BRIGHT_WHITE,
    BRIGHT_YELLOW,
    CLOUD_CHARS,
    DRIP_CHAR,
    FG_COLORS,
    GREEN,
    SUBROWS,
    WATER_CHARS,
    YELLOW,
)


class ColorMode(Enum):
    UNKNOWN = 0
    ISLAND = 1
    CLOUD = 2
    WATER_FG = 3
    WATER_BG = 4


@dataclass(frozen=True)
class ColorState:
    mode: ColorMode
    fg: int
    bg: int


LEAF = ColorState(ColorMode.ISLAND, FG_COLORS[BLUE], BG_COLORS[GREEN])
TRUNK = ColorState(ColorMode.ISLAND, FG_COLORS[BLUE], BG_COLORS[YELLOW])
SAND = ColorState(ColorMode.ISLAND, FG_COLORS[BLUE], BG_COLORS[BRIGHT_YELLOW])
CLOUD = ColorState(ColorMode.CLOUD, FG_COLORS[BRIGHT_WHITE], BG_COLORS[BLACK])
WATER_FG = ColorState(ColorMode.WATER_FG, FG_COLORS[BLUE], BG_COLORS[BLACK])
WATER_BG = ColorState(ColorMode.WATER_BG, FG_COLORS[BLUE], BG_COLORS[BLUE])
# Running state before the first color of a frame is sent
UNKNOWN = ColorState(ColorMode.UNKNOWN, 0, 0)

# Palm tree above the base row: row offset -> {column offset from center: color}
ISLAND_PEAK = {
    -5: {-3: LEAF, -1: LEAF, 1: LEAF},
    -4: {-2: LEAF, -1: LEAF, 0: LEAF},
    -3: {-3: LEAF, -1: TRUNK, 1: LEAF},
    -2: {0: TRUNK},
    -1: {0: TRUNK},
}


def island_color(row, col, base_row, center):
    """Island color at a cell, or None when the cell is off the island."""
    dy = row - base_row
    if dy >= 0:
        # Sand slope widens by two columns per side each row
        return SAND if abs(col - center) <= 1 + 2 * dy else None
    return ISLAND_PEAK.get(dy, {}).get(col - center)


def water_glyph(level):
    return WATER_CHARS[math.floor(level) % SUBROWS]


class Compositor:
    def __init__(self):
        self.color = UNKNOWN  # Last ColorState sent
        self.contiguous = False  # Cursor already sits on the cell being drawn

    def render(self, field, drips, cloud, extent, sink):
        for name, value in (
            ("field", field),
            ("drips", drips),
            ("cloud", cloud),
            ("extent", extent),
            ("sink", sink),
        ):
            if value is None:
                raise ValueError(f"Compositor.render requires {name}")

        width, height = extent.width, extent.height
        levels = field.heights
        n_levels = len(levels)
        base_row = field.island_base_row
        center = width // 2
        drip_cells = {(d.row(height), d.x) for d in drips if d.active}
        cloud_col = cloud.column

        self.color = UNKNOWN
        self.contiguous = False
        sink.clear()

        for row in range(height):
            row_height = (height - row) * SUBROWS
            for col in range(width):
                level = levels[col] if col < n_levels else -math.inf
                island = island_color(row, col, base_row, center)

                if island is not None:
                    if level >= row_height:
                        self._put(sink, row, col, WATER_BG, " ")
                    elif level >= row_height - SUBROWS:
                        self._put(sink, row, col, island, water_glyph(level))
                    else:
                        self._put(sink, row, col, island, " ")
                elif (row, col) in drip_cells:
                    self._put(sink, row, col, WATER_FG, DRIP_CHAR)
                elif row < len(CLOUD_CHARS) and col == cloud_col:
                    self._put(sink, row, col, CLOUD, CLOUD_CHARS[row][: width - col])
                    # The cloud ran past the next cell
                    self.contiguous = False
                elif level >= row_height:
                    self._put(sink, row, col, WATER_BG, " ")
                elif level >= row_height - SUBROWS:
                    self._put(sink, row, col, WATER_FG, water_glyph(level))
                else:
                    self.contiguous = False

        sink.reset()

    def _put(self, sink, row, col, state, glyph):
        if not self.contiguous:
            sink.move(row, col)
            self.contiguous = True
        if state != self.color:
            sink.color(state)
            self.color = state
        sink.glyph(glyph)
