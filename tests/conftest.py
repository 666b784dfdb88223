import pytest

from island.terminal import TerminalExtent


class RecordingSink:
    """Output sink that records every directive instead of writing escapes."""

    def __init__(self):
        self.events = []
        self.flushes = 0

    def clear(self):
        self.events.append(("clear",))

    def move(self, row, col):
        self.events.append(("move", row, col))

    def color(self, state):
        self.events.append(("color", state))

    def glyph(self, text):
        self.events.append(("glyph", text))

    def reset(self):
        self.events.append(("reset",))

    def flush(self):
        self.flushes += 1

    def count(self, kind):
        return sum(1 for e in self.events if e[0] == kind)

    def glyphs(self):
        return [e[1] for e in self.events if e[0] == "glyph"]


class ScriptedRng:
    """Stands in for numpy's Generator; always draws the same integer."""

    def __init__(self, value=1):
        self.value = value
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.value


def make_extent(width, height):
    sizes = {"size": (width, height)}
    extent = TerminalExtent(query=lambda: sizes["size"])
    extent.poll()
    extent.sizes = sizes
    return extent


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def extent():
    return make_extent(40, 20)


class ScreenSink(RecordingSink):
    """Recording sink that also replays directives onto a virtual screen."""

    def __init__(self, width, height):
        super().__init__()
        self.width = width
        self.height = height
        self.cells = {}
        self.row = 0
        self.col = 0
        self.state = None

    def clear(self):
        super().clear()
        self.cells.clear()
        self.row = self.col = 0

    def move(self, row, col):
        super().move(row, col)
        self.row, self.col = row, col

    def color(self, state):
        super().color(state)
        self.state = state

    def glyph(self, text):
        super().glyph(text)
        for ch in text:
            if self.col >= self.width:
                self.row += 1
                self.col = 0
            self.cells[(self.row, self.col)] = (ch, self.state)
            self.col += 1

    def at(self, row, col):
        return self.cells.get((row, col))

    def text(self, row):
        return "".join(
            self.cells[(row, c)][0] if (row, c) in self.cells else "."
            for c in range(self.width)
        )
