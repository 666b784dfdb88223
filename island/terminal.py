"""
Terminal plumbing: size polling, ANSI helpers and the frame output sink.
"""

import ctypes
import logging
import os
import sys

from .errors import TerminalUnavailableError

logger = logging.getLogger(__name__)

RESET = "\033[0m"
CLEAR_HOME = "\033[2J\033[H"


# --- Windows ANSI Support ---
def enable_windows_ansi():
    if os.name == "nt":
        kernel32 = ctypes.windll.kernel32
        hStdOut = kernel32.GetStdHandle(-11)
        mode = ctypes.c_ulong()
        kernel32.GetConsoleMode(hStdOut, ctypes.byref(mode))
        mode.value |= 4  # ENABLE_VIRTUAL_TERMINAL_PROCESSING
        kernel32.SetConsoleMode(hStdOut, mode)


def get_terminal_size(fd=None):
    """Return (cols, rows) of the terminal attached to stdout.

    Unlike shutil.get_terminal_size there is no fallback size; failure raises
    TerminalUnavailableError.
    """
    if fd is None and sys.__stdout__ is None:
        raise TerminalUnavailableError("no stdout to query terminal size from")
    try:
        if fd is None:
            fd = sys.__stdout__.fileno()
        cols, rows = os.get_terminal_size(fd)
    except (OSError, ValueError) as e:
        raise TerminalUnavailableError(f"cannot determine terminal size: {e}") from e
    return cols, rows


def hide_cursor(stream=None):
    (stream or sys.stdout).write("\033[?25l")


def show_cursor(stream=None):
    (stream or sys.stdout).write("\033[?25h")


def move_cursor(x, y):
    """1-based cursor position sequence."""
    return f"\033[{y};{x}H"


def ansi_color(fg, bg):
    return f"\033[{fg};{bg}m"


class TerminalExtent:
    """Current terminal size and whether it changed at the last poll."""

    def __init__(self, query=None):
        self.width = 0
        self.height = 0
        self.changed = False
        self._query = query or get_terminal_size

    def poll(self):
        cols, rows = self._query()
        self.changed = cols != self.width or rows != self.height
        if self.changed:
            logger.debug(f"Terminal resized: {self.width}x{self.height} -> {cols}x{rows}")
            self.width, self.height = cols, rows
        return self.changed


class AnsiWriter:
    """Collects one frame of control sequences and glyphs, then writes it in one go."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout
        self._parts = []

    def clear(self):
        self._parts.append(CLEAR_HOME)

    def move(self, row, col):
        self._parts.append(move_cursor(col + 1, row + 1))

    def color(self, state):
        self._parts.append(ansi_color(state.fg, state.bg))

    def glyph(self, text):
        self._parts.append(text)

    def reset(self):
        self._parts.append(RESET)

    def flush(self):
        frame_str = "".join(self._parts)
        self._parts.clear()
        buffer = getattr(self.stream, "buffer", None)
        if buffer is not None:
            self.stream.flush()
            buffer.write(frame_str.encode("utf-8"))
        else:
            self.stream.write(frame_str)
        self.stream.flush()
