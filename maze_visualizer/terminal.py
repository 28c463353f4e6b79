import os
import sys

from .grid import WALL, MARK_PATH, MARK_FRONTIER, MARK_VISITED

# --- Escape sequences ---
CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"

# --- Color Scheme (24-bit backgrounds) ---
RESET = "\x1b[0m"
WALL_COLOR = "\x1b[48;2;20;28;36m"
EMPTY_COLOR = "\x1b[48;2;240;245;250m"
VISITED_COLOR = "\x1b[48;2;16;185;129m"
FRONTIER_COLOR = "\x1b[48;2;96;165;250m"
PATH_COLOR = "\x1b[48;2;244;63;94m"
ENDPOINT_COLOR = "\x1b[48;2;251;191;36m"
BLOCK = "  "  # one cell is two columns wide so it looks square

# --- Plain (no color) glyphs ---
PLAIN_GLYPHS = {
    'wall': '#',
    'empty': ' ',
    'visited': 'o',
    'frontier': '+',
    'path': '*',
    'start': 'S',
    'end': 'E',
}


def enable_ansi():
    """Turns on virtual terminal processing on Windows consoles. No-op elsewhere."""
    if os.name != 'nt':
        return
    import ctypes
    kernel32 = ctypes.windll.kernel32
    handle = kernel32.GetStdHandle(-11)  # STD_OUTPUT_HANDLE
    mode = ctypes.c_ulong()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return
    kernel32.SetConsoleMode(handle, mode.value | 0x0004)  # ENABLE_VIRTUAL_TERMINAL_PROCESSING


def classify(grid, row, col, start, end):
    """Picks what a cell should look like. Endpoints win, then walls, then path > frontier > visited."""
    if (row, col) == start:
        return 'start'
    if (row, col) == end:
        return 'end'
    idx = row * grid.cols + col
    if grid.cells[idx] == WALL:
        return 'wall'
    mark = grid.marks[idx]
    if mark & MARK_PATH:
        return 'path'
    if mark & MARK_FRONTIER:
        return 'frontier'
    if mark & MARK_VISITED:
        return 'visited'
    return 'empty'


class TerminalRenderer:
    """Draws the grid into a terminal, redrawing in place from the top-left corner."""

    COLORS = {
        'wall': WALL_COLOR,
        'empty': EMPTY_COLOR,
        'visited': VISITED_COLOR,
        'frontier': FRONTIER_COLOR,
        'path': PATH_COLOR,
        'start': ENDPOINT_COLOR,
        'end': ENDPOINT_COLOR,
    }

    def __init__(self, stream=None, plain=False):
        self.stream = stream or sys.stdout
        self.plain = plain

    def _write(self, text):
        self.stream.write(text)
        self.stream.flush()

    def clear_screen(self):
        if not self.plain:
            self._write(CLEAR_SCREEN + CURSOR_HOME)

    def move_cursor_home(self):
        if not self.plain:
            self._write(CURSOR_HOME)

    def hide_cursor(self):
        if not self.plain:
            self._write(HIDE_CURSOR)

    def show_cursor(self):
        if not self.plain:
            self._write(SHOW_CURSOR)

    def render_frame(self, grid, start, end):
        lines = []
        for r in range(grid.rows):
            if self.plain:
                line = "".join(PLAIN_GLYPHS[classify(grid, r, c, start, end)] * 2
                               for c in range(grid.cols))
            else:
                line = "".join(f"{self.COLORS[classify(grid, r, c, start, end)]}{BLOCK}{RESET}"
                               for c in range(grid.cols))
            lines.append(line)
        return "\n".join(lines) + "\n"

    def draw(self, grid, start, end):
        if self.plain:
            self._write(self.render_frame(grid, start, end) + "\n")
        else:
            self._write(CURSOR_HOME + self.render_frame(grid, start, end))
