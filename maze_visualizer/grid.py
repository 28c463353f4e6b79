"""
Grid storage shared by the generator, the solvers and the renderer.

Representation:
  - self.cells is a flat list of WALL/OPEN values, one per grid position.
  - self.marks is a flat list of mark bitsets (visited / frontier / path),
    kept separately from the cells so a solve never disturbs the topology.
  - Position (row, col) lives at index row * cols + col.

Coordinates are (row, col) with (0, 0) at the top-left corner.
"""

# --- Cell values ---
WALL = 1
OPEN = 0

# --- Mark bits ---
MARK_NONE = 0
MARK_VISITED = 1
MARK_FRONTIER = 2
MARK_PATH = 4


class Grid:
    def __init__(self, rows, cols):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid size must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [WALL] * (rows * cols)
        self.marks = [MARK_NONE] * (rows * cols)

    @classmethod
    def from_text(cls, lines):
        """Builds a grid from an ASCII picture: '#' is a wall, anything else is open."""
        if isinstance(lines, str):
            lines = [line for line in lines.strip().splitlines() if line.strip()]
        rows, cols = len(lines), len(lines[0])
        grid = cls(rows, cols)
        for r, line in enumerate(lines):
            if len(line) != cols:
                raise ValueError(f"Row {r} has {len(line)} columns, expected {cols}")
            for c, ch in enumerate(line):
                grid.set_cell(r, c, WALL if ch == '#' else OPEN)
        return grid

    # --- Addressing ---
    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row, col):
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")

    def coords(self, index):
        if not 0 <= index < self.rows * self.cols:
            raise IndexError(f"Index {index} out of bounds for {self.rows}x{self.cols} grid")
        return divmod(index, self.cols)

    # --- Bulk resets ---
    def reset_cells(self, fill=WALL):
        self.cells = [fill] * (self.rows * self.cols)

    def reset_marks(self):
        self.marks = [MARK_NONE] * (self.rows * self.cols)

    # --- Cells ---
    def get_cell(self, row, col):
        return self.cells[self.index(row, col)]

    def set_cell(self, row, col, value):
        self.cells[self.index(row, col)] = value

    def is_open(self, row, col):
        return self.cells[self.index(row, col)] == OPEN

    # --- Marks ---
    def get_mark(self, row, col):
        return self.marks[self.index(row, col)]

    def set_mark(self, row, col, bits):
        self.marks[self.index(row, col)] = bits

    def add_mark(self, row, col, bits):
        self.marks[self.index(row, col)] |= bits

    def clear_mark(self, row, col, bits):
        self.marks[self.index(row, col)] &= ~bits

    def has_mark(self, row, col, bits):
        return bool(self.marks[self.index(row, col)] & bits)

    # --- Iteration helpers ---
    def room_cells(self):
        """All odd/odd positions, the candidate maze "rooms"."""
        return [(r, c) for r in range(1, self.rows, 2) for c in range(1, self.cols, 2)]

    def open_cells(self):
        return [divmod(i, self.cols) for i, v in enumerate(self.cells) if v == OPEN]

    def __repr__(self):
        return f"Grid({self.rows}, {self.cols})"
