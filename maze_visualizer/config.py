import re

from .search import BFS, DFS

LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# --- Maze size ---
DEFAULT_COLS = 31
DEFAULT_ROWS = 21
MIN_SIZE = 11

# --- Solver ---
DEFAULT_ALGORITHM = BFS
# Menu numbers used by the interactive prompt
ALGORITHM_CHOICES = {1: DFS, 2: BFS}
ALGORITHM_ALIASES = {
    "1": DFS, "dfs": DFS, "depth-first": DFS, "depth-first search": DFS,
    "2": BFS, "bfs": BFS, "breadth-first": BFS, "breadth-first search": BFS,
}

# --- Animation ---
DEFAULT_DELAY_MS = 40
MAX_DELAY_MS = 200


def normalize_size(value):
    """Clamps a maze dimension up to MIN_SIZE and bumps even values to the next odd one."""
    value = max(MIN_SIZE, int(value))
    if value % 2 == 0:
        value += 1
    return value


def clamp_delay(value):
    return min(MAX_DELAY_MS, max(0, int(value)))


def parse_algorithm(value, default=DEFAULT_ALGORITHM):
    """Maps user input ("1", "dfs", "BFS", 2, ...) to an algorithm name.

    Anything unrecognised falls back to `default`.
    """
    if isinstance(value, int):
        return ALGORITHM_CHOICES.get(value, default)
    if value is None:
        return default
    return ALGORITHM_ALIASES.get(str(value).strip().lower(), default)


def parse_int_with_default(text, default):
    """Reads the leading integer from a line of input, returning `default` if there isn't one."""
    if text is None:
        return default
    match = LEADING_INT.match(text)
    if match is None:
        return default
    return int(match.group(1))


class MazeConfig:
    """Settings for one generate/solve cycle. Values are corrected on construction."""
    def __init__(self, rows=DEFAULT_ROWS, cols=DEFAULT_COLS, algorithm=DEFAULT_ALGORITHM,
                 delay_ms=DEFAULT_DELAY_MS, seed=None):
        self.rows = normalize_size(rows)
        self.cols = normalize_size(cols)
        self.algorithm = parse_algorithm(algorithm)
        self.delay_ms = clamp_delay(delay_ms)
        self.seed = seed

    @property
    def start(self):
        return (1, 1)

    @property
    def end(self):
        return (self.rows - 2, self.cols - 2)

    def toggle_algorithm(self):
        self.algorithm = BFS if self.algorithm == DFS else DFS
        return self.algorithm

    def __repr__(self):
        return (f"MazeConfig(rows={self.rows}, cols={self.cols}, algorithm={self.algorithm!r}, "
                f"delay_ms={self.delay_ms}, seed={self.seed})")
