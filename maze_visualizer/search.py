"""
Frontier search over a carved grid, shared by the BFS and DFS solvers.

Both solvers follow the same loop and differ only in two ways:
  - Frontier discipline: BFS pops the oldest discovered cell (FIFO queue),
    DFS pops the newest (LIFO stack).
  - Neighbour order: DFS shuffles the four directions before pushing so the
    exploration shape varies run to run. BFS always checks up, down, left,
    right. The order never affects BFS optimality, only the animation.

Parent pointers are assigned exactly once, when a cell is first discovered.
A cell whose parent is already set is never pushed again and never gets a
new parent, which keeps the parent links a tree rooted at the start cell.
"""
import collections
import random

from .grid import OPEN, MARK_VISITED, MARK_FRONTIER

BFS = "BFS"
DFS = "DFS"

# Parent sentinels
UNSET = -1
ROOT = -2

# Grid-adjacent steps: up, down, left, right
NEIGHBOR_STEPS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# name -> (pops newest first, shuffles neighbour order)
STRATEGIES = {
    BFS: {'lifo': False, 'shuffle': False},
    DFS: {'lifo': True, 'shuffle': True},
}


class SearchResult:
    """Outcome of one solve.

    parent: flat list over the grid, UNSET / ROOT / predecessor index.
    order: cells in the order they were first visited (animation trace).
    found: True when the end cell was reached.
    expanded: number of frontier pops.
    frontier_max: largest frontier size seen.
    """
    def __init__(self, algorithm, start, end, rows, cols, parent):
        self.algorithm = algorithm
        self.start = start
        self.end = end
        self.rows = rows
        self.cols = cols
        self.parent = parent
        self.order = []
        self.found = False
        self.expanded = 0
        self.frontier_max = 0

    def parent_of(self, row, col):
        """Returns the (row, col) predecessor, or None for the start cell and undiscovered cells."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinate ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        p = self.parent[row * self.cols + col]
        if p < 0:
            return None
        return divmod(p, self.cols)

    def discovered(self):
        return [divmod(i, self.cols) for i, p in enumerate(self.parent) if p != UNSET]

    def __repr__(self):
        return (f"SearchResult({self.algorithm}, start={self.start}, end={self.end}, "
                f"found={self.found}, visited={len(self.order)})")


def solve(grid, start, end, algorithm=BFS, rng=None, on_frame=None):
    """Explores `grid` from `start` until `end` is popped or the frontier empties.

    on_frame(grid) is called once every time a cell is newly marked visited.
    Pacing (sleeping between frames) is up to the caller.
    """
    if algorithm not in STRATEGIES:
        raise ValueError(f"Unknown algorithm {algorithm!r}, expected one of {sorted(STRATEGIES)}")
    strategy = STRATEGIES[algorithm]
    rng = rng or random.Random()

    rows, cols = grid.rows, grid.cols
    start_idx = grid.index(*start)
    end_idx = grid.index(*end)

    grid.reset_marks()
    parent = [UNSET] * (rows * cols)
    result = SearchResult(algorithm, start, end, rows, cols, parent)

    frontier = collections.deque([start])
    parent[start_idx] = ROOT
    grid.add_mark(start[0], start[1], MARK_FRONTIER)
    result.frontier_max = 1

    while frontier:
        # FIFO for BFS, LIFO for DFS
        r, c = frontier.pop() if strategy['lifo'] else frontier.popleft()
        idx = r * cols + c
        result.expanded += 1

        grid.clear_mark(r, c, MARK_FRONTIER)
        if not grid.marks[idx] & MARK_VISITED:
            grid.add_mark(r, c, MARK_VISITED)
            result.order.append((r, c))
            if on_frame is not None:
                on_frame(grid)

        if idx == end_idx:
            break

        steps = list(NEIGHBOR_STEPS)
        if strategy['shuffle']:
            rng.shuffle(steps)

        for dr, dc in steps:
            nr, nc = r + dr, c + dc
            if not grid.in_bounds(nr, nc):
                continue
            n_idx = nr * cols + nc
            # Discovery happens once: a set parent is never reconsidered
            if grid.cells[n_idx] == OPEN and parent[n_idx] == UNSET:
                parent[n_idx] = idx
                frontier.append((nr, nc))
                grid.add_mark(nr, nc, MARK_FRONTIER)

        result.frontier_max = max(result.frontier_max, len(frontier))

    result.found = parent[end_idx] != UNSET and grid.has_mark(end[0], end[1], MARK_VISITED)
    return result
