import collections
import random

import pytest

from maze_visualizer.generator import generate_maze
from maze_visualizer.grid import Grid

# A single corridor winding from (1, 1) to (9, 9): 49 open cells, 48 steps.
SERPENTINE = """
###########
#.........#
#########.#
#.........#
#.#########
#.........#
#########.#
#.........#
#.#########
#.........#
###########
"""

# Fully open interior, so most cells can be reached from several neighbours.
OPEN_ROOM = """
#######
#.....#
#.....#
#.....#
#.....#
#.....#
#######
"""


def grid_to_text(grid):
    return "\n".join(
        "".join("." if grid.is_open(r, c) else "#" for c in range(grid.cols))
        for r in range(grid.rows)
    )


def open_neighbors(grid, cell):
    r, c = cell
    for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
        nr, nc = r + dr, c + dc
        if grid.in_bounds(nr, nc) and grid.is_open(nr, nc):
            yield (nr, nc)


def shortest_distances(grid, start):
    """Independent BFS over open cells: cell -> number of steps from start."""
    dist = {start: 0}
    queue = collections.deque([start])
    while queue:
        cell = queue.popleft()
        for n in open_neighbors(grid, cell):
            if n not in dist:
                dist[n] = dist[cell] + 1
                queue.append(n)
    return dist


@pytest.fixture
def serpentine():
    return Grid.from_text(SERPENTINE)


@pytest.fixture
def open_room():
    return Grid.from_text(OPEN_ROOM)


@pytest.fixture
def maze():
    grid = Grid(21, 31)
    generate_maze(grid, random.Random(1234))
    return grid
