import random

from .grid import WALL, OPEN

# Room-to-room steps (two cells at a time), in up/down/left/right order.
ROOM_STEPS = [(-2, 0), (2, 0), (0, -2), (0, 2)]


def generate_maze(grid, rng=None):
    """Carves a "perfect" maze into `grid` using a randomized iterative backtracker.

    High-level overview:
      - Every cell starts as a wall, then every odd/odd room cell is opened.
        The walls between rooms are still standing at that point.
      - A stack starts at room (1, 1). At each iteration we look at the top
        room and collect its unvisited room neighbours two cells away.
      - If any exist we pick one uniformly at random, knock out the wall cell
        between the two rooms, mark the neighbour visited and push it.
      - Otherwise we pop (backtrack).
      - When the stack empties every room has been visited exactly once, so
        the carved passages form a spanning tree: one simple path between any
        two open cells.

    The generation-time visited set is local to this call and unrelated to
    the solver marks on the grid. `rng` is a random.Random; passing the same
    seeded instance reproduces the same maze.
    """
    rng = rng or random.Random()
    rows, cols = grid.rows, grid.cols

    grid.reset_cells(WALL)
    for r, c in grid.room_cells():
        grid.set_cell(r, c, OPEN)

    visited = [False] * (rows * cols)
    stack = [(1, 1)]
    visited[grid.index(1, 1)] = True

    while stack:
        r, c = stack[-1]

        # Unvisited rooms strictly inside the border
        choices = []
        for dr, dc in ROOM_STEPS:
            nr, nc = r + dr, c + dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and not visited[nr * cols + nc]:
                choices.append((dr, dc))

        if choices:
            dr, dc = rng.choice(choices)
            nr, nc = r + dr, c + dc
            grid.set_cell(r + dr // 2, c + dc // 2, OPEN)  # knock down the wall between
            visited[nr * cols + nc] = True
            stack.append((nr, nc))
        else:
            stack.pop()  # Backtrack

    return grid
