from .grid import MARK_PATH
from .search import UNSET, ROOT


def reconstruct_path(grid, parent, end, on_frame=None):
    """Walks parent pointers backward from `end` and marks every cell as path.

    Returns the path ordered from start to end, or [] when `end` was never
    discovered (no marks are applied in that case). on_frame(grid) is called
    after each cell is marked, the start cell included.

    Parent links form a tree rooted at the start, so the walk reaches ROOT in
    at most rows * cols steps. Hitting UNSET mid-walk or exceeding that bound
    means the parent table was corrupted.
    """
    cols = grid.cols
    cur = grid.index(*end)
    if parent[cur] == UNSET:
        return []

    path = []
    limit = grid.rows * grid.cols
    while cur != ROOT:
        if cur == UNSET or len(path) >= limit:
            raise RuntimeError(f"Corrupt parent table while walking back from {end}")
        r, c = divmod(cur, cols)
        grid.add_mark(r, c, MARK_PATH)
        path.append((r, c))
        if on_frame is not None:
            on_frame(grid)
        cur = parent[cur]

    path.reverse()
    return path


def path_length(path):
    """Number of edges in a path (0 for an empty or single-cell path)."""
    return max(0, len(path) - 1)
