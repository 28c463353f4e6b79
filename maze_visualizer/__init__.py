"""Perfect maze generation with animated BFS/DFS solving in the terminal."""
from .grid import Grid, WALL, OPEN, MARK_NONE, MARK_VISITED, MARK_FRONTIER, MARK_PATH
from .generator import generate_maze
from .search import BFS, DFS, UNSET, ROOT, SearchResult, solve
from .path import reconstruct_path, path_length

__version__ = "0.1.0"
