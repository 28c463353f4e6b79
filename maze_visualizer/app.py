import argparse
import random
import sys
import time

from . import config
from .config import MazeConfig, parse_algorithm, parse_int_with_default
from .generator import generate_maze
from .grid import Grid
from .path import reconstruct_path, path_length
from .search import solve
from .search_tree import export_search_tree
from .terminal import TerminalRenderer, enable_ansi


class Animator:
    """Frame callback handed to the solvers: draws the grid, then sleeps for the configured delay."""
    def __init__(self, renderer, start, end, delay_ms):
        self.renderer = renderer
        self.start = start
        self.end = end
        self.delay_ms = delay_ms
        self.frames = 0

    def __call__(self, grid):
        self.renderer.draw(grid, self.start, self.end)
        self.frames += 1
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000.0)


class MazeApp:
    """
    Interactive driver: generate -> draw -> solve -> draw, then offer
    regenerate / toggle algorithm / quit.

    One random.Random is created per process (seeded from --seed when given)
    and shared by every regeneration and every DFS shuffle, so consecutive
    mazes differ while a seeded session stays reproducible.
    """
    def __init__(self, cfg, renderer=None, input_func=input, export_tree=None):
        self.cfg = cfg
        self.renderer = renderer or TerminalRenderer()
        self.input = input_func
        self.export_tree = export_tree
        self.rng = random.Random(cfg.seed)
        self.grid = Grid(cfg.rows, cfg.cols)
        self.last_result = None
        self.last_path = []

    def _print(self, text=""):
        self.renderer.stream.write(text + "\n")
        self.renderer.stream.flush()

    def _read(self, prompt=""):
        """Reads one line, treating EOF as an empty answer."""
        try:
            return self.input(prompt)
        except EOFError:
            return None

    def generate(self):
        generate_maze(self.grid, self.rng)
        self.grid.reset_marks()
        return self.grid

    def solve(self):
        cfg = self.cfg
        animator = Animator(self.renderer, cfg.start, cfg.end, cfg.delay_ms)
        result = solve(self.grid, cfg.start, cfg.end, cfg.algorithm, rng=self.rng, on_frame=animator)
        path = reconstruct_path(self.grid, result.parent, cfg.end, on_frame=animator)
        self.last_result, self.last_path = result, path

        if self.export_tree:
            written = export_search_tree(result, self.export_tree, path=path)
            self._print(f"Search tree written to {written}")
        return result, path

    def run_cycle(self):
        """One generate/solve round. Returns False when the user asked to quit."""
        cfg = self.cfg
        self.generate()
        self.renderer.clear_screen()
        self.renderer.draw(self.grid, cfg.start, cfg.end)
        self._print(f"Generated maze {cfg.cols}x{cfg.rows}. Press Enter to start solver")
        if self._read() is None:
            return False

        result, path = self.solve()
        self.renderer.draw(self.grid, cfg.start, cfg.end)
        if path:
            self._print(f"{result.algorithm}: visited {len(result.order)} cells, "
                        f"path length {path_length(path)}")
        else:
            self._print(f"{result.algorithm}: no path from {cfg.start} to {cfg.end}")

        self._print("Solver finished. Options:")
        self._print("[r] Regenerate  [a] Toggle algorithm  [q] Quit")
        choice = self._read()
        if choice is None:
            return False
        choice = choice.strip().lower()
        if choice.startswith('q'):
            return False
        if choice.startswith('a'):
            self._print(f"Toggled algorithm to {cfg.toggle_algorithm()}")
            if self._read("Press Enter: ") is None:
                return False
        return True

    def run(self):
        enable_ansi()
        self.renderer.hide_cursor()
        try:
            while self.run_cycle():
                pass
        except KeyboardInterrupt:
            pass
        finally:
            self.renderer.clear_screen()
            self.renderer.show_cursor()
        self._print("Thank you!")


def prompt_config(args, input_func=input, out=None):
    """Fills in any setting not given on the command line by asking, with defaults."""
    out = out or sys.stdout

    def ask(prompt, default):
        out.write(f"{prompt} (default {default}): ")
        out.flush()
        try:
            return parse_int_with_default(input_func(), default)
        except EOFError:
            return default

    cols = args.cols if args.cols is not None else ask("Enter odd number of columns", config.DEFAULT_COLS)
    rows = args.rows if args.rows is not None else ask("Enter odd number of rows", config.DEFAULT_ROWS)
    if args.algorithm is not None:
        algorithm = parse_algorithm(args.algorithm)
    else:
        algorithm = parse_algorithm(ask("Choose algorithm: 1=DFS (explore), 2=BFS (shortest)", 2))
    delay = args.delay if args.delay is not None else ask(
        f"Animation delay in ms (0..{config.MAX_DELAY_MS}), smaller -> faster", config.DEFAULT_DELAY_MS)
    return MazeConfig(rows=rows, cols=cols, algorithm=algorithm, delay_ms=delay, seed=args.seed)


def build_parser():
    parser = argparse.ArgumentParser(description="Generate a perfect maze and animate BFS/DFS solving it.")
    parser.add_argument("--rows", type=int, default=None, help="Maze rows (odd, >= 11)")
    parser.add_argument("--cols", type=int, default=None, help="Maze columns (odd, >= 11)")
    parser.add_argument("--algorithm", default=None, help="BFS or DFS (1=DFS, 2=BFS)")
    parser.add_argument("--delay", type=int, default=None, help="Animation delay per frame in ms")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the maze/solver random source")
    parser.add_argument("--no-prompt", action="store_true", help="Use defaults instead of asking for missing settings")
    parser.add_argument("--plain", action="store_true", help="ASCII output without colors or cursor control")
    parser.add_argument("--export-tree", default=None, help="Render the search tree with graphviz to this path after each solve")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    print("\nMAZE VISUALIZER\n")

    if args.no_prompt:
        cfg = MazeConfig(
            rows=args.rows if args.rows is not None else config.DEFAULT_ROWS,
            cols=args.cols if args.cols is not None else config.DEFAULT_COLS,
            algorithm=parse_algorithm(args.algorithm),
            delay_ms=args.delay if args.delay is not None else config.DEFAULT_DELAY_MS,
            seed=args.seed,
        )
    else:
        cfg = prompt_config(args)

    app = MazeApp(cfg, renderer=TerminalRenderer(plain=args.plain), export_tree=args.export_tree)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
