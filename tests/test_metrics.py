import csv
import os

from maze_visualizer import metrics
from maze_visualizer.metrics import aggregate_results, plot_metric, run_single, write_csv
from maze_visualizer.search import BFS, DFS


def test_run_single_reports_a_solved_maze():
    row = run_single(21, 31, BFS, seed=3)
    assert row["algorithm"] == BFS
    assert (row["rows"], row["cols"]) == (21, 31)
    assert row["found"] is True
    assert row["path_length"] >= (21 - 3) + (31 - 3)
    assert row["visited"] == row["expanded"]
    assert row["elapsed_sec"] >= 0


def test_run_single_corrects_sizes():
    row = run_single(8, 12, DFS, seed=1)
    assert (row["rows"], row["cols"]) == (11, 13)


def test_bfs_never_longer_than_dfs_on_the_same_maze():
    for seed in range(5):
        bfs = run_single(21, 21, BFS, seed=seed)
        dfs = run_single(21, 21, DFS, seed=seed)
        assert bfs["path_length"] <= dfs["path_length"]


def test_aggregate_results_groups_by_size_and_algorithm():
    rows = [run_single(11, 11, algo, seed=s) for s in range(3) for algo in (BFS, DFS)]
    summary = aggregate_results(rows)
    assert len(summary) == 2
    by_algo = {entry["algorithm"]: entry for entry in summary}
    assert by_algo[BFS]["count"] == 3
    assert by_algo[DFS]["found_rate"] == 1.0
    assert by_algo[BFS]["path_length_min"] <= by_algo[BFS]["path_length_avg"] <= by_algo[BFS]["path_length_max"]


def test_write_csv_round_trip(tmp_path):
    rows = [run_single(11, 11, BFS, seed=1), run_single(11, 11, DFS, seed=1)]
    out = tmp_path / "nested" / "raw.csv"
    write_csv(str(out), rows)
    with open(out, newline="", encoding="utf-8") as f:
        read = list(csv.DictReader(f))
    assert [r["algorithm"] for r in read] == [BFS, DFS]


def test_write_csv_skips_empty(tmp_path):
    out = tmp_path / "empty.csv"
    write_csv(str(out), [])
    assert not out.exists()


def test_main_writes_results(tmp_path, capsys):
    out_dir = str(tmp_path / "metrics")
    metrics.main(["--runs", "2", "--rows", "11", "--cols", "11", "--seed", "7",
                  "--out_dir", out_dir, "--no-plots"])
    assert os.path.exists(os.path.join(out_dir, "raw_results.csv"))
    assert os.path.exists(os.path.join(out_dir, "summary.csv"))
    assert f"Wrote results to {out_dir}" in capsys.readouterr().out


def test_plot_metric_writes_a_png(tmp_path):
    rows = [run_single(11, 11, algo, seed=s) for s in range(2) for algo in (BFS, DFS)]
    summary = aggregate_results(rows)
    out = tmp_path / "sub" / "v.png"
    plot_metric(summary, "visited_avg", str(out))
    assert out.exists()
    with open(out, "rb") as f:
        assert f.read(8) == b"\x89PNG\r\n\x1a\n"


def test_main_writes_charts(tmp_path):
    out_dir = tmp_path / "metrics"
    metrics.main(["--runs", "1", "--rows", "11", "--cols", "11", "--seed", "3", "--out_dir", str(out_dir)])
    for metric in ["elapsed_sec_avg", "visited_avg", "frontier_max_avg", "path_length_avg"]:
        assert (out_dir / f"{metric}.png").exists()
