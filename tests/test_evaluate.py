import csv
import os

import evaluate
from evaluate import Metrics, run, run_test, save_data, summarize, plot_explored, get_eval_data
from best import Best
from brute_force import run_exhaustive
from expression import LeafNode


def test_metrics_time_split():
    m = Metrics(Best(5, LeafNode(5)), 12, 1 * 10**9 + 2 * 10**6 + 3 * 10**3 + 4)
    assert m.split_time() == (1, 2, 3, 4)
    text = str(m)
    assert "explored" in text
    assert "001 . 002 003 004 seconds" in text


def test_run_times_strategy():
    m = run(run_exhaustive, 25, [1, 2, 3, 4])
    assert m.best.exact()
    assert m.explored > 0
    assert m.time >= 0


def test_run_test_reports_every_strategy(capsys):
    results = run_test(3, [1, 2], ["DFS", "dfs_mem", "SRCH DIFF"])
    assert set(results.keys()) == {"DFS", "dfs_mem", "SRCH DIFF"}
    out = capsys.readouterr().out
    assert "target: 3" in out
    assert "numbers: 1 2" in out
    assert "DFS MEM" not in out
    assert "dfs_mem" in out


def test_save_data(tmp_path, monkeypatch):
    monkeypatch.setattr(evaluate, "SAVE_FOLDER", str(tmp_path))
    save_data({"a": [1, 2], "b": [3, 4]}, "out.csv", comment=["x=1"])
    with open(os.path.join(str(tmp_path), "out.csv"), newline='') as f:
        rows = list(csv.reader(f))
    assert rows == [["#", "x=1"], ["a", "b"], ["1", "3"], ["2", "4"]]


def test_eval_data_with_csv_and_plot(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(evaluate, "SAVE_FOLDER", str(tmp_path))
    plot_name = os.path.join(str(tmp_path), "explored.png")
    problems = [(3, [1, 2]), (100, [1, 2])]
    strategies = ["DFS", "DFS MEM"]

    results = get_eval_data(problems, strategies, save_name="res.csv", plot_name=plot_name)

    assert len(results) == 2
    assert results[1]["DFS"].explored == 23
    assert os.path.exists(os.path.join(str(tmp_path), "res.csv"))
    assert os.path.exists(plot_name)
    assert "Averages" in capsys.readouterr().out


def test_summarize():
    results = [run_test(3, [1, 2], ["DFS", "DFS MEM"]), run_test(100, [1, 2], ["DFS", "DFS MEM"])]
    averages, exact = summarize(results, ["DFS", "DFS MEM"])
    assert averages[0] == (6 + 23) / 2
    assert averages[1] == (5 + 23) / 2
    assert list(exact) == [0.5, 0.5]


def test_default_scenarios_skip_six_numbers():
    small = [p for p in evaluate.SCENARIOS if len(p[1]) <= evaluate.MAX_DEFAULT_NUMBERS]
    assert len(small) == 5
    assert (25, [1, 2, 3, 4]) in small
