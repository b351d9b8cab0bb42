import json
import logging

import pytest

from pathfinding_lab.benchmarks import plot_results, run_all
from pathfinding_lab.core.metrics import SearchResult


def test_parse_seed():
    assert run_all.parse_seed("42") == 42
    assert run_all.parse_seed(None) > 0


def test_parse_seed_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        seed = run_all.parse_seed("not-a-number")
    assert seed > 0
    assert "Could not parse" in caplog.text


@pytest.mark.parametrize("a,b,agree", [
    (SearchResult("x", True, [1, 2], 3.0), SearchResult("y", True, [1, 3, 2], 3.0 + 1e-12), True),
    (SearchResult("x", True, [1, 2], 3.0), SearchResult("y", True, [1, 2], 4.0), False),
    (SearchResult("x", False), SearchResult("y", False), True),
    (SearchResult("x", True, [1], 0), SearchResult("y", False), False),
])
def test_costs_agree(a, b, agree):
    assert run_all.costs_agree(a, b) is agree


def test_run_benchmark_small_graph():
    out = run_all.run_benchmark(seed=3, nodes=300, arcs=1500, trials=6)
    assert out["seed"] == 3
    assert out["disagreements"] == 0
    assert len(out["results"]) == 12
    assert {r["algo"] for r in out["results"]} == {"Dijkstra", "Bidirectional Dijkstra"}


def test_run_benchmark_is_reproducible():
    first = run_all.run_benchmark(seed=11, nodes=200, arcs=800, trials=3)
    second = run_all.run_benchmark(seed=11, nodes=200, arcs=800, trials=3)
    strip = lambda rows: [(r["trial"], r["algo"], r["success"], r["cost"], r["path_length"]) for r in rows]
    assert strip(first["results"]) == strip(second["results"])


def test_main_writes_results_and_report(tmp_path):
    results = tmp_path / "results.json"
    code = run_all.main(["--seed", "5", "--nodes", "200", "--arcs", "1000", "--trials", "4",
                         "--plain-logs", "--out", str(results)])
    assert code == 0

    data = json.loads(results.read_text())
    assert data["seed"] == 5
    assert data["nodes"] == 200

    if not any(r["success"] for r in data["results"]):
        pytest.skip("no reachable pair for this seed")

    written = plot_results.write_report(results, tmp_path / "report")
    names = {p.name for p in written}
    assert names == {"results.md", "time.png", "cost.png"}
    assert (tmp_path / "report" / "time.png").read_bytes().startswith(b"\x89PNG")
    assert "| Trial | Algorithm |" in (tmp_path / "report" / "results.md").read_text()


def test_plot_without_successful_rows(tmp_path):
    results = tmp_path / "results.json"
    results.write_text(json.dumps({"results": [{"algo": "Dijkstra", "success": False}]}))
    with pytest.raises(SystemExit):
        plot_results.write_report(results, tmp_path)


def test_mean_by_algo():
    rows = [
        {"algo": "A", "time_s": 1.0},
        {"algo": "A", "time_s": 3.0},
        {"algo": "B", "time_s": 0.5},
        {"algo": "B", "time_s": None},
    ]
    assert plot_results.mean_by_algo(rows, "time_s") == {"A": 2.0, "B": 0.5}
