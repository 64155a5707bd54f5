from algorithms.dispatcher import GraphOperation
from experiments.run_experiments import run_all_experiments
from experiments.scenarios import Scenario, load_scenarios_from_csv
from experiments.summarize_results import summarize_results
from graph.api import load_graph_txt


def test_run_and_summarize(tmp_path):
    results_csv = tmp_path / "results.csv"
    stats_csv = tmp_path / "stats.csv"
    inputs = tmp_path / "inputs"

    rows = run_all_experiments(
        scenarios=[Scenario(6, 0.3, 1), Scenario(9, 0.4, 2)],
        num_repeats=2,
        output_csv=results_csv,
        inputs_dir=inputs,
    )

    assert len(rows) == 2 * 5 * 2
    assert all(row["valid"] for row in rows)
    assert results_csv.exists()

    saved = load_graph_txt(inputs / "scenario_1.txt")
    assert len(saved) == 9
    traversal_rows = [r for r in rows if r["operation"] == "BFS"]
    assert all(r["value"] == r["num_nodes"] for r in traversal_rows)

    summary = summarize_results(results_csv, stats_csv)
    assert set(summary) == {op.value for op in GraphOperation}
    assert summary["PRIM"]["runtime_ms"].count == 4
    assert stats_csv.read_text(encoding="utf-8").startswith("operation,metric,count")


def test_run_selected_operations(tmp_path):
    rows = run_all_experiments(
        scenarios=[Scenario(5, 0.5, 3)],
        operations=[GraphOperation.DSATUR],
        num_repeats=1,
        output_csv=tmp_path / "r.csv",
    )
    assert [r["operation"] for r in rows] == ["DSATUR"]


def test_load_scenarios_from_csv(tmp_path):
    path = tmp_path / "scenarios.csv"
    path.write_text("num_nodes;p;seed\n10;0,25;3\n20;0.1;4\n", encoding="utf-8")

    assert load_scenarios_from_csv(path) == [Scenario(10, 0.25, 3), Scenario(20, 0.1, 4)]
