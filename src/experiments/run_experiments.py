# src/experiments/run_experiments.py
from __future__ import annotations

import csv
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from algorithms.base import RecursionDepthError
from algorithms.dispatcher import GraphOperation, run_algorithm
from experiments.scenarios import SCENARIOS, Scenario
from graph.api import (
    Graph,
    connected_component,
    generate_random_graph,
    is_maximal_independent_set,
    is_proper_coloring,
    is_spanning_tree,
    save_graph_txt,
)

logger = logging.getLogger(__name__)

FIELDNAMES = [
    "operation", "scenario_index", "run_id", "num_nodes", "num_edges",
    "p", "seed", "runtime_ms", "value", "valid",
]


def evaluate_result(graph: Graph, operation: GraphOperation, result: Any, start: Optional[int]) -> tuple:
    """Sonucu (özet değer, geçerli mi) ikilisine indirger."""
    if operation in (GraphOperation.BFS, GraphOperation.DFS):
        nodes = result.nodes
        valid = len(nodes) == len(set(nodes)) and set(nodes) == connected_component(graph, start)
        return len(nodes), valid
    if operation is GraphOperation.BK:
        valid = all(is_maximal_independent_set(graph, s) for s in result.sets)
        return len(result.sets), valid
    if operation is GraphOperation.PRIM:
        valid = result.total_weight == sum(e.weight for e in result.edges)
        if result.is_complete:
            valid = valid and is_spanning_tree(graph, result.edges)
        return result.total_weight, valid
    # DSATUR
    return result.color_count, is_proper_coloring(graph, result.colors)


def run_all_experiments(
    scenarios: Optional[Sequence[Scenario]] = None,
    operations: Optional[Sequence[GraphOperation]] = None,
    num_repeats: int = 3,
    output_csv: str | Path = "experiment_results.csv",
    inputs_dir: str | Path | None = None,
) -> List[Dict[str, Any]]:
    """Tüm senaryolar ve operasyonlar için deneyleri çalıştırır.

    inputs_dir verilirse her senaryonun grafı kenar listesi olarak yazılır.
    """
    if scenarios is None:
        scenarios = SCENARIOS
    if operations is None:
        operations = list(GraphOperation)

    if inputs_dir is not None:
        Path(inputs_dir).mkdir(parents=True, exist_ok=True)

    rows: List[Dict[str, Any]] = []
    output_path = Path(output_csv)
    logger.info("Running %d scenarios x %d operations x %d repeats",
                len(scenarios), len(operations), num_repeats)

    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()

        for idx, sc in enumerate(scenarios):
            graph = generate_random_graph(num_nodes=sc.num_nodes, p=sc.p, seed=sc.seed)
            start = next(iter(graph.nodes), None)

            if inputs_dir is not None:
                save_graph_txt(graph, Path(inputs_dir) / f"scenario_{idx}.txt")

            for op in operations:
                for run_id in range(num_repeats):
                    t0 = time.perf_counter()
                    try:
                        result = run_algorithm(graph, op, start)
                    except RecursionDepthError as e:
                        logger.error("%s (scenario %d): %s", op.value, idx, e)
                        continue
                    runtime_ms = (time.perf_counter() - t0) * 1000.0

                    value, valid = evaluate_result(graph, op, result, start)
                    row = {
                        "operation": op.value,
                        "scenario_index": idx,
                        "run_id": run_id,
                        "num_nodes": len(graph),
                        "num_edges": graph.edge_count(),
                        "p": sc.p,
                        "seed": sc.seed,
                        "runtime_ms": round(runtime_ms, 4),
                        "value": value,
                        "valid": valid,
                    }
                    if not valid:
                        logger.warning("%s produced an invalid result on scenario %d", op.value, idx)
                    writer.writerow(row)
                    rows.append(row)

    logger.info("Results written to %s", output_path.resolve())
    return rows


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_all_experiments()
