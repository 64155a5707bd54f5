# src/algorithms/dispatcher.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from algorithms.base import AlgorithmResult, GraphAlgorithm
from algorithms.coloring import DSatur
from algorithms.formatting import (
    format_coloring,
    format_independent_sets,
    format_spanning_tree,
    format_traversal,
)
from algorithms.independent_sets import BronKerbosch
from algorithms.spanning_tree import Prim
from algorithms.traversal import BreadthFirstSearch, DepthFirstSearch
from graph.api import Graph

logger = logging.getLogger(__name__)


class GraphOperation(str, Enum):
    BFS = "BFS"
    DFS = "DFS"
    BK = "BK"
    PRIM = "PRIM"
    DSATUR = "DSATUR"

    @property
    def requires_start_node(self) -> bool:
        return self in (GraphOperation.BFS, GraphOperation.DFS)

    @classmethod
    def parse(cls, text: str) -> "GraphOperation":
        """Büyük/küçük harf duyarsız etiket çözümü ("bk" -> BK)."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            valid = ", ".join(op.value for op in cls)
            raise ValueError(f"Unknown operation {text!r}, expected one of: {valid}") from None


@dataclass(frozen=True)
class RunConfig:
    """Bir çalıştırmanın tüm ayarları; bir kez kurulur ve açıkça aktarılır.

    - file_path: kenar listesi dosyası
    - operation: varsayılan DFS
    - start_node_id: BFS/DFS için zorunlu
    - colorize: DSatur çıktısında ANSI renkleri
    - log_level: CLI'nin logging seviyesi
    """

    file_path: Optional[Path] = None
    operation: GraphOperation = GraphOperation.DFS
    start_node_id: Optional[int] = None
    colorize: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.operation.requires_start_node and self.start_node_id is None:
            raise ValueError(f"Please provide a start node ID for {self.operation.value}.")


def create_algorithm(operation: GraphOperation) -> GraphAlgorithm:
    """Kapalı operasyon kümesinden ilgili algoritma nesnesini seçer."""
    if operation is GraphOperation.BFS:
        return BreadthFirstSearch()
    elif operation is GraphOperation.DFS:
        return DepthFirstSearch()
    elif operation is GraphOperation.BK:
        return BronKerbosch()
    elif operation is GraphOperation.PRIM:
        return Prim()
    elif operation is GraphOperation.DSATUR:
        return DSatur()
    raise ValueError(f"Unsupported operation: {operation!r}")


def run_algorithm(
    graph: Graph,
    operation: GraphOperation,
    start_node_id: Optional[int] = None,
) -> AlgorithmResult:
    algorithm = create_algorithm(operation)
    logger.info("Running %s on graph with %d nodes", algorithm.name, len(graph))
    return algorithm.run(graph, start_node_id)


def format_result(operation: GraphOperation, result: AlgorithmResult, colorize: bool = False) -> str:
    if operation in (GraphOperation.BFS, GraphOperation.DFS):
        return format_traversal(result)
    elif operation is GraphOperation.BK:
        return format_independent_sets(result)
    elif operation is GraphOperation.PRIM:
        return format_spanning_tree(result)
    elif operation is GraphOperation.DSATUR:
        return format_coloring(result, colorize=colorize)
    raise ValueError(f"Unsupported operation: {operation!r}")


def run_operation(graph: Graph, config: RunConfig) -> str:
    """Grafı seçilen operasyondan geçirip metin sonucunu döner."""
    result = run_algorithm(graph, config.operation, config.start_node_id)
    return format_result(config.operation, result, colorize=config.colorize)
