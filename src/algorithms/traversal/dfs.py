# src/algorithms/traversal/dfs.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Set

from algorithms.base import GraphAlgorithm, RecursionDepthError, TraversalResult, resolve_max_depth
from graph.api import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DFSConfig:
    # None -> sys.getrecursionlimit() üzerinden hesaplanır
    max_depth: Optional[int] = None


class DepthFirstSearch(GraphAlgorithm):
    """
    Derinlik Öncelikli Arama (DFS), özyinelemeli pre-order.

    Düğüm ziyaret edilir, ardından kenar ekleme sırasıyla ziyaret edilmemiş
    her komşuya inilir. Özyineleme derinliği yol uzunluğu kadardır; çok uzun
    yollarda RecursionDepthError fırlatılır (yığın-güvenli bir tasarım değil).
    """

    name: str = "DFS"

    def __init__(self, config: DFSConfig | None = None) -> None:
        self.config = config or DFSConfig()

    def run(self, graph: Graph, start_node_id: Optional[int] = None) -> TraversalResult:
        start = graph.get_node(start_node_id)
        if start is None:
            logger.warning("DFS: start node %s not found in graph, returning empty result.", start_node_id)
            return TraversalResult(start_node_id=start_node_id)

        max_depth = resolve_max_depth(self.config.max_depth)
        result: List[int] = []
        self._visit(graph, start.id, set(), result, 1, max_depth)

        logger.debug("DFS from %s visited %d nodes", start.id, len(result))
        return TraversalResult(start_node_id=start.id, nodes=result)

    def _visit(
        self,
        graph: Graph,
        node_id: int,
        visited: Set[int],
        result: List[int],
        depth: int,
        max_depth: int,
    ) -> None:
        if depth > max_depth:
            raise RecursionDepthError(self.name, max_depth)

        visited.add(node_id)
        result.append(node_id)
        for edge in graph.nodes[node_id].edges:
            neighbor = edge.other(node_id)
            if neighbor is not None and neighbor not in visited:
                self._visit(graph, neighbor, visited, result, depth + 1, max_depth)
