# src/algorithms/traversal/bfs.py
from __future__ import annotations

import logging
from collections import deque
from typing import List, Optional, Set

from algorithms.base import GraphAlgorithm, TraversalResult
from graph.api import Graph

logger = logging.getLogger(__name__)


class BreadthFirstSearch(GraphAlgorithm):
    """
    Genişlik Öncelikli Arama (BFS).

    1. Başlangıç düğümü ziyaret edildi olarak işaretlenir ve kuyruğa alınır.
    2. Kuyruk boşalana kadar: baştaki düğüm çıkarılır, sonuca eklenir,
       ziyaret edilmemiş komşuları kenar ekleme sırasıyla kuyruğa alınır.

    Komşular kuyruğa GİRERKEN işaretlenir (çıkarken değil); çıktı sırası
    buna bağlıdır.
    """

    name: str = "BFS"

    def run(self, graph: Graph, start_node_id: Optional[int] = None) -> TraversalResult:
        start = graph.get_node(start_node_id)
        if start is None:
            logger.warning("BFS: start node %s not found in graph, returning empty result.", start_node_id)
            return TraversalResult(start_node_id=start_node_id)

        result: List[int] = []
        visited: Set[int] = {start.id}
        queue = deque([start.id])

        while queue:
            current = queue.popleft()
            result.append(current)
            for edge in graph.nodes[current].edges:
                neighbor = edge.other(current)
                if neighbor is not None and neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        logger.debug("BFS from %s visited %d nodes", start.id, len(result))
        return TraversalResult(start_node_id=start.id, nodes=result)
