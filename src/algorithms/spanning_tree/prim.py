# src/algorithms/spanning_tree/prim.py
from __future__ import annotations

import heapq
import itertools
import logging
from typing import List, Optional, Set, Tuple

from algorithms.base import GraphAlgorithm, SpanningTreeResult
from graph.api import Edge, Graph

logger = logging.getLogger(__name__)


class Prim(GraphAlgorithm):
    """
    Prim algoritması ile Minimum Kapsayan Ağaç (MST).

    - Başlangıç: grafın iterasyon sırasındaki ilk düğüm. Ağırlık eşitliklerinde
      farklı kurulum sıraları farklı (ama eşit ağırlıklı) ağaçlar verebilir.
    - Sınır (frontier): ağırlığa göre min-heap; eşit ağırlıkta önce eklenen
      kenar önce çıkar.
    - Yeni ziyaret edilen düğümün TÜM kenarları heap'e atılır; karşı ucu zaten
      ziyaret edilmiş olanlar çıkarken (bayat kayıt olarak) atlanır.

    n-1 kenar toplanınca ya da heap boşalınca durur. Heap önce boşalırsa graf
    bağlı değildir; hata yerine kısmi sonuç döner.
    """

    name: str = "Prim"

    def run(self, graph: Graph, start_node_id: Optional[int] = None) -> SpanningTreeResult:
        total_nodes = len(graph)
        start = next(iter(graph.nodes.values()), None)
        if start is None:
            logger.warning("Prim: empty graph, cannot find a starting node.")
            return SpanningTreeResult(start_node_id=None, total_nodes=0)

        visited: Set[int] = {start.id}
        mst_edges: List[Edge] = []
        total_weight = 0

        counter = itertools.count()
        frontier: List[Tuple[int, int, Edge]] = []
        for edge in start.edges:
            heapq.heappush(frontier, (edge.weight, next(counter), edge))

        while frontier and len(mst_edges) < total_nodes - 1:
            _, _, edge = heapq.heappop(frontier)
            destination = edge.adjacent

            if destination in visited:
                continue  # Bayat kayıt

            visited.add(destination)
            mst_edges.append(edge)
            total_weight += edge.weight
            logger.debug("Prim: selected %s", edge)

            for next_edge in graph.nodes[destination].edges:
                heapq.heappush(frontier, (next_edge.weight, next(counter), next_edge))

        result = SpanningTreeResult(
            start_node_id=start.id,
            total_nodes=total_nodes,
            edges=mst_edges,
            total_weight=total_weight,
            visited_count=len(visited),
        )
        if not result.is_complete:
            logger.warning(
                "Prim: graph might not be connected, reached %d/%d nodes.",
                result.visited_count,
                total_nodes,
            )
        return result
