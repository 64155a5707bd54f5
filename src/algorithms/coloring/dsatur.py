# src/algorithms/coloring/dsatur.py
from __future__ import annotations

import logging
from typing import Dict, Optional, Set, Tuple

from algorithms.base import ColoringResult, GraphAlgorithm
from graph.api import Graph, neighbors

logger = logging.getLogger(__name__)


class DSatur(GraphAlgorithm):
    """
    DSatur (Degree of Saturation) ile açgözlü graf boyama.

    Renkler 1'den başlayan pozitif tam sayılardır. Her adımda boyanmamış
    düğümler arasından seçim sırası:
    1. En yüksek doyma derecesi (komşulardaki FARKLI renk sayısı)
    2. Eşitlikte: boyanmamış alt graftaki derece
    3. Yine eşitlikte: en küçük ID

    Seçilen düğüm, boyalı komşularında kullanılmayan en küçük rengi alır.
    Sezgiseldir; kromatik sayıyı garanti etmez.
    """

    name: str = "DSatur"

    def run(self, graph: Graph, start_node_id: Optional[int] = None) -> ColoringResult:
        colors: Dict[int, int] = {}
        uncolored: Set[int] = set(graph.nodes)

        if not uncolored:
            logger.warning("DSatur: empty graph, nothing to color.")
            return ColoringResult()

        while uncolored:
            node_id = self._select_next_node(graph, uncolored, colors)
            color = self._smallest_available_color(graph, node_id, colors)
            colors[node_id] = color
            uncolored.remove(node_id)
            logger.debug("DSatur: node %d -> color %d", node_id, color)

        ordered = {node_id: colors[node_id] for node_id in sorted(colors)}
        color_count = len(set(ordered.values()))
        logger.info("DSatur: %d nodes colored with %d colors", len(ordered), color_count)
        return ColoringResult(colors=ordered, color_count=color_count)

    # --- YARDIMCI FONKSİYONLAR ---
    def _select_next_node(self, graph: Graph, uncolored: Set[int], colors: Dict[int, int]) -> int:
        def priority(node_id: int) -> Tuple[int, int, int]:
            # max() ile seçildiği için ID negatif alınır (küçük ID kazanır)
            return (
                self._saturation_degree(graph, node_id, colors),
                self._uncolored_degree(graph, node_id, uncolored),
                -node_id,
            )

        return max(uncolored, key=priority)

    @staticmethod
    def _saturation_degree(graph: Graph, node_id: int, colors: Dict[int, int]) -> int:
        return len({colors[n] for n in neighbors(graph, node_id) if n in colors})

    @staticmethod
    def _uncolored_degree(graph: Graph, node_id: int, uncolored: Set[int]) -> int:
        return sum(1 for n in neighbors(graph, node_id) if n in uncolored)

    @staticmethod
    def _smallest_available_color(graph: Graph, node_id: int, colors: Dict[int, int]) -> int:
        used = {colors[n] for n in neighbors(graph, node_id) if n in colors}
        color = 1
        while color in used:
            color += 1
        return color
