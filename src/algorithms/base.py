# src/algorithms/base.py

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Protocol, Union

from graph.api import Edge, Graph

# Özyinelemeli algoritmalar için yorumlayıcı sınırının altında bırakılan pay
RECURSION_HEADROOM = 200


class RecursionDepthError(RecursionError):
    """Özyineleme derinliği ayarlanan sınırı aştı (çok uzun yol / çok derin arama)."""

    def __init__(self, algorithm: str, max_depth: int) -> None:
        self.algorithm = algorithm
        self.max_depth = max_depth
        super().__init__(f"{algorithm}: recursion depth exceeded the limit of {max_depth}")


def resolve_max_depth(max_depth: Optional[int]) -> int:
    """Ayar verilmemişse yorumlayıcının recursion limitinden türetir."""
    if max_depth is not None:
        return max_depth
    return max(sys.getrecursionlimit() - RECURSION_HEADROOM, 1)


@dataclass
class TraversalResult:
    """BFS/DFS ziyaret sırası. Başlangıç düğümü yoksa liste boştur."""

    start_node_id: Optional[int]
    nodes: List[int] = field(default_factory=list)


@dataclass
class IndependentSetsResult:
    """Bron-Kerbosch'un bulduğu tüm maksimal bağımsız kümeler (bulunma sırasıyla)."""

    sets: List[FrozenSet[int]] = field(default_factory=list)

    @property
    def largest(self) -> List[FrozenSet[int]]:
        if not self.sets:
            return []
        best = max(len(s) for s in self.sets)
        return [s for s in self.sets if len(s) == best]


@dataclass
class SpanningTreeResult:
    """Prim sonucu.

    - edges: seçilen kenarlar (seçilme sırasıyla)
    - visited_count: ağaca alınan düğüm sayısı
    - start_node_id: boş grafta None
    """

    start_node_id: Optional[int]
    total_nodes: int
    edges: List[Edge] = field(default_factory=list)
    total_weight: int = 0
    visited_count: int = 0

    @property
    def is_complete(self) -> bool:
        return len(self.edges) == max(self.total_nodes - 1, 0)


@dataclass
class ColoringResult:
    """DSatur sonucu: düğüm -> renk (ID sırasıyla) ve kullanılan renk sayısı."""

    colors: Dict[int, int] = field(default_factory=dict)
    color_count: int = 0


AlgorithmResult = Union[TraversalResult, IndependentSetsResult, SpanningTreeResult, ColoringResult]


class GraphAlgorithm(Protocol):
    """Tüm graf algoritmaları için ortak arayüz.

    Algoritmalar grafı değiştirmez; aynı graf birden fazla çağrıda
    paylaşılabilir.
    """

    name: str  # Algoritma ismi (ör: "BFS")

    def run(self, graph: Graph, start_node_id: Optional[int] = None) -> AlgorithmResult:
        """Verilen graf üzerinde çalışıp tipli bir sonuç döner.

        start_node_id yalnızca BFS/DFS için anlamlıdır, diğerleri yok sayar.
        """
        ...
