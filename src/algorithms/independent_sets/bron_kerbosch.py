# src/algorithms/independent_sets/bron_kerbosch.py
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, FrozenSet, List, Optional, Set

from algorithms.base import (
    GraphAlgorithm,
    IndependentSetsResult,
    RecursionDepthError,
    resolve_max_depth,
)
from graph.api import Graph, has_complete_adjacency, is_adjacent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BronKerboschConfig:
    # None -> sys.getrecursionlimit() üzerinden hesaplanır
    max_depth: Optional[int] = None


class BronKerbosch(GraphAlgorithm):
    """
    Bron-Kerbosch ile tüm maksimal bağımsız kümelerin bulunması.

    Durum:
    - independent: kurulmakta olan bağımsız küme (S)
    - candidates: S'yi genişletebilecek düğümler, FIFO kuyruk (Q+)
    - excluded: bu seviyede denenip dışlanmış düğümler (Q-)

    Adımlar:
    1. Q+ boş değilken ve Q-'deki her düğümün Q+ içinde komşusu varken:
    2. Q+'dan sıradaki v'yi al, S'ye ekle.
    3. Q+_new / Q-_new: v'ye komşu olanları (Q- için v'nin kendisini de) çıkar.
    4. İkisi de boşsa S maksimaldir, kopyasını kaydet.
    5. Değilse Q+_new, Q-_new ile özyinele.
    6. v'yi S'den çıkar, Q-'ye ekle ve devam et.

    En kötü durumda üstel çalışır; tamlık kontrolü dışında budama yoktur.
    """

    name: str = "Bron-Kerbosch"

    def __init__(self, config: BronKerboschConfig | None = None) -> None:
        self.config = config or BronKerboschConfig()

    def run(self, graph: Graph, start_node_id: Optional[int] = None) -> IndependentSetsResult:
        if len(graph) == 0:
            logger.warning("BK: empty graph, no independent sets to enumerate.")
            return IndependentSetsResult()

        max_depth = resolve_max_depth(self.config.max_depth)
        results: List[FrozenSet[int]] = []
        self._extend(graph, [], deque(graph.nodes), set(), results, 1, max_depth)

        logger.info("BK: found %d maximal independent sets", len(results))
        return IndependentSetsResult(sets=results)

    def _extend(
        self,
        graph: Graph,
        independent: List[int],
        candidates: Deque[int],
        excluded: Set[int],
        results: List[FrozenSet[int]],
        depth: int,
        max_depth: int,
    ) -> None:
        if depth > max_depth:
            raise RecursionDepthError(self.name, max_depth)

        # Dışlanan bir düğümün adaylarda hiç komşusu kalmadıysa bu daldan
        # maksimal küme çıkmaz
        while candidates and has_complete_adjacency(graph, excluded, candidates):
            current = candidates.popleft()
            independent.append(current)

            new_candidates = deque(n for n in candidates if not is_adjacent(graph, n, current))
            new_excluded = {
                n for n in excluded if not is_adjacent(graph, n, current) and n != current
            }

            if not new_candidates and not new_excluded:
                found = frozenset(independent)
                results.append(found)
                logger.debug("BK: recorded maximal set %s", sorted(found))
            else:
                self._extend(graph, independent, new_candidates, new_excluded, results, depth + 1, max_depth)

            # Geri izleme
            independent.pop()
            excluded.add(current)
