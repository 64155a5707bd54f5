from __future__ import annotations

from typing import Iterable, Optional, Set

from .graph_model import Graph


def is_adjacent(graph: Graph, a: int, b: int) -> bool:
    """a ile b komşu mu? Bir düğüm kendisine her zaman komşu sayılır.

    Bu "kendine komşuluk" kuralı Bron-Kerbosch'taki tamlık kontrolü için
    gereklidir; değiştirilmemeli.
    """
    if a == b:
        return True
    node = graph.get_node(a)
    if node is None:
        return False
    return node.is_adjacent(b)


def neighbors(graph: Graph, node_id: Optional[int]) -> Set[int]:
    """Tek kenarla ulaşılan farklı düğümlerin kümesi (yoksa boş küme)."""
    return graph.neighbors(node_id)


def has_complete_adjacency(graph: Graph, set_a: Iterable[int], set_b: Iterable[int]) -> bool:
    """set_a'daki her düğümün set_b içinde en az bir komşusu var mı?

    set_a boşsa sonuç True'dur.
    """
    targets = list(set_b)
    return all(any(is_adjacent(graph, a, b) for b in targets) for a in set_a)


def sequence_to_string(node_ids: Iterable[int]) -> str:
    """[1, 2, 3] -> "1 -> 2 -> 3" """
    return " -> ".join(str(node_id) for node_id in node_ids)
