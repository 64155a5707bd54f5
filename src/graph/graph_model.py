from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple


@dataclass(frozen=True)
class Edge:
    """Bir düğümün gözünden yönsüz kenar.

    Kenar, sahibi olan düğümün (parent) listesinde durur ve karşı ucu
    (adjacent) ID ile tutar. Düğüm nesnelerine doğrudan referans yoktur;
    çözümleme her zaman Graph.nodes sözlüğü üzerinden yapılır.

    Eşitlik sadece (adjacent, weight) üzerindendir, parent karşılaştırılmaz.
    """

    parent: int = field(compare=False)
    adjacent: int
    weight: int = 1

    def other(self, node_id: int) -> Optional[int]:
        """node_id'nin karşısındaki ucu döner, node_id uç değilse None."""
        if node_id == self.parent:
            return self.adjacent
        if node_id == self.adjacent:
            return self.parent
        return None

    def __str__(self) -> str:
        return f"({self.parent} - {self.adjacent}, w:{self.weight})"


@dataclass(eq=False)
class Node:
    """Graftaki bir düğüm. Kimliği yalnızca ID'sidir."""

    id: int
    edges: List[Edge] = field(default_factory=list)

    def is_adjacent(self, other_id: int) -> bool:
        # Düğüm kendisine de "komşu" sayılır (Bron-Kerbosch tamlık kontrolü buna dayanır)
        if other_id == self.id:
            return True
        return any(edge.adjacent == other_id for edge in self.edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Graph:
    """Yönsüz, ağırlıklı grafı adjacency-list yapısıyla tutar.

    Düğümler ilk görüldükleri sırayla saklanır; bu sıra Prim'in başlangıç
    düğümünü ve Bron-Kerbosch'un aday kuyruğunu belirler.
    """

    def __init__(self) -> None:
        # Düğüm ID -> Node nesnesi (ekleme sırası korunur)
        self.nodes: Dict[int, Node] = {}

    def add_node(self, node_id: int) -> Node:
        """Düğümü yoksa oluşturur, varsa mevcut olanı döner."""
        node = self.nodes.get(node_id)
        if node is None:
            node = Node(node_id)
            self.nodes[node_id] = node
        return node

    def add_undirected_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Yönsüz kenar ekler (u-v ve v-u aynı ağırlıkla)."""
        u_node = self.add_node(u)
        v_node = self.add_node(v)
        u_node.edges.append(Edge(parent=u, adjacent=v, weight=weight))
        v_node.edges.append(Edge(parent=v, adjacent=u, weight=weight))

    def get_node(self, node_id: Optional[int]) -> Optional[Node]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def neighbors(self, node_id: Optional[int]) -> Set[int]:
        node = self.get_node(node_id)
        if node is None:
            return set()
        return {edge.adjacent for edge in node.edges}

    def edge_count(self) -> int:
        """Yönsüz kenar sayısı (her kenar iki uçta da kayıtlı)."""
        return sum(len(node.edges) for node in self.nodes.values()) // 2

    def iter_edges(self) -> Iterator[Edge]:
        """Her yönsüz kenarı bir kez, ilk sahibinin bakış açısıyla verir."""
        emitted: Dict[Tuple[int, int, int], int] = {}
        for node in self.nodes.values():
            for edge in node.edges:
                twin = (edge.adjacent, edge.parent, edge.weight)
                # Karşı uçta zaten verilmiş ikizi varsa atla
                if emitted.get(twin, 0) > 0:
                    emitted[twin] -= 1
                    continue
                key = (edge.parent, edge.adjacent, edge.weight)
                emitted[key] = emitted.get(key, 0) + 1
                yield edge

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:  # len(graph) -> düğüm sayısı
        return len(self.nodes)
