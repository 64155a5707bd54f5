from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Mapping, Set

from .graph_model import Edge, Graph


def connected_component(graph: Graph, start: int) -> Set[int]:
    """Basit BFS ile start'ın bağlı bileşenini bulur."""
    if start not in graph.nodes:
        return set()

    queue = deque([start])
    seen = {start}
    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def is_independent_set(graph: Graph, nodes: Iterable[int]) -> bool:
    """Kümedeki hiçbir düğüm çifti arasında kenar olmamalı."""
    members = set(nodes)
    for node_id in members:
        if node_id not in graph.nodes:
            return False
        # Öz-döngü bağımsızlığı bozmaz
        if (graph.neighbors(node_id) - {node_id}) & members:
            return False
    return True


def is_maximal_independent_set(graph: Graph, nodes: Iterable[int]) -> bool:
    """Bağımsız ve dışarıdan hiçbir düğüm eklenemiyor mu?"""
    members = set(nodes)
    if not is_independent_set(graph, members):
        return False
    for node_id in graph.nodes:
        if node_id in members:
            continue
        # Hiçbir üyeye komşu değilse kümeye eklenebilirdi
        if not graph.neighbors(node_id) & members:
            return False
    return True


def is_proper_coloring(graph: Graph, colors: Mapping[int, int]) -> bool:
    """Tüm düğümler renkli, renkler >= 1 ve komşular farklı renkte mi?"""
    if set(colors) != set(graph.nodes):
        return False
    for node_id, color in colors.items():
        if color < 1:
            return False
        for neighbor in graph.neighbors(node_id) - {node_id}:
            if colors[neighbor] == color:
                return False
    return True


def is_spanning_tree(graph: Graph, edges: List[Edge]) -> bool:
    """Kenarlar çevrimsiz mi, n-1 tane mi ve tüm düğümleri kapsıyor mu?

    - Her kenar grafta gerçekten bulunmalı
    - Union-find ile çevrim kontrolü yapılır
    """
    if len(edges) != max(len(graph) - 1, 0):
        return False

    parent: Dict[int, int] = {node_id: node_id for node_id in graph.nodes}

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for edge in edges:
        node = graph.get_node(edge.parent)
        if node is None or edge.adjacent not in graph.nodes:
            return False
        if not any(e.adjacent == edge.adjacent and e.weight == edge.weight for e in node.edges):
            return False
        root_u, root_v = find(edge.parent), find(edge.adjacent)
        if root_u == root_v:
            return False  # Çevrim
        parent[root_u] = root_v

    # n-1 çevrimsiz kenar => tek bileşen
    return True
