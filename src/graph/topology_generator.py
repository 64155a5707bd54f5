from __future__ import annotations

import random
from typing import Optional, Tuple

from .graph_model import Graph

# Varsayılan kenar ağırlığı aralığı (tam sayı)
EDGE_WEIGHT_RANGE = (1, 20)


def generate_random_graph(
    num_nodes: int = 30,
    p: float = 0.2,
    seed: Optional[int] = None,
    weight_range: Tuple[int, int] = EDGE_WEIGHT_RANGE,
    connected: bool = True,
) -> Graph:
    """G(n, p) benzeri rastgele, ağırlıklı bir graf üretir.

    Strateji:
    1. connected=True ise önce rastgele bir "ağaç" kurarak grafı bağlı yap.
    2. Ardından her düğüm çifti için ek olarak p olasılıkla kenar ekle.

    Kenarsız düğümler de add_node ile eklenir; böylece düğüm sırası her
    zaman 0..num_nodes-1 olur.
    """
    if seed is not None:
        random.seed(seed)

    g = Graph()

    # 1) Düğümler
    for i in range(num_nodes):
        g.add_node(i)

    # 2) Bağlılığı garanti eden basit rastgele ağaç
    linked = set()
    if connected:
        for i in range(1, num_nodes):
            # Her düğümü kendinden önceki rastgele bir düğüme bağla
            j = random.randint(0, i - 1)
            g.add_undirected_edge(i, j, random.randint(*weight_range))
            linked.add((j, i))

    # 3) Ek rastgele kenarlar
    for i in range(num_nodes):
        for j in range(i + 1, num_nodes):
            if (i, j) in linked:
                continue  # Zaten kenar varsa geç
            if random.random() < p:
                g.add_undirected_edge(i, j, random.randint(*weight_range))

    return g
