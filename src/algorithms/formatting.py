# src/algorithms/formatting.py
from __future__ import annotations

from typing import List

from algorithms.base import (
    ColoringResult,
    IndependentSetsResult,
    SpanningTreeResult,
    TraversalResult,
)
from graph.api import sequence_to_string

RESET = "\u001b[0m"
COLOR_CODES: List[str] = [
    "\u001b[31m",  # 1 - Kırmızı
    "\u001b[32m",  # 2 - Yeşil
    "\u001b[33m",  # 3 - Sarı
    "\u001b[34m",  # 4 - Mavi
    "\u001b[35m",  # 5 - Magenta
    "\u001b[36m",  # 6 - Camgöbeği
]


def format_traversal(result: TraversalResult) -> str:
    return sequence_to_string(result.nodes)


def format_independent_sets(result: IndependentSetsResult) -> str:
    """Kümeleri boyuta göre (eşitlikte bulunma sırasıyla) listeler."""
    if not result.sets:
        return "Cannot find independent sets in an empty graph"

    ordered = sorted(result.sets, key=len)
    body = ";\n".join("[" + ", ".join(str(n) for n in sorted(s)) + "]" for s in ordered)
    return f"All maximal independent sets ({len(result.sets)}):\n{body}"


def format_spanning_tree(result: SpanningTreeResult) -> str:
    if result.start_node_id is None:
        return "Cannot find a starting node for Prim's algorithm"

    lines: List[str] = []
    # Tek düğümlü grafta 0 kenar zaten tam ağaçtır
    if not result.is_complete and result.total_nodes > 1:
        lines.append("Graph might not be connected!")
        lines.append(f"Nodes in MST: {result.visited_count}/{result.total_nodes}")
        lines.append("")

    lines.append("Minimum Spanning Tree (Prim's Algorithm):")
    lines.append("Edges:")
    lines.extend(str(edge) for edge in result.edges)
    lines.append(f"Total Weight: {result.total_weight}")
    return "\n".join(lines)


def _paint(color: int, text: str) -> str:
    # 6'dan büyük renkler son paleti kullanır
    idx = min(max(color, 1), len(COLOR_CODES)) - 1
    return f"{COLOR_CODES[idx]}{text}{RESET}"


def format_coloring(result: ColoringResult, colorize: bool = False) -> str:
    lines = ["Graph Coloring Result (DSatur Algorithm):"]
    for node_id in sorted(result.colors):
        color = result.colors[node_id]
        label = f"Color {color}"
        if colorize:
            label = _paint(color, label)
        lines.append(f"Node {node_id}: {label}")
    lines.append("")
    lines.append(f"Total colors used: {result.color_count}")
    return "\n".join(lines)
