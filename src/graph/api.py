from __future__ import annotations

from .graph_model import Graph, Node, Edge
from .adjacency import is_adjacent, neighbors, has_complete_adjacency, sequence_to_string
from .topology_generator import generate_random_graph
from .validators import (
    connected_component,
    is_independent_set,
    is_maximal_independent_set,
    is_proper_coloring,
    is_spanning_tree,
)
from .io import (
    EdgeFormatError,
    decode_edge_lines,
    parse_edge_line,
    parse_edge_lines,
    load_graph_txt,
    save_graph_txt,
    graph_to_dict,
    to_networkx,
)


__all__ = [
    "Graph",
    "Node",
    "Edge",
    "is_adjacent",
    "neighbors",
    "has_complete_adjacency",
    "sequence_to_string",
    "generate_random_graph",
    "connected_component",
    "is_independent_set",
    "is_maximal_independent_set",
    "is_proper_coloring",
    "is_spanning_tree",
    "EdgeFormatError",
    "decode_edge_lines",
    "parse_edge_line",
    "parse_edge_lines",
    "load_graph_txt",
    "save_graph_txt",
    "graph_to_dict",
    "to_networkx",
    "build_graph",
]


def build_graph(text: str) -> Graph:
    """Çok satırlı kenar listesi metninden doğrudan graf kurar.

    GUI ve testler dosya yazmadan kullanabilsin diye.
    """
    return parse_edge_lines(text.splitlines())
