from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Set, Tuple

import networkx as nx
import plotly.graph_objects as go

from .graph_model import Graph
from .io import to_networkx

# Renk Tanımları
COLOR_START = "#00FF66"  # Neon Yeşil
COLOR_HIGHLIGHT = "#FF0055"  # Neon Kırmızı/Pembe
COLOR_DEFAULT = "#FFF8F8"
COLOR_EDGE = "rgba(200, 200, 200, 0.6)"

# DSatur renk sınıfları için palet (renk numarası 1'den başlar)
CLASS_PALETTE = [
    "#E6194B", "#3CB44B", "#FFE119", "#4363D8", "#F58231",
    "#911EB4", "#46F0F0", "#F032E6", "#BCF60C", "#FABEBE",
]


def _layout(nx_graph: nx.Graph) -> Dict[int, Tuple[float, float]]:
    n = len(nx_graph.nodes)
    k_val = 0.9 / math.sqrt(n) if n > 0 else 0.2
    if len(nx_graph.edges) > 0:
        return nx.spring_layout(nx_graph, seed=42, k=k_val, iterations=50)
    return nx.circular_layout(nx_graph)


def draw_graph_figure(
    graph: Graph,
    path_nodes: Optional[List[int]] = None,
    highlight_edges: Optional[Iterable[Tuple[int, int]]] = None,
    highlight_nodes: Optional[Iterable[int]] = None,
    node_colors: Optional[Dict[int, int]] = None,
) -> go.Figure:
    """
    Grafı çizer: spring layout, ziyaret sırası / MST kenarları / küme vurgusu.

    - path_nodes: BFS/DFS ziyaret sırası (ilk düğüm yeşil, sıra numarası etikette)
    - highlight_edges: kalın çizilecek kenarlar (ör. MST)
    - highlight_nodes: vurgulanacak düğümler (ör. en büyük bağımsız küme)
    - node_colors: DSatur renkleri, düğüm -> renk numarası
    """
    nx_graph = to_networkx(graph)
    pos = _layout(nx_graph)

    order = {nid: i for i, nid in enumerate(path_nodes or [], 1)}
    marked: Set[int] = set(highlight_nodes or [])
    strong: Set[Tuple[int, int]] = set()
    for u, v in highlight_edges or []:
        strong.add((u, v))
        strong.add((v, u))

    # Kenarlar
    edge_x: List[Optional[float]] = []
    edge_y: List[Optional[float]] = []
    strong_x: List[Optional[float]] = []
    strong_y: List[Optional[float]] = []
    for u, v in nx_graph.edges():
        x0, y0 = pos[u]
        x1, y1 = pos[v]
        if (u, v) in strong:
            strong_x.extend([x0, x1, None])
            strong_y.extend([y0, y1, None])
        else:
            edge_x.extend([x0, x1, None])
            edge_y.extend([y0, y1, None])

    trace_edges = go.Scatter(
        x=edge_x, y=edge_y,
        mode="lines",
        line=dict(width=1, color=COLOR_EDGE),
        hoverinfo="none",
    )
    trace_strong = go.Scatter(
        x=strong_x, y=strong_y,
        mode="lines",
        line=dict(width=3, color=COLOR_HIGHLIGHT),
        hoverinfo="none",
    )

    # Düğümler
    node_x, node_y, node_text, node_color, node_size = [], [], [], [], []
    for nid, (x, y) in pos.items():
        node_x.append(x)
        node_y.append(y)

        text = f"<b>Node {nid}</b><br>degree {nx_graph.degree(nid)}"
        if nid in order:
            text += f"<br>visit #{order[nid]}"
        if node_colors and nid in node_colors:
            text += f"<br>color {node_colors[nid]}"
        node_text.append(text)

        if node_colors and nid in node_colors:
            node_color.append(CLASS_PALETTE[(node_colors[nid] - 1) % len(CLASS_PALETTE)])
            node_size.append(14)
        elif path_nodes and nid == path_nodes[0]:
            node_color.append(COLOR_START)
            node_size.append(20)
        elif nid in order or nid in marked:
            node_color.append(COLOR_HIGHLIGHT)
            node_size.append(14)
        else:
            node_color.append(COLOR_DEFAULT)
            node_size.append(8)

    trace_nodes = go.Scatter(
        x=node_x, y=node_y,
        mode="markers+text",
        hoverinfo="text",
        hovertext=node_text,
        text=[str(nid) for nid in pos],
        textposition="top center",
        marker=dict(color=node_color, size=node_size, line=dict(width=1, color="white")),
    )

    fig = go.Figure(
        data=[trace_edges, trace_strong, trace_nodes],
        layout=go.Layout(
            showlegend=False,
            hovermode="closest",
            margin=dict(l=0, r=0, t=0, b=0),
            paper_bgcolor="rgba(227, 237, 252, 0.2)",
            plot_bgcolor="rgba(0,0,0,0)",
            xaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
            yaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
            dragmode="pan",
            height=550,
        ),
    )
    return fig
