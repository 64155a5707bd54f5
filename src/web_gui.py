# src/web_gui.py
from __future__ import annotations

import time

import pandas as pd
import streamlit as st

# Proje modülleri
from algorithms.base import (
    ColoringResult,
    IndependentSetsResult,
    RecursionDepthError,
    SpanningTreeResult,
    TraversalResult,
)
from algorithms.dispatcher import GraphOperation, format_result, run_algorithm
from graph.api import (
    EdgeFormatError,
    Graph,
    build_graph,
    decode_edge_lines,
    parse_edge_lines,
)
from graph.plotting import draw_graph_figure

SAMPLE_EDGES = """// from,to[,weight]
1,6,3
6,7,9
7,2,5
2,5,10
6,4,20
4,3,18
"""

OPERATION_LABELS = {
    GraphOperation.BFS: "BFS - genişlik öncelikli",
    GraphOperation.DFS: "DFS - derinlik öncelikli",
    GraphOperation.BK: "BK - maksimal bağımsız kümeler",
    GraphOperation.PRIM: "PRIM - minimum kapsayan ağaç",
    GraphOperation.DSATUR: "DSATUR - graf boyama",
}


# -----------------------------------------------------------------------------
# 1. VERİ YÜKLEME
# -----------------------------------------------------------------------------

def graph_from_upload(data: bytes) -> Graph:
    """Yüklenen ham dosyayı satır satır çözüp grafı kurar."""
    return parse_edge_lines(decode_edge_lines(data.splitlines(keepends=True)))


def read_graph() -> Graph:
    uploaded = st.sidebar.file_uploader("📄 Kenar listesi dosyası", type=["txt", "csv"])
    if uploaded is not None:
        return graph_from_upload(uploaded.getvalue())
    return build_graph(st.sidebar.text_area("✏️ Kenar listesi", SAMPLE_EDGES, height=220))


# -----------------------------------------------------------------------------
# 2. SONUÇ GÖSTERİMİ
# -----------------------------------------------------------------------------

def render_result(graph, result) -> None:
    if isinstance(result, TraversalResult):
        fig = draw_graph_figure(graph, path_nodes=result.nodes)
        st.metric("🔗 Ziyaret", f"{len(result.nodes)}/{len(graph)}")
    elif isinstance(result, SpanningTreeResult):
        fig = draw_graph_figure(
            graph,
            highlight_edges=[(e.parent, e.adjacent) for e in result.edges],
        )
        m1, m2 = st.columns(2)
        m1.metric("⚖️ Toplam Ağırlık", result.total_weight)
        m2.metric("🌳 Kapsanan Düğüm", f"{result.visited_count}/{result.total_nodes}")
        if result.edges:
            st.table(pd.DataFrame(
                [{"u": e.parent, "v": e.adjacent, "weight": e.weight} for e in result.edges]
            ))
    elif isinstance(result, IndependentSetsResult):
        largest = result.largest
        fig = draw_graph_figure(graph, highlight_nodes=largest[0] if largest else [])
        m1, m2 = st.columns(2)
        m1.metric("🧩 Küme Sayısı", len(result.sets))
        m2.metric("📏 En Büyük Boyut", len(largest[0]) if largest else 0)
    elif isinstance(result, ColoringResult):
        fig = draw_graph_figure(graph, node_colors=result.colors)
        st.metric("🎨 Renk Sayısı", result.color_count)
        st.table(pd.DataFrame(
            [{"node": n, "color": c} for n, c in result.colors.items()]
        ))
    else:
        return

    st.plotly_chart(
        fig,
        use_container_width=True,
        config={"scrollZoom": True, "modeBarButtonsToRemove": ["select2d", "lasso2d"]},
    )


# -----------------------------------------------------------------------------
# 3. ANA UYGULAMA
# -----------------------------------------------------------------------------

def run_guarded(graph: Graph, operation: GraphOperation, start):
    """Algoritmayı çalıştırır; özyineleme sınırı aşılırsa hatayı gösterip durur."""
    try:
        return run_algorithm(graph, operation, start)
    except RecursionDepthError as e:
        st.error(f"Özyineleme sınırı aşıldı: {e}")
        st.stop()


def main():
    st.set_page_config(page_title="Graph Algorithms", layout="wide")
    st.title("Graf Algoritmaları")

    with st.sidebar:
        st.header("AYARLAR")
    try:
        graph = read_graph()
    except EdgeFormatError as e:
        st.error(f"Girdi hatası: {e}")
        st.stop()

    st.sidebar.success(f"**Düğüm:** {len(graph)} | **Kenar:** {graph.edge_count()}")

    operation = st.selectbox(
        "Algoritma",
        list(GraphOperation),
        format_func=lambda op: OPERATION_LABELS[op],
    )

    start = None
    if operation.requires_start_node:
        node_ids = list(graph.nodes)
        if not node_ids:
            st.warning("Graf boş, başlangıç düğümü seçilemez.")
            st.stop()
        start = st.selectbox("🎯 Başlangıç düğümü", node_ids)

    if st.button("🚀 ÇALIŞTIR"):
        t0 = time.time()
        result = run_guarded(graph, operation, start)
        dt = time.time() - t0

        st.caption(f"Süre: {dt:.4f}s")
        st.code(format_result(operation, result) or "(boş sonuç)")
        if len(graph) > 0:
            render_result(graph, result)


if __name__ == "__main__":
    main()
