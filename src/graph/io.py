from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

import networkx as nx

from .graph_model import Graph

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
DEFAULT_WEIGHT = 1


class EdgeFormatError(ValueError):
    """Kenar listesindeki bozuk bir satır."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_no}: {reason}: {line!r}")


# ---------- KENAR LİSTESİ (TXT) ----------
def parse_edge_line(line: str, line_no: int = 1) -> Optional[Tuple[int, int, int]]:
    """Tek satırı (from, to, weight) üçlüsüne çevirir.

    Boş satırlar ve '//' ile başlayan yorumlar için None döner.
    Beklenen format: from,to[,weight] (ağırlık verilmezse 1).
    """
    text = line.strip()
    if not text or text.startswith(COMMENT_PREFIX):
        return None

    parts = [p.strip() for p in text.split(",")]
    if len(parts) not in (2, 3):
        raise EdgeFormatError(line_no, line, f"expected 2 or 3 comma-separated fields, got {len(parts)}")

    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise EdgeFormatError(line_no, line, "all fields must be integers") from None

    u, v = values[0], values[1]
    weight = values[2] if len(values) == 3 else DEFAULT_WEIGHT
    return u, v, weight


def parse_edge_lines(lines: Iterable[str], graph: Optional[Graph] = None) -> Graph:
    """Satırları sırayla okuyup grafı kurar; hatalı satırda durur."""
    g = graph if graph is not None else Graph()
    for line_no, line in enumerate(lines, 1):
        parsed = parse_edge_line(line, line_no)
        if parsed is None:
            continue
        u, v, weight = parsed
        g.add_undirected_edge(u, v, weight)

    logger.debug("Parsed graph with %d nodes and %d edges", len(g), g.edge_count())
    return g


def decode_edge_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    """Ham satırları UTF-8 olarak çözer; ilk satırdaki BOM atlanır.

    Çözülemeyen satır, satır numarasıyla EdgeFormatError olur.
    """
    for line_no, raw in enumerate(raw_lines, 1):
        try:
            yield raw.decode("utf-8-sig" if line_no == 1 else "utf-8")
        except UnicodeDecodeError:
            shown = raw.decode("utf-8", errors="replace")
            raise EdgeFormatError(line_no, shown, "not valid UTF-8 text") from None


def load_graph_txt(filename: str | Path) -> Graph:
    """Kenar listesi dosyasından Graph nesnesi yükler."""
    path = Path(filename)
    with path.open("rb") as f:
        return parse_edge_lines(decode_edge_lines(f))


def save_graph_txt(graph: Graph, filename: str | Path) -> None:
    """Grafı aynı kenar listesi formatında yazar (her kenar bir kez)."""
    path = Path(filename)
    with path.open("w", encoding="utf-8") as f:
        for edge in graph.iter_edges():
            f.write(f"{edge.parent},{edge.adjacent},{edge.weight}\n")


# ---------- DÖNÜŞÜMLER ----------
def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Graph nesnesini JSON'a uygun bir sözlüğe çevirir."""
    nodes = [{"id": node_id} for node_id in graph.nodes]
    edges = [
        {"u": edge.parent, "v": edge.adjacent, "weight": edge.weight}
        for edge in graph.iter_edges()
    ]
    return {"nodes": nodes, "edges": edges}


def to_networkx(graph: Graph) -> nx.Graph:
    """Çizim ve çapraz kontrol için networkx grafı üretir.

    Paralel kenarlarda networkx son ağırlığı tutar.
    """
    g = nx.Graph()
    g.add_nodes_from(graph.nodes)
    for edge in graph.iter_edges():
        g.add_edge(edge.parent, edge.adjacent, weight=edge.weight)
    return g
