"""
Komut satırı arayüzü:
- Kenar listesi dosyasını okur ve grafı kurar.
- Seçilen operasyonu (BFS, DFS, BK, PRIM, DSATUR) çalıştırır.
- Sonucu stdout'a, logları stderr'e yazar.

Örnekler:
    graph-engine graph.txt 1            # DFS, 1'den başla
    graph-engine graph.txt BFS 1
    graph-engine graph.txt PRIM
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from algorithms.base import RecursionDepthError
from algorithms.dispatcher import GraphOperation, RunConfig, run_operation
from graph.api import EdgeFormatError, load_graph_txt

logger = logging.getLogger(__name__)


def _is_int(text: str) -> bool:
    try:
        int(text)
    except ValueError:
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-engine",
        description="Run BFS, DFS, Bron-Kerbosch, Prim or DSatur on an edge-list graph",
    )
    parser.add_argument("file", type=Path, help="edge list file, one 'from,to[,weight]' per line")
    parser.add_argument(
        "operation",
        nargs="?",
        help="BFS, DFS, BK, PRIM or DSATUR (a bare integer means DFS from that node)",
    )
    parser.add_argument("start", nargs="?", help="start node ID for BFS/DFS")
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="ANSI colors in DSatur output (default: only when stdout is a terminal)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def parse_run_config(argv: Optional[List[str]] = None) -> RunConfig:
    """Argümanları RunConfig'e çevirir; hatada argparse ile çıkar (kod 2)."""
    parser = build_parser()
    args = parser.parse_args(argv)

    operation_text: Optional[str] = args.operation
    start_text: Optional[str] = args.start

    # "graph.txt 3" -> DFS, başlangıç 3
    if operation_text is not None and start_text is None and _is_int(operation_text):
        operation_text, start_text = GraphOperation.DFS.value, operation_text

    try:
        operation = GraphOperation.parse(operation_text) if operation_text else GraphOperation.DFS
        if start_text is not None and not _is_int(start_text):
            raise ValueError(f"The start node ID must be an integer, got {start_text!r}.")
        start = int(start_text) if start_text is not None else None
        colorize = args.color if args.color is not None else sys.stdout.isatty()
        config = RunConfig(
            file_path=args.file,
            operation=operation,
            start_node_id=start,
            colorize=colorize,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))

    return config


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_run_config(argv)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        graph = load_graph_txt(config.file_path)
    except FileNotFoundError:
        print(f"error: file not found: {config.file_path}", file=sys.stderr)
        return 1
    except EdgeFormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d nodes and %d edges from %s", len(graph), graph.edge_count(), config.file_path)

    try:
        result = run_operation(graph, config)
    except RecursionDepthError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
