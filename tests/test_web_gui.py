import pytest

import web_gui
from algorithms.base import RecursionDepthError
from algorithms.dispatcher import GraphOperation
from graph.api import EdgeFormatError, build_graph


class _Stopped(Exception):
    pass


def test_graph_from_upload_reads_bom_and_crlf():
    graph = web_gui.graph_from_upload(b"\xef\xbb\xbf1,2,4\r\n2,3\r\n")
    assert list(graph.nodes) == [1, 2, 3]
    assert graph.edge_count() == 2


def test_graph_from_upload_rejects_undecodable_bytes():
    with pytest.raises(EdgeFormatError, match="not valid UTF-8") as exc_info:
        web_gui.graph_from_upload(b"1,2\n\xff\xfe,3\n")
    assert exc_info.value.line_no == 2


def test_run_guarded_returns_result():
    graph = build_graph("1,2\n2,3\n")
    result = web_gui.run_guarded(graph, GraphOperation.BFS, 1)
    assert result.nodes == [1, 2, 3]


def test_run_guarded_reports_recursion_limit(monkeypatch):
    errors = []

    def fake_run(graph, operation, start):
        raise RecursionDepthError("DFS", 5)

    def fake_stop():
        raise _Stopped()

    monkeypatch.setattr(web_gui, "run_algorithm", fake_run)
    monkeypatch.setattr(web_gui.st, "error", errors.append)
    monkeypatch.setattr(web_gui.st, "stop", fake_stop)

    with pytest.raises(_Stopped):
        web_gui.run_guarded(build_graph("1,2\n"), GraphOperation.DFS, 1)
    assert len(errors) == 1
    assert "recursion depth exceeded the limit of 5" in errors[0]
