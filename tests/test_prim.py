import networkx as nx
import pytest

from algorithms.spanning_tree import Prim
from graph.api import Graph, build_graph, generate_random_graph, is_spanning_tree, to_networkx


def test_scenario_tree(weighted_graph):
    result = Prim().run(weighted_graph)

    assert [str(e) for e in result.edges] == [
        "(1 - 6, w:3)",
        "(6 - 7, w:9)",
        "(7 - 2, w:5)",
        "(2 - 5, w:10)",
        "(6 - 4, w:20)",
        "(4 - 3, w:18)",
    ]
    assert result.total_weight == 65
    assert result.start_node_id == 1
    assert result.is_complete
    assert result.visited_count == 7


def test_starts_from_first_inserted_node():
    g = build_graph("5,1,2\n1,2,1")
    result = Prim().run(g)
    assert result.start_node_id == 5
    assert [str(e) for e in result.edges] == ["(5 - 1, w:2)", "(1 - 2, w:1)"]


def test_equal_weights_resolve_in_insertion_order(triangle_graph):
    result = Prim().run(triangle_graph)
    assert [str(e) for e in result.edges] == ["(1 - 2, w:1)", "(1 - 3, w:1)"]


def test_stale_edges_are_skipped():
    # 1-3 kenarı 3 ziyaret edildikten sonra heap'te bayat kalır
    g = build_graph("1,2,1\n2,3,1\n1,3,5\n3,4,7")
    result = Prim().run(g)
    assert [(e.parent, e.adjacent) for e in result.edges] == [(1, 2), (2, 3), (3, 4)]
    assert result.total_weight == 9


def test_disconnected_graph_reports_partial_tree():
    g = build_graph("1,2,4\n3,4,1")
    result = Prim().run(g)

    assert not result.is_complete
    assert result.visited_count == 2
    assert result.total_nodes == 4
    assert result.total_weight == 4
    assert len(result.edges) == 1


def test_empty_graph():
    result = Prim().run(Graph())
    assert result.start_node_id is None
    assert result.edges == []
    assert result.total_weight == 0


def test_single_node_is_a_complete_tree():
    g = Graph()
    g.add_node(3)
    result = Prim().run(g)
    assert result.is_complete
    assert result.visited_count == 1


@pytest.mark.parametrize("seed", range(8))
def test_random_graph_minimum_weight(seed):
    g = generate_random_graph(num_nodes=30, p=0.2, seed=seed)
    result = Prim().run(g)

    expected = nx.minimum_spanning_tree(to_networkx(g)).size(weight="weight")
    assert result.total_weight == expected
    assert result.total_weight == sum(e.weight for e in result.edges)
    assert len(result.edges) == len(g) - 1
    assert is_spanning_tree(g, result.edges)
