import pytest

from algorithms.coloring import DSatur
from graph.api import Graph, build_graph, generate_random_graph, is_proper_coloring


def test_path_graph(path_graph):
    result = DSatur().run(path_graph)
    # Önce en yüksek dereceli 2 boyanır, sonra eşitlikte küçük ID
    assert result.colors == {1: 2, 2: 1, 3: 2}
    assert result.color_count == 2


def test_triangle_needs_three_colors(triangle_graph):
    result = DSatur().run(triangle_graph)
    assert result.colors == {1: 1, 2: 2, 3: 3}
    assert result.color_count == 3


def test_ties_break_on_smallest_id():
    g = build_graph("3,4\n1,2")
    result = DSatur().run(g)
    assert result.colors == {1: 1, 2: 2, 3: 1, 4: 2}


def test_saturation_beats_degree():
    # 1 boyandıktan sonra doyma derecesi 1 olan 2, dereceleri daha yüksek olsa da
    # doyma derecesi 0 olan 4/5'ten önce seçilir
    g = build_graph("1,2\n1,3\n1,6\n4,5\n4,7\n4,8\n5,7\n5,8\n")
    result = DSatur().run(g)
    assert list(result.colors) == sorted(result.colors)
    assert is_proper_coloring(g, result.colors)
    assert result.colors[1] == 1
    assert result.colors[2] == 2


def test_even_cycle_is_two_colorable():
    g = build_graph("1,2\n2,3\n3,4\n4,5\n5,6\n6,1")
    assert DSatur().run(g).color_count == 2


def test_empty_graph():
    result = DSatur().run(Graph())
    assert result.colors == {}
    assert result.color_count == 0


def test_isolated_node_gets_first_color():
    g = Graph()
    g.add_node(9)
    assert DSatur().run(g).colors == {9: 1}


@pytest.mark.parametrize("seed", range(8))
def test_random_graph_coloring_is_proper_and_greedy(seed):
    g = generate_random_graph(num_nodes=25, p=0.3, seed=seed)
    result = DSatur().run(g)

    assert is_proper_coloring(g, result.colors)
    assert result.color_count == len(set(result.colors.values()))
    # Her düğüm, daha küçük her rengi bir komşusunda görmüş olmalı
    for node_id, color in result.colors.items():
        neighbor_colors = {result.colors[n] for n in g.neighbors(node_id)}
        assert set(range(1, color)) <= neighbor_colors
