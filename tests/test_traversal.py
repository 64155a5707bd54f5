import networkx as nx
import pytest

from algorithms.base import RecursionDepthError
from algorithms.traversal import BreadthFirstSearch, DepthFirstSearch, DFSConfig
from graph.api import build_graph, generate_random_graph, sequence_to_string, to_networkx


def test_bfs_scenario_order(scenario_graph):
    result = BreadthFirstSearch().run(scenario_graph, 1)
    assert sequence_to_string(result.nodes) == "1 -> 2 -> 4 -> 3 -> 5 -> 6 -> 7 -> 8 -> 9"
    assert result.start_node_id == 1


def test_dfs_scenario_order(scenario_graph):
    result = DepthFirstSearch().run(scenario_graph, 1)
    assert sequence_to_string(result.nodes) == "1 -> 2 -> 3 -> 5 -> 4 -> 6 -> 7 -> 8 -> 9"


@pytest.mark.parametrize("algorithm", [BreadthFirstSearch(), DepthFirstSearch()])
def test_absent_start_node_gives_empty_result(scenario_graph, algorithm):
    assert algorithm.run(scenario_graph, 42).nodes == []
    assert algorithm.run(scenario_graph, None).nodes == []


def test_bfs_marks_visited_on_enqueue():
    # 3 hem 1'in hem 2'nin komşusu; yalnızca bir kez kuyruğa girmeli
    g = build_graph("1,2\n1,3\n2,3\n3,4")
    assert BreadthFirstSearch().run(g, 1).nodes == [1, 2, 3, 4]


def test_traversals_stay_in_component():
    g = build_graph("1,2\n2,3\n10,11")
    assert BreadthFirstSearch().run(g, 10).nodes == [10, 11]
    assert DepthFirstSearch().run(g, 3).nodes == [3, 2, 1]


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("algorithm", [BreadthFirstSearch(), DepthFirstSearch()])
def test_traversal_visits_component_exactly_once(seed, algorithm):
    g = generate_random_graph(num_nodes=25, p=0.05, seed=seed, connected=False)
    nx_graph = to_networkx(g)

    for start in (0, 7, 24):
        visited = algorithm.run(g, start).nodes
        assert visited[0] == start
        assert len(visited) == len(set(visited))
        assert set(visited) == nx.node_connected_component(nx_graph, start)


def test_dfs_depth_guard_raises():
    g = build_graph("\n".join(f"{i},{i + 1}" for i in range(1, 50)))

    with pytest.raises(RecursionDepthError, match="DFS"):
        DepthFirstSearch(DFSConfig(max_depth=10)).run(g, 1)

    assert len(DepthFirstSearch(DFSConfig(max_depth=50)).run(g, 1).nodes) == 50


def test_traversal_does_not_mutate_graph(scenario_graph):
    before = {n: list(node.edges) for n, node in scenario_graph.nodes.items()}
    BreadthFirstSearch().run(scenario_graph, 1)
    DepthFirstSearch().run(scenario_graph, 1)
    assert {n: list(node.edges) for n, node in scenario_graph.nodes.items()} == before
