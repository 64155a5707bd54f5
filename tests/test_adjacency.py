from graph.adjacency import has_complete_adjacency, is_adjacent, neighbors, sequence_to_string


def test_is_adjacent_is_symmetric(scenario_graph):
    assert is_adjacent(scenario_graph, 1, 2)
    assert is_adjacent(scenario_graph, 2, 1)
    assert not is_adjacent(scenario_graph, 1, 3)


def test_node_is_adjacent_to_itself(scenario_graph):
    assert is_adjacent(scenario_graph, 3, 3)
    # ID eşitliği yeterli, düğümün grafta olması gerekmez
    assert is_adjacent(scenario_graph, 99, 99)
    assert not is_adjacent(scenario_graph, 99, 1)


def test_neighbors(scenario_graph):
    assert neighbors(scenario_graph, 5) == {2, 4, 7}
    assert neighbors(scenario_graph, None) == set()
    assert neighbors(scenario_graph, 100) == set()


def test_complete_adjacency_vacuous_for_empty_source(scenario_graph):
    assert has_complete_adjacency(scenario_graph, [], [1, 2])
    assert has_complete_adjacency(scenario_graph, set(), [])


def test_complete_adjacency(scenario_graph):
    assert has_complete_adjacency(scenario_graph, [1, 3], [2])
    assert not has_complete_adjacency(scenario_graph, [1, 6], [2])
    assert not has_complete_adjacency(scenario_graph, [1], [])


def test_complete_adjacency_counts_self(scenario_graph):
    assert has_complete_adjacency(scenario_graph, [6], [6])


def test_sequence_to_string():
    assert sequence_to_string([]) == ""
    assert sequence_to_string([4]) == "4"
    assert sequence_to_string([1, 2, 3]) == "1 -> 2 -> 3"
