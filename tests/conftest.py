import pytest

from graph.api import build_graph

# 9 düğümlü, ağırlıksız örnek graf
SCENARIO_EDGES = """
1,2
1,4
2,3
2,5
4,5
4,6
5,7
7,8
7,9
8,9
"""

# Prim örneği (ağırlıklı)
WEIGHTED_EDGES = """
1,6,3
6,7,9
7,2,5
2,5,10
6,4,20
4,3,18
"""


@pytest.fixture
def scenario_graph():
    return build_graph(SCENARIO_EDGES)


@pytest.fixture
def weighted_graph():
    return build_graph(WEIGHTED_EDGES)


@pytest.fixture
def path_graph():
    return build_graph("1,2\n2,3")


@pytest.fixture
def triangle_graph():
    return build_graph("1,2\n1,3\n2,3")
