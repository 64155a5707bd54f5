# src/algorithms/__init__.py
from .base import GraphAlgorithm, RecursionDepthError

# Gezinme
from .traversal import BreadthFirstSearch, DepthFirstSearch, DFSConfig

# Kümeler / ağaçlar / boyama
from .independent_sets import BronKerbosch, BronKerboschConfig
from .spanning_tree import Prim
from .coloring import DSatur
