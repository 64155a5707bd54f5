from .bfs import BreadthFirstSearch
from .dfs import DepthFirstSearch, DFSConfig
