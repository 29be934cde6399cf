from .bfs import bfs
from .dfs import dfs
from .dijkstra import (
    NO_PREDECESSOR,
    dijkstra,
    dijkstra_shortest_path,
    reconstruct_path,
)
from .visitation_table import VisitationTable

__all__ = [
    "NO_PREDECESSOR",
    "VisitationTable",
    "bfs",
    "dfs",
    "dijkstra",
    "dijkstra_shortest_path",
    "reconstruct_path",
]
