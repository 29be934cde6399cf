from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dense_graph")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"


from ._connected_components import ccs, get_disjoint_set, split_ccs
from ._disjoint_set import DisjointSet
from ._dot import to_dot, write_dot
from ._dtypes import DType
from ._families import complete, cycle, is_cycle, linear, wheel
from ._graph import DiGraph, Graph, GraphBase, OutEdge, Vertex
from ._mst import kruskal
from ._properties import Properties, has_capacities, is_directed, is_weighted
from ._regular import is_regular, regular_degree
from ._search import (
    NO_PREDECESSOR,
    VisitationTable,
    bfs,
    dfs,
    dijkstra,
    dijkstra_shortest_path,
    reconstruct_path,
)
from ._util import create_graph

__all__ = [
    "NO_PREDECESSOR",
    "DType",
    "DiGraph",
    "DisjointSet",
    "Graph",
    "GraphBase",
    "OutEdge",
    "Properties",
    "Vertex",
    "VisitationTable",
    "bfs",
    "ccs",
    "complete",
    "create_graph",
    "cycle",
    "dfs",
    "dijkstra",
    "dijkstra_shortest_path",
    "get_disjoint_set",
    "has_capacities",
    "is_cycle",
    "is_directed",
    "is_regular",
    "is_weighted",
    "kruskal",
    "linear",
    "reconstruct_path",
    "regular_degree",
    "split_ccs",
    "to_dot",
    "wheel",
    "write_dot",
]
