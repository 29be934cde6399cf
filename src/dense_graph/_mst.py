from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dense_graph._disjoint_set import DisjointSet
from dense_graph._properties import copy_properties

if TYPE_CHECKING:
    from dense_graph._graph import Graph, OutEdge

logger = logging.getLogger(__name__)


def _undirected_edges(graph: Graph) -> list[tuple[int, int, OutEdge]]:
    # each mirrored pair once, in adjacency order
    return [
        (u, edge.to, edge)
        for u, vertex in enumerate(graph)
        for edge in vertex.out_edges
        if u < edge.to
    ]


def kruskal(graph: Graph) -> Graph:
    """Compute a minimum spanning forest with Kruskal's algorithm.

    For weighted graphs, edges are considered in ascending order of their
    ``weight`` attribute, with ties kept in adjacency order. For unweighted
    graphs, edges are considered in adjacency order and any spanning forest is
    minimal.

    Parameters
    ----------
    graph : Graph
        An undirected graph.

    Returns
    -------
    Graph
        A new graph with the same vertices (and copies of their attributes)
        and one spanning tree per connected component of ``graph``. A graph
        with k components yields ``len(graph) - k`` edges.
    """
    assert not graph.directed, "kruskal operates on undirected graphs"

    edges = _undirected_edges(graph)
    if graph.is_weighted:
        # list.sort is stable
        edges.sort(key=lambda item: item[2].weight)

    mst = graph.strip_edges()
    components = DisjointSet(len(graph))
    for u, v, edge in edges:
        if components.unite(u, v):
            mst._add_edge(u, v, copy_properties(edge.properties))

    logger.debug(
        "spanning forest of %d vertices: kept %d of %d edges",
        len(graph),
        mst.num_edges(),
        len(edges),
    )
    return mst
