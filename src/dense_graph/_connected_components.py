from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dense_graph._disjoint_set import DisjointSet

if TYPE_CHECKING:
    from dense_graph._graph import Graph

logger = logging.getLogger(__name__)


def get_disjoint_set(graph: Graph) -> DisjointSet:
    """Build a disjoint set whose sets are the connected components of ``graph``."""
    assert not graph.directed, "connected components exist in undirected graphs"

    components = DisjointSet(len(graph))
    for u, vertex in enumerate(graph):
        for edge in vertex.out_edges:
            # only one of the two mirrors is needed
            if u < edge.to:
                components.unite(u, edge.to)
    return components


def ccs(graph: Graph) -> int:
    """Return the number of connected components of ``graph``."""
    return get_disjoint_set(graph).sets()


def split_ccs(graph: Graph) -> list[Graph]:
    """Split ``graph`` into one graph per connected component.

    Components are ordered by their lowest vertex index. Within a component,
    vertices keep their relative order. Vertex and edge attributes are copied,
    ``graph`` is left untouched.

    Parameters
    ----------
    graph : Graph
        An undirected graph.

    Returns
    -------
    list[Graph]
        The component graphs. Their vertex counts add up to ``len(graph)``.
    """
    components = get_disjoint_set(graph)
    roots = [components.find(v) for v in range(len(graph))]

    # number the components in order of first encounter
    component_index: dict[int, int] = {}
    for root in roots:
        if root not in component_index:
            component_index[root] = len(component_index)

    # position of every vertex within its component
    counters = [0] * len(component_index)
    local_index = [0] * len(graph)
    for v, root in enumerate(roots):
        c = component_index[root]
        local_index[v] = counters[c]
        counters[c] += 1

    result = [graph._spawn() for _ in component_index]
    for v, vertex in enumerate(graph):
        copied = vertex.copy()
        for edge in copied.out_edges:
            edge.to = local_index[edge.to]
        result[component_index[roots[v]]]._append_vertex(copied)

    logger.debug(
        "split graph of %d vertices into %d components", len(graph), len(result)
    )
    return result
