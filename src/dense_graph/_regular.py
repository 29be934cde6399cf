from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dense_graph._graph import GraphBase


def is_regular(graph: GraphBase, degree: int | None = None) -> bool:
    """Whether every vertex has the same out-degree.

    Parameters
    ----------
    graph : GraphBase
        The graph to test.
    degree : int, optional
        If given, every vertex must have exactly this out-degree. An empty
        graph is regular for any given degree, but not regular otherwise.
    """
    if degree is None:
        return regular_degree(graph) is not None
    return all(vertex.out_degree() == degree for vertex in graph)


def regular_degree(graph: GraphBase) -> int | None:
    """The common out-degree of all vertices, or None if there is none."""
    if graph.empty():
        return None
    degree = graph.vertex(0).out_degree()
    return degree if is_regular(graph, degree) else None
