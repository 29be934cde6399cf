"""Constructors for common families of undirected graphs.

All constructors take the attribute layout of the new graph as keyword
arguments, see :class:`~dense_graph.Graph`. Attributes are zero-initialized.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from dense_graph._graph import Graph

if TYPE_CHECKING:
    from collections.abc import Mapping


def complete(
    n: int,
    vertex_attr_dtypes: Mapping[str, str] | None = None,
    edge_attr_dtypes: Mapping[str, str] | None = None,
) -> Graph:
    """The complete graph on ``n`` vertices, with ``n * (n - 1) / 2`` edges."""
    graph = Graph(n, vertex_attr_dtypes, edge_attr_dtypes)
    us, vs = np.triu_indices(n, k=1)
    graph.add_edges(np.stack([us, vs], axis=1))
    return graph


def cycle(
    n: int,
    vertex_attr_dtypes: Mapping[str, str] | None = None,
    edge_attr_dtypes: Mapping[str, str] | None = None,
) -> Graph:
    """The cycle ``0 - 1 - ... - (n - 1) - 0``, for ``n >= 3``."""
    assert n >= 3, "a cycle needs at least 3 vertices"
    graph = linear(n, vertex_attr_dtypes, edge_attr_dtypes)
    graph.add_edge(0, n - 1)
    return graph


def linear(
    n: int,
    vertex_attr_dtypes: Mapping[str, str] | None = None,
    edge_attr_dtypes: Mapping[str, str] | None = None,
) -> Graph:
    """The path ``0 - 1 - ... - (n - 1)``."""
    graph = Graph(n, vertex_attr_dtypes, edge_attr_dtypes)
    if n > 1:
        indices = np.arange(n - 1)
        graph.add_edges(np.stack([indices, indices + 1], axis=1))
    return graph


def wheel(
    n: int,
    vertex_attr_dtypes: Mapping[str, str] | None = None,
    edge_attr_dtypes: Mapping[str, str] | None = None,
) -> Graph:
    """The wheel on ``n >= 4`` vertices.

    Vertex 0 is the hub, connected to every vertex of the rim cycle
    ``1 - 2 - ... - (n - 1) - 1``. The wheel has ``2 * (n - 1)`` edges.
    """
    assert n >= 4, "a wheel needs at least 4 vertices"
    graph = Graph(n, vertex_attr_dtypes, edge_attr_dtypes)
    rim = np.arange(1, n)
    graph.add_edges(np.stack([np.zeros_like(rim), rim], axis=1))
    graph.add_edges(np.stack([rim[:-1], rim[1:]], axis=1))
    graph.add_edge(1, n - 1)
    return graph


def is_cycle(graph: Graph) -> bool:
    """Whether ``graph`` is 2-regular with as many edges as vertices.

    A disjoint union of cycles passes this test too.
    """
    assert not graph.directed, "is_cycle is only defined for undirected graphs"
    if graph.num_edges() != len(graph):
        return False
    return all(vertex.out_degree() == 2 for vertex in graph)
