from __future__ import annotations

from typing import TYPE_CHECKING, Literal, overload

from ._graph import DiGraph, Graph

if TYPE_CHECKING:
    from collections.abc import Mapping


@overload
def create_graph(
    num_vertices: int = ...,
    vertex_attr_dtypes: Mapping[str, str] | None = ...,
    edge_attr_dtypes: Mapping[str, str] | None = ...,
    directed: Literal[False] = ...,
) -> Graph: ...
@overload
def create_graph(
    num_vertices: int = ...,
    vertex_attr_dtypes: Mapping[str, str] | None = ...,
    edge_attr_dtypes: Mapping[str, str] | None = ...,
    directed: Literal[True] = ...,
) -> DiGraph: ...
def create_graph(
    num_vertices: int = 0,
    vertex_attr_dtypes: Mapping[str, str] | None = None,
    edge_attr_dtypes: Mapping[str, str] | None = None,
    directed: bool = False,
) -> Graph | DiGraph:
    """Convenience factory function to create a graph instance.

    If `directed` is True, it will create a directed graph; otherwise, it will
    create an undirected graph.

    Parameters
    ----------
    num_vertices : int, optional
        The number of vertices to create. Defaults to 0.
    vertex_attr_dtypes : Mapping[str, str], optional
        A mapping of vertex attribute names to their data types.
    edge_attr_dtypes : Mapping[str, str], optional
        A mapping of edge attribute names to their data types.
    directed : bool, optional
        Whether the graph is directed or not. Defaults to False.
    """
    cls = DiGraph if directed else Graph
    return cls(
        num_vertices=num_vertices,
        vertex_attr_dtypes=vertex_attr_dtypes,
        edge_attr_dtypes=edge_attr_dtypes,
    )
