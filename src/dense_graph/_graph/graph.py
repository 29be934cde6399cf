from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, overload

from dense_graph._properties import copy_properties

from .elements import OutEdge
from .graph_base import GraphBase

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dense_graph._properties import Properties


class Graph(GraphBase):
    """An undirected graph.

    Every edge {u, v} is stored twice, as ``u -> v`` and ``v -> u``, with
    equal but independent attribute copies.
    """

    directed: Literal[False] = False

    def num_edges(self) -> int:
        """Get the total number of edges in the graph.

        Returns
        -------
        int
            The number of undirected edges, each mirrored pair counted once.
        """
        return self._num_out_edges // 2

    def max_edges(self) -> int:
        num_vertices = len(self)
        return num_vertices * (num_vertices - 1) // 2

    def degree(self, index: int) -> int:
        """Return the number of edges incident to a vertex.

        Parameters
        ----------
        index : int
            The vertex to count incident edges for.

        Returns
        -------
        int
            The number of neighbors of the vertex.
        """
        return self.out_degree(index)

    def in_degree(self, index: int) -> int:
        return self.out_degree(index)

    def neighbors(self, index: int) -> list[int]:
        """Indices adjacent to ``index``, in out-edge order."""
        return [edge.to for edge in self.vertex(index).out_edges]

    @overload
    def edges(
        self, vertex: int | None = ..., data: Literal[True] = ...
    ) -> Iterator[tuple[tuple[int, int], Any]]: ...
    @overload
    def edges(
        self, vertex: int | None = ..., data: Literal[False] = ...
    ) -> Iterator[tuple[int, int]]: ...
    def edges(self, vertex: int | None = None, data: bool = False) -> Iterator[tuple]:
        """Iterate over edges in the graph.

        Each edge is yielded only once with vertices ordered such that
        u < v to avoid duplicates.

        Parameters
        ----------
        vertex : int, optional
            If provided, only iterate over edges incident to this vertex.
            If None, iterate over all edges in the graph.
        data : bool, default False
            If True, yield (edge, properties) tuples. If False, yield
            only edge tuples.

        Yields
        ------
        tuple or tuple[tuple, Any]
            If `data=False`: tuples of (u, v) representing edges.
            If `data=True`: tuples of ((u, v), properties).
        """
        for u, edge in self._iter_edges(vertex):
            pair = (u, edge.to) if u < edge.to else (edge.to, u)
            if data:
                yield pair, edge.properties
            else:
                yield pair

    def _normalize(self, u: int, v: int) -> tuple[int, int]:
        # so that get_edge(1, 0) returns the same record as get_edge(0, 1)
        return (v, u) if u > v else (u, v)

    def _insert_edge(self, u: int, v: int, properties: Properties | None) -> None:
        # create both records before storing either of them
        mirrored = OutEdge(u, copy_properties(properties))
        forward = OutEdge(v, properties)
        self._vertices[v].out_edges.append(mirrored)
        self._vertices[u].out_edges.append(forward)
        self._num_out_edges += 2

    def _remove_edge(self, u: int, v: int) -> bool:
        forward = self._vertices[u].find_edge(v)
        backward = self._vertices[v].find_edge(u)
        assert (forward is None) == (backward is None), (
            f"edge ({u}, {v}) is not mirrored"
        )
        if forward is None:
            return False
        del self._vertices[u].out_edges[forward]
        del self._vertices[v].out_edges[backward]
        self._num_out_edges -= 2
        return True

    def _edge_records(self, u: int, v: int) -> list[OutEdge]:
        records = []
        for source, target in ((u, v), (v, u)):
            vertex = self._vertices[source]
            position = vertex.find_edge(target)
            if position is not None:
                records.append(vertex.out_edges[position])
        return records

    def _merged_edge(self, edges: list[OutEdge], u: int) -> OutEdge:
        # contract keeps u -> x, so x -> u must survive to stay its mirror
        for edge in edges:
            if edge.to == u:
                return edge
        return edges[0]

    def _cleave_mirrors(self, v: int, new_v: int, sources: list[int]) -> None:
        # the records v -> i follow their mirrors i -> new_v
        moving = set(sources)
        staying = []
        moved = []
        for edge in self._vertices[v].out_edges:
            (moved if edge.to in moving else staying).append(edge)
        self._vertices[v].out_edges[:] = staying
        self._vertices[new_v].out_edges.extend(moved)

    def _iter_edges(self, vertex: int | None = None) -> Iterator[tuple[int, OutEdge]]:
        if vertex is not None:
            for edge in self.vertex(vertex).out_edges:
                yield vertex, edge
            return
        for u, record in enumerate(self._vertices):
            for edge in record.out_edges:
                if u < edge.to:
                    yield u, edge


class DiGraph(GraphBase):
    """A directed graph."""

    directed: Literal[True] = True

    def num_edges(self) -> int:
        """Get the total number of edges in the graph.

        Returns
        -------
        int
            The number of directed edges in the graph.
        """
        return self._num_out_edges

    def max_edges(self) -> int:
        num_vertices = len(self)
        return num_vertices * (num_vertices - 1)

    def successors(self, index: int) -> list[int]:
        return [edge.to for edge in self.vertex(index).out_edges]

    def predecessors(self, index: int) -> list[int]:
        self._check_vertex(index)
        return [u for u, vertex in enumerate(self._vertices) if vertex.has_edge_to(index)]

    @overload
    def in_edges(
        self, vertex: int | None = ..., data: Literal[True] = ...
    ) -> Iterator[tuple[tuple[int, int], Any]]: ...
    @overload
    def in_edges(
        self, vertex: int | None = ..., data: Literal[False] = ...
    ) -> Iterator[tuple[int, int]]: ...
    def in_edges(self, vertex: int | None = None, data: bool = False) -> Iterator[tuple]:
        """Iterate over incoming edges to a vertex.

        Only edges directed toward the specified vertex are yielded.

        Parameters
        ----------
        vertex : int, optional
            The target vertex to find incoming edges for. If None, iterate
            over all edges in the graph.
        data : bool
            If True, yield (edge, properties) tuples. If False, yield
            only edge tuples.

        Yields
        ------
        tuple or tuple[tuple, Any]
            If `data=False`: tuples of (source, target) where target is the
            specified vertex.
            If `data=True`: tuples of ((source, target), properties).
        """
        if vertex is not None:
            self._check_vertex(vertex)
        for u, edge in self._iter_edges():
            if vertex is None or edge.to == vertex:
                yield ((u, edge.to), edge.properties) if data else (u, edge.to)

    @overload
    def out_edges(
        self, vertex: int | None = ..., data: Literal[True] = ...
    ) -> Iterator[tuple[tuple[int, int], Any]]: ...
    @overload
    def out_edges(
        self, vertex: int | None = ..., data: Literal[False] = ...
    ) -> Iterator[tuple[int, int]]: ...
    def out_edges(self, vertex: int | None = None, data: bool = False) -> Iterator[tuple]:
        """Iterate over outgoing edges from a vertex.

        Only edges directed away from the specified vertex are yielded.

        Parameters
        ----------
        vertex : int, optional
            The source vertex to find outgoing edges for. If None, iterate
            over all edges in the graph.
        data : bool
            If True, yield (edge, properties) tuples. If False, yield
            only edge tuples.

        Yields
        ------
        tuple or tuple[tuple, Any]
            If `data=False`: tuples of (source, target) where source is the
            specified vertex.
            If `data=True`: tuples of ((source, target), properties).
        """
        for u, edge in self._iter_edges(vertex):
            yield ((u, edge.to), edge.properties) if data else (u, edge.to)

    def _insert_edge(self, u: int, v: int, properties: Properties | None) -> None:
        self._vertices[u].out_edges.append(OutEdge(v, properties))
        self._num_out_edges += 1

    def _remove_edge(self, u: int, v: int) -> bool:
        position = self._vertices[u].find_edge(v)
        if position is None:
            return False
        del self._vertices[u].out_edges[position]
        self._num_out_edges -= 1
        return True

    def _edge_records(self, u: int, v: int) -> list[OutEdge]:
        edge = self.get_edge(u, v)
        return [] if edge is None else [edge]

    def _iter_edges(self, vertex: int | None = None) -> Iterator[tuple[int, OutEdge]]:
        if vertex is not None:
            for edge in self.vertex(vertex).out_edges:
                yield vertex, edge
            return
        for u, record in enumerate(self._vertices):
            for edge in record.out_edges:
                yield u, edge
