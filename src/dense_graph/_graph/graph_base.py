from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from dense_graph._properties import PropertySchema, copy_properties

from .elements import OutEdge, Vertex
from .views import EdgeAttrs, VertexAttrs

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Mapping

    from dense_graph._properties import Properties

logger = logging.getLogger(__name__)


class GraphBase:
    """A dense-indexed adjacency list.

    Vertices are identified by their position ``0 .. len(graph) - 1``.
    Removing a vertex shifts the indices of all later vertices down by one,
    so indices never have gaps. Graphs are simple: no self-loops and at most
    one edge per ordered pair of vertices.

    Parameters
    ----------
    num_vertices : int
        Number of vertices to create. Their attributes are zero-initialized.
    vertex_attr_dtypes : Mapping[str, str], optional
        Vertex attribute names mapped to dtype strings, e.g.
        ``{"capacity": "int"}``.
    edge_attr_dtypes : Mapping[str, str], optional
        Edge attribute names mapped to dtype strings, e.g.
        ``{"weight": "float64"}``.
    """

    directed: ClassVar[bool] = False

    def __init__(
        self,
        num_vertices: int = 0,
        vertex_attr_dtypes: Mapping[str, str] | None = None,
        edge_attr_dtypes: Mapping[str, str] | None = None,
    ):
        super().__init__()
        self.vertex_attr_dtypes = dict(vertex_attr_dtypes or {})
        self.edge_attr_dtypes = dict(edge_attr_dtypes or {})
        self._vertex_schema = PropertySchema(self.vertex_attr_dtypes, "Vertex")
        self._edge_schema = PropertySchema(self.edge_attr_dtypes, "Edge")

        # number of stored out-edges, mirrors of undirected edges included
        self._num_out_edges = 0
        self._vertices: list[Vertex] = [
            Vertex(self._vertex_schema.make()) for _ in range(num_vertices)
        ]

        self.vertex_attrs = VertexAttrs(self)
        self.edge_attrs = EdgeAttrs(self)

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_vertices={len(self)}, "
            f"num_edges={self.num_edges()})"
        )

    @property
    def is_weighted(self) -> bool:
        """Whether edges carry a ``weight`` attribute."""
        return "weight" in self._edge_schema

    @property
    def has_capacities(self) -> bool:
        """Whether edges carry a ``capacity`` attribute."""
        return "capacity" in self._edge_schema

    def num_edges(self) -> int:
        """Get the total number of edges in the graph."""
        raise NotImplementedError()

    def max_edges(self) -> int:
        """The number of edges of a complete graph on the same vertices."""
        raise NotImplementedError()

    def empty(self) -> bool:
        return len(self._vertices) == 0

    def edgeless(self) -> bool:
        return self._num_out_edges == 0

    def vertex(self, index: int) -> Vertex:
        """Get the vertex record at ``index``."""
        self._check_vertex(index)
        return self._vertices[index]

    ###########
    # vertices #
    ###########

    def add_vertex(self, *data: Any, **kwargs: Any) -> int:
        """Add a single vertex to the graph.

        The vertex attributes provided via *data and **kwargs must match the
        names specified in `vertex_attr_dtypes` when the graph was created.
        Attributes not given are zero-initialized.

        Parameters
        ----------
        *data : Any
            Positional arguments for vertex attributes, in the order of
            `vertex_attr_dtypes`.
        **kwargs : Any
            Keyword arguments for vertex attributes.

        Returns
        -------
        int
            The index of the new vertex, always the highest index in the graph.
        """
        self._vertices.append(Vertex(self._vertex_schema.make(*data, **kwargs)))
        return len(self._vertices) - 1

    def add_vertices(self, num_vertices: int, *data: Any, **kwargs: Any) -> int:
        """Add multiple vertices to the graph.

        Parameters
        ----------
        num_vertices : int
            Number of vertices to add.
        *data : Any
            Positional arguments for vertex attributes. Each argument should
            be an array of length `num_vertices`.
        **kwargs : Any
            Keyword arguments for vertex attributes. Each argument should be
            an array of length `num_vertices`.

        Returns
        -------
        int
            Number of vertices added. They occupy the last `num_vertices`
            indices of the graph.
        """
        properties = self._vertex_schema.make_many(num_vertices, *data, **kwargs)
        self._vertices.extend(Vertex(props) for props in properties)
        return num_vertices

    def remove_vertex(self, index: int) -> bool:
        """Remove a single vertex from the graph.

        All edges incident to the vertex are removed as well, and every vertex
        with a higher index moves down by one.

        Parameters
        ----------
        index : int
            The vertex to remove.

        Returns
        -------
        bool
            True, the vertex was removed.
        """
        self._check_vertex(index)

        removed = self._vertices.pop(index)
        self._num_out_edges -= removed.out_degree()
        for vertex in self._vertices:
            kept = []
            for edge in vertex.out_edges:
                if edge.to == index:
                    self._num_out_edges -= 1
                    continue
                if edge.to > index:
                    edge.to -= 1
                kept.append(edge)
            vertex.out_edges[:] = kept

        logger.debug("removed vertex %d, %d vertices left", index, len(self))
        return True

    def remove_vertices(self, indices: Iterable[int]) -> int:
        """Remove multiple vertices from the graph.

        Indices refer to the graph before any of them is removed.

        Parameters
        ----------
        indices : Iterable[int]
            The vertices to remove.

        Returns
        -------
        int
            Number of vertices removed.
        """
        unique = sorted({int(index) for index in indices}, reverse=True)
        for index in unique:
            self.remove_vertex(index)
        return len(unique)

    ########
    # edges #
    ########

    def add_edge(self, u: int, v: int, *data: Any, **kwargs: Any) -> bool:
        """Add an edge to the graph.

        The edge must not exist yet and must not be a self-loop. For
        undirected graphs both stored directions are added.

        Parameters
        ----------
        u, v : int
            Source and target vertex.
        *data : Any
            Positional arguments for edge attributes, in the order of
            `edge_attr_dtypes`.
        **kwargs : Any
            Keyword arguments for edge attributes.

        Returns
        -------
        bool
            True, the edge was added.
        """
        return self._add_edge(int(u), int(v), self._edge_schema.make(*data, **kwargs))

    def add_edges(self, edges: Any, *data: Any, **kwargs: Any) -> int:
        """Add multiple edges to the graph.

        Edges are inserted one at a time, in order. The batch is not atomic:
        if a precondition fails partway, the edges before the failing row stay
        in the graph.

        Parameters
        ----------
        edges : array-like
            Array of shape (n_edges, 2) where each row contains [u, v].
        *data : Any
            Positional arguments for edge attributes. Each argument should be
            an array of length n_edges.
        **kwargs : Any
            Keyword arguments for edge attributes. Each argument should be an
            array of length n_edges.

        Returns
        -------
        int
            Number of edges added.
        """
        edges = np.asarray(edges, dtype=np.int64).reshape(-1, 2)
        properties = self._edge_schema.make_many(len(edges), *data, **kwargs)
        for (u, v), props in zip(edges, properties):
            self._add_edge(int(u), int(v), props)
        return len(edges)

    def remove_edge(self, u: int, v: int) -> bool:
        """Remove the edge (u, v).

        Returns
        -------
        bool
            Whether the edge existed.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        return self._remove_edge(u, v)

    def get_edge(self, u: int, v: int) -> OutEdge | None:
        """Get the stored record of edge (u, v), or None if there is none."""
        self._check_vertex(u)
        self._check_vertex(v)
        u, v = self._normalize(u, v)
        vertex = self._vertices[u]
        position = vertex.find_edge(v)
        return None if position is None else vertex.out_edges[position]

    def has_edge(self, u: int, v: int) -> bool:
        return self.get_edge(u, v) is not None

    def in_degree(self, index: int) -> int:
        """Number of edges entering ``index`` (found by a linear scan)."""
        self._check_vertex(index)
        return sum(vertex.has_edge_to(index) for vertex in self._vertices)

    def out_degree(self, index: int) -> int:
        self._check_vertex(index)
        return self._vertices[index].out_degree()

    ##############
    # transforms #
    ##############

    def copy(self) -> GraphBase:
        """Return an independent copy of the graph, attributes included."""
        result = self._spawn()
        result._vertices = [vertex.copy() for vertex in self._vertices]
        result._num_out_edges = self._num_out_edges
        return result

    def strip_edges(self, in_place: bool = False) -> GraphBase:
        """Get a graph with the same vertices but no edges.

        Parameters
        ----------
        in_place : bool
            If set, remove all edges from this graph and return it. Otherwise
            return a copy and leave this graph untouched.
        """
        if in_place:
            for vertex in self._vertices:
                vertex.out_edges.clear()
            self._num_out_edges = 0
            return self

        result = self._spawn()
        result._vertices = [vertex.copy(with_edges=False) for vertex in self._vertices]
        return result

    def transform_outs(self, func: Callable[[int], int]) -> None:
        """Replace the target ``to`` of every edge with ``func(to)``."""
        for vertex in self._vertices:
            for edge in vertex.out_edges:
                edge.to = int(func(edge.to))

    def sort_edges(self) -> None:
        """Sort every out-edge list by ascending target index."""
        for vertex in self._vertices:
            vertex.sort_edges()

    def contract(self, u: int, v: int) -> bool:
        """Merge two vertices into one.

        The higher of the two indices is merged into the lower one: the merged
        vertex keeps the payload of the lower index and the union of both
        neighborhoods, without duplicate edges and without the edge between
        them. All indices above the removed one shift down by one.

        Parameters
        ----------
        u, v : int
            The vertices to merge, in any order.

        Returns
        -------
        bool
            Whether there was an edge between ``u`` and ``v`` (in either
            direction) before the contraction.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        assert u != v, f"cannot contract vertex {u} with itself"
        if u > v:
            u, v = v, u

        def rename(index: int) -> int:
            return index - (index > v)

        vertices = self._vertices
        had_edge = False

        # stage all changes as (edge, new target) pairs before touching anything
        neighborhood = np.zeros(len(vertices), dtype=bool)
        merged: list[tuple[OutEdge, int]] = []
        for edge in vertices[u].out_edges:
            if edge.to == v:
                had_edge = True
                continue
            neighborhood[edge.to] = True
            merged.append((edge, rename(edge.to)))
        for edge in vertices[v].out_edges:
            if edge.to == u:
                had_edge = True
            elif not neighborhood[edge.to]:
                merged.append((edge, rename(edge.to)))

        relabeled: dict[int, list[tuple[OutEdge, int]]] = {}
        for i, vertex in enumerate(vertices):
            if i == u or i == v:
                continue
            into_merged = [edge for edge in vertex.out_edges if edge.to in (u, v)]
            survivor = self._merged_edge(into_merged, u) if into_merged else None
            kept = []
            for edge in vertex.out_edges:
                if edge.to == u or edge.to == v:
                    if edge is survivor:
                        kept.append((edge, u))
                else:
                    kept.append((edge, rename(edge.to)))
            relabeled[i] = kept

        # commit
        for i, kept in relabeled.items():
            for edge, to in kept:
                edge.to = to
            vertices[i].out_edges[:] = [edge for edge, _ in kept]
        for edge, to in merged:
            edge.to = to
        vertices[u].out_edges[:] = [edge for edge, _ in merged]
        del vertices[v]
        self._num_out_edges = sum(vertex.out_degree() for vertex in vertices)

        logger.debug("contracted vertex %d into %d (had edge: %s)", v, u, had_edge)
        return had_edge

    def cleave(self, v: int) -> int:
        """Split vertex ``v`` in two.

        A new vertex with a copy of ``v``'s attributes is appended. For every
        other vertex, the first of its edges into ``v`` is redirected to the
        new vertex.

        Parameters
        ----------
        v : int
            The vertex to cleave.

        Returns
        -------
        int
            The index of the new vertex.
        """
        self._check_vertex(v)

        new_v = len(self._vertices)
        duplicate = Vertex(copy_properties(self._vertices[v].properties))
        retargets: list[tuple[int, int]] = []
        for i, vertex in enumerate(self._vertices):
            if i == v:
                continue
            position = vertex.find_edge(v)
            if position is not None:
                retargets.append((i, position))

        self._vertices.append(duplicate)
        for i, position in retargets:
            self._vertices[i].out_edges[position].to = new_v
        self._cleave_mirrors(v, new_v, [i for i, _ in retargets])

        logger.debug("cleaved vertex %d into %d (%d edges moved)", v, new_v, len(retargets))
        return new_v

    def swap(self, other: GraphBase) -> None:
        """Exchange the contents of this graph with ``other``."""
        assert type(other) is type(self), "can only swap graphs of the same type"
        self._vertices, other._vertices = other._vertices, self._vertices
        self._num_out_edges, other._num_out_edges = (
            other._num_out_edges,
            self._num_out_edges,
        )
        self.vertex_attr_dtypes, other.vertex_attr_dtypes = (
            other.vertex_attr_dtypes,
            self.vertex_attr_dtypes,
        )
        self.edge_attr_dtypes, other.edge_attr_dtypes = (
            other.edge_attr_dtypes,
            self.edge_attr_dtypes,
        )
        self._vertex_schema, other._vertex_schema = (
            other._vertex_schema,
            self._vertex_schema,
        )
        self._edge_schema, other._edge_schema = other._edge_schema, self._edge_schema

    ###########
    # internal #
    ###########

    def _spawn(self) -> GraphBase:
        """An empty graph of the same type and attribute layout."""
        return type(self)(
            vertex_attr_dtypes=self.vertex_attr_dtypes,
            edge_attr_dtypes=self.edge_attr_dtypes,
        )

    def _append_vertex(self, vertex: Vertex) -> int:
        """Append a vertex record that may already carry out-edges."""
        self._vertices.append(vertex)
        self._num_out_edges += vertex.out_degree()
        return len(self._vertices) - 1

    def _check_vertex(self, index: int) -> None:
        assert 0 <= index < len(self._vertices), (
            f"vertex {index} out of range for graph with {len(self._vertices)} vertices"
        )

    def _add_edge(self, u: int, v: int, properties: Properties | None) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        assert u != v, f"self-loop ({u}, {v}) not allowed"
        assert not self._vertices[u].has_edge_to(v), f"edge ({u}, {v}) already exists"
        self._insert_edge(u, v, properties)
        return True

    def _normalize(self, u: int, v: int) -> tuple[int, int]:
        return u, v

    def _insert_edge(self, u: int, v: int, properties: Properties | None) -> None:
        raise NotImplementedError()

    def _remove_edge(self, u: int, v: int) -> bool:
        raise NotImplementedError()

    def _edge_records(self, u: int, v: int) -> list[OutEdge]:
        """All stored records of edge (u, v), mirrors included."""
        raise NotImplementedError()

    def _merged_edge(self, edges: list[OutEdge], u: int) -> OutEdge:
        """Pick which of a vertex's edges into a contracted pair survives.

        ``edges`` holds one or two records, in out-edge order. The first one
        is kept.
        """
        return edges[0]

    def _cleave_mirrors(self, v: int, new_v: int, sources: list[int]) -> None:
        """Called by ``cleave`` after the edges ``i -> v`` moved to ``new_v``."""

    def _iter_edges(self, vertex: int | None = None) -> Iterator[tuple[int, OutEdge]]:
        """Yield every edge once as (source, record)."""
        raise NotImplementedError()

    # attribute access used by the views

    def _vertex_properties(self, index: int) -> Properties:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"vertex {index} not in graph")
        return self._vertices[index].properties

    def _lookup_edge(self, u: int, v: int) -> OutEdge:
        num_vertices = len(self._vertices)
        edge = None
        if 0 <= u < num_vertices and 0 <= v < num_vertices:
            edge = self.get_edge(u, v)
        if edge is None:
            raise IndexError(f"edge ({u}, {v}) not in graph")
        return edge

    def _get_vertices_data(self, name: str, vertices: np.ndarray | int | None) -> Any:
        dtype = self._vertex_schema.dtypes[name]
        if vertices is None:
            indices: Iterable[int] = range(len(self._vertices))
            num_vertices = len(self._vertices)
        elif isinstance(vertices, np.ndarray):
            indices = vertices
            num_vertices = len(vertices)
        else:
            return dtype.copy_value(self._vertex_properties(vertices).get(name))

        data = dtype.empty(num_vertices)
        for i, index in enumerate(indices):
            data[i] = self._vertex_properties(int(index)).get(name)
        return data

    def _set_vertices_data(
        self, name: str, vertices: np.ndarray | int | None, values: Any
    ) -> None:
        if vertices is None:
            vertices = np.arange(len(self._vertices))
        if not isinstance(vertices, np.ndarray):
            setattr(self._vertex_properties(vertices), name, values)
            return
        if len(values) != len(vertices):
            raise ValueError(
                f"Got {len(values)} values for {len(vertices)} vertices"
            )
        properties = [self._vertex_properties(int(index)) for index in vertices]
        for props, value in zip(properties, values):
            setattr(props, name, value)

    def _all_edge_endpoints(self) -> np.ndarray:
        endpoints = [(u, edge.to) for u, edge in self._iter_edges()]
        return np.array(endpoints, dtype=np.int64).reshape(-1, 2).T

    def _get_edges_data(self, name: str, edges: np.ndarray | tuple | None) -> Any:
        dtype = self._edge_schema.dtypes[name]
        if edges is None:
            edges = self._all_edge_endpoints()
        if isinstance(edges, tuple):
            # a copy, so that in-place changes can't desync undirected mirrors
            edge = self._lookup_edge(int(edges[0]), int(edges[1]))
            return dtype.copy_value(edge.properties.get(name))

        us, vs = edges
        data = dtype.empty(len(us))
        for i, (u, v) in enumerate(zip(us, vs)):
            data[i] = self._lookup_edge(int(u), int(v)).properties.get(name)
        return data

    def _set_edges_data(
        self, name: str, edges: np.ndarray | tuple | None, values: Any
    ) -> None:
        if edges is None:
            edges = self._all_edge_endpoints()
        if isinstance(edges, tuple):
            pairs = [(int(edges[0]), int(edges[1]))]
            values = [values]
        else:
            pairs = [(int(u), int(v)) for u, v in zip(*edges)]
            if len(values) != len(pairs):
                raise ValueError(f"Got {len(values)} values for {len(pairs)} edges")

        for u, v in pairs:
            self._lookup_edge(u, v)
        for (u, v), value in zip(pairs, values):
            for record in self._edge_records(u, v):
                setattr(record.properties, name, value)
