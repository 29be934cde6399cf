from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .graph_base import GraphBase


class VertexAttrsView:
    graph: GraphBase
    vertices: np.ndarray | int | None

    def __init__(
        self, graph: GraphBase, vertices: np.ndarray | Iterable | int | None = None
    ) -> None:
        super().__setattr__("graph", graph)

        if vertices is not None and not isinstance(vertices, np.ndarray):
            # vertices is not an ndarray, can it be converted into one?
            try:
                # does it have a length?
                _ = len(vertices)  # type: ignore
                # if so, convert to ndarray
                vertices = np.array(vertices, dtype=np.int64)
            except TypeError:
                # must be a single vertex
                vertices = int(vertices)  # type: ignore

        # at this point, vertices is either
        # 1. a numpy array
        # 2. a python int
        # 3. None
        super().__setattr__("vertices", vertices)

    def __getattr__(self, name: str) -> Any:
        if name in self.graph.vertex_attr_dtypes:
            return self.graph._get_vertices_data(name, self.vertices)
        else:
            raise AttributeError(name)

    def __setattr__(self, name, values):
        if name in self.graph.vertex_attr_dtypes:
            return self.graph._set_vertices_data(name, self.vertices, values)
        else:
            return super().__setattr__(name, values)

    def __iter__(self) -> Iterator[tuple[int, VertexAttrsView]]:
        if self.vertices is None:
            indices: Iterable = range(len(self.graph))
        elif isinstance(self.vertices, np.ndarray):
            indices = self.vertices
        else:
            indices = [self.vertices]
        for index in indices:
            self.graph._vertex_properties(int(index))
            yield int(index), VertexAttrsView(self.graph, int(index))


class EdgeAttrsView:
    graph: GraphBase
    edges: np.ndarray | tuple[int, int] | None

    def __init__(self, graph: GraphBase, edges: np.ndarray | Iterable | None) -> None:
        super().__setattr__("graph", graph)

        # edges types we support:
        #
        # 1. edges = None                   all edges           leave as is
        # 2. edges = iteratible of 2-tuples selected edges      to (n,2) ndarray
        # 3. edges = iteratible of 2-lists  selected edges      to (n,2) ndarray
        # 4. edges = (n,2) ndarray          selected edges      leave as is
        # 5. edges = 2-tuple                a single edge       leave as is
        # 6. edges = (2,) ndarray           a single edge       to 2-tuple

        if edges is not None:
            if isinstance(edges, np.ndarray):
                if len(edges) == 2 and len(edges.shape) == 1:
                    # case 6
                    edges = (int(edges[0]), int(edges[1]))
                else:
                    # case 4 with multiple edges
                    edges = edges.astype(np.int64)
            elif isinstance(edges, tuple):
                # case 5
                assert len(edges) == 2, "Single edges should be given as a 2-tuple"
            else:
                # edges should be an iteratable
                try:
                    # does it have a length?
                    len(edges)  # type: ignore
                    # case 2 and 3
                    edges = np.array(edges, dtype=np.int64)
                except Exception as e:  # pragma: no cover
                    raise RuntimeError(
                        f"Can not handle edges type {type(edges)}"
                    ) from e

        if isinstance(edges, np.ndarray):
            if len(edges) == 0:
                edges = edges.reshape((0, 2))
            assert edges.shape[1] == 2, "Edge arrays should have shape (n, 2)"  # type: ignore
            edges = np.ascontiguousarray(edges.T)  # type: ignore

        # at this point, edges is either
        # 1. a 2xn numpy array
        # 2. a 2-tuple of scalars (python or numpy)
        # 3. None
        super().__setattr__("edges", edges)

    def __getattr__(self, name: str) -> Any:
        if name in self.graph.edge_attr_dtypes:
            return self.graph._get_edges_data(name, self.edges)
        else:
            raise AttributeError(name)

    def __setattr__(self, name, values):
        if name in self.graph.edge_attr_dtypes:
            return self.graph._set_edges_data(name, self.edges, values)
        else:
            return super().__setattr__(name, values)

    def __iter__(self) -> Iterator[tuple[tuple[int, int], EdgeAttrsView]]:
        # yield single-edge views, so that writes reach both mirrors of an
        # undirected edge
        if self.edges is None:
            pairs: Iterable = [(u, edge.to) for u, edge in self.graph._iter_edges()]
        elif isinstance(self.edges, tuple):
            pairs = [self.edges]
        else:
            pairs = zip(*self.edges)
        for u, v in pairs:
            u, v = int(u), int(v)
            self.graph._lookup_edge(u, v)
            yield (u, v), EdgeAttrsView(self.graph, (u, v))


class VertexAttrs(VertexAttrsView):
    def __init__(self, graph: GraphBase) -> None:
        super().__init__(graph, vertices=None)

    def __getitem__(self, vertices) -> VertexAttrsView:
        return VertexAttrsView(self.graph, vertices)


class EdgeAttrs(EdgeAttrsView):
    def __init__(self, graph: GraphBase) -> None:
        super().__init__(graph, edges=None)

    def __getitem__(self, edges) -> EdgeAttrsView:
        return EdgeAttrsView(self.graph, edges)
