from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING, Any

from dense_graph._properties import copy_properties

if TYPE_CHECKING:
    from dense_graph._properties import Properties


class OutEdge:
    """An adjacency record: the target vertex index and the edge payload.

    Payload attributes can be read directly from the record, e.g.
    ``edge.weight``. To modify edge attributes use ``graph.edge_attrs``, which
    keeps the two mirrors of an undirected edge in sync.
    """

    __slots__ = ("properties", "to")

    def __init__(self, to: int, properties: Properties | None = None) -> None:
        self.to = to
        self.properties = properties

    def __getattr__(self, name: str) -> Any:
        if name in OutEdge.__slots__ or name.startswith("_"):
            raise AttributeError(name)
        if self.properties is None:
            raise AttributeError(name)
        return getattr(self.properties, name)

    def __repr__(self) -> str:
        if self.properties is None:
            return f"OutEdge(to={self.to})"
        return f"OutEdge(to={self.to}, {self.properties!r})"

    def copy(self) -> OutEdge:
        return OutEdge(self.to, copy_properties(self.properties))


class Vertex:
    """A vertex: its payload and its ordered list of out-edges."""

    __slots__ = ("out_edges", "properties")

    def __init__(
        self,
        properties: Properties | None = None,
        out_edges: list[OutEdge] | None = None,
    ) -> None:
        self.properties = properties
        self.out_edges: list[OutEdge] = out_edges if out_edges is not None else []

    def __getattr__(self, name: str) -> Any:
        if name in Vertex.__slots__ or name.startswith("_"):
            raise AttributeError(name)
        if self.properties is None:
            raise AttributeError(name)
        return getattr(self.properties, name)

    def __repr__(self) -> str:
        targets = [edge.to for edge in self.out_edges]
        return f"Vertex(properties={self.properties!r}, out_edges={targets})"

    def out_degree(self) -> int:
        return len(self.out_edges)

    def has_edge_to(self, index: int) -> bool:
        return any(edge.to == index for edge in self.out_edges)

    def find_edge(self, index: int) -> int | None:
        """Position of the edge to ``index`` in ``out_edges``, if any."""
        for position, edge in enumerate(self.out_edges):
            if edge.to == index:
                return position
        return None

    def sort_edges(self) -> None:
        self.out_edges.sort(key=attrgetter("to"))

    def copy(self, with_edges: bool = True) -> Vertex:
        out_edges = [edge.copy() for edge in self.out_edges] if with_edges else []
        return Vertex(copy_properties(self.properties), out_edges)
