from __future__ import annotations

import io
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from dense_graph._graph import GraphBase


def write_dot(graph: GraphBase, stream: TextIO) -> None:
    """Write ``graph`` to ``stream`` in the dot language.

    Vertices are written by index, without attributes. Undirected edges are
    written once per mirrored pair.
    """
    directed = graph.directed
    stream.write("digraph {\n" if directed else "graph {\n")

    for index in range(len(graph)):
        stream.write(f"\t{index};\n")

    for u, vertex in enumerate(graph):
        for edge in vertex.out_edges:
            if directed:
                stream.write(f"\t{u}->{edge.to};\n")
            elif u <= edge.to:
                stream.write(f"\t{u}--{edge.to};\n")

    stream.write("}\n")


def to_dot(graph: GraphBase) -> str:
    """Return the dot representation of ``graph``, see :func:`write_dot`."""
    stream = io.StringIO()
    write_dot(graph, stream)
    return stream.getvalue()
