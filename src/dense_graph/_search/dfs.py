from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ._start import start_vertices

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from dense_graph._graph import GraphBase


def dfs(
    graph: GraphBase, start: int | Iterable[int], visitor: Callable[[int], object]
) -> bool:
    """Depth-first search.

    Vertices are marked when pushed, so no vertex is visited twice. The
    first-listed out-neighbor of a vertex is explored first.

    Parameters
    ----------
    graph : GraphBase
        The graph to search.
    start : int or Iterable[int]
        One start vertex, or several. The first start is explored first.
    visitor : Callable[[int], object]
        Called with every visited vertex index. A truthy return value stops the
        search.

    Returns
    -------
    bool
        True if the visitor stopped the search, False otherwise.
    """
    enqueued = np.zeros(len(graph), dtype=bool)
    stack: list[int] = []
    for index in reversed(start_vertices(graph, start)):
        if not enqueued[index]:
            enqueued[index] = True
            stack.append(index)

    while stack:
        index = stack.pop()
        if visitor(index):
            return True
        # reversed, so that the first out-edge ends up on top of the stack
        for edge in reversed(graph.vertex(index).out_edges):
            if not enqueued[edge.to]:
                enqueued[edge.to] = True
                stack.append(edge.to)

    return False
