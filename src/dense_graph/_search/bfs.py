from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import numpy as np

from ._start import start_vertices

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from dense_graph._graph import GraphBase


def bfs(
    graph: GraphBase, start: int | Iterable[int], visitor: Callable[[int], object]
) -> bool:
    """Breadth-first search.

    Vertices are visited in FIFO order. When a vertex is dequeued, its
    not yet enqueued out-neighbors are enqueued in out-edge order.

    Parameters
    ----------
    graph : GraphBase
        The graph to search.
    start : int or Iterable[int]
        One start vertex, or several. Several starts are enqueued in the given
        order.
    visitor : Callable[[int], object]
        Called with every visited vertex index. A truthy return value stops the
        search.

    Returns
    -------
    bool
        True if the visitor stopped the search, False if every reachable
        vertex was visited.
    """
    enqueued = np.zeros(len(graph), dtype=bool)
    queue: deque[int] = deque()
    for index in start_vertices(graph, start):
        if not enqueued[index]:
            enqueued[index] = True
            queue.append(index)

    while queue:
        index = queue.popleft()
        if visitor(index):
            return True
        for edge in graph.vertex(index).out_edges:
            if not enqueued[edge.to]:
                enqueued[edge.to] = True
                queue.append(edge.to)

    return False
