from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable

    from dense_graph._graph import GraphBase


class VisitationTable:
    """Tracks which vertices of a graph have been visited.

    An instance is callable and can be used directly as the
    ``has_been_visited`` predicate of :func:`dijkstra`. The table is marked by
    wrapping the visitor with :meth:`hook_visitor`.
    """

    def __init__(self, graph: GraphBase) -> None:
        self.visited = np.zeros(len(graph), dtype=bool)

    def __call__(self, index: int) -> bool:
        return bool(self.visited[index])

    def __len__(self) -> int:
        return len(self.visited)

    def visit(self, index: int) -> None:
        self.visited[index] = True

    def hook_visitor(self, visitor: Callable[..., Any]) -> Callable[..., Any]:
        """Wrap ``visitor`` so that every visited vertex is marked first."""

        def hooked(index: int, *args: Any) -> Any:
            self.visit(index)
            return visitor(index, *args)

        return hooked

    def reset(self) -> None:
        self.visited[:] = False
