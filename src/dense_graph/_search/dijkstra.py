from __future__ import annotations

import heapq
import itertools
import math
from typing import TYPE_CHECKING, Any

from ._start import start_vertices
from .visitation_table import VisitationTable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from dense_graph._graph import GraphBase, OutEdge

    WeightFunc = Callable[[int, OutEdge], Any]

# predecessor of vertices not reached by dijkstra_shortest_path
NO_PREDECESSOR = -1


def _edge_weight(index: int, edge: OutEdge) -> Any:
    return edge.weight


def _weight_function(graph: GraphBase, weight: WeightFunc | None) -> WeightFunc:
    if weight is not None:
        return weight
    if not graph.is_weighted:
        raise TypeError(
            "Graph has no 'weight' edge attribute, pass a weight function instead"
        )
    return _edge_weight


def dijkstra(
    graph: GraphBase,
    start: int | Iterable[int],
    visitor: Callable[[int, Any, int], object],
    has_been_visited: Callable[[int], bool] | None = None,
    weight: WeightFunc | None = None,
) -> bool:
    """Generalized Dijkstra search.

    Vertices are visited in order of increasing distance from the closest
    start vertex. The priority queue is never updated in place: entries are
    pushed freely and entries of already visited vertices are discarded when
    popped.

    Parameters
    ----------
    graph : GraphBase
        The graph to search. Edge weights must not be negative.
    start : int or Iterable[int]
        One start vertex, or several. Every start has distance zero and is its
        own predecessor.
    visitor : Callable[[int, Any, int], object]
        Called as ``visitor(vertex, distance, predecessor)`` once per visited
        vertex. A truthy return value stops the search.
    has_been_visited : Callable[[int], bool], optional
        Predicate telling whether a vertex was visited already. It is the
        caller's job to make the predicate true for every vertex passed to the
        visitor. If not given, a :class:`VisitationTable` hooked onto the
        visitor is used.
    weight : Callable[[int, OutEdge], Any], optional
        Called as ``weight(vertex, edge)`` to get the length of an out-edge of
        ``vertex``. Defaults to the ``weight`` attribute of the edge.

    Returns
    -------
    bool
        True if the visitor stopped the search, False otherwise.

    Raises
    ------
    TypeError
        If no weight function is given and the edges carry no ``weight``.
    """
    weight = _weight_function(graph, weight)
    if has_been_visited is None:
        visitation_table = VisitationTable(graph)
        visitor = visitation_table.hook_visitor(visitor)
        has_been_visited = visitation_table

    # the counter breaks distance ties by push order
    counter = itertools.count()
    queue: list[tuple[Any, int, int, int]] = []
    for index in start_vertices(graph, start):
        heapq.heappush(queue, (0, next(counter), index, index))

    while queue:
        distance, _, index, predecessor = heapq.heappop(queue)
        if has_been_visited(index):
            continue
        if visitor(index, distance, predecessor):
            return True
        for edge in graph.vertex(index).out_edges:
            if has_been_visited(edge.to):
                continue
            new_distance = distance + weight(index, edge)
            assert new_distance >= distance, (
                f"negative weight on edge ({index}, {edge.to})"
            )
            heapq.heappush(queue, (new_distance, next(counter), edge.to, index))

    return False


def dijkstra_shortest_path(
    graph: GraphBase,
    start: int | Iterable[int],
    weight: WeightFunc | None = None,
) -> list[tuple[Any, int]]:
    """Compute shortest paths from the start vertices to every vertex.

    Parameters
    ----------
    graph : GraphBase
        The graph to search.
    start : int or Iterable[int]
        One start vertex, or several.
    weight : Callable[[int, OutEdge], Any], optional
        Edge length function, see :func:`dijkstra`.

    Returns
    -------
    list[tuple[Any, int]]
        For every vertex, the pair ``(distance, predecessor)``. Start vertices
        are their own predecessor. Unreached vertices hold
        ``(math.inf, NO_PREDECESSOR)``.
    """
    result: list[tuple[Any, int]] = [(math.inf, NO_PREDECESSOR)] * len(graph)

    def visitor(index: int, distance: Any, predecessor: int) -> bool:
        result[index] = (distance, predecessor)
        return False

    def has_been_visited(index: int) -> bool:
        return result[index][1] != NO_PREDECESSOR

    dijkstra(graph, start, visitor, has_been_visited, weight)
    return result


def reconstruct_path(shortest_paths: list[tuple[Any, int]], target: int) -> list[int]:
    """Follow predecessors back from ``target`` to its start vertex.

    Parameters
    ----------
    shortest_paths : list[tuple[Any, int]]
        The result of :func:`dijkstra_shortest_path`.
    target : int
        The vertex to find the path to.

    Returns
    -------
    list[int]
        The vertices from a start vertex to ``target``, both included. Empty
        if ``target`` was not reached.
    """
    if shortest_paths[target][1] == NO_PREDECESSOR:
        return []

    path = [target]
    while True:
        predecessor = shortest_paths[path[-1]][1]
        if predecessor == path[-1]:
            break
        path.append(predecessor)
    path.reverse()
    return path
