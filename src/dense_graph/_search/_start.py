from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dense_graph._graph import GraphBase


def start_vertices(graph: GraphBase, start: int | Iterable[int]) -> list[int]:
    """Normalize a single start vertex or an iterable of them to a list."""
    if isinstance(start, (int, np.integer)):
        starts = [int(start)]
    else:
        starts = [int(index) for index in start]

    assert starts, "at least one start vertex is required"
    for index in starts:
        assert 0 <= index < len(graph), (
            f"start vertex {index} out of range for graph with {len(graph)} vertices"
        )
    return starts
