import itertools

import numpy as np
import pytest

import dense_graph as dg


def _weighted_graph(num_vertices, edges):
    graph = dg.Graph(num_vertices, edge_attr_dtypes={"weight": "int"})
    for u, v, weight in edges:
        graph.add_edge(u, v, weight)
    return graph


def test_empty():
    mst = dg.kruskal(_weighted_graph(0, []))
    assert mst.empty()


def test_trivial():
    mst = dg.kruskal(_weighted_graph(1, []))
    assert len(mst) == 1
    assert mst.num_edges() == 0


def test_one_component():
    graph = _weighted_graph(
        6,
        [
            (0, 1, 1),
            (0, 2, 3),
            (0, 3, 3),
            (1, 2, 2),
            (2, 3, 4),
            (2, 5, 7),
            (3, 4, 1),
            (4, 5, 9),
        ],
    )
    assert dg.ccs(graph) == 1

    mst = dg.kruskal(graph)
    assert isinstance(mst, dg.Graph)
    assert len(mst) == len(graph)
    assert mst.num_edges() == len(graph) - 1
    assert mst.has_edge(0, 1)
    assert not mst.has_edge(0, 2)
    assert mst.has_edge(0, 3)
    assert mst.has_edge(1, 2)
    assert not mst.has_edge(2, 3)
    assert mst.has_edge(2, 5)
    assert mst.has_edge(3, 4)
    assert not mst.has_edge(4, 5)

    # attributes are copied along, the input is untouched
    assert mst.get_edge(2, 5).weight == 7
    assert mst.get_edge(5, 2).weight == 7
    assert graph.num_edges() == 8


def test_two_components():
    graph = _weighted_graph(
        6,
        [(0, 1, 1), (0, 2, 3), (0, 3, 3), (1, 2, 2), (2, 3, 4), (4, 5, 9)],
    )
    assert dg.ccs(graph) == 2

    mst = dg.kruskal(graph)
    assert len(mst) == len(graph)
    assert mst.num_edges() == len(graph) - 2
    assert mst.has_edge(0, 1)
    assert not mst.has_edge(0, 2)
    assert mst.has_edge(0, 3)
    assert mst.has_edge(1, 2)
    assert not mst.has_edge(2, 3)
    assert mst.has_edge(4, 5)


def test_unweighted():
    graph = dg.complete(5, vertex_attr_dtypes={"capacity": "int"})
    graph.vertex_attrs.capacity = np.arange(5)

    mst = dg.kruskal(graph)
    assert mst.num_edges() == 4
    assert dg.ccs(mst) == 1
    np.testing.assert_array_equal(mst.vertex_attrs.capacity, np.arange(5))
    # adjacency order: the star around vertex 0
    assert sorted(mst.edges()) == [(0, 1), (0, 2), (0, 3), (0, 4)]


def _brute_force_weight(graph):
    edges = [(u, v, int(attrs.weight)) for (u, v), attrs in graph.edges(data=True)]
    num_forest_edges = len(graph) - dg.ccs(graph)
    best = None
    for subset in itertools.combinations(edges, num_forest_edges):
        ds = dg.DisjointSet(len(graph))
        if all(ds.unite(u, v) for u, v, _ in subset):
            weight = sum(weight for _, _, weight in subset)
            best = weight if best is None else min(best, weight)
    return best


@pytest.mark.parametrize("seed", range(20))
def test_minimal_against_brute_force(seed):
    rng = np.random.default_rng(seed)
    num_vertices = int(rng.integers(1, 7))
    edges = [
        (u, v, int(rng.integers(0, 5)))
        for u in range(num_vertices)
        for v in range(u + 1, num_vertices)
        if rng.random() < 0.5
    ]
    graph = _weighted_graph(num_vertices, edges)

    mst = dg.kruskal(graph)
    assert mst.num_edges() == len(graph) - dg.ccs(graph)
    assert dg.ccs(mst) == dg.ccs(graph)

    # ties make the forest ambiguous, so compare total weight only
    total = sum(int(attrs.weight) for _, attrs in mst.edges(data=True))
    assert total == _brute_force_weight(graph)
