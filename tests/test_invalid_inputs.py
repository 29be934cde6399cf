import pytest

import dense_graph as dg


def test_non_identifier_names():
    with pytest.raises(
        ValueError, match="Vertex attribute names must be valid identifiers"
    ):
        dg.Graph(vertex_attr_dtypes={"3Dposition": "double[4]"})

    with pytest.raises(
        ValueError, match="Edge attribute names must be valid identifiers"
    ):
        dg.Graph(edge_attr_dtypes={"3Dposition": "double[4]"})


def test_invalid_dtype():
    with pytest.raises(ValueError, match="Invalid dtype string"):
        dg.DiGraph(edge_attr_dtypes={"weight": "complex"})


def test_invalid_attribute_arguments():
    graph = dg.Graph(edge_attr_dtypes={"weight": "double"})
    graph.add_vertices(3)

    with pytest.raises(TypeError, match="Unknown edge attribute"):
        graph.add_edge(0, 1, score=1.0)
    with pytest.raises(TypeError, match="positional edge attributes"):
        graph.add_edge(0, 1, 1.0, 2.0)
    with pytest.raises(TypeError, match="given by position and keyword"):
        graph.add_edge(0, 1, 1.0, weight=2.0)
    with pytest.raises(ValueError, match="Attribute arrays must have length"):
        graph.add_edges([[0, 1], [1, 2]], weight=[1.0])
    assert graph.edgeless()

    with pytest.raises(TypeError, match="Vertex carries no attributes"):
        graph.add_vertex(1)


@pytest.mark.parametrize("cls", [dg.Graph, dg.DiGraph])
def test_precondition_violations(cls):
    graph = cls(3)
    graph.add_edge(0, 1)

    with pytest.raises(AssertionError, match="self-loop"):
        graph.add_edge(2, 2)
    with pytest.raises(AssertionError, match="already exists"):
        graph.add_edge(0, 1)
    with pytest.raises(AssertionError, match="out of range"):
        graph.add_edge(0, 3)
    with pytest.raises(AssertionError, match="out of range"):
        graph.remove_vertex(5)
    with pytest.raises(AssertionError, match="itself"):
        graph.contract(1, 1)
    assert graph.num_edges() == 1


@pytest.mark.parametrize("cls", [dg.Graph, dg.DiGraph])
def test_add_edges_keeps_rows_before_failure(cls):
    graph = cls(3)
    with pytest.raises(AssertionError, match="self-loop"):
        graph.add_edges([[0, 1], [1, 1], [1, 2]])
    assert graph.num_edges() == 1
    assert graph.has_edge(0, 1)
    assert not graph.has_edge(1, 2)


def test_undirected_duplicate_in_reverse():
    graph = dg.Graph(2)
    graph.add_edge(0, 1)
    with pytest.raises(AssertionError, match="already exists"):
        graph.add_edge(1, 0)


def test_undirected_only_algorithms():
    graph = dg.DiGraph(3)
    with pytest.raises(AssertionError):
        dg.kruskal(graph)
    with pytest.raises(AssertionError):
        dg.ccs(graph)


def test_search_start_vertices():
    graph = dg.DiGraph(3)
    with pytest.raises(AssertionError, match="at least one start vertex"):
        dg.bfs(graph, [], lambda index: False)
    with pytest.raises(AssertionError, match="out of range"):
        dg.dfs(graph, 3, lambda index: False)


def test_dijkstra_without_weights():
    graph = dg.DiGraph(2)
    graph.add_edge(0, 1)
    with pytest.raises(TypeError, match="no 'weight' edge attribute"):
        dg.dijkstra_shortest_path(graph, 0)

    # a weight function makes any graph searchable
    result = dg.dijkstra_shortest_path(graph, 0, weight=lambda index, edge: 1)
    assert result == [(0, 0), (1, 0)]
