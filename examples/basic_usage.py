# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "dense-graph",
# ]
# [tool.uv.sources]
# dense-graph = { path = ".." }
# ///

import numpy as np

import dense_graph as dg


def main():
    print("=== Dense Graph Basic Usage Example ===\n")

    # 1. Graph creation
    print("1. Creating an undirected weighted graph...")
    graph = dg.create_graph(
        vertex_attr_dtypes={"position": "double[2]"},
        edge_attr_dtypes={"weight": "float64"},
    )
    print(f"   Directed: {graph.directed}")
    print(f"   Weighted: {graph.is_weighted}")
    print()

    # 2. Adding vertices
    print("2. Adding vertices with positions...")
    positions = np.array(
        [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [5.0, 5.0], [6.0, 5.0]],
        dtype="double",
    )
    graph.add_vertices(len(positions), position=positions)
    print(f"   Added {len(graph)} vertices")
    print()

    # 3. Adding edges
    print("3. Adding edges weighted by their length...")
    edges = np.array([[0, 1], [1, 2], [2, 3], [3, 0], [0, 2], [4, 5]])
    weights = np.linalg.norm(positions[edges[:, 0]] - positions[edges[:, 1]], axis=1)
    graph.add_edges(edges, weight=weights)
    print(f"   Added {graph.num_edges()} edges")
    print(f"   Weights: {graph.edge_attrs[edges].weight}")
    print()

    # 4. Traversal
    print("4. Breadth-first search from vertex 0...")
    visited = []
    dg.bfs(graph, 0, visited.append)
    print(f"   Visited: {visited}")
    print()

    # 5. Shortest paths
    print("5. Shortest paths from vertex 0...")
    shortest_paths = dg.dijkstra_shortest_path(graph, 0)
    for vertex, (distance, predecessor) in enumerate(shortest_paths):
        path = dg.reconstruct_path(shortest_paths, vertex)
        print(f"     Vertex {vertex}: distance = {distance:.3f}, path = {path}")
    print()

    # 6. Minimum spanning forest
    print("6. Computing a minimum spanning forest...")
    mst = dg.kruskal(graph)
    print(f"   Edges: {sorted(mst.edges())}")
    print(f"   Total weight: {mst.edge_attrs.weight.sum():.3f}")
    print()

    # 7. Connected components
    print("7. Splitting into connected components...")
    print(f"   Number of components: {dg.ccs(graph)}")
    for i, component in enumerate(dg.split_ccs(graph)):
        print(f"     Component {i}: {len(component)} vertices")
        print(f"       Positions: {component.vertex_attrs.position.tolist()}")
    print()

    # 8. Contracting and removing vertices
    print("8. Contracting vertices 0 and 2, then removing vertex 4...")
    graph.contract(0, 2)
    graph.remove_vertex(4)
    print(f"   Vertices: {len(graph)}, edges: {sorted(graph.edges())}")
    print()

    # 9. Export
    print("9. Dot export...")
    print(dg.to_dot(graph))

    print("=== Example completed successfully! ===")


if __name__ == "__main__":
    main()
