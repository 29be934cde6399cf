from .elements import OutEdge, Vertex
from .graph import DiGraph, Graph
from .graph_base import GraphBase

__all__ = ["DiGraph", "Graph", "GraphBase", "OutEdge", "Vertex"]
