"""
Graph engines for socialgraph.

This package provides:
- The immutable Graph Store (WeightedGraph, Edge)
- Traversal algorithms (DFS, BFS)
- Single-source shortest paths (Dijkstra)
- Minimum spanning trees (Kruskal with union-find)

Vertices are integer indices ``0..vertex_count-1``. All algorithms are
deterministic and follow edge insertion order when breaking ties.
"""

from .core import Edge, WeightedGraph, check_vertex, check_weight
from .errors import GraphError, InvalidWeight, OutOfRangeVertex
from .mst import SpanningTree, kruskal_mst
from .shortest import DistanceTable, dijkstra
from .traversal import bfs, bfs_levels, dfs
from .unionfind import UnionFind
from .utils import adjacency_matrix, invert_weights, reconstruct_path

__all__ = [
    "Edge",
    "WeightedGraph",
    "check_vertex",
    "check_weight",
    "GraphError",
    "OutOfRangeVertex",
    "InvalidWeight",
    "dfs",
    "bfs",
    "bfs_levels",
    "DistanceTable",
    "dijkstra",
    "UnionFind",
    "SpanningTree",
    "kruskal_mst",
    "invert_weights",
    "reconstruct_path",
    "adjacency_matrix",
]

# Example usage:
# from socialgraph.graphs import WeightedGraph, dijkstra
#
# G = WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])
# table = dijkstra(G, 0)
# table.path_to(2)  # [0, 1, 2]
