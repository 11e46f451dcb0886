"""
Utility functions for graph algorithms.

Provides path reconstruction and a dense adjacency matrix view, and
re-exports the strength-to-distance weight inversion from core.
"""

from typing import Dict, List, Optional

import numpy as np

from .core import invert_weights

__all__ = ["invert_weights", "reconstruct_path", "adjacency_matrix"]


def reconstruct_path(parent: Dict[int, Optional[int]], target: int) -> Optional[List[int]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from a shortest-path computation where
    parent[v] is the previous vertex on the shortest path, or None if v is
    the source or unreachable.

    Args:
        parent: Dictionary mapping vertex -> parent vertex (or None).
        target: Target vertex to reconstruct path to.

    Returns:
        List of vertices from source to target (inclusive), or None if the
        target is not in the parent map or the map contains a cycle.

    Example:
        >>> reconstruct_path({0: None, 1: 0, 2: 1}, 2)
        [0, 1, 2]
    """
    if target not in parent:
        return None

    path = []
    visited = set()
    current: Optional[int] = target
    while current is not None:
        if current in visited:
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def adjacency_matrix(graph) -> np.ndarray:
    """
    Dense weight matrix of a graph in vertex index order.

    ``W[i, j]`` is the total weight of the edges between i and j (parallel
    edges are summed), 0 where there is no edge. Symmetric for undirected
    graphs.

    Args:
        graph: WeightedGraph instance.

    Returns:
        (n, n) integer numpy array.

    Example:
        >>> G = WeightedGraph(2, [(0, 1, 3)])
        >>> adjacency_matrix(G)
        array([[0, 3],
               [3, 0]])
    """
    n = graph.vertex_count
    W = np.zeros((n, n), dtype=np.int64)

    for u, v, weight in graph.edges():
        W[u, v] += weight
        if u != v:
            W[v, u] += weight

    return W
